from __future__ import annotations

import logging
import re
from collections import namedtuple
from pathlib import Path
from typing import Iterator

log = logging.getLogger(__name__)

PROC_MOUNTS = "/proc/self/mounts"
OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")

MountsEntry = namedtuple(
    "MountsEntry", ["what", "where", "fstype", "options", "freq", "passno"]
)


def unescape(field: str) -> str:
    return OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), field)


class MountsReader:
    def __init__(self, path: str | Path = PROC_MOUNTS) -> None:
        self.path = Path(path)

    def entries(self) -> Iterator[MountsEntry]:
        with open(self.path, "r", encoding="utf8") as fp:
            for line in fp:
                line = line.strip()
                if not line:
                    continue

                parts = line.split()
                if len(parts) == 6:
                    yield MountsEntry(*(unescape(p) for p in parts))
                else:
                    log.warning("Skipping malformed %s line: %s", self.path, line)

    def block_devices(self) -> Iterator[MountsEntry]:
        for entry in self.entries():
            if entry.what.startswith("/dev/"):
                yield entry
