from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import (
    Mapping,
    Optional,
    Pattern,
    Sequence,
    TextIO,
    TypeAlias,
)

ConfigValue: TypeAlias = bool | int | str

SECTION_LINE: Pattern[str] = re.compile(
    r'^\s*\[([a-z0-9-]+)( "(.+)")?\]\s*(?:$|#|;)', re.I
)
VARIABLE_LINE: Pattern[str] = re.compile(
    r"^\s*([a-z][a-z0-9-]*)\s*=\s*(.*?)\s*(?:$|#|;)", re.I | re.M
)
BLANK_LINE: Pattern[str] = re.compile(r"^\s*(?:$|#|;)")
INTEGER: Pattern[str] = re.compile(r"^-?[1-9][0-9]*$")

CONFIG_ENV = "FILEMAN_CONFIG"
CONFIG_NAME = ".filemanconfig"

DEFAULTS: dict[tuple[str, ...], ConfigValue] = {
    ("core", "maxfilesize"): 2**31 - 1,
    ("core", "maxcommandlength"): 1000,
    ("core", "mounts"): "/proc/self/mounts",
    ("log", "level"): "WARNING",
}


@dataclass
class Variable:
    name: str
    value: ConfigValue


class Config:
    class ParseError(Exception):
        pass

    def __init__(self, path: Optional[Path]) -> None:
        self.path: Optional[Path] = path
        self.variables: dict[tuple[str, ...], list[Variable]] = defaultdict(list)
        self._loaded = False

    @classmethod
    def locate(cls, env: Mapping[str, str]) -> Config:
        if CONFIG_ENV in env:
            return cls(Path(env[CONFIG_ENV]))

        home = env.get("HOME")
        return cls(Path(home) / CONFIG_NAME if home else None)

    def open(self) -> None:
        if not self._loaded:
            self.read_config_file()
            self._loaded = True

    def get(self, key: Sequence[str]) -> ConfigValue | None:
        self.open()
        normal = self.normalize(key)
        values = self.variables.get(normal)
        if values:
            return values[-1].value
        return DEFAULTS.get(normal)

    def get_int(self, key: Sequence[str]) -> int:
        value = self.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise Config.ParseError(f"bad numeric config value '{value}' for '{'.'.join(key)}'")
        return value

    @staticmethod
    def normalize(key: Sequence[str]) -> tuple[str, ...]:
        *section, var = key
        if not section:
            return (var.lower(),)
        return (section[0].lower(), *section[1:], var.lower())

    def read_config_file(self) -> None:
        self.variables = defaultdict(list)
        if self.path is None:
            return

        section: tuple[str, ...] = ()
        count = 0

        try:
            with self.path.open("r", encoding="utf-8") as fh:
                while True:
                    try:
                        raw = self.read_line(fh)
                    except EOFError:
                        break
                    count += 1
                    section = self.parse_line(section, raw, count)
        except FileNotFoundError:
            pass

    @staticmethod
    def read_line(fh: TextIO) -> str:
        buffer = ""
        while True:
            chunk = fh.readline()
            if chunk == "":
                if buffer:
                    return buffer
                raise EOFError
            buffer += chunk
            if not buffer.endswith("\\\n"):
                return buffer

    def parse_line(
        self, section: tuple[str, ...], line: str, number: int
    ) -> tuple[str, ...]:
        if m := SECTION_LINE.match(line):
            return (m.group(1).lower(),) + ((m.group(3),) if m.group(3) else ())
        if m := VARIABLE_LINE.match(line):
            if not section:
                raise Config.ParseError(
                    f"variable outside a section on line {number} in file {self.path}"
                )
            name = m.group(1)
            variable = Variable(name, self.parse_value(m.group(2)))
            self.variables[section + (name.lower(),)].append(variable)
            return section
        if BLANK_LINE.match(line):
            return section
        raise Config.ParseError(f"bad config line {number} in file {self.path}")

    @staticmethod
    def parse_value(value: str) -> ConfigValue:
        lower = value.lower()
        if lower in {"yes", "on", "true"}:
            return True
        if lower in {"no", "off", "false"}:
            return False
        if INTEGER.match(value):
            return int(value)
        return value.replace("\\\n", "")
