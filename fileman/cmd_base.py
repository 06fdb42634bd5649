from __future__ import annotations

import io
import logging
from functools import cached_property
from pathlib import Path
from typing import MutableMapping, TextIO

from fileman.cmd_color import Color
from fileman.config import Config
from fileman.pager import Pager
from fileman.text_encodings import Encodings
from fileman.workspace import Workspace

log = logging.getLogger(__name__)

OPERATION_ERRORS = (
    Workspace.MissingFile,
    Workspace.MissingDirectory,
    Workspace.NoPermission,
    Workspace.TooLarge,
    Workspace.WriteFailed,
    Workspace.InvalidPattern,
    Encodings.Unsupported,
    Config.ParseError,
)


class Base:
    USAGE: str = ""
    SUMMARY: str = ""
    MIN_ARGS: int = 0
    MAX_ARGS: int | None = 0

    def __init__(
        self,
        _dir: Path,
        env: MutableMapping[str, str],
        args: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
        config: Config | None = None,
    ):
        self.dir: Path = _dir
        self.env: MutableMapping[str, str] = env
        self.args: list[str] = args
        self.stdin: TextIO = stdin
        self.stdout: TextIO = stdout
        self.stderr: TextIO = stderr
        self.status: int | None = None
        self.isatty: bool = stdout.isatty()
        self.pager: Pager | None = None
        self.finished: bool = False
        self._config = config

    @cached_property
    def config(self) -> Config:
        return self._config or Config.locate(self.env)

    @cached_property
    def workspace(self) -> Workspace:
        return Workspace(self.dir, self.config.get_int(["core", "maxFileSize"]))

    @classmethod
    def accepts(cls, count: int) -> bool:
        if count < cls.MIN_ARGS:
            return False
        return cls.MAX_ARGS is None or count <= cls.MAX_ARGS

    def setup_pager(self) -> None:
        if self.pager is not None or not self.isatty:
            return

        command = self.config.get(["core", "pager"])
        self.pager = Pager(self.env, str(command) if command else None, self.stdout, self.stderr)
        self.stdout = self.pager.input

    def exit(self, status: int = 0) -> None:
        self.status = status
        raise ExitSignal(self.status)

    def fail(self, message: object, status: int = 1) -> None:
        self.eprintln(f"error: {message}")
        self.exit(status)

    def execute(self) -> int:
        try:
            if not self.accepts(len(self.args)):
                self.eprintln(f"usage: {self.USAGE}")
                self.exit(129)

            self.run()
            self.status = 0
        except ExitSignal as e:
            self.status = e.status
        except OPERATION_ERRORS as e:
            log.info("%s failed: %s", self.__class__.__name__, e)
            self.eprintln(f"error: {e}")
            self.status = 1

        self.stdout.flush()
        self.stderr.flush()

        if self.pager is not None:
            self.pager.wait()

        assert self.status is not None
        return self.status

    def fmt(self, style: str | list[str], string: str) -> str:
        return Color.format(style, string) if self.isatty else string

    def run(self) -> None:
        raise NotImplementedError(f"{self.__class__.__name__}.run() not implemented")

    def println(self, string: str) -> None:
        if isinstance(self.stdout, io.BufferedIOBase):
            self.stdout.write((string + "\n").encode("utf-8"))
        else:
            self.stdout.write(string + "\n")

    def eprintln(self, string: str) -> None:
        if isinstance(self.stderr, io.BufferedIOBase):
            self.stderr.write((string + "\n").encode("utf-8"))
        else:
            self.stderr.write(string + "\n")


class ExitSignal(Exception):
    def __init__(self, status: int = 0) -> None:
        super().__init__(f"Exit with status {status}")
        self.status: int | None = status
