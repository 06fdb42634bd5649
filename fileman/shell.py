from __future__ import annotations

import logging
from pathlib import Path
from typing import MutableMapping, TextIO

from fileman.cmd_base import Base
from fileman.command import Command
from fileman.config import Config

log = logging.getLogger(__name__)

GREETING = (
    "Welcome to the file manager! Type help to see the list of available\n"
    "commands, or enter any of them right away."
)
GOODBYE = "Thank you for using the file manager, goodbye!"
INCORRECT_COMMAND = "Incorrect command, try again."
SOMETHING_WENT_WRONG = "error: something went wrong"


class Shell:
    """
    The interactive loop: prompt with the current directory, read one line,
    split it on single spaces and run it as a command. Returns when the
    user types exit or input runs out.
    """

    def __init__(
        self,
        _dir: Path,
        env: MutableMapping[str, str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
        config: Config | None = None,
    ) -> None:
        self.dir: Path = _dir
        self.env = env
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr
        self.config: Config = config or Config.locate(env)
        self.max_length = self.config.get_int(["core", "maxCommandLength"])

    def run(self) -> int:
        self.println(GREETING)

        while True:
            self.stdout.write(f"{self.dir}$ ")
            self.stdout.flush()

            line = self.stdin.readline()
            if line == "":
                self.println("")
                break

            line = line.rstrip("\r\n")
            if len(line) > self.max_length:
                log.info("ignoring a %d character command", len(line))
                continue

            cmd = self.dispatch(line.split(" "))
            if cmd is not None and cmd.finished:
                break

        self.println(GOODBYE)
        return 0

    def dispatch(self, words: list[str]) -> Base | None:
        try:
            cmd = Command.execute(
                self.dir,
                self.env,
                ["fileman", *words],
                self.stdin,
                self.stdout,
                self.stderr,
                self.config,
            )
        except Command.Unknown:
            self.println(INCORRECT_COMMAND)
            return None
        except OSError:
            log.exception("command %r failed", words[0])
            self.stderr.write(SOMETHING_WENT_WRONG + "\n")
            return None

        if cmd.status == 129:
            self.println(INCORRECT_COMMAND)

        self.dir = cmd.dir
        return cmd

    def println(self, string: str) -> None:
        self.stdout.write(string + "\n")
