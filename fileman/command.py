from __future__ import annotations

from pathlib import Path
from typing import (
    MutableMapping,
    TextIO,
    Type,
)

from fileman.cmd_base import Base
from fileman.cmd_cat import Cat
from fileman.cmd_cd import Cd
from fileman.cmd_cp import Cp
from fileman.cmd_create import Create
from fileman.cmd_diff import Diff
from fileman.cmd_encodings import EncodingsCmd
from fileman.cmd_exit import Exit
from fileman.cmd_help import Help
from fileman.cmd_ls import Ls
from fileman.cmd_lsblk import Lsblk
from fileman.cmd_mask import Mask, MaskDirs
from fileman.cmd_maskc import MaskCopy
from fileman.cmd_mv import Mv
from fileman.cmd_read import Read
from fileman.cmd_reset import Reset
from fileman.cmd_rm import Rm
from fileman.config import Config


class Command:
    class Unknown(Exception):
        pass

    COMMANDS: dict[str, Type[Base]] = {
        "lsblk": Lsblk,
        "cd": Cd,
        "ls": Ls,
        "read": Read,
        "cp": Cp,
        "mv": Mv,
        "rm": Rm,
        "encodings": EncodingsCmd,
        "create": Create,
        "cat": Cat,
        "mask": Mask,
        "maskd": MaskDirs,
        "maskc": MaskCopy,
        "diff": Diff,
        "reset": Reset,
        "help": Help,
        "exit": Exit,
    }

    @staticmethod
    def execute(
        _dir: Path,
        env: MutableMapping[str, str],
        argv: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
        config: Config | None = None,
    ) -> Base:
        name = argv[1]
        args = argv[2:]

        if name not in Command.COMMANDS:
            raise Command.Unknown(f"{name} is not a fileman command")

        cmd_class = Command.COMMANDS[name]
        cmd: Base = cmd_class(_dir, env, args, stdin, stdout, stderr, config)
        cmd.execute()

        return cmd
