from fileman.cmd_base import Base
from fileman.workspace import DEFAULT_MASK


def mask_from(args: list[str]) -> str:
    if not args:
        return DEFAULT_MASK
    return " ".join(args)


class Mask(Base):
    USAGE = "mask [mask]"
    SUMMARY = "list files in the current directory whose names match the regex [mask]"
    MAX_ARGS = None

    recursive = False

    def run(self) -> None:
        found = self.workspace.find_by_mask(".", mask_from(self.args), self.recursive)

        for path in found:
            self.println(str(path) if self.recursive else path.name)

        self.exit(0)


class MaskDirs(Mask):
    USAGE = "maskd [mask]"
    SUMMARY = "like mask, but also searches subdirectories and prints full paths"

    recursive = True
