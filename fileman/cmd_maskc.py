from fileman.cmd_base import Base
from fileman.cmd_mask import mask_from

COPY_MODES: dict[str, bool] = {
    "1": True,
    "0": False,
}


class MaskCopy(Base):
    USAGE = "maskc <dir_from> <dir_to> <0|1> [mask]"
    SUMMARY = (
        "copy files matching [mask] from <dir_from> and its subdirectories "
        "into <dir_to>; 1 overwrites existing files, 0 keeps them"
    )
    MIN_ARGS = 3
    MAX_ARGS = None

    def run(self) -> None:
        source_dir, dest_dir, mode, *mask = self.args

        if not self.workspace.is_directory(source_dir):
            self.fail(f"directory '{source_dir}' to copy files from does not exist")

        if mode not in COPY_MODES:
            self.fail(f"copy type '{mode}' is not valid, use 1 to overwrite or 0 to skip")

        self.workspace.copy_matching(
            source_dir, dest_dir, mask_from(mask), overwrite=COPY_MODES[mode]
        )

        self.exit(0)
