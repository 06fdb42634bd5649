from fileman.cmd_base import Base


class Cp(Base):
    USAGE = "cp <path_from> <path_to>"
    SUMMARY = "copy a file, replacing <path_to> if it exists"
    MIN_ARGS = 2
    MAX_ARGS = 2

    def run(self) -> None:
        source, dest = self.args
        self.workspace.copy_file(source, dest)
        self.exit(0)
