from fileman.cmd_base import Base


class Rm(Base):
    USAGE = "rm <path>"
    SUMMARY = "delete the file at <path>"
    MIN_ARGS = 1
    MAX_ARGS = 1

    def run(self) -> None:
        self.workspace.remove_file(self.args[0])
        self.exit(0)
