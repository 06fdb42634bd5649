from fileman.cmd_base import Base


class Cd(Base):
    USAGE = "cd <path>"
    SUMMARY = "change the current directory to <path>"
    MIN_ARGS = 1
    MAX_ARGS = 1

    def run(self) -> None:
        path = self.workspace.resolve(self.args[0])

        if not path.is_dir():
            self.fail(f"directory '{self.args[0]}' does not exist")

        self.dir = path.resolve()
        self.exit(0)
