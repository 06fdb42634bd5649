from fileman.cmd_base import Base


class Exit(Base):
    USAGE = "exit"
    SUMMARY = "leave the file manager"

    def run(self) -> None:
        self.finished = True
        self.exit(0)
