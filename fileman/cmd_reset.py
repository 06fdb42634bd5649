from fileman.cmd_base import Base

CLEAR_SCREEN = "\x1b[H\x1b[2J\x1b[3J"


class Reset(Base):
    USAGE = "reset"
    SUMMARY = "clear the terminal"

    def run(self) -> None:
        if self.isatty:
            self.stdout.write(CLEAR_SCREEN)
        self.exit(0)
