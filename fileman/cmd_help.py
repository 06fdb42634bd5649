from fileman.cmd_base import Base

FOOTER = (
    "Any <path> may be relative to the current directory or absolute.",
    "Arguments in [brackets] are optional.",
)


class Help(Base):
    USAGE = "help"
    SUMMARY = "show this list of commands"

    def run(self) -> None:
        from fileman.command import Command

        width = max(len(cmd.USAGE) for cmd in Command.COMMANDS.values())

        for cmd_class in Command.COMMANDS.values():
            self.println(f"{cmd_class.USAGE.ljust(width)}  {cmd_class.SUMMARY}")

        self.println("")
        for line in FOOTER:
            self.println(line)

        self.exit(0)
