from fileman.cmd_base import Base
from fileman.text_encodings import Encodings

# typed as two characters on the command line
LINE_BREAK = "\\n"


class Create(Base):
    USAGE = "create <path> [encoding] [text]"
    SUMMARY = "create a file in [encoding] holding [text]; '\\n' starts a new line"
    MIN_ARGS = 1
    MAX_ARGS = None

    def run(self) -> None:
        path = self.args[0]
        encoding = Encodings.lookup(self.args[1] if len(self.args) > 1 else None)

        lines: list[str] = []
        if len(self.args) > 2:
            lines = " ".join(self.args[2:]).split(LINE_BREAK)

        self.workspace.write_lines(path, lines, encoding)
        self.exit(0)
