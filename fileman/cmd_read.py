from fileman.cmd_base import Base
from fileman.text_encodings import Encodings


class Read(Base):
    USAGE = "read <path> [encoding]"
    SUMMARY = "print a text file, decoded with [encoding] (utf-8 by default)"
    MIN_ARGS = 1
    MAX_ARGS = 2

    def run(self) -> None:
        path = self.args[0]
        encoding = Encodings.lookup(self.args[1] if len(self.args) > 1 else None)

        text = self.workspace.read_file(path, encoding)

        self.setup_pager()
        self.println(text)
        self.exit(0)
