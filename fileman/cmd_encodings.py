from fileman.cmd_base import Base
from fileman.text_encodings import Encodings


class EncodingsCmd(Base):
    USAGE = "encodings"
    SUMMARY = "list the supported encodings"

    def run(self) -> None:
        self.println("Supported encodings:")
        for name in Encodings.names():
            self.println(name)
        self.exit(0)
