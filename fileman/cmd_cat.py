from fileman.cmd_base import Base


class Cat(Base):
    USAGE = "cat <path1> ... <pathN> <path_dest>"
    SUMMARY = "join the text of several files into <path_dest> and print it"
    MIN_ARGS = 2
    MAX_ARGS = None

    def run(self) -> None:
        *sources, dest = self.args

        texts = [self.workspace.read_file(path) for path in sources]
        self.workspace.write_lines(dest, texts)

        self.println(self.workspace.read_file(dest))
        self.exit(0)
