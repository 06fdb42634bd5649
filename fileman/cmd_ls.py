from fileman.cmd_base import Base


class Ls(Base):
    USAGE = "ls"
    SUMMARY = "list files, then directories, in the current directory"

    def run(self) -> None:
        files, dirs = self.workspace.list_dir()

        for name in files:
            self.println(name)
        for name in dirs:
            self.println(self.fmt("blue", name))

        self.exit(0)
