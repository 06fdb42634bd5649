from fileman.cmd_base import Base
from fileman.print_diff import PrintDiffMixin


class Diff(PrintDiffMixin, Base):
    USAGE = "diff <path1> <path2> [path_dest]"
    SUMMARY = (
        "show how to turn <path1> into <path2> line by line "
        "('-' removed, '+' added, '=' kept), or save it to [path_dest]"
    )
    MIN_ARGS = 2
    MAX_ARGS = 3

    def run(self) -> None:
        a_path, b_path, *dest = self.args

        edits = self.compute_diff(a_path, b_path)

        if dest:
            self.write_diff(edits, dest[0])
        else:
            self.setup_pager()
            self.print_diff(edits)

        self.exit(0)
