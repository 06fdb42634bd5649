from pathlib import Path

from fileman.config import Config
from fileman.diff import diff, render
from fileman.lcs import Edit


DIFF_FORMATS: dict[str, str] = {
    "context": "normal",
    "old": "red",
    "new": "green",
}

EDIT_FORMATS: dict[str, str] = {
    "eql": "context",
    "del": "old",
    "ins": "new",
}


class PrintDiffMixin:
    def diff_fmt(self, name: str, text: str) -> str:
        style_str = self.config.get(["color", "diff", name])

        if isinstance(style_str, str) and style_str:
            style = style_str.split()
        else:
            style = [DIFF_FORMATS[name]]

        try:
            return self.fmt(style, text)
        except ValueError as e:
            raise Config.ParseError(
                f"bad config value '{style_str}' for 'color.diff.{name}': {e}"
            ) from e

    def compute_diff(self, a_path: str, b_path: str) -> list[Edit]:
        # both sides are validated before the engine runs
        self.workspace.check_readable(a_path)
        self.workspace.check_readable(b_path)

        a_lines = self.workspace.read_lines(a_path)
        b_lines = self.workspace.read_lines(b_path)
        return diff(a_lines, b_lines)

    def print_diff(self, edits: list[Edit]) -> None:
        for edit in edits:
            self.println(self.diff_fmt(EDIT_FORMATS[edit.ty], str(edit)))

    def write_diff(self, edits: list[Edit], dest: Path | str) -> None:
        self.workspace.write_lines(dest, render(edits))
