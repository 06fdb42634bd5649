from __future__ import annotations

import re
from typing import List, Pattern, Union

from fileman.lcs import LCS, Edit

LINE_BREAK: Pattern[str] = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """
    Break text on \\r\\n, \\r and \\n only; form feeds and Unicode separators
    stay inside their line. A final line break does not start a new line.
    """
    if not text:
        return []

    parts = LINE_BREAK.split(text)
    if parts[-1] == "":
        parts.pop()
    return parts


def lines(document: Union[str, List[str]]) -> List[str]:
    if isinstance(document, str):
        return split_lines(document)
    return list(document)


def diff(a: Union[str, List[str]], b: Union[str, List[str]]) -> List[Edit]:
    return LCS.diff(lines(a), lines(b))


def render(edits: List[Edit]) -> List[str]:
    return [str(edit) for edit in edits]
