from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

SYMBOLS: dict[str, str] = {
    "eql": "=",
    "ins": "+",
    "del": "-",
}


class Choice(enum.IntEnum):
    NONE = -1
    SKIP_SOURCE = 0
    MATCH = 1
    SKIP_TARGET = 2


@dataclass(frozen=True)
class Edit:
    ty: str
    text: str

    def __str__(self) -> str:
        return f"{SYMBOLS[self.ty]} {self.text}"


class LCS:
    def __init__(self, a: Sequence[str], b: Sequence[str]):
        self.a = a
        self.b = b

    @classmethod
    def diff(cls, a: Sequence[str], b: Sequence[str]) -> list[Edit]:
        lcs = cls(a, b)
        return lcs.edit_script(lcs.common())

    def table(self) -> tuple[list[list[int]], list[list[Choice]]]:
        n, m = len(self.a), len(self.b)
        dp = [[0] * (m + 1) for _ in range(n + 1)]
        choices = [[Choice.NONE] * (m + 1) for _ in range(n + 1)]

        for i in range(1, n + 1):
            for j in range(1, m + 1):
                if self.a[i - 1] == self.b[j - 1]:
                    dp[i][j] = dp[i - 1][j - 1] + 1
                    choices[i][j] = Choice.MATCH
                elif dp[i][j - 1] > dp[i - 1][j]:
                    dp[i][j] = dp[i][j - 1]
                    choices[i][j] = Choice.SKIP_TARGET
                else:
                    # ties advance the source cursor
                    dp[i][j] = dp[i - 1][j]
                    choices[i][j] = Choice.SKIP_SOURCE

        return dp, choices

    def common(self) -> list[str]:
        _, choices = self.table()
        return self.backtrack(choices)

    def backtrack(self, choices: list[list[Choice]]) -> list[str]:
        lines: list[str] = []
        i, j = len(self.a), len(self.b)

        while choices[i][j] != Choice.NONE:
            match choices[i][j]:
                case Choice.MATCH:
                    lines.append(self.a[i - 1])
                    i -= 1
                    j -= 1
                case Choice.SKIP_SOURCE:
                    i -= 1
                case Choice.SKIP_TARGET:
                    j -= 1

        lines.reverse()
        return lines

    def edit_script(self, common: Sequence[str]) -> list[Edit]:
        n, m, p = len(self.a), len(self.b), len(common)
        edits: list[Edit] = []
        i = j = k = 0

        while i < n or j < m or k < p:
            if k < p:
                while i < n and self.a[i] != common[k]:
                    edits.append(Edit("del", self.a[i]))
                    i += 1

                while j < m and self.b[j] != common[k]:
                    edits.append(Edit("ins", self.b[j]))
                    j += 1

                edits.append(Edit("eql", common[k]))
                i += 1
                j += 1
                k += 1
            else:
                edits.extend(Edit("del", line) for line in self.a[i:])
                edits.extend(Edit("ins", line) for line in self.b[j:])
                i, j = n, m

        return edits
