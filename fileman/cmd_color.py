from __future__ import annotations

import click

COLORS = {"black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"}

ATTRIBUTES: dict[str, str] = {
    "bold": "bold",
    "dim": "dim",
    "italic": "italic",
    "ul": "underline",
    "reverse": "reverse",
    "strike": "strikethrough",
}


class Color:
    @staticmethod
    def format(style: str | list[str], text: str) -> str:
        if isinstance(style, str):
            names = style.split()
        else:
            names = list(style)

        kwargs: dict[str, str | bool] = {}
        for name in names:
            if name == "normal":
                continue
            if name in COLORS:
                # first color is the foreground, a second one the background
                kwargs["bg" if "fg" in kwargs else "fg"] = name
            elif name in ATTRIBUTES:
                kwargs[ATTRIBUTES[name]] = True
            else:
                raise ValueError(f"Unknown style name: '{name}'")

        if not kwargs:
            return text
        return click.style(text, **kwargs)  # type: ignore[arg-type]
