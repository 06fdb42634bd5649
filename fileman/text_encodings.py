from __future__ import annotations

DEFAULT_ENCODING = "utf-8"


class Encodings:
    class Unsupported(Exception):
        pass

    # user-facing name -> Python codec
    NAMES: dict[str, str] = {
        "utf-8": "utf-8",
        "utf-32": "utf-32",
        "ascii": "ascii",
        "utf-16": "utf-16",
        "latin-1": "latin-1",
    }

    @staticmethod
    def lookup(name: str | None) -> str:
        if name is None:
            return DEFAULT_ENCODING

        try:
            return Encodings.NAMES[name]
        except KeyError:
            raise Encodings.Unsupported(
                f"encoding '{name}' does not exist or is not supported"
            ) from None

    @staticmethod
    def names() -> list[str]:
        return list(Encodings.NAMES)
