from __future__ import annotations

import logging
import os
import re
import shutil
from collections.abc import Iterator
from pathlib import Path
from typing import Pattern, Sequence

from fileman.diff import split_lines

log = logging.getLogger(__name__)

DEFAULT_MASK = r"(\w+)\.(\w+)"
MAX_FILE_SIZE = 2**31 - 1


class Workspace:
    class MissingFile(Exception):
        pass
    class MissingDirectory(Exception):
        pass
    class NoPermission(Exception):
        pass
    class TooLarge(Exception):
        pass
    class WriteFailed(Exception):
        pass
    class InvalidPattern(Exception):
        pass

    def __init__(self, path: Path, max_file_size: int = MAX_FILE_SIZE) -> None:
        self.path: Path = path
        self.max_file_size: int = max_file_size

    def resolve(self, path: str | Path) -> Path:
        return (self.path / path).absolute()

    def is_directory(self, path: str | Path) -> bool:
        return self.resolve(path).is_dir()

    def check_readable(self, path: str | Path) -> Path:
        full_path = self.resolve(path)
        if not full_path.is_file():
            raise Workspace.MissingFile(f"file '{path}' does not exist")

        if full_path.stat().st_size >= self.max_file_size:
            raise Workspace.TooLarge(f"file '{path}' is too large")

        try:
            with open(full_path, "rb"):
                pass
        except PermissionError:
            raise Workspace.NoPermission(f"open(\"{full_path.name}\"): Permission denied")

        return full_path

    def read_file(self, path: str | Path, encoding: str = "utf-8") -> str:
        full_path = self.check_readable(path)
        # a leading BOM is not part of the text
        codec = "utf-8-sig" if encoding == "utf-8" else encoding

        try:
            with open(full_path, encoding=codec, errors="replace", newline="") as f:
                return f.read()
        except PermissionError:
            raise Workspace.NoPermission(f"open(\"{full_path.name}\"): Permission denied")

    def read_lines(self, path: str | Path) -> list[str]:
        return split_lines(self.read_file(path))

    def write_lines(
        self, path: str | Path, lines: Sequence[str], encoding: str = "utf-8"
    ) -> None:
        full_path = self.resolve(path)
        data = "".join(f"{line}\n" for line in lines)

        try:
            with open(full_path, "w", encoding=encoding, newline="") as f:
                f.write(data)
        except PermissionError:
            raise Workspace.NoPermission(f"open(\"{full_path.name}\"): Permission denied")
        except UnicodeEncodeError as e:
            raise Workspace.WriteFailed(
                f"cannot encode text for '{path}' as {encoding}: {e.reason}"
            )
        except OSError as e:
            raise Workspace.WriteFailed(f"cannot write '{path}': {e.strerror}")

        log.debug("wrote %d lines to %s", len(lines), full_path)

    def copy_file(self, source: str | Path, dest: str | Path) -> None:
        src_path = self._existing_file(source)
        dest_path = self.resolve(dest)

        try:
            shutil.copyfile(src_path, dest_path)
        except PermissionError:
            raise Workspace.NoPermission(f"cannot copy '{source}' to '{dest}': Permission denied")
        except OSError as e:
            raise Workspace.WriteFailed(f"cannot copy '{source}' to '{dest}': {e.strerror}")

        log.debug("copied %s to %s", src_path, dest_path)

    def move_file(self, source: str | Path, dest: str | Path) -> None:
        src_path = self._existing_file(source)
        dest_path = self.resolve(dest)

        try:
            shutil.move(src_path, dest_path)
        except PermissionError:
            raise Workspace.NoPermission(f"cannot move '{source}' to '{dest}': Permission denied")
        except OSError as e:
            raise Workspace.WriteFailed(f"cannot move '{source}' to '{dest}': {e.strerror}")

        log.debug("moved %s to %s", src_path, dest_path)

    def remove_file(self, path: str | Path) -> None:
        full_path = self.resolve(path)
        if not full_path.is_file():
            raise Workspace.MissingFile(f"file '{path}' does not exist")

        try:
            full_path.unlink()
        except PermissionError:
            raise Workspace.NoPermission(f"unlink(\"{full_path.name}\"): Permission denied")

        log.debug("removed %s", full_path)

    def list_dir(self, path: str | Path = ".") -> tuple[list[str], list[str]]:
        full_path = self._existing_directory(path)
        files, dirs = [], []

        for entry in sorted(full_path.iterdir()):
            if entry.is_dir():
                dirs.append(entry.name)
            else:
                files.append(entry.name)

        return files, dirs

    def find_by_mask(
        self, path: str | Path, mask: str, recursive: bool = False
    ) -> list[Path]:
        regex = self.compile_mask(mask)
        full_path = self._existing_directory(path)
        return list(self._match_files(full_path, regex, recursive))

    def copy_matching(
        self, source_dir: str | Path, dest_dir: str | Path, mask: str, overwrite: bool
    ) -> list[Path]:
        regex = self.compile_mask(mask)
        src_path = self._existing_directory(source_dir)
        dest_path = self.resolve(dest_dir)
        dest_path.mkdir(parents=True, exist_ok=True)

        copied: list[Path] = []
        for found in self._match_files(src_path, regex, recursive=True):
            target = dest_path / found.name
            if target.exists() and not overwrite:
                log.debug("skipping existing %s", target)
                continue

            try:
                shutil.copyfile(found, target)
            except PermissionError:
                raise Workspace.NoPermission(f"cannot copy '{found}': Permission denied")
            except OSError as e:
                raise Workspace.WriteFailed(f"cannot copy '{found}': {e.strerror}")

            copied.append(target)

        return copied

    @staticmethod
    def compile_mask(mask: str) -> Pattern[str]:
        try:
            return re.compile(mask)
        except re.error as e:
            raise Workspace.InvalidPattern(f"invalid regular expression '{mask}': {e}")

    def _match_files(
        self, path: Path, regex: Pattern[str], recursive: bool
    ) -> Iterator[Path]:
        entries = sorted(path.iterdir())

        for entry in entries:
            if entry.is_file() and regex.search(entry.name):
                yield entry

        if recursive:
            for entry in entries:
                if entry.is_dir() and not entry.is_symlink():
                    yield from self._match_files(entry, regex, recursive)

    def _existing_file(self, path: str | Path) -> Path:
        full_path = self.resolve(path)
        if not full_path.is_file():
            raise Workspace.MissingFile(
                f"file '{path}' that you are trying to copy or move does not exist"
            )
        return full_path

    def _existing_directory(self, path: str | Path) -> Path:
        full_path = self.resolve(path)
        if not full_path.is_dir():
            raise Workspace.MissingDirectory(f"directory '{path}' does not exist")
        if not os.access(full_path, os.R_OK | os.X_OK):
            raise Workspace.NoPermission(f"opendir(\"{full_path.name}\"): Permission denied")
        return full_path
