from io import StringIO
from pathlib import Path
from typing import (
    Callable,
    Generator,
    Mapping,
    Protocol,
    TypeAlias,
)

import pytest

from fileman.cmd_base import Base
from fileman.command import Command
from fileman.shell import Shell

FilemanCmdResult: TypeAlias = tuple[Base, StringIO, StringIO, StringIO]

WriteFile: TypeAlias = Callable[[str, str], None]
WriteBytes: TypeAlias = Callable[[str, bytes], None]
Mkdir: TypeAlias = Callable[[str], None]
WriteConfig: TypeAlias = Callable[[str], None]
MakeUnreadable: TypeAlias = Callable[[str], None]


class FilemanCmd(Protocol):
    def __call__(
        self,
        *argv: str,
        env: Mapping[str, str] | None = None,
    ) -> FilemanCmdResult: ...


class RunShell(Protocol):
    def __call__(self, stdin_data: str) -> tuple[Shell, int, StringIO, StringIO]: ...


@pytest.fixture
def work_path(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "filemanconfig"


@pytest.fixture
def base_env(config_path: Path) -> dict[str, str]:
    return {"FILEMAN_CONFIG": str(config_path)}


@pytest.fixture
def write_config(config_path: Path) -> WriteConfig:
    def _write_config(contents: str) -> None:
        config_path.write_text(contents)

    return _write_config


@pytest.fixture
def write_file(work_path: Path) -> WriteFile:
    def _write_file(name: str, contents: str) -> None:
        path = work_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", newline="") as f:
            f.write(contents)

    return _write_file


@pytest.fixture
def write_bytes(work_path: Path) -> WriteBytes:
    def _write_bytes(name: str, contents: bytes) -> None:
        path = work_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(contents)

    return _write_bytes


@pytest.fixture
def mkdir(work_path: Path) -> Mkdir:
    def _mkdir(name: str) -> None:
        (work_path / name).mkdir(parents=True, exist_ok=True)

    return _mkdir


@pytest.fixture
def make_unreadable(work_path: Path) -> Generator[MakeUnreadable, None, None]:
    changed: list[Path] = []

    def _make_unreadable(name: str) -> None:
        path = work_path / name
        path.chmod(0o200)
        changed.append(path)

    yield _make_unreadable

    for path in changed:
        path.chmod(0o644)


@pytest.fixture
def fileman_cmd(work_path: Path, base_env: dict[str, str]) -> FilemanCmd:
    def _fileman_cmd(
        *argv: str,
        env: Mapping[str, str] | None = None,
    ) -> FilemanCmdResult:
        stdin = StringIO()
        stdout = StringIO()
        stderr = StringIO()
        cmd = Command.execute(
            work_path,
            {**base_env, **(env or {})},
            ["fileman"] + list(argv),
            stdin,
            stdout,
            stderr,
        )
        return cmd, stdin, stdout, stderr

    return _fileman_cmd


@pytest.fixture
def run_shell(work_path: Path, base_env: dict[str, str]) -> RunShell:
    def _run_shell(stdin_data: str) -> tuple[Shell, int, StringIO, StringIO]:
        stdout = StringIO()
        stderr = StringIO()
        shell = Shell(work_path, dict(base_env), StringIO(stdin_data), stdout, stderr)
        status = shell.run()
        return shell, status, stdout, stderr

    return _run_shell
