import pytest

from tests.cmd_helpers import (
    assert_noent,
    assert_status,
    assert_stderr,
    assert_stdout,
    assert_workspace,
)


class TestRead:
    def test_it_prints_the_file(self, fileman_cmd, write_file):
        write_file("a.txt", "hello\nworld\n")

        cmd, _, stdout, _ = fileman_cmd("read", "a.txt")

        assert_status(cmd, 0)
        assert_stdout(stdout, "hello\nworld\n\n")

    def test_it_decodes_with_the_given_encoding(self, fileman_cmd, write_bytes):
        write_bytes("a.txt", "naïve".encode("latin-1"))

        _, _, stdout, _ = fileman_cmd("read", "a.txt", "latin-1")

        assert_stdout(stdout, "naïve\n")

    def test_it_rejects_unknown_encodings(self, fileman_cmd, write_file):
        write_file("a.txt", "x")

        cmd, _, stdout, stderr = fileman_cmd("read", "a.txt", "klingon")

        assert_status(cmd, 1)
        assert_stdout(stdout, "")
        assert_stderr(stderr, "error: encoding 'klingon' does not exist or is not supported\n")

    def test_it_fails_for_a_missing_file(self, fileman_cmd):
        cmd, _, _, stderr = fileman_cmd("read", "nope.txt")

        assert_status(cmd, 1)
        assert_stderr(stderr, "error: file 'nope.txt' does not exist\n")


class TestCreate:
    def test_it_creates_an_empty_file(self, fileman_cmd, work_path):
        cmd, *_ = fileman_cmd("create", "new.txt")

        assert_status(cmd, 0)
        assert_workspace(work_path, {"new.txt": ""})

    def test_it_writes_text_split_on_escaped_newlines(self, fileman_cmd, work_path):
        fileman_cmd("create", "new.txt", "utf-8", "hello", "world\\nsecond", "line")
        assert_workspace(work_path, {"new.txt": "hello world\nsecond line\n"})

    def test_it_writes_with_the_given_encoding(self, fileman_cmd, work_path):
        fileman_cmd("create", "new.txt", "utf-16", "hi")
        assert (work_path / "new.txt").read_text(encoding="utf-16") == "hi\n"

    def test_it_overwrites_an_existing_file(self, fileman_cmd, write_file, work_path):
        write_file("new.txt", "old contents\n")

        fileman_cmd("create", "new.txt", "ascii", "fresh")

        assert_workspace(work_path, {"new.txt": "fresh\n"})

    def test_it_rejects_unknown_encodings(self, fileman_cmd, work_path):
        cmd, _, _, stderr = fileman_cmd("create", "new.txt", "klingon", "text")

        assert_status(cmd, 1)
        assert_stderr(stderr, "error: encoding 'klingon' does not exist or is not supported\n")
        assert_noent(work_path, "new.txt")


class TestCat:
    def test_it_joins_files_into_the_destination(self, fileman_cmd, write_file, work_path):
        write_file("a.txt", "one")
        write_file("b.txt", "two")

        cmd, _, stdout, _ = fileman_cmd("cat", "a.txt", "b.txt", "all.txt")

        assert_status(cmd, 0)
        assert (work_path / "all.txt").read_text() == "one\ntwo\n"
        assert_stdout(stdout, "one\ntwo\n\n")

    def test_it_fails_without_writing_when_a_source_is_missing(
        self, fileman_cmd, write_file, work_path
    ):
        write_file("a.txt", "one")

        cmd, _, _, stderr = fileman_cmd("cat", "a.txt", "nope.txt", "all.txt")

        assert_status(cmd, 1)
        assert_stderr(stderr, "error: file 'nope.txt' does not exist\n")
        assert_noent(work_path, "all.txt")

    def test_it_needs_a_destination(self, fileman_cmd):
        cmd, *_ = fileman_cmd("cat", "a.txt")
        assert_status(cmd, 129)


class TestCopyMoveRemove:
    @pytest.fixture(autouse=True)
    def setup(self, write_file):
        write_file("a.txt", "contents")

    def test_cp_copies_a_file(self, fileman_cmd, work_path):
        cmd, *_ = fileman_cmd("cp", "a.txt", "b.txt")

        assert_status(cmd, 0)
        assert_workspace(work_path, {"a.txt": "contents", "b.txt": "contents"})

    def test_cp_overwrites_the_destination(self, fileman_cmd, write_file, work_path):
        write_file("b.txt", "old")

        fileman_cmd("cp", "a.txt", "b.txt")

        assert_workspace(work_path, {"a.txt": "contents", "b.txt": "contents"})

    def test_cp_fails_for_a_missing_source(self, fileman_cmd):
        cmd, _, _, stderr = fileman_cmd("cp", "nope.txt", "b.txt")

        assert_status(cmd, 1)
        assert_stderr(
            stderr,
            "error: file 'nope.txt' that you are trying to copy or move does not exist\n",
        )

    def test_mv_moves_a_file(self, fileman_cmd, work_path):
        cmd, *_ = fileman_cmd("mv", "a.txt", "b.txt")

        assert_status(cmd, 0)
        assert_workspace(work_path, {"b.txt": "contents"})

    def test_mv_overwrites_the_destination(self, fileman_cmd, write_file, work_path):
        write_file("b.txt", "old")

        fileman_cmd("mv", "a.txt", "b.txt")

        assert_workspace(work_path, {"b.txt": "contents"})

    def test_rm_deletes_a_file(self, fileman_cmd, work_path):
        cmd, *_ = fileman_cmd("rm", "a.txt")

        assert_status(cmd, 0)
        assert_workspace(work_path, {})

    def test_rm_fails_for_a_missing_file(self, fileman_cmd):
        cmd, _, _, stderr = fileman_cmd("rm", "nope.txt")

        assert_status(cmd, 1)
        assert_stderr(stderr, "error: file 'nope.txt' does not exist\n")

    def test_rm_takes_exactly_one_path(self, fileman_cmd, work_path):
        cmd, _, _, stderr = fileman_cmd("rm", "a.txt", "b.txt")

        assert_status(cmd, 129)
        assert_stderr(stderr, "usage: rm <path>\n")
        assert_workspace(work_path, {"a.txt": "contents"})
