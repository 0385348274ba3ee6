import contextlib
import io
import unittest
from unittest import mock

from retap.stdin import read_piped_document


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class _BrokenStream(io.StringIO):
    def read(self, *args) -> str:
        raise OSError("read failed")


class ReadPipedDocumentTests(unittest.TestCase):
    def test_piped_text_is_read_whole(self) -> None:
        stream = io.StringIO("first line\nsecond line\n")
        self.assertEqual(read_piped_document(stream), "first line\nsecond line\n")

    def test_interactive_stdin_gives_none(self) -> None:
        self.assertIsNone(read_piped_document(_TtyStream("ignored")))

    def test_empty_pipe_gives_empty_document(self) -> None:
        self.assertEqual(read_piped_document(io.StringIO("")), "")

    def test_read_failure_reported_and_ignored(self) -> None:
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr), self.assertLogs("retap.stdin", level="ERROR"):
            self.assertIsNone(read_piped_document(_BrokenStream()))
        self.assertIn("could not read piped input", stderr.getvalue())

    def test_defaults_to_sys_stdin(self) -> None:
        with mock.patch("sys.stdin", io.StringIO("piped")):
            self.assertEqual(read_piped_document(), "piped")


if __name__ == "__main__":
    unittest.main()
