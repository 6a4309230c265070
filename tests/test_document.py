from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from pepeview.document import Document, decode_text, load_document, split_lines


class SplitLinesTests(unittest.TestCase):
    def test_strips_lf_and_crlf_terminators(self) -> None:
        self.assertEqual(split_lines("a\nb\r\nc\n"), ("a", "b", "c"))

    def test_lone_carriage_return_is_content(self) -> None:
        self.assertEqual(split_lines("a\rb\n"), ("a\rb",))

    def test_unterminated_last_line_is_kept(self) -> None:
        self.assertEqual(split_lines("first\nsecond"), ("first", "second"))

    def test_empty_lines_are_preserved(self) -> None:
        self.assertEqual(split_lines("\n\nx\n"), ("", "", "x"))

    def test_empty_text_has_no_lines(self) -> None:
        self.assertEqual(split_lines(""), ())


class DecodeTextTests(unittest.TestCase):
    def test_utf8_bom_is_dropped(self) -> None:
        self.assertEqual(decode_text(b"\xef\xbb\xbfhi\n"), "hi\n")

    def test_invalid_utf8_falls_back_to_latin1(self) -> None:
        self.assertEqual(decode_text(b"caf\xe9"), "café")


class LoadDocumentTests(unittest.TestCase):
    def test_load_document_reads_lines_and_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "notes.txt"
            path.write_bytes(b"    indented\r\nplain\n")

            document = load_document(path)

        self.assertEqual(document.path, path)
        self.assertEqual(document.lines, ("    indented", "plain"))
        self.assertEqual(len(document), 2)

    def test_load_document_propagates_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                load_document(Path(tmp) / "missing.txt")

    def test_line_out_of_range_is_empty(self) -> None:
        document = Document(path=None, lines=("only",))

        self.assertEqual(document.line(0), "only")
        self.assertEqual(document.line(1), "")
        self.assertEqual(document.line(-1), "")


if __name__ == "__main__":
    unittest.main()
