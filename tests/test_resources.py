"""Tests for loading prefix to expansion dictionaries."""

import tempfile
import unittest
from pathlib import Path

from curieosa import TrieCurieUtil
from curieosa.resources import (
    DEFAULT_PATH,
    parse_default_prefix2expansion,
    parse_prefix2expansion,
    read_prefix2expansion,
)

TEXT = """\
# A header comment

HP: http://purl.obolibrary.org/obo/HP_   # human phenotypes
BT: http://c.biothings.io/#
  rdf :  http://www.w3.org/1999/02/22-rdf-syntax-ns#
a line without a delimiter
MGI: http://identifiers.org/mgi/MGI:
# GO: http://purl.obolibrary.org/obo/GO_
"""


class TestParse(unittest.TestCase):
    """Test parsing dictionary text."""

    def test_parse(self) -> None:
        """Test comments, blank lines, and lines without a delimiter are skipped."""
        self.assertEqual(
            [
                ("HP", "http://purl.obolibrary.org/obo/HP_"),
                ("BT", "http://c.biothings.io/#"),
                ("rdf", "http://www.w3.org/1999/02/22-rdf-syntax-ns#"),
                ("MGI", "http://identifiers.org/mgi/MGI:"),
            ],
            parse_prefix2expansion(TEXT),
        )

    def test_hash_comment(self) -> None:
        """Test a bare hash is kept but a hash followed by a space starts a comment."""
        self.assertEqual(
            [("BT", "http://c.biothings.io/")],
            parse_prefix2expansion("BT: http://c.biothings.io/# trailing comment"),
        )
        self.assertEqual(
            [("BT", "http://c.biothings.io/#x")],
            parse_prefix2expansion("BT: http://c.biothings.io/#x"),
        )

    def test_empty(self) -> None:
        """Test text without mappings."""
        self.assertEqual([], parse_prefix2expansion(""))
        self.assertEqual([], parse_prefix2expansion("\n   \n# only comments\n"))

    def test_order_and_duplicates(self) -> None:
        """Test pairs keep file order and duplicates aren't removed."""
        self.assertEqual(
            [("b", "http://b/"), ("a", "http://a/"), ("b", "http://c/")],
            parse_prefix2expansion("b: http://b/\na: http://a/\nb: http://c/"),
        )

    def test_read(self) -> None:
        """Test reading a dictionary file and building a CURIE util from it."""
        with tempfile.TemporaryDirectory() as directory:
            path = Path(directory).joinpath("curies.txt")
            path.write_text(TEXT, encoding="utf-8")
            self.assertEqual(parse_prefix2expansion(TEXT), read_prefix2expansion(path))
            self.assertEqual(parse_prefix2expansion(TEXT), read_prefix2expansion(str(path)))
            curie_util = TrieCurieUtil.from_file(path)
        self.assertEqual("MGI:97486", curie_util.compress("http://identifiers.org/mgi/MGI:97486"))


class TestDefault(unittest.TestCase):
    """Test the bundled dictionary."""

    def test_default(self) -> None:
        """Test the bundled mappings."""
        self.assertTrue(DEFAULT_PATH.is_file())
        pairs = parse_default_prefix2expansion()
        self.assertEqual(174, len(pairs))

        prefix2expansion = dict(pairs)
        self.assertEqual(174, len(prefix2expansion))
        self.assertEqual(174, len(set(prefix2expansion.values())))
        self.assertEqual("http://c.biothings.io/#", prefix2expansion["BT"])
        self.assertEqual("http://purl.obolibrary.org/obo/HP_", prefix2expansion["HP"])
        self.assertEqual("http://purl.obolibrary.org/obo/NCIT_", prefix2expansion["NCIT"])
        self.assertEqual("http://purl.obolibrary.org/obo/OMIM_", prefix2expansion["OMIM"])
        self.assertEqual("https://www.ncbi.nlm.nih.gov/snp/", prefix2expansion["dbSNP"])

    def test_well_formed(self) -> None:
        """Test no bundled prefix or expansion is empty or padded."""
        for prefix, expansion in parse_default_prefix2expansion():
            with self.subTest(prefix=prefix):
                self.assertTrue(prefix)
                self.assertTrue(expansion)
                self.assertEqual(prefix.strip(), prefix)
                self.assertEqual(expansion.strip(), expansion)
                self.assertNotIn(":", prefix)
