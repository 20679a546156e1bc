"""Tests for the data structures."""

from __future__ import annotations

import unittest

from pydantic import ValidationError

from curieosa.api import (
    CurieParts,
    CuriePrefix,
    CurieUtil,
    NoCURIEDelimiterError,
    PrefixSource,
    Record,
    Reference,
)


class TestCurieParts(unittest.TestCase):
    """Test the CURIE parts."""

    def test_bare_prefix(self) -> None:
        """Test a bare string prefix is assumed to come from the IRI."""
        parts = CurieParts("HP", "1234567")
        self.assertEqual("HP", parts.get_prefix())
        self.assertEqual("1234567", parts.get_id())
        self.assertEqual(PrefixSource.IRI, parts.prefix_source)
        self.assertEqual(CuriePrefix.from_iri("HP"), parts.prefix)

    def test_prefix_sources(self) -> None:
        """Test equal strings from different sources are told apart."""
        from_iri = CurieParts(CuriePrefix.from_iri("HP"), "1")
        from_curie_util = CurieParts(CuriePrefix.from_curie_util("HP"), "1")
        self.assertNotEqual(from_iri, from_curie_util)
        self.assertEqual(from_iri.get_prefix(), from_curie_util.get_prefix())
        self.assertEqual(PrefixSource.CURIE_UTIL, from_curie_util.prefix_source)
        self.assertEqual(2, len({from_iri, from_curie_util, CurieParts("HP", "1")}))

    def test_pair(self) -> None:
        """Test CURIE parts act as a pair of strings."""
        parts = CurieParts(CuriePrefix.from_curie_util("dbSNP"), "rs1234567")
        prefix, identifier = parts
        self.assertEqual("dbSNP", prefix)
        self.assertEqual("rs1234567", identifier)
        self.assertEqual("dbSNP:rs1234567", parts.curie)
        self.assertIn("dbSNP", repr(parts))

    def test_to_pydantic(self) -> None:
        """Test getting a reference."""
        reference = CurieParts("HP", "0001250").to_pydantic()
        self.assertEqual(Reference(prefix="HP", identifier="0001250"), reference)
        self.assertEqual("HP:0001250", reference.curie)


class TestReference(unittest.TestCase):
    """Test references."""

    def test_from_curie(self) -> None:
        """Test parsing a CURIE."""
        self.assertEqual(
            Reference(prefix="a1", identifier="b2:c3"), Reference.from_curie("a1:b2:c3")
        )
        self.assertEqual(Reference(prefix="p1", identifier=""), Reference.from_curie("p1:"))

    def test_not_curie(self) -> None:
        """Test a malformed CURIE."""
        with self.assertRaises(NoCURIEDelimiterError) as e:
            Reference.from_curie("not a curie")
        self.assertIn("does not appear to be a CURIE", str(e.exception))


class TestRecord(unittest.TestCase):
    """Test records."""

    def test_empty(self) -> None:
        """Test empty prefixes and expansions are rejected."""
        with self.assertRaises(ValidationError):
            Record(prefix="", expansion="http://purl.obolibrary.org/obo/HP_")
        with self.assertRaises(ValidationError):
            Record(prefix="HP", expansion="")


class TestCurieUtil(unittest.TestCase):
    """Test the abstract CURIE util."""

    def test_default_has_prefix(self) -> None:
        """Test checking prefixes falls back to looking up the expansion."""

        class DictCurieUtil(CurieUtil):
            """A CURIE util that can only expand."""

            def get_curie_data(self, iri: str) -> CurieParts | None:
                return None

            def get_expansion(self, prefix: str) -> str | None:
                return {"HP": "http://purl.obolibrary.org/obo/HP_"}.get(prefix)

        curie_util = DictCurieUtil()
        self.assertTrue(curie_util.has_prefix("HP"))
        self.assertFalse(curie_util.has_prefix("FOO"))

    def test_abstract(self) -> None:
        """Test the CURIE util can't be instantiated without an implementation."""
        with self.assertRaises(TypeError):
            CurieUtil()
