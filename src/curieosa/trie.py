"""A CURIE util backed by a prefix trie of expansions."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Literal, overload

from pytrie import StringTrie

from .api import (
    CompressionError,
    CurieParts,
    CuriePrefix,
    CurieUtil,
    ExpansionError,
    Record,
)
from .resources import parse_default_prefix2expansion, read_prefix2expansion
from .utils import NoCURIEDelimiterError, _split

__all__ = [
    "ExpansionIndex",
    "TrieCurieUtil",
    "get_default_curie_util",
]

logger = logging.getLogger(__name__)


class ExpansionIndex:
    """An immutable index over expansions that finds the ones starting a query string.

    >>> index = ExpansionIndex(["http://purl.obolibrary.org/obo/", "http://purl.obolibrary.org/obo/GO_"])
    >>> index.find_all_prefixes_of("http://purl.obolibrary.org/obo/GO_0032571")
    ['http://purl.obolibrary.org/obo/', 'http://purl.obolibrary.org/obo/GO_']
    >>> index.find_all_prefixes_of("http://example.org/1")
    []
    """

    __slots__ = ("_trie",)

    def __init__(self, expansions: Iterable[str]) -> None:
        """Index the expansions."""
        self._trie = StringTrie()
        for expansion in expansions:
            self._trie[expansion] = expansion

    def find_all_prefixes_of(self, query: str) -> list[str]:
        """Get all indexed expansions that are a leading substring of the query, shortest first."""
        return list(self._trie.iter_prefixes(query))

    def __contains__(self, expansion: object) -> bool:
        return expansion in self._trie

    def __len__(self) -> int:
        return len(self._trie)

    def __iter__(self) -> Iterator[str]:
        return iter(self._trie.keys())


class TrieCurieUtil(CurieUtil):
    """A :class:`CurieUtil` backed by a trie.

    >>> curie_util = TrieCurieUtil(
    ...     [
    ...         ("GENO", "http://purl.obolibrary.org/obo/GENO_"),
    ...         ("GO", "http://purl.obolibrary.org/obo/GO_"),
    ...         ("HP", "http://purl.obolibrary.org/obo/HP_"),
    ...     ]
    ... )
    >>> curie_util.has_prefix("GENO")
    True
    >>> curie_util.get_expansion("GO")
    'http://purl.obolibrary.org/obo/GO_'
    >>> parts = curie_util.get_curie_data("http://purl.obolibrary.org/obo/GO_1234567")
    >>> parts.get_prefix(), parts.get_id()
    ('GO', '1234567')

    If there are overlapping expansions (e.g., ``http://purl.obolibrary.org/obo/``
    and ``http://purl.obolibrary.org/obo/GO_``), the longest one that starts the
    IRI is always matched.

    Duplicate prefixes or expansions are resolved by the last pair winning, in
    both directions.
    """

    #: The index over all expansions
    index: ExpansionIndex

    def __init__(self, prefix2expansion: Iterable[tuple[str, str]]) -> None:
        """Instantiate a CURIE util.

        :param prefix2expansion: An iterable of pairs of prefixes and expansions
        """
        prefix_to_expansion: dict[str, str] = {}
        expansion_to_prefix: dict[str, str] = {}
        count = 0
        for prefix, expansion in prefix2expansion:
            prefix_to_expansion[prefix] = expansion
            expansion_to_prefix[expansion] = prefix
            count += 1
        if not (count == len(prefix_to_expansion) == len(expansion_to_prefix)):
            logger.warning(
                "prefix map is not one to one (%d pairs, %d prefixes, %d expansions). "
                "The last of each duplicate pair wins.",
                count,
                len(prefix_to_expansion),
                len(expansion_to_prefix),
            )
        self._prefix_to_expansion = prefix_to_expansion
        self._expansion_to_prefix = expansion_to_prefix
        self.index = ExpansionIndex(expansion_to_prefix)

    @classmethod
    def default(cls) -> TrieCurieUtil:
        """Create a CURIE util from the bundled prefix to expansion mappings.

        .. seealso:: :func:`get_default_curie_util` to reuse a single shared instance
        """
        return cls(parse_default_prefix2expansion())

    @classmethod
    def from_prefix_map(cls, prefix_map: Mapping[str, str]) -> TrieCurieUtil:
        """Create a CURIE util from a mapping of prefixes to expansions.

        >>> curie_util = TrieCurieUtil.from_prefix_map({"HP": "http://purl.obolibrary.org/obo/HP_"})
        >>> curie_util.compress("http://purl.obolibrary.org/obo/HP_0000118")
        'HP:0000118'
        """
        return cls(prefix_map.items())

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> TrieCurieUtil:
        """Create a CURIE util from records."""
        return cls((record.prefix, record.expansion) for record in records)

    @classmethod
    def from_file(cls, path: str | Path) -> TrieCurieUtil:
        """Create a CURIE util from a dictionary file in the same format as the bundled one."""
        return cls(read_prefix2expansion(path))

    @property
    def prefix_map(self) -> Mapping[str, str]:
        """Get a read-only view of the mapping from prefixes to expansions."""
        return MappingProxyType(self._prefix_to_expansion)

    @property
    def reverse_prefix_map(self) -> Mapping[str, str]:
        """Get a read-only view of the mapping from expansions to prefixes."""
        return MappingProxyType(self._expansion_to_prefix)

    def get_prefixes(self) -> set[str]:
        """Get the set of prefixes covered by this CURIE util."""
        return set(self._prefix_to_expansion)

    def get_expansions(self) -> set[str]:
        """Get the set of expansions covered by this CURIE util."""
        return set(self._expansion_to_prefix)

    def get_records(self) -> list[Record]:
        """Get a record for each prefix."""
        return [
            Record(prefix=prefix, expansion=expansion)
            for prefix, expansion in self._prefix_to_expansion.items()
        ]

    def __len__(self) -> int:
        return len(self._prefix_to_expansion)

    def get_curie_data(self, iri: str) -> CurieParts | None:
        """Find the CURIE prefix and id in an IRI.

        >>> curie_util = TrieCurieUtil.default()
        >>> parts = curie_util.get_curie_data("http://purl.obolibrary.org/obo/HP_0000118")
        >>> parts.get_prefix(), parts.get_id()
        ('HP', '0000118')
        >>> curie_util.get_curie_data("http://example.org/123") is None
        True
        """
        matches = self.index.find_all_prefixes_of(iri)
        if not matches:
            return None
        expansion = max(matches, key=len)
        prefix = self._expansion_to_prefix[expansion]
        i = expansion.find(prefix)
        if i == -1:
            curie_prefix = CuriePrefix.from_curie_util(prefix)
        else:
            curie_prefix = CuriePrefix.from_iri(iri[i : i + len(prefix)])
        return CurieParts(curie_prefix, iri[len(expansion) :])

    def get_expansion(self, prefix: str) -> str | None:
        """Get the expansion for a prefix.

        >>> curie_util = TrieCurieUtil.default()
        >>> curie_util.get_expansion("HP")
        'http://purl.obolibrary.org/obo/HP_'
        >>> curie_util.get_expansion("FOO") is None
        True
        """
        return self._prefix_to_expansion.get(prefix)

    def has_prefix(self, prefix: str) -> bool:
        """Check if the prefix can be expanded.

        >>> curie_util = TrieCurieUtil.default()
        >>> curie_util.has_prefix("HP")
        True
        >>> curie_util.has_prefix("FOO")
        False
        """
        return prefix in self._prefix_to_expansion

    # docstr-coverage:excused `overload`
    @overload
    def compress(
        self, iri: str, *, strict: Literal[True] = True, passthrough: bool = ...
    ) -> str: ...

    # docstr-coverage:excused `overload`
    @overload
    def compress(
        self, iri: str, *, strict: Literal[False] = False, passthrough: Literal[True] = True
    ) -> str: ...

    # docstr-coverage:excused `overload`
    @overload
    def compress(
        self, iri: str, *, strict: Literal[False] = False, passthrough: Literal[False] = False
    ) -> str | None: ...

    def compress(self, iri: str, *, strict: bool = False, passthrough: bool = False) -> str | None:
        """Compress an IRI to a CURIE, if possible.

        :param iri: A string representing an IRI
        :param strict: If true and the IRI can't be compressed, raises an error. Defaults to false.
        :param passthrough: If true, strict is false, and the IRI can't be compressed, return the input.
            Defaults to false.
        :returns: A CURIE if an expansion starts the IRI, otherwise none.
        :raises CompressionError: If strict is set to true and the IRI can't be compressed

        >>> curie_util = TrieCurieUtil.default()
        >>> curie_util.compress("https://www.ncbi.nlm.nih.gov/snp/rs1234567")
        'dbSNP:rs1234567'
        >>> curie_util.compress("http://example.org/123", passthrough=True)
        'http://example.org/123'
        """
        parts = self.get_curie_data(iri)
        if parts is not None:
            return parts.curie
        if strict:
            raise CompressionError(iri)
        if passthrough:
            return iri
        return None

    # docstr-coverage:excused `overload`
    @overload
    def expand(
        self, curie: str, *, strict: Literal[True] = True, passthrough: bool = ...
    ) -> str: ...

    # docstr-coverage:excused `overload`
    @overload
    def expand(
        self, curie: str, *, strict: Literal[False] = False, passthrough: Literal[True] = True
    ) -> str: ...

    # docstr-coverage:excused `overload`
    @overload
    def expand(
        self, curie: str, *, strict: Literal[False] = False, passthrough: Literal[False] = False
    ) -> str | None: ...

    def expand(self, curie: str, *, strict: bool = False, passthrough: bool = False) -> str | None:
        """Expand a CURIE to an IRI, if possible.

        :param curie: A string representing a compact URI (CURIE)
        :param strict: If true and the CURIE can't be expanded, raises an error. Defaults to false.
        :param passthrough: If true, strict is false, and the CURIE can't be expanded, return the input.
            Defaults to false.
        :returns: An IRI if the prefix is known, otherwise none.
        :raises ExpansionError: If strict is set to true and the CURIE can't be expanded

        >>> curie_util = TrieCurieUtil.default()
        >>> curie_util.expand("HP:0001250")
        'http://purl.obolibrary.org/obo/HP_0001250'
        >>> curie_util.expand("FOO:123") is None
        True
        """
        try:
            prefix, identifier = _split(curie)
        except NoCURIEDelimiterError:
            expansion = None
        else:
            expansion = self.get_expansion(prefix)
        if expansion is not None:
            return expansion + identifier
        if strict:
            raise ExpansionError(curie)
        if passthrough:
            return curie
        return None


@lru_cache(maxsize=1)
def get_default_curie_util() -> TrieCurieUtil:
    """Get a shared CURIE util over the bundled mappings, built on first use."""
    return TrieCurieUtil.default()
