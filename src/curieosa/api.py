"""Data structures and the abstract interface for :mod:`curieosa`."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, NamedTuple

from pydantic import BaseModel, Field, RootModel
from typing_extensions import Self

from .utils import NoCURIEDelimiterError, _split

__all__ = [
    "CompressionError",
    "ConversionError",
    "CurieParts",
    "CuriePrefix",
    "CurieUtil",
    "ExpansionError",
    "NoCURIEDelimiterError",
    "PrefixSource",
    "Record",
    "Records",
    "Reference",
]


class PrefixSource(enum.Enum):
    """The place a CURIE prefix was taken from."""

    #: The prefix is a slice of the queried IRI
    IRI = "iri"
    #: The prefix is the string stored by the CURIE util
    CURIE_UTIL = "curie_util"


class CuriePrefix(NamedTuple):
    """A CURIE prefix, tagged with where its characters come from.

    When the prefix appears verbatim inside the matched expansion, it is cut
    out of the IRI itself. Otherwise, it is the string the CURIE util
    has registered for the expansion.

    >>> CuriePrefix.from_iri("HP")
    CuriePrefix(value='HP', source=<PrefixSource.IRI: 'iri'>)
    >>> CuriePrefix.from_curie_util("dbSNP").source
    <PrefixSource.CURIE_UTIL: 'curie_util'>
    """

    value: str
    source: PrefixSource

    @classmethod
    def from_iri(cls, value: str) -> CuriePrefix:
        """Wrap a slice of an IRI."""
        return cls(value, PrefixSource.IRI)

    @classmethod
    def from_curie_util(cls, value: str) -> CuriePrefix:
        """Wrap a prefix owned by a CURIE util."""
        return cls(value, PrefixSource.CURIE_UTIL)


class CurieParts:
    """The CURIE *prefix* and *id* found in an IRI.

    A bare string given as the prefix is assumed to come from the IRI:

    >>> parts = CurieParts("HP", "1234567")
    >>> parts.get_prefix()
    'HP'
    >>> parts.get_id()
    '1234567'
    >>> parts.curie
    'HP:1234567'

    Curie parts unpack like a pair of strings:

    >>> prefix, identifier = parts
    >>> prefix, identifier
    ('HP', '1234567')
    """

    __slots__ = ("_id", "_prefix")

    def __init__(self, prefix: CuriePrefix | str, id: str) -> None:  # noqa:A002
        """Create new curie parts."""
        if not isinstance(prefix, CuriePrefix):
            prefix = CuriePrefix.from_iri(prefix)
        self._prefix = prefix
        self._id = id

    def get_prefix(self) -> str:
        """Get the CURIE prefix."""
        return self._prefix.value

    def get_id(self) -> str:
        """Get the CURIE local identifier."""
        return self._id

    @property
    def prefix(self) -> CuriePrefix:
        """Get the tagged CURIE prefix."""
        return self._prefix

    @property
    def prefix_source(self) -> PrefixSource:
        """Get where the characters of the prefix come from."""
        return self._prefix.source

    @property
    def curie(self) -> str:
        """Get the parts formatted as a CURIE string."""
        return f"{self._prefix.value}:{self._id}"

    def to_pydantic(self) -> Reference:
        """Get a Pydantic model."""
        return Reference(prefix=self._prefix.value, identifier=self._id)

    def __iter__(self) -> Iterator[str]:
        yield self._prefix.value
        yield self._id

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CurieParts):
            return NotImplemented
        return self._prefix == other._prefix and self._id == other._id

    def __hash__(self) -> int:
        return hash((self._prefix, self._id))

    def __repr__(self) -> str:
        return f"CurieParts(prefix={self._prefix!r}, id={self._id!r})"


class Reference(BaseModel):
    """A reference to an entity in a given identifier space.

    >>> Reference.from_curie("HP:0001250")
    Reference(prefix='HP', identifier='0001250')
    """

    prefix: str = Field(
        ...,
        description="The prefix used in a compact URI (CURIE).",
    )
    identifier: str = Field(
        ..., description="The local unique identifier used in a compact URI (CURIE)."
    )

    @property
    def curie(self) -> str:
        """Get the reference as a CURIE string.

        >>> Reference(prefix="HP", identifier="0001250").curie
        'HP:0001250'
        """
        return f"{self.prefix}:{self.identifier}"

    @classmethod
    def from_curie(cls, curie: str, *, sep: str = ":") -> Self:
        """Parse a CURIE string and populate a reference.

        :param curie: A string representation of a compact URI (CURIE)
        :param sep: The separator
        :return: A reference object
        :raises NoCURIEDelimiterError: if the string does not contain the separator
        """
        prefix, identifier = _split(curie, sep=sep)
        return cls(prefix=prefix, identifier=identifier)


class Record(BaseModel):
    """A prefix and its associated expansion."""

    prefix: str = Field(
        ...,
        min_length=1,
        title="CURIE prefix",
        description="A short mnemonic for the namespace, e.g., ``HP``",
    )
    expansion: str = Field(
        ...,
        min_length=1,
        title="Expansion",
        description="The namespace the prefix stands for, e.g., ``http://purl.obolibrary.org/obo/HP_``",
    )


class Records(RootModel[list[Record]]):
    """A list of records."""

    def __iter__(self) -> Iterator[Record]:  # type:ignore[override]
        """Iterate over records."""
        return iter(self.root)


class ConversionError(ValueError):
    """An error raised on conversion."""


class ExpansionError(ConversionError):
    """An error raised on expansion if the prefix can't be looked up."""


class CompressionError(ConversionError):
    """An error raised on compression if no expansion matches the IRI."""


class CurieUtil(ABC):
    """Expand prefixes, check if a prefix can be expanded, and find CURIE parts in an IRI."""

    @abstractmethod
    def get_curie_data(self, iri: str) -> CurieParts | None:
        """Find the CURIE prefix and id in an IRI.

        :param iri: A string that might start with a known expansion
        :returns: The CURIE parts, or None if no known expansion starts the IRI
        """

    @abstractmethod
    def get_expansion(self, prefix: str) -> str | None:
        """Get the expansion for a prefix, or None if it is unknown."""

    def has_prefix(self, prefix: str) -> bool:
        """Check if the prefix can be expanded."""
        return self.get_expansion(prefix) is not None
