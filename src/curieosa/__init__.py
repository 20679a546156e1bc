"""Fast conversion of IRIs into compact URIs (CURIEs) with a prefix trie."""

from .api import (
    CompressionError,
    ConversionError,
    CurieParts,
    CuriePrefix,
    CurieUtil,
    ExpansionError,
    PrefixSource,
    Record,
    Records,
    Reference,
)
from .resources import (
    parse_default_prefix2expansion,
    parse_prefix2expansion,
    read_prefix2expansion,
)
from .trie import ExpansionIndex, TrieCurieUtil, get_default_curie_util
from .utils import NoCURIEDelimiterError
from .version import get_version

__all__ = [
    "CurieUtil",
    "TrieCurieUtil",
    "ExpansionIndex",
    "CurieParts",
    "CuriePrefix",
    "PrefixSource",
    "Record",
    "Records",
    "Reference",
    "ConversionError",
    "CompressionError",
    "ExpansionError",
    "NoCURIEDelimiterError",
    "get_default_curie_util",
    "get_version",
    # i/o
    "parse_prefix2expansion",
    "read_prefix2expansion",
    "parse_default_prefix2expansion",
]
