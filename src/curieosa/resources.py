"""Loading prefix to expansion dictionaries.

A dictionary is a text file with one mapping per line::

    # a comment
    HP: http://purl.obolibrary.org/obo/HP_
    BT: http://c.biothings.io/#

Some expansions contain a bare ``#``, so only ``#`` followed by a space
starts a comment. Lines without a colon are skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path

__all__ = [
    "DEFAULT_PATH",
    "parse_default_prefix2expansion",
    "parse_prefix2expansion",
    "read_prefix2expansion",
]

logger = logging.getLogger(__name__)

HERE = Path(__file__).parent.resolve()
#: The bundled dictionary with common biomedical prefixes
DEFAULT_PATH = HERE.joinpath("curies.txt")

COMMENT = "# "


def parse_prefix2expansion(text: str) -> list[tuple[str, str]]:
    """Parse the text of a dictionary into prefix/expansion pairs, in file order.

    >>> parse_prefix2expansion("BT: http://c.biothings.io/#\\n# comment\\nbroken line")
    [('BT', 'http://c.biothings.io/#')]
    """
    rv = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        relevant = line.split(COMMENT, 1)[0]
        if not relevant.strip():
            continue
        prefix, delimiter, expansion = relevant.partition(":")
        if not delimiter:
            logger.debug("skipping line %d without a delimiter: %r", line_number, line)
            continue
        rv.append((prefix.strip(), expansion.strip()))
    return rv


def read_prefix2expansion(path: str | Path) -> list[tuple[str, str]]:
    """Read a dictionary file into prefix/expansion pairs."""
    path = Path(path).expanduser().resolve()
    rv = parse_prefix2expansion(path.read_text(encoding="utf-8"))
    logger.debug("loaded %d mappings from %s", len(rv), path)
    return rv


def parse_default_prefix2expansion() -> list[tuple[str, str]]:
    """Get the bundled prefix/expansion pairs.

    >>> pairs = dict(parse_default_prefix2expansion())
    >>> pairs["HP"]
    'http://purl.obolibrary.org/obo/HP_'
    """
    return read_prefix2expansion(DEFAULT_PATH)
