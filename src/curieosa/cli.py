# type:ignore

"""This package comes with a built-in CLI for compressing IRIs and expanding CURIEs.

.. code-block::

    $ python -m curieosa compress http://purl.obolibrary.org/obo/HP_0001250
    HP:0001250

    $ python -m curieosa expand dbSNP:rs1234567
    https://www.ncbi.nlm.nih.gov/snp/rs1234567

By default, the bundled dictionary is used. A custom dictionary file with one
``PREFIX: EXPANSION`` mapping per line can be given with ``--dictionary`` or
the ``CURIEOSA_DICTIONARY`` environment variable.
"""

import sys
import time

import click

from .trie import TrieCurieUtil, get_default_curie_util

__all__ = [
    "main",
]

DEFAULT_BENCHMARK_IRI = "http://purl.obolibrary.org/obo/HP_0001250"


def _get_curie_util(dictionary) -> TrieCurieUtil:
    if dictionary is None:
        return get_default_curie_util()
    return TrieCurieUtil.from_file(dictionary)


def _emit(values, converted, *, strict: bool, passthrough: bool) -> None:
    for value, result in zip(values, converted):
        if result is not None:
            click.echo(result)
        elif strict:
            click.secho(f"could not convert {value}", fg="red", err=True)
            sys.exit(1)
        elif passthrough:
            click.echo(value)
        else:
            click.secho(f"could not convert {value}", fg="red", err=True)


DICTIONARY_OPTION = click.option(
    "--dictionary",
    type=click.Path(exists=True, dir_okay=False),
    envvar="CURIEOSA_DICTIONARY",
    help="A dictionary file with one 'PREFIX: EXPANSION' mapping per line. Defaults to the bundled one.",
)
STRICT_OPTION = click.option(
    "--strict", is_flag=True, help="Exit with an error on the first value that can't be converted."
)
PASSTHROUGH_OPTION = click.option(
    "--passthrough", is_flag=True, help="Print values that can't be converted unchanged."
)


@click.group()
def main():
    """Run the `curieosa` CLI."""


@main.command()
@click.argument("iris", nargs=-1, required=True)
@DICTIONARY_OPTION
@STRICT_OPTION
@PASSTHROUGH_OPTION
def compress(iris, dictionary, strict: bool, passthrough: bool):
    """Compress IRIs into CURIEs."""
    curie_util = _get_curie_util(dictionary)
    converted = (curie_util.compress(iri) for iri in iris)
    _emit(iris, converted, strict=strict, passthrough=passthrough)


@main.command()
@click.argument("curies", nargs=-1, required=True)
@DICTIONARY_OPTION
@STRICT_OPTION
@PASSTHROUGH_OPTION
def expand(curies, dictionary, strict: bool, passthrough: bool):
    """Expand CURIEs into IRIs."""
    curie_util = _get_curie_util(dictionary)
    converted = (curie_util.expand(curie) for curie in curies)
    _emit(curies, converted, strict=strict, passthrough=passthrough)


@main.command()
@DICTIONARY_OPTION
def prefixes(dictionary):
    """List all prefixes and their expansions."""
    curie_util = _get_curie_util(dictionary)
    for prefix, expansion in sorted(curie_util.prefix_map.items()):
        click.echo(f"{prefix}\t{expansion}")


@main.command()
@click.argument("iri", default=DEFAULT_BENCHMARK_IRI)
@DICTIONARY_OPTION
@click.option("--iterations", type=click.IntRange(min=1), default=100_000, show_default=True)
def benchmark(iri: str, dictionary, iterations: int):
    """Time finding the CURIE parts of an IRI."""
    curie_util = _get_curie_util(dictionary)
    start = time.perf_counter()
    for _ in range(iterations):
        curie_util.get_curie_data(iri)
    elapsed = time.perf_counter() - start
    click.echo(
        f"TrieCurieUtil.get_curie_data: {elapsed / iterations * 1e9:,.0f} ns/iter "
        f"({iterations:,} iterations)"
    )


if __name__ == "__main__":
    main()
