"""Command line interface for :mod:`curieosa`."""

from .cli import main

if __name__ == "__main__":
    main()
