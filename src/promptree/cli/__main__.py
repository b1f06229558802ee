"""Allow running the CLI with `python -m promptree.cli`."""

from promptree.cli import cli_main

cli_main()
