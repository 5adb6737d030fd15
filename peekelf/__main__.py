"""Allow ``python -m peekelf``."""

from peekelf.cli import main

main()
