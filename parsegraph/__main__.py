"""Allow ``python -m parsegraph``."""

from parsegraph.cli import main

main()
