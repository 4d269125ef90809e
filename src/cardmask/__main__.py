"""Allow ``python -m cardmask``."""

from cardmask.cli import main

main()
