"""Allow ``python -m remarshal``."""

from .cli import main

main()
