"""Entry point for `python -m letterboxed`."""

from letterboxed import main

main()
