"""Run ``python -m textpreview``."""

from textpreview.cli import main

main()
