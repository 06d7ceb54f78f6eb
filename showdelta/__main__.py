"""Allow `python -m showdelta`."""

from showdelta.cli import main

main()
