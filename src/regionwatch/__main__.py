"""Allow ``python -m regionwatch``."""

from regionwatch.cli.app import main

main()
