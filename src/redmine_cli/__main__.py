"""Main entry point for ``python -m redmine_cli``."""

from redmine_cli.cli import main

if __name__ == "__main__":
    main()
