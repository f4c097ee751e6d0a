"""Allow ``python -m envinject_cli``."""

from envinject_cli.cli import main

if __name__ == "__main__":
    main()
