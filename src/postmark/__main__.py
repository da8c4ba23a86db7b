"""Allow ``python -m postmark``."""

from postmark.ui.cli import main


if __name__ == "__main__":
    main()
