"""Allow ``python -m hexagen``."""

from hexagen.cli import main

if __name__ == "__main__":
    main()
