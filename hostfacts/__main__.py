"""Allow ``python -m hostfacts``."""

from hostfacts.cli import main

if __name__ == "__main__":
    main()
