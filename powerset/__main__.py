"""Allow ``python -m powerset``."""

from powerset.cli import main

if __name__ == "__main__":
    main()
