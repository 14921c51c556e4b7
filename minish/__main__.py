"""Allow ``python -m minish``."""

from .cli import main

if __name__ == "__main__":
    main()
