"""Allow ``python -m mergebench``."""

from .cli import main

if __name__ == "__main__":
    main()
