"""Allow ``python -m txt2pdf``."""

from .cli import main

if __name__ == "__main__":
    main()
