"""Module entrypoint for ``python -m iconls``."""

from .cli import main


if __name__ == "__main__":
    main()
