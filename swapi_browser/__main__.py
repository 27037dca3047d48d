"""Entrypoint for `python -m swapi_browser`."""

from .cli import main


if __name__ == "__main__":
    main()
