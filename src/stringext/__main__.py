"""Entry point for `python -m stringext` and `stringext` CLI."""

from stringext.cli.app import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
