"""Entry point of the `licitax` command."""

from licitax_advisor.cli import create_cli

cli = create_cli()


def main() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
