"""Console script entry point."""

from goat_interop.interfaces.cli import CLIInterface


def main() -> None:
    """Start the command line interface."""
    CLIInterface().run()


if __name__ == "__main__":
    main()
