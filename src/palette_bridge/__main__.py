"""Main entry point for palette-bridge (`python -m palette_bridge`)."""

from palette_bridge.cli.main import cli


def main():
    """Run the CLI."""
    cli(prog_name="palette-bridge")


if __name__ == "__main__":
    main()
