"""Allow running checkmore as a module: python -m checkmore."""

from checkmore.cli.main import cli

if __name__ == "__main__":
    cli()
