from selectorkit.cli.main import cli

__all__ = ["cli"]
