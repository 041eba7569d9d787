"""CLI utility functions and helpers."""

import click

# Global flag for quiet mode
_quiet_mode = False


def set_quiet_mode(quiet: bool) -> None:
    """Set the global quiet mode flag."""
    global _quiet_mode
    _quiet_mode = quiet


def echo(message: str = "", err: bool = False, **kwargs) -> None:
    """Echo wrapper that respects quiet mode."""
    if _quiet_mode and not err:
        return
    click.echo(message, err=err, **kwargs)


def secho(message: str = "", err: bool = False, **kwargs) -> None:
    """Styled echo wrapper that respects quiet mode."""
    if _quiet_mode and not err:
        return
    click.secho(message, err=err, **kwargs)
