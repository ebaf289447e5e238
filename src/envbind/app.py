"""Main CLI application for envbind."""

from __future__ import annotations

from typing import Optional

import typer
from dotenv import load_dotenv

from .core.binder import Binder
from .core.errors import EnvBindError
from .logging import configure_logging, get_logger
from .utils.loader import load_target

app = typer.Typer(add_completion=False)

# Configure logging at module level
configure_logging()
logger = get_logger(__name__)


@app.command()
def usage(
    target: str = typer.Argument(..., help="Dataclass to document, as module:Class"),
    prefix: str = typer.Option("", "--prefix", "-p", help="Variable prefix"),
) -> None:
    """Print the environment variables a dataclass reads."""
    try:
        instance = load_target(target)
        typer.echo(Binder(prefix).usage(instance), nl=False)
    except (EnvBindError, ImportError, AttributeError, TypeError) as e:
        logger.error("Usage failed", target=target, error=str(e))
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


@app.command()
def check(
    target: str = typer.Argument(..., help="Dataclass to bind, as module:Class"),
    prefix: str = typer.Option("", "--prefix", "-p", help="Variable prefix"),
    strict: bool = typer.Option(False, "--strict", help="Reject unknown variables under the prefix"),
    env_file: Optional[str] = typer.Option(None, "--env-file", help="dotenv file to load first"),
) -> None:
    """Bind the current environment into a dataclass and report the result."""
    if env_file:
        load_dotenv(env_file, override=False)
        logger.info("Loaded env file", path=env_file)

    binder = Binder(prefix)
    try:
        instance = load_target(target)
        binder.bind(instance)
        if strict:
            binder.check_disallowed(instance)
    except (EnvBindError, ImportError, AttributeError, TypeError) as e:
        logger.error("Check failed", target=target, error=str(e))
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    logger.info("Check passed", target=target, prefix=binder.prefix)
    typer.echo("ok")


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    logger.info("Version requested", version=__version__)
    typer.echo(f"envbind {__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
