"""CLI interface for ranking lines by usage."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from baus import __version__
from baus.config import DEFAULT_NAME, Action, ConfigError, build_config, load_defaults
from baus.lines import InputError, write_lines
from baus.runner import SelectorRunner
from ranking import ClockError, ValueKind
from store import StoreError, StoreFormatError, StoreValueError

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Sort stdin lines by how often or how recently they were picked.",
    add_completion=False,
)

EXIT_FAILURE = 1
EXIT_FATAL = 3


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"baus {__version__}")
        raise typer.Exit()


def _fail(message: str, code: int = EXIT_FAILURE) -> typer.Exit:
    typer.secho(f"❌ {message}", fg=typer.colors.RED, err=True)
    return typer.Exit(code)


@app.command()
def main(
    name: str = typer.Option(DEFAULT_NAME, "--name", "-n", help="Name of the score cache"),
    action: Action = typer.Option(
        Action.SORT,
        "--action",
        "-a",
        case_sensitive=False,
        help="sort: print lines by score; save: record a pick of the first line",
    ),
    value: Optional[ValueKind] = typer.Option(
        None,
        "--value",
        case_sensitive=False,
        help="Score recorded on save: usage count or last-used timestamp [default: count]",
    ),
    desc: Optional[bool] = typer.Option(
        None, "--desc/--asc", help="Sort by descending score [default: asc]"
    ),
    cleanup: Optional[bool] = typer.Option(
        None,
        "--cleanup/--no-cleanup",
        help="After sorting, forget lines that were not in the input",
    ),
    cache_dir: Optional[str] = typer.Option(
        None, "--cache-dir", envvar="BAUS_CACHE_DIR", help="Directory holding score caches"
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", envvar="BAUS_CONFIG", help="YAML file with default options"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Rank lines from stdin by a persisted usage score."""
    _configure_logging(verbose)

    try:
        defaults = load_defaults(config_path)
        config = build_config(
            {
                "name": name,
                "action": action,
                "value": value,
                "desc": desc,
                "cleanup": cleanup,
                "cache_dir": cache_dir,
            },
            defaults,
        )
    except ConfigError as e:
        raise _fail(str(e))
    logger.debug("Effective configuration: %s", config.to_dict())

    try:
        runner = SelectorRunner(config)
        output_lines = runner.run(sys.stdin)
    except InputError as e:
        raise _fail(f"Reading input failed: {e}")
    except StoreFormatError as e:
        raise _fail(f"Loading score cache failed: {e}")
    except StoreValueError as e:
        raise _fail(f"Saving score cache failed: {e}")
    except StoreError as e:
        raise _fail(f"Score cache I/O failed: {e}")
    except ClockError as e:
        raise _fail(f"Recording timestamp failed: {e}", EXIT_FATAL)

    write_lines(output_lines)


if __name__ == "__main__":
    app()
