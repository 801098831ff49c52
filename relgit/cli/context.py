from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relgit.core.config import CONFIG_FILENAME, Config, load_config
from relgit.core.errors import ErrorCode
from relgit.core.result import Err
from relgit.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol


def build_context(config_path: Path | None = None, *, verbose: bool = False) -> CLIContext:
    """Load configuration and set up the console.

    An explicit ``config_path`` must load. Without one, ``relgit.toml`` in
    the current directory is used when present and defaults otherwise.
    """
    console = RichConsole(verbose=verbose)

    path = config_path if config_path is not None else Path.cwd() / CONFIG_FILENAME
    if config_path is None and not path.exists():
        return CLIContext(config=Config(), console=console)

    result = load_config(path)
    if isinstance(result, Err):
        typer.echo(f"error: {result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    console.debug(f"Loaded config from {path}")
    return CLIContext(config=result.value, console=console)
