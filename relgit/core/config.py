"""Typed configuration loading.

An optional ``relgit.toml`` tunes the repository handle and the default
GitHub project:

    [git]
    remote = "origin"
    default_branch = "master"
    max_retries = 3
    dry_run = false

    [github]
    org = "kubernetes"
    repo = "kubernetes"
    use_ssh = false
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from relgit.constants import (
    DEFAULT_BRANCH,
    DEFAULT_GITHUB_ORG,
    DEFAULT_GITHUB_REPO,
    DEFAULT_REMOTE,
)

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_int, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "GitConfig",
    "GitHubConfig",
    "CONFIG_FILENAME",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "relgit.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class GitConfig:
    """Repository handle settings."""

    remote: str = DEFAULT_REMOTE
    default_branch: str = DEFAULT_BRANCH
    max_retries: int = 0
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """Project used when cloning without an explicit URL."""

    org: str = DEFAULT_GITHUB_ORG
    repo: str = DEFAULT_GITHUB_REPO
    use_ssh: bool = False


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    git: GitConfig = field(default_factory=GitConfig)
    github: GitHubConfig = field(default_factory=GitHubConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If ``git.max_retries`` is negative.
        """
        git: StrDict = get_table(data, "git") or {}
        github: StrDict = get_table(data, "github") or {}

        max_retries = get_int(git, "max_retries")
        if max_retries is not None and max_retries < 0:
            raise ValueError(f"git.max_retries must be >= 0, got {max_retries}")

        dry_run = get_bool(git, "dry_run")
        use_ssh = get_bool(github, "use_ssh")

        return cls(
            git=GitConfig(
                remote=get_str(git, "remote") or DEFAULT_REMOTE,
                default_branch=get_str(git, "default_branch") or DEFAULT_BRANCH,
                max_retries=max_retries or 0,
                dry_run=dry_run if dry_run is not None else False,
            ),
            github=GitHubConfig(
                org=get_str(github, "org") or DEFAULT_GITHUB_ORG,
                repo=get_str(github, "repo") or DEFAULT_GITHUB_REPO,
                use_ssh=use_ssh if use_ssh is not None else False,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling import and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the default config on any failure."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config()
