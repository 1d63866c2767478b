"""
Configuration and path management.

Provides site root detection, standard content paths and the site
configuration read from ``folio.yaml``.

Resolution order for site root:
  1. FOLIO_SITE_ROOT environment variable (highest priority)
  2. Walk up from cwd looking for a folio.yaml file
  3. Global config file (~/.config/folio/config.yaml) site_root key
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from folio.core.errors import ContractViolation

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "folio.yaml"
DEFAULT_BASE_PATH = "/"
DEFAULT_SITE_URL = "https://example.com"
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class SitePaths:
    """Standard paths for the site."""

    root: Path
    config_file: Path
    content: Path

    # Content collections
    posts: Path
    tabs: Path
    music: Path

    # Static data
    data: Path
    series_file: Path


@dataclass(frozen=True)
class SiteConfig:
    """Site-wide settings from folio.yaml."""

    base_path: str = DEFAULT_BASE_PATH
    site_url: str = DEFAULT_SITE_URL
    page_size: int = DEFAULT_PAGE_SIZE
    production: bool = False
    series: list[dict[str, Any]] = field(default_factory=list)


def get_global_config_path() -> Path:
    """Return the path to the global folio config file.

    Respects XDG_CONFIG_HOME if set, otherwise defaults to
    ~/.config/folio/config.yaml.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"
    return base / "folio" / "config.yaml"


def _read_yaml_dict(path: Path) -> dict:
    """Read a YAML mapping, returning {} for missing, invalid or non-dict files."""
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError):
        logger.debug("Could not read %s", path, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config() -> dict:
    """Load the global folio configuration.

    Returns:
        Configuration dict, or empty dict if file is missing or invalid.
    """
    return _read_yaml_dict(get_global_config_path())


def _walk_up_for_config(start_path: Path) -> Path | None:
    current = start_path.resolve()
    while True:
        if (current / CONFIG_FILENAME).is_file():
            return current
        if current == current.parent:
            return None
        current = current.parent


def find_site_root(start_path: Path | None = None) -> Path:
    """Find the site root using 3-tier resolution.

    Args:
        start_path: Starting path for the folio.yaml walk (defaults to cwd)

    Returns:
        Path to site root

    Raises:
        FileNotFoundError: If no site root can be found by any method
    """
    env_root = os.environ.get("FOLIO_SITE_ROOT")
    if env_root:
        env_path = Path(env_root).expanduser().resolve()
        if env_path.is_dir():
            return env_path
        raise FileNotFoundError(f"FOLIO_SITE_ROOT={env_root} is not a directory.")

    if start_path is None:
        start_path = Path.cwd()
    result = _walk_up_for_config(Path(start_path))
    if result is not None:
        return result

    site_root_str = load_global_config().get("site_root")
    if site_root_str:
        global_path = Path(site_root_str).expanduser().resolve()
        if global_path.is_dir():
            return global_path
        raise FileNotFoundError(
            f"Global config site_root={site_root_str} is not a directory."
        )

    raise FileNotFoundError(
        f"Could not find {CONFIG_FILENAME} starting from {start_path}. "
        f"Create one at the site root, set FOLIO_SITE_ROOT, or configure "
        f"site_root in {get_global_config_path()}."
    )


@lru_cache(maxsize=1)
def get_site_root() -> Path:
    """Get the cached site root path."""
    return find_site_root()


def get_paths(site_root: Path | None = None) -> SitePaths:
    """Get all standard paths for the site.

    Args:
        site_root: Site root path (uses cached default if not provided)
    """
    if site_root is None:
        site_root = get_site_root()

    site_root = Path(site_root)
    content = site_root / "content"

    return SitePaths(
        root=site_root,
        config_file=site_root / CONFIG_FILENAME,
        content=content,
        posts=content / "posts",
        tabs=content / "tabs",
        music=content / "music",
        data=site_root / "data",
        series_file=site_root / "data" / "series.yaml",
    )


def _env_production() -> bool | None:
    """Read FOLIO_ENV; None when unset."""
    env = os.environ.get("FOLIO_ENV")
    if not env:
        return None
    return env.strip().lower() == "production"


def load_site_config(site_root: Path | None = None) -> SiteConfig:
    """Load folio.yaml into a SiteConfig.

    Missing keys fall back to defaults. Series definitions come from the
    ``series`` key, or from data/series.yaml when folio.yaml has none.

    Raises:
        ContractViolation: If page_size is not a positive integer
    """
    paths = get_paths(site_root)
    data = _read_yaml_dict(paths.config_file)

    page_size = data.get("page_size", DEFAULT_PAGE_SIZE)
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
        raise ContractViolation(f"page_size must be a positive integer, got {page_size!r}")

    series = data.get("series")
    if series is None and paths.series_file.is_file():
        try:
            series = yaml.safe_load(paths.series_file.read_text(encoding="utf-8"))
        except yaml.YAMLError:
            logger.warning("Invalid YAML in %s, ignoring series data", paths.series_file)
            series = None
    if not isinstance(series, list):
        series = []

    # FOLIO_ENV overrides the file setting
    production = _env_production()
    if production is None:
        production = data.get("production", False)

    return SiteConfig(
        base_path=str(data.get("base_path") or DEFAULT_BASE_PATH),
        site_url=str(data.get("site_url") or DEFAULT_SITE_URL),
        page_size=page_size,
        production=bool(production),
        series=series,
    )
