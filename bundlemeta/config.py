"""Load bundlemeta settings from TOML (e.g. bundlemeta.toml).

Settings live in the ``[bundle]`` table::

    [bundle]
    meta_id_prefix = "bundle-identity."
    archive_extension = "bundle"

When no explicit path is given, the file is looked up in order:
  1. Path in BUNDLEMETA_CONFIG env var (if set)
  2. bundlemeta.toml in the current working directory

If no file is found, built-in defaults are used.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

from bundlemeta.logging import setup_logging

logger = setup_logging()

CONFIG_ENV_VAR = "BUNDLEMETA_CONFIG"
CONFIG_FILENAME = "bundlemeta.toml"
CONFIG_TABLE = "bundle"

DEFAULT_META_ID_PREFIX = "Bundle-"
DEFAULT_ARCHIVE_EXTENSION = "bundle"


class BundleProperties(BaseModel):
    """Caller-supplied settings for reading bundles."""

    meta_id_prefix: str = Field(
        DEFAULT_META_ID_PREFIX,
        description="Prefix prepended to identity keys such as Group, Id and Version",
    )
    archive_extension: str = Field(
        DEFAULT_ARCHIVE_EXTENSION,
        description="File extension (without dot) of bundle archives",
    )
    additional: dict[str, str] = Field(
        default_factory=dict,
        description="Any other settings found in the [bundle] table",
    )


def _default_config_paths() -> list[Path]:
    """Return paths to check for bundlemeta.toml (first existing wins)."""
    paths: list[Path] = []
    if os.environ.get(CONFIG_ENV_VAR):
        paths.append(Path(os.environ[CONFIG_ENV_VAR]))
    paths.append(Path.cwd() / CONFIG_FILENAME)
    return paths


def _read_table(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        data = tomllib.load(f)
    table = data.get(CONFIG_TABLE)
    return table if isinstance(table, dict) else {}


def load_bundle_properties(
    path: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> BundleProperties:
    """Build :class:`BundleProperties` from a TOML file and explicit overrides.

    Args:
        path: Config file to read. When omitted, the default locations are
            searched and unreadable or malformed files there are skipped.
        overrides: Values that win over anything read from file.

    Raises:
        FileNotFoundError: If ``path`` is given but does not exist.
        tomllib.TOMLDecodeError: If ``path`` is given but is not valid TOML.
    """
    table: dict[str, Any] = {}
    if path is not None:
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")
        table = _read_table(path)
    else:
        for candidate in _default_config_paths():
            if candidate.is_file():
                try:
                    table = _read_table(candidate)
                except (OSError, ValueError) as e:
                    logger.warning("Ignoring unreadable config %s: %s", candidate, e)
                    continue
                logger.debug("Loaded config from %s", candidate)
                break

    values: dict[str, Any] = {**table, **(overrides or {})}
    extra = values.pop("additional", None)
    additional = {str(k): str(v) for k, v in extra.items()} if isinstance(extra, dict) else {}

    known: dict[str, Any] = {}
    for name in ("meta_id_prefix", "archive_extension"):
        if name in values:
            known[name] = values.pop(name)
    if "archive_extension" in known:
        known["archive_extension"] = str(known["archive_extension"]).lstrip(".")

    additional.update({str(k): str(v) for k, v in values.items()})
    return BundleProperties(**known, additional=additional)
