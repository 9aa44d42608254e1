"""Utility helpers for resolving the workspace and its data directory."""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_DIR = "data"


def workspace_root() -> Path:
    """Return the directory holding ``config.yml`` and ``data/``.

    This is the current working directory, so an installed ``crtsim`` reads
    and writes next to where it is launched rather than inside site-packages.
    """

    return Path.cwd()


def coerce_data_path(
    path: str | Path,
    default_suffix: str | None = None,
    data_root: str | Path | None = None,
) -> Path:
    """Anchor relative paths under ``data_root`` and add a missing suffix.

    Args:
        path: Absolute path, or a path relative to the data directory.
        default_suffix: Suffix appended when ``path`` has none.
        data_root: Data directory; defaults to ``<workspace_root>/data``.
    """

    target = Path(path).expanduser()
    if not target.is_absolute():
        root = Path(data_root) if data_root is not None else workspace_root() / DEFAULT_DATA_DIR
        target = root / target
    if default_suffix and target.suffix == "":
        target = target.with_suffix(default_suffix)
    return target
