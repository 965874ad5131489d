import logging
import shutil

from pathlib import Path

from raur.config import cache_root

logger = logging.getLogger(__name__)


def workspace_path(name: str, root: Path | None = None) -> Path:
    """
    <cache root>/<name>. Names that could point anywhere else (empty,
    "." / "..", or containing a path separator) raise ValueError.
    """
    if not name or name in (".", "..") or "/" in name or "\0" in name:
        raise ValueError(f"invalid package name for a build workspace: {name!r}")
    return (root or cache_root()) / name


def prepare_workspace(name: str, root: Path | None = None) -> Path:
    """
    Make sure the cache root exists and that no earlier checkout of
    ``name`` is left in it. Returns the (not yet existing) workspace path
    for the clone to create. OSError propagates.
    """
    root = root or cache_root()
    ws = workspace_path(name, root)
    root.mkdir(parents=True, exist_ok=True)
    if ws.exists():
        logger.debug("removing stale workspace %s", ws)
        shutil.rmtree(ws)
    return ws
