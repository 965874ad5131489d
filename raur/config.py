# raur/config.py

import os

from pathlib import Path

AUR_BASE = "https://aur.archlinux.org"
AUR_SEARCH_URL = AUR_BASE + "/rpc/?v=5&type=search&arg={query}"
AUR_CLONE_URL = AUR_BASE + "/{name}.git"

PACMAN = "pacman"
GIT = "git"
MAKEPKG = "makepkg"
PRIVILEGE_WRAPPER = "sudo"

RESULT_LIMIT = 10
NO_DESCRIPTION = "No description"


def cache_root() -> Path:
    """
    <$HOME or /tmp>/.cache/raur, resolved on every call so a changed HOME
    is picked up.
    """
    home = os.environ.get("HOME") or "/tmp"
    return Path(home) / ".cache" / "raur"
