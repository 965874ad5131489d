# raur/backends/pacman.py

import logging

from raur.config import PACMAN
from raur.utils.runner import CommandResult, CommandRunner, privileged

logger = logging.getLogger(__name__)


def _select_cmd(action: str, arg: str | None = None, **opts) -> list[str]:
    """
    Returns the pacman argv for search/install/remove/sync/upgrade.
    Privileged actions come back already wrapped in sudo.
    """
    if action == "search":
        return [PACMAN, "-Ss", arg]
    if action == "install":
        return privileged([PACMAN, "-S", arg, "--noconfirm"])
    if action == "remove":
        flag = "-Rns" if opts.get("purge") else "-Rs"
        return privileged([PACMAN, flag, arg, "--noconfirm"])
    if action == "sync":
        return privileged([PACMAN, "-Syy" if opts.get("full") else "-Sy"])
    if action == "upgrade":
        return privileged([PACMAN, "-Syu", "--noconfirm"])
    raise ValueError(f"unknown pacman action: {action}")


def _search_output(runner: CommandRunner, query: str) -> str:
    return runner.run(_select_cmd("search", query), capture=True).stdout


def search(runner: CommandRunner, query: str) -> list[str]:
    """
    Raw `pacman -Ss` output lines; empty when nothing matched (pacman
    exits 1 in that case, which is not an error here).
    """
    return _search_output(runner, query).splitlines()


def available(runner: CommandRunner, name: str) -> bool:
    """
    True if the official repos know anything matching ``name``. This is the
    same substring search as `search`, not an exact name lookup.
    """
    found = bool(_search_output(runner, name))
    logger.debug("%s in official repos: %s", name, found)
    return found


def install(runner: CommandRunner, name: str) -> CommandResult:
    return runner.run(_select_cmd("install", name))


def remove(runner: CommandRunner, name: str, purge: bool = False) -> CommandResult:
    return runner.run(_select_cmd("remove", name, purge=purge))


def sync(runner: CommandRunner, full: bool = False) -> CommandResult:
    return runner.run(_select_cmd("sync", full=full))


def upgrade(runner: CommandRunner) -> CommandResult:
    return runner.run(_select_cmd("upgrade"))
