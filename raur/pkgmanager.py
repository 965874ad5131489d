# raur/pkgmanager.py

import logging

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from raur.backends import aur, pacman
from raur.config import RESULT_LIMIT
from raur.utils.cache import prepare_workspace
from raur.utils.errors import handle_errors
from raur.utils.runner import SubprocessRunner

logger = logging.getLogger("raur")
console = Console()

runner = SubprocessRunner()
aur_client = aur.AurClient()


def _require_names(names, action):
    if not names or any(not n for n in names):
        raise ValueError(f"{action} requires package names")


def _report(ok: bool, success: str, failure: str):
    if ok:
        console.print(f"✅ {success}")
    else:
        console.print(f"❌ {failure}")


@handle_errors
def search(query: str, pacman_only: bool = False, aur_only: bool = False):
    if not query:
        raise ValueError("search requires a query")

    console.print(f"🔍 Searching for '[blue]{escape(query)}[/blue]'...")

    # --pacman-only wins when both flags are given
    if pacman_only or not aur_only:
        _search_official(query)
    if not pacman_only:
        _search_aur(query)


def _search_official(query: str):
    lines = pacman.search(runner, query)
    if not lines:
        console.print("⚠️ Not found in official repos")
        return
    console.print("📦 Found in official repos:")
    for line in lines[:RESULT_LIMIT]:
        console.print(f"  [green]{escape(line)}[/green]", highlight=False)


def _search_aur(query: str):
    resp = aur_client.search(query)
    if resp.resultcount <= 0:
        console.print("❌ No packages found in AUR")
        return

    console.print(f"🌐 Found {resp.resultcount} packages in AUR:")
    table = Table(show_lines=False)
    table.add_column("Name", style="green", no_wrap=True)
    table.add_column("Version", style="yellow")
    table.add_column("Description", style="white")
    for pkg in resp.results[:RESULT_LIMIT]:
        table.add_row(escape(pkg.name), escape(pkg.version), escape(pkg.summary))
    console.print(table)


@handle_errors
def install(packages: list[str], cascade: bool = False):
    _require_names(packages, "install")
    for name in packages:
        if pacman.available(runner, name):
            _install_official(name)
        else:
            _install_aur(name, cascade)


def _install_official(name: str):
    pkg = escape(name)
    console.print(f"📦 Installing '[green]{pkg}[/green]' from official repos")
    res = pacman.install(runner, name)
    _report(
        res.ok,
        f"Installed '[green]{pkg}[/green]' from official repos",
        f"Failed to install '[red]{pkg}[/red]' from official repos",
    )


def _install_aur(name: str, cascade: bool):
    pkg = escape(name)
    console.print(f"🌐 '[yellow]{pkg}[/yellow]' not found in official repos, building from AUR")

    ws = prepare_workspace(name)
    if not aur.clone(runner, name, ws).ok:
        console.print("[red]❌ Git clone failed[/red]")
        return

    # left in place afterwards so the build can be inspected
    with console.status("Building package...", spinner="dots"):
        res = aur.build(runner, ws, cascade=cascade)

    _report(
        res.ok,
        f"Installed '[green]{pkg}[/green]' from AUR",
        f"Failed to install '[red]{pkg}[/red]' from AUR",
    )


@handle_errors
def remove(packages: list[str], purge: bool = False):
    _require_names(packages, "remove")
    for name in packages:
        _remove_one(name, purge)


def _remove_one(name: str, purge: bool):
    pkg = escape(name)
    try:
        answer = console.input(f"⚠️  Are you sure you want to remove '{pkg}'? \\[y/N]: ")
    except EOFError:
        # closed stdin counts as an empty answer
        answer = ""
    if answer.strip().lower() != "y":
        console.print("[yellow]Aborted[/yellow]")
        return

    res = pacman.remove(runner, name, purge=purge)
    _report(
        res.ok,
        f"Removed '[green]{pkg}[/green]'",
        f"Failed to remove '[red]{pkg}[/red]'",
    )


def _sync(full: bool):
    res = pacman.sync(runner, full=full)
    _report(res.ok, "Database synced successfully", "Database sync failed")


@handle_errors
def update(full: bool = False):
    _sync(full)


@handle_errors
def upgrade(full: bool = False):
    # only official packages; AUR builds are not revisited
    _sync(full)
    res = pacman.upgrade(runner)
    _report(res.ok, "System upgraded successfully", "Upgrade failed")
