# raur/cli.py
#!/usr/bin/env python3
import sys
import argparse

from rich.console import Console

from raur import __version__
from raur.pkgmanager import install, search, remove, update, upgrade
from raur.utils.errors import set_verbose
from raur.utils.osdetect import is_arch_based

console = Console()


class RichParser(argparse.ArgumentParser):
    def error(self, message):
        console.print(f"[bold red]Error:[/] {message}\n")
        self.print_help()
        sys.exit(2)


def build_parser():
    parser = RichParser(
        prog="raur",
        description="AUR + Pacman helper",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every external command"
    )

    sub = parser.add_subparsers(
        dest="command", metavar="command", parser_class=RichParser
    )
    sub.required = True

    p = sub.add_parser("search", help="Search for packages")
    p.add_argument("query", help="Search term (passed to pacman and the AUR as-is)")
    p.add_argument(
        "--pacman-only", action="store_true", help="Search only official Pacman repos"
    )
    p.add_argument("--aur-only", action="store_true", help="Search only AUR")

    p = sub.add_parser("install", help="Install a package")
    p.add_argument("packages", nargs="+", help="Package names")
    p.add_argument(
        "-c", "--cascade", action="store_true",
        help="Clean build files and make-dependencies after an AUR build"
    )

    p = sub.add_parser("remove", help="Remove a package")
    p.add_argument("packages", nargs="+", help="Package names")
    p.add_argument(
        "--purge", action="store_true", help="Also delete configuration files"
    )

    p = sub.add_parser("update", help="Sync database")
    p.add_argument(
        "-y", "--full", action="store_true", help="Force a full refresh (-Syy)"
    )

    p = sub.add_parser("upgrade", help="Upgrade system")
    p.add_argument(
        "-y", "--full", action="store_true", help="Force a full refresh first (-Syy)"
    )

    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    set_verbose(args.verbose)

    if not is_arch_based():
        console.print(
            "[yellow]⚠️ This does not look like an Arch-based system; "
            "pacman and makepkg may be missing.[/yellow]"
        )

    act = args.command
    if act == "search":
        search(args.query, pacman_only=args.pacman_only, aur_only=args.aur_only)
    elif act == "install":
        install(args.packages, cascade=args.cascade)
    elif act == "remove":
        remove(args.packages, purge=args.purge)
    elif act == "update":
        update(full=args.full)
    elif act == "upgrade":
        upgrade(full=args.full)
    else:
        console.print(f"[bold red]Unknown action:[/] {act}")
        sys.exit(1)


if __name__ == "__main__":
    main()
