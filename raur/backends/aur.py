# raur/backends/aur.py

import logging

from dataclasses import dataclass, field

import requests

from raur.config import AUR_CLONE_URL, AUR_SEARCH_URL, GIT, MAKEPKG, NO_DESCRIPTION
from raur.utils.runner import CommandResult, CommandRunner

logger = logging.getLogger(__name__)


@dataclass
class AurPackage:
    name: str
    version: str
    description: str | None = None

    @property
    def summary(self) -> str:
        return self.description or NO_DESCRIPTION

    @classmethod
    def from_json(cls, r: dict) -> "AurPackage":
        return cls(
            name=r["Name"],
            version=r["Version"],
            description=r.get("Description"),
        )


@dataclass
class AurSearchResponse:
    resultcount: int
    results: list[AurPackage] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> "AurSearchResponse":
        return cls(
            resultcount=int(data["resultcount"]),
            results=[AurPackage.from_json(r) for r in data.get("results") or []],
        )


class AurClient:
    """
    Thin wrapper over the AUR RPC search endpoint. The query is put into
    the URL as given; callers pass something URL-safe. Any network, status
    or decoding error is raised, not swallowed.
    """

    def __init__(self, session: requests.Session | None = None):
        self.session = session or requests.Session()

    def search(self, query: str) -> AurSearchResponse:
        url = AUR_SEARCH_URL.format(query=query)
        logger.debug("GET %s", url)
        r = self.session.get(url)
        r.raise_for_status()
        resp = AurSearchResponse.from_json(r.json())
        logger.debug("AUR returned %d results for %r", resp.resultcount, query)
        return resp


def clone_url(name: str) -> str:
    return AUR_CLONE_URL.format(name=name)


def clone(runner: CommandRunner, name: str, dest) -> CommandResult:
    return runner.run([GIT, "clone", clone_url(name), str(dest)])


def makepkg_args(cascade: bool = False) -> list[str]:
    # -c cleans build files and makedepends once the package is installed
    return ["-sci", "--noconfirm"] if cascade else ["-si", "--noconfirm"]


def build(runner: CommandRunner, workspace, cascade: bool = False) -> CommandResult:
    return runner.run([MAKEPKG, *makepkg_args(cascade)], cwd=str(workspace))
