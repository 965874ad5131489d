"""
External command abstraction. Handlers only talk to a ``CommandRunner``
so tests can hand them a fake that records argv lists.
"""

import logging
import subprocess

from dataclasses import dataclass
from typing import Protocol, Sequence

from raur.config import PRIVILEGE_WRAPPER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    def run(
        self, args: Sequence[str], cwd: str | None = None, capture: bool = False
    ) -> CommandResult: ...


class SubprocessRunner:
    """
    Runs commands synchronously with no timeout. With ``capture`` the output
    is collected as text, otherwise the child inherits the terminal so that
    sudo, pacman and makepkg can talk to the user.
    """

    def run(self, args, cwd=None, capture=False) -> CommandResult:
        argv = list(args)
        logger.debug("run %s (cwd=%s)", " ".join(argv), cwd or ".")
        if capture:
            proc = subprocess.run(
                argv, cwd=cwd, stdout=subprocess.PIPE, stderr=subprocess.PIPE,
                text=True, errors="replace"
            )
            result = CommandResult(proc.returncode, proc.stdout or "", proc.stderr or "")
        else:
            proc = subprocess.run(argv, cwd=cwd)
            result = CommandResult(proc.returncode)
        logger.debug("exit %d ← %s", result.returncode, argv[0])
        return result


def privileged(argv: Sequence[str]) -> list[str]:
    """Prefix argv with the privilege-escalation wrapper."""
    return [PRIVILEGE_WRAPPER, *argv]
