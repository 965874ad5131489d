import io

import pytest
import requests
from rich.console import Console

from raur import pkgmanager
from raur.backends.aur import AurClient
from raur.utils.runner import CommandResult


class FakeRunner:
    """Records argv lists; answers from (argv prefix, result) rules, first match wins."""

    def __init__(self):
        self.calls = []
        self.rules = []

    def on(self, prefix, returncode=0, stdout=""):
        self.rules.append((list(prefix), CommandResult(returncode, stdout)))
        return self

    def run(self, args, cwd=None, capture=False):
        argv = list(args)
        self.calls.append({"args": argv, "cwd": cwd, "capture": capture})
        for prefix, result in self.rules:
            if argv[: len(prefix)] == prefix:
                return result
        return CommandResult(0)

    def argvs(self):
        return [c["args"] for c in self.calls]

    def called(self, binary):
        return [c for c in self.calls if binary in c["args"][:2]]


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    def __init__(self, payload=None, status=200, error=None):
        self.payload = payload if payload is not None else {"resultcount": 0, "results": []}
        self.status = status
        self.error = error
        self.urls = []

    def get(self, url):
        self.urls.append(url)
        if self.error:
            raise self.error
        return FakeResponse(self.payload, self.status)


@pytest.fixture
def fake_runner(monkeypatch):
    runner = FakeRunner()
    monkeypatch.setattr(pkgmanager, "runner", runner)
    return runner


@pytest.fixture
def fake_session(monkeypatch):
    session = FakeSession()
    monkeypatch.setattr(pkgmanager, "aur_client", AurClient(session=session))
    return session


@pytest.fixture
def output(monkeypatch):
    buf = io.StringIO()
    monkeypatch.setattr(
        pkgmanager, "console", Console(file=buf, force_terminal=False, width=200)
    )
    return buf


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


def aur_result(name, version="1.0-1", description="desc"):
    return {"Name": name, "Version": version, "Description": description}
