import asyncio

import pytest

from win_printers.printers import windows


SAMPLE_OUTPUT = (
    "\r\n"
    "DeviceID          : HP01\r\n"
    "Name              : HP LaserJet\r\n"
    "PrinterPaperNames : {A4, Letter}\r\n"
    "\r\n"
    "DeviceID          : Canon_Pixma\r\n"
    "Name              : Canon PIXMA\r\n"
    "PrinterPaperNames : {A4, A3}\r\n"
    "\r\n"
    "\r\n"
)


class FakePowerShell:
    """Stands in for run_powershell and records every command it receives."""

    def __init__(self, stdout="", error=None):
        self.stdout = stdout
        self.error = error
        self.calls = []

    async def __call__(self, command):
        self.calls.append(command)
        if self.error is not None:
            raise self.error
        return self.stdout


@pytest.fixture
def on_windows(monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "Windows")


@pytest.fixture
def on_linux(monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "Linux")


@pytest.fixture
def fake_powershell(monkeypatch):
    def install(stdout="", error=None):
        fake = FakePowerShell(stdout=stdout, error=error)
        monkeypatch.setattr(windows, "run_powershell", fake)
        return fake
    return install


def run(coro):
    return asyncio.run(coro)
