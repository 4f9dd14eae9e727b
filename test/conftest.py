"""
Shared test configuration/fixtures for the VOICEPEAK wrapper.
"""

import logging
from pathlib import Path
from typing import Dict, List, Sequence, Union

import pytest

import voicepeak.infrastructure.adapters.voicepeak_client as vc

logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@pytest.fixture
def fake_exe(tmp_path) -> str:
    """An existing file standing in for the VOICEPEAK executable."""
    exe = tmp_path / "voicepeak"
    exe.write_text("", encoding="utf-8")
    return str(exe)


class FakeRunner:
    """Replacement for run_tool that records calls and replays canned output.

    `responses` maps an argument tuple to stdout text, or to an exception to raise.
    Unknown argument lists produce empty stdout.
    """

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.exe_paths: List[str] = []
        self.timeouts: List[object] = []
        self.encodings: List[str] = []
        self.responses: Dict[tuple, Union[str, BaseException]] = {}

    def respond(self, args: Sequence[str], result: Union[str, BaseException]) -> None:
        self.responses[tuple(args)] = result

    def __call__(
        self,
        exe_path,
        args,
        *,
        timeout=None,
        operation_name="VOICEPEAK command",
        encoding="utf-8",
        custom_logger=None,
    ) -> str:
        self.calls.append(list(args))
        self.exe_paths.append(exe_path)
        self.timeouts.append(timeout)
        self.encodings.append(encoding)
        result = self.responses.get(tuple(args), "")
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture
def fake_runner(monkeypatch) -> FakeRunner:
    runner = FakeRunner()
    monkeypatch.setattr(vc, "run_tool", runner)
    return runner


@pytest.fixture
def client(fake_exe, fake_runner) -> vc.VoicepeakClient:
    return vc.VoicepeakClient(fake_exe)


@pytest.fixture
def text_file(tmp_path) -> Path:
    p = tmp_path / "script.txt"
    p.write_text("こんにちは", encoding="utf-8")
    return p
