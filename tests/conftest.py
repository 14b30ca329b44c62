from pathlib import Path
from unittest.mock import MagicMock

import pytest

from redis_shell.config import ShellConfig
from redis_shell.interactive.output_handler import IOutputHandler
from redis_shell.interactive.session import SessionState


class RecordingOutput(IOutputHandler):
    """Collects everything the shell writes, in order."""

    def __init__(self):
        self.chunks = []

    def write(self, text: str, end: str = "\n"):
        self.chunks.append(text + end)

    @property
    def text(self) -> str:
        return "".join(self.chunks)


@pytest.fixture
def output() -> RecordingOutput:
    return RecordingOutput()


@pytest.fixture
def config() -> ShellConfig:
    return ShellConfig()


@pytest.fixture
def mock_client() -> MagicMock:
    """Stands in for an already-connected redis.Redis client."""
    return MagicMock()


@pytest.fixture
def state(config: ShellConfig, mock_client: MagicMock) -> SessionState:
    """A session whose connection manager already holds the mock client."""
    session = SessionState(config)
    session.connection.client = mock_client
    return session


@pytest.fixture
def history_path(tmp_path: Path) -> Path:
    return tmp_path / ".redis_shell_history"
