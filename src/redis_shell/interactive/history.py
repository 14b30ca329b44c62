from pathlib import Path
from typing import Iterable, List, Union

import structlog
from prompt_toolkit.history import History

from .output_handler import IOutputHandler, RichConsoleHandler
from .parser import mask_tokens, tokenize

logger = structlog.get_logger(__name__)


def mask_line(line: str) -> str:
    """Tokenizes a command line and re-joins it with any password masked."""
    return " ".join(mask_tokens(tokenize(line)))


class CommandHistory(History):
    """
    A prompt_toolkit history backed by a plain-text file, one command per line.

    The file is read once at startup and rewritten in full by `save()`.
    Entries are masked before they are stored, so passwords given to `AUTH`
    or `CONNECT` never reach memory or disk.
    """

    def __init__(self, path: Union[str, Path], output: IOutputHandler = None):
        super().__init__()
        self.path = Path(path)
        self.output = output or RichConsoleHandler()
        self.entries: List[str] = []

    def load_file(self):
        """Reads previous entries. A missing or unreadable file means an empty history."""
        try:
            text = self.path.read_text(encoding="utf-8", errors="surrogateescape")
        except OSError:
            return
        self.entries.extend(line for line in text.splitlines() if line)
        logger.debug("history.loaded", path=str(self.path), entries=len(self.entries))

    def load_history_strings(self) -> Iterable[str]:
        # prompt_toolkit expects the newest entry first.
        yield from reversed(self.entries)

    def store_string(self, string: str) -> None:
        self.entries.append(string)

    def append_string(self, string: str) -> None:
        masked = mask_line(string)
        if masked:
            super().append_string(masked)

    def save(self):
        """Overwrites the history file with the in-memory entries."""
        try:
            with open(self.path, "w", encoding="utf-8", errors="surrogateescape") as f:
                for entry in self.entries:
                    f.write(entry + "\n")
        except OSError as e:
            logger.warning("history.save_failed", path=str(self.path), error=str(e))
            self.output.write(f"Error writing history file: {e}")
            return
        logger.debug("history.saved", path=str(self.path), entries=len(self.entries))
