from typing import List, Optional

import structlog

from .commands import StoreCommand, parse_command
from .output_handler import IOutputHandler, RichConsoleHandler
from .parser import tokenize
from .session import SessionState

logger = structlog.get_logger(__name__)


class CommandExecutor:
    """
    Tokenizes one input line and runs it: meta-commands are handled locally,
    everything else is forwarded to the server and the reply rendered.
    """

    def __init__(self, state: SessionState, output: IOutputHandler = None):
        self.state = state
        self.output = output or RichConsoleHandler()

    def execute(self, line: str) -> Optional[int]:
        """
        Runs a line. Returns None for an empty line, otherwise the command's
        status (0 on success, -1 on failure).
        """
        tokens = tokenize(line)
        if not tokens:
            return None
        command = parse_command(tokens)
        logger.debug("command.dispatch", command=type(command).__name__)
        return command.execute(self.state, self.output)


def run_noninteractive(
    state: SessionState, args: List[str], output: IOutputHandler = None
) -> int:
    """
    Sends the command given on the process command line exactly once.

    The positional arguments form one command line. The shell has already
    split them, so each argument is one token and every token reaches the
    server. Connection failures propagate as `ConnectionFailedError` before
    anything is sent.
    """
    output = output or RichConsoleHandler()
    tokens = list(args)
    if not tokens:
        return 0
    state.connection.connect()
    return StoreCommand(tokens).execute(state, output)
