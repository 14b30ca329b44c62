from pathlib import Path

import structlog
from prompt_toolkit import PromptSession
from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings

from ..utils import HISTORY_PATH
from .completer import CommandCompleter
from .executor import CommandExecutor
from .history import CommandHistory
from .output_handler import IOutputHandler, RichConsoleHandler
from .session import SessionState

logger = structlog.get_logger(__name__)

WELCOME_MESSAGE = """
\tWelcome to redis-shell.
\tYou can switch to a different server with the CONNECT command.
\tUsage: CONNECT host port [auth]

\tSwitch output mode with the MODE command.
\tUsage: MODE [std | raw]
"""


def build_prompt_session(history: CommandHistory) -> PromptSession:
    bindings = KeyBindings()
    prompt_session = PromptSession(
        history=history,
        completer=CommandCompleter(),
        complete_while_typing=False,
        key_bindings=bindings,
    )

    @bindings.add(
        "enter",
        filter=Condition(
            lambda: prompt_session.default_buffer.complete_state is not None
            and prompt_session.default_buffer.complete_state.current_completion
            is not None
        ),
    )
    def _(event):
        """Applies the current completion instead of submitting."""
        event.current_buffer.complete_state.current_completion.apply_completion(
            event.current_buffer
        )

    return prompt_session


def start_repl(
    state: SessionState,
    history_path: Path = None,
    output: IOutputHandler = None,
    prompt_session: PromptSession = None,
):
    """
    Starts the Read-Eval-Print-Loop.

    The connection is opened before the first prompt, so an unreachable
    server raises `ConnectionFailedError` here. History is written back when
    the loop ends, whether by `quit`, Ctrl+D or Ctrl+C.
    """
    output = output or RichConsoleHandler()
    history = CommandHistory(history_path or HISTORY_PATH, output)
    history.load_file()

    state.connection.connect()
    if state.config.welcome:
        output.write(WELCOME_MESSAGE)

    executor = CommandExecutor(state, output)
    prompt_session = prompt_session or build_prompt_session(history)

    try:
        while state.is_running:
            try:
                line = prompt_session.prompt(state.prompt)
            except (KeyboardInterrupt, EOFError):
                output.write("")
                break
            executor.execute(line)
    finally:
        history.save()
        logger.debug("repl.exit", address=state.address)
