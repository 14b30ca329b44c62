from abc import ABC
from typing import Dict, List, Type

import redis
import structlog

from ..data.command_table import CommandHelp, commands_in_group, lookup
from ..errors import ConnectionFailedError
from .output_handler import IOutputHandler, OutputMode
from .parser import unquote
from .replies import Reply
from .session import SessionState

logger = structlog.get_logger(__name__)

GENERIC_HELP = """redis-shell
Type:\t"help <command>" for help on <command>
\t"help @<group>" to list the commands in <group>
"""

MODE_USAGE = "invalid args. Should be MODE [raw|std]"
CONNECT_USAGE = "invalid args. Should be CONNECT host port [auth]"


class Command(ABC):
    """Abstract base class for everything the shell can execute from one line."""

    def __init__(self, tokens: List[str]):
        self.tokens = tokens

    @property
    def args(self) -> List[str]:
        return self.tokens[1:]

    def execute(self, state: SessionState, output: IOutputHandler) -> int:
        """Runs the command. Returns 0 on success and -1 on a reported failure."""
        raise NotImplementedError


class HelpCommand(Command):
    """`help`, `help <command>` or `help @<group>`."""

    def execute(self, state: SessionState, output: IOutputHandler) -> int:
        if not self.args:
            output.write(GENERIC_HELP)
        elif len(self.args) > 1:
            output.write("")
        elif self.args[0].startswith("@"):
            entries = commands_in_group(self.args[0][1:])
            if entries:
                output.write("")
                for entry in entries:
                    output.write(f"\t{entry.name} {entry.params}")
                output.write("")
        else:
            entry = lookup(self.args[0])
            if entry is not None:
                output.write(format_command_help(entry), end="")
        return 0


def format_command_help(entry: CommandHelp) -> str:
    return f"\n\t{entry.name} {entry.params} \n\tGroup: {entry.group} \n\n"


class QuitCommand(Command):
    def execute(self, state: SessionState, output: IOutputHandler) -> int:
        state.is_running = False
        return 0


class ClearCommand(Command):
    def execute(self, state: SessionState, output: IOutputHandler) -> int:
        output.write("Please use Ctrl + L instead")
        return 0


class ModeCommand(Command):
    """Switches the reply renderer between `std` and `raw`."""

    def execute(self, state: SessionState, output: IOutputHandler) -> int:
        if len(self.args) != 1:
            output.write(MODE_USAGE)
            return -1
        try:
            mode = OutputMode(self.args[0].lower())
        except ValueError:
            output.write(MODE_USAGE)
            return -1
        state.mode = mode
        logger.debug("session.mode_changed", mode=mode.value)
        return 0


class ConnectCommand(Command):
    """`connect <host> <port> [password]` switches the session to another server."""

    def execute(self, state: SessionState, output: IOutputHandler) -> int:
        if len(self.args) not in (2, 3):
            output.write(CONNECT_USAGE)
            return -1
        host, port = unquote(self.args[0]), unquote(self.args[1])
        password = unquote(self.args[2]) if len(self.args) == 3 else None
        try:
            state.connection.reconnect(host, port, password)
        except ConnectionFailedError as e:
            output.write(f"Could not connect to {host}:{port}: {e}")
            return -1
        return 0


class StoreCommand(Command):
    """Any command that is not handled locally is sent to the server."""

    @property
    def name(self) -> str:
        return self.tokens[0].lower()

    def execute(self, state: SessionState, output: IOutputHandler) -> int:
        args = [unquote(token) for token in self.args]
        try:
            raw = state.connection.execute(self.name, *args)
        except redis.exceptions.RedisError as e:
            logger.debug("command.failed", command=self.name, error=str(e))
            output.show_error(str(e))
            return -1

        if self.name == "select":
            try:
                state.db = int(args[0])
            except (IndexError, ValueError):
                state.db = 0
            state.connection.select_db(state.db)

        reply = Reply.from_value(raw)
        if self.name == "info":
            output.show_info(reply)
        else:
            output.show_reply(reply, state.mode)
        output.end_command()
        return 0


META_COMMANDS: Dict[str, Type[Command]] = {
    "help": HelpCommand,
    "?": HelpCommand,
    "quit": QuitCommand,
    "exit": QuitCommand,
    "clear": ClearCommand,
    "mode": ModeCommand,
    "connect": ConnectCommand,
}


def parse_command(tokens: List[str]) -> Command:
    """Picks the command class for a tokenized line by its first token."""
    command_class = META_COMMANDS.get(tokens[0].lower(), StoreCommand)
    return command_class(tokens)
