from ..config import ShellConfig
from ..management.connection_manager import ConnectionManager
from .output_handler import OutputMode


class SessionState:
    """
    A simple class to hold the state of a shell session.

    It is created once by the CLI and handed to the executor, completer and
    REPL. The selected database lives on the config, so a later `connect`
    re-opens the same database.
    """

    def __init__(self, config: ShellConfig, connection: ConnectionManager = None):
        self.config = config
        self.connection = connection or ConnectionManager(config)
        self.mode: OutputMode = OutputMode.RAW if config.raw else OutputMode.STD
        # A flag to control the main loop of the REPL.
        self.is_running: bool = True

    @property
    def db(self) -> int:
        return self.config.db

    @db.setter
    def db(self, value: int):
        self.config.db = value

    @property
    def address(self) -> str:
        return self.connection.address()

    @property
    def prompt(self) -> str:
        if 0 < self.db < 16:
            return f"{self.address}[{self.db}]> "
        return f"{self.address}> "
