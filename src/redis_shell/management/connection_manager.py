from typing import Any, Optional

import redis
import structlog
from redis.backoff import NoBackoff
from redis.retry import Retry

from ..config import ShellConfig
from ..errors import ConnectionFailedError

logger = structlog.get_logger(__name__)


class ConnectionManager:
    """
    Owns the single server connection used by the shell.

    The client is created lazily on the first call to `connect()` and reused
    for the rest of the process. There is no pool and no reconnection policy:
    a failed liveness check is reported to the caller as a
    `ConnectionFailedError`.
    """

    def __init__(self, config: ShellConfig):
        self.config = config
        self.client: Optional[redis.Redis] = None

    def address(self) -> str:
        """Returns the socket path if one is configured, else `host:port`."""
        return self.config.address

    def _create_client(self) -> redis.Redis:
        options = {
            "db": self.config.db,
            "password": self.config.password or None,
            "single_connection_client": True,
            # Failures are reported, never retried.
            "retry": Retry(NoBackoff(), 0),
        }
        if self.config.socket:
            client = redis.Redis(unix_socket_path=self.config.socket, **options)
        else:
            try:
                port = int(self.config.port)
            except ValueError:
                raise ConnectionFailedError(
                    self.address(), f"invalid port: {self.config.port}"
                )
            client = redis.Redis(host=self.config.host, port=port, **options)

        # Keep replies in their wire shape (bytes, ints, lists) instead of the
        # per-command conversions redis-py applies by default.
        client.response_callbacks.clear()
        return client

    def connect(self) -> redis.Redis:
        """Returns the open client, creating and pinging it on first use."""
        if self.client is not None:
            return self.client

        logger.debug("connection.open", address=self.address())
        client = None
        try:
            # A single-connection client connects (and authenticates) on creation.
            client = self._create_client()
            client.ping()
        except redis.exceptions.RedisError as e:
            logger.debug("connection.ping_failed", address=self.address(), error=str(e))
            if client is not None:
                client.close()
            raise ConnectionFailedError(self.address(), str(e)) from e

        self.client = client
        return client

    def reconnect(self, host: str, port: str, password: Optional[str] = None):
        """
        Switches to a different server. The previous settings are restored if
        the new server cannot be reached.
        """
        fields = ("host", "port", "socket", "password")
        previous = {name: getattr(self.config, name) for name in fields}
        previous_client = self.client

        self.config.host = host
        self.config.port = port
        self.config.socket = None
        self.config.password = password
        self.client = None
        try:
            self.connect()
        except ConnectionFailedError:
            for name, value in previous.items():
                setattr(self.config, name, value)
            self.client = previous_client
            raise

        if previous_client is not None:
            previous_client.close()
        logger.debug("connection.switched", address=self.address())

    def select_db(self, db: int):
        """
        Records a database switched to with SELECT, so the connection reopens
        it if redis-py has to connect again.
        """
        if self.client is None:
            return
        self.client.connection_pool.connection_kwargs["db"] = db
        if self.client.connection is not None:
            self.client.connection.db = db

    def execute(self, *args: Any) -> Any:
        """Sends one command and returns the raw reply."""
        client = self.connect()
        logger.debug("command.sent", command=args[0] if args else None)
        return client.execute_command(*args)

    def close(self):
        if self.client is not None:
            self.client.close()
            self.client = None
