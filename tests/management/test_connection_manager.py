from unittest.mock import ANY, MagicMock

import pytest
import redis
from redis.retry import Retry

from redis_shell.config import ShellConfig
from redis_shell.errors import ConnectionFailedError
from redis_shell.management.connection_manager import ConnectionManager


@pytest.fixture
def redis_cls(mocker) -> MagicMock:
    """Replaces redis.Redis so no socket is ever opened."""
    return mocker.patch("redis_shell.management.connection_manager.redis.Redis")


def test_address_prefers_socket():
    assert ConnectionManager(ShellConfig(host="h", port="1")).address() == "h:1"
    assert ConnectionManager(ShellConfig(socket="/tmp/redis.sock")).address() == (
        "/tmp/redis.sock"
    )


def test_connect_opens_one_pinged_client(redis_cls):
    manager = ConnectionManager(ShellConfig(host="10.0.0.1", port="6380", db=2, password="pw"))

    client = manager.connect()

    redis_cls.assert_called_once_with(
        host="10.0.0.1",
        port=6380,
        db=2,
        password="pw",
        single_connection_client=True,
        retry=ANY,
    )
    client.ping.assert_called_once_with()
    client.response_callbacks.clear.assert_called_once_with()


def test_connect_is_idempotent(redis_cls):
    manager = ConnectionManager(ShellConfig())

    first = manager.connect()
    second = manager.connect()

    assert first is second
    assert redis_cls.call_count == 1
    assert first.ping.call_count == 1


def test_connect_over_unix_socket(redis_cls):
    manager = ConnectionManager(ShellConfig(socket="/tmp/redis.sock"))

    manager.connect()

    redis_cls.assert_called_once_with(
        unix_socket_path="/tmp/redis.sock",
        db=0,
        password=None,
        single_connection_client=True,
        retry=ANY,
    )


def test_failed_ping_raises_and_discards_client(redis_cls):
    redis_cls.return_value.ping.side_effect = redis.exceptions.ConnectionError(
        "Error 111 connecting to 127.0.0.1:6379. Connection refused."
    )
    manager = ConnectionManager(ShellConfig())

    with pytest.raises(ConnectionFailedError) as excinfo:
        manager.connect()

    assert "Connection refused" in str(excinfo.value)
    assert excinfo.value.address == "127.0.0.1:6379"
    assert manager.client is None
    redis_cls.return_value.close.assert_called_once_with()


def test_failure_while_creating_client_is_a_connection_failure(redis_cls):
    redis_cls.side_effect = redis.exceptions.AuthenticationError("invalid password")
    manager = ConnectionManager(ShellConfig(password="wrong"))

    with pytest.raises(ConnectionFailedError, match="invalid password"):
        manager.connect()

    assert manager.client is None


def test_invalid_port_is_a_connection_failure(redis_cls):
    manager = ConnectionManager(ShellConfig(port="not-a-port"))

    with pytest.raises(ConnectionFailedError):
        manager.connect()

    redis_cls.assert_not_called()


def test_execute_sends_on_the_connected_client(redis_cls):
    redis_cls.return_value.execute_command.return_value = b"v"
    manager = ConnectionManager(ShellConfig())

    assert manager.execute("get", "k") == b"v"
    redis_cls.return_value.execute_command.assert_called_once_with("get", "k")


def test_reconnect_switches_and_closes_previous(redis_cls):
    old_client, new_client = MagicMock(), MagicMock()
    redis_cls.side_effect = [old_client, new_client]
    manager = ConnectionManager(ShellConfig())
    manager.connect()

    manager.reconnect("10.0.0.9", "7000", "pw")

    assert manager.client is new_client
    assert manager.address() == "10.0.0.9:7000"
    old_client.close.assert_called_once_with()


def test_failed_reconnect_restores_previous_server(redis_cls):
    old_client, new_client = MagicMock(), MagicMock()
    new_client.ping.side_effect = redis.exceptions.ConnectionError("refused")
    redis_cls.side_effect = [old_client, new_client]
    manager = ConnectionManager(ShellConfig(password="old"))
    manager.connect()

    with pytest.raises(ConnectionFailedError):
        manager.reconnect("10.0.0.9", "7000")

    assert manager.client is old_client
    assert manager.address() == "127.0.0.1:6379"
    assert manager.config.password == "old"
    old_client.close.assert_not_called()


def test_close(redis_cls):
    manager = ConnectionManager(ShellConfig())
    client = manager.connect()

    manager.close()

    client.close.assert_called_once_with()
    assert manager.client is None


def test_client_is_built_without_retries(redis_cls):
    ConnectionManager(ShellConfig()).connect()

    retry = redis_cls.call_args.kwargs["retry"]
    assert isinstance(retry, Retry)
    assert retry._retries == 0


def test_unreachable_server_is_tried_exactly_once(mocker):
    connect_attempts = mocker.spy(redis.connection.Connection, "_connect")
    manager = ConnectionManager(ShellConfig(host="127.0.0.1", port="1"))

    with pytest.raises(ConnectionFailedError):
        manager.connect()

    assert connect_attempts.call_count == 1


def test_select_db_is_used_when_the_connection_reopens(redis_cls):
    manager = ConnectionManager(ShellConfig())
    client = manager.connect()
    client.connection_pool.connection_kwargs = {"db": 0}

    manager.select_db(3)

    assert client.connection_pool.connection_kwargs["db"] == 3
    assert client.connection.db == 3


def test_select_db_without_connection_is_ignored():
    manager = ConnectionManager(ShellConfig())

    manager.select_db(3)

    assert manager.client is None
