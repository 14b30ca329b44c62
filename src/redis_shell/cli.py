import functools
import logging
import sys
from typing import List, Optional

import structlog
import typer
from rich.console import Console
from rich.traceback import Traceback

from redis_shell.config import ShellConfig
from redis_shell.errors import ConnectionFailedError
from redis_shell.interactive.executor import run_noninteractive
from redis_shell.interactive.main import start_repl
from redis_shell.interactive.output_handler import console
from redis_shell.interactive.session import SessionState
from redis_shell.state import APP_STATE
from redis_shell.utils import DEFAULT_HOST, DEFAULT_PORT


def setup_logging(verbose: bool):
    """
    Configures structlog for the entire application.
    - Default level: INFO
    - Verbose level: DEBUG (per-command events)
    - All logs are routed to stderr to keep stdout clean for replies.
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    root_logger = logging.getLogger()
    # Replace whatever handlers were installed before (or by libraries).
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    # We don't need a formatter because ConsoleRenderer does it all
    root_logger.addHandler(logging.StreamHandler(sys.stderr))
    root_logger.setLevel(log_level)


def handle_exceptions(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        err_console = Console(stderr=True)
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except Exception as e:
            err_console.print(f"[bold red]Error:[/bold red] {e}")
            if APP_STATE.verbose_mode:
                err_console.print(
                    Traceback.from_exception(
                        type(e), e, e.__traceback__, show_locals=True
                    )
                )
            raise typer.Exit(code=1)

    return wrapper


# --- Main Application Definition ---
app = typer.Typer(
    name="redis-shell",
    help="An interactive command-line client for Redis-compatible servers.",
    add_completion=False,
)


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False}
)
@handle_exceptions
def main(
    command: Optional[List[str]] = typer.Argument(
        None,
        help="Command to send once. Starts the interactive shell when omitted.",
    ),
    host: str = typer.Option(
        DEFAULT_HOST, "-h", envvar="REDIS_HOST", help="Server hostname."
    ),
    port: str = typer.Option(
        DEFAULT_PORT, "-p", envvar="REDIS_PORT", help="Server port."
    ),
    socket: Optional[str] = typer.Option(
        None, "-s", help="Server socket (overrides hostname and port)."
    ),
    db: int = typer.Option(0, "-n", help="Database number."),
    password: Optional[str] = typer.Option(
        None, "-a", help="Password to use when connecting to the server."
    ),
    raw: bool = typer.Option(
        False, "-raw", "--raw", help="Use raw formatting for replies."
    ),
    welcome: bool = typer.Option(
        False, "-welcome", "--welcome", help="Show the welcome message."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose DEBUG logging."
    ),
):
    APP_STATE.verbose_mode = verbose
    setup_logging(verbose)

    config = ShellConfig(
        host=host,
        port=port,
        socket=socket,
        db=db,
        password=password,
        raw=raw,
        welcome=welcome,
    )
    state = SessionState(config)

    try:
        if not command:
            start_repl(state)
            return
        status = run_noninteractive(state, command)
    except ConnectionFailedError as e:
        console.print(str(e), markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)
    finally:
        state.connection.close()

    if status != 0:
        # Same status a POSIX process gets from exit(-1).
        raise typer.Exit(code=status & 0xFF)
