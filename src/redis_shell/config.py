from typing import Optional

from pydantic import BaseModel, Field

from .utils import DEFAULT_HOST, DEFAULT_PORT


class ShellConfig(BaseModel):
    """Connection and presentation settings gathered from flags and environment."""

    host: str = Field(DEFAULT_HOST, description="Server hostname.")
    port: str = Field(DEFAULT_PORT, description="Server port.")
    socket: Optional[str] = Field(
        None, description="Unix socket path. Overrides host and port when set."
    )
    db: int = Field(0, description="Database number selected on connect.")
    password: Optional[str] = Field(
        None, description="Password sent with AUTH when connecting."
    )
    raw: bool = Field(False, description="Start in raw output mode.")
    welcome: bool = Field(False, description="Show the welcome banner in the REPL.")

    @property
    def address(self) -> str:
        if self.socket:
            return self.socket
        return f"{self.host}:{self.port}"
