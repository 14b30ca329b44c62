from abc import ABC, abstractmethod
from enum import Enum

from rich.console import Console

from .replies import Reply, ReplyKind

# A single, shared console instance for all output in the REPL
console = Console()


class OutputMode(str, Enum):
    STD = "std"
    RAW = "raw"


_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def quote_bytes(data: bytes) -> str:
    """
    Double-quotes a byte string, escaping quotes, backslashes and anything
    that is not printable. Invalid UTF-8 bytes are shown as `\\xNN`.
    """
    text = data.decode("utf-8", errors="surrogateescape")
    parts = []
    for ch in text:
        code = ord(ch)
        if 0xDC80 <= code <= 0xDCFF:
            parts.append(f"\\x{code - 0xDC00:02x}")
        elif ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif not ch.isprintable():
            if code <= 0xFF:
                parts.append(f"\\x{code:02x}")
            elif code <= 0xFFFF:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _unknown(reply: Reply) -> str:
    return f"Unknown reply type: {reply.value!r}"


def render_std(reply: Reply, level: int = 0) -> str:
    """Renders a reply with type annotations, the way an interactive user expects."""
    kind = reply.kind
    if kind is ReplyKind.INTEGER:
        return f"(integer) {reply.value}"
    if kind is ReplyKind.STATUS:
        return reply.value
    if kind is ReplyKind.BULK:
        return quote_bytes(reply.value)
    if kind is ReplyKind.NIL:
        return "(nil)"
    if kind is ReplyKind.ERROR:
        return f"(error) {reply.value}"
    if kind is ReplyKind.ARRAY:
        lines = []
        for i, item in enumerate(reply.items):
            indent = " " * (level * 4) if i != 0 else ""
            label = f"{i + 1}) "
            lines.append(f"{indent}{label:<4}{render_std(item, level + 1)}")
        return "\n".join(lines)
    return _unknown(reply)


def render_raw(reply: Reply, level: int = 0) -> str:
    """Renders a reply without decorations, for scripting."""
    kind = reply.kind
    if kind is ReplyKind.INTEGER:
        return str(reply.value)
    if kind is ReplyKind.STATUS:
        return reply.value
    if kind is ReplyKind.BULK:
        return _decode(reply.value)
    if kind is ReplyKind.NIL:
        return ""
    if kind is ReplyKind.ERROR:
        return f"{reply.value}\n"
    if kind is ReplyKind.ARRAY:
        lines = []
        for i, item in enumerate(reply.items):
            indent = " " * (level * 4) if i != 0 else ""
            lines.append(f"{indent}{render_raw(item, level + 1)}")
        return "\n".join(lines)
    return _unknown(reply)


def render_reply(reply: Reply, level: int = 0, mode: OutputMode = OutputMode.STD) -> str:
    if mode is OutputMode.RAW:
        return render_raw(reply, level)
    return render_std(reply, level)


def render_info(reply: Reply) -> str:
    """INFO replies are printed verbatim, bypassing the general renderer."""
    if reply.kind is ReplyKind.BULK:
        return _decode(reply.value)
    if reply.kind is ReplyKind.STATUS:
        return reply.value
    if reply.kind is ReplyKind.ERROR:
        return f"(error) {reply.value}"
    return ""


class IOutputHandler(ABC):
    """
    An abstract interface for presenting command results. The executor only
    talks to this interface, so tests can capture output without a terminal.
    """

    @abstractmethod
    def write(self, text: str, end: str = "\n"):
        pass

    def show_reply(self, reply: Reply, mode: OutputMode):
        self.write(render_reply(reply, 0, mode), end="")

    def show_info(self, reply: Reply):
        self.write(render_info(reply), end="")

    def show_error(self, message: str):
        self.write(f"(error) {message}")

    def end_command(self):
        """Every dispatched store command is closed by a blank line."""
        self.write("")


class RichConsoleHandler(IOutputHandler):
    """Writes plain text through the shared rich console, with markup disabled."""

    def __init__(self, target: Console = None):
        self.console = target or console

    def write(self, text: str, end: str = "\n"):
        self.console.print(
            text,
            end=end,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
