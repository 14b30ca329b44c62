from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

from redis.exceptions import ResponseError


class ReplyKind(str, Enum):
    INTEGER = "integer"
    STATUS = "status"
    BULK = "bulk"
    NIL = "nil"
    ERROR = "error"
    ARRAY = "array"
    UNKNOWN = "unknown"


@dataclass
class Reply:
    """
    A server reply tagged with its shape.

    `value` holds an `int` for INTEGER, `str` for STATUS and ERROR, `bytes`
    for BULK, `None` for NIL and the original object for UNKNOWN. ARRAY
    replies keep their children in `items`.
    """

    kind: ReplyKind
    value: Any = None
    items: List["Reply"] = field(default_factory=list)

    @classmethod
    def from_value(cls, value: Any) -> "Reply":
        """Converts a value returned by redis-py into a tagged reply."""
        if value is None:
            return cls(ReplyKind.NIL)
        # bool is an int subclass; RESP booleans render as 0/1.
        if isinstance(value, bool):
            return cls(ReplyKind.INTEGER, int(value))
        if isinstance(value, int):
            return cls(ReplyKind.INTEGER, value)
        if isinstance(value, (bytes, bytearray)):
            return cls(ReplyKind.BULK, bytes(value))
        if isinstance(value, str):
            return cls(ReplyKind.STATUS, value)
        if isinstance(value, ResponseError):
            return cls(ReplyKind.ERROR, str(value))
        if isinstance(value, (list, tuple)):
            return cls(ReplyKind.ARRAY, items=[cls.from_value(v) for v in value])
        return cls(ReplyKind.UNKNOWN, value)
