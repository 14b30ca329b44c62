import re
from typing import List

# A token is a single-quoted span, a double-quoted span, or a run of
# non-whitespace characters. Quotes are kept on the token.
TOKEN_PATTERN = re.compile(r"'.*?'|\".*?\"|\S+")

MASK = "******"


def tokenize(line: str) -> List[str]:
    """Splits an input line into command tokens."""
    return TOKEN_PATTERN.findall(line)


def unquote(token: str) -> str:
    """Strips one pair of matching enclosing quotes from a token."""
    if len(token) >= 2 and token[0] == token[-1] and token[0] in ("'", '"'):
        return token[1:-1]
    return token


def mask_tokens(tokens: List[str]) -> List[str]:
    """
    Returns a copy of the tokens with passwords replaced by a fixed mask.

    `AUTH <password>` hides its second token and
    `CONNECT <host> <port> <password>` hides its fourth.
    """
    masked = list(tokens)
    if len(masked) == 2 and masked[0].lower() == "auth":
        masked[1] = MASK
    if len(masked) == 4 and masked[0].lower() == "connect":
        masked[3] = MASK
    return masked
