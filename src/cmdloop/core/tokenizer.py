"""Statement tokenizer.

Splits a line into whitespace-separated tokens. A double-quoted run is a
single token with the quotes removed. There is no escaping, and an
unterminated quote simply runs to the end of the line.

Example:
    >>> tokenize('say "hello world" twice')
    ['say', 'hello world', 'twice']
"""

from __future__ import annotations

import re

# Either a quoted run (closing quote optional) or a bare run of
# non-whitespace, non-quote characters.
_TOKEN_PATTERN = re.compile(r'"([^"]*)(?:"|$)|([^\s"]+)')


def tokenize(line: str) -> list[str]:
    """Split a raw line into tokens.

    Args:
        line: Raw statement text.

    Returns:
        Tokens in left-to-right order. Never contains empty strings or
        standalone quote characters.
    """
    tokens: list[str] = []
    for match in _TOKEN_PATTERN.finditer(line):
        quoted, bare = match.groups()
        token = (quoted if quoted is not None else bare).strip()
        if token:
            tokens.append(token)
    return tokens


def split_statement(statement: str) -> tuple[str, list[str]]:
    """Split a statement into its command name and argument tokens.

    Returns ("", []) for a statement without tokens.
    """
    tokens = tokenize(statement)
    if not tokens:
        return "", []
    return tokens[0], tokens[1:]
