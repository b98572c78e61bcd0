"""Argument parsing for command statements.

Turns the tokens after the command name into positional args and flags.

Flag convention:
    --name=value    flags["name"] = "value"
    --name          flags["name"] = True
    --no-name       flags["name"] = False
    -abc            flags["a"] = flags["b"] = flags["c"] = True
    --              everything after is positional

Anything else (including "-" and negative numbers such as "-5") is a
positional arg. Parsing never fails.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

FlagValue = str | bool


@dataclass(frozen=True)
class ParsedParameters:
    """Parameters handed to a command handler.

    Attributes:
        args: Positional tokens in input order.
        flags: Flag name -> value, in first-seen order.
    """

    args: tuple[str, ...] = ()
    flags: Mapping[str, FlagValue] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, name: str, default: Any = None) -> Any:
        """Return a flag value, or default when the flag was not given."""
        return self.flags.get(name, default)

    def __len__(self) -> int:
        return len(self.args)

    def __getitem__(self, index: int) -> str:
        return self.args[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.args)


def _is_short_flag_group(token: str) -> bool:
    return len(token) > 1 and token[0] == "-" and token[1:].isalpha()


def parse_arguments(tokens: Iterable[str]) -> ParsedParameters:
    """Parse argument tokens into a ParsedParameters value.

    Args:
        tokens: Argument tokens, command name already removed.

    Returns:
        Parsed parameters. Repeated flags keep their last value.
    """
    args: list[str] = []
    flags: dict[str, FlagValue] = {}
    only_positional = False

    for token in tokens:
        if only_positional:
            args.append(token)
        elif token == "--":
            only_positional = True
        elif token.startswith("--") and len(token) > 2:
            name, sep, value = token[2:].partition("=")
            if not name:
                # "--=x" has no usable name
                args.append(token)
            elif sep:
                flags[name] = value
            elif name.startswith("no-") and len(name) > 3:
                flags[name[3:]] = False
            else:
                flags[name] = True
        elif _is_short_flag_group(token):
            for letter in token[1:]:
                flags[letter] = True
        else:
            args.append(token)

    return ParsedParameters(args=tuple(args), flags=MappingProxyType(flags))
