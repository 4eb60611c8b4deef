# Argline Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParsedArgs`, the result of parsing an argline command string.

A `ParsedArgs` groups the three kinds of input a command string can carry:

- `positional_args`: bare words and quoted strings, in order of appearance.
- `keyword_args`: `--name value` pairs; a repeated name keeps its last value.
- `flag_counts`: how many times each short-flag character appeared across
  every `-abc` cluster in the input.

Example:
    >>> parse('deploy "my app" --env prod -vv')
    ParsedArgs(positional_args=['deploy', 'my app'], keyword_args={'env': 'prod'},
               flag_counts={'v': 2})
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ParsedArgs:
    """
    Structured view of a parsed command string.

    Attributes:
        positional_args (list[str]): Positional arguments in input order.
        keyword_args (dict[str, str]): Long-flag names mapped to their values.
        flag_counts (dict[str, int]): Short-flag characters mapped to occurrence counts.
    """

    positional_args: list[str] = field(default_factory=list)
    keyword_args: dict[str, str] = field(default_factory=dict)
    flag_counts: dict[str, int] = field(default_factory=dict)

    def add_positional(self, text: str) -> None:
        self.positional_args.append(text)

    def set_keyword(self, name: str, value: str) -> None:
        self.keyword_args[name] = value

    def add_flags(self, chars: str) -> None:
        """Increment the count of every character in a short-flag cluster."""
        for char in chars:
            self.flag_counts[char] = self.flag_counts.get(char, 0) + 1

    def count(self, flag: str) -> int:
        """Return how many times `flag` appeared, 0 if it never did."""
        return self.flag_counts.get(flag, 0)

    def has_flag(self, flag: str) -> bool:
        return self.count(flag) > 0

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value given for `--name`, or `default`."""
        return self.keyword_args.get(name, default)

    def to_dict(self) -> dict[str, Any]:
        return {
            "positional_args": list(self.positional_args),
            "keyword_args": dict(self.keyword_args),
            "flag_counts": dict(self.flag_counts),
        }

    def __bool__(self) -> bool:
        return bool(self.positional_args or self.keyword_args or self.flag_counts)

    def __str__(self) -> str:
        return (
            f"ParsedArgs(positional={len(self.positional_args)}, "
            f"keywords={len(self.keyword_args)}, flags={len(self.flag_counts)})"
        )
