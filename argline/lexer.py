# Argline Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Hand-written scanner for argline command strings.

`tokenize()` walks the input left to right and yields one token per match. At
each position the patterns below are tried in order; the first that applies
wins and there is no backtracking:

1. Whitespace (`\\n`, `\\t`, space, `\\r`) is skipped.
2. `--name` yields `LongFlagName("name")`.
3. `-abc` yields `FlagCluster("abc")`.
4. `"text"` yields `ArgumentString("text")` with the quotes stripped.
5. A run of characters other than whitespace, `"` and `-` yields
   `ArgumentString` verbatim.
6. Anything else yields `Invalid`.

Flag names are limited to ASCII letters and digits. A `-` always starts a flag
match, so a lone `-` or a `--` with no name after it is `Invalid` rather than an
empty argument. An unterminated quote is `Invalid` and swallows the rest of the
input.

The scanner never raises. It keeps scanning after an `Invalid` token; it is up
to the consumer to stop.
"""
from __future__ import annotations

import string
from typing import Iterator

from argline.tokens import ArgumentString, FlagCluster, Invalid, LongFlagName, Token

WHITESPACE = frozenset("\n\t \r")
FLAG_CHARS = frozenset(string.ascii_letters + string.digits)
QUOTE = '"'
DASH = "-"
DASHES = frozenset(DASH)
WORD_STOP = WHITESPACE | {QUOTE, DASH}


def _scan_while(text: str, start: int, allowed: frozenset[str]) -> int:
    """Return the index of the first character at or after `start` not in `allowed`."""
    end = start
    while end < len(text) and text[end] in allowed:
        end += 1
    return end


def _scan_until(text: str, start: int, stop: frozenset[str]) -> int:
    """Return the index of the first character at or after `start` in `stop`."""
    end = start
    while end < len(text) and text[end] not in stop:
        end += 1
    return end


def tokenize(text: str) -> Iterator[Token]:
    """
    Lazily split a command string into tokens.

    Args:
        text (str): The full command string.

    Yields:
        Token: `FlagCluster`, `LongFlagName`, `ArgumentString` or `Invalid`.
    """
    position = 0
    length = len(text)
    while position < length:
        char = text[position]

        if char in WHITESPACE:
            position = _scan_while(text, position, WHITESPACE)
            continue

        if char == DASH:
            if text.startswith("--", position):
                end = _scan_while(text, position + 2, FLAG_CHARS)
                if end > position + 2:
                    yield LongFlagName(text[position + 2 : end], position)
                    position = end
                    continue
            else:
                end = _scan_while(text, position + 1, FLAG_CHARS)
                if end > position + 1:
                    yield FlagCluster(text[position + 1 : end], position)
                    position = end
                    continue
            end = _scan_while(text, position, DASHES)
            yield Invalid(text[position:end], position)
            position = end
            continue

        if char == QUOTE:
            closing = text.find(QUOTE, position + 1)
            if closing == -1:
                yield Invalid(text[position:], position)
                return
            yield ArgumentString(text[position + 1 : closing], position)
            position = closing + 1
            continue

        end = _scan_until(text, position, WORD_STOP)
        yield ArgumentString(text[position:end], position)
        position = end
