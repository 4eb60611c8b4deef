# Argline Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token types produced by `argline.lexer.tokenize`.

Tokens are short-lived: they are created while a command string is scanned and
consumed by `argline.parser.parse` in the same call. Each token records the
index in the input where its match began so failures can be reported with a
position.

Contents:
- `FlagCluster`: a short-flag run such as `-vvv` (payload `"vvv"`).
- `LongFlagName`: the name after `--` (payload `"verbose"` for `--verbose`).
- `ArgumentString`: a bare word or the contents of a quoted string.
- `Invalid`: input that matches no other pattern.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class FlagCluster:
    """Characters following a single `-`, in order of appearance."""

    chars: str
    position: int = 0


@dataclass(frozen=True)
class LongFlagName:
    """Name following `--`."""

    name: str
    position: int = 0


@dataclass(frozen=True)
class ArgumentString:
    """A bare word, or the unquoted contents of a `"..."` string."""

    text: str
    position: int = 0


@dataclass(frozen=True)
class Invalid:
    """Input that matches no token pattern."""

    text: str
    position: int = 0


Token = Union[FlagCluster, LongFlagName, ArgumentString, Invalid]
