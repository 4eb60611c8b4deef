"""
Argline Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import ArglineError, ParseError
from .lexer import tokenize
from .parsed_args import ParsedArgs
from .parser import parse, try_parse
from .render import render_parsed_args
from .tokens import ArgumentString, FlagCluster, Invalid, LongFlagName, Token
from .utils import setup_logging
from .validators import ArglineValidator

logger = logging.getLogger("argline")


__all__ = [
    "parse",
    "try_parse",
    "tokenize",
    "ParsedArgs",
    "ParseError",
    "ArglineError",
    "ArgumentString",
    "FlagCluster",
    "Invalid",
    "LongFlagName",
    "Token",
    "ArglineValidator",
    "render_parsed_args",
    "setup_logging",
]
