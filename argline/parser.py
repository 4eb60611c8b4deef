# Argline Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Turns an argline command string into a `ParsedArgs`.

The parser pulls tokens from `argline.lexer.tokenize` one at a time:

- `FlagCluster` increments the count of each of its characters.
- `ArgumentString` is appended to the positional arguments.
- `LongFlagName` pulls exactly one more token, which must be an
  `ArgumentString`; the pair is stored as a keyword argument.
- `Invalid` fails the parse.

A failure raises `ParseError` immediately. No further tokens are read and no
partial result is returned.

Example Usage:
    args = parse('build "src dir" --target release -vv')
    # args.positional_args == ['build', 'src dir']
    # args.keyword_args == {'target': 'release'}
    # args.flag_counts == {'v': 2}
"""
from __future__ import annotations

from argline.exceptions import ParseError
from argline.lexer import tokenize
from argline.logger import logger
from argline.parsed_args import ParsedArgs
from argline.tokens import ArgumentString, FlagCluster, Invalid, LongFlagName


def _fail(text: str, message: str, position: int | None) -> ParseError:
    logger.debug("Failed to parse %r: %s (position=%s)", text, message, position)
    return ParseError(message, position)


def parse(text: str) -> ParsedArgs:
    """
    Parse a command string into positional, keyword and flag arguments.

    Args:
        text (str): The command string. An empty string yields an empty result.

    Returns:
        ParsedArgs: The fully parsed arguments.

    Raises:
        ParseError: If the string contains an invalid token or a long flag
            that is not immediately followed by a value.
    """
    result = ParsedArgs()
    tokens = tokenize(text)
    for token in tokens:
        if isinstance(token, FlagCluster):
            result.add_flags(token.chars)
        elif isinstance(token, ArgumentString):
            result.add_positional(token.text)
        elif isinstance(token, LongFlagName):
            value = next(tokens, None)
            if value is None:
                raise _fail(text, f"Missing value for '--{token.name}'", None)
            if not isinstance(value, ArgumentString):
                raise _fail(
                    text, f"Expected a value for '--{token.name}'", value.position
                )
            result.set_keyword(token.name, value.text)
        elif isinstance(token, Invalid):
            raise _fail(text, f"Invalid input {token.text!r}", token.position)
    logger.debug("Parsed %r -> %s", text, result)
    return result


def try_parse(text: str) -> ParsedArgs | None:
    """Parse `text`, returning None instead of raising on malformed input."""
    try:
        return parse(text)
    except ParseError:
        return None
