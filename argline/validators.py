# Argline Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Prompt Toolkit validator that accepts only well-formed argline command strings.

Use it with `PromptSession(validator=ArglineValidator())` to reject malformed
input (unterminated quotes, `--flag` without a value, stray dashes) before it
reaches your command handler. The cursor is moved to where parsing failed.
"""
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from argline.exceptions import ParseError
from argline.parser import parse


class ArglineValidator(Validator):
    def __init__(self, allow_empty: bool = True) -> None:
        self.allow_empty = allow_empty
        super().__init__()

    def validate(self, document: Document) -> None:
        text = document.text
        if not self.allow_empty and not text.strip():
            raise ValidationError(message="Enter a command.")
        try:
            parse(text)
        except ParseError as error:
            cursor = len(text) if error.position is None else error.position
            raise ValidationError(cursor_position=cursor, message=str(error)) from error
