import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from argline.validators import ArglineValidator


@pytest.mark.parametrize(
    "valid", ["", "run", 'run "a b" --env prod -vv', "  spaced   out  "]
)
def test_argline_validator_accepts_valid_input(valid):
    ArglineValidator().validate(Document(valid))


def test_argline_validator_rejects_unterminated_quote():
    with pytest.raises(ValidationError) as exc_info:
        ArglineValidator().validate(Document('say "hello'))
    assert exc_info.value.cursor_position == 4


def test_argline_validator_rejects_missing_value():
    text = "deploy --env"
    with pytest.raises(ValidationError) as exc_info:
        ArglineValidator().validate(Document(text))
    assert exc_info.value.cursor_position == len(text)
    assert "--env" in exc_info.value.message


def test_argline_validator_rejects_empty_when_disallowed():
    validator = ArglineValidator(allow_empty=False)
    with pytest.raises(ValidationError):
        validator.validate(Document("   "))
    validator.validate(Document("ok"))
