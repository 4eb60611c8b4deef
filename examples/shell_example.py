from prompt_toolkit import PromptSession

from argline import ArglineValidator, parse, render_parsed_args
from argline.utils import setup_logging


def main():
    setup_logging()
    session = PromptSession("argline> ", validator=ArglineValidator())
    while True:
        try:
            text = session.prompt()
        except (EOFError, KeyboardInterrupt):
            break
        if text.strip() in ("exit", "quit"):
            break
        render_parsed_args(parse(text), title=text)


if __name__ == "__main__":
    main()
