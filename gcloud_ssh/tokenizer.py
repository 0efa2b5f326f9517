"""Splits a raw command line into arguments"""

# Standard libraries
import logging
from typing import Literal

# Project libraries
from gcloud_ssh.errors import UnclosedQuoteError

logger = logging.getLogger(__name__)

WHITESPACE = (" ", "\t")
QUOTES = ('"', "'")
ESCAPE = "\\"

TokenizerState = Literal["start", "argument", "quoted"]


def tokenize(command_line: str) -> list[str]:
    """Splits a command line into arguments, honoring quotes and backslash escapes

    Outside of quotes a backslash appends the next character literally. Inside quotes every
    character other than the closing quote is literal, backslashes included. A closing quote
    ends the argument even when it is empty. The first character is always taken literally.

    Args:
        command_line: The raw command line

    Raises:
        UnclosedQuoteError: If the command line ends inside a quoted span

    Returns:
        The list of arguments
    """
    arguments = []
    state: TokenizerState = "start"
    quote = '"'
    current = ""
    escape_next = False

    for index, char in enumerate(command_line):
        # The first character is never interpreted
        if index == 0:
            current += char
            state = "argument"
            continue

        if state == "quoted":
            if char != quote:
                current += char
            else:
                arguments.append(current)
                current = ""
                state = "start"
            continue

        if escape_next:
            current += char
            escape_next = False
            continue

        if char == ESCAPE:
            escape_next = True
            continue

        if char in QUOTES:
            state = "quoted"
            quote = char
            continue

        if state == "argument":
            if char in WHITESPACE:
                arguments.append(current)
                current = ""
                state = "start"
            else:
                current += char
            continue

        # Start state, skip runs of whitespace
        if char not in WHITESPACE:
            state = "argument"
            current += char

    if state == "quoted":
        raise UnclosedQuoteError(command_line)

    if current != "":
        arguments.append(current)

    logger.debug("Tokenized %r into %s", command_line, arguments)
    return arguments
