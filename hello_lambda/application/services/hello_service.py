# hello_lambda/application/services/hello_service.py
import re

MAX_NAME_LENGTH = 100
DEFAULT_NAME = "world"

# Unicode White_Space property; str.isspace() additionally counts \x1c-\x1f
_WHITESPACE = "\t\n\v\f\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"

# ASCII letters/digits, tab/newline/form feed/carriage return/space, hyphen,
# apostrophe and a handful of Spanish letters
_VALID_NAME = re.compile(r"[a-zA-Z0-9\t\n\f\r \-'áéíóúÁÉÍÓÚñÑüÜ]+")


class NameValidationError(ValueError):
    """Base class for names rejected by :func:`say_hello`."""


class NameTooLongError(NameValidationError):
    def __init__(self) -> None:
        super().__init__("name exceeds maximum length")


class InvalidCharactersError(NameValidationError):
    def __init__(self) -> None:
        super().__init__("name contains invalid characters")


def say_hello(name: str) -> str:
    """Build the greeting for ``name``.

    Surrounding whitespace is ignored and an empty name greets the world.
    Length is counted in characters and checked before the character set,
    so an overlong name is always reported as too long.

    >>> say_hello("  Joe ")
    'Hello Joe!'
    >>> say_hello("")
    'Hello world!'
    """
    name = name.strip(_WHITESPACE)

    if not name:
        return f"Hello {DEFAULT_NAME}!"

    if len(name) > MAX_NAME_LENGTH:
        raise NameTooLongError()

    if not _VALID_NAME.fullmatch(name):
        raise InvalidCharactersError()

    return f"Hello {name}!"
