'''
Precondition helpers used before text is encoded into a form submission.

Percent-encode field values, test text for emptiness, compose
printf-style messages, and assert invariants. Every assertion failure
surfaces as ValueError carrying the composed message; callers tell
failures apart by message text, not by exception type.
'''

from __future__ import annotations

from collections.abc import Sized
from typing import Any, NoReturn
from urllib.parse import quote_plus

from formguard.infrastructure.observability import get_logger

__all__ = [
    'encode',
    'fail',
    'has_length',
    'is_empty',
    'is_true',
    'message',
    'not_empty',
    'not_null',
]

_log = get_logger(__name__)

_ENCODING = 'utf-8'
_SAFE = '*'
_TILDE = ('~', '%7E')


def encode(text: str | None) -> str | None:

    '''
    Translate text into application/x-www-form-urlencoded using UTF-8.

    Args:
        text (str | None): Text to translate, returned as is when None or empty

    Returns:
        str | None: Encoded text, spaces as '+' and reserved characters as %XX
    '''

    if is_empty(text):
        return text

    try:
        encoded = quote_plus(text, safe=_SAFE, encoding=_ENCODING)
    except LookupError as exc:
        _log.error('encode_codec_unavailable', encoding=_ENCODING, error=str(exc))
        msg = 'Problem constructing URL to submit a form'
        raise RuntimeError(msg) from exc

    # quote_plus never escapes '~'; form encoding does.
    return encoded.replace(*_TILDE)


def has_length(text: Sized | None) -> bool:

    '''
    Check that text is neither None nor of length 0.

    Args:
        text (Sized | None): Text to check

    Returns:
        bool: True if text is present and has at least one character
    '''

    return text is not None and len(text) > 0


def is_empty(value: object) -> bool:

    '''
    Check whether value is None or equal to the empty string literal.

    Empty containers are not empty here; use not_empty for those.

    Args:
        value (object): Candidate value

    Returns:
        bool: True if value is None or ''
    '''

    return value is None or value == ''


def message(template: str | None, *params: Any) -> str | None:

    '''
    Compose template with params using %-style placeholders.

    Args:
        template (str | None): Text with 0 or more placeholders
        *params (Any): Values for the placeholders, in order

    Returns:
        str | None: Composed text, or template unchanged when None or empty
    '''

    if not has_length(template):
        return template

    return template % params


def not_empty(collection: Sized | None, message: str | None, *params: Any) -> None:

    '''
    Assert that a sequence, set or mapping is present and has elements.

    Args:
        collection (Sized | None): Collection to check
        message (str | None): Text with 0 or more placeholders
        *params (Any): Values for the placeholders
    '''

    not_null(collection, message, *params)
    is_true(len(collection) > 0, message, *params)


def not_null(value: object, message: str | None, *params: Any) -> None:

    '''
    Assert that value is not None.

    Args:
        value (object): Value to check
        message (str | None): Text with 0 or more placeholders
        *params (Any): Values for the placeholders
    '''

    is_true(value is not None, message, *params)


def is_true(flag: bool, message: str | None, *params: Any) -> None:

    '''
    Assert flag, raising ValueError with the composed message when False.

    Args:
        flag (bool): Expression to check
        message (str | None): Text with 0 or more placeholders
        *params (Any): Values for the placeholders
    '''

    if not flag:
        fail(message, *params)


def fail(message: str | None, *params: Any) -> NoReturn:

    '''
    Raise ValueError with message composed from params.

    A template that does not match its params is raised as is, so the
    failure is a ValueError whatever the params.

    Args:
        message (str | None): Text with 0 or more placeholders
        *params (Any): Values for the placeholders
    '''

    try:
        msg = _compose(message, params)
    except (TypeError, ValueError) as exc:
        raise ValueError(message) from exc

    raise ValueError(msg)


def _compose(template: str | None, params: tuple[Any, ...]) -> str | None:

    '''Compose template with a packed params tuple via message().'''

    return message(template, *params)
