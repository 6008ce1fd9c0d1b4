'''
Precondition and form-encoding helpers for formguard.

Re-exports the validation functions from the core package.
'''

from __future__ import annotations

from formguard.core.validation import (
    encode,
    fail,
    has_length,
    is_empty,
    is_true,
    message,
    not_empty,
    not_null,
)

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
