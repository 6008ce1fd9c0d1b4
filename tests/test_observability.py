'''
Tests for formguard JSON logging and the encode failure line.
'''

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import Any

import orjson
import pytest
import structlog

from formguard.core import encode
from formguard.core import validation
from formguard.infrastructure.observability import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    clear_context()
    yield
    clear_context()
    structlog.reset_defaults()


def _lines(buf: io.BytesIO) -> list[dict[str, Any]]:
    return [orjson.loads(line) for line in buf.getvalue().splitlines()]


def _raise_lookup(*args: Any, **kwargs: Any) -> str:
    msg = 'unknown encoding: utf-8'
    raise LookupError(msg)


def test_line_is_json_with_logger_and_utc_timestamp() -> None:
    buf = io.BytesIO()
    configure_logging(file=buf)

    get_logger('formguard.host').info('form_checked', fields=3)

    [line] = _lines(buf)
    assert line['event'] == 'form_checked'
    assert line['level'] == 'info'
    assert line['logger'] == 'formguard.host'
    assert line['fields'] == 3
    assert line['timestamp'].endswith('Z')


def test_level_filters_lower_lines() -> None:
    buf = io.BytesIO()
    configure_logging('WARNING', file=buf)

    get_logger('formguard.host').info('dropped')
    get_logger('formguard.host').warning('kept')

    assert [line['event'] for line in _lines(buf)] == ['kept']


def test_unknown_level_falls_back_to_info() -> None:
    buf = io.BytesIO()
    configure_logging('LOUD', file=buf)

    get_logger().debug('dropped')
    get_logger().info('kept')

    assert [line['event'] for line in _lines(buf)] == ['kept']


def test_bound_form_id_appears_until_cleared() -> None:
    buf = io.BytesIO()
    configure_logging(file=buf)

    bind_context(form_id='1FAIpQL')
    get_logger().info('bound')
    clear_context()
    get_logger().info('cleared')

    bound, cleared = _lines(buf)
    assert bound['form_id'] == '1FAIpQL'
    assert 'form_id' not in cleared


def test_encode_codec_failure_logs_error_line(monkeypatch: pytest.MonkeyPatch) -> None:

    '''Verify a missing codec emits one ERROR line carrying the bound form id.'''

    monkeypatch.setattr(validation, 'quote_plus', _raise_lookup)
    buf = io.BytesIO()
    configure_logging(file=buf)
    bind_context(form_id='1FAIpQL')

    with pytest.raises(RuntimeError):
        encode('a b')

    [line] = _lines(buf)
    assert line['event'] == 'encode_codec_unavailable'
    assert line['level'] == 'error'
    assert line['logger'] == 'formguard.core.validation'
    assert line['encoding'] == 'utf-8'
    assert line['form_id'] == '1FAIpQL'


def test_validation_failures_do_not_log() -> None:
    buf = io.BytesIO()
    configure_logging('DEBUG', file=buf)

    with pytest.raises(ValueError):
        validation.not_null(None, 'must not be null')

    assert buf.getvalue() == b''
