#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests for the :mod:`stringy.util.type.text.encconf` submodule.
'''

# ....................{ IMPORTS                            }....................
import pytest

# ....................{ TESTS                              }....................
def test_encconf_default() -> None:
    '''
    Test that the internal encoding defaults to UTF-8.
    '''

    # Defer heavyweight imports.
    from stringy.util.type.text import encconf

    assert encconf.get_internal_encoding() == 'UTF-8'
    assert encconf.get_enc_conf() is encconf.get_enc_conf()


def test_encconf_env_var(monkeypatch) -> None:
    '''
    Test that the internal encoding defaults to the value of the environment
    variable if set.
    '''

    # Defer heavyweight imports.
    from stringy.exceptions import StringyEncodingException
    from stringy.metadata import ENCODING_INTERNAL_ENV_VAR_NAME
    from stringy.util.type.text import encconf

    monkeypatch.setenv(ENCODING_INTERNAL_ENV_VAR_NAME, 'latin-1')
    encconf.deinit()
    assert encconf.get_internal_encoding() == 'latin-1'

    monkeypatch.setenv(ENCODING_INTERNAL_ENV_VAR_NAME, 'no-such-encoding')
    encconf.deinit()
    with pytest.raises(StringyEncodingException):
        encconf.get_internal_encoding()


def test_encconf_set(caplog) -> None:
    '''
    Test setting the internal encoding.
    '''

    # Defer heavyweight imports.
    import logging
    from stringy.exceptions import StringyEncodingException
    from stringy.util.type.text import encconf

    caplog.set_level(logging.DEBUG, logger='stringy')

    encconf.init('cp1252')
    assert encconf.get_internal_encoding() == 'cp1252'

    encconf.set_internal_encoding('UTF-16')
    assert encconf.get_internal_encoding() == 'UTF-16'
    assert 'Internal encoding set to "UTF-16".' in caplog.messages

    # Unsupported encodings are rejected, preserving the prior encoding.
    with pytest.raises(StringyEncodingException):
        encconf.set_internal_encoding('base64')
    assert encconf.get_internal_encoding() == 'UTF-16'


def test_encconf_setting() -> None:
    '''
    Test the
    :func:`stringy.util.type.text.encconf.setting_internal_encoding` context
    manager.
    '''

    # Defer heavyweight imports.
    from stringy.util.type.text import encconf

    with encconf.setting_internal_encoding('latin-1'):
        assert encconf.get_internal_encoding() == 'latin-1'
    assert encconf.get_internal_encoding() == 'UTF-8'

    # The prior encoding is restored even when the body raises an exception.
    with pytest.raises(KeyError):
        with encconf.setting_internal_encoding('UTF-32'):
            raise KeyError('UTF-32')
    assert encconf.get_internal_encoding() == 'UTF-8'
