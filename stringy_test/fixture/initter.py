#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Autouse fixtures** (i.e., fixtures unconditionally applicable to all tests
within a given scope of the current test session).
'''

# ....................{ IMPORTS                            }....................
from beartype.typing import Iterator
from pytest import fixture

# ....................{ FIXTURES ~ test                    }....................
@fixture(autouse=True)
def stringy_init_test(monkeypatch) -> Iterator[None]:
    '''
    **Autouse test initialization fixture** (i.e., fixture unconditionally
    applicable to all tests within the test package importing this fixture,
    which :mod:`pytest` automatically invokes before and after each test).

    This fixture isolates each test from the process-wide singletons defined
    by this package. Specifically, this fixture (in order):

    #. Unsets the ``${STRINGY_INTERNAL_ENCODING}`` and
       ``${STRINGY_LOG_LEVEL}`` environment variables, guaranteeing the
       internal encoding to default to UTF-8 and stderr logging to be
       disabled.
    #. Deinitializes both the encoding configuration and logging configuration
       singletons.
    #. Yields control to the current test.
    #. Deinitializes both the encoding configuration and logging configuration
       singletons, regardless of whether that test raised an exception or not.

    Parameters
    ----------
    monkeypatch : MonkeyPatch
        Builtin fixture object permitting temporary environment modification.
    '''

    # Defer heavyweight imports.
    from stringy.metadata import (
        ENCODING_INTERNAL_ENV_VAR_NAME, LOG_LEVEL_ENV_VAR_NAME)
    from stringy.util.io.log.conf import logconf
    from stringy.util.type.text import encconf

    # Isolate these singletons from the external environment.
    monkeypatch.delenv(ENCODING_INTERNAL_ENV_VAR_NAME, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR_NAME, raising=False)
    encconf.deinit()
    logconf.deinit()

    # Yield control to the current test.
    try:
        yield
    # Deinitialize these singletons even if that test raised an exception.
    finally:
        encconf.deinit()
        logconf.deinit()
