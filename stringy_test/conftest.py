#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Global test configuration** (i.e., early-time configuration guaranteed to be
run by :mod:`pytest` *after* passed command-line arguments are parsed) for
this test suite.

:mod:`pytest` implicitly imports *all* functionality defined by this module
into *all* submodules of this subpackage.

See Also
----------
:mod:`conftest`
    Root test configuration applied before this configuration.
'''

# ....................{ IMPORTS ~ fixture : autouse        }....................
# Import fixtures automatically run for each test, typically *NOT* manually
# required by specific tests.

from stringy_test.fixture.initter import stringy_init_test

# ....................{ HOOKS ~ configure                  }....................
def pytest_configure(config) -> None:
    '''
    Hook run immediately *after* parsing all command-line options and loading
    all third-party :mod:`pytest` plugins (including package-specific
    ``conftest`` scripts) but *before* performing test collection.
    '''

    # Prepend a leading newline, which py.test curiously neglects to do itself.
    print('\n')
