#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Root test configuration** (i.e., early-time configuration guaranteed to be
run by :mod:`pytest` *before* passed command-line arguments are parsed) for
this test suite.

Caveats
----------
For safety, this configuration should contain *only* early-time hooks
absolutely required by :mod:`pytest` design to be defined in this
configuration. This file is also the ``conftest.py`` file situated at the
tests root directory, whose presence registers this directory as importable
for the remainder of this test session.

See Also
----------
:mod:`stringy_test.conftest`
    Global test configuration applied after this configuration.
'''

# ....................{ IMPORTS                            }....................
import sys

# ....................{ HOOKS ~ session : start            }....................
def pytest_sessionstart(session: '_pytest.main.Session') -> None:
    '''
    Hook run immediately *before* starting the current test session (i.e.,
    calling the :func:`pytest.session.main` function).

    Parameters
    ----------
    session: _pytest.main.Session
        :mod:`pytest`-specific test session object.
    '''

    # Print test-specific metadata.
    _print_metadata()


def _print_metadata() -> None:
    '''
    Print test-specific metadata for debuggability and quality assurance (QA).
    '''

    # Print a header for disambiguity.
    print('------[ paths ]------')

    # Print the absolute dirname of the system-wide Python prefix and
    # current Python prefix, which differs from the former under venvs.
    print('python prefix (system [base]): ' + sys.base_prefix)
    print('python prefix (current): ' + sys.prefix)

    # Print the current list of the (absolute or relative) dirnames of all
    # directories to be iteratively searched for importable modules and
    # packages. Since Python searches this list in descending order,
    # directories listed earlier assume precedence over directories listed
    # later.
    print('import paths: ' + str(sys.path))

    # Defer heavyweight imports until *AFTER* printing the above metadata.
    import stringy

    # Print the version and absolute dirname of the top-level package.
    print('project version: ' + stringy.__version__)
    print('project path: ' + stringy.__path__[0])
