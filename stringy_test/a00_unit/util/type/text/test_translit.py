#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests for the :mod:`stringy.util.type.text.translit` submodule.
'''

# ....................{ TESTS                              }....................
def test_translit_to_ascii() -> None:
    '''
    Test the :func:`stringy.util.type.text.translit.to_ascii` function.
    '''

    # Defer heavyweight imports.
    from stringy.util.type.text import translit

    assert translit.to_ascii('plain ASCII') == 'plain ASCII'
    assert translit.to_ascii('Ærøskøbing') == 'AEroskobing'
    assert translit.to_ascii('Ødd naïve') == 'Odd naive'
    assert translit.to_ascii('5€') == '5EUR'
    assert translit.to_ascii('5€', {'€': ' euros'}) == '5 euros'

    assert translit.is_ascii('plain')
    assert not translit.is_ascii('æ')


def test_translit_to_ascii_dropped(caplog) -> None:
    '''
    Test that the :func:`stringy.util.type.text.translit.to_ascii` function
    removes and logs characters with no ASCII approximation.
    '''

    # Defer heavyweight imports.
    import logging
    from stringy.util.type.text import translit

    caplog.set_level(logging.DEBUG, logger='stringy')

    # Private use characters have no transliteration.
    assert translit.to_ascii('a\ue000b') == 'ab'
    assert any(
        message.startswith('Dropping 1 non-transliterable characters')
        for message in caplog.messages
    )
