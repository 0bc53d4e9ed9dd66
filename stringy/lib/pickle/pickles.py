#!/usr/bin/env python3
# --------------------( LICENSE                            )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **pickling** (i.e., serialization and deserialization of arbitrarily
complex objects to and from in-memory bytes) facilities.

Caveats
----------
**This submodule leverages the third-party :mod:`dill` package rather than the
standard :mod:`pickle` package.** The former conforms to the API of the latter
with additional support for so-called "exotic" types, including:

* Generators.
* Lambda expressions.
* Ranges.
* Slices.

Immutable strings pickle as their text alone and unpickle *without*
revalidation (see :meth:`stringy.stringy.Stringy.__reduce__`).
'''

# ....................{ IMPORTS                            }....................
import dill
from beartype import beartype
from stringy.util.io.log import logs

# ....................{ CONSTANTS                          }....................
PROTOCOL = 4
'''
Pickle protocol used by the :func:`dumps` function.

This protocol is the most recent pickle protocol supported by the minimum
version of Python supported by this package, satisfying the following two
competing tradeoffs:

* Compatibility with all versions of Python supported by this package.
* Maximal **pickle-ability** (i.e., the capacity to pickle objects), improving
  support for such edge cases as very large objects and edge-case object types.
'''

# ....................{ LOADERS                            }....................
@beartype
def loads(data: bytes) -> object:
    '''
    Load (i.e., unpickle, deserialize) the object previously pickled to the
    passed bytes.

    Parameters
    ----------
    data : bytes
        Bytes previously returned by the :func:`dumps` function.

    Returns
    ----------
    object
        Arbitrarily complex object and all objects transitively referenced by
        this object loaded from these bytes.
    '''

    # Log this deserialization.
    logs.log_debug('Unpickling %d bytes...', len(data))

    # Load and return all objects pickled to these bytes.
    return dill.loads(data)

# ....................{ SAVERS                             }....................
def dumps(*objs) -> bytes:
    '''
    Save (i.e., pickle, serialize) the tuple of all passed objects to bytes if
    two or more objects are passed *or* the single passed object if only one
    object is passed.

    Parameters
    ----------
    objs : tuple
        One or more arbitrarily complex object to be serialized. These objects
        and all objects transitively referenced by this object will be
        serialized. If:

        * Only one object is passed, only that object will be saved.
        * Two or more objects are passed, the tuple of all such objects will be
          saved.

    Returns
    ----------
    bytes
        Bytes pickling these objects.
    '''

    # If only one object is passed, save only that object rather than the
    # 1-tuple consisting only of that object.
    if len(objs) == 1:
        objs = objs[0]

    # Pickle these objects.
    data = dill.dumps(objs, protocol=PROTOCOL)

    # Log this serialization.
    logs.log_debug('Pickled %d bytes.', len(data))

    # Return these bytes.
    return data
