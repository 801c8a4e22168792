#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Conditional numba compilation.

The integer kernels in calday.dtmath are decorated with cnjit. Whether they
are compiled with numba.njit is read from cnumba.ini next to this module:

    [Numba]
    jit = yes
    cache = yes

The environment variable CALDAY_JIT (0 or 1) overrides the jit setting.
With jit disabled the kernels run as plain Python functions, which is
convenient when debugging or measuring coverage.
"""

import os
from configparser import ConfigParser
from logging import getLogger

import numba

log = getLogger(__name__)

path, ext = os.path.splitext(__file__)
config_filename = f"{path}.ini"
config = ConfigParser()
config.read(config_filename)

numba_acc = config.getboolean("Numba", "jit", fallback=True)
numba_cache = config.getboolean("Numba", "cache", fallback=False)
if "CALDAY_JIT" in os.environ:
    numba_acc = os.environ["CALDAY_JIT"].strip() not in ("", "0")

log.debug("numba %s, jit %s, cache %s", numba.__version__,
          "enabled" if numba_acc else "disabled", numba_cache)


def cnjit(signature_or_function=None, **kwargs):
    """
    Compile a function with numba.njit if numba acceleration is enabled.

    Parameters
    ----------
    signature_or_function : str or callable, optional
        A numba signature such as 'i8(i8, i8)', or the function itself when
        cnjit is used without arguments.
    **kwargs
        Passed on to numba.njit. cache defaults to the configured value.

    Returns
    -------
    callable
        The compiled function, or a decorator producing it.
    """
    if not numba_acc:
        if callable(signature_or_function):
            return signature_or_function
        return lambda function: function
    kwargs.setdefault("cache", numba_cache)
    if signature_or_function is None:
        return numba.njit(**kwargs)
    return numba.njit(signature_or_function, **kwargs)
