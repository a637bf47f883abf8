#!/usr/bin/env python3

"""
This module contains functions for testing variables at run-time.
"""

import pprint


def get_debug(var, **kwargs):
    """Get pprint of variable.

    Args:
        var (any): Variable to format. Objects are shown by their attributes.

    Kwargs:
        sort_dicts (bool): Sort dictionaries by key.

    Returns:
        var_pprint (str): pprint of var.
    """
    my_sort_dicts = kwargs.setdefault("sort_dicts", True)
    if callable(var) and hasattr(var, "__name__"):
        attrs = var.__module__ + "." + var.__name__
    else:
        try:
            attrs = vars(var)
        except TypeError:
            attrs = var
    var_pprint = pprint.pformat(
        attrs,
        width=160,
        compact=True,
        sort_dicts=my_sort_dicts
    )
    return var_pprint

