#!/usr/bin/env python3

"""
This module loads the baseline mapping exports are diffed against.
"""

import json
import logging

from moresuits.common import error
from moresuits.common import testvar


logger = logging.getLogger(__name__)


def load_baseline(path):
    """Load a baseline JSON file.

    Args:
        path (str): Baseline file. None for no baseline.

    Returns:
        baseline (dict): Flat property name to value mapping.

    Raises:
        error.FilesystemError: Baseline cannot be read.
        error.MalformedBaselineError: Baseline is not a flat string mapping.
    """
    if path is None:
        return {}

    try:
        with open(path, encoding="utf-8-sig") as f:
            text = f.read()
    except OSError as e:
        logger.error("Baseline Read Error")
        raise error.FilesystemError({
            "op": "read",
            "path": path,
            "reason": e.strerror or e,
        }) from e

    try:
        baseline = json.loads(text)
    except ValueError as e:
        logger.error("Malformed Baseline Error")
        raise error.MalformedBaselineError({"path": path, "reason": e}) from e

    check_baseline(baseline, path=path)
    logger.debug(f"Loaded {len(baseline)} baseline entries from {path}")
    return baseline


def check_baseline(baseline, **kwargs):
    """Raise if baseline is not a flat string to string mapping.

    Kwargs:
        path (str): Source of the baseline, for the error message.

    Raises:
        error.MalformedBaselineError: Nested, non-string or non-object data.
    """
    my_path = kwargs.setdefault("path", "<mapping>")
    if not isinstance(baseline, dict):
        reason = "not a JSON object"
    else:
        bad = [k for k, v in baseline.items() if not isinstance(v, str)]
        if not bad:
            return None
        reason = f"non-string values for {', '.join(bad)}"
    try:
        raise error.MalformedBaselineError({"path": my_path, "reason": reason})
    except error.MalformedBaselineError:
        logger.error("Malformed Baseline Error")
        logger.debug(testvar.get_debug(baseline))
        raise
