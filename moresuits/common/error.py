#!/usr/bin/env python3

"""
This module defines the errors raised while exporting a skin.
"""

# Exception.args must be a tuple


class MoreSuitsError(Exception):

    def __init__(self, d_args=None):
        d_args = d_args or {}
        self.msg = "Skin export failed."
        self.args = tuple(d_args.items())

    def __str__(self):
        return self.msg


class UnsupportedShaderError(MoreSuitsError):

    def __init__(self, d_args):
        super().__init__(d_args)
        self.msg = (
            f"Material shader '{d_args.get('shader')}' is not supported, "
            f"needs '{d_args.get('required')}'."
        )


class UnsupportedPropertyTypeError(MoreSuitsError):

    def __init__(self, d_args):
        super().__init__(d_args)
        self.msg = (
            f"Property '{d_args.get('property')}' has unsupported "
            f"type '{d_args.get('type')}'."
        )


class FilesystemError(MoreSuitsError):

    def __init__(self, d_args):
        super().__init__(d_args)
        self.msg = (
            f"Cannot {d_args.get('op')} '{d_args.get('path')}': "
            f"{d_args.get('reason')}"
        )


class MalformedBaselineError(MoreSuitsError):

    def __init__(self, d_args):
        super().__init__(d_args)
        self.msg = (
            f"Baseline '{d_args.get('path')}' is not a flat string mapping: "
            f"{d_args.get('reason')}"
        )


class MalformedMaterialError(MoreSuitsError):

    def __init__(self, d_args):
        super().__init__(d_args)
        self.msg = (
            f"Material '{d_args.get('path')}' is malformed: "
            f"{d_args.get('reason')}"
        )


class ConfigError(MoreSuitsError):

    def __init__(self, d_args):
        super().__init__(d_args)
        self.msg = (
            f"Config '{d_args.get('path')}' is invalid: "
            f"{d_args.get('reason')}"
        )

