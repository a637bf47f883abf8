#!/usr/bin/env python3

"""
Package constants.
"""


def constant(f):
    def fset(self, value):
        raise TypeError

    def fget(self):
        return f()
    return property(fget, fset)


class _const(object):

    @constant
    def REQUIRED_SHADER():
        return "HDRP/Lit"

    @constant
    def PRICE_KEY():
        return "PRICE"

    @constant
    def KEYWORD():
        return "KEYWORD"

    @constant
    def DISABLEKEYWORD():
        return "DISABLEKEYWORD"

    @constant
    def SHADERPASS():
        return "SHADERPASS"

    @constant
    def DISABLESHADERPASS():
        return "DISABLESHADERPASS"

    @constant
    def MAIN_TEXTURE_PROPERTY():
        return "_MainTex"

    @constant
    def IGNORE_PROPERTIES():
        return (
            "_MainTex",
            "_BaseColorMap",
        )

    @constant
    def SKIN_NAME():
        return "Skin"

    @constant
    def PRICE():
        return 60

    @constant
    def ADVANCED_DIR():
        return "Advanced"

    @constant
    def TEXTURE_EXT():
        return ".png"

    @constant
    def VECTOR_PRECISION():
        return 2
