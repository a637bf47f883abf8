# -*- coding: utf-8 -*-
"""
Pytest configuration and fixtures for moresuits tests
"""

import json
import logging

import pytest

from moresuits.material import MaterialSource


UNSET = object()


class FakeMaterial(MaterialSource):
    """In-memory material.

    props maps name -> (type_tag, value). UNSET declares a property the
    material does not set. Texture values are paths or None.
    """

    def __init__(self, shader="HDRP/Lit", keywords=(), passes=(), props=None):
        self._shader = shader
        self._keywords = list(keywords)
        self._passes = list(passes)
        self._props = dict(props or {})

    @property
    def shader_name(self):
        return self._shader

    def enabled_keywords(self):
        return list(self._keywords)

    def passes(self):
        return list(self._passes)

    def properties(self):
        return [(name, type_tag) for name, (type_tag, _) in self._props.items()]

    def has_value(self, name):
        return name in self._props and self._props[name][1] is not UNSET

    def value(self, name):
        return self._props[name][1]

    def texture_asset_path(self, name):
        if not self.has_value(name):
            return None
        return self._props[name][1]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo logging.config changes made by the command line."""
    yield
    lgr = logging.getLogger("moresuits")
    for handler in list(lgr.handlers):
        lgr.removeHandler(handler)
        handler.close()
    lgr.propagate = True
    lgr.setLevel(logging.NOTSET)


@pytest.fixture
def texture(tmp_path):
    """Create a fake texture file, returns its path."""
    src_dir = tmp_path / "src"
    src_dir.mkdir(exist_ok=True)

    def _texture(name, data=b"\x89PNG\r\n\x1a\nfake"):
        path = src_dir / name
        path.write_bytes(data)
        return path

    return _texture


@pytest.fixture
def out_dir(tmp_path):
    return tmp_path / "out"


@pytest.fixture
def write_json(tmp_path):
    """Write an object as JSON, returns the path."""

    def _write_json(name, obj):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(obj), encoding="utf-8")
        return path

    return _write_json


@pytest.fixture
def descriptor(tmp_path, write_json):
    """Material descriptor with textures next to it."""
    tex_dir = tmp_path / "Textures"
    tex_dir.mkdir()
    (tex_dir / "suit.png").write_bytes(b"main")
    (tex_dir / "suit_n.png").write_bytes(b"normal")
    return write_json("suit.json", {
        "name": "Suit",
        "shader": "HDRP/Lit",
        "keywords": ["_EMISSION", "_NORMALMAP"],
        "passes": [
            {"name": "Forward", "enabled": True},
            {"name": "DistortionVectors", "enabled": False},
        ],
        "properties": [
            {"name": "_MainTex", "type": "Texture", "value": "Textures/suit.png"},
            {"name": "_BaseColor", "type": "Color", "value": [1, 0.5, 0]},
            {"name": "_Smoothness", "type": "Range", "value": 0.5},
            {"name": "_NormalMap", "type": "Texture", "value": "Textures/suit_n.png"},
            {"name": "_DetailMap", "type": "Texture", "value": None},
            {"name": "_StencilRef", "type": "Int", "value": 2},
            {"name": "_AlphaCutoff", "type": "Float"},
        ],
    })
