#!/usr/bin/env python3

"""
This module contains the material sources read by the exporter.

The host engine's material object is reached through MaterialSource.
JsonMaterial backs it with a descriptor file so exports run standalone.
"""

import abc
import enum
import json
import logging
from pathlib import Path

from moresuits.common import error
from moresuits.common import testvar


logger = logging.getLogger(__name__)


class PropertyType(enum.Enum):
    COLOR = "Color"
    VECTOR = "Vector"
    FLOAT = "Float"
    RANGE = "Range"
    TEXTURE = "Texture"
    INT = "Int"


class MaterialSource(abc.ABC):
    """Read-only view of a material and its shader."""

    @property
    @abc.abstractmethod
    def shader_name(self):
        pass

    @abc.abstractmethod
    def enabled_keywords(self):
        pass

    @abc.abstractmethod
    def passes(self):
        """Ordered (name, enabled) pairs."""

    @abc.abstractmethod
    def properties(self):
        """Ordered (name, type_tag) pairs of the shader's declared properties."""

    @abc.abstractmethod
    def has_value(self, name):
        pass

    @abc.abstractmethod
    def value(self, name):
        pass

    @abc.abstractmethod
    def texture_asset_path(self, name):
        """Backing file of a texture property, None if the slot is empty."""


class JsonMaterial(MaterialSource):
    """Material read from a JSON descriptor.

    Args:
        path (str): Descriptor file.

    Kwargs:
        asset_root (str): Directory texture paths are relative to.
            Default is the descriptor's directory.
    """

    def __init__(self, path, **kwargs):
        self._path = Path(path)
        self._asset_root = Path(
            kwargs.setdefault("asset_root", None) or self._path.parent
        )
        self._data = self._load()
        self._props = {p["name"]: p for p in self._data["properties"]}

    def _fail(self, reason):
        logger.error("Malformed Material Error")
        logger.debug(testvar.get_debug({"path": str(self._path), "reason": reason}))
        raise error.MalformedMaterialError({"path": self._path, "reason": reason})

    def _load(self):
        try:
            with open(self._path, encoding="utf-8-sig") as f:
                data = json.load(f)
        except OSError as e:
            logger.error("Material Read Error")
            raise error.FilesystemError({
                "op": "read",
                "path": self._path,
                "reason": e.strerror or e,
            }) from e
        except ValueError as e:
            logger.error("Malformed Material Error")
            raise error.MalformedMaterialError({
                "path": self._path,
                "reason": e,
            }) from e

        if not isinstance(data, dict):
            self._fail("not a JSON object")
        if not isinstance(data.get("shader"), str):
            self._fail("'shader' must be a string")
        data.setdefault("keywords", [])
        data.setdefault("passes", [])
        data.setdefault("properties", [])
        for key in ("keywords", "passes", "properties"):
            if not isinstance(data[key], list):
                self._fail(f"'{key}' must be a list")
        for keyword in data["keywords"]:
            if not isinstance(keyword, str):
                self._fail(f"keyword must be a string: {keyword!r}")
        for entry in data["passes"] + data["properties"]:
            if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
                self._fail(f"entry without a name: {entry!r}")
        for entry in data["properties"]:
            if "value" in entry:
                self._check_value(entry)
        return data

    def _check_value(self, entry):
        """Raise if a set value does not fit its property type.

        Unknown type tags are left to the exporter.
        """
        value = entry["value"]
        type_tag = entry.get("type")
        if type_tag in (PropertyType.COLOR.value, PropertyType.VECTOR.value):
            ok = is_number(value) or (
                isinstance(value, list) and all(is_number(v) for v in value)
            )
        elif type_tag in (
            PropertyType.FLOAT.value,
            PropertyType.RANGE.value,
            PropertyType.INT.value,
        ):
            ok = is_number(value)
        elif type_tag == PropertyType.TEXTURE.value:
            ok = value is None or isinstance(value, str)
        else:
            ok = True
        if not ok:
            self._fail(f"invalid {type_tag} value for {entry['name']}: {value!r}")

    @property
    def name(self):
        return self._data.get("name", self._path.stem)

    @property
    def shader_name(self):
        return self._data["shader"]

    def enabled_keywords(self):
        return list(self._data["keywords"])

    def passes(self):
        return [(p["name"], bool(p.get("enabled", True))) for p in self._data["passes"]]

    def properties(self):
        return [(p["name"], p.get("type")) for p in self._data["properties"]]

    def has_value(self, name):
        return name in self._props and "value" in self._props[name]

    def value(self, name):
        prop = self._props[name]
        if prop.get("type") == PropertyType.COLOR.value:
            return as_vector4(prop["value"], fill=(0.0, 0.0, 0.0, 1.0))
        if prop.get("type") == PropertyType.VECTOR.value:
            return as_vector4(prop["value"])
        return prop["value"]

    def texture_asset_path(self, name):
        if not self.has_value(name):
            return None
        ref = self._props[name]["value"]
        if not ref:
            return None
        return self._asset_root / ref


def as_vector4(values, fill=(0.0, 0.0, 0.0, 0.0)):
    """Pad a sequence of numbers to four components.

    A bare number is treated as a single component.
    """
    if isinstance(values, (int, float)):
        values = [values]
    values = [float(v) for v in values][:4]
    return values + list(fill[len(values):])


def is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)
