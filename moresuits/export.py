#!/usr/bin/env python3

"""
This module exports a material into a More Suits skin.

The skin is a flat JSON mapping of every keyword, shader pass and shader
property whose value differs from the baseline, plus the textures it names.
"""

import json
import logging
import shutil
import sys
from pathlib import Path

import numpy as np

from moresuits.common import error
from moresuits.common import testvar
from moresuits.constants import _const as CONSTANTS
from moresuits.exportconfig import get_export_config
from moresuits.material import PropertyType


logger = logging.getLogger(__name__)


def format_vector(values):
    """Format vector components as "x, y, z, w".

    Args:
        values (sequence): Vector or color components.

    Returns:
        text (str): Components in fixed-point, brackets stripped.
    """
    precision = CONSTANTS().VECTOR_PRECISION
    vec = np.asarray(values, dtype=np.float32)
    text = np.array2string(
        vec,
        separator=", ",
        max_line_width=sys.maxsize,
        formatter={"float_kind": lambda x: f"{x:.{precision}f}"},
    )
    return text.strip("[]")


def format_float(value):
    """Format a scalar as the shortest single precision decimal.

    Integral values drop the fraction ("1"), the separator is always ".".
    Tiny and huge magnitudes stay positional ("0.00001"), they are never
    written in exponent form ("1E-05").
    """
    return np.format_float_positional(np.float32(value), trim="-")


def format_int(value):
    return str(int(value))


class Exporter():
    """Export one material to a skin.

    Args:
        material (MaterialSource): Material to export.
        output_dir (str): Directory receiving the skin files.

    Kwargs:
        baseline (dict): Values the skin is diffed against.
        export_config (dict): Base config. Default is get_export_config().
        extra_handler (logging.Handler): Additional log handler.
        **overrides: Any export config key, e.g. skin_name or price.
    """

    def __init__(self, material, output_dir, **kwargs):
        self._material = material
        self._output_dir = Path(output_dir)
        self._baseline = kwargs.pop("baseline", None) or {}
        self._extra_handler = kwargs.pop("extra_handler", None)
        self._config = dict(kwargs.pop("export_config", None) or get_export_config())
        unknown = sorted(set(kwargs) - set(self._config))
        if unknown:
            raise TypeError(f"Unknown export options: {', '.join(unknown)}")
        self._config.update(kwargs)

        self._logger = logger
        if self._extra_handler:
            self._logger.addHandler(self._extra_handler)

        self.mapping = {}
        self.written = []

    @property
    def skin_name(self):
        return self._config["skin_name"]

    @property
    def advanced_dir(self):
        return self._output_dir / self._config["advanced_dir"]

    @property
    def json_path(self):
        return self.advanced_dir / f"{self.skin_name}.json"

    def export(self):
        """Write the skin files.

        Returns:
            written (list): Paths written, in order.

        Raises:
            error.UnsupportedShaderError: Material uses another shader.
            error.UnsupportedPropertyTypeError: Unknown shader property type.
            error.FilesystemError: Directory, copy or write failure.
        """
        self.mapping = {}
        self.written = []
        try:
            self._check_shader()
            self._make_dirs()
            self._add_price()
            self._add_keywords()
            self._add_passes()
            if self._config["export_main_texture"]:
                self._export_main_texture()
            self._add_properties()
            self._write_json()
        finally:
            if self._extra_handler:
                self._logger.removeHandler(self._extra_handler)
        return self.written

    def _check_shader(self):
        required = self._config["required_shader"]
        shader = self._material.shader_name
        if shader != required:
            try:
                raise error.UnsupportedShaderError({
                    "shader": shader,
                    "required": required,
                })
            except error.UnsupportedShaderError as e:
                self._logger.error("Unsupported Shader Error")
                self._logger.debug(testvar.get_debug(e.args))
                raise

    def _make_dirs(self):
        try:
            self.advanced_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self._logger.error("Directory Creation Error")
            raise error.FilesystemError({
                "op": "create",
                "path": self.advanced_dir,
                "reason": e.strerror or e,
            }) from e

    def _add(self, key, value):
        if self._baseline.get(key) != value:
            self.mapping[key] = value
        else:
            self._logger.debug(f"Omitted {key}: matches baseline")

    def _add_price(self):
        price = int(self._config["price"])
        if price > 0:
            self.mapping[CONSTANTS().PRICE_KEY] = str(price)

    def _add_keywords(self):
        disabled = CONSTANTS().DISABLEKEYWORD
        for keyword in self._material.enabled_keywords():
            if self._baseline.get(keyword, disabled) == disabled:
                self.mapping[keyword] = CONSTANTS().KEYWORD
            else:
                self._logger.debug(f"Omitted {keyword}: enabled in baseline")

    def _add_passes(self):
        for shader_pass, enabled in self._material.passes():
            if enabled:
                value = CONSTANTS().SHADERPASS
            else:
                value = CONSTANTS().DISABLESHADERPASS
            self._add(shader_pass, value)

    def _export_main_texture(self):
        src = self._material.texture_asset_path(self._config["main_texture_property"])
        if src is None:
            return None
        name = f"{self.skin_name}{CONSTANTS().TEXTURE_EXT}"
        self._copy(src, self._output_dir / name)
        return name

    def _add_properties(self):
        formatters = {
            PropertyType.COLOR: self._vector_value,
            PropertyType.VECTOR: self._vector_value,
            PropertyType.FLOAT: self._float_value,
            PropertyType.RANGE: self._float_value,
            PropertyType.TEXTURE: self._texture_value,
            PropertyType.INT: self._int_value,
        }
        ignore_list = self._config["ignore_list"]
        for name, type_tag in self._material.properties():
            if name in ignore_list:
                continue
            try:
                prop_type = PropertyType(type_tag)
            except ValueError as e:
                self._logger.error("Unsupported Property Type Error")
                raise error.UnsupportedPropertyTypeError({
                    "property": name,
                    "type": type_tag,
                }) from e

            if not self._material.has_value(name):
                self._logger.debug(f"Skipped {name}: not set")
                continue
            value = formatters[prop_type](name)
            if value is None:
                continue
            self._add(name, value)

    def _vector_value(self, name):
        return format_vector(self._material.value(name))

    def _float_value(self, name):
        return format_float(self._material.value(name))

    def _int_value(self, name):
        return format_int(self._material.value(name))

    def _texture_value(self, name):
        src = self._material.texture_asset_path(name)
        if src is None:
            self._logger.debug(f"Skipped {name}: no texture")
            return None
        texture_name = f"{self.skin_name}{name}{CONSTANTS().TEXTURE_EXT}"
        self._copy(src, self.advanced_dir / texture_name)
        return texture_name

    def _copy(self, src, dest):
        try:
            shutil.copyfile(src, dest)
        except OSError as e:
            self._logger.error("Texture Copy Error")
            raise error.FilesystemError({
                "op": "copy",
                "path": src,
                "reason": e.strerror or e,
            }) from e
        self._record(dest)

    def _write_json(self):
        self._logger.debug(testvar.get_debug(self.mapping, sort_dicts=False))
        text = json.dumps(self.mapping, indent=2, ensure_ascii=False)
        try:
            self.json_path.write_text(text, encoding="utf-8")
        except OSError as e:
            self._logger.error("Json Write Error")
            raise error.FilesystemError({
                "op": "write",
                "path": self.json_path,
                "reason": e.strerror or e,
            }) from e
        self._record(self.json_path)

    def _record(self, path):
        self.written.append(path)
        try:
            shown = path.relative_to(self._output_dir)
        except ValueError:
            shown = path
        self._logger.info(f"Exported {shown.as_posix()}")


def export_material(material, output_dir, **kwargs):
    """Export a material, see Exporter for the arguments.

    Returns:
        written (list): Paths written, in order.
    """
    return Exporter(material, output_dir, **kwargs).export()
