# -*- coding: utf-8 -*-
"""
Tests for baseline loading
"""

import pytest

from moresuits.baseline import check_baseline
from moresuits.baseline import load_baseline
from moresuits.common import error


def test_no_baseline():
    assert load_baseline(None) == {}


def test_flat_mapping(write_json):
    path = write_json("base.json", {"_Metallic": "0", "_EMISSION": "DISABLEKEYWORD"})
    assert load_baseline(path) == {"_Metallic": "0", "_EMISSION": "DISABLEKEYWORD"}


def test_byte_order_mark(tmp_path):
    path = tmp_path / "base.json"
    path.write_bytes(b'\xef\xbb\xbf{"Forward": "SHADERPASS"}')
    assert load_baseline(path) == {"Forward": "SHADERPASS"}


@pytest.mark.parametrize("data", [
    ["_Metallic"],
    {"_Metallic": 0},
    {"_Color": {"r": 1}},
    {"_Keyword": None},
])
def test_not_flat(write_json, data):
    with pytest.raises(error.MalformedBaselineError):
        load_baseline(write_json("base.json", data))


def test_invalid_json(tmp_path):
    path = tmp_path / "base.json"
    path.write_text('{"PRICE": ', encoding="utf-8")
    with pytest.raises(error.MalformedBaselineError) as excinfo:
        load_baseline(path)
    assert "base.json" in str(excinfo.value)


def test_missing_file(tmp_path):
    with pytest.raises(error.FilesystemError):
        load_baseline(tmp_path / "missing.json")


def test_check_baseline_names_keys():
    with pytest.raises(error.MalformedBaselineError) as excinfo:
        check_baseline({"a": "1", "b": 2})
    assert "b" in str(excinfo.value)
    assert excinfo.value.args == (("path", "<mapping>"), ("reason", "non-string values for b"))
