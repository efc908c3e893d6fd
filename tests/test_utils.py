"""Tests for numeric helpers, configuration, validation results and logging."""

from __future__ import annotations

import logging
import sys

import numpy as np
import pytest

from pygeodepth.config import DepthKeys
from pygeodepth.errors import DepthValidationError
from pygeodepth.utils.logging import configure_logging, get_logger
from pygeodepth.utils.numeric import (
    depth_array,
    field_value,
    format_number,
    format_raw,
    is_nonempty_list,
    is_nonempty_mapping,
    is_nonempty_str,
    is_number,
    to_float,
)
from pygeodepth.validation.result import ValidationIssue, ValidationResult


# ======================================================================
# Numeric coercion
# ======================================================================

class TestToFloat:
    @pytest.mark.parametrize("value, expected", [
        (3, 3.0),
        (2.5, 2.5),
        ("4", 4.0),
        (" -1.25 ", -1.25),
        ("1e2", 100.0),
        (np.float32(1.5), 1.5),
        (np.int64(7), 7.0),
    ])
    def test_valid(self, value, expected):
        assert to_float(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value", [
        None, True, False, "", "   ", "abc", float("nan"), float("inf"),
        "inf", "nan", "1e400", 10**400, -(10**400), [], {}, object(),
    ])
    def test_invalid(self, value):
        assert to_float(value) is None
        assert not is_number(value)


class TestPredicates:
    def test_nonempty_str(self):
        assert is_nonempty_str("depth")
        assert not is_nonempty_str("")
        assert not is_nonempty_str(None)

    def test_nonempty_list(self):
        assert is_nonempty_list([1])
        assert is_nonempty_list((1,))
        assert not is_nonempty_list([])
        assert not is_nonempty_list("ab")

    def test_nonempty_mapping(self):
        assert is_nonempty_mapping({"a": 1})
        assert not is_nonempty_mapping({})
        assert not is_nonempty_mapping([("a", 1)])

    def test_field_value(self):
        assert field_value({"depth": 3}, "depth") == 3
        assert field_value({"depth": 3}, "other") is None
        assert field_value(5, "depth") is None

    def test_format_number(self):
        assert format_number(5.0) == "5"
        assert format_number(2.5) == "2.5"
        assert format_number(-0.125) == "-0.125"
        assert format_number(7) == "7"

    def test_format_raw(self):
        assert format_raw("abc") == "abc"
        assert format_raw(None) == "None"
        assert isinstance(format_raw(10**5000), str)

    def test_depth_array(self):
        d = depth_array([{"depth": 1}, {"depth": "bad"}], "depth")
        assert d.dtype == float
        assert d[0] == 1.0
        assert np.isnan(d[1])


# ======================================================================
# Configuration
# ======================================================================

class TestDepthKeys:
    def test_defaults(self):
        keys = DepthKeys.resolve(None)
        assert keys == DepthKeys("depth", "depthStart", "depthEnd", "rows")

    def test_camel_case_options(self):
        keys = DepthKeys.resolve({"keyDepth": "dc", "keyGroup": "samples"})
        assert keys.key_depth == "dc"
        assert keys.key_group == "samples"
        assert keys.key_depth_start == "depthStart"

    def test_snake_case_options(self):
        keys = DepthKeys.resolve({"key_depth_end": "bottom"})
        assert keys.key_depth_end == "bottom"

    @pytest.mark.parametrize("bad", ["", None, 3, ["dc"]])
    def test_invalid_option_falls_back(self, bad):
        assert DepthKeys.resolve({"keyDepth": bad}).key_depth == "depth"

    def test_unknown_options_ignored(self):
        assert DepthKeys.resolve({"colour": "red"}) == DepthKeys()

    def test_passthrough(self):
        keys = DepthKeys(key_depth="dc")
        assert DepthKeys.resolve(keys) is keys

    @pytest.mark.parametrize("opt", ["depth", 3, ["keyDepth", "dc"]])
    def test_non_mapping_uses_defaults(self, opt):
        assert DepthKeys.resolve(opt) == DepthKeys()


# ======================================================================
# Validation results
# ======================================================================

def _positive(i, x):
    if x > 0:
        return []
    return [ValidationIssue(f"item {i} is not positive", index=i, value=x)]


class TestValidationResult:
    def test_collect_success(self):
        res = ValidationResult.collect([1, 2], _positive)
        assert res.ok
        assert res.unwrap() == [1, 2]

    def test_collect_accumulates_all(self):
        res = ValidationResult.collect([-1, 2, 0], _positive)
        assert not res.ok
        assert res.messages() == ["item 0 is not positive", "item 2 is not positive"]
        assert [i.index for i in res.issues] == [0, 2]

    def test_then_skipped_after_failure(self):
        calls = []

        def stage(value):
            calls.append(value)
            return ValidationResult.success(value)

        res = ValidationResult.collect([0], _positive).then(stage)
        assert not res.ok
        assert calls == []

    def test_then_and_map_chain(self):
        res = (ValidationResult.collect([3, 1], _positive)
               .map(sorted)
               .then(ValidationResult.success))
        assert res.unwrap() == [1, 3]

    def test_unwrap_raises_joined(self):
        res = ValidationResult.collect([0, -2], _positive)
        with pytest.raises(DepthValidationError) as exc:
            res.unwrap()
        assert str(exc.value) == "item 0 is not positive; item 1 is not positive"
        assert exc.value.issues == res.issues

    def test_issue_str(self):
        assert str(ValidationIssue("bad", index=1, field="depth", value="x")) == "bad"


# ======================================================================
# Logging
# ======================================================================

@pytest.fixture
def package_logger():
    logger = logging.getLogger("pygeodepth")
    handlers, level = logger.handlers[:], logger.level
    yield logger
    for h in logger.handlers[:]:
        if h not in handlers:
            logger.removeHandler(h)
    logger.setLevel(level)


class TestLogging:
    def test_configure_adds_one_handler(self, package_logger):
        configure_logging("DEBUG")
        configure_logging("DEBUG")
        stderr_handlers = [
            h for h in package_logger.handlers
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr
        ]
        assert len(stderr_handlers) == 1
        assert package_logger.level == logging.DEBUG

    def test_force_replaces(self, package_logger):
        configure_logging("INFO")
        first = package_logger.handlers[-1]
        configure_logging("WARNING", force=True)
        assert first not in package_logger.handlers
        assert package_logger.level == logging.WARNING

    def test_level_from_environment(self, package_logger, monkeypatch):
        monkeypatch.setenv("PYGEODEPTH_LOG_LEVEL", "ERROR")
        configure_logging(force=True)
        assert package_logger.level == logging.ERROR

    def test_get_logger(self):
        assert get_logger().name == "pygeodepth"
        assert get_logger("pygeodepth.depth").name == "pygeodepth.depth"
