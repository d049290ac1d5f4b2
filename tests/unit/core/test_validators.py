"""
test_validators.py
------------------
Unit tests for quire.core.validators.DataValidator.
"""
import pytest

from quire.core.exceptions import ValidationError
from quire.core.validators import DataValidator


class TestNormalizeLocators:
    def test_none(self):
        assert DataValidator.normalize_locators(None) == []

    def test_string(self):
        assert DataValidator.normalize_locators("a.css") == ["a.css"]

    def test_list(self):
        assert DataValidator.normalize_locators(["a.css", ""]) == ["a.css", ""]

    def test_rejects_mapping(self):
        with pytest.raises(ValidationError, match="string or list"):
            DataValidator.normalize_locators({"a": 1})

    def test_rejects_non_string_items(self):
        with pytest.raises(ValidationError, match="only strings"):
            DataValidator.normalize_locators(["a.css", None])


class TestNormalizeVars:
    def test_none(self):
        assert DataValidator.normalize_vars(None) == {}

    def test_keys_are_strings(self):
        assert DataValidator.normalize_vars({1: "x"}) == {"1": "x"}

    def test_rejects_list(self):
        with pytest.raises(ValidationError):
            DataValidator.normalize_vars(["red"])


class TestNormalizeBool:
    @pytest.mark.parametrize("value", [True, 1, "yes", "ON"])
    def test_truthy(self, value):
        assert DataValidator.normalize_bool(value) is True

    @pytest.mark.parametrize("value", [False, 0, "no", "off"])
    def test_falsy(self, value):
        assert DataValidator.normalize_bool(value) is False

    def test_invalid_string(self):
        with pytest.raises(ValidationError):
            DataValidator.normalize_bool("maybe")


class TestRequiredFields:
    def test_missing(self):
        with pytest.raises(ValidationError, match="'path'"):
            DataValidator.validate_required_fields({"title": "x"}, ["path"])

    def test_present(self):
        DataValidator.validate_required_fields({"path": "a.md"}, ["path"])
