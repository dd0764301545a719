"""Tests for the configuration layer."""

import warnings

import numpy as np
import pytest

from mtx_layout.config import (
    ConfigurationError,
    ConfigurationWarning,
    ElementType,
    LayoutConfig,
    SyntheticConfig,
    create_default_config,
    create_validated_config,
    get_default,
    get_defaults,
    reload_defaults,
    validate_config,
    warn_if_unsafe,
)
from mtx_layout.config.yaml_loader import DEFAULTS_ENV_VAR
from mtx_layout.core.errors import MtxLayoutError


@pytest.fixture
def custom_defaults(tmp_path, monkeypatch):
    """Point the loader at a temporary defaults file, restoring afterwards."""
    path = tmp_path / "defaults.yaml"
    path.write_text(
        "layout:\n"
        "  element_type: int32\n"
        "  padding_modulo: 8\n"
        "  zero_value: -1\n"
        "synthetic:\n"
        "  seed: 42\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(DEFAULTS_ENV_VAR, str(path))
    reload_defaults()
    yield path
    monkeypatch.delenv(DEFAULTS_ENV_VAR)
    reload_defaults()


@pytest.fixture
def broken_defaults(tmp_path, monkeypatch):
    """Defaults file whose layout values cannot be used."""
    path = tmp_path / "broken.yaml"
    path.write_text(
        "layout:\n"
        "  element_type: float16\n"
        "  padding_modulo: wide\n"
        "synthetic:\n"
        "  low: zero\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(DEFAULTS_ENV_VAR, str(path))
    reload_defaults()
    yield path
    monkeypatch.delenv(DEFAULTS_ENV_VAR)
    reload_defaults()


class TestYamlDefaults:
    """Tests for defaults.yaml access."""

    def test_packaged_defaults(self):
        assert get_default("layout.element_type") == "float64"
        assert get_default("layout.padding_modulo") == 16
        assert get_default("layout.zero_value") == 0.0
        assert get_default("logging.level") == "INFO"

    def test_missing_key_fallback(self):
        assert get_default("layout.nonexistent", "fallback") == "fallback"
        assert get_default("nonexistent.key") is None
        assert get_default("layout.padding_modulo.deeper", 3) == 3

    def test_null_value_uses_fallback(self):
        assert get_default("synthetic.seed", 7) == 7

    def test_get_defaults_is_a_copy(self):
        defaults = get_defaults()
        defaults["layout"] = None

        assert get_defaults()["layout"] is not None

    def test_env_override(self, custom_defaults):
        assert get_default("layout.padding_modulo") == 8

        config = LayoutConfig()
        assert config.element_type is ElementType.INT32
        assert config.padding_modulo == 8
        assert config.zero_value == -1.0
        assert SyntheticConfig().seed == 42

    def test_bad_defaults_reported_by_validate(self, broken_defaults):
        errors = LayoutConfig().validate()

        assert len(errors) == 2
        assert any("padding_modulo must be an integer" in e for e in errors)
        assert any("element_type must be one of" in e for e in errors)
        assert SyntheticConfig().validate()

    def test_bad_defaults_raise_configuration_error(self, broken_defaults):
        with pytest.raises(ConfigurationError, match="2 error"):
            create_validated_config()

    def test_bad_defaults_with_overrides(self, broken_defaults):
        config = create_validated_config(element_type="float32", padding_modulo=4)

        assert config.element_type is ElementType.FLOAT32


class TestLayoutConfig:
    """Tests for LayoutConfig."""

    def test_defaults(self):
        config = create_default_config()

        assert config.element_type is ElementType.FLOAT64
        assert config.padding_modulo == 16
        assert config.zero_value == 0.0
        assert config.validate() == []

    def test_string_element_type(self):
        assert LayoutConfig(element_type="FLOAT32").element_type is ElementType.FLOAT32

    def test_unknown_element_type(self):
        config = LayoutConfig(element_type="float16")

        assert config.element_type == "float16"
        assert "element_type must be one of float64, float32, int32" in config.validate()[0]

    def test_non_numeric_zero(self):
        errors = LayoutConfig(zero_value="nothing").validate()

        assert errors == ["zero_value must be a number, got 'nothing'"]

    def test_typed_zero(self):
        zero = LayoutConfig(element_type="int32", zero_value=3.0).typed_zero

        assert zero == 3
        assert zero.dtype == np.int32

    @pytest.mark.parametrize("modulo, message", [
        (0, "must be > 0"),
        (-4, "must be > 0"),
        (2.5, "must be an integer"),
        (True, "must be an integer"),
    ])
    def test_invalid_modulo(self, modulo, message):
        errors = LayoutConfig(padding_modulo=modulo).validate()

        assert len(errors) == 1
        assert message in errors[0]

    def test_zero_out_of_int32_range(self):
        errors = LayoutConfig(element_type="int32", zero_value=1e12).validate()

        assert "does not fit in int32" in errors[0]


class TestSyntheticConfig:
    def test_defaults(self):
        config = SyntheticConfig()

        assert config.low == 0.0
        assert config.high == 1.0
        assert config.seed is None
        assert config.validate() == []

    def test_invalid(self):
        errors = SyntheticConfig(low=2.0, high=1.0, seed=-1).validate()

        assert len(errors) == 2


class TestValidation:
    """Tests for validate_config, warn_if_unsafe and create_validated_config."""

    def test_configuration_error_is_library_error(self):
        assert issubclass(ConfigurationError, MtxLayoutError)

    def test_validate_config_raises(self):
        with pytest.raises(ConfigurationError, match="1 error"):
            validate_config(LayoutConfig(padding_modulo=0))

    def test_validate_config_no_raise(self):
        is_valid, errors = validate_config(LayoutConfig(padding_modulo=0), raise_on_error=False)

        assert not is_valid
        assert errors

    def test_create_validated_config(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            config = create_validated_config(element_type="float32", padding_modulo=8)

        assert config.element_type is ElementType.FLOAT32
        assert config.padding_modulo == 8

    def test_unknown_parameter(self):
        with pytest.raises(ValueError, match="Unknown configuration parameter: modulus"):
            create_validated_config(modulus=4)

    def test_invalid_value(self):
        with pytest.raises(ConfigurationError):
            create_validated_config(padding_modulo=-1)

    def test_non_power_of_two_warns(self):
        with pytest.warns(ConfigurationWarning, match="not a power of two"):
            messages = warn_if_unsafe(LayoutConfig(padding_modulo=6))

        assert len(messages) == 1

    def test_fractional_int_zero_warns(self):
        with pytest.warns(ConfigurationWarning, match="fractional"):
            create_validated_config(element_type="int32", zero_value=0.5)
