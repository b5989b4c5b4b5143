"""Tests for conversion settings."""

import pytest

from accessible_tab import ConversionSettings
from accessible_tab.settings import resolve_settings


class TestConversionSettings:
    """Test settings construction."""

    def test_defaults(self) -> None:
        """Test that every option defaults to True."""
        settings = ConversionSettings()
        assert settings.include_timing is True
        assert settings.verbose_mode is True
        assert settings.use_string_names is True
        assert settings.include_technique_details is True

    @pytest.mark.parametrize(
        ("key", "field"),
        [
            ("includeTiming", "include_timing"),
            ("verboseMode", "verbose_mode"),
            ("useStringNames", "use_string_names"),
            ("includeTechniqueDetails", "include_technique_details"),
            ("verbose_mode", "verbose_mode"),
        ],
    )
    def test_keys(self, key: str, field: str) -> None:
        """Test camelCase and snake_case keys."""
        settings = ConversionSettings.from_mapping({key: False})
        assert getattr(settings, field) is False

    def test_missing_and_unknown(self) -> None:
        """Test that unknown keys are ignored and missing ones default."""
        settings = ConversionSettings.from_mapping({"fontSize": 12, "verboseMode": False})
        assert settings == ConversionSettings(verbose_mode=False)

    @pytest.mark.parametrize("value", ["false", 0, None, [False]])
    def test_non_boolean_values(self, value: object) -> None:
        """Test that non-boolean values keep the default."""
        assert ConversionSettings.from_mapping({"includeTiming": value}).include_timing is True

    def test_frozen(self) -> None:
        """Test that settings are immutable."""
        settings = ConversionSettings()
        with pytest.raises(AttributeError):
            settings.verbose_mode = False  # type: ignore[misc]


class TestResolveSettings:
    """Test normalising settings input."""

    def test_none(self) -> None:
        """Test the default."""
        assert resolve_settings(None) == ConversionSettings()

    def test_instance_passthrough(self) -> None:
        """Test that an instance is returned unchanged."""
        settings = ConversionSettings(include_timing=False)
        assert resolve_settings(settings) is settings

    def test_mapping(self) -> None:
        """Test a mapping."""
        assert resolve_settings({"useStringNames": False}).use_string_names is False
