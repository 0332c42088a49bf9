"""
Tests for parser settings.
"""

import pytest
from pydantic import ValidationError

from jsonpathops.settings import DEFAULT_SETTINGS, PathSettings


class TestPathSettings:
    """Test PathSettings model."""

    def test_defaults_are_lenient(self):
        """Test both strictness options default off."""
        assert DEFAULT_SETTINGS.strict_fields is False
        assert DEFAULT_SETTINGS.strict_indices is False

    def test_strict_constructor(self):
        """Test strict() enables every option."""
        settings = PathSettings.strict()
        assert settings.strict_fields is True
        assert settings.strict_indices is True

    def test_frozen(self):
        """Test settings cannot be changed after creation."""
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.strict_fields = True

    def test_unknown_option_rejected(self):
        """Test misspelled options fail validation."""
        with pytest.raises(ValidationError):
            PathSettings(strict_field=True)
