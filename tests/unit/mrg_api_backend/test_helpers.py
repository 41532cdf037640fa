# Third Party
import pytest

# My Modules
from gateway_backend.utils.helpers import (
    DEFAULT_MAX_RESULTS,
    clamp_max_results,
    parse_max_results,
    redact_secrets,
)


class TestClampMaxResults:
    """Test cases for clamp_max_results function."""

    @pytest.mark.parametrize(
        "requested, expected",
        [(1, 1), (500, 500), (1000, 1000), (1001, 1000), (0, 1), (-20, 1)],
    )
    def test_clamp_to_inclusive_range(self, requested, expected):
        """Test that values are clamped to [1, 1000]."""
        # Act & Assert
        assert clamp_max_results(requested) == expected


class TestParseMaxResults:
    """Test cases for parse_max_results function."""

    def test_missing_value_uses_default(self):
        """Test that a missing query value falls back to 500."""
        # Act
        result = parse_max_results(None)

        # Assert
        assert result == DEFAULT_MAX_RESULTS == 500

    def test_blank_value_uses_default(self):
        """Test that an empty query value falls back to 500."""
        # Act & Assert
        assert parse_max_results("") == 500
        assert parse_max_results("   ") == 500

    @pytest.mark.parametrize(
        "raw",
        ["abc", "12abc", "1.5", "NaN", "1_000", "\uff15", "\u0663", "+-5"],
    )
    def test_non_numeric_value_uses_default(self, raw):
        """Test that malformed values are normalised, not rejected."""
        # Act & Assert
        assert parse_max_results(raw) == 500

    def test_numeric_value_is_parsed(self):
        """Test that a valid integer string is used as given."""
        # Act & Assert
        assert parse_max_results("120") == 120
        assert parse_max_results(" 42 ") == 42
        assert parse_max_results("+7") == 7
        assert parse_max_results("0042") == 42

    def test_numeric_value_is_clamped(self):
        """Test that parsed values are clamped to [1, 1000]."""
        # Act & Assert
        assert parse_max_results("5000") == 1000
        assert parse_max_results("0") == 1
        assert parse_max_results("-3") == 1

    def test_custom_default(self):
        """Test that a custom default is used for malformed values."""
        # Act & Assert
        assert parse_max_results("oops", default=25) == 25


class TestRedactSecrets:
    """Test cases for redact_secrets function."""

    def test_redacts_every_occurrence(self):
        """Test that each secret is replaced wherever it appears."""
        # Arrange
        message = "Invalid api_key 1234 (key=1234, secret=s3cr3t)"

        # Act
        result = redact_secrets(message, ["1234", "s3cr3t"])

        # Assert
        assert "1234" not in result
        assert "s3cr3t" not in result
        assert result.count("[REDACTED]") == 3

    def test_empty_secrets_are_skipped(self):
        """Test that empty or missing secrets leave the message untouched."""
        # Arrange
        message = "Resource not found"

        # Act
        result = redact_secrets(message, ["", None])

        # Assert
        assert result == message
