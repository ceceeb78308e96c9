"""Unit tests for validators."""

import pytest

from fqdnkit.domain.entities import Fqdn, NameStatus
from fqdnkit.domain.exceptions import ErrorKind
from fqdnkit.domain.rules import DEFAULT_RULES, STRICT_RULES
from fqdnkit.domain.validators import FqdnValidator, NameClassifier, is_valid_fqdn


class TestFqdnValidator:
    """Tests for FQDN validation."""

    @pytest.mark.parametrize("value", [
        "example.com",
        "subdomain.example.com",
        "deep.subdomain.example.com",
        "example.com.",  # Absolute
        "test-domain.com",
        "123.example.com",
        "localhost",  # Single label
        "_dmarc.example.com",
    ])
    def test_valid_fqdns(self, value):
        """Test valid FQDNs."""
        assert FqdnValidator(DEFAULT_RULES).is_valid(value) is True

    @pytest.mark.parametrize("value", [
        "-example.com",  # Leading hyphen
        "example-.com",  # Trailing hyphen
        "exam ple.com",  # Space
        "*.example.com",  # Wildcard
        "a" * 256 + ".com",  # Label too long
        "example..com",  # Empty label
    ])
    def test_invalid_fqdns(self, value):
        """Test invalid FQDNs."""
        assert FqdnValidator(DEFAULT_RULES).is_valid(value) is False

    @pytest.mark.parametrize("value", [
        "_dmarc.example.com",
        "a" * 64 + ".com",
        ("a" * 63 + ".") * 4,
    ])
    def test_strict_rejects(self, value):
        """Test names only accepted by the relaxed rules."""
        assert FqdnValidator(DEFAULT_RULES).is_valid(value) is True
        assert FqdnValidator(STRICT_RULES).is_valid(value) is False

    def test_non_string(self):
        """Test that non-string values are invalid."""
        assert FqdnValidator(DEFAULT_RULES).is_valid(None) is False  # type: ignore

    def test_validate_keeps_error(self):
        """Test that validate() reports the failure kind."""
        record = FqdnValidator(DEFAULT_RULES).validate("example..com")

        assert record.status == NameStatus.INVALID
        assert record.fqdn is None
        assert record.error_kind == ErrorKind.MALFORMED_SEPARATORS

    def test_validate_keeps_fqdn(self):
        """Test that validate() returns the parsed name."""
        record = FqdnValidator(DEFAULT_RULES).validate("Example.com")

        assert record.is_valid is True
        assert record.fqdn == Fqdn.parse("example.com.", DEFAULT_RULES)

    def test_convenience_function(self):
        """Test is_valid_fqdn with explicit rules."""
        assert is_valid_fqdn("ab_c.com", DEFAULT_RULES) is True
        assert is_valid_fqdn("ab_c.com", STRICT_RULES) is False


class TestNameClassifier:
    """Tests for name classification."""

    def test_classify_strips_whitespace(self):
        """Test that surrounding whitespace is ignored."""
        record = NameClassifier(DEFAULT_RULES).classify("  Example.com  \n")

        assert record.value == "Example.com"
        assert record.is_valid is True

    def test_classify_batch(self):
        """Test batch classification."""
        classifier = NameClassifier(STRICT_RULES)
        records = classifier.classify_batch([
            "example.com",
            "ab_c.com",
            "-abc.com",
            "a" * 64 + ".com",
            "☃.com",
        ])

        assert len(records) == 5
        assert records[0].is_valid is True
        assert [r.error_kind for r in records[1:]] == [
            ErrorKind.INVALID_CHARACTER,
            ErrorKind.INVALID_HYPHEN_PLACEMENT,
            ErrorKind.LABEL_TOO_LONG,
            ErrorKind.CODEC_FAILURE,
        ]

    def test_rules_property(self):
        """Test that the classifier exposes its rules."""
        assert NameClassifier(STRICT_RULES).rules == STRICT_RULES
