"""Unit tests for output formatters."""

from fqdnkit.domain.entities import CheckSummary, Fqdn
from fqdnkit.domain.rules import DEFAULT_RULES
from fqdnkit.domain.validators import FqdnValidator
from fqdnkit.presentation.formatters import (
    ColorFormatter,
    NameRecordFormatter,
    SummaryFormatter,
)


def check(value):
    return FqdnValidator(DEFAULT_RULES).validate(value)


class TestNameRecordFormatter:
    """Tests for per-name output."""

    def test_valid_name(self):
        """Test output for a valid name."""
        line = NameRecordFormatter().format(check("www.Example.com"))

        assert line.startswith(ColorFormatter.SUCCESS)
        assert "www.Example.com (depth 3)" in line

    def test_invalid_name(self):
        """Test output for an invalid name."""
        line = NameRecordFormatter().format(check("git@hub.com"))

        assert line.startswith(ColorFormatter.ERROR)
        assert "invalid_character" in line

    def test_markup_is_escaped(self):
        """Test that input cannot inject Rich markup."""
        line = NameRecordFormatter().format(check("[red]x.com"))

        assert "\\[red]x.com" in line

    def test_outside_domain(self):
        """Test that names outside the expected domain are flagged."""
        formatter = NameRecordFormatter(within=Fqdn.parse("example.com", DEFAULT_RULES))

        assert formatter.format(check("www.example.org")).startswith(ColorFormatter.WARNING)
        assert formatter.format(check("www.example.com")).startswith(ColorFormatter.SUCCESS)

    def test_unicode_output(self):
        """Test decoded rendering of internationalized names."""
        line = NameRecordFormatter(unicode_output=True).format(check("www.académie-française.fr"))

        assert "www.académie-française.fr (depth 3)" in line

    def test_unicode_output_with_undecodable_label(self):
        """Test that a bad A-label is rendered as stored."""
        line = NameRecordFormatter(unicode_output=True).format(check("xn--ls8h.com"))

        assert line.startswith(ColorFormatter.SUCCESS)
        assert "xn--ls8h.com (depth 2)" in line


class TestSummaryFormatter:
    """Tests for summary output."""

    def test_summary(self):
        """Test counts and error breakdown."""
        summary = CheckSummary()
        for value in ["example.com", "a..b", "-a.com", "c..d"]:
            summary.record_result(check(value))

        text = SummaryFormatter.format(summary)

        assert "Total names: 4" in text
        assert "Valid: 1" in text
        assert "Invalid: 3" in text
        assert "malformed_separators: 2" in text
        assert "invalid_hyphen_placement: 1" in text
        assert "Success rate: 25.0%" in text
