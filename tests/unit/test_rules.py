"""Unit tests for rule sets and their configuration."""

import pytest

from fqdnkit.config.settings import get_settings
from fqdnkit.domain.exceptions import ConfigurationException
from fqdnkit.domain.rules import (
    DEFAULT_RULES,
    STRICT_RULES,
    RuleSet,
    get_active_rules,
)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    """Resolve settings from a clean environment for every test."""
    monkeypatch.chdir(tmp_path)  # No stray .env file
    for name in (
        "FQDN_STRICT",
        "FQDN_LABEL_LENGTH_63",
        "FQDN_NAME_LENGTH_255",
        "FQDN_RESTRICTED_CHARSET",
        "FQDN_TRAILING_DOT",
        "FQDN_NO_EDGE_HYPHEN",
    ):
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    get_active_rules.cache_clear()
    yield
    get_settings.cache_clear()
    get_active_rules.cache_clear()


class TestRuleSet:
    """Tests for RuleSet bundles."""

    def test_default_bundle(self):
        """Test that the default bundle only forbids edge hyphens."""
        assert DEFAULT_RULES == RuleSet(no_edge_hyphen=True)
        assert DEFAULT_RULES.max_label_length == 255
        assert DEFAULT_RULES.max_name_length == 65535
        assert DEFAULT_RULES.is_strict is False

    def test_strict_bundle(self):
        """Test that the strict bundle enables every toggle."""
        assert STRICT_RULES.is_strict is True
        assert STRICT_RULES.max_label_length == 63
        assert STRICT_RULES.max_name_length == 255
        assert STRICT_RULES.trailing_dot is True
        assert STRICT_RULES.restricted_charset is True

    def test_immutability(self):
        """Test that RuleSet is immutable."""
        with pytest.raises(AttributeError):
            DEFAULT_RULES.trailing_dot = True  # type: ignore


class TestActiveRules:
    """Tests for configuration-driven rule selection."""

    def test_defaults(self):
        """Test rules without any environment."""
        assert get_active_rules() == DEFAULT_RULES

    def test_strict_implies_all(self, monkeypatch):
        """Test that FQDN_STRICT enables every toggle."""
        monkeypatch.setenv("FQDN_STRICT", "true")
        monkeypatch.setenv("FQDN_NO_EDGE_HYPHEN", "false")

        assert get_active_rules() == STRICT_RULES

    def test_individual_toggles(self, monkeypatch):
        """Test that toggles combine freely."""
        monkeypatch.setenv("FQDN_RESTRICTED_CHARSET", "1")
        monkeypatch.setenv("FQDN_NO_EDGE_HYPHEN", "0")

        assert get_active_rules() == RuleSet(restricted_charset=True, no_edge_hyphen=False)

    def test_resolved_once(self, monkeypatch):
        """Test that the active rules are cached for the process."""
        first = get_active_rules()
        monkeypatch.setenv("FQDN_STRICT", "true")

        assert get_active_rules() is first

    def test_env_file(self, tmp_path):
        """Test that rules can come from a .env file."""
        (tmp_path / ".env").write_text("FQDN_TRAILING_DOT=true\n", encoding="utf-8")

        assert get_active_rules() == RuleSet(trailing_dot=True)

    def test_invalid_configuration(self, monkeypatch):
        """Test that unparsable settings raise ConfigurationException."""
        monkeypatch.setenv("FQDN_STRICT", "maybe")

        with pytest.raises(ConfigurationException):
            get_active_rules()
