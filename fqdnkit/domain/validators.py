"""Non-raising validation and classification of domain names."""

import logging
from functools import lru_cache
from typing import Optional, Protocol

from .entities import Fqdn, NameRecord, NameStatus
from .exceptions import ValidationException
from .rules import RuleSet, get_active_rules

logger = logging.getLogger(__name__)


class Validator(Protocol):
    """Protocol for validators."""

    def is_valid(self, value: str) -> bool:
        """Check if value is valid."""
        ...


@lru_cache(maxsize=1024)
def _is_valid(value: str, rules: RuleSet) -> bool:
    try:
        Fqdn.parse(value, rules)
    except ValidationException:
        return False
    return True


class FqdnValidator:
    """
    Validates domain names against a rule set.

    Uses caching for improved performance on repeated validations.
    """

    def __init__(self, rules: Optional[RuleSet] = None):
        """
        Initialize validator.

        Args:
            rules: Rule set (default: active rules)
        """
        self.rules = rules or get_active_rules()

    def is_valid(self, value: str) -> bool:
        """
        Validate a name with caching.

        Args:
            value: Domain name to validate

        Returns:
            True if the name parses under the rule set
        """
        if not isinstance(value, str):
            return False
        return _is_valid(value, self.rules)

    def validate(self, value: str) -> NameRecord:
        """
        Validate a name and keep the outcome.

        Args:
            value: Domain name to validate

        Returns:
            NameRecord with the parsed Fqdn or the validation error
        """
        try:
            fqdn = Fqdn.parse(value, self.rules)
        except ValidationException as e:
            logger.debug("Rejected %r: %s", value, e)
            return NameRecord(value=value, status=NameStatus.INVALID, error=e)

        return NameRecord(value=value, status=NameStatus.VALID, fqdn=fqdn)


class NameClassifier:
    """Classifies raw input lines into valid and invalid names."""

    def __init__(self, rules: Optional[RuleSet] = None):
        """Initialize classifier with a validator."""
        self._validator = FqdnValidator(rules)

    @property
    def rules(self) -> RuleSet:
        return self._validator.rules

    def classify(self, value: str) -> NameRecord:
        """
        Classify a raw name string.

        Args:
            value: Raw name, surrounding whitespace is ignored

        Returns:
            NameRecord with determined status
        """
        return self._validator.validate(value.strip())

    def classify_batch(self, values: list[str]) -> list[NameRecord]:
        """
        Classify multiple names.

        Args:
            values: List of raw name strings

        Returns:
            List of classified NameRecords
        """
        return [self.classify(value) for value in values]


# Convenience function
def is_valid_fqdn(value: str, rules: Optional[RuleSet] = None) -> bool:
    """Check if string is a valid domain name."""
    return FqdnValidator(rules).is_valid(value)
