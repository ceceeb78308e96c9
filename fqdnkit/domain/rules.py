"""Rule sets controlling how strictly domain names are validated."""

import logging
from dataclasses import dataclass, fields
from functools import lru_cache
from typing import Final

from pydantic import ValidationError

from fqdnkit.config.settings import RuleSettings, get_settings

from .exceptions import ConfigurationException

logger = logging.getLogger(__name__)

# RFC 1035 limits
RFC_LABEL_LENGTH: Final[int] = 63
RFC_NAME_LENGTH: Final[int] = 255

# Relaxed ceilings: a label length must fit in one octet
RELAXED_LABEL_LENGTH: Final[int] = 255
RELAXED_NAME_LENGTH: Final[int] = 65535


@dataclass(frozen=True)
class RuleSet:
    """
    Immutable bundle of validation toggles.

    The default bundle only forbids edge hyphens; it accepts underscores
    and long labels so that real-world names (e.g. Kubernetes service
    names) still parse.
    """

    label_length_63: bool = False
    name_length_255: bool = False
    restricted_charset: bool = False
    trailing_dot: bool = False
    no_edge_hyphen: bool = True

    @classmethod
    def strict(cls) -> "RuleSet":
        """Rule set conforming to RFC 1035, 952 and 1123."""
        return cls(
            label_length_63=True,
            name_length_255=True,
            restricted_charset=True,
            trailing_dot=True,
            no_edge_hyphen=True,
        )

    @classmethod
    def from_settings(cls, settings: RuleSettings) -> "RuleSet":
        """Build a rule set from loaded settings; `strict` implies every toggle."""
        if settings.strict:
            return cls.strict()
        return cls(**{f.name: getattr(settings, f.name) for f in fields(cls)})

    @property
    def max_label_length(self) -> int:
        return RFC_LABEL_LENGTH if self.label_length_63 else RELAXED_LABEL_LENGTH

    @property
    def max_name_length(self) -> int:
        return RFC_NAME_LENGTH if self.name_length_255 else RELAXED_NAME_LENGTH

    @property
    def is_strict(self) -> bool:
        return all(getattr(self, f.name) for f in fields(self))


DEFAULT_RULES: Final[RuleSet] = RuleSet()
STRICT_RULES: Final[RuleSet] = RuleSet.strict()


@lru_cache
def get_active_rules() -> RuleSet:
    """
    Resolve the process-wide rule set from configuration.

    Resolved once; call `get_active_rules.cache_clear()` together with
    `get_settings.cache_clear()` to reload.

    Raises:
        ConfigurationException: If the FQDN_* settings are invalid
    """
    try:
        _, rule_settings = get_settings()
    except ValidationError as e:
        raise ConfigurationException(f"Invalid rule settings: {e}") from e

    rules = RuleSet.from_settings(rule_settings)
    logger.info("Active FQDN rules: %s", rules)
    return rules
