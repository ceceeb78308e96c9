"""Internationalized label transcoding."""

import logging
from typing import Final, Protocol

import idna

from fqdnkit.domain.exceptions import CodecFailure

logger = logging.getLogger(__name__)

ACE_PREFIX: Final[str] = "xn--"


class LabelCodec(Protocol):
    """Protocol for converting between Unicode labels and ASCII labels."""

    def encode(self, label: str) -> str:
        """Encode a Unicode label to its ASCII-compatible form."""
        ...

    def decode(self, label: str) -> str:
        """Decode an ASCII-compatible label to Unicode."""
        ...


class IdnaCodec:
    """
    IDNA 2008 label codec backed by the `idna` package.

    Labels are lowercased before encoding, so `Française` and `française`
    map to the same A-label.
    """

    def encode(self, label: str) -> str:
        """
        Encode a Unicode label to an A-label.

        Args:
            label: Label text, possibly containing non-ASCII characters

        Returns:
            ASCII label (`xn--` prefixed when transcoding was needed)

        Raises:
            CodecFailure: If the label is not a valid IDNA label
        """
        try:
            # idna caps A-labels at 63 octets regardless of the rule set
            encoded = idna.alabel(label.lower()).decode("ascii")
        except (idna.IDNAError, UnicodeError) as e:
            raise CodecFailure(f"Cannot encode label {label!r}: {e}", label) from e

        logger.debug("Encoded label %r as %r", label, encoded)
        return encoded

    def decode(self, label: str) -> str:
        """
        Decode an A-label to Unicode.

        Labels without the `xn--` prefix are returned unchanged.

        Raises:
            CodecFailure: If the A-label is malformed
        """
        if not label.lower().startswith(ACE_PREFIX):
            return label

        try:
            return idna.ulabel(label)
        except (idna.IDNAError, UnicodeError) as e:
            raise CodecFailure(f"Cannot decode label {label!r}: {e}", label) from e


default_codec: Final[LabelCodec] = IdnaCodec()
