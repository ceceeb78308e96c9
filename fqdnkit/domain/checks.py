"""
Label and name checks shared by the domain entities.

Every check returns canonical (lowercase, ASCII) data or raises a
ValidationException subclass.
"""

import re
from typing import Final, Iterable, Optional

from fqdnkit.infrastructure.codec import LabelCodec, default_codec

from .exceptions import (
    EmptyLabel,
    InvalidCharacter,
    InvalidHyphenPlacement,
    InvalidStructure,
    LabelTooLong,
    NameTooLong,
)
from .rules import RuleSet

_RESTRICTED_INVALID: Final[re.Pattern] = re.compile(r"[^a-z0-9-]")
_RELAXED_INVALID: Final[re.Pattern] = re.compile(r"[^a-z0-9_-]")


def check_label(
    text: str,
    rules: RuleSet,
    *,
    codec: Optional[LabelCodec] = default_codec,
) -> tuple[bytes, str]:
    """
    Validate a single label.

    Args:
        text: Label text (without dots)
        rules: Active rule set
        codec: Transcoder for non-ASCII labels; None rejects them

    Returns:
        Tuple of (canonical lowercase bytes, display text)

    Raises:
        ValidationException: On the first violated rule
    """
    if not text:
        raise EmptyLabel("empty label found in domain name", text)

    if not text.isascii():
        if codec is None:
            raise _invalid_character(text, next(c for c in text if not c.isascii()))
        text = codec.encode(text)

    # str.lower() only touches A-Z on ASCII text
    canonical = text.lower()

    limit = rules.max_label_length
    if len(canonical) > limit:
        raise LabelTooLong(
            f"label of {len(canonical)} octets exceeds the {limit} octet limit",
            text,
            length=len(canonical),
            limit=limit,
        )

    pattern = _RESTRICTED_INVALID if rules.restricted_charset else _RELAXED_INVALID
    match = pattern.search(canonical)
    if match:
        raise _invalid_character(text, text[match.start()], match.start())

    if rules.no_edge_hyphen:
        if canonical.startswith("-"):
            raise InvalidHyphenPlacement("label can't start with a hyphen", text, position="start")
        if canonical.endswith("-"):
            raise InvalidHyphenPlacement("label can't end with a hyphen", text, position="end")

    return canonical.encode("ascii"), text


def encode_labels(canonical_labels: Iterable[bytes], rules: RuleSet, value: str = "") -> bytes:
    """
    Concatenate length-prefixed labels and append the root octet.

    Raises:
        NameTooLong: If the encoded name exceeds the active limit
    """
    wire = bytearray()
    for label in canonical_labels:
        wire.append(len(label))
        wire.extend(label)
    wire.append(0)

    limit = rules.max_name_length
    if len(wire) > limit:
        raise NameTooLong(
            f"encoded name of {len(wire)} octets exceeds the {limit} octet limit",
            value,
            length=len(wire),
            limit=limit,
        )
    return bytes(wire)


def split_wire(data: bytes, rules: RuleSet) -> list[str]:
    """
    Split a length-prefixed name into its label texts.

    A missing terminal zero octet is appended. Labels are returned with
    their original casing; callers validate them with `check_label`.

    Raises:
        NameTooLong: If the data exceeds the active name limit
        EmptyLabel: If a zero length octet appears before the end
        InvalidStructure: If a length octet overruns the data
    """
    if not data or data[-1] != 0:
        data = bytes(data) + b"\x00"

    limit = rules.max_name_length
    if len(data) > limit:
        raise NameTooLong(
            f"encoded name of {len(data)} octets exceeds the {limit} octet limit",
            length=len(data),
            limit=limit,
        )

    labels = []
    offset = 0
    end = len(data) - 1
    while offset < end:
        length = data[offset]
        if length == 0:
            raise EmptyLabel(f"empty label at offset {offset}")
        if offset + 1 + length > end:
            raise InvalidStructure(f"label length {length} at offset {offset} overruns the name")
        labels.append(data[offset + 1:offset + 1 + length].decode("latin-1"))
        offset += 1 + length
    return labels


def label_offsets(wire: bytes) -> list[int]:
    """Offsets of every length octet in a canonical buffer, root included."""
    offsets = []
    offset = 0
    while offset < len(wire):
        offsets.append(offset)
        length = wire[offset]
        if length == 0:
            if offset != len(wire) - 1:
                raise InvalidStructure(f"data follows the root octet at offset {offset}")
            return offsets
        offset += 1 + length
    raise InvalidStructure("name is not terminated by a zero octet")


def _invalid_character(text: str, char: str, position: Optional[int] = None) -> InvalidCharacter:
    if position is None:
        position = text.index(char)
    return InvalidCharacter(
        f"invalid character {char!r} at position {position} in label {text!r}",
        text,
        char=char,
        position=position,
    )
