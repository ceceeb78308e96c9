"""Core domain entities: labels, fully qualified domain names and check results."""

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Any, Iterator, Optional, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from fqdnkit.infrastructure.codec import default_codec

from .checks import check_label, encode_labels, label_offsets, split_wire
from .exceptions import ErrorKind, MalformedSeparators, NameTooLong, ValidationException
from .rules import DEFAULT_RULES, RuleSet, get_active_rules


@dataclass(frozen=True, eq=False)
class Label:
    """
    A single domain label.

    A label is a view into a length-prefixed buffer: `start` and `length`
    locate the canonical lowercase bytes, `display` keeps the original
    casing. Labels taken from an Fqdn share the Fqdn's buffer.
    """

    buffer: bytes
    start: int
    length: int
    display: str = ""

    @classmethod
    def parse(cls, text: str, rules: Optional[RuleSet] = None) -> "Label":
        """
        Parse and validate a label.

        Args:
            text: Label text, non-ASCII labels are transcoded
            rules: Rule set (default: active rules)

        Returns:
            Validated label

        Raises:
            ValidationException: If the label is invalid
        """
        canonical, display = check_label(text, rules or get_active_rules())
        return cls(bytes([len(canonical)]) + canonical, 1, len(canonical), display)

    def to_lowercase_view(self) -> bytes:
        """Canonical lowercase bytes used for comparison."""
        return self.buffer[self.start:self.start + self.length]

    def to_unicode(self) -> str:
        """Label text with an A-label decoded to Unicode."""
        return default_codec.decode(str(self))

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return self.display or self.to_lowercase_view().decode("ascii")

    def __repr__(self) -> str:
        return f"Label({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Label):
            return NotImplemented
        return self.to_lowercase_view() == other.to_lowercase_view()

    def __hash__(self) -> int:
        return hash(self.to_lowercase_view())


@total_ordering
@dataclass(frozen=True, eq=False)
class Fqdn:
    """
    Fully qualified domain name.

    Immutable value object holding the canonical RFC 1035 wire-like
    encoding: each label prefixed by its length, terminated by a zero
    octet. For instance `GitHub.com.` is stored as `b"\\x06github\\x03com\\x00"`.

    Equality, ordering and hashing only look at this lowercase buffer;
    the original casing kept in `display` is used for rendering.

    Build values with `parse`, `from_labels`, `from_wire` or `root`; the
    dataclass constructor only checks the length-prefixed structure.
    """

    wire: bytes = b"\x00"
    display: tuple[str, ...] = field(default=(), repr=False)
    rules: RuleSet = field(default=DEFAULT_RULES, repr=False)

    def __post_init__(self):
        label_offsets(self.wire)

    @classmethod
    def root(cls, rules: Optional[RuleSet] = None) -> "Fqdn":
        """The root domain, rendered as `.`."""
        return cls(b"\x00", (), rules or get_active_rules())

    @classmethod
    def parse(cls, text: str, rules: Optional[RuleSet] = None) -> "Fqdn":
        """
        Parse a domain name from text.

        A single trailing dot marks the root and is optional: when it is
        missing it is implied, whatever the trailing-dot rule says.

        Args:
            text: Dotted domain name, e.g. `www.example.com.`
            rules: Rule set (default: active rules)

        Returns:
            Validated Fqdn

        Raises:
            ValidationException: If the name is invalid
        """
        rules = rules or get_active_rules()

        if text in ("", "."):
            return cls.root(rules)

        # Bound the work before splitting
        if len(text) > rules.max_name_length:
            raise NameTooLong(
                f"name of {len(text)} characters exceeds the {rules.max_name_length} octet limit",
                text,
                length=len(text),
                limit=rules.max_name_length,
            )

        body = text[:-1] if text.endswith(".") else text
        segments = body.split(".")
        if "" in segments:
            raise MalformedSeparators(f"misplaced or consecutive dots in {text!r}", text)

        checked = [check_label(segment, rules) for segment in segments]
        wire = encode_labels((canonical for canonical, _ in checked), rules, text)
        return cls(wire, tuple(display for _, display in checked), rules)

    @classmethod
    def from_labels(cls, *labels: Union[str, Label], rules: Optional[RuleSet] = None) -> "Fqdn":
        """
        Build a name label by label, most specific first.

        Example:
            Fqdn.from_labels("rust-lang", "github", "com")

        Raises:
            ValidationException: If a label or the whole name is invalid
        """
        rules = rules or get_active_rules()
        # Label values are re-checked under these rules
        parsed = [Label.parse(str(label), rules) for label in labels]
        wire = encode_labels(
            (label.to_lowercase_view() for label in parsed),
            rules,
            ".".join(str(label) for label in parsed),
        )
        return cls(wire, tuple(str(label) for label in parsed), rules)

    @classmethod
    def from_wire(cls, data: bytes, rules: Optional[RuleSet] = None) -> "Fqdn":
        """
        Build a name from its length-prefixed encoding.

        The terminal zero octet may be omitted. Uppercase letters are
        accepted and lowercased.

        Raises:
            ValidationException: If the encoding or a label is invalid
        """
        rules = rules or get_active_rules()
        checked = [check_label(text, rules, codec=None) for text in split_wire(data, rules)]
        wire = encode_labels((canonical for canonical, _ in checked), rules)
        return cls(wire, tuple(display for _, display in checked), rules)

    def is_root(self) -> bool:
        return self.wire[0] == 0

    def is_tld(self) -> bool:
        return self.depth() == 1

    def depth(self) -> int:
        """Number of labels, the root excluded."""
        return len(label_offsets(self.wire)) - 1

    def labels(self) -> tuple[Label, ...]:
        """Labels as views into this name's buffer, most specific first."""
        display = self._display_labels()
        return tuple(
            Label(self.wire, offset + 1, self.wire[offset], text)
            for offset, text in zip(label_offsets(self.wire), display)
        )

    def parent(self) -> Optional["Fqdn"]:
        """
        The name without its leftmost label.

        Returns:
            Parent domain, or None for the root
        """
        if self.is_root():
            return None
        return Fqdn(self.wire[1 + self.wire[0]:], self._display_labels()[1:], self.rules)

    def hierarchy(self) -> Iterator["Fqdn"]:
        """
        Iterate from this name up to its top level domain.

        `rust-lang.github.com.` yields itself, `github.com.` and `com.`.
        """
        current: Optional[Fqdn] = self
        while current is not None and not current.is_root():
            yield current
            current = current.parent()

    def tld(self) -> Optional["Fqdn"]:
        """Top level domain, or None for the root."""
        tld = None
        for tld in self.hierarchy():
            pass
        return tld

    def is_subdomain_of(self, other: "Fqdn") -> bool:
        """
        Check whether this name lies under `other`.

        A name is a subdomain of itself, and every name is a subdomain of
        the root.
        """
        diff = len(self.wire) - len(other.wire)
        if diff < 0 or self.wire[diff:] != other.wire:
            return False
        return diff in label_offsets(self.wire)

    def to_string(self) -> str:
        """Dotted text in display casing, with a trailing dot if the rules ask for it."""
        if self.is_root():
            return "."
        text = ".".join(self._display_labels())
        return text + "." if self.rules.trailing_dot else text

    def to_unicode(self) -> str:
        """Dotted text with every A-label decoded to Unicode."""
        if self.is_root():
            return "."
        text = ".".join(label.to_unicode() for label in self.labels())
        return text + "." if self.rules.trailing_dot else text

    def _display_labels(self) -> tuple[str, ...]:
        if len(self.display) == self.depth():
            return self.display
        return tuple(str(label) for label in self._canonical_labels())

    def _canonical_labels(self) -> Iterator[Label]:
        for offset in label_offsets(self.wire)[:-1]:
            yield Label(self.wire, offset + 1, self.wire[offset])

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fqdn({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fqdn):
            return NotImplemented
        return self.wire == other.wire

    def __lt__(self, other: "Fqdn") -> bool:
        if not isinstance(other, Fqdn):
            return NotImplemented
        return self.wire < other.wire

    def __hash__(self) -> int:
        return hash(self.wire)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Accept Fqdn, text or wire bytes in pydantic models; serialize as text."""
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def _coerce(cls, value: Any) -> "Fqdn":
        if isinstance(value, Fqdn):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, (bytes, bytearray)):
            return cls.from_wire(bytes(value))
        raise ValueError(f"Cannot build a domain name from {type(value).__name__}")


class NameStatus(Enum):
    """Outcome of checking a name."""

    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True)
class NameRecord:
    """
    Represents a single name from input.

    Immutable value object holding the raw input and either the parsed
    Fqdn or the validation error.
    """

    value: str
    status: NameStatus
    fqdn: Optional[Fqdn] = None
    error: Optional[ValidationException] = None

    @property
    def is_valid(self) -> bool:
        """Check if the name is valid."""
        return self.status == NameStatus.VALID

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        """Kind of validation error, None for valid names."""
        return self.error.kind if self.error is not None else None


@dataclass
class CheckSummary:
    """
    Summary of a batch name check.

    Tracks statistics for the entire run.
    """

    total: int = 0
    valid: int = 0
    invalid: int = 0
    errors: dict[ErrorKind, int] = field(default_factory=dict)

    def record_result(self, record: NameRecord) -> None:
        """Update summary with a checked name."""
        self.total += 1

        if record.is_valid:
            self.valid += 1
        else:
            self.invalid += 1
            kind = record.error_kind
            if kind is not None:
                self.errors[kind] = self.errors.get(kind, 0) + 1

    @property
    def success_rate(self) -> float:
        """Calculate valid percentage."""
        if self.total == 0:
            return 0.0
        return (self.valid / self.total) * 100
