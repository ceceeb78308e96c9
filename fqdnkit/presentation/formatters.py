"""Output formatting for terminal display."""

from typing import Final, Optional

from rich.markup import escape

from fqdnkit.domain.entities import CheckSummary, Fqdn, NameRecord
from fqdnkit.domain.exceptions import CodecFailure


class ColorFormatter:
    """Formats messages with Rich terminal colors."""

    # Color templates - using ASCII-safe characters
    SUCCESS: Final[str] = "[green]+[/green]"
    ERROR: Final[str] = "[red]x[/red]"
    WARNING: Final[str] = "[yellow]![/yellow]"
    INFO: Final[str] = "[blue]i[/blue]"

    @classmethod
    def success(cls, message: str) -> str:
        """Format success message."""
        return f"[green]{message}[/green]"

    @classmethod
    def error(cls, message: str) -> str:
        """Format error message."""
        return f"[red]{message}[/red]"

    @classmethod
    def warning(cls, message: str) -> str:
        """Format warning message."""
        return f"[yellow]{message}[/yellow]"

    @classmethod
    def info(cls, message: str) -> str:
        """Format info message."""
        return f"[blue]{message}[/blue]"


class NameRecordFormatter:
    """Formats checked names for display."""

    def __init__(self, within: Optional[Fqdn] = None, unicode_output: bool = False):
        """
        Initialize formatter.

        Args:
            within: Domain that valid names are expected to belong to
            unicode_output: Show internationalized labels decoded
        """
        self.within = within
        self.unicode_output = unicode_output

    def format(self, record: NameRecord) -> str:
        """
        Format a checked name.

        Args:
            record: Name record to format

        Returns:
            Formatted string with color markup
        """
        value = escape(record.value)

        if not record.is_valid or record.fqdn is None:
            kind = record.error_kind.value if record.error_kind else "invalid"
            return f"{ColorFormatter.ERROR} {value}: {kind} ({escape(str(record.error))})"

        fqdn = record.fqdn
        rendered = escape(self._render(fqdn))

        if self.within is not None and not fqdn.is_subdomain_of(self.within):
            return f"{ColorFormatter.WARNING} {value}: {rendered} is outside {escape(str(self.within))}"

        return f"{ColorFormatter.SUCCESS} {value}: {rendered} (depth {fqdn.depth()})"

    def _render(self, fqdn: Fqdn) -> str:
        if not self.unicode_output:
            return fqdn.to_string()
        try:
            return fqdn.to_unicode()
        except CodecFailure:
            # Undecodable A-labels are shown as stored
            return fqdn.to_string()


class SummaryFormatter:
    """Formats check summaries."""

    @staticmethod
    def format(summary: CheckSummary) -> str:
        """
        Format a check summary.

        Args:
            summary: Check summary to format

        Returns:
            Multi-line formatted summary
        """
        lines = [
            "\n" + "=" * 60,
            ColorFormatter.info("Check Summary"),
            "=" * 60,
            f"Total names: {summary.total}",
            f"{ColorFormatter.SUCCESS} Valid: {summary.valid}",
            f"{ColorFormatter.ERROR} Invalid: {summary.invalid}",
        ]

        for kind, count in sorted(summary.errors.items(), key=lambda item: item[0].value):
            lines.append(f"    {kind.value}: {count}")

        lines += [
            f"\nSuccess rate: {summary.success_rate:.1f}%",
            "=" * 60,
        ]

        return "\n".join(lines)
