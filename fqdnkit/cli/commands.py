"""CLI command implementation."""

import argparse
import logging
import sys
from typing import Optional

from pydantic import ValidationError
from rich import print
from rich.logging import RichHandler

from fqdnkit.config.settings import get_settings
from fqdnkit.domain.entities import CheckSummary, Fqdn
from fqdnkit.domain.exceptions import (
    ConfigurationException,
    FileOperationException,
    ValidationException,
)
from fqdnkit.domain.rules import STRICT_RULES, RuleSet, get_active_rules
from fqdnkit.domain.validators import NameClassifier
from fqdnkit.infrastructure.file_reader import TextFileReader
from fqdnkit.presentation.formatters import (
    ColorFormatter,
    NameRecordFormatter,
    SummaryFormatter,
)

logger = logging.getLogger(__name__)


class Application:
    """Main application orchestrator."""

    def __init__(
        self,
        file_path: str,
        strict: bool = False,
        within: Optional[str] = None,
        unicode_output: bool = False,
    ):
        """
        Initialize application.

        Args:
            file_path: Path to input file
            strict: Use the strict RFC rule set instead of the configured one
            within: Domain that valid names are expected to belong to
            unicode_output: Show internationalized labels decoded
        """
        self.file_path = file_path
        self.within = within

        # Load settings
        try:
            self.app_settings, _ = get_settings()
        except ValidationError as e:
            raise ConfigurationException(f"Failed to load settings: {e}") from e

        self.rules: RuleSet = STRICT_RULES if strict else get_active_rules()
        logger.debug("Checking names with %s", self.rules)

        self.unicode_output = unicode_output or self.app_settings.unicode_output
        self.file_reader = TextFileReader(encoding=self.app_settings.file_encoding)
        self.classifier = NameClassifier(self.rules)
        self.summary_formatter = SummaryFormatter()

    def run(self) -> int:
        """
        Run the application.

        Returns:
            Exit code (0 when every name is valid)
        """
        try:
            within = Fqdn.parse(self.within, self.rules) if self.within else None
        except ValidationException as e:
            print(ColorFormatter.error(f"Invalid --within domain: {e}"))
            return 4

        try:
            record_formatter = NameRecordFormatter(within, self.unicode_output)

            # Step 1: Load names from file
            print(ColorFormatter.info(f"Loading names from: {self.file_path}"))
            raw_names = self.file_reader.read_lines(self.file_path)
            print(ColorFormatter.success(f"Loaded {len(raw_names)} names\n"))

            # Step 2: Check names
            summary = CheckSummary()
            for record in self.classifier.classify_batch(raw_names):
                print(record_formatter.format(record))
                summary.record_result(record)

            # Step 3: Display summary
            print(self.summary_formatter.format(summary))

            return 0 if summary.invalid == 0 else 2

        except FileOperationException as e:
            print(ColorFormatter.error(f"File error: {e}"))
            return 1

        except KeyboardInterrupt:
            print(ColorFormatter.warning("\n\nOperation cancelled by user"))
            return 130


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="fqdnkit",
        description="Check fully qualified domain names against RFC 1035 rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -f names.txt
  %(prog)s --file names.txt --strict --within example.com

Environment Variables:
  FQDN_STRICT              Enable every RFC restriction
  FQDN_LABEL_LENGTH_63     Limit labels to 63 octets
  FQDN_NAME_LENGTH_255     Limit names to 255 octets
  FQDN_RESTRICTED_CHARSET  Reject underscores
  FQDN_TRAILING_DOT        Render names with a trailing dot
  FQDN_NO_EDGE_HYPHEN      Reject edge hyphens (default: true)
        """
    )

    parser.add_argument(
        "-f", "--file",
        required=True,
        metavar="PATH",
        help="Path to file with domain names (one per line)"
    )

    parser.add_argument(
        "-s", "--strict",
        action="store_true",
        help="Apply every RFC restriction regardless of configuration"
    )

    parser.add_argument(
        "-w", "--within",
        metavar="DOMAIN",
        help="Flag valid names that are not subdomains of DOMAIN"
    )

    parser.add_argument(
        "-u", "--unicode",
        action="store_true",
        help="Display internationalized labels decoded"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0"
    )

    args = parser.parse_args(argv)

    try:
        app_settings, _ = get_settings()
        verbose = args.verbose or app_settings.verbose
    except ValidationError as e:
        print(ColorFormatter.error(f"Configuration error: {e}"))
        sys.exit(4)

    configure_logging(verbose)

    try:
        app = Application(
            file_path=args.file,
            strict=args.strict,
            within=args.within,
            unicode_output=args.unicode,
        )
    except ConfigurationException as e:
        print(ColorFormatter.error(f"Configuration error: {e}"))
        sys.exit(4)

    exit_code = app.run()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
