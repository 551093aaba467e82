"""
Listing Parser
==============

Entry point tying the two passes together:

    lines --scan_listing--> records --annotate_label_refs--> ParseResult

The scan must finish before cross-referencing starts, because a label can
be referenced above its definition. The parser keeps no state between
calls; a ListingParser only holds its column configuration and can be
shared freely.

Usage:
    from iar_listing import ListingParser, split_listing

    parser = ListingParser()
    result = parser.parse(split_listing(Path("main.lst").read_text()))
    for record in result:
        print(record.source_line, record.text)
"""

from typing import Iterable, Optional
import logging

from iar_listing.config import ListingConfig
from iar_listing.records import ParseResult
from iar_listing.scanner import scan_listing
from iar_listing.xref import annotate_label_refs

logger = logging.getLogger(__name__)


def split_listing(text: str) -> list[str]:
    """Split raw listing text into lines (any newline convention)."""
    return text.splitlines()


class ListingParser:
    """
    Reformatter for IAR mixed source/assembly listings.

    Attributes:
        config: Column layout used for instruction lines
    """

    def __init__(self, config: Optional[ListingConfig] = None):
        self.config = (config or ListingConfig()).validate()

    def parse(self, lines: Iterable[str]) -> ParseResult:
        """
        Scan the listing and annotate label references.

        Args:
            lines: Raw listing lines, in order

        Returns:
            ParseResult with the emitted records
        """
        records = scan_listing(lines, self.config)
        records = annotate_label_refs(records)
        logger.debug(f"Parsed listing: {len(records)} records")
        return ParseResult(records=tuple(records))

    def parse_text(self, text: str) -> ParseResult:
        """Parse a whole listing given as a single string."""
        return self.parse(split_listing(text))


def parse_listing(
    lines: Iterable[str],
    config: Optional[ListingConfig] = None,
) -> ParseResult:
    """Parse listing lines with a one-off ListingParser."""
    return ListingParser(config).parse(lines)
