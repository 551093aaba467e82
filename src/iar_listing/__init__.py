"""
IAR Listing - Source/Assembly Listing Reformatter
=================================================

This package converts the mixed source/assembly listing written by the IAR
C/C++ compiler (-lC) into a line-addressable instruction stream for
side-by-side source/assembly views.

Main Components
---------------
- **scanner**: single-pass line classifier tracking the current source line
- **reformat**: fixed-column layout of instruction rows
- **xref**: label definition collection and reference annotation
- **parser**: ListingParser, running the passes in order

Quick Start
-----------
    >>> from iar_listing import parse_listing
    >>> result = parse_listing([
    ...     "10 int x = 1;",
    ...     "\\\\ 0x0000 0x4770 MOV R0, R1 ; comment",
    ... ])
    >>> result.records[0].source_line
    10

Or use the command-line tool:
    $ iarlst main.lst
    $ iarlst main.lst --format json -o main.json
"""

__version__ = "1.0.0"

from iar_listing.config import ListingConfig
from iar_listing.errors import (
    ListingError,
    ConfigError,
    ListingFormatError,
)
from iar_listing.records import (
    LABEL_DELIMITER,
    LabelRef,
    InstructionRecord,
    ParseResult,
)
from iar_listing.reformat import reformat_instruction
from iar_listing.scanner import SourceEcho, classify_source_line, scan_listing
from iar_listing.xref import annotate_label_refs, collect_label_names
from iar_listing.parser import ListingParser, parse_listing, split_listing

__all__ = [
    "__version__",
    # Configuration
    "ListingConfig",
    # Exception hierarchy
    "ListingError",
    "ConfigError",
    "ListingFormatError",
    # Records
    "LABEL_DELIMITER",
    "LabelRef",
    "InstructionRecord",
    "ParseResult",
    # Passes
    "reformat_instruction",
    "SourceEcho",
    "classify_source_line",
    "scan_listing",
    "annotate_label_refs",
    "collect_label_names",
    # Parser
    "ListingParser",
    "parse_listing",
    "split_listing",
]
