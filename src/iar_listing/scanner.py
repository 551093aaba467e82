r"""
Listing Scanner
===============

Single-pass classifier for IAR mixed source/assembly listings (-lC output).

A listing interleaves echoed source lines with the code generated for them:

      10    int x = 1;
    \   0x0000 0x2001        MOVS  R0, #+1
    \                       main:
    \                        In section .text, align 2

Every line falls into one of these classes:

- **Source echo**: starts with a decimal line number. Moves the current
  source line cursor (or resets it to 0 for comment-only source lines).
- **Instruction**: continuation marker ('\') followed by an address
  ('0x...'). Reformatted into aligned columns.
- **Label definition**: continuation marker followed by anything not
  starting with a reserved prefix. Emitted up to and including its first
  colon ("main: (+1)" becomes "main:"), or whole if it has no colon.
- **Banner**: continuation marker followed by 'In' or '__'. Dropped.

Continuation lines are only emitted while the cursor points at a real
source line; everything before the first source echo, or after a comment
line, is dropped. Nothing in here raises on malformed input.
"""

from dataclasses import dataclass
from typing import Iterable, Optional
import logging

from iar_listing.config import ListingConfig
from iar_listing.records import LABEL_DELIMITER, InstructionRecord
from iar_listing.reformat import ADDRESS_PREFIX, reformat_instruction

# Logger for this module
logger = logging.getLogger(__name__)


CONTINUATION_MARKER = "\\"
RESERVED_PREFIXES = ("In", "__")
SOURCE_COMMENT_PREFIXES = ("//", "/*", "*")


# =============================================================================
# Source Echo Classification
# =============================================================================

@dataclass(frozen=True)
class SourceEcho:
    """
    A recognised source echo line.

    Attributes:
        line_number: The leading source line number
        is_comment: True if the echoed source text is a comment
    """
    line_number: int
    is_comment: bool

    @property
    def cursor(self) -> int:
        """Cursor value after this line (0 for comments)."""
        return 0 if self.is_comment else self.line_number


def classify_source_line(line: str) -> Optional[SourceEcho]:
    """
    Try to read a trimmed listing line as a source echo.

    Args:
        line: Listing line with surrounding whitespace removed

    Returns:
        SourceEcho if the line starts with a decimal number followed by
        more text, otherwise None
    """
    fields = line.split(None, 1)
    if len(fields) != 2:
        return None

    number, rest = fields
    if not (number.isascii() and number.isdigit()):
        return None

    return SourceEcho(
        line_number=int(number),
        is_comment=rest.strip().startswith(SOURCE_COMMENT_PREFIXES),
    )


# =============================================================================
# Scanner
# =============================================================================

def label_text(body: str) -> str:
    """
    Cut a label row down to its declaration.

    The compiler may annotate labels ("main: (+1)"); everything after the
    first colon is dropped. Rows without a colon are kept whole.
    """
    end = body.find(LABEL_DELIMITER)
    if end < 0:
        return body
    return body[:end + len(LABEL_DELIMITER)]


def scan_listing(
    lines: Iterable[str],
    config: Optional[ListingConfig] = None,
) -> list[InstructionRecord]:
    """
    Classify listing lines and emit instruction and label records.

    Args:
        lines: Raw listing lines, in order
        config: Column layout for instruction lines

    Returns:
        Records in listing order, each tagged with a positive source line
    """
    config = config or ListingConfig()
    records: list[InstructionRecord] = []
    current_source_line = 0

    for lineno, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()

        if not line.startswith(CONTINUATION_MARKER):
            echo = classify_source_line(line)
            if echo is not None:
                current_source_line = echo.cursor
            continue

        if current_source_line == 0:
            logger.debug(f"Line {lineno}: no current source line, dropped")
            continue

        body = line[len(CONTINUATION_MARKER):].strip()

        if body.startswith(ADDRESS_PREFIX):
            text = reformat_instruction(body, config)
            if text is None:
                logger.debug(f"Line {lineno}: address-only row, dropped")
                continue
        elif not body.startswith(RESERVED_PREFIXES):
            text = label_text(body)
        else:
            logger.debug(f"Line {lineno}: banner {body!r}, dropped")
            continue

        records.append(InstructionRecord(text=text, source_line=current_source_line))

    return records
