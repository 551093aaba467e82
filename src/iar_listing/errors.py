"""
IAR Listing Error Hierarchy
===========================

This module defines the exceptions raised by the layers around the listing
parser. The parser core itself never raises: malformed listing text degrades
by omission (lines are passed through or dropped). These exceptions exist for
the configuration layer and for callers that want to turn "no output" into a
diagnostic.

Exception Hierarchy
-------------------
ListingError (base)
├── ConfigError - invalid column widths or indentation
└── ListingFormatError - a non-empty listing produced no records
"""

from typing import Optional


class ListingError(Exception):
    """
    Base exception for all iar_listing errors.

    Callers can catch every package error with a single except clause:

        try:
            result = check_result(parse_listing(lines), lines)
        except ListingError as e:
            print(f"Error: {e}")
    """
    pass


class ConfigError(ListingError):
    """
    Invalid formatter configuration.

    Raised by ListingConfig.validate() when a column width or the
    indentation width is negative.
    """

    def __init__(self, field_name: str, value: int):
        self.field_name = field_name
        self.value = value
        super().__init__(f"{field_name} must be >= 0, got {value}")


class ListingFormatError(ListingError):
    """
    The listing produced no records although it was not empty.

    This usually means the listing was not generated in the expected
    mixed source/assembly format (e.g. the compiler was not run with the
    C-source listing option), so no source echo line was ever recognised.

    Attributes:
        line_count: Number of input lines that were scanned
        filename: Listing file name, if known
    """

    def __init__(self, line_count: int, filename: Optional[str] = None):
        self.line_count = line_count
        self.filename = filename
        where = f"{filename}: " if filename else ""
        super().__init__(
            f"{where}no instructions found in {line_count} listing lines; "
            f"is this a mixed source/assembly listing?"
        )
