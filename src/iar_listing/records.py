"""
Listing Records
===============

Data structures produced by the listing parser.

An InstructionRecord is one displayable line of the reformatted listing,
tagged with the source line it was generated from. Records come in two
shapes, told apart purely by their text:

- label definitions, whose text ends with LABEL_DELIMITER ("main:")
- instruction lines ("    MOV          R0,R1              ; comment")

Records are frozen. The cross-reference pass does not mutate them; it
returns copies carrying their LabelRef annotations.
"""

from dataclasses import dataclass
from typing import Iterator, Optional


LABEL_DELIMITER = ":"


@dataclass(frozen=True)
class LabelRef:
    """
    A reference from a record's display text to a known label.

    Attributes:
        name: The label name found in the text
        start_col: Zero-based column of the first character of the match
        end_col: Column one past the last character of the match
    """
    name: str
    start_col: int
    end_col: int

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "range": {
                "startCol": self.start_col,
                "endCol": self.end_col,
            },
        }


@dataclass(frozen=True)
class InstructionRecord:
    """
    One emitted line of the reformatted listing.

    Attributes:
        text: Display text (reformatted instruction or label definition)
        source_line: Source line number this line stems from (always > 0)
        label_refs: Label references found in text (empty until the
            cross-reference pass has run)
        source_file: Source file name; listings do not name it, so it is
            always None for now
    """
    text: str
    source_line: int
    label_refs: tuple[LabelRef, ...] = ()
    source_file: Optional[str] = None

    @property
    def is_label_definition(self) -> bool:
        """True if this record declares a label rather than an instruction."""
        return self.text.endswith(LABEL_DELIMITER)

    @property
    def label_name(self) -> Optional[str]:
        """The declared label name, or None for instruction records."""
        if self.is_label_definition:
            return self.text[:-len(LABEL_DELIMITER)]
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = {
            "text": self.text,
            "source": {
                "file": self.source_file,
                "line": self.source_line,
            },
        }
        if self.label_refs:
            d["labels"] = [ref.to_dict() for ref in self.label_refs]
        return d


@dataclass(frozen=True)
class ParseResult:
    """
    Output of a listing parse.

    Attributes:
        records: Emitted records, in listing order
        label_definitions: Cross-file label definitions; not tracked by
            this parser, always None
    """
    records: tuple[InstructionRecord, ...]
    label_definitions: None = None

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[InstructionRecord]:
        return iter(self.records)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "asm": [record.to_dict() for record in self.records],
            "labelDefinitions": self.label_definitions,
        }
