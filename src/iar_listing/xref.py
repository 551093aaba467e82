"""
Label Cross-Referencer
======================

Second pass over the scanner's records. Label definitions ("loop:") can be
referenced before they appear, so references are resolved only after the
whole listing has been scanned:

1. Collect the names of all label-definition records, in order.
2. For every other record, look for each name in its text and attach a
   LabelRef with the column span of the match.

Matching is plain substring search, so a label that is part of a longer
symbol also matches. Only the first occurrence of each name per line is
recorded.
"""

from dataclasses import replace
from typing import Iterable, Sequence
import logging

from iar_listing.records import InstructionRecord, LabelRef

logger = logging.getLogger(__name__)


def collect_label_names(records: Iterable[InstructionRecord]) -> list[str]:
    """
    Return the names declared by label-definition records.

    Order and duplicates are kept. Empty names (a bare ':') are skipped.
    """
    names = []
    for record in records:
        name = record.label_name
        if name:
            names.append(name)
    return names


def find_label_refs(text: str, names: Sequence[str]) -> tuple[LabelRef, ...]:
    """
    Find the first occurrence of each label name in text.

    Args:
        text: Record display text
        names: Label names, in collection order

    Returns:
        One LabelRef per name found, in the order of names
    """
    refs = []
    for name in names:
        start = text.find(name)
        if start >= 0:
            refs.append(LabelRef(name=name, start_col=start, end_col=start + len(name)))
    return tuple(refs)


def annotate_label_refs(records: Sequence[InstructionRecord]) -> list[InstructionRecord]:
    """
    Attach label references to every non-definition record.

    Label references are recomputed from scratch, so running this on its
    own output gives the same result.

    Args:
        records: Scanner output, in listing order

    Returns:
        New list of records; label definitions are returned unchanged
    """
    names = collect_label_names(records)
    logger.debug(f"Collected {len(names)} label definitions")

    annotated = []
    for record in records:
        if record.is_label_definition:
            annotated.append(record)
            continue
        refs = find_label_refs(record.text, names)
        if refs != record.label_refs:
            record = replace(record, label_refs=refs)
        annotated.append(record)

    return annotated
