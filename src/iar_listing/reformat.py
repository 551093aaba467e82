"""
Instruction Reformatter
=======================

Turns the raw text of a generated-instruction listing row into fixed-column
display text. The listing prints each instruction with its address and raw
encoding in front of the assembly, e.g.:

    0x0000 0x4770 MOV R0, R1 ; comment

Reformatting drops the address/encoding fields, then lays the rest out as:

    <indent><mnemonic padded><sp><operands padded><sp><comment>

Operand tokens are glued together without spaces ("R0," "R1" -> "R0,R1"),
so operand lists written with or without spaces line up identically. The
operand column is only padded when a comment follows it.

Example
-------
>>> reformat_instruction("0x0000 0x4770 MOV R0, R1 ; comment")
'    MOV          R0,R1              ; comment'
>>> reformat_instruction("0x0002 0xBF00 NOP")
'    NOP         '
"""

from typing import Optional

from iar_listing.config import ListingConfig


ADDRESS_PREFIX = "0x"
COMMENT_MARKER = ";"


def is_address_token(token: str) -> bool:
    """True for address or raw-encoding fields such as '0x0000'."""
    return token.startswith(ADDRESS_PREFIX)


def reformat_instruction(
    fragment: str,
    config: Optional[ListingConfig] = None,
) -> Optional[str]:
    """
    Reformat one instruction row into aligned display text.

    Args:
        fragment: Listing row with the continuation marker already removed
        config: Column layout (defaults to ListingConfig())

    Returns:
        The display text, or None if nothing but address fields remained
    """
    config = config or ListingConfig()

    tokens = [token for token in fragment.split() if not is_address_token(token)]
    if not tokens:
        return None

    parts = [tokens[0].ljust(config.mnemonic_width)]

    operands = ""
    for i in range(1, len(tokens)):
        token = tokens[i]
        if token.startswith(COMMENT_MARKER):
            parts.append(operands.ljust(config.operand_width))
            parts.append(" ".join(tokens[i:]))
            operands = ""
            break
        operands += token

    if operands:
        parts.append(operands)

    return config.indent + " ".join(parts)
