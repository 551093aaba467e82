"""
Unit Tests for the Instruction Reformatter
==========================================

Column layout of instruction rows: address stripping, mnemonic and operand
padding, comment handling, and configurable widths.
"""

import pytest

from iar_listing.config import ListingConfig
from iar_listing.reformat import is_address_token, reformat_instruction


class TestAddressTokens:
    """Tests for is_address_token()."""

    def test_hex_prefix(self):
        assert is_address_token("0x0000")
        assert is_address_token("0x4770")
        assert is_address_token("0x....'....")

    def test_other_tokens(self):
        assert not is_address_token("MOV")
        assert not is_address_token("#0x10")
        assert not is_address_token("R0,")


class TestReformatInstruction:
    """Tests for reformat_instruction() with the default layout."""

    def test_operands_and_comment(self):
        """Mnemonic and operands are padded when a comment follows."""
        text = reformat_instruction("0x0000 0x4770 MOV R0, R1 ; comment")
        assert text == "    MOV" + " " * 10 + "R0,R1" + " " * 14 + "; comment"

    def test_comment_column_alignment(self):
        """Comments start at the same column regardless of operand length."""
        short = reformat_instruction("0x0 0x0 BX LR ; return")
        long = reformat_instruction("0x2 0x0 LDR R0, [R1, #+4] ; load")
        assert short.index(";") == long.index(";") == 4 + 12 + 1 + 18 + 1

    def test_operands_without_comment(self):
        """Without a comment the operand column is not padded."""
        text = reformat_instruction("0x0 0x4770 MOV R0, R1")
        assert text == "    MOV" + " " * 10 + "R0,R1"

    def test_mnemonic_only(self):
        """A bare mnemonic is still padded to the mnemonic width."""
        assert reformat_instruction("0x2 0xBF00 NOP") == "    NOP" + " " * 9

    def test_comment_without_operands(self):
        """An empty operand column is padded before the comment."""
        text = reformat_instruction("0x2 0xBF00 NOP ; pad")
        assert text == "    NOP" + " " * 10 + " " * 18 + " " + "; pad"

    def test_comment_tokens_rejoined(self):
        """Comment words are rejoined with single spaces."""
        text = reformat_instruction("0x4 0x0 BL   square   ;;   call   it")
        assert text.endswith("square" + " " * 13 + ";; call it")

    def test_operand_tokens_concatenated(self):
        """Operand tokens are glued together without spaces."""
        text = reformat_instruction("0x0 0x0 PUSH {R4, R5, LR}")
        assert text.endswith(" {R4,R5,LR}")

    def test_address_operands_dropped(self):
        """Any token starting with 0x is treated as an address field."""
        text = reformat_instruction("0x0 0x12345678 DC32 0x12345678")
        assert text == "    DC32" + " " * 8

    def test_address_only_row(self):
        """Rows with nothing but address fields produce no text."""
        assert reformat_instruction("0x0000 0x1234") is None
        assert reformat_instruction("0x0000") is None
        assert reformat_instruction("") is None

    def test_long_mnemonic_not_truncated(self):
        text = reformat_instruction("0x0 0x0 VCVTR.S32.F32 S0, S0")
        assert text == "    VCVTR.S32.F32 S0,S0"

    def test_deterministic(self):
        """The same row always gives the same text."""
        row = "0x10 0xE7FE B.N ??main_0 ; loop"
        assert reformat_instruction(row) == reformat_instruction(row)


class TestReformatConfig:
    """Tests for reformat_instruction() with a custom layout."""

    def test_custom_widths(self):
        config = ListingConfig(indent_width=2, mnemonic_width=6, operand_width=8)
        text = reformat_instruction("0x0 0x1C40 ADDS R0, R0, #1 ; inc", config)
        assert text == "  ADDS   R0,R0,#1 ; inc"

    def test_zero_widths(self):
        config = ListingConfig(indent_width=0, mnemonic_width=0, operand_width=0)
        text = reformat_instruction("0x0 0x4770 MOV R0, R1 ; c", config)
        assert text == "MOV R0,R1 ; c"

    @pytest.mark.parametrize("indent", [0, 1, 8])
    def test_indent(self, indent):
        config = ListingConfig(indent_width=indent)
        text = reformat_instruction("0x0 0x4770 BX LR", config)
        assert text.startswith(" " * indent + "BX")
