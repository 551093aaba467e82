"""
Shared fixtures: a small IAR -lC listing for square.c.
"""

import pytest


SAMPLE_LISTING = r"""###############################################################################
#                                                                             #
# IAR ANSI C/C++ Compiler V8.30.1.114/W32 for ARM       19/Oct/2026  10:00:00 #
#                                                                             #
###############################################################################

      1          // square.c
      2          int square(int num)
      3          {
   \                     square: (+1)
   \        0x0   0x4348             MULS     R0,R0,R0
      4              return num * num;
   \        0x2   0x4770             BX       LR
      5          }
      6
      7          int main(void)
      8          {
   \                     main: (+1)
   \        0x0   0xB580             PUSH     {R7,LR}
      9              return square(3);
   \        0x2   0x2003             MOVS     R0,#+3
   \        0x4   0x....'....        BL       square             ;; call
   \        0x8   0xBD02             POP      {R1,PC}
     10          }

   \                                 In section .text, align 4, keep-with-next
   \                     __iar_data_init3:
"""


@pytest.fixture
def sample_listing_text():
    """Raw text of the square.c listing."""
    return SAMPLE_LISTING


@pytest.fixture
def sample_listing_file(tmp_path):
    """The square.c listing written to a temporary .lst file."""
    path = tmp_path / "square.lst"
    path.write_text(SAMPLE_LISTING, encoding="utf-8")
    return path
