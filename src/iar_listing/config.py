"""
IAR Listing - Formatter Configuration
=====================================

Column layout used when instruction lines are reformatted. Configuration can
come from:
- Default values (defined here)
- Environment variables
- Command-line options (see iar_listing.cli.iarlst)

The defaults reproduce the layout downstream renderers expect:

    ····MNEMONIC····· OPERANDS··········· ; comment
    |4 |     12     |        18        |

Changing the widths only changes padding; classification and label
cross-referencing do not depend on them.
"""

from dataclasses import dataclass
import logging
import os

from iar_listing.errors import ConfigError

logger = logging.getLogger(__name__)


DEFAULT_INDENT_WIDTH = 4
DEFAULT_MNEMONIC_WIDTH = 12
DEFAULT_OPERAND_WIDTH = 18


@dataclass
class ListingConfig:
    """
    Column layout for reformatted instruction lines.

    Attributes:
        indent_width: Spaces prefixed to every instruction line (default: 4)
        mnemonic_width: Minimum width of the mnemonic column (default: 12)
        operand_width: Minimum width of the operand column when a comment
            follows (default: 18)
    """

    indent_width: int = DEFAULT_INDENT_WIDTH
    mnemonic_width: int = DEFAULT_MNEMONIC_WIDTH
    operand_width: int = DEFAULT_OPERAND_WIDTH

    @property
    def indent(self) -> str:
        """Indentation unit prefixed to instruction lines."""
        return " " * self.indent_width

    def validate(self) -> "ListingConfig":
        """
        Check that every width is non-negative.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigError: If any width is negative
        """
        for name in ("indent_width", "mnemonic_width", "operand_width"):
            value = getattr(self, name)
            if value < 0:
                raise ConfigError(name, value)
        return self

    @classmethod
    def from_env(cls) -> "ListingConfig":
        """
        Create ListingConfig from environment variables.

        Environment variables (all optional):
            IAR_LISTING_INDENT: Indentation width (integer)
            IAR_LISTING_MNEMONIC_WIDTH: Mnemonic column width (integer)
            IAR_LISTING_OPERAND_WIDTH: Operand column width (integer)

        Invalid values are ignored with a warning.
        """
        config = cls()

        env_fields = {
            "IAR_LISTING_INDENT": "indent_width",
            "IAR_LISTING_MNEMONIC_WIDTH": "mnemonic_width",
            "IAR_LISTING_OPERAND_WIDTH": "operand_width",
        }
        for env_name, field_name in env_fields.items():
            if raw := os.environ.get(env_name):
                try:
                    value = int(raw)
                except ValueError:
                    logger.warning(f"Ignoring {env_name}={raw!r}: not an integer")
                    continue
                if value < 0:
                    logger.warning(f"Ignoring {env_name}={raw!r}: must be >= 0")
                    continue
                setattr(config, field_name, value)

        return config
