"""
IAR Listing Command-Line Interface
==================================

- **iarlst**: reformat an IAR listing file as aligned text or JSON

Implemented as a Click-based CLI application.
"""

__all__ = ["iarlst"]
