"""Task breakdown assembly and export."""

from .assembler import assemble

__all__ = ["assemble"]
