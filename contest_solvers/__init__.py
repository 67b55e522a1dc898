"""Solutions to short competitive-programming problems and number helpers."""

__version__ = "0.1.0"
__all__ = ["mathutils", "div2", "div3", "div4", "assorted"]