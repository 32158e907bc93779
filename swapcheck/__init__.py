"""Checker for two-stack sorting puzzle solutions, with printf-style output helpers."""

__version__ = "1.0.0"
__all__ = ["checker", "formatting", "numbers", "output", "stacks"]