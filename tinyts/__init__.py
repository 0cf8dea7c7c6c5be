"""Lexers and parsers for two tiny TypeScript-like languages, with a type checker for the arithmetic one."""

__version__ = "0.1.0"