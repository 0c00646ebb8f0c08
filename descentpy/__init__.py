"""Backtracking recursive-descent parsing with an instrumented trace."""

from descentpy.parser import ParseMode, ParserOptions, parse, parse_result

__all__ = ["ParseMode", "ParserOptions", "parse", "parse_result"]
