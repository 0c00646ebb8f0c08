"""Typed offsets into parser input and trace logs."""

from descentpy.text.text import START, InputIndex, LogIndex

__all__ = ["START", "InputIndex", "LogIndex"]
