"""Parse result carriers."""

from descentpy.pipeline.result import TraceParseResult

__all__ = ["TraceParseResult"]
