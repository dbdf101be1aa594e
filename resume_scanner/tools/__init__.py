"""Scanner tools: file-facing adapters around the analysis engine."""

from .ats_scanner import SUPPORTED_EXTENSIONS, ATSScannerTool
from .base import BaseTool, ToolResult

__all__ = ["ATSScannerTool", "BaseTool", "SUPPORTED_EXTENSIONS", "ToolResult"]
