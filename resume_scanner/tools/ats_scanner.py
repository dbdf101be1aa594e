"""ATS scanner tool: read a résumé file and run the analysis engine on it."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from ..domain import ExperienceLevel, analyze, format_ats_report
from ..observability import ScanObserver
from .base import BaseTool, ToolResult

SUPPORTED_EXTENSIONS = (".txt", ".text", ".md", ".markdown")
MAX_FILE_SIZE = 2 * 1024 * 1024  # 2MB
DEFAULT_SHORT_TEXT_THRESHOLD = 50


class ATSScannerTool(BaseTool):
    """Score a plain-text résumé for ATS compatibility."""

    name = "ats_scan"
    description = """Analyze a plain-text resume for ATS compatibility. Returns a 0-100 score,
the extracted candidate profile, per-section scores, keyword and action-verb analysis,
formatting issues and prioritized suggestions for the chosen experience level."""
    parameters = {
        "path": {
            "type": "string",
            "description": "Path to the resume text file (.txt or .md)",
            "required": True,
        },
        "experience_level": {
            "type": "string",
            "description": "Candidate experience level",
            "enum": [level.value for level in ExperienceLevel],
            "default": ExperienceLevel.FRESHER.value,
        },
    }

    def __init__(
        self,
        workspace_dir: str = ".",
        observer: Optional[ScanObserver] = None,
        short_text_threshold: int = DEFAULT_SHORT_TEXT_THRESHOLD,
    ):
        self.workspace_dir = Path(workspace_dir).resolve()
        self.observer = observer
        self.short_text_threshold = short_text_threshold

    async def execute(self, path: str, experience_level: str = "fresher") -> ToolResult:
        try:
            level = ExperienceLevel(experience_level)
        except ValueError:
            return self._fail("invalid_level", f"Unknown experience level: {experience_level!r}")

        file_path = self._resolve_path(path)
        if not file_path.exists():
            return self._fail("file_not_found", f"File not found: {path}")
        if not file_path.is_file():
            return self._fail("not_a_file", f"Not a file: {path}")
        if file_path.suffix.lower() not in SUPPORTED_EXTENSIONS:
            return self._fail(
                "unsupported_type",
                f"Unsupported file type '{file_path.suffix}'. Supported: {', '.join(SUPPORTED_EXTENSIONS)}",
            )

        try:
            file_size = file_path.stat().st_size
            if file_size > MAX_FILE_SIZE:
                return self._fail("too_large", f"File too large: {file_size} bytes (max {MAX_FILE_SIZE} bytes)")
            content = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            return self._fail("decode", f"Could not decode {path} as UTF-8 text")
        except OSError as e:
            return self._fail("read", f"Could not read {path}: {e}")

        if not content.strip():
            return self._fail("empty_file", f"File is empty: {path}")

        warnings = []
        if len(content.strip()) < self.short_text_threshold:
            message = (
                f"Only {len(content.strip())} characters of text found in {path}; "
                "the file may be a scanned image or an incomplete export"
            )
            warnings.append(message)
            if self.observer:
                self.observer.log_warning(message, {"path": str(file_path)})

        start = time.perf_counter()
        result = analyze(content, level)
        duration_ms = (time.perf_counter() - start) * 1000
        if self.observer:
            self.observer.log_scan(str(file_path), level.value, result.score, duration_ms)

        return ToolResult(
            success=True,
            output=format_ats_report(result),
            data=result.to_dict(),
            warnings=warnings,
        )

    def _fail(self, error_type: str, message: str) -> ToolResult:
        if self.observer:
            self.observer.log_error(error_type, message)
        return ToolResult.failure(message)

    def _resolve_path(self, path: str) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self.workspace_dir / p
