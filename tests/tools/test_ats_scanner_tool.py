"""Tests for the ATS scanner tool (file boundary)."""

import pytest

from resume_scanner.observability import ScanObserver
from resume_scanner.tools import ATSScannerTool, ToolResult


class TestATSScannerTool:
    @pytest.mark.asyncio
    async def test_scan_success(self, rich_resume_file):
        tool = ATSScannerTool()
        result = await tool.execute(path=str(rich_resume_file), experience_level="experienced")

        assert result.success
        assert result.error is None
        assert result.warnings == []
        assert result.output.startswith("## ATS Score:")
        assert result.data["experienceLevel"] == "experienced"
        assert result.data["extractedInfo"]["name"] == "Jane Doe"
        assert 0 <= result.data["score"] <= 100

    @pytest.mark.asyncio
    async def test_relative_path_uses_workspace(self, rich_resume_file):
        tool = ATSScannerTool(workspace_dir=str(rich_resume_file.parent))
        result = await tool.execute(path="resume.md")
        assert result.success
        assert result.data["experienceLevel"] == "fresher"

    @pytest.mark.asyncio
    async def test_file_not_found(self, tmp_path):
        tool = ATSScannerTool(workspace_dir=str(tmp_path))
        result = await tool.execute(path="missing.txt")
        assert not result.success
        assert result.error == "File not found: missing.txt"

    @pytest.mark.asyncio
    async def test_directory_is_rejected(self, tmp_path):
        result = await ATSScannerTool().execute(path=str(tmp_path))
        assert not result.success
        assert "Not a file" in result.error

    @pytest.mark.asyncio
    async def test_unsupported_type(self, tmp_path):
        path = tmp_path / "resume.pdf"
        path.write_bytes(b"%PDF-1.4")
        result = await ATSScannerTool().execute(path=str(path))
        assert not result.success
        assert "Unsupported file type '.pdf'" in result.error

    @pytest.mark.asyncio
    async def test_empty_file(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("  \n\n", encoding="utf-8")
        result = await ATSScannerTool().execute(path=str(path))
        assert not result.success
        assert result.error.startswith("File is empty")

    @pytest.mark.asyncio
    async def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_bytes(b"\xff\xfe\xfa invalid")
        result = await ATSScannerTool().execute(path=str(path))
        assert not result.success
        assert "UTF-8" in result.error

    @pytest.mark.asyncio
    async def test_unknown_level(self, rich_resume_file):
        result = await ATSScannerTool().execute(path=str(rich_resume_file), experience_level="senior")
        assert not result.success
        assert "senior" in result.error

    @pytest.mark.asyncio
    async def test_short_text_warning(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("John Smith\njohn@x.com", encoding="utf-8")
        observer = ScanObserver()
        result = await ATSScannerTool(observer=observer).execute(path=str(path))

        assert result.success
        assert len(result.warnings) == 1
        assert result.output.startswith("## ATS Score:")
        assert result.to_message().startswith("Warning: Only 21 characters")
        stats = observer.get_session_stats()
        assert stats["warnings"] == 1
        assert stats["scans"] == 1

    @pytest.mark.asyncio
    async def test_observer_records_scans_and_errors(self, rich_resume_file, tmp_path):
        observer = ScanObserver()
        tool = ATSScannerTool(observer=observer)
        ok = await tool.execute(path=str(rich_resume_file))
        await tool.execute(path=str(tmp_path / "missing.txt"))

        stats = observer.get_session_stats()
        assert stats["scans"] == 1
        assert stats["errors"] == 1
        assert stats["average_score"] == ok.data["score"]
        observer.clear()
        assert observer.get_session_stats()["event_count"] == 0

    def test_schema(self):
        schema = ATSScannerTool().to_schema()
        function = schema["function"]
        assert function["name"] == "ats_scan"
        assert function["parameters"]["required"] == ["path"]
        assert "required" not in function["parameters"]["properties"]["path"]
        assert function["parameters"]["properties"]["experience_level"]["enum"] == ["fresher", "experienced"]


class TestToolResult:
    def test_to_message(self):
        assert ToolResult(success=True, output="done").to_message() == "done"
        assert ToolResult.failure("boom").to_message() == "Error: boom"
        warned = ToolResult(success=True, output="done", warnings=["short"])
        assert warned.to_message() == "Warning: short\n\ndone"


class TestArgumentChecking:
    @pytest.mark.asyncio
    async def test_run_checks_enum(self, rich_resume_file):
        result = await ATSScannerTool().run(path=str(rich_resume_file), experience_level="guru")
        assert not result.success
        assert result.error == "experience_level must be one of fresher, experienced, got 'guru'"

    @pytest.mark.asyncio
    async def test_run_requires_path(self):
        result = await ATSScannerTool().run(experience_level="fresher")
        assert result.error == "Missing required argument: path"

    @pytest.mark.asyncio
    async def test_run_rejects_unknown_arguments(self, rich_resume_file):
        result = await ATSScannerTool().run(path=str(rich_resume_file), job_description="x")
        assert result.error == "Unknown argument(s) for ats_scan: job_description"

    @pytest.mark.asyncio
    async def test_run_executes_valid_arguments(self, rich_resume_file):
        result = await ATSScannerTool().run(path=str(rich_resume_file))
        assert result.success
