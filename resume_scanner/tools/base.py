"""Tool protocol: parameter schema, argument checking and results."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ToolResult:
    """Result from a tool execution."""

    success: bool
    output: str
    error: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str) -> "ToolResult":
        return cls(success=False, output="", error=error)

    def to_message(self) -> str:
        if not self.success:
            return f"Error: {self.error}"
        if self.warnings:
            return "\n".join(f"Warning: {w}" for w in self.warnings) + "\n\n" + self.output
        return self.output


class BaseTool(ABC):
    """Base class for scanner tools.

    ``parameters`` maps argument names to JSON-schema-like specs; a spec may
    carry ``required`` and ``enum`` keys, which :meth:`run` enforces.
    """

    name: str
    description: str
    parameters: Dict[str, Dict[str, Any]]

    @abstractmethod
    async def execute(self, **kwargs) -> ToolResult:
        """Execute the tool with already checked arguments."""

    async def run(self, **kwargs) -> ToolResult:
        """Check *kwargs* against :attr:`parameters`, then execute."""
        problem = self.check_arguments(kwargs)
        if problem:
            return ToolResult.failure(problem)
        return await self.execute(**kwargs)

    def check_arguments(self, arguments: Dict[str, Any]) -> Optional[str]:
        """Return a description of the first invalid argument, or ``None``."""
        unknown = sorted(set(arguments) - set(self.parameters))
        if unknown:
            return f"Unknown argument(s) for {self.name}: {', '.join(unknown)}"

        for key, param in self.parameters.items():
            if key not in arguments:
                if param.get("required", False):
                    return f"Missing required argument: {key}"
                continue
            allowed = param.get("enum")
            if allowed and arguments[key] not in allowed:
                return f"{key} must be one of {', '.join(allowed)}, got {arguments[key]!r}"
        return None

    def to_schema(self) -> Dict[str, Any]:
        """Describe the tool as a function-calling schema."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": {
                        key: {k: v for k, v in param.items() if k != "required"}
                        for key, param in self.parameters.items()
                    },
                    "required": [k for k, v in self.parameters.items() if v.get("required", False)],
                },
            },
        }
