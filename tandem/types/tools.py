"""Tool types."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SchemaProperty:
    type: str
    description: str = ""


@dataclass(frozen=True)
class ToolSchema:
    """Object schema: named primitive parameters plus the required subset."""

    properties: dict[str, SchemaProperty] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    def type_of(self, name: str) -> str | None:
        prop = self.properties.get(name)
        return prop.type if prop else None

    def to_json_schema(self) -> dict:
        return {
            "type": "object",
            "properties": {
                name: {"type": prop.type, "description": prop.description}
                for name, prop in self.properties.items()
            },
            "required": list(self.required),
        }


@dataclass(frozen=True)
class ToolDeclaration:
    name: str
    description: str
    input_schema: ToolSchema = field(default_factory=ToolSchema)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.input_schema.to_json_schema(),
        }


def _call_id() -> str:
    return f"call_{uuid.uuid4().hex[:24]}"


@dataclass(frozen=True)
class ToolInvocation:
    """A model-issued request to run one tool. Argument values are untyped."""

    name: str
    arguments: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=_call_id)


@dataclass(frozen=True)
class ToolResult:
    content: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> ToolResult:
        return cls(content=text, is_error=False)

    @classmethod
    def error(cls, message: str) -> ToolResult:
        return cls(content=f"Error: {message}", is_error=True)


@dataclass(frozen=True)
class ToolResponse:
    """Tool result in the envelope the model client sends back upstream."""

    name: str
    call_id: str
    content: str
    is_error: bool = False

    @classmethod
    def from_result(cls, invocation: ToolInvocation, result: ToolResult) -> ToolResponse:
        return cls(
            name=invocation.name,
            call_id=invocation.id,
            content=result.content,
            is_error=result.is_error,
        )

    def to_payload(self) -> dict[str, Any]:
        return {"content": self.content, "isError": self.is_error}
