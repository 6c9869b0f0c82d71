"""Tool handlers, the function registry, and the tool-call bridge."""

from .handler import (
    ToolHandler,
    BaseToolHandler,
    ValidationError,
    validate_arguments,
    collect_declarations,
)
from .registry import FunctionToolHandler, define_tool
from .bridge import ToolCallBridge, coerce_arguments, coerce_value

__all__ = [
    "ToolHandler", "BaseToolHandler", "ValidationError", "validate_arguments",
    "collect_declarations", "FunctionToolHandler", "define_tool",
    "ToolCallBridge", "coerce_arguments", "coerce_value",
]
