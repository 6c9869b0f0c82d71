"""Structured error hierarchy rooted at TandemError."""

from __future__ import annotations


class TandemError(Exception):
    def __init__(self, code: str, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.cause = cause

    @classmethod
    def wrap(cls, err: Exception) -> TandemError:
        if isinstance(err, TandemError):
            return err
        return TandemError("UNKNOWN", str(err) or type(err).__name__, err)


class LLMError(TandemError):
    """Upstream model failure: transport, HTTP status or unparsable payload."""

    def __init__(
        self,
        code: str,
        provider: str,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(code, message, cause)
        self.provider = provider
        self.status_code = status_code


class ToolError(TandemError):
    def __init__(
        self, code: str, tool_name: str, message: str, cause: Exception | None = None
    ) -> None:
        super().__init__(code, message, cause)
        self.tool_name = tool_name


class ToolConfigurationError(ToolError):
    def __init__(self, tool_name: str, message: str) -> None:
        super().__init__("TOOL_CONFIGURATION", tool_name, message)


class ToolProtocolError(ToolError):
    """The model asked for a tool while formatting a tool result."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(
            "TOOL_PROTOCOL_VIOLATION",
            tool_name,
            f'Model requested tool "{tool_name}" during the formatting pass',
        )


class GitHubAPIError(TandemError):
    def __init__(
        self, message: str, status_code: int | None = None, cause: Exception | None = None
    ) -> None:
        super().__init__("GITHUB_API_ERROR", message, cause)
        self.status_code = status_code


class WorkflowStepError(TandemError):
    """A later workflow stage failed after an earlier one succeeded."""

    def __init__(self, step: str, cause: Exception) -> None:
        super().__init__("WORKFLOW_STEP_FAILED", f"Step '{step}' failed: {cause}", cause)
        self.step = step
