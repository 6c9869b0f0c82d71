"""Caller-facing turn outcome."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import TandemError
from .messages import Message


@dataclass(frozen=True)
class ProcessResult:
    success: bool
    message: Message | None = None
    error: TandemError | None = None

    @classmethod
    def ok(cls, message: Message) -> ProcessResult:
        return cls(success=True, message=message)

    @classmethod
    def failure(cls, error: Exception) -> ProcessResult:
        return cls(success=False, error=TandemError.wrap(error))

    def unwrap(self) -> Message:
        if self.error is not None:
            raise self.error
        assert self.message is not None
        return self.message
