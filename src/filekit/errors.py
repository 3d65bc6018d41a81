from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class MalformedOffset(Exception):
    """An offset token that is not a signed 64-bit decimal integer."""

    token: str
    unit: str = "line"

    def __str__(self) -> str:
        return f"illegal {self.unit} count -- {self.token}"


@dataclass(slots=True)
class IoFailure(Exception):
    """Open/read/seek failure scoped to a single input."""

    file: str
    cause: OSError

    def __str__(self) -> str:
        reason = self.cause.strerror or str(self.cause)
        return f"{self.file}: {reason}"


@dataclass(slots=True)
class UsageError(Exception):
    """Invalid combination of arguments detected after argparse validation."""

    message: str

    def __str__(self) -> str:
        return self.message
