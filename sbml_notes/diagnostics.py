from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Literal, Optional, TextIO

Severity = Literal["error", "warning"]


@dataclass(frozen=True)
class Issue:
    """Structured problem report shared by validation and conversion."""

    severity: Severity
    code: str
    message: str
    path: str = ""
    hint: Optional[str] = None


@dataclass
class Diagnostics:
    """Call-scoped collector for issues raised while annotating a document.

    Conversion never fails on a single bad record; instead the record is
    reported here and the caller decides what to print or escalate.
    """

    issues: list[Issue] = field(default_factory=list)

    def emit(
        self,
        severity: Severity,
        code: str,
        message: str,
        path: str = "",
        hint: Optional[str] = None,
    ) -> None:
        self.issues.append(
            Issue(severity=severity, code=code, message=message, path=path, hint=hint)
        )

    def warn(self, code: str, message: str, path: str = "", hint: Optional[str] = None) -> None:
        self.emit("warning", code, message, path=path, hint=hint)

    @property
    def warnings(self) -> list[Issue]:
        return [iss for iss in self.issues if iss.severity == "warning"]

    @property
    def errors(self) -> list[Issue]:
        return [iss for iss in self.issues if iss.severity == "error"]

    def codes(self) -> list[str]:
        return [iss.code for iss in self.issues]


def print_issues(issues: list[Issue], stream: Optional[TextIO] = None) -> None:
    """Print issues as `warning: ...` / `error: ...` lines (stderr by default)."""
    out = stream if stream is not None else sys.stderr
    for iss in issues:
        where = f" [{iss.path}]" if iss.path else ""
        print(f"{iss.severity}: {iss.message}{where}", file=out)
        if iss.hint:
            print(f"{iss.severity}: hint: {iss.hint}", file=out)
