"""
RewriteContext — Mutable state passed between pipeline passes.

Each rewrite call builds its own context; passes never share one.
"""

import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from reframer.ir.enums import DiagnosticLevel, TransformStatus
from reframer.ir.schema import Diagnostic, RewriteResult, TraceEntry

DEFAULT_RULESET = "first_person"


def default_ruleset_name() -> str:
    """Ruleset used when a request does not name one."""
    return os.environ.get("REFRAMER_RULESET", DEFAULT_RULESET)


@dataclass
class RewriteRequest:
    """Input to the rewrite pipeline."""

    text: str
    ruleset: Optional[str] = None
    request_id: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.request_id is None:
            self.request_id = str(uuid4())
        if self.ruleset is None:
            self.ruleset = default_ruleset_name()


@dataclass
class RewriteContext:
    """
    Mutable context passed through pipeline passes.

    Passes read and replace `text`; the original input stays in `raw_text`.
    """

    request: RewriteRequest
    raw_text: str
    text: str = ""

    # Rule IDs in the order they fired
    applied_rules: list[str] = field(default_factory=list)

    trace: list[TraceEntry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    status: TransformStatus = TransformStatus.SUCCESS
    start_time: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_request(cls, request: RewriteRequest) -> "RewriteContext":
        """Create a context from a rewrite request."""
        return cls(
            request=request,
            raw_text=request.text,
            text=request.text,
        )

    @property
    def ruleset_name(self) -> str:
        return self.request.ruleset or default_ruleset_name()

    def add_trace(self, pass_name: str, action: str, **kwargs: Any) -> None:
        """Add a trace entry."""
        self.trace.append(
            TraceEntry(
                id=str(uuid4()),
                timestamp=datetime.now(),
                pass_name=pass_name,
                action=action,
                before=kwargs.get("before"),
                after=kwargs.get("after"),
                rule_ids=kwargs.get("rule_ids", []),
            )
        )

    def add_diagnostic(self, level: str, code: str, message: str, source: str) -> None:
        """Add a diagnostic message."""
        self.diagnostics.append(
            Diagnostic(
                id=str(uuid4()),
                level=DiagnosticLevel(level),
                code=code,
                message=message,
                source=source,
            )
        )

    def to_result(self) -> RewriteResult:
        """Convert context to final RewriteResult."""
        duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000
        failed = self.status == TransformStatus.ERROR
        return RewriteResult(
            request_id=self.request.request_id or str(uuid4()),
            timestamp=self.start_time,
            processing_duration_ms=duration_ms,
            ruleset=self.ruleset_name,
            input_text=self.raw_text,
            rendered_text=None if failed else self.text,
            applied_rules=self.applied_rules,
            trace=self.trace,
            diagnostics=self.diagnostics,
            status=self.status,
        )
