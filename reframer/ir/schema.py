"""
IR Schema — Pydantic models for rewrite results and saved reframes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from reframer.ir.enums import DiagnosticLevel, TransformStatus

RESULT_VERSION = "0.1.0"


class TraceEntry(BaseModel):
    """A single transformation trace entry."""

    id: str
    timestamp: datetime
    pass_name: str
    action: str
    before: Optional[str] = None
    after: Optional[str] = None
    rule_ids: list[str] = Field(default_factory=list)


class Diagnostic(BaseModel):
    """A diagnostic message."""

    id: str
    level: DiagnosticLevel
    code: str
    message: str
    source: str


class RewriteResult(BaseModel):
    """The complete output of a rewrite."""

    version: str = Field(default=RESULT_VERSION, description="Result schema version")
    request_id: str = Field(..., description="Unique rewrite ID")
    timestamp: datetime = Field(..., description="When the rewrite started")
    processing_duration_ms: float = Field(default=0.0)

    ruleset: str = Field(..., description="Name of the ruleset that was applied")
    input_text: str = Field(..., description="Text as supplied by the caller")
    rendered_text: Optional[str] = Field(
        default=None,
        description="First-person text (None if the pipeline failed)",
    )
    applied_rules: list[str] = Field(
        default_factory=list,
        description="IDs of rules that matched, in application order",
    )

    trace: list[TraceEntry] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    status: TransformStatus = TransformStatus.SUCCESS


class SavedReframe(BaseModel):
    """A reframe the user chose to keep."""

    id: str = Field(..., description="Unique record ID")
    text: str = Field(..., min_length=1, description="The composed reframe")
    created_at: datetime = Field(..., description="When the reframe was saved")
