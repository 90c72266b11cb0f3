"""
Engine — Pipeline orchestration.

The engine selects a pipeline, runs passes in order,
records failures, and packages output.

The engine is NOT where rewrite rules live.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from reframer.core.context import RewriteContext, RewriteRequest
from reframer.core.logging import RewriteLogger
from reframer.ir.enums import TransformStatus
from reframer.ir.schema import Diagnostic, RewriteResult


# Type alias for a pass function
PassFn = Callable[[RewriteContext], RewriteContext]


class RewriteError(RuntimeError):
    """Raised by `rewrite()` when the pipeline could not produce text."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        detail = "; ".join(f"{d.code}: {d.message}" for d in diagnostics) or "unknown error"
        super().__init__(f"Rewrite failed ({detail})")


@dataclass
class Pipeline:
    """A named sequence of passes."""

    id: str
    name: str
    passes: list[PassFn]


class Engine:
    """
    Pipeline orchestrator.

    Runs passes in order, handles errors, and packages results.
    """

    def __init__(self) -> None:
        self._pipelines: dict[str, Pipeline] = {}

    def register_pipeline(self, pipeline: Pipeline) -> None:
        """Register a pipeline by ID."""
        self._pipelines[pipeline.id] = pipeline

    def list_pipelines(self) -> list[str]:
        """List registered pipeline IDs."""
        return list(self._pipelines.keys())

    def transform(
        self,
        request: RewriteRequest,
        pipeline_id: Optional[str] = None,
    ) -> RewriteResult:
        """
        Run a rewrite.

        Args:
            request: The rewrite request
            pipeline_id: Which pipeline to use (default: 'default')

        Returns:
            RewriteResult with text, trace, and diagnostics
        """
        pipeline_id = pipeline_id or "default"

        if pipeline_id not in self._pipelines:
            ctx = RewriteContext.from_request(request)
            ctx.status = TransformStatus.ERROR
            ctx.add_diagnostic(
                level="error",
                code="PIPELINE_NOT_FOUND",
                message=f"Pipeline '{pipeline_id}' not registered",
                source="engine",
            )
            return ctx.to_result()

        pipeline = self._pipelines[pipeline_id]
        ctx = RewriteContext.from_request(request)
        rlog = RewriteLogger(request.request_id)

        for pass_fn in pipeline.passes:
            pass_name = pass_fn.__name__
            try:
                rlog.pass_start(pass_name)
                ctx = pass_fn(ctx)
                rlog.pass_end(pass_name)
            except Exception as e:
                rlog.pass_error(pass_name, e)
                ctx.status = TransformStatus.ERROR
                ctx.add_diagnostic(
                    level="error",
                    code="PASS_ERROR",
                    message=f"Pass '{pass_name}' failed: {e}",
                    source="engine",
                )
                ctx.add_trace(pass_name=pass_name, action="error")
                break

        rlog.rewrite_complete(
            status=ctx.status.value,
            ruleset=ctx.ruleset_name,
            rules_applied=len(ctx.applied_rules),
            diagnostics=len(ctx.diagnostics),
        )

        return ctx.to_result()


# Global engine instance
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get or create the global engine instance with the default pipeline."""
    global _engine
    if _engine is None:
        from reframer.pipelines import setup_default_pipeline

        engine = Engine()
        setup_default_pipeline(engine)
        _engine = engine
    return _engine


def transform(
    text: str,
    pipeline_id: Optional[str] = None,
    ruleset: Optional[str] = None,
) -> RewriteResult:
    """
    Run the pipeline and return the full result.

    Args:
        text: Second-person support statement
        pipeline_id: Which pipeline to use
        ruleset: Which ruleset to apply (REFRAMER_RULESET or first_person if None)
    """
    request = RewriteRequest(text=text, ruleset=ruleset)
    return get_engine().transform(request, pipeline_id)


def rewrite(text: str, ruleset: Optional[str] = None) -> str:
    """
    Rewrite a second-person statement in the first person.

    Unmatched text passes through unchanged; the first letter is
    always capitalized.

    Raises:
        RewriteError: if the pipeline failed (only possible with a
            broken custom ruleset)
    """
    result = transform(text, ruleset=ruleset)
    if result.status == TransformStatus.ERROR:
        raise RewriteError(result.diagnostics)
    return result.rendered_text or ""
