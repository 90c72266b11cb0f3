"""
IR Serialization — JSON import/export for rewrite results.
"""

from reframer.ir.schema import RewriteResult


def to_json(result: RewriteResult, indent: int = 2) -> str:
    """Serialize a RewriteResult to JSON string."""
    return result.model_dump_json(indent=indent)


def from_json(json_str: str) -> RewriteResult:
    """Deserialize a RewriteResult from JSON string."""
    return RewriteResult.model_validate_json(json_str)
