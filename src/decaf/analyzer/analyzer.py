"""Analyzer assembly: combines all analysis mixins into the final Analyzer class."""

from .core import (
    AnalysisContext, AnalyzedProgram, AnalyzerBase, AnalyzerError,
    Diagnostic, DiagnosticList,
)
from .expressions import ExpressionsMixin
from .statements import StatementsMixin
from .type_inference import TypeInferenceMixin
from .type_utils import TypeUtilsMixin
from .validation import ValidationMixin


class Analyzer(
    TypeUtilsMixin,
    TypeInferenceMixin,
    ValidationMixin,
    ExpressionsMixin,
    StatementsMixin,
    AnalyzerBase,
):
    """Semantic analyzer for the Decaf language."""
    pass


def analyze(tree) -> list[str]:
    """Analyze ``tree`` and return its diagnostic messages in detection order."""
    return Analyzer().analyze(tree).errors


__all__ = [
    "Analyzer", "AnalyzerError", "AnalyzedProgram", "AnalysisContext",
    "Diagnostic", "DiagnosticList", "analyze",
]
