from .analyzer import (
    AnalysisContext as AnalysisContext,
    AnalyzedProgram as AnalyzedProgram,
    Analyzer as Analyzer,
    AnalyzerError as AnalyzerError,
    Diagnostic as Diagnostic,
    DiagnosticList as DiagnosticList,
    analyze as analyze,
)
