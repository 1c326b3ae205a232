"""
Analysis component - categorise validation errors and suggest fixes.
"""

from .component import NO_ERRORS_SUMMARY, analyze_error, analyze_errors, extract_path, run
from .models import AnalysisReport, AnalyzeInput, ErrorCategory, ErrorInsight

__all__ = [
    # Component entry points
    "run",
    "analyze_errors",
    "analyze_error",
    "extract_path",
    # Models
    "AnalysisReport",
    "AnalyzeInput",
    "ErrorCategory",
    "ErrorInsight",
    # Constants
    "NO_ERRORS_SUMMARY",
]
