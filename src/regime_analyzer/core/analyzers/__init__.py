"""Opportunity analyzers and priority scoring."""

from regime_analyzer.core.analyzers.credits import CreditAnalyzer, detect_credits
from regime_analyzer.core.analyzers.deductions import (
    DeductionAnalyzer,
    detect_deductions,
)
from regime_analyzer.core.analyzers.expense_optimization import (
    ExpenseOptimizationAnalyzer,
    detect_expense_optimizations,
)
from regime_analyzer.core.analyzers.priority import calculate_roi, score_opportunity
from regime_analyzer.core.analyzers.timing import (
    TimingAnalyzer,
    detect_timing_strategies,
)

__all__ = [
    "CreditAnalyzer",
    "DeductionAnalyzer",
    "ExpenseOptimizationAnalyzer",
    "TimingAnalyzer",
    "calculate_roi",
    "detect_credits",
    "detect_deductions",
    "detect_expense_optimizations",
    "detect_timing_strategies",
    "score_opportunity",
]
