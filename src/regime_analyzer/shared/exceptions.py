"""Custom exceptions for Regime Analyzer."""


class RegimeAnalyzerError(Exception):
    """Base exception for all Regime Analyzer errors."""

    pass


class ValidationError(RegimeAnalyzerError):
    """Input validation error raised outside the pydantic models."""

    pass


class InvalidAmountError(ValidationError):
    """Monetary amount could not be parsed or is negative."""

    pass


class InvalidStateCodeError(ValidationError):
    """Unknown Brazilian state (UF) code."""

    pass
