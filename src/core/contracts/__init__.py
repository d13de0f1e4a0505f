"""
Contract Validation Module

Модуль для валидации JSON контрактов (отчёты по нуклидам).
"""

from .validators import (
    ContractValidator,
    IsotopeReportValidator,
    SchemaLoader,
    validate_isotope_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IsotopeReportValidator",
    # Functions
    "validate_isotope_report",
]
