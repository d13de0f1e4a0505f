"""
Core math modules

Математические примитивы и формула капельной модели.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    is_valid_float,
    real_power,
    validate_in_range,
    validate_positive,
)

# Liquid Drop Model
from src.core.math.liquid_drop import (
    A_A,
    A_C,
    A_P,
    A_S,
    A_V,
    LiquidDropTerms,
    binding_energy,
    binding_energy_per_nucleon,
    liquid_drop_terms,
    pairing_delta,
    pairing_term,
)

__all__ = [
    # Numerical Safeguards — Functions
    "is_valid_float",
    "real_power",
    "validate_in_range",
    "validate_positive",
    # Liquid Drop — Coefficients
    "A_V",
    "A_S",
    "A_C",
    "A_A",
    "A_P",
    # Liquid Drop — Types
    "LiquidDropTerms",
    # Liquid Drop — Functions
    "binding_energy",
    "binding_energy_per_nucleon",
    "liquid_drop_terms",
    "pairing_delta",
    "pairing_term",
]
