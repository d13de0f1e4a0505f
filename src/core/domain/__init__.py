"""
Domain models and value objects.

Contains fundamental domain entities like Isotope, ElementCatalog and units.
"""

from src.core.domain.elements import (
    Element,
    ElementCatalog,
    default_catalog,
    lookup,
)
from src.core.domain.isotope import Isotope
from src.core.domain.units import (
    AMU_MEV,
    M_ELECTRON_MEV,
    M_NEUTRON_MEV,
    M_PROTON_MEV,
    Z_MAX,
    Z_MIN,
    amu_to_mev,
    convert_energy,
    mev_to_amu,
    validate_atomic_number,
    validate_nucleon_counts,
)
from src.core.exceptions import (
    DataIntegrityError,
    DomainError,
    InvalidNucleonCountsError,
    NuclideError,
    OutOfRangeError,
)

__all__ = [
    # Units module
    "AMU_MEV",
    "M_ELECTRON_MEV",
    "M_PROTON_MEV",
    "M_NEUTRON_MEV",
    "Z_MIN",
    "Z_MAX",
    "amu_to_mev",
    "mev_to_amu",
    "convert_energy",
    "validate_atomic_number",
    "validate_nucleon_counts",
    # Exceptions
    "NuclideError",
    "OutOfRangeError",
    "DataIntegrityError",
    "DomainError",
    "InvalidNucleonCountsError",
    # Element catalog
    "Element",
    "ElementCatalog",
    "default_catalog",
    "lookup",
    # Isotope model
    "Isotope",
]
