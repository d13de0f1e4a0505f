"""
Units — физические константы и конверсия единиц

Единственный допустимый способ преобразований между:
- энергией в eV / keV / MeV / GeV (базовая единица шкалы: eV = 1)
- массой в MeV/c^2 и атомных единицах массы (amu)

Все расчёты ядра выполняются в MeV и MeV/c^2. Перевод в amu и другие
энергетические единицы является задачей представления.
"""

import operator
from typing import Final

from src.core.exceptions import InvalidNucleonCountsError, OutOfRangeError


# =============================================================================
# ЭНЕРГЕТИЧЕСКАЯ ШКАЛА
# =============================================================================
eV: Final[float] = 1.0
keV: Final[float] = 1000.0 * eV
MeV: Final[float] = 1000.0 * keV
GeV: Final[float] = 1000.0 * MeV

ENERGY_UNITS: Final[dict[str, float]] = {
    "eV": eV,
    "keV": keV,
    "MeV": MeV,
    "GeV": GeV,
}


# =============================================================================
# МАССЫ ЧАСТИЦ (MeV/c^2)
# =============================================================================
M_ELECTRON_MEV: Final[float] = 0.511
M_PROTON_MEV: Final[float] = 938.280
M_NEUTRON_MEV: Final[float] = 939.573

# 1 amu = 931.5 MeV/c^2 = 1.661e-27 kg
AMU_MEV: Final[float] = 931.5


# =============================================================================
# ГРАНИЦЫ НУКЛОННЫХ ЧИСЕЛ
# =============================================================================
Z_MIN: Final[int] = 1
Z_MAX: Final[int] = 118


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def mev_to_amu(mass_mev: float) -> float:
    """
    Конверсия: масса в MeV/c^2 → масса в amu.

    Args:
        mass_mev: Масса в MeV/c^2

    Returns:
        Масса в атомных единицах массы
    """
    return mass_mev / AMU_MEV


def amu_to_mev(mass_amu: float) -> float:
    """Конверсия: масса в amu → масса в MeV/c^2."""
    return mass_amu * AMU_MEV


def convert_energy(value: float, from_unit: str = "MeV", to_unit: str = "MeV") -> float:
    """
    Конверсия энергии между единицами eV / keV / MeV / GeV.

    Args:
        value: Значение энергии в from_unit
        from_unit: Исходная единица
        to_unit: Целевая единица

    Returns:
        Значение энергии в to_unit

    Raises:
        ValueError: Если единица неизвестна

    Examples:
        >>> convert_energy(1.0, "MeV", "keV")
        1000.0
    """
    if from_unit not in ENERGY_UNITS:
        raise ValueError(f"Unknown energy unit: {from_unit!r}")
    if to_unit not in ENERGY_UNITS:
        raise ValueError(f"Unknown energy unit: {to_unit!r}")

    return value * ENERGY_UNITS[from_unit] / ENERGY_UNITS[to_unit]


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_atomic_number(Z: int) -> None:
    """
    Проверка, что Z соответствует физическому элементу.

    Raises:
        OutOfRangeError: Если Z не целое, Z < 1 или Z > 118
    """
    try:
        Z = operator.index(Z)
    except TypeError:
        raise OutOfRangeError(
            f"Atomic number must be an integer, got {Z!r}"
        ) from None

    if Z < Z_MIN or Z > Z_MAX:
        raise OutOfRangeError(
            f"Atomic number Z={Z} out of range [{Z_MIN}, {Z_MAX}]: no physical element"
        )


def validate_nucleon_counts(A: int, Z: int, N: int) -> None:
    """
    Проверка инварианта нуклида: A = Z + N, A > 0, N >= 0.

    Диапазон Z проверяется отдельно (validate_atomic_number).

    Raises:
        InvalidNucleonCountsError: Если инвариант нарушен
    """
    if A <= 0:
        raise InvalidNucleonCountsError(f"Mass number must be positive, got A={A}")

    if N < 0:
        raise InvalidNucleonCountsError(
            f"Neutron count cannot be negative: N={N} (A={A}, Z={Z})"
        )

    if A != Z + N:
        raise InvalidNucleonCountsError(
            f"Nucleon counts inconsistent: A={A} != Z + N = {Z} + {N}"
        )
