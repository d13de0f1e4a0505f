"""
Liquid Drop Model — полуэмпирическая формула масс (Бете–Вайцзеккер)

Энергия связи ядра как сумма пяти членов (все в MeV):

ФОРМУЛЫ:
    volume    =  a_V * A
    surface   = -a_S * A^(2/3)
    coulomb   = -a_C * Z^2 * A^(-1/3)
    asymmetry = -a_A * (N - Z)^2 / A
    delta     =  a_P * A^(-3/4)

    pairing:
        Z чётное, N чётное  → +delta
        Z нечётное, N чётное → 0
        Z нечётное, N нечётное → -delta
        Z чётное, N нечётное → 0 (нестандартный случай, нейтрален)

    B = volume + surface + coulomb + asymmetry + pairing

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. A, Z, N приводятся к float до любого возведения в степень
2. A <= 0 → DomainError (деление на A не определено)
3. Переполнение float на любом шаге → DomainError, а не OverflowError/inf
4. Результат — детерминированная функция (A, Z, N)
"""

from typing import Final, NamedTuple

from src.core.exceptions import DomainError
from src.core.math.numerical_safeguards import is_valid_float, real_power, validate_positive

# =============================================================================
# КОЭФФИЦИЕНТЫ КАПЕЛЬНОЙ МОДЕЛИ (MeV)
# =============================================================================
# Эмпирические константы фита, часть контракта формулы (не конфигурируются)
A_V: Final[float] = 15.5  # объёмный член
A_S: Final[float] = 16.8  # поверхностный член
A_C: Final[float] = 0.72  # кулоновский член
A_A: Final[float] = 23.0  # член асимметрии
A_P: Final[float] = 34.0  # член спаривания

SURFACE_EXPONENT: Final[float] = 2.0 / 3.0
COULOMB_EXPONENT: Final[float] = -1.0 / 3.0
PAIRING_EXPONENT: Final[float] = -3.0 / 4.0


# =============================================================================
# TYPES
# =============================================================================


class LiquidDropTerms(NamedTuple):
    """Разложение энергии связи по членам формулы (MeV)."""

    volume: float
    surface: float
    coulomb: float
    asymmetry: float
    pairing: float

    @property
    def total(self) -> float:
        """Энергия связи: сумма всех членов."""
        return self.volume + self.surface + self.coulomb + self.asymmetry + self.pairing


# =============================================================================
# ЧЛЕНЫ ФОРМУЛЫ
# =============================================================================


def _require_positive_mass_number(A: int) -> float:
    # Деление на A и отрицательные степени A определены только при A > 0
    try:
        A_f = float(A)
    except OverflowError as e:
        raise DomainError("Mass number A is too large to be represented as float") from e
    validate_positive(A_f, "Mass number A")
    return A_f


def pairing_delta(A: int) -> float:
    """Величина члена спаривания: a_P * A^(-3/4)."""
    A_f = _require_positive_mass_number(A)
    return A_P * real_power(A_f, PAIRING_EXPONENT)


def pairing_term(A: int, Z: int, N: int) -> float:
    """
    Член спаривания с учётом чётности Z и N.

    Args:
        A: Массовое число
        Z: Число протонов
        N: Число нейтронов

    Returns:
        +delta (чётно-чётные), -delta (нечётно-нечётные), иначе 0.0

    Raises:
        DomainError: Если A <= 0
    """
    delta = pairing_delta(A)

    z_even = Z % 2 == 0
    n_even = N % 2 == 0

    if z_even and n_even:
        return delta
    if not z_even and n_even:
        return 0.0
    if not z_even and not n_even:
        return -delta
    # Чётное Z / нечётное N: нестандартный случай
    return 0.0


def liquid_drop_terms(A: int, Z: int, N: int) -> LiquidDropTerms:
    """
    Вычисление всех пяти членов полуэмпирической формулы масс.

    Args:
        A: Массовое число (A > 0)
        Z: Число протонов
        N: Число нейтронов

    Returns:
        LiquidDropTerms с членами в MeV

    Raises:
        DomainError: Если A <= 0 или член формулы не finite
    """
    A_f = _require_positive_mass_number(A)
    try:
        Z_f = float(Z)
        N_f = float(N)
    except OverflowError as e:
        raise DomainError("Nucleon counts are too large to be represented as float") from e

    volume = A_V * A_f
    surface = -A_S * real_power(A_f, SURFACE_EXPONENT)
    coulomb = -A_C * real_power(Z_f, 2.0) * real_power(A_f, COULOMB_EXPONENT)
    asymmetry = -A_A * real_power(N_f - Z_f, 2.0) / A_f
    pairing = pairing_term(A, Z, N)

    terms = LiquidDropTerms(
        volume=volume,
        surface=surface,
        coulomb=coulomb,
        asymmetry=asymmetry,
        pairing=pairing,
    )
    if not all(is_valid_float(term) for term in terms) or not is_valid_float(terms.total):
        raise DomainError(f"Liquid drop terms are not finite for A={A_f:g}, Z={Z_f:g}")
    return terms


def binding_energy(A: int, Z: int, N: int) -> float:
    """
    Энергия связи ядра (MeV) по капельной модели.

    Raises:
        DomainError: Если A <= 0
    """
    return liquid_drop_terms(A, Z, N).total


def binding_energy_per_nucleon(A: int, Z: int, N: int) -> float:
    """Удельная энергия связи B/A (MeV)."""
    return binding_energy(A, Z, N) / _require_positive_mass_number(A)
