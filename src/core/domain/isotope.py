"""
Isotope — модель нуклида

Immutable Pydantic модель, представляющая один нуклид (A, Z, N) вместе
с названием и символом элемента. Все преобразования (upper_isobar)
создают новый экземпляр.

ИНВАРИАНТЫ:
1. A = Z + N
2. A > 0, 1 <= Z <= 118, N >= 0
3. (element, symbol) копируются из справочника при создании; живой ссылки
   на справочник экземпляр не хранит
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.core.domain.elements import ElementCatalog, default_catalog
from src.core.domain.units import (
    M_NEUTRON_MEV,
    M_PROTON_MEV,
    Z_MAX,
    Z_MIN,
    mev_to_amu,
    validate_atomic_number,
    validate_nucleon_counts,
)
from src.core.math import liquid_drop
from src.core.math.liquid_drop import LiquidDropTerms


# =============================================================================
# ISOTOPE MODEL
# =============================================================================


class Isotope(BaseModel):
    """
    Модель нуклида.

    Immutable модель (frozen=True). Создание через фабрики:
    - Isotope.from_nucleons(A, Z) — N = A - Z, элемент из справочника
    - Isotope.create(element, symbol, A, Z, N) — идентичность уже известна

    Фабрики выбрасывают доменные ошибки (OutOfRangeError,
    InvalidNucleonCountsError, DataIntegrityError). Прямой вызов
    конструктора с невалидными полями даёт pydantic.ValidationError.
    """

    # Идентификация
    element: str = Field(..., description="Название элемента (например, 'Uranium')")
    symbol: str = Field(..., max_length=3, description="Химический символ (например, 'U')")

    # Нуклонный состав
    A: int = Field(..., gt=0, description="Массовое число (всего нуклонов)")
    Z: int = Field(..., ge=Z_MIN, le=Z_MAX, description="Число протонов (атомный номер)")
    N: int = Field(..., ge=0, description="Число нейтронов")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_nucleon_sum(self) -> "Isotope":
        """Проверка инварианта A = Z + N."""
        if self.A != self.Z + self.N:
            raise ValueError(
                f"Nucleon counts inconsistent: A={self.A} != Z + N = {self.Z} + {self.N}"
            )
        return self

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_nucleons(
        cls, A: int, Z: int, catalog: Optional[ElementCatalog] = None
    ) -> "Isotope":
        """
        Создание нуклида по (A, Z).

        Args:
            A: Массовое число
            Z: Число протонов
            catalog: Справочник элементов (по умолчанию — общий для процесса)

        Returns:
            Isotope с N = A - Z и элементом из справочника

        Raises:
            OutOfRangeError: Если Z вне [1, 118]
            InvalidNucleonCountsError: Если A <= 0 или A < Z
            DataIntegrityError: Если справочник повреждён
        """
        validate_atomic_number(Z)
        N = A - Z
        validate_nucleon_counts(A, Z, N)

        if catalog is None:
            catalog = default_catalog()
        element = catalog.lookup(Z)
        return cls(element=element.name, symbol=element.symbol, A=A, Z=Z, N=N)

    @classmethod
    def create(cls, element: str, symbol: str, A: int, Z: int, N: int) -> "Isotope":
        """
        Создание нуклида с известной идентичностью (без обращения к справочнику).

        Raises:
            OutOfRangeError: Если Z вне [1, 118]
            InvalidNucleonCountsError: Если A != Z + N, A <= 0 или N < 0
        """
        validate_atomic_number(Z)
        validate_nucleon_counts(A, Z, N)
        return cls(element=element, symbol=symbol, A=A, Z=Z, N=N)

    # -------------------------------------------------------------------------
    # Расчёты
    # -------------------------------------------------------------------------

    def liquid_drop_terms(self) -> LiquidDropTerms:
        """Разложение энергии связи по членам капельной модели (MeV)."""
        return liquid_drop.liquid_drop_terms(self.A, self.Z, self.N)

    def binding_energy(self) -> float:
        """
        Энергия связи (MeV) по полуэмпирической формуле масс.

        Returns:
            volume + surface + coulomb + asymmetry + pairing
        """
        return liquid_drop.binding_energy(self.A, self.Z, self.N)

    def mass(self) -> float:
        """
        Масса ядра в MeV/c^2.

        Z * m_p + N * m_n - B. Для amu см. mass_amu().
        """
        return self.Z * M_PROTON_MEV + self.N * M_NEUTRON_MEV - self.binding_energy()

    def mass_amu(self) -> float:
        """Масса ядра в атомных единицах массы."""
        return mev_to_amu(self.mass())

    def binding_energy_per_nucleon(self) -> float:
        """Удельная энергия связи B/A (MeV)."""
        return liquid_drop.binding_energy_per_nucleon(self.A, self.Z, self.N)

    def upper_isobar(self, catalog: Optional[ElementCatalog] = None) -> "Isotope":
        """
        Соседний изобар сверху: тот же A, Z + 1, N - 1.

        Результат проходит полную валидацию фабрики from_nucleons.

        Raises:
            OutOfRangeError: Если Z + 1 > 118
            InvalidNucleonCountsError: Если N - 1 < 0
        """
        return Isotope.from_nucleons(self.A, self.Z + 1, catalog=catalog)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    @property
    def label(self) -> str:
        """Отображаемое имя, например 'Uranium-236'."""
        return f"{self.element}-{self.A}"
