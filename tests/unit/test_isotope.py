"""
Тесты для модели Isotope

Проверяет:
1. Фабрики from_nucleons / create и инвариант A = Z + N
2. Доменные ошибки на границе конструирования
3. Immutability (frozen=True)
4. Энергию связи, массу, B/A на эталонных нуклидах
5. upper_isobar с полной валидацией результата
"""

import math
from pathlib import Path

import pytest
from pydantic import ValidationError

from src.core.domain import (
    DataIntegrityError,
    DomainError,
    ElementCatalog,
    InvalidNucleonCountsError,
    Isotope,
    NuclideError,
    OutOfRangeError,
)
from src.core.domain.units import AMU_MEV, M_NEUTRON_MEV, M_PROTON_MEV


@pytest.fixture
def uranium_236() -> Isotope:
    return Isotope.from_nucleons(236, 92)


@pytest.fixture
def palladium_117() -> Isotope:
    return Isotope.from_nucleons(117, 46)


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestFromNucleons:
    """Тесты фабрики from_nucleons"""

    def test_uranium_identity(self, uranium_236: Isotope) -> None:
        assert uranium_236.element == "Uranium"
        assert uranium_236.symbol == "U"
        assert uranium_236.A == 236
        assert uranium_236.Z == 92
        assert uranium_236.N == 144
        assert uranium_236.label == "Uranium-236"

    @pytest.mark.parametrize("A, Z", [(1, 1), (4, 2), (117, 46), (140, 54), (94, 38), (294, 118)])
    def test_nucleon_sum_invariant(self, A: int, Z: int) -> None:
        iso = Isotope.from_nucleons(A, Z)
        assert iso.A == iso.Z + iso.N
        assert iso.N >= 0

    def test_zero_neutrons_allowed(self) -> None:
        hydrogen = Isotope.from_nucleons(1, 1)
        assert hydrogen.N == 0
        assert hydrogen.symbol == "H"

    def test_a_less_than_z(self) -> None:
        with pytest.raises(InvalidNucleonCountsError, match="cannot be negative"):
            Isotope.from_nucleons(5, 10)

    def test_z_out_of_range(self) -> None:
        with pytest.raises(OutOfRangeError):
            Isotope.from_nucleons(300, 119)

        with pytest.raises(OutOfRangeError):
            Isotope.from_nucleons(10, 0)

    def test_non_positive_mass_number(self) -> None:
        with pytest.raises(InvalidNucleonCountsError):
            Isotope.from_nucleons(0, 1)

    def test_catalog_errors_propagate(self, tmp_path: Path) -> None:
        catalog = ElementCatalog(tmp_path / "missing.csv")
        with pytest.raises(DataIntegrityError):
            Isotope.from_nucleons(236, 92, catalog=catalog)

    def test_custom_catalog(self, tmp_path: Path) -> None:
        source = ElementCatalog().load()
        rows = [f"{e.name},{e.symbol}" for e in source]
        rows[91] = "Uranium,Ur"
        path = tmp_path / "elements.csv"
        path.write_text("\n".join(rows), encoding="utf-8")

        iso = Isotope.from_nucleons(238, 92, catalog=ElementCatalog(path))
        assert iso.symbol == "Ur"

    @pytest.mark.parametrize("Z", [92.0, 92.5, "92"])
    def test_non_integer_z_rejected(self, Z: object) -> None:
        with pytest.raises(OutOfRangeError, match="must be an integer"):
            Isotope.from_nucleons(236, Z)  # type: ignore[arg-type]


class TestCreate:
    """Тесты фабрики create"""

    def test_create_valid(self) -> None:
        iso = Isotope.create("Xenon", "Xe", 140, 54, 86)
        assert iso.element == "Xenon"
        assert iso.N == 86

    def test_create_bypasses_catalog(self) -> None:
        iso = Isotope.create("Custom", "Cx", 4, 2, 2)
        assert iso.element == "Custom"

    def test_create_inconsistent_counts(self) -> None:
        with pytest.raises(InvalidNucleonCountsError, match="inconsistent"):
            Isotope.create("Uranium", "U", 236, 92, 143)

    def test_create_negative_neutrons(self) -> None:
        with pytest.raises(InvalidNucleonCountsError):
            Isotope.create("Helium", "He", 1, 2, -1)

    def test_create_z_out_of_range(self) -> None:
        with pytest.raises(OutOfRangeError):
            Isotope.create("Ununennium", "Uue", 315, 119, 196)

    def test_direct_construction_validated(self) -> None:
        """Прямой вызов конструктора проверяется Pydantic"""
        with pytest.raises(ValidationError, match="inconsistent"):
            Isotope(element="Uranium", symbol="U", A=236, Z=92, N=143)

        with pytest.raises(ValidationError, match="greater than 0"):
            Isotope(element="Nothing", symbol="", A=0, Z=1, N=-1)

    def test_symbol_longer_than_three_rejected(self) -> None:
        """Символ длиннее 3 знаков не проходит модель (и контракт отчёта)"""
        with pytest.raises(ValidationError, match="at most 3 characters"):
            Isotope.create("Xenon", "Xenon", 140, 54, 86)

    def test_roundtrip_with_from_nucleons(self, uranium_236: Isotope) -> None:
        """from_nucleons и create с той же идентичностью дают одинаковые расчёты"""
        created = Isotope.create(
            uranium_236.element, uranium_236.symbol, uranium_236.A, uranium_236.Z, uranium_236.N
        )
        assert created == uranium_236
        assert created.binding_energy() == uranium_236.binding_energy()
        assert created.mass() == uranium_236.mass()


class TestImmutability:
    """Модель frozen=True"""

    def test_cannot_mutate(self, uranium_236: Isotope) -> None:
        with pytest.raises(ValidationError):
            uranium_236.Z = 93  # type: ignore

    def test_hashable(self, uranium_236: Isotope) -> None:
        assert hash(uranium_236) == hash(Isotope.from_nucleons(236, 92))


# =============================================================================
# CALCULATIONS
# =============================================================================


class TestCalculations:
    """Тесты расчётов"""

    def test_uranium_binding_energy(self, uranium_236: Isotope) -> None:
        be = uranium_236.binding_energy()
        assert 1700.0 < be < 1900.0
        assert be == pytest.approx(1767.32, abs=0.05)

    def test_binding_energy_deterministic(self, uranium_236: Isotope) -> None:
        assert uranium_236.binding_energy() == uranium_236.binding_energy()

    def test_binding_energy_matches_terms(self, uranium_236: Isotope) -> None:
        assert uranium_236.binding_energy() == uranium_236.liquid_drop_terms().total

    def test_uranium_mass(self, uranium_236: Isotope) -> None:
        expected = 92 * M_PROTON_MEV + 144 * M_NEUTRON_MEV - uranium_236.binding_energy()
        assert uranium_236.mass() == pytest.approx(expected)
        assert uranium_236.mass() == pytest.approx(219852.95, abs=0.1)

    def test_mass_amu(self, uranium_236: Isotope) -> None:
        assert uranium_236.mass_amu() == pytest.approx(uranium_236.mass() / AMU_MEV)
        assert uranium_236.mass_amu() == pytest.approx(236.02, abs=0.01)

    def test_palladium_per_nucleon(self, palladium_117: Isotope) -> None:
        be_a = palladium_117.binding_energy_per_nucleon()
        assert math.isfinite(be_a)
        assert 0.0 < be_a < 10.0
        assert be_a == pytest.approx(palladium_117.binding_energy() / 117)

    def test_single_nucleon(self) -> None:
        """A=1: деления на ноль нет"""
        hydrogen = Isotope.from_nucleons(1, 1)
        assert math.isfinite(hydrogen.binding_energy_per_nucleon())
        assert hydrogen.binding_energy_per_nucleon() == hydrogen.binding_energy()

    def test_odd_odd_pairing_negates_even_even(self, uranium_236: Isotope) -> None:
        neptunium_236 = Isotope.from_nucleons(236, 93)
        assert neptunium_236.liquid_drop_terms().pairing == -uranium_236.liquid_drop_terms().pairing

    def test_huge_mass_number_signals_domain_error(self) -> None:
        """Допустимый, но огромный A: DomainError вместо OverflowError"""
        giant = Isotope.from_nucleons(10**200, 92)
        with pytest.raises(DomainError):
            giant.binding_energy()
        with pytest.raises(NuclideError):
            giant.mass()


# =============================================================================
# UPPER ISOBAR
# =============================================================================


class TestUpperIsobar:
    """Тесты upper_isobar"""

    def test_preserves_mass_number(self, uranium_236: Isotope) -> None:
        isobar = uranium_236.upper_isobar()
        assert isobar.A == uranium_236.A
        assert isobar.Z == uranium_236.Z + 1
        assert isobar.N == uranium_236.N - 1

    def test_resolves_element(self, uranium_236: Isotope) -> None:
        isobar = uranium_236.upper_isobar()
        assert isobar.element == "Neptunium"
        assert isobar.symbol == "Np"

    def test_returns_new_instance(self, uranium_236: Isotope) -> None:
        isobar = uranium_236.upper_isobar()
        assert isobar is not uranium_236
        assert uranium_236.Z == 92

    def test_no_neutrons_left(self) -> None:
        with pytest.raises(InvalidNucleonCountsError):
            Isotope.from_nucleons(1, 1).upper_isobar()

    def test_beyond_last_element(self) -> None:
        with pytest.raises(OutOfRangeError):
            Isotope.from_nucleons(294, 118).upper_isobar()
