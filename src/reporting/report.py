"""
Isotope Report — текстовое и JSON представление нуклида

Потребляет только публичный контракт Isotope: поля element/symbol/A/Z/N,
binding_energy(), mass(), binding_energy_per_nucleon(), liquid_drop_terms().
Перевод единиц (amu, keV/GeV) выполняется здесь, а не в ядре.
"""

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, TextIO

from src.core.contracts import validate_isotope_report
from src.core.domain.units import ENERGY_UNITS, convert_energy, mev_to_amu
from src.core.math.numerical_safeguards import validate_in_range

if TYPE_CHECKING:
    from src.core.domain.isotope import Isotope


REPORT_SCHEMA_VERSION = "1"

HEADER = "------------- Isotope Report ------------"
FOOTER = "-----------------------------------------"

MIN_PRECISION = 0
MAX_PRECISION = 15


@dataclass(frozen=True)
class ReportConfig:
    """Параметры текстового отчёта."""

    label_width: int = 20
    value_width: int = 15
    precision: int = 5
    energy_unit: str = "MeV"

    def __post_init__(self) -> None:
        if self.energy_unit not in ENERGY_UNITS:
            raise ValueError(f"Unknown energy unit: {self.energy_unit!r}")
        validate_in_range(
            self.precision, "precision", min_value=MIN_PRECISION, max_value=MAX_PRECISION
        )
        validate_in_range(self.value_width, "value_width", min_value=1)


def _line(config: ReportConfig, label: str, value: Any, suffix: str = "") -> str:
    if isinstance(value, float):
        text = f"{label:<{config.label_width}} {value:>{config.value_width}.{config.precision}f}"
    else:
        text = f"{label:<{config.label_width}} {value!s:>{config.value_width}}"
    return f"{text} {suffix}" if suffix else text


def format_report(isotope: "Isotope", config: Optional[ReportConfig] = None) -> str:
    """
    Текстовый отчёт по нуклиду.

    Args:
        isotope: Нуклид
        config: Параметры форматирования (по умолчанию ReportConfig())

    Returns:
        Многострочный отчёт: A, Z, N, масса (amu и <unit>/c^2),
        энергия связи и B/A
    """
    config = config or ReportConfig()
    unit = config.energy_unit

    mass_mev = isotope.mass()
    binding = isotope.binding_energy()
    per_nucleon = isotope.binding_energy_per_nucleon()

    lines = [
        HEADER,
        _line(config, "Element:", isotope.element),
        _line(config, "A", isotope.A, "nucleons"),
        _line(config, "Z", isotope.Z, "protons"),
        _line(config, "N", isotope.N, "neutrons"),
        _line(config, "Mass (amu)", mev_to_amu(mass_mev), "amu"),
        _line(config, "", convert_energy(mass_mev, "MeV", unit), f"{unit}/c^2"),
        "",
        _line(config, "Binding Energy:", convert_energy(binding, "MeV", unit), unit),
        _line(config, "BE/A:", convert_energy(per_nucleon, "MeV", unit), unit),
        FOOTER,
    ]
    return "\n".join(lines)


def print_report(
    isotope: "Isotope",
    config: Optional[ReportConfig] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Печать текстового отчёта (по умолчанию в stdout)."""
    print(format_report(isotope, config), file=file or sys.stdout)


def isotope_report_dict(isotope: "Isotope", validate: bool = True) -> Dict[str, Any]:
    """
    JSON-совместимый отчёт по нуклиду (контракт isotope_report).

    Args:
        isotope: Нуклид
        validate: Проверить результат против JSON Schema

    Returns:
        dict с идентичностью нуклида, массой, энергией связи и членами формулы

    Raises:
        ValidationError: Если validate=True и отчёт не соответствует схеме
    """
    mass_mev = isotope.mass()
    data = {
        "schema_version": REPORT_SCHEMA_VERSION,
        "element": isotope.element,
        "symbol": isotope.symbol,
        "label": isotope.label,
        "A": isotope.A,
        "Z": isotope.Z,
        "N": isotope.N,
        "mass_mev": mass_mev,
        "mass_amu": mev_to_amu(mass_mev),
        "binding_energy_mev": isotope.binding_energy(),
        "binding_energy_per_nucleon_mev": isotope.binding_energy_per_nucleon(),
        "terms": isotope.liquid_drop_terms()._asdict(),
    }

    if validate:
        validate_isotope_report(data)

    return data
