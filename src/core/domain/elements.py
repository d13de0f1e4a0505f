"""
ElementCatalog — справочная таблица химических элементов

Отображение Z (1..118) → (название, символ).

Формат источника: текстовый файл ровно из 118 строк `ElementName,Symbol`,
без заголовка; строка i (с 0) соответствует Z = i + 1.

Таблица загружается один раз (лениво, под блокировкой) и далее только
читается, поэтому экземпляр можно разделять между потоками без синхронизации
поиска. Ошибка загрузки не кэшируется: следующий вызов повторит чтение.
"""

import csv
import threading
from pathlib import Path
from typing import Final, Iterator, NamedTuple, Optional

from src.core.domain.units import Z_MAX, validate_atomic_number
from src.core.exceptions import DataIntegrityError
from src.logger import catalog_logger

# Таблица поставляется вместе с пакетом
DATA_PATH: Final[Path] = Path(__file__).parent.parent / "data" / "elements.csv"

EXPECTED_ROWS: Final[int] = Z_MAX


class Element(NamedTuple):
    """Строка справочной таблицы."""

    name: str
    symbol: str


class ElementCatalog:
    """
    Справочник элементов с O(1) поиском по атомному номеру.

    Args:
        path: Путь к таблице (по умолчанию — встроенный elements.csv)
    """

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path is not None else DATA_PATH
        self._rows: Optional[tuple[Element, ...]] = None
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _read_rows(self) -> tuple[Element, ...]:
        try:
            with open(self._path, "r", encoding="utf-8", newline="") as f:
                lines = f.read().splitlines()
        except OSError as e:
            raise DataIntegrityError(
                f"Element table unreadable: {self._path} ({e}); "
                f"expected {EXPECTED_ROWS} rows, found 0"
            ) from e

        # Хвостовые пустые строки не считаются строками таблицы
        while lines and not lines[-1].strip():
            lines.pop()

        rows = []
        for fields in csv.reader(lines):
            # Отсутствующее поле → пустая строка, а не ошибка всего поиска
            name = fields[0].strip() if len(fields) > 0 else ""
            symbol = fields[1].strip() if len(fields) > 1 else ""
            rows.append(Element(name=name, symbol=symbol))

        if len(rows) != EXPECTED_ROWS:
            raise DataIntegrityError(
                f"Element table {self._path} is malformed: "
                f"expected {EXPECTED_ROWS} rows, found {len(rows)}"
            )

        return tuple(rows)

    def load(self) -> tuple[Element, ...]:
        """
        Загрузка таблицы (идемпотентно, single-initialization).

        Returns:
            Кортеж из 118 строк в порядке возрастания Z

        Raises:
            DataIntegrityError: Если файл отсутствует или число строк != 118
        """
        rows = self._rows
        if rows is not None:
            return rows

        with self._lock:
            if self._rows is None:
                self._rows = self._read_rows()
                catalog_logger.debug(
                    "Loaded %d elements from %s", len(self._rows), self._path
                )
            return self._rows

    @property
    def is_loaded(self) -> bool:
        return self._rows is not None

    def lookup(self, Z: int) -> Element:
        """
        Поиск элемента по атомному номеру.

        Args:
            Z: Число протонов (1..118)

        Returns:
            Element(name, symbol)

        Raises:
            OutOfRangeError: Если Z < 1 или Z > 118
            DataIntegrityError: Если таблица повреждена или строка Z пуста
        """
        validate_atomic_number(Z)
        rows = self.load()

        row = rows[Z - 1]
        if not row.name and not row.symbol:
            raise DataIntegrityError(
                f"Element table {self._path} has no well-formed row for Z={Z} "
                f"(line {Z} of {EXPECTED_ROWS} is blank)"
            )
        return row

    def __len__(self) -> int:
        return len(self.load())

    def __iter__(self) -> Iterator[Element]:
        return iter(self.load())


# =============================================================================
# ПРОЦЕССНЫЙ ЭКЗЕМПЛЯР
# =============================================================================

_DEFAULT_CATALOG: Optional[ElementCatalog] = None
_DEFAULT_CATALOG_LOCK = threading.Lock()


def default_catalog() -> ElementCatalog:
    """Общий для процесса read-only справочник (создаётся один раз)."""
    global _DEFAULT_CATALOG

    if _DEFAULT_CATALOG is None:
        with _DEFAULT_CATALOG_LOCK:
            if _DEFAULT_CATALOG is None:
                _DEFAULT_CATALOG = ElementCatalog()
    return _DEFAULT_CATALOG


def lookup(Z: int) -> Element:
    """Поиск элемента в общем справочнике."""
    return default_catalog().lookup(Z)
