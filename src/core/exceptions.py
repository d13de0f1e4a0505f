"""
Exceptions — таксономия ошибок ядра

Все ошибки ядра наследуются от NuclideError и пробрасываются вызывающему
коду без локального восстановления. Ядро не логирует ошибки: их отображение
является ответственностью вызывающего кода (CLI, отчёт, тесты).
"""


class NuclideError(Exception):
    """Базовый класс ошибок расчёта нуклидов."""

    pass


class OutOfRangeError(NuclideError, ValueError):
    """
    Запрошенный Z вне диапазона [1, 118].

    Ошибка пользовательского ввода: физического элемента с таким
    атомным номером не существует. Повтор не имеет смысла.
    """

    pass


class DataIntegrityError(NuclideError, RuntimeError):
    """
    Справочная таблица элементов отсутствует, усечена или повреждена.

    Дефект развёртывания/конфигурации, а не ошибка ввода. Сообщение
    содержит ожидаемое и фактическое количество строк.
    """

    pass


class DomainError(NuclideError, ValueError):
    """Формула вызвана вне области определения (A <= 0)."""

    pass


class InvalidNucleonCountsError(DomainError):
    """
    Недопустимая комбинация (A, Z, N) на границе конструирования.

    Примеры: A < Z (отрицательное N), A != Z + N, A <= 0.
    """

    pass
