# wavefront3d/errors.py
"""
Иерархия исключений загрузчика.

Все ошибки знают файл и (если применимо) номер строки, поэтому
сообщение всегда выглядит как ``path:line: message``.
"""


class WavefrontError(Exception):
    """Базовое исключение для всех ошибок разбора OBJ/MTL."""

    def __init__(self, message: str, path=None, line: int | None = None):
        super().__init__(message)
        self.message = message
        self.path = str(path) if path is not None else None
        self.line = line

    def __str__(self):
        where = self.path or ""
        if self.line is not None:
            where = f"{where}:{self.line}"
        return f"{where}: {self.message}" if where else self.message


class FormatError(WavefrontError, ValueError):
    """Некорректное число, грань с <3 или >4 углами, newmtl без имени."""


class OutOfRangeError(WavefrontError, IndexError):
    """Индекс грани ссылается за пределы прочитанных v/vt."""


class ModelIOError(WavefrontError, IOError):
    """Файл модели или библиотеки материалов не удалось открыть."""
