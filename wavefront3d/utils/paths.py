"""
Исправление путей к файлам, на которые ссылается OBJ/MTL документ.

Экспортёры часто пишут абсолютные пути своей машины (в т.ч. с ``\\``),
поэтому если буквальный путь не существует, берём только имя файла и
ищем его рядом с документом, который на него сослался.
"""

from pathlib import Path


def resolve_path(reference: str, referrer) -> Path:
    """Вернуть путь к ``reference`` относительно документа ``referrer``.

    Наличие файла по итоговому пути не проверяется – это забота того,
    кто будет его открывать.
    """
    literal = Path(reference)
    if literal.is_file():
        return literal

    filename = reference.replace("\\", "/").rsplit("/", 1)[-1]
    return Path(referrer).parent / filename
