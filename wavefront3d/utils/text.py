"""
Построчное чтение OBJ/MTL из бинарного потока.

Каждая строка декодируется отдельно, поэтому ошибка кодировки
указывает точную строку. BOM в начале файла отбрасывается.
"""

from wavefront3d.errors import FormatError


def decoded_lines(stream, path):
    for lineno, raw in enumerate(stream, 1):
        try:
            yield raw.decode("utf-8-sig" if lineno == 1 else "utf-8")
        except UnicodeDecodeError as exc:
            raise FormatError(f"line is not valid UTF-8 (byte {exc.start})", path, lineno) from None
