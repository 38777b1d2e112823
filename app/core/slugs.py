import re
from typing import Iterable

_TAG_RE = re.compile(r"<[^>]*>")


def next_slug_number(slugs: Iterable[str], prefix: str) -> int:
    """
    Calcula el siguiente número libre para slugs con formato ``<prefix>-<N>``.

    Solo cuentan los slugs que coinciden exactamente con el patrón (dígitos
    ASCII); el resto se ignora. Sin coincidencias devuelve 1.
    """
    pattern = re.compile(rf"{re.escape(prefix)}-([0-9]+)")
    numbers = []
    for slug in slugs:
        match = pattern.fullmatch(slug or "")
        if match:
            numbers.append(int(match.group(1)))

    if not numbers:
        return 1
    return max(numbers) + 1


def build_slug(prefix: str, number: int) -> str:
    return f"{prefix}-{number}"


def count_words(content: str) -> int:
    """Cuenta palabras del cuerpo tras quitar las etiquetas HTML."""
    text = _TAG_RE.sub("", content or "")
    return len(text.split())
