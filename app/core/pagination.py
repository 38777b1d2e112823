from typing import List, Union

ELLIPSIS = "..."

PageMarker = Union[int, str]


def page_markers(current: int, total: int) -> List[PageMarker]:
    """
    Lista de páginas para el paginador, con ELLIPSIS en los rangos omitidos.

    Hasta 7 páginas se muestran todas; a partir de 8 se comprime alrededor
    de la página actual. Siempre empieza en 1 y termina en ``total``.
    """
    if total <= 0:
        return []

    if total <= 7:
        return list(range(1, total + 1))

    if current <= 3:
        return [1, 2, 3, 4, ELLIPSIS, total]
    if current >= total - 2:
        return [1, ELLIPSIS, total - 3, total - 2, total - 1, total]
    return [1, ELLIPSIS, current - 1, current, current + 1, ELLIPSIS, total]


def total_pages(total_count: int, page_size: int) -> int:
    if page_size <= 0:
        return 0
    return -(-total_count // page_size)
