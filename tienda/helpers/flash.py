"""Renderizado de mensajes flash como bloques ``<div class="flash ...">``."""

from collections.abc import Mapping

from markupsafe import Markup


def _normalizar_ignorados(ignore_types) -> set[str]:
    if ignore_types is None:
        return set()
    if isinstance(ignore_types, str):
        return {ignore_types}
    return {str(tipo) for tipo in ignore_types}


def render_flash_messages(messages, ignore_types=None) -> Markup:
    """Genera un bloque por categoría salvo las indicadas en ``ignore_types``.

    ``messages`` puede ser un mapping categoría -> texto o la lista de pares
    que devuelve ``get_flashed_messages(with_categories=True)``. Las
    categorías ignoradas no producen salida alguna.
    """

    ignorados = _normalizar_ignorados(ignore_types)
    pares = messages.items() if isinstance(messages, Mapping) else messages
    bloques = [
        Markup('<div class="flash {}">{}</div>').format(categoria, texto)
        for categoria, texto in pares
        if str(categoria) not in ignorados
    ]
    return Markup("").join(bloques)


__all__ = ["render_flash_messages"]
