"""Etiquetas ``<meta>`` de descripción y palabras clave.

La descripción larga de un producto puede traer HTML del editor; sólo en ese
caso se limpia antes de recortarla para que el límite cuente texto visible.
"""

from markupsafe import Markup

META_DESCRIPTION_LENGTH = 160
OMISSION = "..."


def truncate(text: str, length: int, separator: str | None = " ", omission: str = OMISSION) -> str:
    """Recorta ``text`` a ``length`` caracteres incluyendo la omisión.

    Con ``separator`` se corta en la última aparición que deja sitio a la
    omisión; si no aparece, se corta a la longitud exacta.
    """

    if len(text) <= length:
        return text
    espacio = max(length - len(omission), 0)
    corte = espacio
    if separator:
        posicion = text.rfind(separator, 0, espacio + len(separator))
        if posicion != -1:
            corte = posicion
    # Con límites menores que la omisión el resultado sigue respetando length.
    return f"{text[:corte]}{omission}"[:length]


def build_meta_description(text, limit: int = META_DESCRIPTION_LENGTH) -> str:
    """Recorta ``text`` al límite de la etiqueta; el texto no se reinterpreta."""
    if not text:
        return ""
    return truncate(text, limit)


def meta_data(obj=None, defaults=None, limit: int = META_DESCRIPTION_LENGTH) -> dict:
    """Pares nombre -> contenido para las etiquetas meta de la página.

    Se priorizan los campos ``meta_*`` del objeto; a falta de descripción se
    usa la descripción larga recortada. Lo que siga vacío se completa con
    ``defaults`` (los valores de la tienda).
    """

    meta = {}
    if obj is not None:
        if getattr(obj, "meta_keywords", None):
            meta["keywords"] = obj.meta_keywords
        if getattr(obj, "meta_description", None):
            meta["description"] = obj.meta_description
        if not meta.get("description") and getattr(obj, "descripcion", None):
            # La descripción larga viene del editor con HTML.
            limpio = Markup(obj.descripcion).striptags()
            meta["description"] = build_meta_description(limpio, limit)

    for nombre, valor in (defaults or {}).items():
        if not meta.get(nombre) and valor:
            meta[nombre] = valor
    return meta


def meta_data_tags(obj=None, defaults=None, limit: int = META_DESCRIPTION_LENGTH) -> Markup:
    etiquetas = [
        Markup('<meta name="{}" content="{}">').format(nombre, contenido)
        for nombre, contenido in meta_data(obj, defaults, limit).items()
    ]
    return Markup("\n").join(etiquetas)
