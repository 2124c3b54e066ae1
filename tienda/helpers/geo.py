"""Filtrado de países disponibles para el checkout.

La zona de checkout llega ya resuelta (o ``None``); este módulo no consulta
la base de datos ni lee configuración, de eso se encarga el servicio de
catálogo.
"""

import unicodedata

from babel.core import Locale, UnknownLocaleError

# Tipos de zona: miembros países o miembros estados.
ZONA_PAIS = "country"
ZONA_ESTADO = "state"


def _strip_accents(texto: str) -> str:
    texto = unicodedata.normalize("NFD", texto)
    return "".join(ch for ch in texto if unicodedata.category(ch) != "Mn")


def _unicos(elementos):
    # El identity map de SQLAlchemy garantiza un único objeto por fila.
    vistos = set()
    resultado = []
    for elemento in elementos:
        if elemento is None or id(elemento) in vistos:
            continue
        vistos.add(id(elemento))
        resultado.append(elemento)
    return resultado


def country_name(country, locale: str | None = None) -> str:
    """Nombre del país traducido con los territorios CLDR de Babel.

    Si no hay locale o Babel no conoce el código ISO se usa el nombre
    almacenado.
    """

    nombre = country.nombre
    iso = getattr(country, "iso", None)
    if not locale or not iso:
        return nombre
    try:
        territorios = Locale.parse(locale).territories
    except (UnknownLocaleError, ValueError):
        return nombre
    return territorios.get(iso.upper(), nombre)


def available_countries(countries, zone=None, locale: str | None = None) -> list:
    """Países en los que se permite el checkout.

    - Sin zona: todos los países recibidos.
    - Zona de tipo ``country``: los países miembros.
    - Zona de tipo ``state``: los países de cada estado miembro, sin repetir.

    El resultado se ordena por nombre visible ignorando tildes y mayúsculas.
    """

    if zone is None:
        elegibles = list(countries)
    elif zone.kind == ZONA_PAIS:
        elegibles = list(zone.zoneables)
    elif zone.kind == ZONA_ESTADO:
        elegibles = [estado.pais for estado in zone.zoneables]
    else:
        elegibles = list(countries)

    return sorted(
        _unicos(elegibles),
        key=lambda pais: _strip_accents(country_name(pais, locale)).casefold(),
    )
