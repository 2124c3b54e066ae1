"""Consultas de catálogo que alimentan a los helpers geográficos.

Es el único punto que lee ``CHECKOUT_ZONE``; el filtro recibe la zona ya
resuelta para que siga siendo una función pura.
"""

from flask import current_app

from tienda.helpers.geo import available_countries
from tienda.models import Pais, Zona


def buscar_zona(nombre):
    """Zona por nombre o ``None`` si no existe o no se indicó ninguna."""
    if not nombre:
        return None
    return Zona.query.filter_by(nombre=nombre).first()


def paises_disponibles(nombre_zona=None):
    """Países elegibles para el checkout según la zona configurada.

    Sin ``nombre_zona`` se usa ``CHECKOUT_ZONE`` de la configuración. Una
    zona que no existe equivale a no tener zona.
    """

    config = current_app.config
    if nombre_zona is None:
        nombre_zona = config.get("CHECKOUT_ZONE")

    zona = buscar_zona(nombre_zona)
    if nombre_zona and zona is None:
        current_app.logger.warning(
            "Zona de checkout %s no encontrada; se ofrecen todos los países", nombre_zona
        )

    paises = Pais.query.all()
    return available_countries(paises, zona, locale=config.get("COUNTRY_LOCALE"))
