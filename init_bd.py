"""Crea las tablas y carga un catálogo geográfico mínimo de ejemplo."""

from tienda import create_app
from tienda.db import db
from tienda.models import ZONA_PAIS, Estado, Pais, Zona

PAISES_DEMO = [
    ("ES", "España", ["Madrid", "Barcelona", "Valencia"]),
    ("PT", "Portugal", ["Lisboa", "Oporto"]),
    ("FR", "Francia", []),
    ("US", "Estados Unidos", ["California", "Nueva York"]),
]


def cargar_datos_demo():
    if Pais.query.first() is not None:
        return
    peninsula = Zona("Peninsula", kind=ZONA_PAIS, descripcion="España y Portugal")
    for iso, nombre, estados in PAISES_DEMO:
        pais = Pais(iso=iso, nombre=nombre)
        pais.estados = [Estado(nombre=estado) for estado in estados]
        db.session.add(pais)
        if iso in {"ES", "PT"}:
            peninsula.agregar(pais)
    db.session.add(peninsula)
    db.session.commit()


def main():
    app = create_app()
    with app.app_context():
        db.create_all()
        cargar_datos_demo()
        print("Tablas creadas correctamente.")


if __name__ == "__main__":
    main()
