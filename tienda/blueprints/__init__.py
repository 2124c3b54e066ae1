"""Registro centralizado de blueprints."""

from flask import Flask

from .escaparate import escaparate_bp


def register_blueprints(app: Flask) -> None:
    """Adjunta todos los blueprints a la aplicación Flask."""

    app.register_blueprint(escaparate_bp)
