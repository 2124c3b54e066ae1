"""Aplicación del escaparate y configuración inicial.

Este módulo prepara la factory de Flask y centraliza la configuración
leída del entorno, incluida la zona de checkout y los locales que usan
los helpers de vista.
"""

import logging
import os

from flask import Flask

from .db import db
from .extensions import csrf, migrate
from .blueprints import register_blueprints
from .helpers import register_helpers
from .helpers.imagenes import DEFAULT_IMAGE_STYLES, NOIMAGE_URL
from .helpers.meta import META_DESCRIPTION_LENGTH


def _get_bool_env(var_name: str, default: bool) -> bool:
    """Convierte variables de entorno en booleanos de forma segura."""
    value = os.getenv(var_name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "y"}


def _get_int_env(var_name: str, default: int) -> int:
    value = os.getenv(var_name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Valor no numérico en %s=%r; se usa %s", var_name, value, default
        )
        return default


def create_app():
    """Factory de la aplicación Flask.

    La zona de checkout se lee aquí una vez; los helpers la reciben ya
    resuelta en cada llamada y nunca la modifican.
    """

    app = Flask(__name__, template_folder="templates", static_folder="static")

    # Logging básico; se ajusta por entorno con LOG_LEVEL.
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv(
        "DATABASE_URI", "sqlite:///../instance/tienda.db"
    )
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["SQLALCHEMY_ECHO"] = _get_bool_env("SQLALCHEMY_ECHO", False)
    # Fallback mínimo sólo para desarrollo local.
    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "cambia-esta-clave")
    app.config["WTF_CSRF_ENABLED"] = _get_bool_env("WTF_CSRF_ENABLED", True)

    # Sin CHECKOUT_ZONE se ofrecen todos los países.
    app.config["CHECKOUT_ZONE"] = os.getenv("CHECKOUT_ZONE") or None
    app.config["CURRENCY_CODE"] = os.getenv("CURRENCY_CODE", "EUR")
    app.config["CURRENCY_LOCALE"] = os.getenv("CURRENCY_LOCALE", "es_ES")
    app.config["TIME_LOCALE"] = os.getenv("TIME_LOCALE", "en")
    app.config["COUNTRY_LOCALE"] = os.getenv("COUNTRY_LOCALE") or None
    app.config["META_DESCRIPTION_LENGTH"] = _get_int_env(
        "META_DESCRIPTION_LENGTH", META_DESCRIPTION_LENGTH
    )
    app.config["STORE_META_DESCRIPTION"] = os.getenv("STORE_META_DESCRIPTION", "")
    app.config["STORE_META_KEYWORDS"] = os.getenv("STORE_META_KEYWORDS", "")
    app.config.setdefault("IMAGE_STYLES", dict(DEFAULT_IMAGE_STYLES))
    app.config.setdefault("NOIMAGE_URL", NOIMAGE_URL)
    # "order_completed" se muestra en la página de confirmación, no en el layout.
    app.config.setdefault("FLASH_IGNORE_TYPES", ("order_completed",))

    db.init_app(app)
    csrf.init_app(app)
    # render_as_batch=True es necesario para SQLite que no soporta ALTER TABLE completamente.
    migrate.init_app(app, db, render_as_batch=True)

    register_helpers(app)

    # Registrar modelos y blueprints dentro del contexto para evitar imports
    # circulares.
    with app.app_context():
        from . import models  # noqa: F401
        register_blueprints(app)

    return app
