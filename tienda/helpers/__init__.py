"""Helpers de vista de la tienda y su registro en Jinja.

Las funciones puras viven en los submódulos; aquí se envuelven para que las
plantillas las usen con la configuración activa de la app.
"""

from flask import Flask, current_app, get_flashed_messages
from flask_wtf.csrf import generate_csrf
from markupsafe import Markup

from .flash import render_flash_messages
from .formato import display_price, format_timestamp
from .geo import available_countries, country_name
from .imagenes import ImageStyleNotFound, ImageStyleRegistry
from .meta import build_meta_description, meta_data, meta_data_tags
from .tracking import link_to_tracking, render_tracking


def image_styles() -> ImageStyleRegistry:
    return current_app.extensions["image_styles"]


def flash_messages(ignore_types=None) -> Markup:
    """Mensajes flash pendientes, excluyendo los tipos configurados."""

    ignorados = set(current_app.config.get("FLASH_IGNORE_TYPES", ()))
    if isinstance(ignore_types, str):
        ignorados.add(ignore_types)
    elif ignore_types:
        ignorados.update(ignore_types)
    mensajes = get_flashed_messages(with_categories=True)
    return render_flash_messages(mensajes, ignorados)


def page_meta_tags(obj=None) -> Markup:
    config = current_app.config
    defaults = {
        "keywords": config.get("STORE_META_KEYWORDS"),
        "description": config.get("STORE_META_DESCRIPTION"),
    }
    return meta_data_tags(obj, defaults, config["META_DESCRIPTION_LENGTH"])


def csrf_meta_tag() -> Markup:
    return Markup('<meta name="csrf-token" content="{}">').format(generate_csrf())


def product_image(product, style="small", **attrs) -> Markup:
    return image_styles().render(style, product, **attrs)


def _pretty_time(value):
    return format_timestamp(value, locale=current_app.config["TIME_LOCALE"])


def _display_price(value, currency_code=None):
    config = current_app.config
    return display_price(
        value,
        currency_code or config["CURRENCY_CODE"],
        locale=config["CURRENCY_LOCALE"],
    )


def _country_name(country):
    return country_name(country, current_app.config.get("COUNTRY_LOCALE"))


def register_helpers(app: Flask) -> None:
    """Adjunta filtros y globales de plantilla a ``app``.

    El registro de estilos se crea una vez por aplicación a partir de
    ``IMAGE_STYLES`` y queda en ``app.extensions``.
    """

    app.extensions["image_styles"] = ImageStyleRegistry(
        app.config["IMAGE_STYLES"], noimage_url=app.config["NOIMAGE_URL"]
    )

    app.add_template_filter(_pretty_time, name="pretty_time")
    app.add_template_filter(_display_price, name="display_price")
    app.add_template_filter(_country_name, name="country_name")
    app.add_template_filter(build_meta_description, name="meta_description")

    app.add_template_global(flash_messages, name="flash_messages")
    app.add_template_global(link_to_tracking, name="link_to_tracking")
    app.add_template_global(page_meta_tags, name="meta_data_tags")
    app.add_template_global(csrf_meta_tag, name="csrf_meta_tag")
    app.add_template_global(product_image, name="product_image")


__all__ = [
    "ImageStyleNotFound",
    "ImageStyleRegistry",
    "available_countries",
    "build_meta_description",
    "country_name",
    "csrf_meta_tag",
    "display_price",
    "flash_messages",
    "format_timestamp",
    "image_styles",
    "link_to_tracking",
    "meta_data",
    "meta_data_tags",
    "page_meta_tags",
    "product_image",
    "register_helpers",
    "render_flash_messages",
    "render_tracking",
]
