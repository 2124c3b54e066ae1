"""Registro explícito de estilos de imagen de producto.

Cada estilo (``mini``, ``small``...) tiene un helper ``<estilo>_image`` que
se resuelve en tiempo de llamada contra el registro. Un estilo que no está
registrado produce ``ImageStyleNotFound``.
"""

from functools import partial

from markupsafe import Markup

from .marcado import tag_attributes

DEFAULT_IMAGE_STYLES = {
    "mini": "48x48>",
    "small": "100x100>",
    "product": "240x240>",
    "large": "600x600>",
}
NOIMAGE_URL = "/static/noimage/{style}.png"
HELPER_SUFFIX = "_image"


class ImageStyleNotFound(LookupError):
    """El estilo pedido no está registrado."""

    def __init__(self, name):
        super().__init__(f"Estilo de imagen desconocido: {name}")
        self.name = name


def image_tag(src, **attrs) -> Markup:
    return Markup('<img src="{}"{}>').format(src, tag_attributes(attrs))


def product_image_tag(product, estilo, noimage_url=NOIMAGE_URL, **attrs) -> Markup:
    """Primera imagen del producto, de sus variantes o el marcador genérico."""

    imagen = next(iter(product.images), None) or next(iter(product.variant_images), None)
    if imagen is None:
        return image_tag(noimage_url.format(style=estilo), **attrs)
    attrs.setdefault("alt", imagen.alt or product.nombre)
    return image_tag(imagen.url(estilo), **attrs)


class ImageStyleRegistry:
    def __init__(self, styles=None, noimage_url=NOIMAGE_URL):
        self._styles = dict(DEFAULT_IMAGE_STYLES if styles is None else styles)
        self.noimage_url = noimage_url

    def __contains__(self, style):
        return style in self._styles

    @property
    def styles(self) -> dict:
        return dict(self._styles)

    def register(self, style, geometry):
        self._styles[style] = geometry

    def handler(self, style):
        if style not in self._styles:
            raise ImageStyleNotFound(style)
        return partial(product_image_tag, estilo=style, noimage_url=self.noimage_url)

    def resolve(self, helper_name):
        """Devuelve el helper ``<estilo>_image``; otros nombres no existen."""

        if not helper_name.endswith(HELPER_SUFFIX):
            raise ImageStyleNotFound(helper_name)
        return self.handler(helper_name[: -len(HELPER_SUFFIX)])

    def render(self, style, product, **attrs) -> Markup:
        return self.handler(style)(product, **attrs)
