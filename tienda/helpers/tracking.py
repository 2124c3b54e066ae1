"""Marcado del número de seguimiento de un envío."""

from markupsafe import Markup

from .marcado import tag_attributes


def render_tracking(has_shipping_method, tracking, tracking_url=None, **attrs) -> Markup:
    """Enlace al transportista, texto plano o nada, en ese orden de preferencia.

    Sin método de envío o sin número de seguimiento no se genera nada. Con URL
    se devuelve un ``<a>`` (los ``attrs`` extra van en el enlace); sin ella,
    un ``<span>`` con el número.
    """

    if not has_shipping_method or not tracking:
        return Markup("")
    if tracking_url:
        return Markup('<a href="{}"{}>{}</a>').format(tracking_url, tag_attributes(attrs), tracking)
    return Markup("<span>{}</span>").format(tracking)


def link_to_tracking(shipment, **attrs) -> Markup:
    return render_tracking(
        bool(getattr(shipment, "shipping_method", None)),
        getattr(shipment, "tracking", None),
        getattr(shipment, "tracking_url", None),
        **attrs,
    )
