"""Serialización común de atributos HTML para los helpers de marcado."""

from markupsafe import Markup


def tag_attributes(attrs) -> Markup:
    """`` nombre="valor"`` por cada atributo; ``data_id`` se emite como ``data-id``.

    Los valores ``None`` se omiten y todo se escapa.
    """

    return Markup("").join(
        Markup(' {}="{}"').format(nombre.replace("_", "-"), valor)
        for nombre, valor in attrs.items()
        if valor is not None
    )
