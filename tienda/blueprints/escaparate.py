"""Blueprint del escaparate público.

Agrupa la portada, la ficha de producto, el paso de dirección del checkout
y el seguimiento de envíos; todas las vistas delegan el formato en los
helpers registrados en Jinja.
"""

from flask import Blueprint, current_app as app, flash, redirect, render_template, session, url_for

from ..db import db
from ..forms import FormularioDireccion
from ..helpers import country_name
from ..models import Envio, Producto
from ..services.catalogo import paises_disponibles


escaparate_bp = Blueprint("escaparate", __name__)


@escaparate_bp.route("/", methods=["GET"])
def portada():
    productos = Producto.query.order_by(Producto.nombre).all()
    return render_template("escaparate/portada.html", productos=productos)


@escaparate_bp.route("/productos/<int:producto_id>", methods=["GET"])
def producto(producto_id):
    producto = db.get_or_404(Producto, producto_id)
    return render_template("escaparate/producto.html", producto=producto)


@escaparate_bp.route("/checkout/direccion", methods=["GET", "POST"])
def checkout_direccion():
    form = FormularioDireccion()
    locale = app.config.get("COUNTRY_LOCALE")
    form.pais_id.choices = [(pais.id, country_name(pais, locale)) for pais in paises_disponibles()]

    if form.validate_on_submit():
        session["direccion"] = {
            "nombre": form.nombre.data,
            "direccion": form.direccion.data,
            "ciudad": form.ciudad.data,
            "codigo_postal": form.codigo_postal.data,
            "pais_id": form.pais_id.data,
        }
        app.logger.info("Dirección de checkout guardada para el país %s", form.pais_id.data)
        flash("Dirección guardada.", "success")
        return redirect(url_for("escaparate.checkout_direccion"))

    for field, errors in form.errors.items():
        for error in errors:
            flash(f"Error en {field}: {error}", "warning")
    return render_template("escaparate/checkout_direccion.html", form=form)


@escaparate_bp.route("/envios/<int:envio_id>", methods=["GET"])
def envio(envio_id):
    envio = db.get_or_404(Envio, envio_id)
    return render_template("escaparate/envio.html", envio=envio)
