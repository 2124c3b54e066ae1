"""Modelos del catálogo, geografía y envíos de la tienda.

Los helpers de vista sólo leen estos objetos; nunca los modifican para no
ensuciar la sesión de SQLAlchemy al renderizar.
"""

from datetime import datetime, timezone
from urllib.parse import quote

from .db import db
from .helpers.geo import ZONA_ESTADO, ZONA_PAIS


def utcnow():
    """Retorna instantes timezone-aware para evitar warnings de SQLAlchemy."""
    return datetime.now(timezone.utc)


class Pais(db.Model):
    __tablename__ = "pais"

    id = db.Column(db.Integer, primary_key=True)
    # Código ISO 3166-1 alfa-2; se usa para localizar el nombre con Babel.
    iso = db.Column(db.String(2), nullable=False, unique=True)
    nombre = db.Column(db.String(100), nullable=False)

    estados = db.relationship("Estado", back_populates="pais", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Pais {self.iso}>"


class Estado(db.Model):
    __tablename__ = "estado"

    id = db.Column(db.Integer, primary_key=True)
    nombre = db.Column(db.String(100), nullable=False)
    abreviatura = db.Column(db.String(10), nullable=True)
    pais_id = db.Column(db.Integer, db.ForeignKey("pais.id"), nullable=False)

    pais = db.relationship("Pais", back_populates="estados")

    def __repr__(self):
        return f"<Estado {self.nombre}>"


class Zona(db.Model):
    __tablename__ = "zona"

    id = db.Column(db.Integer, primary_key=True)
    nombre = db.Column(db.String(80), nullable=False, unique=True)
    # Tipos: 'country' (miembros son países) o 'state' (miembros son estados).
    kind = db.Column(db.String(10), nullable=False, default=ZONA_PAIS)
    descripcion = db.Column(db.String(255), nullable=True)

    miembros = db.relationship("MiembroZona", back_populates="zona", cascade="all, delete-orphan")

    def __init__(self, nombre, kind=ZONA_PAIS, descripcion=None):
        self.nombre = nombre
        self.kind = kind
        self.descripcion = descripcion

    @property
    def zoneables(self):
        """Entidades geográficas referenciadas por los miembros de la zona."""
        return [m.zoneable for m in self.miembros if m.zoneable is not None]

    def agregar(self, zoneable):
        """Añade un país o un estado como miembro de la zona."""
        if isinstance(zoneable, Estado):
            miembro = MiembroZona(estado=zoneable)
        else:
            miembro = MiembroZona(pais=zoneable)
        self.miembros.append(miembro)
        return miembro

    def __repr__(self):
        return f"<Zona {self.nombre} ({self.kind})>"


class MiembroZona(db.Model):
    __tablename__ = "miembro_zona"

    id = db.Column(db.Integer, primary_key=True)
    zona_id = db.Column(db.Integer, db.ForeignKey("zona.id"), nullable=False)
    # Sólo una de las dos claves se rellena según el tipo de miembro.
    pais_id = db.Column(db.Integer, db.ForeignKey("pais.id"), nullable=True)
    estado_id = db.Column(db.Integer, db.ForeignKey("estado.id"), nullable=True)

    zona = db.relationship("Zona", back_populates="miembros")
    pais = db.relationship("Pais")
    estado = db.relationship("Estado")

    @property
    def zoneable(self):
        return self.estado if self.estado is not None else self.pais


class Producto(db.Model):
    __tablename__ = "producto"

    id = db.Column(db.Integer, primary_key=True)
    nombre = db.Column(db.String(120), nullable=False)
    descripcion = db.Column(db.Text, nullable=True)
    meta_description = db.Column(db.String(255), nullable=True)
    meta_keywords = db.Column(db.String(255), nullable=True)
    precio = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    fecha = db.Column(db.DateTime, default=utcnow, nullable=False)

    imagenes = db.relationship(
        "Imagen",
        back_populates="producto",
        cascade="all, delete-orphan",
        order_by="Imagen.posicion",
    )

    @property
    def images(self):
        return [img for img in self.imagenes if not img.de_variante]

    @property
    def variant_images(self):
        return [img for img in self.imagenes if img.de_variante]

    def __repr__(self):
        return f"<Producto {self.nombre}>"


class Imagen(db.Model):
    __tablename__ = "imagen"

    id = db.Column(db.Integer, primary_key=True)
    producto_id = db.Column(db.Integer, db.ForeignKey("producto.id"), nullable=False)
    archivo = db.Column(db.String(255), nullable=False)
    alt = db.Column(db.String(255), nullable=True)
    posicion = db.Column(db.Integer, nullable=False, default=0)
    # Las imágenes de variantes sólo se muestran si el producto no tiene propias.
    de_variante = db.Column(db.Boolean, nullable=False, default=False)

    producto = db.relationship("Producto", back_populates="imagenes")

    def url(self, style):
        return f"/uploads/imagenes/{self.id}/{style}/{self.archivo}"


class MetodoEnvio(db.Model):
    __tablename__ = "metodo_envio"

    id = db.Column(db.Integer, primary_key=True)
    nombre = db.Column(db.String(100), nullable=False)
    # Plantilla del transportista, p. ej. "https://track.example/?n=:tracking".
    tracking_url = db.Column(db.String(255), nullable=True)

    def build_tracking_url(self, tracking):
        if not tracking or not self.tracking_url:
            return None
        return self.tracking_url.replace(":tracking", quote(tracking, safe=""))


class Envio(db.Model):
    __tablename__ = "envio"

    id = db.Column(db.Integer, primary_key=True)
    numero = db.Column(db.String(20), nullable=False, unique=True)
    tracking = db.Column(db.String(100), nullable=True)
    metodo_envio_id = db.Column(db.Integer, db.ForeignKey("metodo_envio.id"), nullable=True)
    enviado_en = db.Column(db.DateTime, nullable=True)

    metodo_envio = db.relationship("MetodoEnvio")

    @property
    def shipping_method(self):
        return self.metodo_envio

    @property
    def tracking_url(self):
        if self.metodo_envio is None:
            return None
        return self.metodo_envio.build_tracking_url(self.tracking)

    def __repr__(self):
        return f"<Envio {self.numero}>"
