"""Pruebas de los helpers de vista como funciones puras, sin app ni BD."""

import unittest
from datetime import datetime
from types import SimpleNamespace

from tienda import models
from tienda.helpers import geo
from tienda.helpers.marcado import tag_attributes
from tienda.helpers import (
    ImageStyleNotFound,
    ImageStyleRegistry,
    available_countries,
    build_meta_description,
    country_name,
    display_price,
    format_timestamp,
    link_to_tracking,
    meta_data,
    meta_data_tags,
    render_flash_messages,
    render_tracking,
)


class _Pais:
    def __init__(self, nombre, iso=None):
        self.nombre = nombre
        self.iso = iso


class _Estado:
    def __init__(self, nombre, pais):
        self.nombre = nombre
        self.pais = pais


class _Zona:
    def __init__(self, kind, zoneables):
        self.kind = kind
        self.zoneables = list(zoneables)


class _Imagen:
    def __init__(self, archivo, alt=None):
        self.archivo = archivo
        self.alt = alt

    def url(self, style):
        return f"/uploads/{style}/{self.archivo}"


def _producto(images=(), variant_images=(), nombre="Camiseta"):
    return SimpleNamespace(nombre=nombre, images=list(images), variant_images=list(variant_images))


class AvailableCountriesTest(unittest.TestCase):
    def setUp(self):
        self.espana = _Pais("España", "ES")
        self.francia = _Pais("Francia", "FR")
        self.portugal = _Pais("Portugal", "PT")
        self.chile = _Pais("Chile", "CL")
        self.paises = [self.espana, self.francia, self.portugal, self.chile]

    def test_without_zone_returns_every_country(self):
        resultado = available_countries(self.paises)
        self.assertEqual(len(resultado), len(self.paises))
        self.assertCountEqual(resultado, self.paises)

    def test_without_zone_and_empty_catalog(self):
        self.assertEqual(available_countries([]), [])

    def test_country_zone_returns_its_members(self):
        zona = _Zona("country", [self.francia])
        self.assertEqual(available_countries(self.paises, zona), [self.francia])

    def test_state_zone_returns_parent_country(self):
        zona = _Zona("state", [_Estado("Madrid", self.espana)])
        self.assertEqual(available_countries(self.paises, zona), [self.espana])

    def test_state_zone_deduplicates_parents(self):
        zona = _Zona(
            "state",
            [_Estado("Madrid", self.espana), _Estado("Sevilla", self.espana), _Estado("Porto", self.portugal)],
        )
        self.assertEqual(available_countries(self.paises, zona), [self.espana, self.portugal])

    def test_state_zone_covering_every_country_returns_full_catalog(self):
        zona = _Zona("state", [_Estado(f"Estado de {p.nombre}", p) for p in self.paises])
        self.assertEqual(len(available_countries(self.paises, zona)), len(self.paises))

    def test_state_zone_with_one_state_of_one_country_filters_to_that_country(self):
        # Cuatro países y una zona con un único estado: no se devuelve el catálogo entero.
        zona = _Zona(geo.ZONA_ESTADO, [_Estado("Madrid", self.espana)])
        resultado = available_countries(self.paises, zona)
        self.assertEqual(len(self.paises), 4)
        self.assertEqual(len(resultado), 1)
        self.assertEqual(resultado, [self.espana])

    def test_zone_kinds_are_shared_with_models(self):
        self.assertEqual((geo.ZONA_PAIS, geo.ZONA_ESTADO), ("country", "state"))
        self.assertIs(models.ZONA_PAIS, geo.ZONA_PAIS)
        self.assertIs(models.ZONA_ESTADO, geo.ZONA_ESTADO)

    def test_unknown_zone_kind_falls_back_to_every_country(self):
        zona = _Zona("continent", [])
        self.assertCountEqual(available_countries(self.paises, zona), self.paises)

    def test_result_is_sorted_ignoring_accents(self):
        ecuador = _Pais("Ecuador", "EC")
        islandia = _Pais("Islandia", "IS")
        resultado = available_countries([islandia, self.espana, ecuador])
        self.assertEqual([p.nombre for p in resultado], ["Ecuador", "España", "Islandia"])

    def test_country_name_uses_babel_territories(self):
        alemania = _Pais("Germany", "DE")
        self.assertEqual(country_name(alemania, "es"), "Alemania")
        self.assertEqual(country_name(alemania), "Germany")

    def test_country_name_falls_back_on_unknown_locale(self):
        self.assertEqual(country_name(self.espana, "zz"), "España")


class FlashMessagesTest(unittest.TestCase):
    flash = {"notice": "ok", "foo": "foo", "bar": "bar"}

    def test_outputs_all_flash_content(self):
        html = render_flash_messages(self.flash)
        self.assertEqual(
            html,
            '<div class="flash notice">ok</div>'
            '<div class="flash foo">foo</div>'
            '<div class="flash bar">bar</div>',
        )

    def test_outputs_flash_content_except_one_key(self):
        html = render_flash_messages(self.flash, ignore_types="bar")
        self.assertIn('<div class="flash notice">ok</div>', html)
        self.assertIn('<div class="flash foo">foo</div>', html)
        self.assertNotIn("flash bar", html)

    def test_outputs_flash_content_except_some_keys(self):
        html = render_flash_messages(self.flash, ignore_types=["foo", "bar"])
        self.assertEqual(html, '<div class="flash notice">ok</div>')

    def test_accepts_category_pairs(self):
        html = render_flash_messages([("success", "Guardado"), ("warning", "Revisa")], {"warning"})
        self.assertEqual(html, '<div class="flash success">Guardado</div>')

    def test_escapes_message_text(self):
        html = render_flash_messages({"notice": "<b>hola</b>"})
        self.assertEqual(html, '<div class="flash notice">&lt;b&gt;hola&lt;/b&gt;</div>')

    def test_empty_messages_render_nothing(self):
        self.assertEqual(render_flash_messages({}), "")


class TrackingTest(unittest.TestCase):
    def test_returns_tracking_link_if_available(self):
        html = render_tracking(True, "123", "http://g.c/?t=123")
        self.assertEqual(html, '<a href="http://g.c/?t=123">123</a>')

    def test_returns_tracking_without_link_if_link_unavailable(self):
        html = render_tracking(True, "123", None)
        self.assertEqual(html, "<span>123</span>")
        self.assertNotIn("<a", html)

    def test_returns_nothing_when_no_shipping_method(self):
        self.assertEqual(render_tracking(False, "123", "http://g.c/?t=123"), "")

    def test_returns_nothing_when_no_tracking(self):
        self.assertEqual(render_tracking(True, None, "http://g.c/?t=123"), "")

    def test_extra_attributes_go_on_the_link(self):
        html = render_tracking(True, "123", "http://g.c/?t=123", target="_blank")
        self.assertEqual(html, '<a href="http://g.c/?t=123" target="_blank">123</a>')

    def test_link_to_tracking_reads_shipment(self):
        envio = SimpleNamespace(shipping_method=object(), tracking="ABC", tracking_url=None)
        self.assertEqual(link_to_tracking(envio), "<span>ABC</span>")
        sin_metodo = SimpleNamespace(shipping_method=None, tracking="ABC", tracking_url=None)
        self.assertEqual(link_to_tracking(sin_metodo), "")

    def test_link_and_image_serialize_attributes_alike(self):
        enlace = render_tracking(True, "1", "http://g.c/?t=1", data_id="7")
        imagen = ImageStyleRegistry().render("mini", _producto(), data_id="7")
        self.assertEqual(enlace, '<a href="http://g.c/?t=1" data-id="7">1</a>')
        self.assertEqual(imagen, '<img src="/static/noimage/mini.png" data-id="7">')

    def test_tag_attributes_skip_none_and_escape_values(self):
        self.assertEqual(tag_attributes({"title": 'a "b"', "rel": None}), ' title="a &#34;b&#34;"')


class MetaDescriptionTest(unittest.TestCase):
    def test_truncates_a_product_description_to_160_characters(self):
        resultado = build_meta_description("a" * 200)
        self.assertLessEqual(len(resultado), 160)
        self.assertEqual(resultado, "a" * 157 + "...")

    def test_short_text_is_returned_unchanged(self):
        self.assertEqual(build_meta_description("Camiseta de algodón"), "Camiseta de algodón")

    def test_cuts_on_word_boundary(self):
        resultado = build_meta_description("palabra " * 30)
        self.assertLessEqual(len(resultado), 160)
        self.assertTrue(resultado.endswith("palabra..."))

    def test_plain_text_with_angle_brackets_is_returned_unchanged(self):
        texto = "Talla 5 < 6 y peso > 3 kg"
        self.assertEqual(build_meta_description(texto), texto)

    def test_plain_text_keeps_its_whitespace(self):
        texto = "Linea uno\n\nLinea  dos"
        self.assertEqual(build_meta_description(texto), texto)

    def test_product_description_html_is_stripped_before_counting(self):
        producto = SimpleNamespace(
            meta_keywords=None, meta_description=None, descripcion="<p>Hola <b>mundo</b></p>"
        )
        self.assertEqual(meta_data(producto)["description"], "Hola mundo")

    def test_limit_smaller_than_omission(self):
        self.assertLessEqual(len(build_meta_description("abcdef", 2)), 2)

    def test_empty_description(self):
        self.assertEqual(build_meta_description(None), "")

    def test_meta_data_prefers_object_fields_and_fills_from_defaults(self):
        producto = SimpleNamespace(meta_keywords=None, meta_description=None, descripcion="a" * 200)
        meta = meta_data(producto, {"keywords": "ropa", "description": "Tienda"})
        self.assertEqual(meta["keywords"], "ropa")
        self.assertLessEqual(len(meta["description"]), 160)
        self.assertNotEqual(meta["description"], "Tienda")

    def test_meta_data_tags_render_each_pair(self):
        producto = SimpleNamespace(meta_keywords="algodón", meta_description="Suave", descripcion=None)
        self.assertEqual(
            meta_data_tags(producto),
            '<meta name="keywords" content="algodón">\n<meta name="description" content="Suave">',
        )


class FormatTest(unittest.TestCase):
    def test_pretty_time_prints_in_a_format(self):
        self.assertEqual(format_timestamp(datetime(2012, 5, 6, 13, 33)), "May 06, 2012  1:33 PM")

    def test_pretty_time_midnight_uses_twelve(self):
        self.assertEqual(format_timestamp(datetime(2012, 5, 6, 0, 5)), "May 06, 2012  12:05 AM")

    def test_pretty_time_none(self):
        self.assertEqual(format_timestamp(None), "")

    def test_display_price(self):
        self.assertEqual(display_price(2500, "USD", "en_US"), "$2,500.00")

    def test_display_price_invalid_input_returns_original_value(self):
        self.assertEqual(display_price("n/a"), "n/a")


class ImageStyleRegistryTest(unittest.TestCase):
    def setUp(self):
        self.registry = ImageStyleRegistry()
        self.registry.register("very_strange", "1x1")

    def test_registered_style_renders_without_errors(self):
        helper = self.registry.resolve("very_strange_image")
        self.assertEqual(helper(_producto()), '<img src="/static/noimage/very_strange.png">')

    def test_unregistered_style_raises(self):
        with self.assertRaises(ImageStyleNotFound):
            self.registry.resolve("another_strange_image")
        with self.assertRaises(LookupError):
            self.registry.render("another_strange", _producto())

    def test_bare_style_name_is_not_a_helper(self):
        self.registry.register("foobar", "1x1")
        self.registry.resolve("foobar_image")(_producto())
        with self.assertRaises(ImageStyleNotFound):
            self.registry.resolve("foobar")

    def test_uses_first_product_image_with_name_as_alt(self):
        producto = _producto(images=[_Imagen("a.jpg"), _Imagen("b.jpg")])
        self.assertEqual(
            self.registry.render("small", producto),
            '<img src="/uploads/small/a.jpg" alt="Camiseta">',
        )

    def test_falls_back_to_variant_image(self):
        producto = _producto(variant_images=[_Imagen("v.jpg", alt="Roja")])
        self.assertEqual(
            self.registry.render("mini", producto, **{"class": "thumb"}),
            '<img src="/uploads/mini/v.jpg" class="thumb" alt="Roja">',
        )

    def test_default_styles(self):
        self.assertIn("product", self.registry)
        self.assertEqual(ImageStyleRegistry({"solo": "1x1"}).styles, {"solo": "1x1"})


if __name__ == "__main__":
    unittest.main()
