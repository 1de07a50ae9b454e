"""Documento HTML con el mapa Leaflet de un usuario.

El documento es autocontenido: carga Leaflet desde unpkg, usa las teselas
de OpenStreetMap y coloca un único marcador con el popup abierto.
"""

from __future__ import annotations

import html
import json
import math

from usuarios_app.core.errors import ParseError
from usuarios_app.models.user import MapTarget

LEAFLET_CSS_URL = "https://unpkg.com/leaflet/dist/leaflet.css"
LEAFLET_JS_URL = "https://unpkg.com/leaflet/dist/leaflet.js"
TILE_URL_TEMPLATE = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
ZOOM_INICIAL = 2

# Secuencias que cierran el <script> o rompen un literal JS.
_ESCAPES_SCRIPT = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def literal_js(texto: str) -> str:
    """Serializa ``texto`` como literal de cadena seguro dentro de <script>."""

    literal = json.dumps(texto, ensure_ascii=False)
    for caracter, escape in _ESCAPES_SCRIPT.items():
        literal = literal.replace(caracter, escape)
    return literal


def a_coordenada(valor, campo: str) -> float:
    """Convierte ``valor`` a ``float`` finito o lanza :class:`ParseError`."""

    try:
        numero = float(valor)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Coordenada {campo} no numérica: {valor!r}") from exc
    if not math.isfinite(numero):
        raise ParseError(f"Coordenada {campo} no finita: {valor!r}")
    return numero


def construir_documento_mapa(objetivo: MapTarget) -> str:
    """Genera el HTML del mapa centrado en ``objetivo`` con zoom fijo 2."""

    lat = repr(a_coordenada(objetivo.lat, "lat"))
    lng = repr(a_coordenada(objetivo.lng, "lng"))
    etiqueta = literal_js(objetivo.label)

    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{html.escape(objetivo.label)}</title>
    <link rel="stylesheet" href="{LEAFLET_CSS_URL}" />
    <script src="{LEAFLET_JS_URL}"></script>
    <style>
      html, body {{ height: 100%; margin: 0; padding: 0; }}
      #map {{ height: 100vh; width: 100vw; }}
    </style>
  </head>
  <body>
    <div id="map"></div>
    <script>
      var map = L.map('map').setView([{lat}, {lng}], {ZOOM_INICIAL});
      L.tileLayer('{TILE_URL_TEMPLATE}').addTo(map);
      var popup = document.createElement('span');
      popup.textContent = {etiqueta};
      L.marker([{lat}, {lng}]).addTo(map)
        .bindPopup(popup)
        .openPopup();
    </script>
  </body>
</html>
"""


__all__ = [
    "LEAFLET_CSS_URL",
    "LEAFLET_JS_URL",
    "TILE_URL_TEMPLATE",
    "ZOOM_INICIAL",
    "a_coordenada",
    "construir_documento_mapa",
    "literal_js",
]
