"""Cliente HTTP del servicio de usuarios.

Realiza una única petición GET contra el endpoint configurado y devuelve el
JSON decodificado. Cualquier fallo de transporte o de decodificación se
traduce a :class:`NetworkError`.
"""

from __future__ import annotations

import json
import logging
import socket
from http.client import HTTPException
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from usuarios_app.config import Settings
from usuarios_app.core.errors import NetworkError

logger = logging.getLogger(__name__)


class APIClient:
    """Provee acceso a los datos crudos de usuarios."""

    def __init__(self, api_url: str = Settings.API_URL, timeout: float = Settings.TIMEOUT_SECONDS) -> None:
        self.api_url = api_url
        self.timeout = timeout

    def obtener_usuarios(self) -> list[dict]:
        """Recupera el listado de usuarios del backend."""

        logger.debug("GET %s", self.api_url)

        try:
            request = Request(
                self.api_url,
                method="GET",
                headers={"Accept": "application/json"},
            )
            with urlopen(request, timeout=self.timeout) as response:
                raw = response.read()
        except HTTPError as exc:
            raise NetworkError(f"Error HTTP {exc.code} al consultar {self.api_url}") from exc
        except URLError as exc:
            if isinstance(exc.reason, socket.timeout):
                raise NetworkError(f"Timeout al consultar {self.api_url}") from exc
            raise NetworkError(f"No se pudo conectar al servicio: {exc.reason}") from exc
        except (TimeoutError, OSError) as exc:
            raise NetworkError(f"Fallo de red al consultar {self.api_url}: {exc}") from exc
        except (HTTPException, ValueError) as exc:
            raise NetworkError(f"Respuesta HTTP inválida de {self.api_url}: {exc!r}") from exc

        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise NetworkError("La respuesta del servicio no es JSON válido.") from exc

        if not isinstance(payload, list):
            raise NetworkError("Se esperaba una lista de usuarios en la respuesta.")

        logger.debug("Recibidos %d registros", len(payload))
        return payload


__all__ = ["APIClient"]
