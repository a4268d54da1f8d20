
"""Adapter HTTP (httpx assíncrono) para a API de estoque e produtos."""
from __future__ import annotations
import httpx
from pydantic import BaseModel, ValidationError
from kink import di
from ...core.settings import Settings
from ...core.logging import get_logger
from ...domain.errors import InventoryError
from ...ports.interfaces import Stock, Product

log = get_logger()

class HttpInventoryClient:
    """Cliente de `GET stock/{id}` e `GET products/{id}`.

    Qualquer erro de transporte, status não-2xx ou corpo inválido vira
    InventoryError. Timeout é responsabilidade deste cliente.
    """
    def __init__(self, settings: Settings | None = None):
        self.s = settings or di[Settings]

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.s.inventory_base_url, timeout=self.s.inventory_timeout_s)

    async def _get(self, path: str, product_id: int, schema: type[BaseModel]) -> BaseModel:
        try:
            async with self._client() as cli:
                r = await cli.get(path)
                r.raise_for_status()
                return schema.model_validate_json(r.content)
        except httpx.HTTPStatusError as exc:
            log.info("inventory_http_error", path=path, status=exc.response.status_code)
            raise InventoryError(product_id, f"status {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            log.info("inventory_transport_error", path=path, error=str(exc))
            raise InventoryError(product_id, str(exc) or type(exc).__name__) from exc
        except ValidationError as exc:
            log.info("inventory_bad_payload", path=path, errors=exc.error_count())
            raise InventoryError(product_id, "invalid payload") from exc

    async def get_stock(self, product_id: int) -> Stock:
        return await self._get(f"/stock/{product_id}", product_id, Stock)

    async def get_product(self, product_id: int) -> Product:
        return await self._get(f"/products/{product_id}", product_id, Product)
