"""Errores que terminan una búsqueda y se exponen al cliente."""

from typing import Optional


class SearchError(Exception):
    """Error con código HTTP y mensaje público (sin detalles internos)."""

    status_code = 500
    detail = "Internal server error"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.detail)
        if detail:
            self.detail = detail


class InvalidRequest(SearchError):
    status_code = 400
    detail = "Query parameter is required"


class CatalogUnavailable(SearchError):
    status_code = 500
    detail = "No products available"
