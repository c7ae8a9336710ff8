"""
backend/product_search/catalog.py
Carga del catálogo CSV a memoria, una vez por proceso.

La caché se rellena en la primera llamada a load() y nunca se invalida: el
catálogo es inmutable tras la carga. Si la lectura falla se registra el error y
se devuelve una tupla vacía (sin cachear, la siguiente llamada reintenta).
"""

import logging
import os
from typing import Optional, Tuple

import pandas as pd

from .config import CATALOG_PATH
from .models import CATALOG_COLUMNS, ProductRecord

logger = logging.getLogger(__name__)


def read_catalog(path: str) -> Tuple[ProductRecord, ...]:
    """Lee el CSV y lo convierte en ProductRecord (todas las celdas como texto)."""
    df = pd.read_csv(path, dtype=str, keep_default_na=False, skip_blank_lines=True)
    df.columns = [c.strip() for c in df.columns]
    for col in CATALOG_COLUMNS:
        if col not in df.columns:
            logger.warning("Columna '%s' ausente en %s; se usa ''", col, path)
            df[col] = ""
    df = df[CATALOG_COLUMNS].apply(lambda s: s.str.strip())
    return tuple(ProductRecord(**row) for row in df.to_dict(orient="records"))


class CatalogCache:
    def __init__(self, path: str = CATALOG_PATH):
        self.path = path
        self._products: Optional[Tuple[ProductRecord, ...]] = None

    @property
    def loaded(self) -> bool:
        return self._products is not None

    def load(self) -> Tuple[ProductRecord, ...]:
        if self._products is not None:
            return self._products
        if not os.path.exists(self.path):
            logger.error("Catálogo no encontrado en %s", self.path)
            return ()
        logger.info("Cargando catálogo desde %s", self.path)
        try:
            products = read_catalog(self.path)
        except Exception as e:
            logger.exception("Error leyendo catálogo %s: %s", self.path, e)
            return ()
        self._products = products
        logger.info("Catálogo cargado: productos=%d", len(products))
        return products


# caché por defecto del proceso
catalog = CatalogCache()


def load_catalog() -> Tuple[ProductRecord, ...]:
    return catalog.load()
