"""
Filtros (categoría, rango de precio) y ordenación genérica.

La ordenación por relevancia no vive aquí: el score no es un campo del
producto, así que sort_products("relevance") deja el orden intacto y el
orquestador hace la pasada final por score.
"""

from typing import Iterable, List, Optional, Sequence

from .list_field import main_category
from .models import ProductRecord, SearchRequest


def matches_category(product: ProductRecord, category_filter: Optional[str]) -> bool:
    if not category_filter:
        return True
    main = main_category(product.product_category_tree)
    # árbol de categorías ilegible -> no pasa el filtro
    if main is None:
        return False
    return category_filter.lower() in main.lower()


def matches_price(product: ProductRecord, price_min: Optional[float], price_max: Optional[float]) -> bool:
    price = product.discounted_price
    if price_min is not None and price < price_min:
        return False
    if price_max is not None and price > price_max:
        return False
    return True


def filter_products(products: Iterable[ProductRecord], request: SearchRequest) -> List[ProductRecord]:
    return [
        p for p in products
        if matches_category(p, request.category_filter)
        and matches_price(p, request.price_min, request.price_max)
    ]


def _rating_or_zero(product: ProductRecord) -> float:
    rating = product.rating
    return rating if rating is not None else 0.0


def sort_products(products: Sequence[ProductRecord], sort_by: str) -> List[ProductRecord]:
    """Copia ordenada (estable). 'relevance' devuelve el mismo orden."""
    if sort_by == "price_low":
        return sorted(products, key=lambda p: p.discounted_price)
    if sort_by == "price_high":
        return sorted(products, key=lambda p: p.discounted_price, reverse=True)
    if sort_by == "rating":
        return sorted(products, key=_rating_or_zero, reverse=True)
    return list(products)
