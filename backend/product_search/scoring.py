"""
Puntuación de relevancia: coincidencias de texto + bonus por rating y descuento.

score() es una función pura de (producto, query). Un score de 0 significa "no
coincide" y el orquestador descarta el producto antes de filtrar u ordenar.
"""

from dataclasses import dataclass
from typing import List

from .config import DISCOUNT_WEIGHT, RATING_WEIGHT
from .models import ProductRecord


@dataclass(frozen=True)
class ScoringWeights:
    name_exact: float = 100.0
    name_contains: float = 50.0
    brand_exact: float = 80.0
    brand_contains: float = 40.0
    category_contains: float = 30.0
    description_contains: float = 20.0
    rating: float = RATING_WEIGHT
    discount: float = DISCOUNT_WEIGHT


DEFAULT_WEIGHTS = ScoringWeights()


def query_terms(query: str) -> List[str]:
    """Términos en minúsculas separados por espacios (sin deduplicar)."""
    return query.lower().split()


def text_score(product: ProductRecord, terms: List[str], weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    name = product.product_name.lower()
    brand = product.brand.lower()
    category = product.product_category_tree.lower()
    description = product.description.lower()

    score = 0.0
    for term in terms:
        if term in name:
            score += weights.name_exact if name == term else weights.name_contains
        if term in brand:
            score += weights.brand_exact if brand == term else weights.brand_contains
        if term in category:
            score += weights.category_contains
        if term in description:
            score += weights.description_contains
    return score


def score(product: ProductRecord, query: str, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    total = text_score(product, query_terms(query), weights)

    rating = product.rating
    if rating is not None:
        total += rating * weights.rating

    discount = product.discount_percent
    if discount is not None:
        total += discount * weights.discount

    # un rating negativo en datos corruptos no puede dejar el score bajo 0
    return max(total, 0.0)
