"""
Explicaciones legibles: motivo por producto y resumen del conjunto.

Se derivan de las mismas señales que el score pero no influyen en el ranking.
"""

import math
from typing import List

from .models import ProductRecord
from .scoring import query_terms

MAX_REASONS = 3
REASON_SEPARATOR = " • "

# (términos, plantilla) en orden de prioridad
DOMAIN_SUMMARIES = [
    (
        {"phone", "mobile", "smartphone"},
        "Found {n} smartphones matching your search. Results are ranked by relevance, "
        "customer ratings, and value for money. Top recommendations include latest models "
        "with best price-to-feature ratio.",
    ),
    (
        {"laptop", "computer", "pc"},
        "Discovered {n} computing devices for your needs. Recommendations prioritize "
        "performance, brand reliability, and customer satisfaction. Best value options are "
        "highlighted first.",
    ),
    (
        {"shoes", "footwear", "sneakers"},
        "Found {n} footwear options matching your style. Results are curated based on "
        "comfort ratings, brand reputation, and customer reviews. Top picks offer best "
        "comfort and durability.",
    ),
    (
        {"clothing", "shirt", "dress", "wear"},
        "Curated {n} fashion items for you. Recommendations consider style trends, fabric "
        "quality, and customer feedback. Featured products offer best fit and value.",
    ),
]

GENERIC_SUMMARY = (
    'Found {n} products matching "{query}". Results are intelligently ranked using our AI '
    "algorithm that considers product relevance, customer ratings, price value, and brand "
    "reputation to bring you the best recommendations."
)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _format_rating(rating: float) -> str:
    text = repr(float(rating))
    return text[:-2] if text.endswith(".0") else text


def recommendation_reasons(product: ProductRecord, query: str) -> List[str]:
    """Todos los motivos aplicables, en orden de prioridad."""
    terms = query_terms(query)
    name = product.product_name.lower()
    brand = product.brand.lower()
    category = product.product_category_tree.lower()
    description = product.description.lower()

    reasons = []

    name_matches = [t for t in terms if t in name]
    if name_matches:
        reasons.append(f'Perfect match for "{", ".join(name_matches)}" in product name')

    if any(t in brand for t in terms):
        reasons.append(f"From trusted brand {product.brand}")

    discount = product.discount_percent
    if discount is not None:
        reasons.append(f"Great value with {_round_half_up(discount)}% discount")

    rating = product.rating
    if rating is not None and rating >= 4.0:
        reasons.append(f"Highly rated ({_format_rating(rating)}/5 stars)")

    if any(t in category for t in terms):
        reasons.append("Relevant category match")

    if "premium" in description or "quality" in description:
        reasons.append("Premium quality product")
    if "bestseller" in description or "popular" in description:
        reasons.append("Popular choice among customers")

    return reasons


def explain(product: ProductRecord, query: str) -> str:
    reasons = recommendation_reasons(product, query)
    if not reasons:
        return f'Matches your search criteria for "{query}"'
    return REASON_SEPARATOR.join(reasons[:MAX_REASONS])


def summarize(query: str, total: int) -> str:
    terms = set(query_terms(query))
    for keywords, template in DOMAIN_SUMMARIES:
        if terms & keywords:
            return template.format(n=total)
    return GENERIC_SUMMARY.format(n=total, query=query)
