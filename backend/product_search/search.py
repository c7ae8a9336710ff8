"""
backend/product_search/search.py
Orquestador de una búsqueda: validación -> catálogo -> score -> filtros ->
orden -> límite -> explicaciones.
"""

import logging
import time
from typing import Callable, Dict, List, Sequence

from .catalog import load_catalog
from .errors import CatalogUnavailable, InvalidRequest
from .explain import explain, summarize
from .list_field import first_image, leaf_category, main_category
from .models import ProductRecord, ProductResult, SearchFilters, SearchRequest, SearchResponse
from .ranking import filter_products, sort_products
from .scoring import DEFAULT_WEIGHTS, ScoringWeights, score

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = "/placeholder-product.jpg"
DEFAULT_DISPLAY_CATEGORY = "Product"
OTHER_CATEGORY = "Other"


def to_result(product: ProductRecord, query: str) -> ProductResult:
    return ProductResult(
        **product.model_dump(),
        rating=product.rating,
        primary_image=first_image(product.image) or PLACEHOLDER_IMAGE,
        display_category=leaf_category(product.product_category_tree) or DEFAULT_DISPLAY_CATEGORY,
        recommendation_reason=explain(product, query),
    )


def category_facets(products: Sequence[ProductRecord]) -> List[str]:
    """Categorías principales distintas, en orden de aparición."""
    seen = []
    for p in products:
        cat = main_category(p.product_category_tree) or OTHER_CATEGORY
        if cat not in seen:
            seen.append(cat)
    return seen


def run_search(
    request: SearchRequest,
    load_products: Callable[[], Sequence[ProductRecord]] = load_catalog,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> SearchResponse:
    start = time.perf_counter()

    query = request.query or ""
    if not query.strip():
        raise InvalidRequest()

    products = load_products()
    if not products:
        raise CatalogUnavailable()

    # score local a la petición: no se guarda en el producto
    scores: Dict[ProductRecord, float] = {}
    matched = []
    for p in products:
        s = score(p, query, weights)
        if s > 0:
            scores[p] = s
            matched.append(p)

    filtered = filter_products(matched, request)
    ordered = sort_products(filtered, request.sort_by)
    if request.sort_by == "relevance":
        ordered = sorted(ordered, key=lambda p: scores[p], reverse=True)

    top = ordered[: request.limit]
    logger.debug("query=%r catalog=%d matched=%d filtered=%d returned=%d",
                 query, len(products), len(matched), len(filtered), len(top))

    results = [to_result(p, query) for p in top]
    return SearchResponse(
        results=results,
        total=len(filtered),
        query=query,
        processing_time=time.perf_counter() - start,
        sort_by=request.sort_by,
        recommendation_summary=summarize(query, len(filtered)),
        filters=SearchFilters(
            category_filter=request.category_filter,
            price_min=request.price_min,
            price_max=request.price_max,
        ),
        categories=category_facets(top),
    )
