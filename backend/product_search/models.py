from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import DEFAULT_LIMIT, NO_RATING_SENTINEL
from .list_field import parse_number

SortKey = Literal["relevance", "price_low", "price_high", "rating"]

# columnas del CSV (esquema fijo del dataset de Flipkart)
CATALOG_COLUMNS = [
    "uniq_id",
    "crawl_timestamp",
    "product_url",
    "product_name",
    "product_category_tree",
    "pid",
    "retail_price",
    "discounted_price",
    "image",
    "is_FK_Advantage_product",
    "description",
    "product_rating",
    "overall_rating",
    "brand",
    "product_specifications",
]


class ProductRecord(BaseModel):
    """Una fila del catálogo. Inmutable y hashable (se usa como clave de scores)."""

    model_config = ConfigDict(frozen=True)

    uniq_id: str
    crawl_timestamp: str = ""
    product_url: str = ""
    product_name: str = ""
    product_category_tree: str = ""
    pid: str = ""
    retail_price: float = 0.0
    discounted_price: float = 0.0
    image: str = ""
    is_FK_Advantage_product: str = ""
    description: str = ""
    product_rating: str = ""
    overall_rating: str = ""
    brand: str = ""
    product_specifications: str = ""

    @field_validator("retail_price", "discounted_price", mode="before")
    @classmethod
    def _price_or_zero(cls, v):
        value = parse_number(v)
        return value if value is not None else 0.0

    @property
    def rating(self) -> Optional[float]:
        if not self.overall_rating or self.overall_rating == NO_RATING_SENTINEL:
            return None
        return parse_number(self.overall_rating)

    @property
    def discount_percent(self) -> Optional[float]:
        if self.retail_price > self.discounted_price > 0:
            return (self.retail_price - self.discounted_price) / self.retail_price * 100
        return None


class SearchRequest(BaseModel):
    query: Optional[str] = None
    sort_by: SortKey = "relevance"
    category_filter: Optional[str] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    limit: int = Field(default=DEFAULT_LIMIT, ge=0)


class ProductResult(BaseModel):
    uniq_id: str
    crawl_timestamp: str
    product_url: str
    product_name: str
    product_category_tree: str
    pid: str
    retail_price: float
    discounted_price: float
    image: str
    is_FK_Advantage_product: str
    description: str
    product_rating: str
    overall_rating: str
    brand: str
    product_specifications: str
    rating: Optional[float] = None
    primary_image: str
    display_category: str
    recommendation_reason: str


class SearchFilters(BaseModel):
    category_filter: Optional[str] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None


class SearchResponse(BaseModel):
    results: List[ProductResult]
    total: int
    query: str
    processing_time: float
    sort_by: SortKey
    recommendation_summary: str
    filters: SearchFilters
    categories: List[str] = []
