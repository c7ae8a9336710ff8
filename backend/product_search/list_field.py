"""
Parser de los campos-lista del CSV (product_category_tree, image).

El dataset serializa listas con comillas simples (no es JSON estricto), así que
normalizamos las comillas y luego parseamos como JSON. El fallo no se lanza:
se devuelve un ParsedList con ok=False y cada llamador decide su fallback.
"""

import json
import re
from typing import List, NamedTuple, Optional

CATEGORY_SEPARATOR = " >> "

# prefijo numérico (mismo criterio que parseFloat: "12.5abc" -> 12.5)
_NUMBER_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class ParsedList(NamedTuple):
    items: Optional[List[str]]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.items is not None


def parse_list_field(raw: str) -> ParsedList:
    if not raw:
        return ParsedList(None, "empty field")
    try:
        value = json.loads(raw.replace("'", '"'))
    except ValueError as e:
        return ParsedList(None, f"invalid list syntax: {e}")
    if not isinstance(value, list):
        return ParsedList(None, f"expected a list, got {type(value).__name__}")
    if not all(isinstance(v, str) for v in value):
        return ParsedList(None, "non-string entry")
    return ParsedList(value)


def category_segments(raw: str) -> Optional[List[str]]:
    """Segmentos de la entrada más externa del árbol de categorías (None si no parsea)."""
    parsed = parse_list_field(raw)
    if not parsed.ok or not parsed.items:
        return None
    return parsed.items[0].split(CATEGORY_SEPARATOR)


def main_category(raw: str) -> Optional[str]:
    segments = category_segments(raw)
    return segments[0] if segments else None


def leaf_category(raw: str) -> Optional[str]:
    segments = category_segments(raw)
    return segments[-1] if segments else None


def first_image(raw: str) -> Optional[str]:
    parsed = parse_list_field(raw)
    if not parsed.ok or not parsed.items:
        return None
    return parsed.items[0]


def parse_number(raw) -> Optional[float]:
    """Número desde texto libre; None si no hay prefijo numérico o no es finito."""
    if raw is None:
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        m = _NUMBER_RE.match(str(raw))
        if not m:
            return None
        value = float(m.group(0))
    if value != value or value in (float("inf"), float("-inf")):
        return None
    return value
