#!/usr/bin/env python3
"""
evaluate.py
Evaluación offline del endpoint /search con un evalset (queries con gt_ids o pid).
Salida: imprime métricas por sort_by y guarda un JSON con los resultados.
Uso:
    python -m product_search.evaluate --eval data/eval_queries.json --k 20
"""

import argparse
import json
import logging
import time
from typing import Any, Dict, List

import requests

from .config import SEARCH_API, setup_logging

logger = logging.getLogger(__name__)

TIMEOUT = 10  # seconds for requests
SORT_KEYS = ["relevance", "price_low", "price_high", "rating"]


def normalize_queries(raw: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    out = []
    for q in raw:
        # aceptar gt_ids (lista), pid o id
        entry = {"q": q.get("q") or q.get("query") or ""}
        if isinstance(q.get("gt_ids"), list):
            entry["gt_ids"] = [str(x) for x in q["gt_ids"]]
        elif q.get("pid"):
            entry["gt_ids"] = [str(q["pid"])]
        elif q.get("id"):
            entry["gt_ids"] = [str(q["id"])]
        else:
            entry["gt_ids"] = []
        out.append(entry)
    return out


def load_queries(path: str) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        return normalize_queries(json.load(f))


def result_ids(resp: Dict[str, Any]) -> List[str]:
    ids = []
    for r in resp.get("results", []):
        pid = r.get("uniq_id") or r.get("pid")
        if pid:
            ids.append(str(pid))
    return ids


def first_hit_rank(ids: List[str], gt: set):
    for i, pid in enumerate(ids, start=1):
        if pid in gt:
            return i
    return None


def compute_metrics(ranks: List[Any]) -> Dict[str, float]:
    """ranks: posición (1-based) del primer acierto por query, o None."""
    n = len(ranks)
    if n == 0:
        return {"recall@1": 0.0, "recall@5": 0.0, "mrr": 0.0}
    return {
        "recall@1": sum(1 for r in ranks if r is not None and r == 1) / n,
        "recall@5": sum(1 for r in ranks if r is not None and r <= 5) / n,
        "mrr": sum(1.0 / r for r in ranks if r is not None) / n,
    }


def call_search(api: str, q: str, k: int, sort_by: str) -> Dict[str, Any]:
    payload = {"query": q, "limit": k, "sort_by": sort_by}
    try:
        r = requests.post(api, json=payload, timeout=TIMEOUT)
        r.raise_for_status()
        return r.json()
    except requests.RequestException as e:
        logger.warning("search request failed for q='%s' -> %s", q[:80], e)
        return {"query": q, "results": []}


def evaluate(queries: List[Dict[str, Any]], api: str, k: int, sort_by: str) -> Dict[str, Any]:
    ranks = []
    t0 = time.time()
    for q in queries:
        gt = set(q.get("gt_ids", []))
        if not q.get("q") or not gt:
            # sin query o sin ground truth -> ignórala
            continue
        resp = call_search(api, q["q"], k, sort_by)
        ranks.append(first_hit_rank(result_ids(resp), gt))
    stats = compute_metrics(ranks)
    stats.update({"sort_by": sort_by, "n_queries": len(ranks), "time_s": time.time() - t0})
    return stats


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--eval", required=True, help="Fichero JSON con queries (gt_ids o pid).")
    parser.add_argument("--k", type=int, default=20, help="limit enviado al API (default 20).")
    parser.add_argument("--api", default=SEARCH_API, help="URL del endpoint /search.")
    parser.add_argument("--out", default="eval_results.json", help="Fichero JSON de salida.")
    args = parser.parse_args(argv)

    setup_logging()
    queries = load_queries(args.eval)
    logger.info("Queries a evaluar: %d", len(queries))

    res = []
    for sort_by in SORT_KEYS:
        stats = evaluate(queries, args.api, args.k, sort_by)
        logger.info("sort_by=%s recall@5=%.3f recall@1=%.3f mrr=%.3f time=%.1fs",
                    sort_by, stats["recall@5"], stats["recall@1"], stats["mrr"], stats["time_s"])
        res.append(stats)

    res_sorted = sorted(res, key=lambda x: x["mrr"], reverse=True)
    with open(args.out, "w", encoding="utf-8") as f:
        json.dump({"results": res, "sorted": res_sorted}, f, indent=2, ensure_ascii=False)
    logger.info("Resultados guardados en %s", args.out)
    return res_sorted


if __name__ == "__main__":
    main()
