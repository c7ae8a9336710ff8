"""
Unit tests for catalog loading and caching.
"""
import product_search.catalog as catalog_module
from product_search.catalog import CatalogCache, read_catalog


class TestReadCatalog:

    def test_rows_are_parsed(self, catalog_csv):
        products = read_catalog(str(catalog_csv))
        assert [p.uniq_id for p in products] == ["c1", "c2"]

        shoes, lamp = products
        assert shoes.product_name == "Running Shoes"  # trimmed
        assert shoes.retail_price == 999.0
        assert shoes.discounted_price == 499.0
        assert shoes.rating == 4.2

        assert lamp.retail_price == 0.0
        assert lamp.discounted_price == 0.0
        assert lamp.rating is None
        assert lamp.brand == ""

    def test_missing_columns_are_filled(self, tmp_path):
        path = tmp_path / "partial.csv"
        path.write_text("uniq_id,product_name\nx1,Lamp\n", encoding="utf-8")
        (p,) = read_catalog(str(path))
        assert p.product_name == "Lamp"
        assert p.description == ""
        assert p.overall_rating == ""


class TestCatalogCache:

    def test_load_is_memoized(self, catalog_csv, monkeypatch):
        calls = []

        def counting_read(path):
            calls.append(path)
            return read_catalog(path)

        monkeypatch.setattr(catalog_module, "read_catalog", counting_read)
        cache = CatalogCache(str(catalog_csv))
        first = cache.load()
        second = cache.load()
        assert len(first) == 2
        assert first is second
        assert len(calls) == 1
        assert cache.loaded

    def test_missing_file_returns_empty(self, tmp_path):
        cache = CatalogCache(str(tmp_path / "nope.csv"))
        assert cache.load() == ()
        assert not cache.loaded

    def test_parse_failure_returns_empty_and_retries(self, catalog_csv, monkeypatch):
        def broken_read(path):
            raise ValueError("bad csv")

        monkeypatch.setattr(catalog_module, "read_catalog", broken_read)
        cache = CatalogCache(str(catalog_csv))
        assert cache.load() == ()
        assert not cache.loaded

        monkeypatch.setattr(catalog_module, "read_catalog", read_catalog)
        assert len(cache.load()) == 2
