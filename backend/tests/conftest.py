"""
Shared pytest fixtures.
"""
import pandas as pd
import pytest

from product_search.models import CATALOG_COLUMNS, ProductRecord


def make_product(**fields) -> ProductRecord:
    data = {
        "uniq_id": "id-0",
        "product_name": "",
        "brand": "",
        "product_category_tree": "",
        "description": "",
        "retail_price": "0",
        "discounted_price": "0",
        "overall_rating": "No rating available",
    }
    data.update(fields)
    return ProductRecord(**data)


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def red_shoes():
    return make_product(
        uniq_id="shoe-1",
        product_name="Red Shoes",
        brand="Nike",
        retail_price="100",
        discounted_price="80",
        overall_rating="4.5",
    )


@pytest.fixture
def sample_products():
    return (
        make_product(
            uniq_id="p1",
            product_name="Red Shoes",
            brand="Nike",
            product_category_tree='["Footwear >> Men >> Shoes"]',
            description="Comfortable running shoes of premium quality",
            retail_price="100",
            discounted_price="80",
            overall_rating="4.5",
            image='["http://img.example/1.jpg", "http://img.example/2.jpg"]',
        ),
        make_product(
            uniq_id="p2",
            product_name="Blue Sneakers",
            brand="Adidas",
            product_category_tree="['Footwear >> Women >> Sneakers']",
            description="Popular sneakers for daily wear",
            retail_price="200",
            discounted_price="150",
        ),
        make_product(
            uniq_id="p3",
            product_name="Smartphone X",
            brand="Samsung",
            product_category_tree='["Mobiles & Accessories >> Mobiles"]',
            description="A phone with a big battery",
            retail_price="15000",
            discounted_price="12000",
            overall_rating="4.1",
        ),
        make_product(
            uniq_id="p4",
            product_name="Cotton Shirt",
            brand="Nike",
            product_category_tree="Clothing",
            description="A plain shirt",
            retail_price="50",
            discounted_price="50",
            overall_rating="3.9",
        ),
        make_product(
            uniq_id="p5",
            product_name="Steel Bottle",
            brand="Milton",
            product_category_tree='["Kitchen >> Bottles"]',
            description="Keeps water cold",
            retail_price="300",
            discounted_price="300",
        ),
    )


@pytest.fixture
def catalog_csv(tmp_path):
    """Small CSV in the dataset's schema."""
    rows = [
        {
            "uniq_id": "c1",
            "product_name": "  Running Shoes ",
            "product_category_tree": '["Footwear >> Men >> Shoes"]',
            "retail_price": "999",
            "discounted_price": "499",
            "image": '["http://img.example/a.jpg"]',
            "description": "Light running shoes",
            "overall_rating": "4.2",
            "brand": "Asics",
        },
        {
            "uniq_id": "c2",
            "product_name": "Desk Lamp",
            "product_category_tree": '["Home >> Lighting"]',
            "retail_price": "",
            "discounted_price": "n/a",
            "image": "",
            "description": "LED lamp",
            "overall_rating": "No rating available",
            "brand": "",
        },
    ]
    df = pd.DataFrame(rows)
    for col in CATALOG_COLUMNS:
        if col not in df.columns:
            df[col] = ""
    path = tmp_path / "catalog.csv"
    df.to_csv(path, index=False)
    return path
