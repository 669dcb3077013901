"""
Static demo catalog.

Twelve fixed products across five categories. The order below is the
canonical catalog order returned by every unsorted query.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.product import Catalog, Product


_IMAGE_BASE = "https://images.unsplash.com"

SEED_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="1",
        name="Wireless Bluetooth Headphones",
        description=(
            "Premium quality wireless headphones with active noise cancellation, "
            "30-hour battery life, and superior sound quality."
        ),
        price=Decimal("199.99"),
        category="Electronics",
        image_url=f"{_IMAGE_BASE}/photo-1505740420928-5e560c06d30e?w=500",
        in_stock=True,
        rating=Decimal("4.5"),
        review_count=234,
    ),
    Product(
        id="2",
        name="Smart Watch Pro",
        description=(
            "Advanced fitness tracking, heart rate monitoring, GPS, and smartphone "
            "integration in a sleek design."
        ),
        price=Decimal("349.99"),
        category="Electronics",
        image_url=f"{_IMAGE_BASE}/photo-1523275335684-37898b6baf30?w=500",
        in_stock=True,
        rating=Decimal("4.3"),
        review_count=189,
    ),
    Product(
        id="3",
        name="Organic Cotton T-Shirt",
        description="Comfortable and sustainable organic cotton t-shirt, perfect for everyday wear.",
        price=Decimal("29.99"),
        category="Clothing",
        image_url=f"{_IMAGE_BASE}/photo-1521572163474-6864f9cf17ab?w=500",
        in_stock=False,
        rating=Decimal("4.7"),
        review_count=92,
    ),
    Product(
        id="4",
        name="Stainless Steel Water Bottle",
        description="Insulated water bottle that keeps drinks cold for 24 hours or hot for 12 hours.",
        price=Decimal("24.99"),
        category="Home & Kitchen",
        image_url=f"{_IMAGE_BASE}/photo-1602143407151-7111542de6e8?w=500",
        in_stock=True,
        rating=Decimal("4.6"),
        review_count=412,
    ),
    Product(
        id="5",
        name="Yoga Mat Premium",
        description="Non-slip, eco-friendly yoga mat with extra cushioning for comfortable practice.",
        price=Decimal("45.99"),
        category="Sports",
        image_url=f"{_IMAGE_BASE}/photo-1601925260368-ae2f83cf8b7f?w=500",
        in_stock=True,
        rating=Decimal("4.4"),
        review_count=156,
    ),
    Product(
        id="6",
        name="Portable Charger 20000mAh",
        description="High-capacity power bank with fast charging and multiple USB ports.",
        price=Decimal("59.99"),
        category="Electronics",
        image_url=f"{_IMAGE_BASE}/photo-1609091839311-d5365f9ff1c5?w=500",
        in_stock=True,
        rating=Decimal("4.2"),
        review_count=298,
    ),
    Product(
        id="7",
        name="Running Shoes Elite",
        description="Professional running shoes with advanced cushioning and breathable mesh upper.",
        price=Decimal("129.99"),
        category="Sports",
        image_url=f"{_IMAGE_BASE}/photo-1542291026-7eec264c27ff?w=500",
        in_stock=True,
        rating=Decimal("4.8"),
        review_count=523,
    ),
    Product(
        id="8",
        name="Coffee Maker Deluxe",
        description="Programmable coffee maker with thermal carafe and customizable brew strength.",
        price=Decimal("89.99"),
        category="Home & Kitchen",
        image_url=f"{_IMAGE_BASE}/photo-1517668808822-9ebb02f2a0e6?w=500",
        in_stock=False,
        rating=Decimal("4.1"),
        review_count=167,
    ),
    Product(
        id="9",
        name="Backpack Urban Explorer",
        description="Durable and stylish backpack with laptop compartment and multiple pockets.",
        price=Decimal("79.99"),
        category="Accessories",
        image_url=f"{_IMAGE_BASE}/photo-1553062407-98eeb64c6a62?w=500",
        in_stock=True,
        rating=Decimal("4.5"),
        review_count=201,
    ),
    Product(
        id="10",
        name="Wireless Keyboard and Mouse",
        description="Ergonomic wireless keyboard and mouse combo with long battery life.",
        price=Decimal("69.99"),
        category="Electronics",
        image_url=f"{_IMAGE_BASE}/photo-1587829741301-dc798b83add3?w=500",
        in_stock=True,
        rating=Decimal("4.3"),
        review_count=145,
    ),
    Product(
        id="11",
        name="Sunglasses Polarized",
        description="UV protection polarized sunglasses with stylish frame design.",
        price=Decimal("149.99"),
        category="Accessories",
        image_url=f"{_IMAGE_BASE}/photo-1572635196237-14b3f281503f?w=500",
        in_stock=True,
        rating=Decimal("4.6"),
        review_count=89,
    ),
    Product(
        id="12",
        name="Desk Lamp LED",
        description="Adjustable LED desk lamp with touch controls and multiple brightness levels.",
        price=Decimal("39.99"),
        category="Home & Kitchen",
        image_url=f"{_IMAGE_BASE}/photo-1565306257569-4eb0e3c41b24?w=500",
        in_stock=True,
        rating=Decimal("4.4"),
        review_count=276,
    ),
)


def build_seed_catalog() -> Catalog:
    return Catalog(SEED_PRODUCTS)
