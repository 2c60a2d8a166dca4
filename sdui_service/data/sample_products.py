"""
Static sample data for the demo storefront.

Listings are grouped by the presentation mode that features them; the
catalog entries back the product detail endpoint.
"""
from typing import Any, Dict, List, Tuple

from sdui_service.models.schemas.core import Mode
from sdui_service.models.schemas.product import Product, ProductCard

_PLACEHOLDER = "https://via.placeholder.com"


def _image(size: str, background: str, foreground: str, text: str) -> str:
    return f"{_PLACEHOLDER}/{size}/{background}/{foreground}?text={text}"


# ============================================================================
# CATALOG
# ============================================================================

CATALOG_PRODUCTS: Tuple[Product, ...] = (
    Product(
        id="prod_1",
        name="Premium Leather Jacket",
        price=299.99,
        image_url="https://images.unsplash.com/photo-1551028719-00167b16eac5",
        description="Handcrafted Italian leather",
    ),
    Product(
        id="prod_2",
        name="Silk Evening Dress",
        price=399.99,
        image_url="https://images.unsplash.com/photo-1595777457583-95e059d581b8",
        description="Elegant and timeless",
    ),
    Product(
        id="prod_3",
        name="Designer Sunglasses",
        price=159.99,
        image_url="https://images.unsplash.com/photo-1572635196237-14b3f281503f",
        description="UV protection with style",
        discount=15,
    ),
    Product(
        id="prod_4",
        name="Cashmere Sweater",
        price=249.99,
        image_url="https://images.unsplash.com/photo-1576566588028-4147f3842f27",
        description="Luxuriously soft",
    ),
    Product(
        id="prod_5",
        name="Oxford Dress Shoes",
        price=189.99,
        image_url="https://images.unsplash.com/photo-1614252369475-531eba835eb1",
        description="Handmade in Italy",
        discount=25,
    ),
    Product(
        id="prod_6",
        name="Minimalist Watch",
        price=449.99,
        image_url="https://images.unsplash.com/photo-1523275335684-37898b6baf30",
        description="Swiss movement",
    ),
    Product(
        id="prod_7",
        name="Wool Overcoat",
        price=499.99,
        image_url="https://images.unsplash.com/photo-1539533018447-63fcce2678e3",
        description="Winter elegance",
    ),
    Product(
        id="prod_8",
        name="Leather Handbag",
        price=349.99,
        image_url="https://images.unsplash.com/photo-1584917865442-de89df76afd3",
        description="Spacious and stylish",
        discount=40,
    ),
)


# ============================================================================
# LISTINGS BY MODE
# ============================================================================

_LATE_NIGHT = (
    ProductCard(id="p1", name="Midnight Silk Robe", price=189,
                image_url=_image("200", "1A1A2E", "FFFFFF", "Silk+Robe")),
    ProductCard(id="p2", name="Noir Leather Wallet", price=129,
                image_url=_image("200", "2C2C3E", "FFFFFF", "Wallet")),
    ProductCard(id="p3", name="Dark Essence Fragrance", price=159,
                image_url=_image("200", "1A1A2E", "FFFFFF", "Fragrance")),
)

_MORNING = (
    ProductCard(id="m1", name="Morning Brew Coffee Maker", price=79, original_price=99, discount=20,
                rating=4.5, review_count=128, badge="NEW", is_favorite=False,
                image_url=_image("200", "FF9800", "FFFFFF", "Coffee")),
    ProductCard(id="m2", name="Sunrise Yoga Mat", price=45, original_price=60, discount=25,
                rating=4.8, review_count=95, is_favorite=True,
                image_url=_image("200", "FFC107", "FFFFFF", "Yoga+Mat")),
    ProductCard(id="m3", name="Fresh Start Smoothie Blender", price=89,
                rating=4.6, review_count=203, badge="SALE", is_favorite=False,
                image_url=_image("200", "FF9800", "FFFFFF", "Blender")),
)

_DAY = (
    ProductCard(id="d1", name="Casual T-Shirt", price=29, original_price=39, discount=26,
                rating=4.5, review_count=128, badge="SALE", is_favorite=False,
                image_url=_image("200", "3498DB", "FFFFFF", "T-Shirt")),
    ProductCard(id="d2", name="Denim Jeans", price=59,
                rating=4.7, review_count=256, is_favorite=True,
                image_url=_image("200", "2C3E50", "FFFFFF", "Jeans")),
    ProductCard(id="d3", name="Running Shoes", price=89, original_price=120, discount=26,
                rating=4.8, review_count=342, badge="POPULAR", is_favorite=False,
                image_url=_image("200", "3498DB", "FFFFFF", "Shoes")),
    ProductCard(id="d4", name="Backpack", price=49,
                rating=4.6, review_count=189, is_favorite=False,
                image_url=_image("200", "2C3E50", "FFFFFF", "Backpack")),
)

_FLASH_SALE = (
    ProductCard(id="fs1", name="Wireless Earbuds", price=39, original_price=99, discount=60,
                rating=4.3, review_count=542, badge="FLASH", is_favorite=False,
                image_url=_image("200", "FF4757", "FFFFFF", "Earbuds")),
    ProductCard(id="fs2", name="Smart Watch", price=89, original_price=199, discount=55,
                rating=4.7, review_count=287, badge="FLASH", is_favorite=True,
                image_url=_image("200", "FF6B6B", "FFFFFF", "Watch")),
    ProductCard(id="fs3", name="Portable Speaker", price=29, original_price=79, discount=63,
                rating=4.4, review_count=134, badge="FLASH", is_favorite=False,
                image_url=_image("200", "FF4757", "FFFFFF", "Speaker")),
    ProductCard(id="fs4", name="Fitness Tracker", price=19, original_price=49, discount=61,
                rating=4.2, review_count=89, badge="FLASH", is_favorite=False,
                image_url=_image("200", "FF6B6B", "FFFFFF", "Fitness")),
)

_AFTERNOON = (
    ProductCard(id="a1", name="Wireless Earbuds Pro", price=149, original_price=199, discount=25,
                rating=4.7, review_count=342, is_favorite=True,
                image_url=_image("200", "00BCD4", "FFFFFF", "Earbuds")),
    ProductCard(id="a2", name="Smart Watch Series 5", price=299,
                rating=4.9, review_count=587, badge="NEW", is_favorite=False,
                image_url=_image("200", "00ACC1", "FFFFFF", "Watch")),
    ProductCard(id="a3", name="Portable Speaker", price=89, original_price=120, discount=26,
                rating=4.5, review_count=234, is_favorite=False,
                image_url=_image("200", "0097A7", "FFFFFF", "Speaker")),
    ProductCard(id="a4", name="USB-C Hub", price=59,
                rating=4.6, review_count=156, is_favorite=False,
                image_url=_image("200", "00838F", "FFFFFF", "Hub")),
)

_EVENING = (
    ProductCard(id="e1", name="Premium Leather Jacket", price=299,
                rating=4.9, review_count=128, badge="PREMIUM", is_favorite=True,
                image_url=_image("200", "6C5CE7", "FFFFFF", "Jacket")),
    ProductCard(id="e2", name="Silk Evening Dress", price=189,
                rating=4.8, review_count=95, is_favorite=False,
                image_url=_image("200", "A29BFE", "FFFFFF", "Dress")),
    ProductCard(id="e3", name="Gold-Plated Watch", price=459,
                rating=4.9, review_count=67, badge="LUXURY", is_favorite=True,
                image_url=_image("200", "6C5CE7", "FFFFFF", "Watch")),
    ProductCard(id="e4", name="Designer Handbag", price=389,
                rating=4.7, review_count=203, is_favorite=False,
                image_url=_image("200", "A29BFE", "FFFFFF", "Handbag")),
)

_NIGHT = (
    ProductCard(id="n1", name="Midnight Crystal Necklace", price=599,
                rating=5.0, review_count=42, badge="BOUTIQUE", is_favorite=True,
                image_url=_image("200", "1A1A2E", "FFD700", "Necklace")),
    ProductCard(id="n2", name="Black Diamond Ring", price=899,
                rating=4.9, review_count=28, is_favorite=False,
                image_url=_image("200", "2C2C3E", "FFD700", "Ring")),
    ProductCard(id="n3", name="Limited Edition Perfume", price=249,
                rating=4.8, review_count=56, badge="EXCLUSIVE", is_favorite=True,
                image_url=_image("200", "1A1A2E", "FFD700", "Perfume")),
)

LISTINGS_BY_MODE: Dict[Mode, Tuple[ProductCard, ...]] = {
    Mode.LATE_NIGHT: _LATE_NIGHT,
    Mode.MORNING: _MORNING,
    Mode.DAY: _DAY,
    Mode.FLASH_SALE: _FLASH_SALE,
    Mode.AFTERNOON: _AFTERNOON,
    Mode.EVENING: _EVENING,
    Mode.NIGHT: _NIGHT,
}


def listings_for(mode: Mode) -> List[ProductCard]:
    """Featured listings for a mode (day listings for anything else)"""
    return list(LISTINGS_BY_MODE.get(mode, _DAY))


# ============================================================================
# DISCOVERY CONTENT
# ============================================================================

MORNING_STORIES: Tuple[Dict[str, Any], ...] = (
    {"id": "s1", "name": "New In", "viewed": False, "image_url": _image("70", "FF9800", "FFFFFF", "New")},
    {"id": "s2", "name": "Sale", "viewed": False, "image_url": _image("70", "FFC107", "FFFFFF", "Sale")},
    {"id": "s3", "name": "Trending", "viewed": True, "image_url": _image("70", "FF9800", "FFFFFF", "Hot")},
    {"id": "s4", "name": "Deals", "viewed": False, "image_url": _image("70", "FFC107", "FFFFFF", "Deals")},
)

MORNING_CATEGORIES: Tuple[Dict[str, Any], ...] = (
    {"id": "1", "name": "New In"},
    {"id": "2", "name": "Trending"},
    {"id": "3", "name": "Sale"},
    {"id": "4", "name": "Premium"},
)

AFTERNOON_CATEGORY_TILES: Tuple[Dict[str, Any], ...] = (
    {"id": "cat1", "title": "Electronics", "image_url": _image("130x100", "00BCD4", "FFFFFF", "Electronics")},
    {"id": "cat2", "title": "Fashion", "image_url": _image("130x100", "00ACC1", "FFFFFF", "Fashion")},
    {"id": "cat3", "title": "Home", "image_url": _image("130x100", "0097A7", "FFFFFF", "Home")},
    {"id": "cat4", "title": "Sports", "image_url": _image("130x100", "00838F", "FFFFFF", "Sports")},
)


def product_image_placeholder(product_id: str) -> str:
    return _image("400x500", "6C5CE7", "FFFFFF", f"Product+{product_id}")
