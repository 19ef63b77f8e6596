"""Tests for Product and PageResult."""


def test_product_from_backend_record():
    from runmate.domain.models import Product

    product = Product.from_dict(
        {
            "_id": "665f",
            "name": "Endorphin Pro",
            "price": "225.00",
            "stock": 0,
            "rating": 4.8,
            "photos": ["one.jpg", "two.jpg"],
        }
    )

    assert product.id == "665f"
    assert product.price == 225.0
    assert product.in_stock is False
    assert product.thumbnail == "one.jpg"
    assert product.description == ""


def test_product_from_sparse_record():
    from runmate.domain.models import Product

    product = Product.from_dict({"id": 7, "price": None, "stock": "n/a"})

    assert product.id == "7"
    assert product.price == 0.0
    assert product.stock == 0
    assert product.photos == ()
    assert product.thumbnail == ""


def test_page_result_from_response():
    from runmate.domain.models import PageResult

    result = PageResult.from_response(
        {"success": True, "orders": [{"_id": "o1"}, "junk", None], "pages": "4"}, "orders"
    )

    assert result.items == [{"_id": "o1"}]
    assert result.pages == 4


def test_page_result_missing_parts_are_empty():
    from runmate.domain.models import PageResult

    result = PageResult.from_response({"success": True}, "products")

    assert result.items == []
    assert result.pages == 0


def test_product_from_record_with_wrong_field_types():
    from runmate.domain.models import Product

    product = Product.from_dict(
        {
            "_id": "bad",
            "name": {"en": "Novablast"},
            "description": ["cushioned"],
            "photos": 5,
            "price": "NaN",
            "rating": float("inf"),
            "stock": float("inf"),
        }
    )

    assert product.name == ""
    assert product.description == ""
    assert product.photos == ()
    assert product.price == 0.0
    assert product.rating == 0.0
    assert product.stock == 0


def test_product_photos_keep_only_strings():
    from runmate.domain.models import Product

    product = Product.from_dict({"_id": "p", "photos": [1, None, "a.jpg", ""]})

    assert product.photos == ("a.jpg",)


def test_page_result_non_finite_pages_is_zero():
    from runmate.domain.models import PageResult

    result = PageResult.from_response({"success": True, "pages": float("inf")}, "products")

    assert result.pages == 0
