import pytest

from productdash.catalog.normalizer import apply_defaults, normalize_rating


def test_creation_defaults_are_filled():
    out = apply_defaults({"nama": "Shirt"}, is_new=True)
    assert out["terjual"] == 0
    assert out["rating"] == 5.0
    assert out["gambar"] == ""
    assert out["stok"] == "in-stock"


def test_defaults_not_filled_on_update():
    out = apply_defaults({"nama": "Shirt"})
    assert out == {"nama": "Shirt"}


def test_empty_stock_and_image_get_defaults_on_create():
    out = apply_defaults({"stok": "", "gambar": None}, is_new=True)
    assert out["stok"] == "in-stock"
    assert out["gambar"] == ""


@pytest.mark.parametrize(
    "raw, expected",
    [
        (7, 5.0),
        (0.33, 1.0),
        (-2, 1.0),
        (4.25, 4.3),
        (3.14159, 3.1),
        ("4.46", 4.5),
        ("not-a-number", 5.0),
        (None, 5.0),
    ],
)
def test_rating_is_clamped_then_rounded(raw, expected):
    assert normalize_rating(raw) == expected
    assert apply_defaults({"rating": raw})["rating"] == expected


@pytest.mark.parametrize("raw, expected", [("12", 12), (3.9, 3), ("abc", 0), (None, 0), (7, 7)])
def test_terjual_coerced_to_int(raw, expected):
    out = apply_defaults({"terjual": raw})
    assert out["terjual"] == expected
    assert isinstance(out["terjual"], int)


def test_missing_discount_copies_original_price():
    out = apply_defaults({"varian": [{"name": "Red", "harga_asli": 1000}]})
    assert out["varian"][0]["harga_diskon"] == 1000


def test_variant_prices_are_numeric():
    out = apply_defaults({"varian": [
        {"name": "A", "harga_asli": "1500", "harga_diskon": "1200.5"},
        {"name": "B", "harga_asli": "oops", "harga_diskon": "bad"},
    ]})
    assert out["varian"][0] == {"name": "A", "harga_asli": 1500, "harga_diskon": 1200.5}
    assert out["varian"][1] == {"name": "B", "harga_asli": 0, "harga_diskon": 0}


def test_input_is_not_mutated():
    product = {"rating": 9, "varian": [{"name": "Red", "harga_asli": 1}]}
    apply_defaults(product, is_new=True)
    assert product == {"rating": 9, "varian": [{"name": "Red", "harga_asli": 1}]}


def test_extra_fields_survive():
    out = apply_defaults({"nama": "Shirt", "kategori": "pakaian"}, is_new=True)
    assert out["kategori"] == "pakaian"


@pytest.mark.parametrize(
    "product, is_new",
    [
        ({"nama": "Shirt", "rating": 4.25, "terjual": "3", "varian": [{"name": "R", "harga_asli": "10"}]}, True),
        ({"rating": -1, "varian": [{"name": "R", "harga_asli": 10, "harga_diskon": None}]}, False),
        ({"rating": "2.55", "terjual": 1.7, "stok": ""}, True),
        ({}, True),
    ],
)
def test_apply_defaults_is_idempotent(product, is_new):
    once = apply_defaults(product, is_new=is_new)
    assert apply_defaults(once, is_new=is_new) == once
