"""Validators, pagination parsing and request field types."""

import io

import pytest
from pydantic import ValidationError
from starlette.datastructures import UploadFile

from zelvix.api.v1.catalog.schemas import ProductCreate, ReviewCreate, parse_qty_offers
from zelvix.utils.helpers import read_limited, split_keywords, wrap_list
from zelvix.utils.pagination import PaginationMeta, PaginationParams
from zelvix.utils.validators import (
    normalize_header,
    normalize_slug,
    normalize_text,
    parse_bool,
    parse_positive_int,
    parse_status,
    sanitize_filename,
    sanitize_plain_text,
)


class TestPaginationParams:
    @pytest.mark.parametrize(
        "page, limit, expected",
        [
            (None, None, (1, 10)),
            ("2", "25", (2, 25)),
            ("0", "0", (1, 1)),
            ("-3", "500", (1, 100)),
            ("abc", "xyz", (1, 10)),
            ("1.5", "", (1, 10)),
        ],
    )
    def test_from_raw_is_lenient(self, page, limit, expected):
        params = PaginationParams.from_raw(page, limit)
        assert (params.page, params.limit) == expected

    def test_offset(self):
        assert PaginationParams.from_raw("3", "20").offset == 40


class TestPaginationMeta:
    def test_empty_result_still_has_one_page(self):
        meta = PaginationMeta.build(1, 10, 0).to_response()
        assert meta == {
            "page": 1,
            "limit": 10,
            "totalItems": 0,
            "totalPages": 1,
            "hasNextPage": False,
            "hasPrevPage": False,
        }

    def test_middle_page(self):
        meta = PaginationMeta.build(2, 10, 25)
        assert meta.total_pages == 3
        assert meta.has_next_page and meta.has_prev_page


class TestValidators:
    def test_normalize_text_handles_spreadsheet_numbers(self):
        assert normalize_text(560001.0) == "560001"
        assert normalize_text(float("nan")) == ""
        assert normalize_text("  Goa ") == "Goa"

    @pytest.mark.parametrize(
        "value, expected",
        [(5, 5), ("7", 7), ("7.0", 7), (3.0, 3), (0, None), ("-1", None), ("1.5", None), (True, None), ("x", None)],
    )
    def test_parse_positive_int(self, value, expected):
        assert parse_positive_int(value) == expected

    def test_parse_bool(self):
        assert parse_bool("true") is True
        assert parse_bool("0") is False
        assert parse_bool("maybe") is None

    def test_parse_status_with_default(self):
        assert parse_status("INACTIVE") == "inactive"
        assert parse_status("archived", default="active") == "active"

    def test_normalize_header(self):
        assert normalize_header(" Country ID ") == "country_id"
        assert normalize_header("state-code") == "state_code"

    def test_slug_and_filename(self):
        assert normalize_slug("Kumkumadi Face Oil!") == "kumkumadi-face-oil"
        assert sanitize_filename("My Photo (1).PNG") == "my-photo-1.png"
        assert sanitize_filename("../../etc/passwd") == "passwd"

    def test_plain_text_strips_markup(self):
        assert sanitize_plain_text("<b>Great</b> <script>alert(1)</script>oil") == "Great alert(1)oil"

    def test_keywords_and_wrap_list(self):
        assert split_keywords("hair, oil ,, ayurveda") == ["hair", "oil", "ayurveda"]
        assert wrap_list({"heading": "Step 1"}) == [{"heading": "Step 1"}]
        assert wrap_list(None) == []


class TestCatalogFieldTypes:
    def test_qty_offers_accepts_json_text(self):
        offers = parse_qty_offers('[{"quantity": "2", "unit_price": "450.555", "label": "Duo"}]')
        assert offers == [{"quantity": 2, "unit_price": 450.56, "label": "Duo", "secondary_label": ""}]

    @pytest.mark.parametrize(
        "raw, message",
        [
            ("{bad", "qty_offers must be valid JSON"),
            ({"quantity": 1}, "qty_offers must be a list of offers"),
            ([{"quantity": 1, "label": "One"}], "Each qty_offers item needs quantity, unit_price and label"),
            ([{"quantity": 1, "unit_price": -5, "label": "One"}], "qty_offers unit_price must be 0 or greater"),
        ],
    )
    def test_qty_offers_errors(self, raw, message):
        with pytest.raises(ValueError, match=message):
            parse_qty_offers(raw)

    def test_product_normalizes_fields(self):
        payload = ProductCreate(
            name=" Neem Face Wash ",
            slug="Neem Face Wash",
            sku="zlx-fw-150",
            category_id=1,
            qty="12.9",
            price="249.999",
            keywords="neem, face wash",
        )
        assert payload.name == "Neem Face Wash"
        assert payload.slug == "neem-face-wash"
        assert payload.sku == "ZLX-FW-150"
        assert payload.qty == 12
        assert str(payload.price) == "250.00"
        assert payload.keywords == ["neem", "face wash"]
        assert payload.status == "active"

    def test_product_rejects_negative_amounts(self):
        with pytest.raises(ValidationError):
            ProductCreate(name="Oil", slug="oil", sku="S1", category_id=1, price=-1)

    def test_review_rating_range(self):
        with pytest.raises(ValidationError, match="rating must be between 0 and 5"):
            ReviewCreate(product_id=1, product_name="oil", name="Asha", rating=6)

    def test_product_rejects_unstorable_price(self):
        with pytest.raises(ValidationError):
            ProductCreate(name="Oil", slug="oil", sku="S1", category_id=1, price="1e30")


class TestReadLimited:
    async def test_reads_small_upload(self):
        upload = UploadFile(io.BytesIO(b"hello"), filename="a.png")

        assert await read_limited(upload, 5) == b"hello"

    async def test_oversized_upload_without_declared_size(self):
        upload = UploadFile(io.BytesIO(b"x" * 20), filename="a.png")

        assert await read_limited(upload, 10) is None

    async def test_declared_size_is_checked_before_reading(self):
        stream = io.BytesIO(b"x" * 20)
        upload = UploadFile(stream, size=20, filename="a.png")

        assert await read_limited(upload, 10) is None
        assert stream.tell() == 0
