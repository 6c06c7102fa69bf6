"""Product page pricing and the /buynow checkout routes."""

from zelvix.models import Address, PaymentGateway, Product, ShippingRate

API = "/api/v1/storefront"
SESSION = {"Cookie": "user_email=asha@zelvix.in; user_role=user"}


async def test_product_page_quotes_default_pack(client, product):
    response = await client.get(f"{API}/products/{product.slug}")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["product"]["id"] == product.id
    assert data["category"]["slug"] == "hair-care"
    assert data["details"] is None
    assert [offer["label"] for offer in data["pricing"]["offers"]] == ["Single", "Pack of 3"]
    assert data["pricing"]["quote"] == {
        "unit_price": 899.0,
        "quantity": 1,
        "total": 899.0,
        "discount_percentage": 25,
        "offer": {"quantity": 1, "unit_price": 899.0, "label": "Single", "secondary_label": ""},
    }


async def test_quote_for_pack_of_three(client, product):
    response = await client.get(f"{API}/products/{product.slug}/quote", params={"quantity": 3})

    quote = response.json()["data"]
    assert response.json()["message"] == "Price quote fetched successfully"
    assert quote["total"] == 2397.0
    assert quote["discount_percentage"] == 33
    assert quote["offer"]["label"] == "Pack of 3"


async def test_quote_for_unknown_pack_uses_current_price(client, product):
    response = await client.get(f"{API}/products/{product.slug}/quote", params={"quantity": "two"})

    quote = response.json()["data"]
    assert quote["unit_price"] == 899.0
    assert quote["quantity"] == 1
    assert quote["offer"] is None


async def test_inactive_product_is_hidden(client, db_session, product):
    product.status = "inactive"
    await db_session.commit()

    response = await client.get(f"{API}/products/{product.slug}")

    assert response.status_code == 404
    assert response.json()["message"] == "Product not found"


async def test_product_without_offer_price(client, db_session, category):
    db_session.add(Product(
        name="Neem Soap",
        slug="neem-soap",
        sku="ZLX-NS-1",
        category_id=category.id,
        price=150,
        offer_price=0,
        qty_offers=[{"quantity": "x"}],
    ))
    await db_session.commit()

    response = await client.get(f"{API}/products/neem-soap")

    pricing = response.json()["data"]["pricing"]
    assert pricing["offers"] == []
    assert pricing["quote"]["unit_price"] == 150.0
    assert pricing["quote"]["discount_percentage"] == 0


async def test_buynow_redirects_anonymous_visitors(client):
    response = await client.get("/buynow", params={"step": "address"})

    assert response.status_code == 307
    assert response.headers["location"] == "/auth/login?next=%2Fbuynow%3Fstep%3Daddress"


async def test_buynow_needs_both_cookies(client):
    response = await client.get("/buynow", headers={"Cookie": "user_email=asha@zelvix.in"})

    assert response.status_code == 307
    assert response.headers["location"] == "/auth/login?next=%2Fbuynow"


async def test_buynow_checkout_context(client, db_session, make_user):
    user = await make_user()
    db_session.add_all([
        Address(user_id=user.id, full_name="Asha", mobile="98", address_line_1="Old", is_default=False),
        Address(user_id=user.id, full_name="Asha", mobile="98", address_line_1="Home", is_default=True),
        Address(user_id=user.id, full_name="Asha", mobile="98", address_line_1="Gone", status="inactive"),
        PaymentGateway(name="Razorpay", app_id="rzp", secret_key="s3cret"),
        PaymentGateway(name="Paytm", is_active=False),
    ])
    await db_session.commit()

    response = await client.get("/buynow", headers=SESSION)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["user"] == {"id": user.id, "name": None, "email": "asha@zelvix.in", "role": "user"}
    assert [address["address_line_1"] for address in data["addresses"]] == ["Home", "Old"]
    assert [gateway["name"] for gateway in data["payment_gateways"]] == ["Razorpay"]
    assert "secret_key" not in data["payment_gateways"][0]


async def test_buynow_unknown_session_user(client):
    response = await client.get("/buynow", headers=SESSION)

    assert response.status_code == 401
    assert response.json()["message"] == "Please login to continue"


async def test_order_summary_applies_shipping(client, db_session, pincode):
    db_session.add_all([
        ShippingRate(min_amount=0, max_amount=5000, shipping_amount=49),
        ShippingRate(pincode_id=pincode.id, min_amount=0, max_amount=5000, shipping_amount=20),
    ])
    await db_session.commit()
    cart = [
        {"name": "Bhringraj Hair Oil", "quantity": 3, "line_total": 2397, "slug": "bhringraj-hair-oil"},
        {"name": "Neem Soap", "quantity": 1, "line_total": "150.00"},
    ]

    general = await client.post("/buynow/summary", json=cart, headers=SESSION)
    local = await client.post(
        "/buynow/summary",
        json={"items": cart, "pincode_id": pincode.id},
        headers=SESSION,
    )

    assert general.status_code == 200
    assert general.json()["data"]["item_count"] == 4
    assert general.json()["data"]["subtotal"] == 2547.0
    assert general.json()["data"]["shipping"] == 49.0
    assert general.json()["data"]["total"] == 2596.0
    assert local.json()["data"]["shipping"] == 20.0
    assert local.json()["data"]["shipping_rate"]["pincode_id"] == pincode.id


async def test_order_summary_outside_every_band(client, db_session):
    db_session.add(ShippingRate(min_amount=0, max_amount=100, shipping_amount=49))
    await db_session.commit()

    response = await client.post(
        "/buynow/summary",
        json=[{"name": "Gift Box", "quantity": 1, "line_total": 4999}],
        headers=SESSION,
    )

    data = response.json()["data"]
    assert data["shipping"] == 0.0
    assert data["shipping_rate"] is None
    assert data["total"] == 4999.0


async def test_malformed_cart_is_empty(client):
    response = await client.post(
        "/buynow/summary",
        json=[{"name": "Oil", "quantity": 0, "line_total": 10}],
        headers=SESSION,
    )

    assert response.status_code == 200
    assert response.json()["data"] == {
        "items": [],
        "item_count": 0,
        "subtotal": 0.0,
        "shipping": 0.0,
        "shipping_rate": None,
        "total": 0.0,
    }
