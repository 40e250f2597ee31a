"""Integration tests for the sweet catalog and inventory endpoints.

Validates:
  - Reads and purchases need any valid session.
  - Create, update, delete and restock need an ADMIN session.
  - Domain errors come back in the standard error envelope.
"""

import pytest

pytestmark = pytest.mark.integration

SWEETS_URL = "/api/v1/sweets/"
SEARCH_URL = "/api/v1/sweets/search/"

NEW_SWEET = {
    "name": "Pistachio Baklava",
    "category": "traditional",
    "price": 9.75,
    "quantity": 12,
    "description": "Layered filo pastry with pistachio",
}


def _detail_url(sweet_id: str) -> str:
    return f"{SWEETS_URL}{sweet_id}/"


def _by_name(container, name: str):
    return next(s for s in container.ledger.list() if s.name == name)


# ===========================================================================
# Reads
# ===========================================================================


class TestListAndRetrieve:
    def test_list_requires_session(self, api_client, container):
        response = api_client.get(SWEETS_URL)

        assert response.status_code == 401
        data = response.json()
        assert data["type"] == "client_error"
        assert data["errors"][0]["code"] == "not_authenticated"

    def test_list_returns_catalog_in_order(self, user_client, container):
        response = user_client.get(SWEETS_URL)

        assert response.status_code == 200
        names = [item["name"] for item in response.json()]
        assert names == [s.name for s in container.ledger.list()]

    def test_item_representation(self, user_client, container):
        sweet = _by_name(container, "Belgian Dark Chocolate")

        response = user_client.get(_detail_url(sweet.id))

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == sweet.id
        assert data["category"] == "chocolates"
        assert data["price"] == "12.99"
        assert data["quantity"] == 25
        assert data["in_stock"] is True

    def test_retrieve_missing_returns_404(self, user_client, container):
        response = user_client.get(_detail_url("does-not-exist"))

        assert response.status_code == 404
        error = response.json()["errors"][0]
        assert error["code"] == "not_found"
        assert error["entity_kind"] == "Sweet"
        assert error["id"] == "does-not-exist"


class TestSearch:
    def test_price_range(self, user_client, container):
        response = user_client.get(SEARCH_URL, {"minPrice": "5", "maxPrice": "10"})

        assert response.status_code == 200
        prices = [float(item["price"]) for item in response.json()]
        assert prices
        assert all(5 <= price <= 10 for price in prices)

    def test_name_substring_and_category(self, user_client, container):
        response = user_client.get(
            SEARCH_URL, {"name": "caramel", "category": "chocolates"}
        )

        assert [item["name"] for item in response.json()] == ["Salted Caramel Truffles"]

    def test_no_match_returns_empty_list(self, user_client, container):
        response = user_client.get(SEARCH_URL, {"name": "broccoli"})
        assert response.status_code == 200
        assert response.json() == []

    def test_bad_price_returns_400(self, user_client, container):
        response = user_client.get(SEARCH_URL, {"min_price": "cheap"})
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "min_price"

    def test_search_requires_session(self, api_client, container):
        assert api_client.get(SEARCH_URL, {"name": "fudge"}).status_code == 401


# ===========================================================================
# Catalog management
# ===========================================================================


class TestCreate:
    def test_admin_creates_sweet(self, admin_client, container):
        response = admin_client.post(SWEETS_URL, NEW_SWEET, format="json")

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Pistachio Baklava"
        assert data["price"] == "9.75"
        assert container.ledger.get(data["id"]) is not None

    def test_user_gets_403(self, user_client, container):
        before = container.ledger.count()

        response = user_client.post(SWEETS_URL, NEW_SWEET, format="json")

        assert response.status_code == 403
        assert response.json()["errors"][0]["code"] == "permission_denied"
        assert response.json()["errors"][0]["required_role"] == "ADMIN"
        assert container.ledger.count() == before

    def test_invalid_price_returns_400_with_field(self, admin_client, container):
        response = admin_client.post(
            SWEETS_URL, {**NEW_SWEET, "price": -1}, format="json"
        )

        assert response.status_code == 400
        error = response.json()["errors"][0]
        assert error["code"] == "invalid"
        assert error["attr"] == "price"

    @pytest.mark.parametrize("price", ["1e30", "0.001"])
    def test_out_of_range_price_rejected_and_catalog_stays_readable(
        self, admin_client, user_client, container, price
    ):
        before = container.ledger.count()

        response = admin_client.post(
            SWEETS_URL, {**NEW_SWEET, "price": price}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "price"
        assert container.ledger.count() == before
        assert user_client.get(SWEETS_URL).status_code == 200

    def test_boolean_quantity_rejected(self, admin_client, container):
        response = admin_client.post(
            SWEETS_URL, {**NEW_SWEET, "quantity": True}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "quantity"

    def test_unknown_category_returns_400(self, admin_client, container):
        response = admin_client.post(
            SWEETS_URL, {**NEW_SWEET, "category": "vegetables"}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "category"


class TestUpdate:
    def test_patch_updates_only_supplied_fields(self, admin_client, container):
        sweet = _by_name(container, "Caramel Fudge")

        response = admin_client.patch(
            _detail_url(sweet.id), {"price": "7.49"}, format="json"
        )

        assert response.status_code == 200
        data = response.json()
        assert data["price"] == "7.49"
        assert data["name"] == "Caramel Fudge"
        assert data["quantity"] == sweet.quantity

    def test_put_behaves_as_partial_update(self, admin_client, container):
        sweet = _by_name(container, "Caramel Fudge")
        response = admin_client.put(
            _detail_url(sweet.id), {"name": "Vanilla Fudge"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Vanilla Fudge"

    def test_user_gets_403(self, user_client, container):
        sweet = _by_name(container, "Caramel Fudge")
        response = user_client.patch(_detail_url(sweet.id), {"price": "1"}, format="json")
        assert response.status_code == 403
        assert container.ledger.get(sweet.id).price == sweet.price

    @pytest.mark.parametrize("price", ["1e30", "0.001"])
    def test_out_of_range_price_rejected(self, admin_client, container, price):
        sweet = _by_name(container, "Caramel Fudge")
        response = admin_client.patch(
            _detail_url(sweet.id), {"price": price}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "price"
        assert container.ledger.get(sweet.id).price == sweet.price

    def test_update_missing_returns_404(self, admin_client, container):
        response = admin_client.patch(
            _detail_url("does-not-exist"), {"price": "1"}, format="json"
        )
        assert response.status_code == 404


class TestDelete:
    def test_admin_deletes_sweet(self, admin_client, container):
        sweet = _by_name(container, "Mango Sorbet")

        assert admin_client.delete(_detail_url(sweet.id)).status_code == 204
        assert admin_client.get(_detail_url(sweet.id)).status_code == 404

    def test_user_gets_403(self, user_client, container):
        sweet = _by_name(container, "Mango Sorbet")
        assert user_client.delete(_detail_url(sweet.id)).status_code == 403
        assert container.ledger.get(sweet.id) is not None

    def test_delete_missing_returns_404(self, admin_client, container):
        assert admin_client.delete(_detail_url("does-not-exist")).status_code == 404


# ===========================================================================
# Inventory
# ===========================================================================


class TestPurchase:
    def test_purchase_one_unit_by_default(self, user_client, container):
        sweet = _by_name(container, "Salted Caramel Truffles")

        response = user_client.post(f"{_detail_url(sweet.id)}purchase/")

        assert response.status_code == 200
        data = response.json()
        assert data["remaining_quantity"] == 2
        assert data["sweet"]["quantity"] == 2

    def test_purchase_quantity(self, user_client, container):
        sweet = _by_name(container, "Salted Caramel Truffles")
        response = user_client.post(
            f"{_detail_url(sweet.id)}purchase/", {"quantity": 3}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["sweet"]["in_stock"] is False

    def test_out_of_stock_returns_409(self, user_client, container):
        sweet = _by_name(container, "Vanilla Bean Cupcake")

        response = user_client.post(f"{_detail_url(sweet.id)}purchase/")

        assert response.status_code == 409
        error = response.json()["errors"][0]
        assert error["code"] == "out_of_stock"
        assert error["available"] == 0
        assert error["requested"] == 1
        assert container.ledger.get(sweet.id).quantity == 0

    def test_zero_quantity_returns_400(self, user_client, container):
        sweet = _by_name(container, "Caramel Fudge")
        response = user_client.post(
            f"{_detail_url(sweet.id)}purchase/", {"quantity": 0}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "quantity"

    def test_boolean_quantity_returns_400(self, user_client, container):
        sweet = _by_name(container, "Caramel Fudge")
        response = user_client.post(
            f"{_detail_url(sweet.id)}purchase/", {"quantity": True}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "quantity"
        assert container.ledger.get(sweet.id).quantity == sweet.quantity

    def test_purchase_requires_session(self, api_client, container):
        sweet = _by_name(container, "Caramel Fudge")
        response = api_client.post(f"{_detail_url(sweet.id)}purchase/")
        assert response.status_code == 401
        assert container.ledger.get(sweet.id).quantity == sweet.quantity

    def test_purchase_missing_returns_404(self, user_client, container):
        response = user_client.post(f"{_detail_url('does-not-exist')}purchase/")
        assert response.status_code == 404


class TestRestock:
    def test_admin_restocks(self, admin_client, container):
        sweet = _by_name(container, "Vanilla Bean Cupcake")

        response = admin_client.post(
            f"{_detail_url(sweet.id)}restock/", {"quantity": 5}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["new_quantity"] == 5

    def test_user_gets_403(self, user_client, container):
        sweet = _by_name(container, "Vanilla Bean Cupcake")
        response = user_client.post(
            f"{_detail_url(sweet.id)}restock/", {"quantity": 5}, format="json"
        )
        assert response.status_code == 403
        assert container.ledger.get(sweet.id).quantity == 0

    @pytest.mark.parametrize(
        "body", [{}, {"quantity": 0}, {"quantity": -2}, {"quantity": True}]
    )
    def test_bad_quantity_returns_400(self, admin_client, container, body):
        sweet = _by_name(container, "Vanilla Bean Cupcake")
        response = admin_client.post(
            f"{_detail_url(sweet.id)}restock/", body, format="json"
        )
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "quantity"


# ===========================================================================
# End to end
# ===========================================================================


def test_new_customer_buys_after_restock(api_client, admin_client, container):
    registered = api_client.post(
        "/api/v1/auth/register/",
        {"name": "Alice", "email": "a@x.com", "password": "secret1"},
        format="json",
    )
    assert registered.status_code == 201

    login = api_client.post(
        "/api/v1/auth/login/", {"email": "a@x.com", "password": "secret1"}, format="json"
    )
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.json()['token']}")
    cupcake = _by_name(container, "Vanilla Bean Cupcake")
    purchase_url = f"{_detail_url(cupcake.id)}purchase/"

    assert api_client.post(purchase_url).status_code == 409

    restocked = admin_client.post(
        f"{_detail_url(cupcake.id)}restock/", {"quantity": 5}, format="json"
    )
    assert restocked.status_code == 200

    bought = api_client.post(purchase_url)
    assert bought.status_code == 200
    assert bought.json()["remaining_quantity"] == 4
