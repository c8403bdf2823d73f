"""
API tests: shops, products and the category tree.
"""

from decimal import Decimal

import pytest
import pytest_asyncio

from app.domains.ecommerce.domain.value_objects import RoleName

pytestmark = pytest.mark.integration


@pytest_asyncio.fixture
async def owner(api_client, create_user):
    """A user that owns the shop "Gadget Hub"."""
    user_id, headers = await create_user("owner@email.com")
    response = await api_client.post(
        f"/shops/user/{user_id}",
        json={"name": "Gadget Hub", "contact_email": "hub@email.com", "description": "Phones and laptops"},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return {"id": user_id, "headers": headers, "shop_id": response.json()["id"]}


@pytest_asyncio.fixture
async def admin_headers(create_user):
    _, headers = await create_user("admin@email.com", roles=[RoleName.ADMIN.value])
    return headers


# ==================== Shops ====================


class TestShops:
    async def test_opening_a_shop_grants_the_owner_role(self, api_client, owner):
        me = (await api_client.get("/auth/me", headers=owner["headers"])).json()
        assert RoleName.SHOP_OWNER.value in me["roles"]
        assert me["shop_id"] == owner["shop_id"]

        shop = (await api_client.get(f"/shops/{owner['shop_id']}")).json()
        assert shop["name"] == "Gadget Hub"
        assert shop["owner_id"] == owner["id"]
        assert shop["products"] == []
        assert shop["orders"] == []

    async def test_lookups(self, api_client, owner):
        assert (await api_client.get("/shops/by-name", params={"name": "Gadget Hub"})).json()["id"] == owner["shop_id"]
        assert (await api_client.get(f"/shops/user/{owner['id']}")).json()["id"] == owner["shop_id"]
        assert [s["id"] for s in (await api_client.get("/shops")).json()] == [owner["shop_id"]]
        assert (await api_client.get("/shops/by-name", params={"name": "Nope"})).status_code == 404

    async def test_one_shop_per_user_and_unique_names(self, api_client, owner, create_user):
        again = await api_client.post(f"/shops/user/{owner['id']}", json={"name": "Second"}, headers=owner["headers"])
        assert again.status_code == 409

        other_id, other = await create_user("other@email.com")
        taken = await api_client.post(f"/shops/user/{other_id}", json={"name": "Gadget Hub"}, headers=other)
        assert taken.status_code == 409

    async def test_only_owner_or_admin_can_change_a_shop(self, api_client, owner, create_user, admin_headers):
        _, stranger = await create_user("stranger@email.com")
        shop_url = f"/shops/{owner['shop_id']}"

        assert (await api_client.put(shop_url, json={"name": "Mine"}, headers=stranger)).status_code == 403
        hijack = await api_client.post(f"/shops/user/{owner['id']}", json={"name": "X"}, headers=stranger)
        assert hijack.status_code == 403

        response = await api_client.put(shop_url, json={"description": "Updated"}, headers=owner["headers"])
        assert response.status_code == 200
        assert response.json()["description"] == "Updated"
        assert response.json()["name"] == "Gadget Hub"

        response = await api_client.put(shop_url, json={"name": "Gadget Hub Pro"}, headers=admin_headers)
        assert response.json()["name"] == "Gadget Hub Pro"

    async def test_delete_shop_revokes_owner_role(self, api_client, owner, sample_product_payload):
        products_url = f"/products/shop/{owner['shop_id']}"
        await api_client.post(products_url, json=sample_product_payload, headers=owner["headers"])

        response = await api_client.delete(f"/shops/{owner['shop_id']}", headers=owner["headers"])
        assert response.status_code == 204

        me = (await api_client.get("/auth/me", headers=owner["headers"])).json()
        assert RoleName.SHOP_OWNER.value not in me["roles"]
        assert me["shop_id"] is None
        assert (await api_client.get("/products", params={"brand": "Samsung"})).json() == []


# ==================== Products ====================


class TestProducts:
    async def test_add_and_query_product(self, api_client, owner, sample_product_payload):
        response = await api_client.post(
            f"/products/shop/{owner['shop_id']}", json=sample_product_payload, headers=owner["headers"]
        )
        assert response.status_code == 201
        product = response.json()
        assert Decimal(product["price"]) == Decimal("899.99")
        assert product["category"]["name"] == "Smartphones"
        assert product["shop_id"] == owner["shop_id"]
        assert product["images"] == []

        assert (await api_client.get(f"/products/{product['id']}")).json()["name"] == "Galaxy S24"
        assert len((await api_client.get("/products", params={"brand": "samsung"})).json()) == 1
        assert (await api_client.get("/products/count", params={"brand": "Samsung"})).json() == {"count": 1}
        assert len((await api_client.get("/products/by-parent-category", params={"name": "Electronics"})).json()) == 1
        by_name = await api_client.get(
            "/products/by-shop-and-name", params={"shop_name": "gadget hub", "product_name": "galaxy s24"}
        )
        assert by_name.json()["id"] == product["id"]
        assert (await api_client.get(f"/products/shop/{owner['shop_id']}/count")).json() == {"count": 1}
        assert (await api_client.get(f"/shops/{owner['shop_id']}/products/count")).json() == {"count": 1}

        shop = (await api_client.get(f"/shops/{owner['shop_id']}")).json()
        assert [p["id"] for p in shop["products"]] == [product["id"]]

    async def test_duplicate_name_in_shop(self, api_client, owner, sample_product_payload):
        url = f"/products/shop/{owner['shop_id']}"
        await api_client.post(url, json=sample_product_payload, headers=owner["headers"])
        response = await api_client.post(url, json=sample_product_payload, headers=owner["headers"])
        assert response.status_code == 409

    async def test_only_the_shop_can_add_products(self, api_client, owner, create_user, sample_product_payload):
        _, stranger = await create_user("stranger@email.com")
        url = f"/products/shop/{owner['shop_id']}"
        response = await api_client.post(url, json=sample_product_payload, headers=stranger)
        assert response.status_code == 403

    async def test_update_and_delete(self, api_client, owner, sample_product_payload):
        created = (
            await api_client.post(
                f"/products/shop/{owner['shop_id']}", json=sample_product_payload, headers=owner["headers"]
            )
        ).json()
        url = f"/products/shop/{owner['shop_id']}/{created['id']}"

        response = await api_client.put(
            url, json={"price": "799.00", "inventory": 3, "category_name": "Phones"}, headers=owner["headers"]
        )
        assert response.status_code == 200
        assert Decimal(response.json()["price"]) == Decimal("799.00")
        assert response.json()["inventory"] == 3
        assert response.json()["category"]["name"] == "Phones"

        assert (await api_client.delete(url, headers=owner["headers"])).status_code == 204
        assert (await api_client.get(f"/products/{created['id']}")).status_code == 404

    async def test_negative_inventory_is_rejected(self, api_client, owner, sample_product_payload):
        payload = {**sample_product_payload, "inventory": -1}
        response = await api_client.post(f"/products/shop/{owner['shop_id']}", json=payload, headers=owner["headers"])
        assert response.status_code == 422

    async def test_unknown_shop(self, api_client):
        response = await api_client.get("/products/shop/999")
        assert response.status_code == 404


# ==================== Categories ====================


class TestCategories:
    async def test_category_writes_need_admin(self, api_client, create_user):
        _, user = await create_user("jane@email.com")
        response = await api_client.post("/categories", json={"name": "Books"}, headers=user)
        assert response.status_code == 403

    async def test_tree_navigation(self, api_client, admin_headers):
        for name, parent in (("Computers", "Electronics"), ("Laptop", "Computers"), ("Phones", "Electronics")):
            payload = {"name": name, "parent_name": parent}
            response = await api_client.post("/categories", json=payload, headers=admin_headers)
            assert response.status_code == 201

        electronics = (await api_client.get("/categories/by-name/Electronics")).json()
        laptop = (await api_client.get("/categories/by-name/Laptop")).json()

        top = await api_client.get("/categories/top-level")
        assert [c["name"] for c in top.json()] == ["Electronics"]

        children = await api_client.get(f"/categories/{electronics['id']}/subcategories")
        assert [c["name"] for c in children.json()] == ["Computers", "Phones"]

        everything = await api_client.get("/categories/by-name/Electronics/subcategories/all")
        assert [c["name"] for c in everything.json()] == ["Computers", "Laptop", "Phones"]

        path = await api_client.get(f"/categories/{laptop['id']}/path")
        assert path.json() == ["Electronics", "Computers", "Laptop"]

        parents = await api_client.get(f"/categories/{laptop['id']}/parents")
        assert [c["name"] for c in parents.json()] == ["Computers", "Electronics"]

    async def test_update_and_delete_rules(self, api_client, admin_headers):
        await api_client.post("/categories", json={"name": "Laptop", "parent_name": "Computers"}, headers=admin_headers)
        computers = (await api_client.get("/categories/by-name/Computers")).json()
        laptop = (await api_client.get("/categories/by-name/Laptop")).json()

        cycle = await api_client.put(
            f"/categories/{computers['id']}", json={"parent_name": "Laptop"}, headers=admin_headers
        )
        assert cycle.status_code == 400
        assert cycle.json()["details"]["rule"] == "category_cycle"

        blocked = await api_client.delete(f"/categories/{computers['id']}", headers=admin_headers)
        assert blocked.status_code == 400

        moved = await api_client.put(f"/categories/{laptop['id']}", json={"parent_name": ""}, headers=admin_headers)
        assert moved.json()["parent_id"] is None
        assert (await api_client.delete(f"/categories/{computers['id']}", headers=admin_headers)).status_code == 204

    async def test_category_cannot_be_its_own_parent(self, api_client, admin_headers):
        created = await api_client.post("/categories", json={"name": "Computers"}, headers=admin_headers)
        category_id = created.json()["id"]

        response = await api_client.put(
            f"/categories/{category_id}", json={"parent_name": "Computers"}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["details"]["rule"] == "category_cycle"
        assert (await api_client.get(f"/categories/{category_id}")).json()["parent_id"] is None

        # On creation the same mistake is still an input error
        looped = await api_client.post(
            "/categories", json={"name": "Loop", "parent_name": "Loop"}, headers=admin_headers
        )
        assert looped.status_code == 422

    async def test_duplicate_category(self, api_client, admin_headers):
        await api_client.post("/categories", json={"name": "Books"}, headers=admin_headers)
        response = await api_client.post("/categories", json={"name": "Books"}, headers=admin_headers)
        assert response.status_code == 409
