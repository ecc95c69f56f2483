# tests/test_products.py
import asyncio


def _ids(products):
    return [p["id"] for p in products]


def test_first_product_gets_id_zero(client, add_product):
    body = add_product(name="First")
    assert body == {"success": True, "name": "First"}
    assert _ids(client.get("/allproducts").json()) == [0]


def test_ids_follow_max_plus_one(client, add_product):
    for name in ("a", "b", "c"):
        add_product(name=name)
    assert _ids(client.get("/allproducts").json()) == [0, 1, 2]

    # Removing a middle product does not reuse ids
    client.post("/removeproduct", json={"id": 1})
    add_product(name="d")
    assert _ids(client.get("/allproducts").json()) == [0, 2, 3]

    # Removing the highest one does
    client.post("/removeproduct", json={"id": 3})
    add_product(name="e")
    assert _ids(client.get("/allproducts").json()) == [0, 2, 3]


def test_remove_product(client, add_product):
    add_product(name="a")
    add_product(name="b")
    r = client.post("/removeproduct", json={"id": 0})
    assert r.json() == {"success": True, "message": "Product removed"}
    assert 0 not in _ids(client.get("/allproducts").json())


def test_remove_unknown_product_is_success(client):
    r = client.post("/removeproduct", json={"id": 42})
    assert r.status_code == 200
    assert r.json()["success"] is True


def test_all_products_projection(client, add_product):
    add_product(name="Shirt", category="men", new_price=50.0, old_price=80.5)
    [product] = client.get("/allproducts").json()
    assert product == {
        "id": 0,
        "name": "Shirt",
        "image": "http://testserver/images/x.png",
        "category": "men",
        "new_price": 50.0,
        "old_price": 80.5,
        "available": True,
    }


def test_add_product_requires_fields(client):
    r = client.post("/addproduct", json={"name": "incomplete"})
    assert r.status_code == 422


def test_new_collections_small_catalog(client, add_product):
    for i in range(3):
        add_product(name=f"p{i}")
    products = client.get("/newcollections").json()
    assert _ids(products) == [0, 1, 2]
    assert "date" in products[0]


def test_new_collections_returns_last_eight(client, add_product):
    for i in range(11):
        add_product(name=f"p{i}")
    products = client.get("/newcollections").json()
    assert len(products) == 8
    assert _ids(products) == list(range(3, 11))


def test_new_collections_empty(client):
    assert client.get("/newcollections").json() == []


def test_popular_in_women(client, add_product):
    add_product(name="m0", category="men")
    for i in range(5):
        add_product(name=f"w{i}", category="women")
    add_product(name="k0", category="kid")

    products = client.get("/popularinwomen").json()
    assert [p["name"] for p in products] == ["w0", "w1", "w2", "w3"]
    assert all(p["category"] == "women" for p in products)


def test_popular_in_women_fewer_than_four(client, add_product):
    add_product(name="w0", category="women")
    add_product(name="m0", category="men")
    assert [p["name"] for p in client.get("/popularinwomen").json()] == ["w0"]


def test_concurrent_adds_get_distinct_ids(run_concurrently):
    async def scenario(ac):
        results = await asyncio.gather(
            *[
                ac.post(
                    "/addproduct",
                    json={
                        "name": f"p{i}",
                        "image": "img",
                        "category": "men",
                        "new_price": 1.0,
                        "old_price": 2.0,
                    },
                )
                for i in range(10)
            ]
        )
        assert all(r.status_code == 200 for r in results)
        return (await ac.get("/allproducts")).json()

    products = run_concurrently(scenario)
    assert sorted(_ids(products)) == list(range(10))
