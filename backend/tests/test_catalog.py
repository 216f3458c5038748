from helpers import API, add_menu_item, auth


def test_owner_creates_and_lists_items(client, owner):
    item = add_menu_item(client, owner["token"], "Al Pastor", 5.00, "tacos", "pineapple")
    assert item["price"] == "5.00"
    assert item["status"] == "available"
    assert item["truckId"] == owner["user"]["truckId"]
    assert item["description"] == "pineapple"

    res = client.get(f"{API}/menuItem/view/{item['itemId']}", headers=auth(owner["token"]))
    assert res.status_code == 200
    assert res.json()["name"] == "Al Pastor"


def test_create_requires_name_price_category(client, owner):
    res = client.post(
        f"{API}/menuItem/new", json={"name": "Nothing", "category": "x"}, headers=auth(owner["token"])
    )
    assert res.status_code == 400
    res = client.post(
        f"{API}/menuItem/new",
        json={"name": "Free", "price": 0, "category": "x"},
        headers=auth(owner["token"]),
    )
    assert res.status_code == 400
    res = client.post(
        f"{API}/menuItem/new",
        json={"name": "Gold Taco", "price": "10000.01", "category": "x"},
        headers=auth(owner["token"]),
    )
    assert res.status_code == 400


def test_public_menu_and_category_filter(client, owner):
    truck_id = owner["user"]["truckId"]
    add_menu_item(client, owner["token"], "Al Pastor", 5, "tacos")
    add_menu_item(client, owner["token"], "Horchata", 2.5, "drinks")

    menu = client.get(f"{API}/menuItem/truck/{truck_id}").json()
    assert {i["name"] for i in menu} == {"Al Pastor", "Horchata"}

    drinks = client.get(f"{API}/menuItem/truck/{truck_id}/category/drinks").json()
    assert [i["name"] for i in drinks] == ["Horchata"]
    assert client.get(f"{API}/menuItem/truck/{truck_id}/category/Drinks").json() == []


def test_edit_and_soft_delete(client, owner):
    token = owner["token"]
    truck_id = owner["user"]["truckId"]
    item = add_menu_item(client, token, "Al Pastor", 5, "tacos")

    res = client.put(
        f"{API}/menuItem/edit/{item['itemId']}",
        json={"name": "Al Pastor XL", "price": "6.25", "category": "tacos"},
        headers=auth(token),
    )
    assert res.status_code == 200
    edited = client.get(f"{API}/menuItem/view/{item['itemId']}", headers=auth(token)).json()
    assert edited["name"] == "Al Pastor XL"
    assert edited["price"] == "6.25"

    res = client.delete(f"{API}/menuItem/delete/{item['itemId']}", headers=auth(token))
    assert res.status_code == 200
    assert client.get(f"{API}/menuItem/truck/{truck_id}").json() == []
    assert client.get(f"{API}/menuItem/view", headers=auth(token)).json() == []
    # the row survives with the status flipped
    withdrawn = client.get(f"{API}/menuItem/view/{item['itemId']}", headers=auth(token)).json()
    assert withdrawn["status"] == "unavailable"


def test_items_are_scoped_to_their_owner(client, owner, other_owner, customer):
    item = add_menu_item(client, owner["token"], "Al Pastor", 5, "tacos")
    url = f"{API}/menuItem/edit/{item['itemId']}"
    body = {"name": "Hijacked", "price": 1, "category": "tacos"}

    assert client.put(url, json=body, headers=auth(other_owner["token"])).status_code == 404
    assert client.delete(
        f"{API}/menuItem/delete/{item['itemId']}", headers=auth(other_owner["token"])
    ).status_code == 404
    assert client.get(
        f"{API}/menuItem/view/{item['itemId']}", headers=auth(other_owner["token"])
    ).status_code == 404
    assert client.put(url, json=body, headers=auth(customer["token"])).status_code == 403
    assert client.post(
        f"{API}/menuItem/new", json=body, headers=auth(customer["token"])
    ).status_code == 403


def test_trucks_view_lists_only_open_trucks(client, owner, other_owner):
    names = {t["truckName"] for t in client.get(f"{API}/trucks/view").json()}
    assert names == {"Taco Tank", "Omar's Truck"}

    res = client.put(
        f"{API}/trucks/updateOrderStatus",
        json={"orderStatus": "unavailable"},
        headers=auth(owner["token"]),
    )
    assert res.status_code == 200
    names = {t["truckName"] for t in client.get(f"{API}/trucks/view").json()}
    assert names == {"Omar's Truck"}

    res = client.put(
        f"{API}/trucks/updateOrderStatus",
        json={"orderStatus": "closed"},
        headers=auth(owner["token"]),
    )
    assert res.status_code == 400
