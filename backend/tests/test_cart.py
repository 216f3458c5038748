from foodtruck.errors import ConflictError
from foodtruck.repositories.cart_repo import CartRepository
from foodtruck.services.cart_service import CartService
from helpers import API, add_menu_item, add_to_cart, auth


def test_add_and_view_cart(client, owner, customer):
    x = add_menu_item(client, owner["token"], "X", 5.00)
    y = add_menu_item(client, owner["token"], "Y", 3.50)

    res = add_to_cart(client, customer["token"], x["itemId"], 2)
    assert res.status_code == 200
    assert "cartId" in res.json()
    assert add_to_cart(client, customer["token"], y["itemId"]).status_code == 200

    cart = client.get(f"{API}/cart/view", headers=auth(customer["token"])).json()
    assert cart["truckId"] == owner["user"]["truckId"]
    assert [(l["itemName"], l["quantity"], l["price"]) for l in cart["items"]] == [
        ("X", 2, "5.00"),
        ("Y", 1, "3.50"),
    ]
    assert cart["items"][0]["lineTotal"] == "10.00"
    assert cart["totalPrice"] == "13.50"


def test_cart_is_restricted_to_one_truck(client, owner, other_owner, customer):
    mine = add_menu_item(client, owner["token"], "Taco", 4)
    theirs = add_menu_item(client, other_owner["token"], "Kebab", 7)

    assert add_to_cart(client, customer["token"], mine["itemId"]).status_code == 200
    res = add_to_cart(client, customer["token"], theirs["itemId"])
    assert res.status_code == 409
    assert res.json()["detail"] == "Cannot order from multiple trucks"

    cart = client.get(f"{API}/cart/view", headers=auth(customer["token"])).json()
    assert [l["itemName"] for l in cart["items"]] == ["Taco"]


def test_cannot_add_missing_or_withdrawn_item(client, owner, customer):
    item = add_menu_item(client, owner["token"], "Taco", 4)
    client.delete(f"{API}/menuItem/delete/{item['itemId']}", headers=auth(owner["token"]))

    assert add_to_cart(client, customer["token"], item["itemId"]).status_code == 404
    assert add_to_cart(client, customer["token"], 9999).status_code == 404
    assert add_to_cart(client, customer["token"], item["itemId"], 0).status_code == 400


def test_client_cannot_choose_the_price(client, owner, customer):
    item = add_menu_item(client, owner["token"], "Taco", 4)
    res = client.post(
        f"{API}/cart/new",
        json={"itemId": item["itemId"], "quantity": 1, "price": 0.01},
        headers=auth(customer["token"]),
    )
    assert res.status_code == 200
    cart = client.get(f"{API}/cart/view", headers=auth(customer["token"])).json()
    assert cart["items"][0]["price"] == "4.00"


def test_edit_and_remove(client, owner, customer):
    item = add_menu_item(client, owner["token"], "Taco", 4)
    cart_id = add_to_cart(client, customer["token"], item["itemId"]).json()["cartId"]

    res = client.put(f"{API}/cart/edit/{cart_id}", json={"quantity": 3}, headers=auth(customer["token"]))
    assert res.status_code == 200
    cart = client.get(f"{API}/cart/view", headers=auth(customer["token"])).json()
    assert cart["items"][0]["quantity"] == 3

    res = client.put(f"{API}/cart/edit/{cart_id}", json={"quantity": 0}, headers=auth(customer["token"]))
    assert res.status_code == 400
    assert res.json()["detail"] == "Valid quantity is required"

    res = client.delete(f"{API}/cart/delete/{cart_id}", headers=auth(customer["token"]))
    assert res.status_code == 200
    cart = client.get(f"{API}/cart/view", headers=auth(customer["token"])).json()
    assert cart == {"truckId": None, "items": [], "totalPrice": "0.00"}


def test_other_customer_cannot_touch_my_cart(client, owner, customer, other_customer):
    item = add_menu_item(client, owner["token"], "Taco", 4)
    cart_id = add_to_cart(client, customer["token"], item["itemId"]).json()["cartId"]
    intruder = auth(other_customer["token"])

    assert client.put(f"{API}/cart/edit/{cart_id}", json={"quantity": 9}, headers=intruder).status_code == 404
    assert client.delete(f"{API}/cart/delete/{cart_id}", headers=intruder).status_code == 404
    assert client.get(f"{API}/cart/view", headers=intruder).json()["items"] == []

    cart = client.get(f"{API}/cart/view", headers=auth(customer["token"])).json()
    assert cart["items"][0]["quantity"] == 1


def test_quantity_has_an_upper_bound(client, owner, customer):
    item = add_menu_item(client, owner["token"], "Taco", 4)
    assert add_to_cart(client, customer["token"], item["itemId"], 10**20).status_code == 400
    assert add_to_cart(client, customer["token"], item["itemId"], 1001).status_code == 400

    cart_id = add_to_cart(client, customer["token"], item["itemId"], 1000).json()["cartId"]
    res = client.put(
        f"{API}/cart/edit/{cart_id}", json={"quantity": 10**20}, headers=auth(customer["token"])
    )
    assert res.status_code == 400
    assert res.json()["detail"] == "Valid quantity is required"


def test_adds_for_one_customer_are_serialised(app, client, owner, other_owner, customer, settings, monkeypatch):
    taco = add_menu_item(client, owner["token"], "Taco", 4)
    kebab = add_menu_item(client, other_owner["token"], "Kebab", 7)
    impatient = settings.model_copy(update={"USER_LOCK_TIMEOUT_SECONDS": 0.1})
    original_truck_of_cart = CartRepository.truck_of_cart
    outcomes = []

    def truck_of_cart_racing(self, user_id):
        # a second add from another truck arrives between the check and the insert
        if not outcomes:
            other = app.state.db.session()
            try:
                CartService(other, impatient).add_item(user_id, kebab["itemId"], 1)
                outcomes.append("added")
            except ConflictError:
                outcomes.append("refused")
            finally:
                other.close()
        return original_truck_of_cart(self, user_id)

    monkeypatch.setattr(CartRepository, "truck_of_cart", truck_of_cart_racing)
    assert add_to_cart(client, customer["token"], taco["itemId"]).status_code == 200
    assert outcomes == ["refused"]

    cart = client.get(f"{API}/cart/view", headers=auth(customer["token"])).json()
    assert cart["truckId"] == owner["user"]["truckId"]
    assert [l["itemName"] for l in cart["items"]] == ["Taco"]
