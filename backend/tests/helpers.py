API = "/api/v1"
PASSWORD = "s3cret-pass"
PICKUP = "2030-01-01T12:30:00Z"


def auth(token):
    return {"Authorization": f"Bearer {token}"}


def register(client, name, email, role="customer", **extra):
    body = {"name": name, "email": email, "password": PASSWORD, "role": role}
    body.update(extra)
    res = client.post(f"{API}/user", json=body)
    assert res.status_code == 201, res.text
    return res.json()["user"]


def login(client, email, password=PASSWORD):
    res = client.post(f"{API}/user/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return res.json()["token"]


def add_menu_item(client, token, name, price, category="mains", description=None):
    body = {"name": name, "price": price, "category": category}
    if description is not None:
        body["description"] = description
    res = client.post(f"{API}/menuItem/new", json=body, headers=auth(token))
    assert res.status_code == 200, res.text
    items = client.get(f"{API}/menuItem/view", headers=auth(token)).json()
    return next(i for i in items if i["name"] == name)


def add_to_cart(client, token, item_id, quantity=1):
    return client.post(
        f"{API}/cart/new", json={"itemId": item_id, "quantity": quantity}, headers=auth(token)
    )
