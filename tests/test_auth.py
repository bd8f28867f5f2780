PASSWORD = "secret123"


def test_signup_returns_token_and_profile(client):
    res = client.post(
        "/signup",
        json={"email": "  Ada@Example.com ", "password": PASSWORD, "first_name": "Ada", "last_name": "Lovelace"},
    )

    assert res.status_code == 201
    body = res.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "ada@example.com"
    assert body["user"]["last_name"] == "Lovelace"
    assert body["user"]["skills"] == []
    assert "token" in res.cookies


def test_signup_rejects_duplicate_email(client, signup):
    signup("Ada", email="ada@example.com")

    res = client.post(
        "/signup",
        json={"email": "ADA@example.com", "password": PASSWORD, "first_name": "Other"},
    )

    assert res.status_code == 409
    assert res.json()["error"] == "DuplicateEmail"


def test_signup_validates_input(client):
    weak = client.post("/signup", json={"email": "bob@example.com", "password": "short", "first_name": "Bob"})
    bad_email = client.post("/signup", json={"email": "bob", "password": PASSWORD, "first_name": "Bob"})
    blank_name = client.post("/signup", json={"email": "bob@example.com", "password": PASSWORD, "first_name": "  "})

    for res in (weak, bad_email, blank_name):
        assert res.status_code == 400
        assert res.json()["error"] == "InvalidInput"
    assert weak.json()["message"].startswith("password")


def test_login_and_cookie_session(client, signup):
    signup("Ada", email="ada@example.com")
    client.cookies.clear()

    res = client.post("/login", json={"email": "ada@example.com", "password": PASSWORD})
    assert res.status_code == 200

    # the cookie alone authenticates
    me = client.get("/profile/view")
    assert me.status_code == 200
    assert me.json()["first_name"] == "Ada"


def test_login_wrong_password_and_unknown_email_look_the_same(client, signup):
    signup("Ada", email="ada@example.com")

    wrong = client.post("/login", json={"email": "ada@example.com", "password": "nope12345"})
    unknown = client.post("/login", json={"email": "ghost@example.com", "password": PASSWORD})

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json()
    assert wrong.json()["error"] == "InvalidCredentials"


def test_logout_clears_cookie(client, signup):
    signup("Ada")

    res = client.post("/logout")
    assert res.status_code == 200
    assert "token" not in client.cookies
    assert client.get("/profile/view").status_code == 401


def test_premium_verify_stub(client, signup):
    _, headers = signup("Ada")

    res = client.get("/premium/verify", headers=headers)

    assert res.status_code == 200
    assert res.json() == {"is_premium": False, "membership_type": None}


def test_health(client):
    res = client.get("/health")

    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
    assert res.headers["cache-control"] == "no-store"
