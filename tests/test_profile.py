PASSWORD = "secret123"


def test_edit_profile_updates_fields(client, signup):
    user_id, headers = signup("Ada")

    res = client.patch(
        "/profile/edit",
        headers=headers,
        json={
            "age": 29,
            "gender": "female",
            "about": "Analytical engines",
            "skills": [" python ", "math", "python", ""],
            "photo_url": "https://example.com/ada.png",
        },
    )

    assert res.status_code == 200, res.text
    body = res.json()
    assert body["user_id"] == user_id
    assert body["age"] == 29
    assert body["skills"] == ["python", "math"]
    assert body["first_name"] == "Ada"

    view = client.get("/profile/view", headers=headers).json()
    assert view["about"] == "Analytical engines"


def test_edit_profile_rejects_minor_before_writing(client, signup):
    _, headers = signup("Ada")
    client.patch("/profile/edit", headers=headers, json={"age": 30})

    res = client.patch("/profile/edit", headers=headers, json={"age": 15, "about": "changed"})

    assert res.status_code == 400
    assert res.json()["error"] == "InvalidInput"
    assert res.json()["message"].startswith("age")
    view = client.get("/profile/view", headers=headers).json()
    assert view["age"] == 30
    assert view["about"] is None


def test_edit_profile_rejects_unknown_and_blank_fields(client, signup):
    _, headers = signup("Ada")

    unknown = client.patch("/profile/edit", headers=headers, json={"email": "new@example.com"})
    blank = client.patch("/profile/edit", headers=headers, json={"first_name": "   "})
    gender = client.patch("/profile/edit", headers=headers, json={"gender": "robot"})
    skills = client.patch("/profile/edit", headers=headers, json={"skills": [f"s{i}" for i in range(21)]})

    for res in (unknown, blank, gender, skills):
        assert res.status_code == 400
        assert res.json()["error"] == "InvalidInput"


def test_change_password(client, signup):
    user_id, headers = signup("Ada", email="ada@example.com")

    bad = client.patch(
        "/profile/password",
        headers=headers,
        json={"current_password": "wrong-one1", "new_password": "another123"},
    )
    assert bad.status_code == 401

    ok = client.patch(
        "/profile/password",
        headers=headers,
        json={"current_password": PASSWORD, "new_password": "another123"},
    )
    assert ok.status_code == 200

    assert client.post("/login", json={"email": "ada@example.com", "password": PASSWORD}).status_code == 401
    assert client.post("/login", json={"email": "ada@example.com", "password": "another123"}).status_code == 200


def test_photo_must_be_a_url_reference(client, signup):
    _, headers = signup("Ada")
    data_url = "data:image/png;base64," + "A" * 4096

    res = client.patch("/profile/edit", headers=headers, json={"photo_url": data_url})

    assert res.status_code == 400
    assert res.json()["message"].startswith("photo_url")
