def test_login_returns_tokens_with_role(client, make_user):
	make_user("editor_login@test.com", password="S3cret!pw", role="EDITOR")

	resp = client.post("/api/auth/login", json={"email": "Editor_Login@test.com", "password": "S3cret!pw"})
	assert resp.status_code == 200
	data = resp.get_json()["data"]
	assert data["access_token"]
	assert data["refresh_token"]
	assert data["user"]["role"] == "EDITOR"
	assert data["user"]["last_login"] is not None


def test_login_rejects_bad_password(client, make_user):
	make_user("bad_pw@test.com", password="S3cret!pw")

	resp = client.post("/api/auth/login", json={"email": "bad_pw@test.com", "password": "nope"})
	assert resp.status_code == 401
	assert resp.get_json()["message"] == "Invalid credentials"


def test_login_rejects_suspended_account(client, make_user):
	make_user("suspended@test.com", password="S3cret!pw", status="SUSPENDED")

	resp = client.post("/api/auth/login", json={"email": "suspended@test.com", "password": "S3cret!pw"})
	assert resp.status_code == 403


def test_login_validates_payload(client):
	resp = client.post("/api/auth/login", json={"email": "not-an-email"})
	assert resp.status_code == 400
	errors = resp.get_json()["errors"]
	assert "password" in errors


def test_refresh_issues_new_access_token(client, make_user):
	make_user("refresh_me@test.com", password="S3cret!pw", role="AUTHOR")
	login = client.post("/api/auth/login", json={"email": "refresh_me@test.com", "password": "S3cret!pw"})
	tokens = login.get_json()["data"]

	resp = client.post("/api/auth/refresh", headers={"Authorization": f"Bearer {tokens['refresh_token']}"})
	assert resp.status_code == 200
	data = resp.get_json()["data"]
	assert data["access_token"]
	assert data["user"]["role"] == "AUTHOR"

	# access tokens are not accepted in place of a refresh token
	resp = client.post("/api/auth/refresh", headers={"Authorization": f"Bearer {tokens['access_token']}"})
	assert resp.status_code == 422


def test_me_requires_token(client, make_user, auth_header):
	assert client.get("/api/auth/me").status_code == 401

	user = make_user("me@test.com", name="Meena")
	resp = client.get("/api/auth/me", headers=auth_header(user.id))
	assert resp.status_code == 200
	assert resp.get_json()["data"]["name"] == "Meena"


def test_health(client):
	resp = client.get("/api/health")
	assert resp.status_code == 200
	assert resp.get_json() == {"status": "ok", "service": "newsdesk-backend"}
