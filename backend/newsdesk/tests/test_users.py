def test_user_admin_requires_admin_role(client, make_user, auth_header):
	editor = make_user("editor_users@test.com", role="EDITOR")

	resp = client.get("/api/admin/users", headers=auth_header(editor.id, role="EDITOR"))
	assert resp.status_code == 403
	assert client.get("/api/admin/users").status_code == 401


def test_list_users_filters_and_counts_articles(client, make_user, auth_header, make_article):
	admin = make_user("admin_users@test.com", role="ADMIN")
	writer = make_user("saranya_writer@test.com", name="Saranya Writer", role="AUTHOR")
	make_user("saranya_reader@test.com", name="Saranya Reader", status="SUSPENDED")
	make_article("saranya-story", user_id=writer.id)

	resp = client.get("/api/admin/users?search=saranya", headers=auth_header(admin.id, role="ADMIN"))
	assert resp.status_code == 200
	data = resp.get_json()["data"]
	assert {u["email"] for u in data["users"]} == {"saranya_writer@test.com", "saranya_reader@test.com"}
	assert data["pagination"]["total_users"] == 2

	resp = client.get(
		"/api/admin/users?search=saranya&role=author",
		headers=auth_header(admin.id, role="ADMIN"),
	)
	users = resp.get_json()["data"]["users"]
	assert [u["email"] for u in users] == ["saranya_writer@test.com"]
	assert users[0]["article_count"] == 1

	resp = client.get(
		"/api/admin/users?search=saranya&status=SUSPENDED",
		headers=auth_header(admin.id, role="ADMIN"),
	)
	assert [u["email"] for u in resp.get_json()["data"]["users"]] == ["saranya_reader@test.com"]


def test_update_user_role_and_status(client, make_user, auth_header):
	admin = make_user("admin_promote@test.com", role="ADMIN")
	reader = make_user("promote_me@test.com")
	headers = auth_header(admin.id, role="ADMIN")

	resp = client.put(f"/api/admin/users/{reader.id}", json={"role": "EDITOR"}, headers=headers)
	assert resp.status_code == 200
	assert resp.get_json()["data"]["user"]["role"] == "EDITOR"

	resp = client.put(f"/api/admin/users/{reader.id}", json={"status": "SUSPENDED"}, headers=headers)
	assert resp.get_json()["data"]["user"]["status"] == "SUSPENDED"

	# suspended accounts can no longer sign in
	login = client.post("/api/auth/login", json={"email": "promote_me@test.com", "password": "Passw0rd!"})
	assert login.status_code == 403

	assert client.put(f"/api/admin/users/{reader.id}", json={}, headers=headers).status_code == 400
	assert client.put(f"/api/admin/users/{reader.id}", json={"role": "OWNER"}, headers=headers).status_code == 400
	assert client.put("/api/admin/users/999999", json={"role": "USER"}, headers=headers).status_code == 404


def test_delete_user_blocked_while_they_own_articles(client, make_user, auth_header, make_article):
	admin = make_user("admin_delete_users@test.com", role="ADMIN")
	headers = auth_header(admin.id, role="ADMIN")
	busy = make_user("busy_writer@test.com", role="AUTHOR")
	make_article("busy-writer-story", user_id=busy.id)
	idle_id = make_user("idle_writer@test.com", role="AUTHOR").id

	resp = client.delete(f"/api/admin/users/{busy.id}", headers=headers)
	assert resp.status_code == 400
	assert resp.get_json()["message"].startswith("Cannot delete user with articles")

	assert client.delete(f"/api/admin/users/{idle_id}", headers=headers).status_code == 200
	assert client.delete(f"/api/admin/users/{idle_id}", headers=headers).status_code == 404
