def test_list_categories_counts_published_only(client, make_category, make_article):
	cat = make_category(name="Civic Desk", slug="civic-desk", sort_order=50)
	make_article("civic-published-story", category=cat)
	make_article("civic-draft-story", category=cat, status="DRAFT")

	resp = client.get("/api/categories")
	assert resp.status_code == 200
	cats = {c["slug"]: c for c in resp.get_json()["data"]["categories"]}
	assert cats["civic-desk"]["article_count"] == 1


def test_category_by_slug_paginates_published(client, make_category, make_article):
	cat = make_category(name="Weather Desk", slug="weather-desk")
	for i in range(3):
		make_article(f"weather-story-{i}", category=cat)

	resp = client.get("/api/categories/slug/weather-desk?limit=2")
	assert resp.status_code == 200
	data = resp.get_json()["data"]
	assert data["category"]["name"] == "Weather Desk"
	assert len(data["category"]["articles"]) == 2
	assert data["pagination"]["total_articles"] == 3
	assert data["pagination"]["total_pages"] == 2
	assert data["pagination"]["has_next_page"] is True

	assert client.get("/api/categories/slug/no-such-desk").status_code == 404


def test_create_category_requires_staff(client, make_user, auth_header):
	reader = make_user("reader_cat@test.com")
	resp = client.post(
		"/api/categories",
		json={"name": "Health Desk"},
		headers=auth_header(reader.id, role="USER"),
	)
	assert resp.status_code == 403
	assert resp.get_json()["payload"]["code"] == "ROLE_FORBIDDEN"


def test_create_and_rename_category(client, make_user, auth_header):
	editor = make_user("editor_cat@test.com", role="EDITOR")
	headers = auth_header(editor.id, role="EDITOR")

	resp = client.post(
		"/api/categories",
		json={"name": "Health & Wellness", "color": "#12AB34"},
		headers=headers,
	)
	assert resp.status_code == 201
	created = resp.get_json()["data"]["category"]
	assert created["slug"] == "health-and-wellness"

	dup = client.post("/api/categories", json={"name": "Health & Wellness"}, headers=headers)
	assert dup.status_code == 400

	resp = client.put(f"/api/categories/{created['id']}", json={"name": "Wellness Desk"}, headers=headers)
	assert resp.status_code == 200
	assert resp.get_json()["data"]["category"]["slug"] == "wellness-desk"


def test_create_category_rejects_bad_color(client, make_user, auth_header):
	editor = make_user("editor_color@test.com", role="EDITOR")
	resp = client.post(
		"/api/categories",
		json={"name": "Color Desk", "color": "red"},
		headers=auth_header(editor.id, role="EDITOR"),
	)
	assert resp.status_code == 400
	assert "color" in resp.get_json()["errors"]


def test_delete_category_blocked_while_in_use(client, make_user, auth_header, make_category, make_article):
	admin = make_user("admin_cat@test.com", role="ADMIN")
	headers = auth_header(admin.id, role="ADMIN")
	used = make_category(name="Busy Desk", slug="busy-desk")
	make_article("busy-desk-story", category=used)
	empty_id = make_category(name="Empty Desk", slug="empty-desk").id

	assert client.delete(f"/api/categories/{used.id}", headers=headers).status_code == 400
	assert client.delete(f"/api/categories/{empty_id}", headers=headers).status_code == 200
	assert client.get(f"/api/categories/{empty_id}").status_code == 404


def test_delete_category_admin_only(client, make_user, auth_header, make_category):
	editor = make_user("editor_del_cat@test.com", role="EDITOR")
	cat = make_category(name="Keep Desk", slug="keep-desk")
	resp = client.delete(f"/api/categories/{cat.id}", headers=auth_header(editor.id, role="EDITOR"))
	assert resp.status_code == 403


def test_rename_category_to_symbols_only_is_rejected(client, make_user, auth_header, make_category):
	admin = make_user("admin_symbols@test.com", role="ADMIN")
	cat = make_category(name="Symbol Desk", slug="symbol-desk")
	cat_id = cat.id

	resp = client.put(f"/api/categories/{cat_id}", json={"name": "!!!"}, headers=auth_header(admin.id, role="ADMIN"))
	assert resp.status_code == 400
	assert resp.get_json()["message"] == "Category name must contain letters or digits"

	data = client.get(f"/api/categories/{cat_id}").get_json()["data"]["category"]
	assert data["name"] == "Symbol Desk"
	assert data["slug"] == "symbol-desk"
