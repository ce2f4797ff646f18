from datetime import datetime

from newsdesk.services import author_service


def test_list_authors_defaults_to_active(client, make_author):
	make_author("kavya_active@reporters.test", name="Kavya Active")
	make_author("kavya_gone@reporters.test", name="Kavya Gone", status="INACTIVE")

	resp = client.get("/api/authors?search=kavya")
	assert resp.status_code == 200
	data = resp.get_json()["data"]
	names = [a["name"] for a in data["authors"]]
	assert names == ["Kavya Active"]
	assert data["pagination"]["total_authors"] == 1

	resp = client.get("/api/authors?search=kavya&status=inactive")
	assert [a["name"] for a in resp.get_json()["data"]["authors"]] == ["Kavya Gone"]


def test_get_author_includes_published_articles(client, make_author, make_article):
	author = make_author("profile@reporters.test", name="Profile Reporter")
	make_article("profile-published", author=author)
	make_article("profile-draft", author=author, status="DRAFT")

	resp = client.get(f"/api/authors/{author.id}")
	assert resp.status_code == 200
	data = resp.get_json()["data"]["author"]
	assert data["article_count"] == 1
	assert [a["slug"] for a in data["articles"]] == ["profile-published"]

	assert client.get("/api/authors/999999").status_code == 404


def test_author_stats_window(app, db_session, make_author, make_article):
	author = make_author("stats@reporters.test", name="Stats Reporter")
	make_article("stats-recent", author=author, views=300, published_at=datetime(2025, 10, 2))
	make_article("stats-recent-2", author=author, views=100, published_at=datetime(2025, 10, 20))
	make_article("stats-old", author=author, views=200, published_at=datetime(2024, 1, 5))
	make_article("stats-draft", author=author, status="DRAFT", views=999)

	stats = author_service.author_stats(author.id, now=datetime(2025, 11, 7))
	assert stats["total_articles"] == 3
	assert stats["total_views"] == 600
	assert stats["average_views"] == 200
	assert stats["articles_by_month"] == {"2025-10": 2}


def test_create_author_as_editor(client, make_user, auth_header):
	editor = make_user("editor_author@test.com", role="EDITOR")
	headers = auth_header(editor.id, role="EDITOR")
	payload = {
		"name": "Arun Kumar",
		"email": "Arun@Reporters.test",
		"bio": "Covers civic issues across the western suburbs.",
		"specialties": ["Civic", "Transport"],
		"social_links": {"twitter": "https://twitter.com/arun"},
	}

	resp = client.post("/api/authors", json=payload, headers=headers)
	assert resp.status_code == 201
	author = resp.get_json()["data"]["author"]
	assert author["email"] == "arun@reporters.test"
	assert author["specialties"] == ["Civic", "Transport"]
	assert author["social_links"] == {"twitter": "https://twitter.com/arun"}

	dup = client.post("/api/authors", json=payload, headers=headers)
	assert dup.status_code == 400


def test_create_author_rejects_comma_specialty(client, make_user, auth_header):
	editor = make_user("editor_author2@test.com", role="EDITOR")
	resp = client.post(
		"/api/authors",
		json={
			"name": "Comma Person",
			"email": "comma@reporters.test",
			"bio": "Writes about everything at once.",
			"specialties": ["Sports, Cricket"],
		},
		headers=auth_header(editor.id, role="EDITOR"),
	)
	assert resp.status_code == 400
	assert "specialties" in resp.get_json()["errors"]


def test_update_and_delete_author(client, make_user, auth_header, make_author, make_article):
	admin = make_user("admin_author@test.com", role="ADMIN")
	headers = auth_header(admin.id, role="ADMIN")
	author = make_author("update_me@reporters.test")

	resp = client.put(f"/api/authors/{author.id}", json={"location": "Pollachi", "verified": True}, headers=headers)
	assert resp.status_code == 200
	data = resp.get_json()["data"]["author"]
	assert data["location"] == "Pollachi"
	assert data["verified"] is True

	busy = make_author("busy_author@reporters.test")
	make_article("busy-author-story", author=busy)
	assert client.delete(f"/api/authors/{busy.id}", headers=headers).status_code == 400
	assert client.delete(f"/api/authors/{author.id}", headers=headers).status_code == 200


def test_delete_author_admin_only(client, make_user, auth_header, make_author):
	editor = make_user("editor_del_author@test.com", role="EDITOR")
	author = make_author("protected@reporters.test")
	resp = client.delete(f"/api/authors/{author.id}", headers=auth_header(editor.id, role="EDITOR"))
	assert resp.status_code == 403


def test_months_before_uses_calendar_months():
	assert author_service.months_before(datetime(2025, 11, 7, 9, 30), 6) == datetime(2025, 5, 7, 9, 30)
	assert author_service.months_before(datetime(2025, 3, 15), 6) == datetime(2024, 9, 15)
	assert author_service.months_before(datetime(2025, 8, 31), 6) == datetime(2025, 2, 28)


def test_author_stats_window_is_six_calendar_months(app, db_session, make_author, make_article):
	author = make_author("stats_edge@reporters.test", name="Edge Reporter")
	make_article("stats-edge-inside", author=author, published_at=datetime(2025, 5, 7, 12, 0))
	make_article("stats-edge-outside", author=author, published_at=datetime(2025, 5, 6, 23, 0))

	stats = author_service.author_stats(author.id, now=datetime(2025, 11, 7))
	assert stats["total_articles"] == 2
	assert stats["articles_by_month"] == {"2025-05": 1}
