"""
API tests for the content admin routes
"""


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "running" in response.json()["message"]


def test_database_check(client, store):
    store.insert("contactUs", {"label": "Office", "content": "x"})
    data = client.get("/test").json()
    assert data["connection_status"] == "Connected"
    assert data["collections"] == ["contactUs"]


class TestProjects:

    def test_create_and_list(self, client, project_data):
        response = client.post("/api/admin/projects", json=project_data)
        assert response.status_code == 201
        data = response.json()
        assert data["title"] == project_data["title"]
        assert data["videoUrl"] == project_data["videoUrl"]
        assert data["embedUrl"] == "https://www.youtube.com/embed/dQw4w9WgXcQ?loop=1&playlist=dQw4w9WgXcQ"
        assert data["thumbnailUrl"] == "https://img.youtube.com/vi/dQw4w9WgXcQ/hqdefault.jpg"

        listed = client.get("/api/admin/projects").json()
        assert [p["id"] for p in listed] == [data["id"]]

    def test_invalid_url_for_platform_is_not_saved(self, client, store, project_data):
        project_data["platform"] = "facebook"
        response = client.post("/api/admin/projects", json=project_data)
        assert response.status_code == 422
        assert "valid Facebook URL" in response.text
        assert store.collections["Projects"] == {}

    def test_update_project(self, client, project_data):
        created = client.post("/api/admin/projects", json=project_data).json()
        project_data.update({
            "platform": "tiktok",
            "videoUrl": "https://www.tiktok.com/@visualarea/video/7234567890123456789",
        })
        response = client.put(f"/api/admin/projects/{created['id']}", json=project_data)
        assert response.status_code == 200
        data = response.json()
        assert data["embedUrl"] == "https://www.tiktok.com/embed/v2/7234567890123456789"
        assert data["thumbnailUrl"] is None

    def test_platform_inferred_when_omitted(self, client, project_data):
        del project_data["platform"]
        project_data["videoUrl"] = "https://www.instagram.com/reel/CxYz_12-ab/"
        response = client.post("/api/admin/projects", json=project_data)
        assert response.status_code == 201
        assert response.json()["platform"] == "instagram"

    def test_projects_have_no_seed_route(self, client):
        assert client.post("/api/admin/projects/seed").status_code == 405


class TestPricingPlans:

    def test_zero_price_rejected(self, client, store, pricing_plan_data):
        pricing_plan_data["price"] = 0
        response = client.post("/api/admin/pricing-plans", json=pricing_plan_data)
        assert response.status_code == 422
        assert store.collections["pricingPlans"] == {}

    def test_features_from_multiline_text(self, client, pricing_plan_data):
        data = client.post("/api/admin/pricing-plans", json=pricing_plan_data).json()
        assert data["features"] == ["Full Day Coverage", "Two Photographers", "Online Gallery"]
        assert data["isPopular"] is True

    def test_seed(self, client):
        assert client.post("/api/admin/pricing-plans/seed").json() == {"created": 3, "skipped": 0}
        assert len(client.get("/api/admin/pricing-plans").json()) == 3


class TestContacts:

    def test_delete_needs_confirmation(self, client, contact_data):
        created = client.post("/api/admin/contacts", json=contact_data).json()

        response = client.delete(f"/api/admin/contacts/{created['id']}")
        assert response.status_code == 400
        assert response.json()["code"] == "DELETE_NOT_CONFIRMED"

        response = client.delete(f"/api/admin/contacts/{created['id']}", params={"confirm": "true"})
        assert response.status_code == 200
        assert client.get("/api/admin/contacts").json() == []

        response = client.delete(f"/api/admin/contacts/{created['id']}", params={"confirm": "true"})
        assert response.status_code == 404

    def test_missing_is_main_defaults_false(self, client, store):
        store.insert("contactUs", {"contactType": "phone", "label": "Support", "content": "+1 (555) 123-4567"})
        [contact] = client.get("/api/admin/contacts").json()
        assert contact["isMain"] is False
        assert contact["icon"] == "lucide:phone"

    def test_numeric_content_is_listed(self, client, store):
        store.insert("contactUs", {"contactType": "phone", "label": "Support", "content": 15551234567})
        response = client.get("/api/admin/contacts")
        assert response.status_code == 200
        assert response.json()[0]["content"] == "15551234567"

    def test_invalid_id(self, client, contact_data):
        response = client.put("/api/admin/contacts/not-an-id", json=contact_data)
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ID"


class TestStoreUnavailable:

    def test_list_degrades_to_empty(self, client, store):
        store.insert("socialLinks", {"platform": "Instagram", "url": "https://instagram.com/visualarea"})
        store.fail = True
        response = client.get("/api/admin/social-links")
        assert response.status_code == 200
        assert response.json() == []

    def test_write_returns_503(self, client, store, contact_data):
        store.fail = True
        response = client.post("/api/admin/contacts", json=contact_data)
        assert response.status_code == 503
        assert response.json()["detail"] == "Error saving contact. Please try again."


class TestParallaxAndSocial:

    def test_parallax_roundtrip_uses_background_url(self, client):
        response = client.post("/api/admin/parallax-sections", json={
            "title": "Capture Your Moments",
            "imageUrl": "https://img.example.com/hero.jpg",
        })
        assert response.status_code == 201
        assert response.json()["backgroundUrl"] == "https://img.example.com/hero.jpg"

    def test_social_link_requires_url(self, client):
        response = client.post("/api/admin/social-links", json={"platform": "Instagram", "url": ""})
        assert response.status_code == 422


class TestVideoHelpers:

    def test_platforms(self, client):
        platforms = client.get("/api/platforms").json()
        assert [p["platform"] for p in platforms] == ["youtube", "facebook", "instagram", "tiktok"]

    def test_resolve_infers_platform(self, client):
        data = client.post("/api/video/resolve", json={"url": "https://vm.tiktok.com/ABC123"}).json()
        assert data["platform"] == "tiktok"
        assert data["valid"] is True
        assert data["embedUrl"] == "https://vm.tiktok.com/ABC123"
        assert data["thumbnailUrl"] is None

    def test_resolve_unknown_platform(self, client):
        response = client.post("/api/video/resolve", json={"url": "https://example.com/random"})
        assert response.status_code == 422
        assert response.json()["code"] == "UNSUPPORTED_PLATFORM"

    def test_validate(self, client):
        data = client.post("/api/video/validate", json={
            "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "platform": "instagram",
        }).json()
        assert data == {"valid": False, "message": "This URL doesn't appear to be a valid Instagram URL"}
