"""End-to-end tests for the HTTP surface."""

import pytest
from conftest import FOREIGN_ORIGIN, SITE_ORIGIN, valid_form
from fastapi.testclient import TestClient

from brickstone.app import create_app


def fetch_token(client) -> str:
    response = client.get("/csrf-token")
    assert response.status_code == 200
    return response.json()["token"]


def post_contact(client, origin=SITE_ORIGIN, **fields):
    headers = {"Origin": origin} if origin else {}
    return client.post("/contact", data=valid_form(**fields), headers=headers)


class TestPages:
    """Tests for the page and health routes."""

    def test_index_served(self, client):
        """Test the landing page carries the contact form."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'id="contact-form"' in response.text
        assert response.headers["x-content-type-options"] == "nosniff"

    def test_status_messages_start_hidden(self, client):
        """Test status and error elements are hidden without any stylesheet."""
        html = client.get("/").text

        assert '<p id="form-success" role="status" hidden>' in html
        assert '<p id="form-error" role="alert" hidden>' in html
        assert html.count('<p class="error-message" role="alert" hidden>') == 4
        assert 'class="hidden"' not in html

    def test_property_filter_markup(self, client):
        """Test every borough has a filter button and at least one card."""
        html = client.get("/").text

        for borough in ("manhattan", "brooklyn", "queens", "bronx", "staten-island"):
            assert f'class="filter-btn" data-filter="{borough}"' in html
            assert f'class="property-card" data-borough="{borough}"' in html
        assert 'data-filter="all"' in html
        assert 'id="borough-select"' in html

    @pytest.mark.parametrize("script", ["contact-form.js", "property-filter.js"])
    def test_scripts_served(self, client, script):
        """Test the page scripts are served and referenced."""
        response = client.get(f"/static/js/{script}")

        assert response.status_code == 200
        assert f"/static/js/{script}" in client.get("/").text

    def test_static_not_cached(self, client):
        """Test static assets are served without caching."""
        response = client.get("/static/js/contact-form.js")

        assert response.status_code == 200
        assert "no-store" in response.headers["cache-control"]
        assert response.headers["x-content-type-options"] == "nosniff"

    def test_health(self, client):
        """Test the health endpoint reports live sessions."""
        fetch_token(client)

        response = client.get("/health")

        assert response.json() == {"status": "healthy", "sessions": 1}


class TestTokenEndpoint:
    """Tests for GET /csrf-token."""

    def test_issues_token_and_cookie(self, client):
        """Test first contact sets the session cookie."""
        response = client.get("/csrf-token")

        assert response.status_code == 200
        assert len(response.json()["token"]) == 64
        cookie = response.headers["set-cookie"].lower()
        assert cookie.startswith("brickstone_session=")
        assert "httponly" in cookie
        assert "samesite=strict" in cookie
        assert "no-store" in response.headers["cache-control"]

    def test_token_stable_within_session(self, client):
        """Test repeated requests return the same token."""
        first = client.get("/csrf-token")
        second = client.get("/csrf-token")

        assert first.json() == second.json()
        assert "set-cookie" not in second.headers

    def test_new_client_gets_new_token(self, container):
        """Test separate browsers get separate tokens."""
        app = create_app(container)
        first = fetch_token(TestClient(app))
        second = fetch_token(TestClient(app))

        assert first != second

    def test_unknown_cookie_replaced(self, client):
        """Test a forged session ID is not adopted."""
        response = client.get(
            "/csrf-token", headers={"Cookie": "brickstone_session=attacker-chosen"}
        )

        assert response.status_code == 200
        assert "attacker-chosen" not in response.headers["set-cookie"]

    @pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
    def test_other_methods_rejected(self, client, method):
        """Test only GET is served."""
        response = client.request(method, "/csrf-token")

        assert response.status_code == 405
        assert response.headers["allow"] == "GET"
        assert response.json() == {"success": False, "error": "Method not allowed."}

    def test_foreign_origin_rejected(self, client):
        """Test cross-site token requests are refused."""
        response = client.get("/csrf-token", headers={"Origin": FOREIGN_ORIGIN})

        assert response.status_code == 403
        assert response.json() == {"success": False, "error": "Forbidden."}


class TestContactEndpoint:
    """Tests for POST /contact."""

    def test_full_flow(self, client, fake_mailer):
        """Test a page visit followed by a valid submission."""
        token = fetch_token(client)

        response = post_contact(client, csrf_token=token)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert "no-store" in response.headers["cache-control"]
        assert len(fake_mailer.sent) == 1
        assert fake_mailer.sent[0]["subject"] == (
            "New Rental Enquiry from Jane Rivera | Brickstone Realty Group"
        )

    def test_get_rejected(self, client):
        """Test only POST is served."""
        response = client.get("/contact")

        assert response.status_code == 405
        assert response.headers["allow"] == "POST"

    def test_cross_site_rejected(self, client, fake_mailer):
        """Test a foreign origin cannot submit."""
        token = fetch_token(client)

        response = post_contact(client, origin=FOREIGN_ORIGIN, csrf_token=token)

        assert response.status_code == 403
        assert fake_mailer.sent == []

    def test_referer_accepted(self, client):
        """Test browsers that omit Origin are served by Referer."""
        token = fetch_token(client)

        response = client.post(
            "/contact",
            data=valid_form(csrf_token=token),
            headers={"Referer": f"{SITE_ORIGIN}/"},
        )

        assert response.status_code == 200

    def test_token_refetch_after_submit(self, client):
        """Test the next submission needs the rotated token."""
        first_token = fetch_token(client)
        post_contact(client, csrf_token=first_token)

        replay = post_contact(client, csrf_token=first_token)
        second_token = fetch_token(client)
        fresh = post_contact(client, csrf_token=second_token)

        assert replay.status_code == 403
        assert second_token != first_token
        assert fresh.status_code == 200

    def test_rate_limit_header(self, client):
        """Test the fourth send in a window carries Retry-After."""
        for _ in range(3):
            assert post_contact(client, csrf_token=fetch_token(client)).status_code == 200

        response = post_contact(client, csrf_token=fetch_token(client))

        assert response.status_code == 429
        assert int(response.headers["retry-after"]) <= 600

    def test_validation_error(self, client):
        """Test field errors come back as 422."""
        response = post_contact(client, csrf_token=fetch_token(client), email="nope")

        assert response.status_code == 422
        assert response.json() == {
            "success": False,
            "error": "A valid email address is required.",
        }

    def test_honeypot_without_session(self, client, fake_mailer):
        """Test bots see success without ever getting a session."""
        response = post_contact(client, website="spam")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert "set-cookie" not in response.headers
        assert fake_mailer.sent == []

    def test_unexpected_error_hidden(self, container, fake_mailer):
        """Test unexpected failures return a generic 500."""

        def explode(*args):
            raise RuntimeError("relay exploded at 10.0.0.5")

        fake_mailer.send = explode
        client = TestClient(create_app(container), raise_server_exceptions=False)
        token = fetch_token(client)

        response = post_contact(client, csrf_token=token)

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error."}


class TestLifespan:
    """Tests for startup and shutdown."""

    def test_sweeper_runs_with_app(self, container):
        """Test the session sweeper lives exactly as long as the app."""
        with TestClient(create_app(container)) as client:
            assert container.session_sweeper.running is True
            client.get("/health")

        assert container.session_sweeper.running is False

    def test_idle_sessions_swept(self, container, fake_clock):
        """Test sessions from token fetches do not outlive their TTL."""
        with TestClient(create_app(container)) as client:
            for _ in range(50):
                TestClient(client.app).get("/csrf-token")
            assert client.get("/health").json()["sessions"] == 50

            fake_clock.advance(10 * 7200)
            container.session_sweeper.sweep()

            assert client.get("/health").json()["sessions"] == 0
