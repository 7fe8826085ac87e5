"""
Tests for the admin settings page, the refresh action and the admin footer.
"""
import pytest
import responses
from django.contrib.auth.models import User
from django.core.cache import cache
from django.urls import reverse

from fakes import API_URL, SAMPLE_PAYLOAD
from hello_homer.key_generators import QUOTE_CACHE_KEY
from hello_homer.options import CACHE_TIME_OPTION, DAY_IN_SECONDS, OptionStore, load_settings
from hello_homer.quote import Quote

pytestmark = pytest.mark.django_db

CACHED_QUOTE = Quote(
    text="Me fail English? That's unpossible!",
    episode_title="Lisa on Ice",
    season=6,
    image_url="https://frinkiac.com/img/S06E08/391000.jpg",
)


@pytest.fixture
def staff_client(client):
    user = User.objects.create_user("lisa", password="saxophone-solo", is_staff=True)
    client.force_login(user)
    return client


@pytest.fixture
def regular_client(client):
    user = User.objects.create_user("bart", password="eat-my-shorts")
    client.force_login(user)
    return client


def prime_cache():
    cache.set(QUOTE_CACHE_KEY, CACHED_QUOTE.to_dict(), timeout=3600)


class TestSettingsPage:
    def test_anonymous_is_sent_to_login(self, client):
        response = client.get(reverse("hello_homer:settings"))

        assert response.status_code == 302
        assert "/admin/login/" in response["Location"]

    def test_non_staff_is_sent_to_login(self, regular_client):
        response = regular_client.get(reverse("hello_homer:settings"))

        assert response.status_code == 302

    def test_get_shows_current_values(self, staff_client):
        prime_cache()
        OptionStore().set(CACHE_TIME_OPTION, DAY_IN_SECONDS)

        response = staff_client.get(reverse("hello_homer:settings"))

        assert response.status_code == 200
        assert response.context["form"].initial["cache_time"] == DAY_IN_SECONDS
        content = response.content.decode()
        assert "Hello Homer Settings" in content
        assert "Show Screenshot" in content
        assert "Get New Quote Now" in content
        for seconds in ("3600", "86400", "604800"):
            assert f'value="{seconds}"' in content

    def test_post_saves_settings(self, staff_client):
        response = staff_client.post(
            reverse("hello_homer:settings"),
            {"show_image": "no", "show_episode": "yes", "cache_time": "604800"},
        )

        assert response.status_code == 302
        assert response["Location"] == reverse("hello_homer:settings")
        saved = load_settings()
        assert saved.show_image is False
        assert saved.show_episode is True
        assert saved.cache_duration_seconds == 604800

    def test_post_rejects_unknown_duration(self, staff_client):
        prime_cache()

        response = staff_client.post(
            reverse("hello_homer:settings"),
            {"show_image": "yes", "show_episode": "yes", "cache_time": "60"},
        )

        assert response.status_code == 200
        assert "cache_time" in response.context["form"].errors
        assert OptionStore().get(CACHE_TIME_OPTION) is None


class TestRefresh:
    def test_refresh_deletes_cached_quote(self, staff_client):
        prime_cache()

        response = staff_client.post(reverse("hello_homer:refresh"))

        assert response.status_code == 204
        assert response.content == b""
        assert cache.get(QUOTE_CACHE_KEY) is None

    @responses.activate
    def test_next_lookup_after_refresh_fetches(self, staff_client):
        prime_cache()
        responses.add(responses.GET, API_URL, json=SAMPLE_PAYLOAD, status=200)

        staff_client.post(reverse("hello_homer:refresh"))
        response = staff_client.get(reverse("hello_homer:quote"))

        assert len(responses.calls) == 1
        assert response.json()["episode_title"] == "Trilogy of Error"

    def test_refresh_requires_staff(self, regular_client):
        prime_cache()

        assert regular_client.post(reverse("hello_homer:refresh")).status_code == 403
        assert cache.get(QUOTE_CACHE_KEY) == CACHED_QUOTE.to_dict()

    def test_refresh_rejects_get(self, staff_client):
        assert staff_client.get(reverse("hello_homer:refresh")).status_code == 405


class TestCurrentQuoteAPI:
    def test_returns_cached_quote(self, staff_client):
        prime_cache()

        response = staff_client.get(reverse("hello_homer:quote"))

        assert response.status_code == 200
        assert response.json() == {
            "text": CACHED_QUOTE.text,
            "episode_title": "Lisa on Ice",
            "season": 6,
            "image_url": CACHED_QUOTE.image_url,
            "is_fallback": False,
        }

    @responses.activate
    def test_returns_fallback_on_api_failure(self, staff_client):
        responses.add(responses.GET, API_URL, status=502)

        data = staff_client.get(reverse("hello_homer:quote")).json()

        assert data["is_fallback"] is True
        assert data["episode_title"] == ""
        assert data["season"] is None

    def test_requires_staff(self, client):
        assert client.get(reverse("hello_homer:quote")).status_code == 403


class TestAdminFooter:
    def test_footer_shows_cached_quote(self, staff_client):
        prime_cache()

        content = staff_client.get(reverse("admin:index")).content.decode()

        assert '<div id="homer">' in content
        assert "That's unpossible!" in content
        assert "Season 6 - Lisa on Ice" in content
        assert "hello_homer/homer.css" in content

    def test_footer_respects_settings(self, staff_client):
        prime_cache()
        OptionStore().set("hello_homer_show_image", "no")
        OptionStore().set("hello_homer_show_episode", "no")

        content = staff_client.get(reverse("admin:index")).content.decode()

        assert '<div id="homer">' in content
        assert "frinkiac.com/img" not in content
        assert "homer-episode" not in content

    @responses.activate
    def test_footer_shows_fallback_when_api_is_down(self, staff_client):
        responses.add(responses.GET, API_URL, status=500)

        response = staff_client.get(reverse("admin:index"))

        assert response.status_code == 200
        assert "We couldn't connect to the API!" in response.content.decode()
        assert cache.get(QUOTE_CACHE_KEY) is None

    def test_login_page_has_no_quote(self, client):
        response = client.get(reverse("admin:login"))

        assert '<div id="homer">' not in response.content.decode()

    def test_option_changelist_links_to_settings(self, client):
        admin = User.objects.create_superuser("homer", password="mmm-donuts-123")
        client.force_login(admin)
        prime_cache()

        response = client.get(reverse("admin:hello_homer_option_changelist"))

        assert response.status_code == 200
        assert reverse("hello_homer:settings") in response.content.decode()
