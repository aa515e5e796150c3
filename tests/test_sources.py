import httpx
import pytest

from sharktank_tracker.errors import SourceError
from sharktank_tracker.sources import (
    KNOWN_UPDATES, OUTCOME_TEMPLATES, LookupOnlySource, MockCompanySource, WebsiteProber,
    extract_social_presence, name_hash, slugify, template_for, template_valuation,
)

NO_DELAY = (0, 0)


@pytest.mark.asyncio
async def test_known_company_comes_from_lookup_table():
    source = MockCompanySource(delay_ms=NO_DELAY)
    for _ in range(3):
        ring = await source.fetch("Ring", mode="quick")
        assert ring.current_status == "Acquired"
        assert ring.current_valuation == 1200000000
        assert ring.website == "https://ring.com"
        assert ring.id == "ring"


@pytest.mark.asyncio
async def test_unknown_company_maps_to_same_template_every_time():
    source = MockCompanySource(delay_ms=NO_DELAY)
    first = await source.fetch("Acme Widgets", mode="quick")
    second = await source.fetch("Acme Widgets", mode="quick")
    assert first == second
    tpl = template_for("Acme Widgets")
    assert tpl is OUTCOME_TEMPLATES[name_hash("Acme Widgets") % 4]
    assert first.current_status == tpl["status"]
    assert first.current_update == tpl["update"].format(name="Acme Widgets")
    assert first.sources == tpl["sources"]


@pytest.mark.asyncio
async def test_blank_name_is_a_source_error():
    with pytest.raises(SourceError):
        await MockCompanySource(delay_ms=NO_DELAY).fetch("  ")


def test_name_hash_sums_code_points():
    assert name_hash("ab") == 97 + 98
    assert slugify("Kahawa 1893!") == "kahawa-1893-"


def test_template_valuation_is_stable_and_in_range():
    v = template_valuation("Acme Widgets")
    assert v == template_valuation("Acme Widgets")
    assert 5_000_000 <= v < 55_000_000


@pytest.mark.asyncio
async def test_only_active_templates_carry_a_valuation():
    source = MockCompanySource(delay_ms=NO_DELAY)
    # one name per template bucket
    picks = {}
    for n in ("A", "B", "C", "D"):
        picks[name_hash(n) % 4] = n
    assert len(picks) == 4
    for idx, n in picks.items():
        update = await source.fetch(n, mode="quick")
        if OUTCOME_TEMPLATES[idx]["status"] == "Active":
            assert update.current_valuation is not None
        else:
            assert update.current_valuation is None


@pytest.mark.asyncio
async def test_full_mode_adds_news_and_social_metrics():
    update = await MockCompanySource(delay_ms=NO_DELAY).fetch("Bombas", mode="full")
    assert len(update.news_items) == 2
    assert update.news_items[0].title == "Bombas Reports Strong Q4 Performance"
    assert update.social_metrics.website_status in ("active", "inactive")
    quick = await MockCompanySource(delay_ms=NO_DELAY).fetch("Bombas", mode="quick")
    assert quick.news_items is None and quick.social_metrics is None


@pytest.mark.asyncio
async def test_lookup_only_source_skips_unknown_names():
    source = LookupOnlySource(delay_ms=NO_DELAY)
    assert await source.fetch("Acme Widgets") is None
    assert (await source.fetch("Everlywell", mode="quick")).current_valuation == KNOWN_UPDATES["Everlywell"]["valuation"]


def test_extract_social_presence():
    html = """
    <footer>
      <a href="https://twitter.com/scrubdaddy">tw</a>
      <a href="https://www.instagram.com/scrubdaddy/">ig</a>
      <a href="/about">about</a>
    </footer>"""
    presence = extract_social_presence(html)
    assert presence.twitter and presence.instagram
    assert not presence.facebook and not presence.linkedin


def _prober(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_prober_reports_active_site_with_social_links():
    def handler(request):
        return httpx.Response(200, html='<a href="https://linkedin.com/company/x">in</a>',
                              headers={"Last-Modified": "Wed, 01 Oct 2026 06:00:00 GMT"})

    async with _prober(handler) as client:
        metrics = await WebsiteProber(client).probe("https://www.example.com")
    assert metrics.website_status == "active"
    assert metrics.social_presence.linkedin
    assert metrics.last_website_update == "Wed, 01 Oct 2026 06:00:00 GMT"


@pytest.mark.asyncio
async def test_prober_detects_redirect_to_other_host():
    def handler(request):
        if request.url.host == "old.example":
            return httpx.Response(301, headers={"Location": "https://new.example/"})
        return httpx.Response(200, html="<p>moved</p>")

    async with _prober(handler) as client:
        metrics = await WebsiteProber(client).probe("https://old.example/")
    assert metrics.website_status == "redirected"


@pytest.mark.asyncio
async def test_prober_marks_errors_inactive():
    def server_error(request):
        return httpx.Response(503)

    def unreachable(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with _prober(server_error) as client:
        assert (await WebsiteProber(client).probe("https://down.example")).website_status == "inactive"
    async with _prober(unreachable) as client:
        assert (await WebsiteProber(client).probe("https://gone.example")).website_status == "inactive"


@pytest.mark.asyncio
async def test_full_mode_uses_prober_when_given():
    def handler(request):
        return httpx.Response(200, html='<a href="https://facebook.com/bombas">fb</a>')

    async with _prober(handler) as client:
        source = MockCompanySource(delay_ms=NO_DELAY, prober=WebsiteProber(client))
        update = await source.fetch("Bombas", mode="full")
    assert update.social_metrics.website_status == "active"
    assert update.social_metrics.social_presence.facebook
