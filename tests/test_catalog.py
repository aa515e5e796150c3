from datetime import date

from sharktank_tracker.catalog import (
    Catalog, CatalogFilter, apply_updates, company_stats, filter_companies,
    format_currency, performance_trend, validate_updates,
)
from sharktank_tracker.models import CompanyUpdate


def names(companies):
    return [c.name for c in companies]


def test_default_filter_is_inactive_and_keeps_everything(companies):
    flt = CatalogFilter()
    assert not flt.is_active
    assert filter_companies(companies, flt) == companies


def test_search_scrub_finds_scrub_daddy_only(companies):
    assert names(filter_companies(companies, CatalogFilter(search="Scrub"))) == ["Scrub Daddy"]


def test_search_is_case_insensitive_and_covers_founders_and_industry(companies):
    assert names(filter_companies(companies, CatalogFilter(search="jamie siminoff"))) == ["Ring"]
    found = filter_companies(companies, CatalogFilter(search="baby products"))
    assert names(found) == ["Ezpz"]


def test_season_filter(companies):
    found = filter_companies(companies, CatalogFilter(season="4"))
    assert found
    assert all(c.season == 4 for c in found)
    assert len(found) == sum(1 for c in companies if c.season == 4)


def test_filters_combine_as_intersection(companies):
    flt = CatalogFilter(season="5", current_status="Active")
    found = filter_companies(companies, flt)
    assert sorted(names(found)) == ["Kodiak Cakes", "Tipsy Elves"]
    assert all(c.season == 5 and c.current_status == "Active" for c in found)


def test_deal_status_filter(companies):
    found = filter_companies(companies, CatalogFilter(deal_status="No Deal"))
    assert sorted(names(found)) == ["Kodiak Cakes", "Ring"]


def test_shark_filter_skips_companies_without_a_deal(companies):
    found = filter_companies(companies, CatalogFilter(shark="Mark Cuban"))
    assert found
    assert all(c.deal_details and "Mark Cuban" in c.deal_details.sharks for c in found)
    assert "Ring" not in names(found)


def test_clearing_filters_restores_full_set(companies):
    flt = CatalogFilter(search="zzz", season="3")
    assert filter_companies(companies, flt) == []
    assert flt.is_active
    assert len(filter_companies(companies, flt.cleared())) == len(companies)


def test_stats(companies):
    s = company_stats(companies)
    assert s["total"] == 33
    assert s["dealStatus"] == {"gotDeal": 31, "noDeal": 2, "dealFellThrough": 0}
    assert s["currentStatus"] == {"active": 27, "closed": 2, "acquired": 4}
    assert s["dealSuccessRate"] == 94
    valued = [c.current_valuation for c in companies if c.current_valuation]
    assert s["totalValuation"] == sum(valued)
    assert s["averageValuation"] == sum(valued) / len(valued)


def test_stats_on_empty_set():
    s = company_stats([])
    assert s["total"] == 0
    assert s["dealSuccessRate"] == 0
    assert s["averageValuation"] == 0


def test_format_currency():
    assert format_currency(1_200_000_000) == "$1.2B"
    assert format_currency(350_000_000) == "$350.0M"
    assert format_currency(75_000) == "$75,000"


def test_performance_trend(companies):
    by_name = {c.name: c for c in companies}
    assert performance_trend(by_name["Ring"]) == "up"
    assert performance_trend(by_name["Breathometer"]) == "down"
    unvalued = by_name["Cupboard Pro"].model_copy(update={"current_valuation": None})
    assert performance_trend(unvalued) == "flat"


def test_apply_updates_merges_matching_names(companies):
    update = CompanyUpdate(
        id="ring", name="ring", current_status="Acquired", current_update="Still growing",
        last_updated="2026-10-01",
    )
    merged = apply_updates(companies, [update])
    ring = next(c for c in merged if c.name == "Ring")
    assert ring.current_update == "Still growing"
    assert ring.last_updated == date(2026, 10, 1)
    # no valuation or website in the update: the old ones stay
    assert ring.current_valuation == 1200000000
    assert ring.website == "https://ring.com"
    assert len(merged) == len(companies)
    assert [c for c in merged if c.name != "Ring"] == [c for c in companies if c.name != "Ring"]


def test_validate_updates():
    ok = CompanyUpdate(id="a", name="A", current_status="Active", current_update="x", last_updated="2026-01-01")
    bad = ok.model_copy(update={"current_update": ""})
    assert validate_updates([ok])
    assert not validate_updates([ok, bad])


def test_catalog_replace_swaps_whole_list(companies):
    catalog = Catalog(companies)
    assert catalog.get("scrub-daddy").name == "Scrub Daddy"
    catalog.replace(companies[:2])
    assert len(catalog) == 2
    assert catalog.get("scrub-daddy") is None
