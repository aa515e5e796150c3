import json

import pytest
from pydantic import ValidationError

from sharktank_tracker.dataset import COMPANIES, INDUSTRIES, MAJOR_COMPANIES, load_companies
from sharktank_tracker.models import Company
from sharktank_tracker.sources import KNOWN_UPDATES


def test_deal_details_present_iff_got_deal(companies):
    for c in companies:
        assert (c.deal_details is not None) == (c.deal_status == "Got Deal"), c.id


def test_ids_unique(companies):
    ids = [c.id for c in companies]
    assert len(ids) == len(set(ids))


def test_industries_and_statuses_are_known(companies):
    for c in companies:
        assert c.industry in INDUSTRIES
        assert c.current_status in ("Active", "Closed", "Acquired")


def test_major_companies_all_have_lookup_records():
    assert set(MAJOR_COMPANIES) <= set(KNOWN_UPDATES)


def test_record_rejects_deal_details_without_deal():
    row = dict(COMPANIES[0], deal_status="No Deal")
    with pytest.raises(ValidationError):
        Company.model_validate(row)


def test_record_rejects_missing_deal_details():
    row = {k: v for k, v in COMPANIES[0].items() if k != "deal_details"}
    with pytest.raises(ValidationError):
        Company.model_validate(row)


def test_records_are_frozen(companies):
    with pytest.raises(ValidationError):
        companies[0].name = "Something Else"


def test_serialises_with_camel_case(companies):
    ring = next(c for c in companies if c.name == "Ring")
    out = ring.to_json()
    assert out["dealStatus"] == "No Deal"
    assert out["currentValuation"] == 1200000000
    assert out["originalAsk"]["amount"] == 700000
    assert "dealDetails" not in out
    assert out["lastUpdated"] == "2024-01-15"


def test_load_companies_from_json_override(tmp_path, companies):
    path = tmp_path / "companies.json"
    path.write_text(json.dumps([companies[0].to_json()]), encoding="utf-8")
    loaded = load_companies(str(path))
    assert [c.id for c in loaded] == [companies[0].id]


def test_load_companies_falls_back_to_bundled_set(tmp_path):
    assert len(load_companies(str(tmp_path / "missing.json"))) == len(COMPANIES)
