import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from sharktank_tracker.models import Company, CompanyUpdate

log = logging.getLogger("tracker.catalog")

ALL = "all"


@dataclass(frozen=True)
class CatalogFilter:
    search: str = ""
    season: str = ALL
    deal_status: str = ALL
    current_status: str = ALL
    shark: str = ALL

    @property
    def is_active(self):
        return self != CatalogFilter()

    def cleared(self) -> "CatalogFilter":
        return CatalogFilter()

    def matches(self, c):
        term = self.search.strip().lower()
        if term and not (
            term in c.name.lower()
            or term in c.industry.lower()
            or any(term in f.lower() for f in c.founders)
        ):
            return False
        if self.season != ALL and str(c.season) != str(self.season):
            return False
        if self.deal_status != ALL and c.deal_status != self.deal_status:
            return False
        if self.current_status != ALL and c.current_status != self.current_status:
            return False
        if self.shark != ALL and not (c.deal_details and self.shark in c.deal_details.sharks):
            return False
        return True


def filter_companies(companies, flt):
    return [c for c in companies if flt.matches(c)]


def company_stats(companies):
    total = len(companies)

    def count(attr, value):
        return sum(1 for c in companies if getattr(c, attr) == value)

    got_deal = count("deal_status", "Got Deal")
    valued = [c.current_valuation for c in companies if c.current_valuation]
    total_valuation = sum(valued)
    return {
        "total": total,
        "dealStatus": {
            "gotDeal": got_deal,
            "noDeal": count("deal_status", "No Deal"),
            "dealFellThrough": count("deal_status", "Deal Fell Through"),
        },
        "currentStatus": {
            "active": count("current_status", "Active"),
            "closed": count("current_status", "Closed"),
            "acquired": count("current_status", "Acquired"),
        },
        "dealSuccessRate": round(got_deal / total * 100) if total else 0,
        "totalValuation": total_valuation,
        "averageValuation": total_valuation / len(valued) if valued else 0,
    }


def format_currency(amount):
    if amount >= 1_000_000_000:
        return f"${amount / 1_000_000_000:.1f}B"
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.1f}M"
    return f"${amount:,.0f}"


def apply_updates(companies: List[Company], updates: List[CompanyUpdate]) -> List[Company]:
    # matched by name, case-insensitive; valuation and website only when the update has one
    by_name = {u.name.lower(): u for u in updates}
    out = []
    for c in companies:
        u = by_name.get(c.name.lower())
        if u is None:
            out.append(c)
            continue
        out.append(c.model_copy(update={
            "current_status": u.current_status,
            "current_valuation": u.current_valuation or c.current_valuation,
            "current_update": u.current_update,
            "website": u.website or c.website,
            "last_updated": date.fromisoformat(u.last_updated[:10]),
        }))
    return out


def validate_updates(updates):
    return all(u.name and u.current_status and u.current_update and u.last_updated for u in updates)


class Catalog:
    """Process-wide holder of the record set; refreshes swap the whole list."""

    def __init__(self, companies):
        self._companies = list(companies)

    @property
    def companies(self) -> List[Company]:
        return self._companies

    def __len__(self):
        return len(self._companies)

    def get(self, company_id: str) -> Optional[Company]:
        for c in self._companies:
            if c.id == company_id:
                return c
        return None

    def replace(self, companies):
        self._companies = list(companies)
        log.info("catalog replaced (%d companies)", len(companies))


def performance_trend(c):
    """'up' for acquisitions or a tenfold climb over the original ask, 'down' when closed."""
    if c.current_status == "Acquired" or (c.current_valuation or 0) > c.original_ask.amount * 10:
        return "up"
    if c.current_status == "Closed":
        return "down"
    return "flat"
