import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from sharktank_tracker.config import REFRESH_BATCH_DELAY_MS, REFRESH_BATCH_SIZE
from sharktank_tracker.models import CompanyUpdate
from sharktank_tracker.sources import SCRAPING_SOURCES, CompanySource

log = logging.getLogger("tracker.refresh")

SIGNIFICANT_VALUATION = 100_000_000


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class RefreshResult:
    data: List[CompanyUpdate] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    scraped_at: str = field(default_factory=utc_now_iso)
    mode: str = "full"

    @property
    def count(self) -> int:
        return len(self.data)

    def envelope(self) -> Dict:
        return {
            "success": True,
            "data": [u.to_json() for u in self.data],
            "scrapedAt": self.scraped_at,
            "count": self.count,
            "errors": list(self.errors),
            "sources": [s["name"] for s in SCRAPING_SOURCES],
            "mode": self.mode,
        }


def batched(items: Sequence, size: int):
    for i in range(0, len(items), size):
        yield items[i:i + size]


async def _fetch_one(source: CompanySource, name: str, mode: str):
    try:
        return name, await source.fetch(name, mode), None
    except Exception as e:
        log.error("failed to refresh %s: %s", name, e)
        return name, None, f"{name}: {e}"


async def refresh_companies(
    names: Sequence[str],
    source: CompanySource,
    mode: str = "full",
    batch_size: int = REFRESH_BATCH_SIZE,
    batch_delay: Optional[float] = None,
) -> RefreshResult:
    """Look up `names` through `source` in concurrent batches.

    Batches run one after another with `batch_delay` seconds between them.
    Lookups returning None are dropped; lookups that raise land in `errors`.
    """
    if batch_delay is None:
        batch_delay = REFRESH_BATCH_DELAY_MS / 1000
    names = list(names)
    batch_size = max(1, batch_size)
    n_batches = (len(names) + batch_size - 1) // batch_size
    result = RefreshResult(mode=mode)

    for i, batch in enumerate(batched(names, batch_size), start=1):
        log.info("processing batch %d/%d", i, n_batches)
        for name, update, error in await asyncio.gather(*[_fetch_one(source, n, mode) for n in batch]):
            if error:
                result.errors.append(error)
            elif update is not None:
                result.data.append(update)
        if i < n_batches and batch_delay > 0:
            await asyncio.sleep(batch_delay)

    log.info("refreshed %d/%d companies", result.count, len(names))
    if result.errors:
        log.warning("%d errors during refresh", len(result.errors))
    for u in significant_updates(result.data):
        log.info("significant update: %s is %s (valuation %s)", u.name, u.current_status, u.current_valuation)
    return result


def significant_updates(updates: List[CompanyUpdate]) -> List[CompanyUpdate]:
    return [
        u for u in updates
        if u.current_status in ("Acquired", "Closed")
        or (u.current_valuation or 0) > SIGNIFICANT_VALUATION
    ]
