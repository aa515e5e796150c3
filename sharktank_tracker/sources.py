import asyncio
import logging
import random
import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Protocol

import httpx
from bs4 import BeautifulSoup

from sharktank_tracker.config import HTTP_TIMEOUT, REFRESH_LOOKUP_DELAY_MS
from sharktank_tracker.errors import SourceError
from sharktank_tracker.models import CompanyUpdate, NewsItem, SocialMetrics, SocialPresence

log = logging.getLogger("tracker.sources")

# where a real acquisition would read from; reported back by the refresh handler
SCRAPING_SOURCES = [
    {"name": "Shark Tank Blog", "url": "https://sharktankblog.com", "type": "news"},
    {"name": "Shark Tank Success", "url": "https://sharktanksuccess.blogspot.com", "type": "news"},
    {"name": "CNBC Shark Tank", "url": "https://www.cnbc.com/shark-tank", "type": "news"},
    {"name": "ABC Shark Tank", "url": "https://abc.com/shows/shark-tank", "type": "news"},
    {"name": "Crunchbase", "url": "https://www.crunchbase.com", "type": "database"},
    {"name": "PitchBook", "url": "https://pitchbook.com", "type": "database"},
]

KNOWN_UPDATES = {
    "Scrub Daddy": {
        "status": "Active",
        "valuation": 350000000,
        "update": "Scrub Daddy continues to dominate the cleaning market with over $350M in lifetime sales. Recently launched new product lines including Scrub Mommy and expanded internationally to 15+ countries. The company maintains strong retail partnerships with major chains and continues to innovate with new cleaning solutions.",
        "website": "https://scrubdaddy.com"
    },
    "Bombas": {
        "status": "Active",
        "valuation": 300000000,
        "update": "Bombas has donated over 100 million items to homeless shelters and continues rapid growth with $300M+ valuation. Expanded product line beyond socks to include underwear and t-shirts. Strong social impact mission drives customer loyalty and brand recognition.",
        "website": "https://bombas.com"
    },
    "Ring": {
        "status": "Acquired",
        "valuation": 1200000000,
        "update": "Ring continues to grow under Amazon ownership, now valued at over $1.2B. Expanded product ecosystem includes security cameras, alarm systems, and smart home integration. Became a cornerstone of Amazon's smart home strategy with millions of devices sold.",
        "website": "https://ring.com"
    },
    "Kodiak Cakes": {
        "status": "Active",
        "valuation": 400000000,
        "update": "Kodiak Cakes reached $400M valuation with major retail expansion. Launched new protein products and continues to dominate the healthy breakfast market without shark investment. Proves that rejection doesn't mean failure with consistent double-digit growth.",
        "website": "https://kodiakcakes.com"
    },
    "Squatty Potty": {
        "status": "Active",
        "valuation": 90000000,
        "update": "Squatty Potty maintains strong sales with over $90M in revenue. Viral marketing campaigns continue to drive brand awareness. Expanded product line includes travel versions and different heights for various needs.",
        "website": "https://squattypotty.com"
    },
    "The Comfy": {
        "status": "Active",
        "valuation": 80000000,
        "update": "The Comfy achieved massive viral success with over $80M in sales. Strong social media presence and seasonal marketing campaigns drive consistent growth. Expanded to multiple color and size options with international shipping.",
        "website": "https://thecomfy.com"
    },
    "Everlywell": {
        "status": "Active",
        "valuation": 3200000000,
        "update": "Everlywell became a major telehealth player during COVID-19, now valued at $3.2B. Expanded testing services and partnered with major healthcare providers. Leading the at-home health testing revolution with FDA-approved tests.",
        "website": "https://everlywell.com"
    },
    "Blueland": {
        "status": "Active",
        "valuation": 120000000,
        "update": "Blueland continues rapid growth in the eco-friendly cleaning market with $120M+ valuation. Expanded product line and retail partnerships. Strong sustainability message resonates with environmentally conscious consumers.",
        "website": "https://blueland.com"
    },
    "Cousins Maine Lobster": {
        "status": "Active",
        "valuation": 30000000,
        "update": "Expanded to 50+ locations with $30M+ revenue and franchise opportunities. Maintained quality standards while scaling operations. Strong brand recognition in the food truck and casual dining space.",
        "website": "https://cousinsmainelobster.com"
    },
    "Tower Paddle Boards": {
        "status": "Active",
        "valuation": 40000000,
        "update": "Successful D2C model with over $40M in sales and industry recognition. Maintained competitive pricing while expanding product line. Strong online community and customer loyalty.",
        "website": "https://towerpaddle.com"
    },
    "Tipsy Elves": {
        "status": "Active",
        "valuation": 100000000,
        "update": "Expanded beyond Christmas to year-round party apparel with $100M+ revenue. Strong social media marketing and celebrity endorsements. Seasonal campaigns drive consistent sales spikes.",
        "website": "https://tipsyelves.com"
    },
    "Drop Stop": {
        "status": "Active",
        "valuation": 25000000,
        "update": "Strong automotive retail presence with over $25M in sales. Expanded to international markets and developed new automotive accessories. Patent protection maintains competitive advantage.",
        "website": "https://dropstop.com"
    },
    "Simply Fit Board": {
        "status": "Active",
        "valuation": 35000000,
        "update": "Strong retail presence with over $35M in sales through TV marketing. Consistent infomercial success and retail partnerships. Fitness trend alignment drives continued sales.",
        "website": "https://simplyfitboard.com"
    },
    "Lumio": {
        "status": "Active",
        "valuation": 25000000,
        "update": "International success with design awards and strong online sales. Expanded product line with new lighting solutions. Strong design community following and gift market presence.",
        "website": "https://lumio.com"
    },
    "Ezpz": {
        "status": "Active",
        "valuation": 45000000,
        "update": "Major success in baby product market with international expansion. Strong pediatrician endorsements and parent community support. Expanded product line for different age groups.",
        "website": "https://ezpzfun.com"
    },
    "Bantam Bagels": {
        "status": "Acquired",
        "valuation": 34000000,
        "update": "Acquired by T. Marzetti Company, now sold in major grocery chains nationwide. Successful transition from NYC-based bakery to national brand. Maintained quality while scaling production.",
        "website": "https://bantambagels.com"
    },
    "Groovebook": {
        "status": "Acquired",
        "valuation": 14500000,
        "update": "Acquired by Shutterfly for $14.5M in 2015. Technology integrated into Shutterfly's photo services. Proved viability of subscription photo printing model.",
        "website": "https://groovebook.com"
    },
    "PiperWai": {
        "status": "Acquired",
        "valuation": 10000000,
        "update": "Acquired by Unilever, proving natural personal care market potential. Product line expanded under Unilever ownership. Maintained natural ingredient focus while scaling production.",
        "website": "https://piperwai.com"
    },
    "Youthforia": {
        "status": "Active",
        "valuation": 40000000,
        "update": "Viral TikTok success with rapid growth in Gen Z market. Strong social media presence drives sales. Innovative color-changing products create buzz and repeat purchases.",
        "website": "https://youthforia.com"
    },
    "Kahawa 1893": {
        "status": "Active",
        "valuation": 35000000,
        "update": "Expanding retail presence with strong social impact mission. Direct trade relationships with African farmers. Growing awareness of ethical coffee sourcing drives sales.",
        "website": "https://kahawa1893.com"
    },
    "Deux": {
        "status": "Active",
        "valuation": 20000000,
        "update": "Strong growth in better-for-you snack category. Expanded distribution to major retailers. Health-conscious consumers drive consistent demand.",
        "website": "https://deuxfoods.com"
    },
    "Chirps Chips": {
        "status": "Active",
        "valuation": 8000000,
        "update": "Growing in alternative protein market with retail expansion. Sustainability message resonates with environmentally conscious consumers. Gradual market acceptance of insect protein.",
        "website": "https://chirpschips.com"
    },
    "Nooci": {
        "status": "Active",
        "valuation": 15000000,
        "update": "Strong growth in wellness market with expanding product line. Traditional Chinese medicine gaining mainstream acceptance. Direct-to-consumer model drives profitability.",
        "website": "https://nooci.com"
    },
    "FryAway": {
        "status": "Active",
        "valuation": 12000000,
        "update": "Rapid retail expansion with strong environmental impact messaging. Growing awareness of proper oil disposal drives sales. Municipal partnerships for waste management.",
        "website": "https://fryaway.com"
    },
    "Sleep Styler": {
        "status": "Active",
        "valuation": 15000000,
        "update": "Strong retail presence with consistent sales growth. Heat-free styling trend aligns with hair health awareness. Infomercial success drives brand recognition.",
        "website": "https://sleepstyler.com"
    },
    "Bottle Breacher": {
        "status": "Active",
        "valuation": 12000000,
        "update": "Strong patriotic market with steady veteran employment mission. Military and veteran community support drives sales. Expanded product line with military-themed accessories.",
        "website": "https://bottlebreacher.com"
    },
    "ReadeREST": {
        "status": "Active",
        "valuation": 8000000,
        "update": "Steady sales through infomercials and retail partnerships. Aging population drives consistent demand. Simple product with strong utility value.",
        "website": "https://readerest.com"
    },
}

# fallback outcomes for names missing from KNOWN_UPDATES, picked by name hash
OUTCOME_TEMPLATES = [
    {
        "status": "Active",
        "update": "{name} continues to grow with strong retail partnerships and online sales. Recent expansion into new markets shows promising results.",
        "sources": ["Company Website", "Recent Press Release", "Industry Report"],
    },
    {
        "status": "Active",
        "update": "{name} has adapted well to post-pandemic market conditions with increased digital presence and direct-to-consumer sales.",
        "sources": ["Business News", "Company Social Media", "Retail Analytics"],
    },
    {
        "status": "Acquired",
        "update": "{name} was recently acquired by a major corporation, validating the business model and providing resources for expansion.",
        "sources": ["Acquisition News", "SEC Filings", "Industry Analysis"],
    },
    {
        "status": "Closed",
        "update": "{name} ceased operations due to market challenges and increased competition in the sector.",
        "sources": ["Business Closure Report", "Industry News", "Former Employee LinkedIn"],
    },
]


def slugify(name):
    return re.sub(r"[^a-z0-9]", "-", name.lower())


def name_hash(name):
    return sum(ord(ch) for ch in name)


def template_for(name):
    return OUTCOME_TEMPLATES[name_hash(name) % len(OUTCOME_TEMPLATES)]


def template_valuation(name):
    # seeded by the name so a name always gets the same figure
    return random.Random(name_hash(name)).randrange(5_000_000, 55_000_000)


class CompanySource(Protocol):
    async def fetch(self, name: str, mode: str = "full") -> Optional[CompanyUpdate]:
        ...


# --- social / website probing
SOCIAL_PATTERNS = {
    "twitter": re.compile(r"(?:^|[/.])(twitter\.com|x\.com)/", re.I),
    "instagram": re.compile(r"instagram\.com/", re.I),
    "facebook": re.compile(r"facebook\.com/", re.I),
    "linkedin": re.compile(r"linkedin\.com/", re.I),
}


def extract_social_presence(html_text):
    soup = BeautifulSoup(html_text, "html.parser")
    found = dict.fromkeys(SOCIAL_PATTERNS, False)
    for a in soup.find_all("a", href=True):
        href = a["href"]
        for network, pat in SOCIAL_PATTERNS.items():
            if pat.search(href):
                found[network] = True
    return SocialPresence(**found)


def _bare_host(url):
    host = httpx.URL(str(url)).host or ""
    return host[4:] if host.startswith("www.") else host


class WebsiteProber:
    """Checks whether a company website is up and which social accounts it links."""

    def __init__(self, client, timeout=HTTP_TIMEOUT):
        self.client = client
        self.timeout = timeout

    async def probe(self, url):
        try:
            r = await self.client.get(url, follow_redirects=True, timeout=self.timeout)
        except httpx.HTTPError as e:
            log.warning("probe %s failed: %s", url, e)
            return SocialMetrics(website_status="inactive")
        if not r.is_success:
            return SocialMetrics(website_status="inactive")
        status = "active" if _bare_host(r.url) == _bare_host(url) else "redirected"
        return SocialMetrics(
            website_status=status,
            last_website_update=r.headers.get("last-modified"),
            social_presence=extract_social_presence(r.text),
        )


def synthetic_news(name):
    slug = re.sub(r"\s+", "-", name.lower())
    now = datetime.now(timezone.utc)
    return [
        NewsItem(
            title=f"{name} Reports Strong Q4 Performance",
            url=f"https://example-news.com/{slug}-q4-results",
            source="Business News Daily",
            published_at=(now - timedelta(days=random.uniform(0, 30))).isoformat(),
            summary=f"{name} continues to show strong growth metrics in their latest quarterly report.",
        ),
        NewsItem(
            title=f"{name} Expands Product Line",
            url=f"https://example-retail.com/{slug}-expansion",
            source="Retail Insider",
            published_at=(now - timedelta(days=random.uniform(0, 60))).isoformat(),
            summary="The company announces new products and market expansion plans.",
        ),
    ]


def synthetic_social_metrics():
    now = datetime.now(timezone.utc)
    return SocialMetrics(
        website_status="active" if random.random() > 0.1 else "inactive",
        last_website_update=(now - timedelta(days=random.uniform(0, 90))).isoformat(),
        social_presence=SocialPresence(
            twitter=random.random() > 0.3,
            instagram=random.random() > 0.2,
            facebook=random.random() > 0.4,
            linkedin=random.random() > 0.5,
        ),
    )


# --- sources
class MockCompanySource:
    """Stand-in for real acquisition: lookup table first, hashed template otherwise.

    `delay_ms` is the (min, max) artificial latency per lookup. With a `prober`,
    full-mode lookups read social metrics from the live website.
    """

    def __init__(self, delay_ms=REFRESH_LOOKUP_DELAY_MS, prober=None):
        self.delay_ms = delay_ms
        self.prober = prober

    async def _pause(self):
        lo, hi = self.delay_ms
        if hi > 0:
            await asyncio.sleep(random.uniform(lo, hi) / 1000)

    def lookup(self, name):
        return KNOWN_UPDATES.get(name)

    def base_update(self, name: str) -> Optional[CompanyUpdate]:
        today = date.today().isoformat()
        known = self.lookup(name)
        if known:
            return CompanyUpdate(
                id=slugify(name), name=name,
                current_status=known["status"], current_valuation=known["valuation"],
                current_update=known["update"], website=known.get("website"),
                last_updated=today,
            )
        tpl = template_for(name)
        return CompanyUpdate(
            id=slugify(name), name=name,
            current_status=tpl["status"],
            current_valuation=template_valuation(name) if tpl["status"] == "Active" else None,
            current_update=tpl["update"].format(name=name),
            sources=list(tpl["sources"]),
            last_updated=today,
        )

    async def fetch(self, name: str, mode: str = "full") -> Optional[CompanyUpdate]:
        if not name.strip():
            raise SourceError("empty company name")
        log.debug("fetching %s (%s)", name, mode)
        await self._pause()
        update = self.base_update(name)
        if update is None or mode != "full":
            return update
        if self.prober and update.website:
            metrics = await self.prober.probe(update.website)
        else:
            metrics = synthetic_social_metrics()
        return update.model_copy(update={"news_items": synthetic_news(name), "social_metrics": metrics})


class LookupOnlySource(MockCompanySource):
    """Only answers for names in the lookup table."""

    def base_update(self, name: str) -> Optional[CompanyUpdate]:
        if self.lookup(name) is None:
            return None
        return super().base_update(name)
