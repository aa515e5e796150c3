from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class DealStatus(str, Enum):
    GOT_DEAL = "Got Deal"
    NO_DEAL = "No Deal"
    FELL_THROUGH = "Deal Fell Through"


class CurrentStatus(str, Enum):
    ACTIVE = "Active"
    CLOSED = "Closed"
    ACQUIRED = "Acquired"


class Industry(str, Enum):
    FOOD_BEVERAGE = "Food & Beverage"
    TECHNOLOGY = "Technology"
    APPAREL = "Apparel"
    HEALTH_WELLNESS = "Health & Wellness"
    HOME_GARDEN = "Home & Garden"
    BEAUTY = "Beauty"
    BABY_PRODUCTS = "Baby Products"
    SPORTS_RECREATION = "Sports & Recreation"
    AUTOMOTIVE = "Automotive"
    ENTERTAINMENT = "Entertainment"
    SERVICES = "Services"
    HOUSEHOLD_PRODUCTS = "Household Products"
    PERSONAL_CARE = "Personal Care"
    FITNESS = "Fitness"
    HEALTHCARE = "Healthcare"
    TRANSPORTATION = "Transportation"
    ACCESSORIES = "Accessories"
    TOYS_GAMES = "Toys & Games"
    HOME_SECURITY = "Home Security"


class _Model(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)

    def to_json(self):
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Terms(_Model):
    amount: int
    equity: float


class DealDetails(Terms):
    sharks: List[str] = Field(default_factory=list)


class Company(_Model):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    season: int
    episode: int
    founders: List[str]
    industry: Industry
    original_ask: Terms
    deal_status: DealStatus
    deal_details: Optional[DealDetails] = None
    current_status: CurrentStatus
    current_valuation: Optional[int] = None
    description: str
    pitch_summary: str
    current_update: str
    website: Optional[str] = None
    logo: Optional[str] = None
    last_updated: date

    @model_validator(mode="after")
    def _deal_details_match_status(self):
        got_deal = self.deal_status == DealStatus.GOT_DEAL.value
        if got_deal != (self.deal_details is not None):
            raise ValueError(f"{self.id}: dealDetails must be present exactly when dealStatus is 'Got Deal'")
        return self


class NewsItem(_Model):
    title: str
    url: str
    source: str
    published_at: str
    summary: str


class SocialPresence(_Model):
    twitter: bool = False
    instagram: bool = False
    facebook: bool = False
    linkedin: bool = False


class SocialMetrics(_Model):
    website_status: str  # active | inactive | redirected
    last_website_update: Optional[str] = None
    social_presence: SocialPresence = Field(default_factory=SocialPresence)


class CompanyUpdate(_Model):
    id: str
    name: str
    current_status: CurrentStatus
    current_valuation: Optional[int] = None
    current_update: str
    website: Optional[str] = None
    last_updated: str
    sources: List[str] = Field(default_factory=list)
    news_items: Optional[List[NewsItem]] = None
    social_metrics: Optional[SocialMetrics] = None


class SchedulerConfig(_Model):
    enabled: bool = True
    schedule: str = "0 6 * * *"
    timezone: str = "America/New_York"
    batch_size: int = 10
    sources: List[str] = Field(default_factory=lambda: [
        "comprehensive-scraper", "news-apis", "social-media", "company-websites",
    ])
    last_run: Optional[str] = None


class JobStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class ScrapingJob(_Model):
    id: str
    status: JobStatus = JobStatus.PENDING
    trigger: str = "manual"
    started_at: str
    completed_at: Optional[str] = None
    companies_processed: int = 0
    errors: List[str] = Field(default_factory=list)
    results: Optional[Dict[str, Any]] = None
