import os
from dotenv import load_dotenv
load_dotenv()

ROOT = os.path.dirname(__file__)

COMPANIES_JSON = os.getenv("COMPANIES_JSON", "")
JOBS_DB = os.getenv("JOBS_DB", os.path.join(ROOT, "jobs.db"))

REFRESH_BATCH_SIZE = int(os.getenv("REFRESH_BATCH_SIZE", "5"))
REFRESH_BATCH_DELAY_MS = int(os.getenv("REFRESH_BATCH_DELAY_MS", "1000"))


def _delay_range(raw):
    lo, _, hi = raw.partition(",")
    lo = int(lo or 0)
    return lo, int(hi or lo)


REFRESH_LOOKUP_DELAY_MS = _delay_range(os.getenv("REFRESH_LOOKUP_DELAY_MS", "200,500"))

# remote refresh endpoint for scheduler jobs; empty means run in-process
REFRESH_URL = os.getenv("REFRESH_URL", "")
PROBE_WEBSITES = os.getenv("PROBE_WEBSITES", "") in ("1", "true", "True", "yes")

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))
USER_AGENT = os.getenv("USER_AGENT", "SharkTankTrackerBot/1.0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
