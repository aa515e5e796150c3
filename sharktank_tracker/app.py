# sharktank_tracker/app.py
import os, json, logging
from datetime import datetime, timezone
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates
import httpx

from sharktank_tracker.config import LOG_LEVEL, PROBE_WEBSITES, REFRESH_URL, ROOT, USER_AGENT
from sharktank_tracker.catalog import (
    Catalog, CatalogFilter, apply_updates, company_stats, filter_companies, format_currency, performance_trend,
    validate_updates,
)
from sharktank_tracker.dataset import ALL_SEASONS, INDUSTRIES, MAJOR_COMPANIES, SHARKS, load_companies
from sharktank_tracker.errors import JobConflictError, NoRunningJobError
from sharktank_tracker.refresh import RefreshResult, refresh_companies
from sharktank_tracker.scheduler import HttpRunner, InProcessRunner, JobRepository, Scheduler
from sharktank_tracker.sources import LookupOnlySource, MockCompanySource, WebsiteProber

logging.basicConfig(level=LOG_LEVEL)
log = logging.getLogger("tracker.app")

app = FastAPI(title="Shark Tank Company Tracker")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

templates = Jinja2Templates(directory=os.path.join(ROOT, "templates"))
templates.env.filters["currency"] = format_currency
templates.env.filters["trend"] = performance_trend

CATALOG = Catalog(load_companies())
REPO = JobRepository()


def apply_refresh(result: RefreshResult):
    if not validate_updates(result.data):
        log.warning("refresh result failed validation, catalog left unchanged")
        return
    CATALOG.replace(apply_updates(CATALOG.companies, result.data))


def build_runner():
    if REFRESH_URL:
        return HttpRunner(REFRESH_URL)
    return InProcessRunner(MAJOR_COMPANIES)


SCHEDULER = Scheduler(REPO, build_runner(), on_result=apply_refresh)


def now_iso():
    return datetime.now(timezone.utc).isoformat()


def error_response(status, message, **extra):
    return JSONResponse({"success": False, "error": message, "timestamp": now_iso(), **extra}, status_code=status)


async def read_json_body(request: Request) -> dict:
    raw = await request.body()
    if not raw.strip():
        return {}
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    return data


def make_filter(search, season, deal_status, current_status, shark):
    return CatalogFilter(search=search or "", season=season or "all", deal_status=deal_status or "all",
                         current_status=current_status or "all", shark=shark or "all")


# --- pages
@app.get("/")
def index(request: Request, search: str = "", season: str = "all",
          deal_status: str = Query("all", alias="dealStatus"),
          current_status: str = Query("all", alias="currentStatus"),
          shark: str = "all"):
    flt = make_filter(search, season, deal_status, current_status, shark)
    companies = CATALOG.companies
    return templates.TemplateResponse(request, "index.html", {
        "companies": filter_companies(companies, flt),
        "total": len(companies),
        "stats": company_stats(companies),
        "flt": flt,
        "seasons": ALL_SEASONS,
        "sharks": SHARKS,
        "scheduler": SCHEDULER.status(),
    })


@app.get("/companies/{company_id}")
def company_page(request: Request, company_id: str):
    company = CATALOG.get(company_id)
    if company is None:
        raise HTTPException(404, "Company not found")
    return templates.TemplateResponse(request, "company.html", {"company": company})


# --- catalog API
@app.get("/api/companies")
def list_companies(search: str = "", season: str = "all",
                   deal_status: str = Query("all", alias="dealStatus"),
                   current_status: str = Query("all", alias="currentStatus"),
                   shark: str = "all"):
    flt = make_filter(search, season, deal_status, current_status, shark)
    found = filter_companies(CATALOG.companies, flt)
    return {
        "companies": [c.to_json() for c in found],
        "count": len(found),
        "total": len(CATALOG),
        "filtersActive": flt.is_active,
    }


@app.get("/api/companies/{company_id}")
def get_company(company_id: str):
    company = CATALOG.get(company_id)
    if company is None:
        raise HTTPException(404, "Company not found")
    return company.to_json()


@app.get("/api/stats")
def stats():
    return company_stats(CATALOG.companies)


@app.get("/api/meta")
def meta():
    return {"sharks": SHARKS, "seasons": ALL_SEASONS, "industries": INDUSTRIES}


# --- mock refresh
@app.api_route("/api/refresh", methods=["GET", "POST"])
async def refresh(request: Request):
    try:
        body = await read_json_body(request) if request.method == "POST" else {}
    except ValueError as e:
        return error_response(400, f"Invalid JSON body: {e}")

    names = body.get("companies") or MAJOR_COMPANIES
    mode = body.get("mode") or request.query_params.get("mode") or "full"
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        return error_response(400, "companies must be a list of names")

    # strict: only names in the lookup table come back
    source_cls = LookupOnlySource if body.get("strict") else MockCompanySource

    log.info("starting refresh in %s mode for %d companies", mode, len(names))
    try:
        if PROBE_WEBSITES and mode == "full":
            async with httpx.AsyncClient(headers={"User-Agent": USER_AGENT}) as client:
                result = await refresh_companies(names, source_cls(prober=WebsiteProber(client)), mode)
        else:
            result = await refresh_companies(names, source_cls(), mode)
        if body.get("apply"):
            apply_refresh(result)
        return result.envelope()
    except Exception as e:
        log.exception("refresh failed")
        return error_response(500, str(e))


# --- scheduler
@app.get("/api/scheduler")
def scheduler_status(action: str = "status"):
    try:
        if action == "config":
            return {"success": True, "config": SCHEDULER.config().to_json()}
        if action == "job":
            job = SCHEDULER.current_job()
            return {"success": True, "job": job.to_json() if job else None}
        return SCHEDULER.status()
    except Exception as e:
        log.exception("scheduler status failed")
        return error_response(500, str(e))


@app.post("/api/scheduler")
async def scheduler_action(request: Request):
    try:
        body = await read_json_body(request)
    except ValueError as e:
        return error_response(400, f"Invalid JSON body: {e}")
    action = body.get("action")

    try:
        if action == "trigger_now":
            job = await SCHEDULER.trigger_now()
            return {"success": True, "message": "Scraping job triggered manually", "jobId": job.id,
                    "job": job.to_json(), "timestamp": now_iso()}
        if action == "check_schedule":
            return await SCHEDULER.check_schedule()
        if action == "update_config":
            try:
                cfg = SCHEDULER.update_config(body.get("config") or {})
            except ValueError as e:
                return error_response(400, str(e))
            return {"success": True, "message": "Configuration updated", "config": cfg.to_json()}
        if action == "stop_job":
            job = SCHEDULER.stop_job()
            return {"success": True, "message": "Job stopped successfully", "job": job.to_json()}
        return error_response(400, "Invalid action")
    except JobConflictError as e:
        return JSONResponse({"success": False, "message": str(e), "currentJob": e.job.to_json()}, status_code=409)
    except NoRunningJobError as e:
        return JSONResponse({"success": False, "message": str(e)}, status_code=400)
    except Exception as e:
        log.exception("scheduler action %s failed", action)
        return error_response(500, str(e))


@app.get("/api/health")
def health():
    return {"status": "ok", "companies": len(CATALOG)}
