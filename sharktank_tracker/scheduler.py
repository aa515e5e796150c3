"""
Daily refresh scheduler.

Scheduler config and job records live in SQLite through `JobRepository`, so
the current job and last run survive restarts and are shared by every worker
pointing at the same file. A job is one refresh run, executed by a runner:
in-process (`InProcessRunner`) or against a remote refresh endpoint
(`HttpRunner`).
"""
import json
import logging
import sqlite3
import time
from datetime import datetime, timedelta
from typing import Callable, List, Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx
from pydantic.alias_generators import to_camel

from sharktank_tracker.config import HTTP_TIMEOUT, JOBS_DB, USER_AGENT
from sharktank_tracker.errors import JobConflictError, NoRunningJobError, RefreshUpstreamError
from sharktank_tracker.models import JobStatus, SchedulerConfig, ScrapingJob
from sharktank_tracker.refresh import RefreshResult, refresh_companies, utc_now_iso
from sharktank_tracker.sources import CompanySource, MockCompanySource

log = logging.getLogger("tracker.scheduler")

RUN_WINDOW_MINUTES = 5
CONFIG_KEY = "scheduler_config"


# --- SQLite job store
class JobRepository:
    def __init__(self, path: str = JOBS_DB):
        self.path = path
        self.init_db()

    def _connect(self):
        return sqlite3.connect(self.path)

    def init_db(self):
        conn = self._connect()
        c = conn.cursor()
        c.execute("""CREATE TABLE IF NOT EXISTS jobs (
                       id TEXT PRIMARY KEY,
                       status TEXT,
                       trigger TEXT,
                       started_at TEXT,
                       completed_at TEXT,
                       payload TEXT
                     )""")
        c.execute("""CREATE TABLE IF NOT EXISTS meta (key TEXT PRIMARY KEY, value TEXT)""")
        conn.commit(); conn.close()

    def set_meta(self, k, v):
        conn = self._connect(); c = conn.cursor()
        c.execute("INSERT OR REPLACE INTO meta (key,value) VALUES (?,?)", (k, str(v)))
        conn.commit(); conn.close()

    def get_meta(self, k):
        conn = self._connect(); c = conn.cursor()
        c.execute("SELECT value FROM meta WHERE key=?", (k,))
        r = c.fetchone(); conn.close()
        return r[0] if r else None

    def save_job(self, job: ScrapingJob):
        conn = self._connect(); c = conn.cursor()
        c.execute(
            "INSERT OR REPLACE INTO jobs (id,status,trigger,started_at,completed_at,payload) VALUES (?,?,?,?,?,?)",
            (job.id, job.status, job.trigger, job.started_at, job.completed_at, json.dumps(job.to_json())),
        )
        conn.commit(); conn.close()

    def _one(self, sql, params=()) -> Optional[ScrapingJob]:
        conn = self._connect(); c = conn.cursor()
        c.execute(sql, params)
        r = c.fetchone(); conn.close()
        return ScrapingJob.model_validate(json.loads(r[0])) if r else None

    def get_job(self, job_id: str) -> Optional[ScrapingJob]:
        return self._one("SELECT payload FROM jobs WHERE id=?", (job_id,))

    def latest_job(self) -> Optional[ScrapingJob]:
        return self._one("SELECT payload FROM jobs ORDER BY started_at DESC, rowid DESC LIMIT 1")

    def running_job(self) -> Optional[ScrapingJob]:
        return self._one(
            "SELECT payload FROM jobs WHERE status=? ORDER BY started_at DESC LIMIT 1",
            (JobStatus.RUNNING.value,),
        )

    def list_jobs(self, limit: int = 20) -> List[ScrapingJob]:
        conn = self._connect(); c = conn.cursor()
        c.execute("SELECT payload FROM jobs ORDER BY started_at DESC, rowid DESC LIMIT ?", (limit,))
        rows = c.fetchall(); conn.close()
        return [ScrapingJob.model_validate(json.loads(r[0])) for r in rows]

    def load_config(self) -> SchedulerConfig:
        raw = self.get_meta(CONFIG_KEY)
        return SchedulerConfig.model_validate(json.loads(raw)) if raw else SchedulerConfig()

    def save_config(self, cfg: SchedulerConfig):
        self.set_meta(CONFIG_KEY, json.dumps(cfg.to_json()))

    def clear(self):
        conn = self._connect(); c = conn.cursor()
        c.execute("DELETE FROM jobs"); c.execute("DELETE FROM meta")
        conn.commit(); conn.close()


# --- schedule arithmetic
def parse_daily_schedule(schedule: str):
    """(hour, minute) from a daily cron expression such as '0 6 * * *'."""
    parts = schedule.split()
    if len(parts) != 5:
        raise ValueError(f"invalid schedule {schedule!r}: expected 5 cron fields")
    try:
        minute, hour = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"invalid schedule {schedule!r}: minute and hour must be numbers")
    if not (0 <= minute < 60 and 0 <= hour < 24):
        raise ValueError(f"invalid schedule {schedule!r}: minute or hour out of range")
    return hour, minute


def should_run_now(cfg: SchedulerConfig, now: datetime) -> bool:
    hour, minute = parse_daily_schedule(cfg.schedule)
    # minutes past the scheduled time, wrapping at midnight
    late = (now.hour * 60 + now.minute - (hour * 60 + minute)) % 1440
    return late < RUN_WINDOW_MINUTES


def next_run_time(cfg: SchedulerConfig, now: datetime) -> datetime:
    hour, minute = parse_daily_schedule(cfg.schedule)
    target = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if now < target:
        return target
    return target + timedelta(days=1)


# --- runners
class InProcessRunner:
    """Runs the refresh in this process; the scheduler applies the result."""

    def __init__(self, names: Sequence[str], source: Optional[CompanySource] = None,
                 batch_delay: Optional[float] = None):
        self.names = list(names)
        self.source = source or MockCompanySource()
        self.batch_delay = batch_delay

    async def __call__(self, job: ScrapingJob, cfg: SchedulerConfig) -> RefreshResult:
        return await refresh_companies(self.names, self.source, mode="full",
                                       batch_size=cfg.batch_size, batch_delay=self.batch_delay)


class HttpRunner:
    """POSTs the job to a remote refresh endpoint."""

    def __init__(self, url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self.transport = transport

    async def __call__(self, job: ScrapingJob, cfg: SchedulerConfig) -> dict:
        async with httpx.AsyncClient(headers={"User-Agent": USER_AGENT}, timeout=HTTP_TIMEOUT,
                                     transport=self.transport) as client:
            r = await client.post(self.url, json={"mode": "full", "trigger": job.trigger, "jobId": job.id})
        if not r.is_success:
            raise RefreshUpstreamError(r.status_code, r.reason_phrase)
        return r.json()


# --- scheduler
class Scheduler:
    def __init__(self, repo: JobRepository, runner,
                 on_result: Optional[Callable[[RefreshResult], None]] = None):
        self.repo = repo
        self.runner = runner
        # only called for in-process results of jobs still running at the end
        self.on_result = on_result

    def config(self) -> SchedulerConfig:
        return self.repo.load_config()

    def current_job(self) -> Optional[ScrapingJob]:
        return self.repo.latest_job()

    def _now(self, cfg: SchedulerConfig, now: Optional[datetime] = None) -> datetime:
        tz = ZoneInfo(cfg.timezone)
        return now.astimezone(tz) if now else datetime.now(tz)

    def status(self, now: Optional[datetime] = None) -> dict:
        cfg = self.config()
        job = self.current_job()
        state = "active" if cfg.enabled else "disabled"
        return {
            "status": state,
            "config": cfg.to_json(),
            "currentJob": job.to_json() if job else None,
            "nextRun": next_run_time(cfg, self._now(cfg, now)).isoformat(),
            "lastRun": cfg.last_run,
            "recentJobs": [j.to_json() for j in self.repo.list_jobs(5)],
            "message": f"Daily scraper scheduler is {state}",
        }

    def update_config(self, changes: dict) -> SchedulerConfig:
        if changes is None:
            changes = {}
        if not isinstance(changes, dict):
            raise ValueError("config must be a JSON object")
        changes = {to_camel(k) if "_" in k else k: v for k, v in changes.items()}
        merged = SchedulerConfig.model_validate({**self.config().to_json(), **changes})
        parse_daily_schedule(merged.schedule)
        try:
            ZoneInfo(merged.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"unknown timezone {merged.timezone!r}")
        self.repo.save_config(merged)
        log.info("scheduler config updated: %s", changes)
        return merged

    async def trigger_now(self) -> ScrapingJob:
        running = self.repo.running_job()
        if running:
            raise JobConflictError(running)
        return await self.run_job(f"manual-{int(time.time() * 1000)}", "manual")

    async def check_schedule(self, now: Optional[datetime] = None) -> dict:
        cfg = self.config()
        if not cfg.enabled:
            return {"success": True, "message": "Scheduler is disabled", "nextRun": None}
        local = self._now(cfg, now)
        due = should_run_now(cfg, local)
        running = self.repo.running_job()
        if due and not running:
            job = await self.run_job(f"scheduled-{int(time.time() * 1000)}", "scheduled")
            return {
                "success": True,
                "message": "Daily scraping job executed",
                "jobId": job.id,
                "job": job.to_json(),
                "nextRun": next_run_time(cfg, local).isoformat(),
            }
        return {
            "success": True,
            "message": "Job already running" if due else "Not scheduled to run now",
            "nextRun": next_run_time(cfg, local).isoformat(),
            "currentJob": running.to_json() if running else None,
        }

    def stop_job(self) -> ScrapingJob:
        job = self.repo.running_job()
        if not job:
            raise NoRunningJobError()
        job.status = JobStatus.FAILED.value
        job.completed_at = utc_now_iso()
        job.errors.append("Job stopped manually")
        self.repo.save_job(job)
        log.info("job %s stopped manually", job.id)
        return job

    async def run_job(self, job_id: str, trigger: str) -> ScrapingJob:
        cfg = self.config()
        job = ScrapingJob(id=job_id, status=JobStatus.RUNNING.value, trigger=trigger, started_at=utc_now_iso())
        self.repo.save_job(job)
        log.info("starting scraping job %s (%s)", job_id, trigger)
        started = time.monotonic()
        try:
            result = await self.runner(job, cfg)
        except Exception as e:
            log.error("scraping job %s failed: %s", job_id, e)
            job = self.repo.get_job(job_id) or job
            if job.status == JobStatus.RUNNING.value:
                job.status = JobStatus.FAILED.value
                job.completed_at = utc_now_iso()
            job.errors.append(str(e))
            self.repo.save_job(job)
            return job

        job = self.repo.get_job(job_id) or job
        if job.status != JobStatus.RUNNING.value:
            # stopped while the runner was working
            return job
        if isinstance(result, RefreshResult):
            if self.on_result:
                self.on_result(result)
            result = result.envelope()
        job.status = JobStatus.COMPLETED.value
        job.completed_at = utc_now_iso()
        job.companies_processed = result.get("count") or 0
        job.errors = list(result.get("errors") or [])
        job.results = result
        self.repo.save_job(job)

        cfg = self.config()
        self.repo.save_config(cfg.model_copy(update={"last_run": job.completed_at}))
        log.info("scraping job %s completed: %d companies, %d errors in %.2fs",
                 job_id, job.companies_processed, len(job.errors), time.monotonic() - started)
        return job
