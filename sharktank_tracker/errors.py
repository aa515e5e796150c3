class TrackerError(Exception):
    """Base class for errors surfaced by the tracker handlers."""


class SourceError(TrackerError):
    """A company lookup failed."""


class RefreshUpstreamError(TrackerError):
    """A chained refresh call answered with an unexpected status."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        super().__init__(f"Refresh API returned {status_code}: {reason}".rstrip(": "))


class JobConflictError(TrackerError):
    def __init__(self, job):
        self.job = job
        super().__init__("A scraping job is already running")


class NoRunningJobError(TrackerError):
    def __init__(self):
        super().__init__("No running job to stop")
