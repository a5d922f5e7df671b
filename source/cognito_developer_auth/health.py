# ABOUTME: Liveness probe for the Cognito Identity endpoint
# ABOUTME: Tracks a tri-state readiness flag settled by a background check

"""Readiness probing for the Cognito Identity service."""

import enum
import logging
import threading

import requests

logger = logging.getLogger(__name__)

PING_PATH = "/ping"
DEFAULT_PING_TIMEOUT = 10


class Readiness(enum.Enum):
    UNKNOWN = "unknown"
    READY = "ready"
    UNREADY = "unready"


def ping(endpoint_url: str, session: requests.Session | None = None, timeout: float = DEFAULT_PING_TIMEOUT) -> str:
    """Issue an unauthenticated GET against the endpoint's /ping path.

    Returns the raw response body ("healthy" on a working endpoint). Transport
    failures and HTTP error statuses raise requests.RequestException.
    """
    url = f"{endpoint_url.rstrip('/')}{PING_PATH}"
    http = session or requests
    response = http.get(url, timeout=timeout)
    response.raise_for_status()
    return response.text


class ReadinessProbe:
    """Holds a readiness flag that is settled exactly once by a background check."""

    def __init__(self):
        self._state = Readiness.UNKNOWN
        self._lock = threading.Lock()
        self._settled = threading.Event()

    @property
    def state(self) -> Readiness:
        with self._lock:
            return self._state

    def start(self, check) -> threading.Thread:
        """Run check() once on a daemon thread and settle the flag from its outcome."""
        thread = threading.Thread(target=self._run, args=(check,), name="cognito-readiness-probe")
        thread.daemon = True
        thread.start()
        return thread

    def wait(self, timeout: float | None = None) -> Readiness:
        """Block until the probe settles or timeout elapses, then return the state."""
        self._settled.wait(timeout)
        return self.state

    def _run(self, check) -> None:
        try:
            body = check()
        except Exception as e:
            logger.debug("Readiness probe failed: %s", e)
            self._settle(Readiness.UNREADY)
        else:
            logger.debug("Readiness probe succeeded: %r", body)
            self._settle(Readiness.READY)

    def _settle(self, state: Readiness) -> None:
        with self._lock:
            if self._state is Readiness.UNKNOWN:
                self._state = state
        self._settled.set()
