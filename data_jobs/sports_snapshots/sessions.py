"""
Per-thread requests sessions for the concurrent fetchers
"""

import threading
from typing import Optional

import requests


class ThreadLocalSession:
    """
    Hands each worker thread its own requests.Session.
    An injected session is returned as-is to every thread.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self._shared = session
        self._local = threading.local()

    def get(self) -> requests.Session:
        if self._shared is not None:
            return self._shared
        if not hasattr(self._local, "session"):
            self._local.session = requests.Session()
        return self._local.session
