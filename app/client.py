"""
Python view model for the user list page.

Holds the same local state as the browser page (users, input text, loading
flag) and talks to the API over HTTP with ``requests``. Failures are logged
and never raised to the caller, so the list can drift from the store until
the next full fetch.
"""
from __future__ import annotations

import logging
from typing import List, Optional

import requests

logger = logging.getLogger(__name__)


class UserListView:
    """
    In-memory list of users backed by the ``/users`` endpoints.
    """

    def __init__(self, base_url: str = "/api", session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.users: List[dict] = []
        self.name = ""
        self.loading = False

    @property
    def users_url(self) -> str:
        return f"{self.base_url}/users"

    def mount(self) -> None:
        """Initial load of the page."""
        self.fetch_users()

    def fetch_users(self) -> None:
        """
        Replace the local list with the server's. On failure the list is kept.
        """
        self.loading = True
        try:
            response = self.session.get(self.users_url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array of users, got {type(data).__name__}")
            self.users = data
        except (requests.RequestException, ValueError, TypeError) as e:
            logger.error(f"Error fetching users: {e}")
        finally:
            self.loading = False

    def set_name(self, value: str) -> None:
        self.name = value

    def submit(self) -> Optional[dict]:
        """
        Post the current input as a new user.

        Blank input sends nothing. On success the server's record is appended
        and the input cleared; on failure state is left as it was.
        Returns the created record, or None.
        """
        if not self.name.strip():
            return None
        try:
            response = self.session.post(
                self.users_url,
                json={"name": self.name},
                timeout=self.timeout,
            )
            response.raise_for_status()
            new_user = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error adding user: {e}")
            return None
        self.users = self.users + [new_user]
        self.name = ""
        return new_user

    def render(self) -> str:
        if self.loading:
            return "Loading..."
        return "\n".join(str(user.get("name", "")) for user in self.users)
