"""
HTTP client for the jsonplaceholder API.

Wraps a ``requests.Session`` so tests never build URLs by hand. Two
levels are offered:

* Low-level methods return the raw ``requests.Response`` for status and
  header checks.
* ``*_json`` methods also parse the body and return a ``JsonResult``.

The base URL defaults to the public jsonplaceholder service and can be
pointed elsewhere with the ``API_BASE_URL`` environment variable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypedDict, TypeVar

import requests

from config import Config, get_api_base_url

logger = logging.getLogger(__name__)

T = TypeVar("T")


class User(TypedDict):
    """User record as returned by ``/users``."""

    id: int
    name: str
    username: str
    email: str


class PostPayload(TypedDict):
    """Body accepted by ``POST /posts``."""

    userId: int
    title: str
    body: str


class Post(PostPayload):
    """Post record including the server-assigned id."""

    id: int


@dataclass
class JsonResult(Generic[T]):
    """Response paired with its parsed JSON body."""

    response: requests.Response
    data: T


class ApiClient:
    """
    Thin wrapper over ``requests.Session`` for jsonplaceholder.

    Usable as a context manager; the session is closed on exit.
    """

    def __init__(
        self,
        base_url: str | None = None,
        session: requests.Session | None = None,
        timeout: int = Config.API_REQUEST_TIMEOUT,
    ):
        self.base_url = (base_url or get_api_base_url()).rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.timeout = timeout

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()

    def url(self, path: str) -> str:
        """Build a full URL from an API path such as ``/users``."""
        return f"{self.base_url}{path}"

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = self.url(path)
        kwargs.setdefault("timeout", self.timeout)
        logger.debug(f"{method} {url}")
        response = self.session.request(method, url, **kwargs)
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    # -------------------------------------------------------------------------
    # Low-level methods: raw responses
    # -------------------------------------------------------------------------

    def get_users(self) -> requests.Response:
        """GET /users"""
        return self._request("GET", "/users")

    def get_user(self, user_id: int) -> requests.Response:
        """GET /users/<id>"""
        return self._request("GET", f"/users/{user_id}")

    def create_post(self, payload: PostPayload) -> requests.Response:
        """
        POST /posts

        jsonplaceholder echoes the payload back with a generated id but does
        not persist it.
        """
        return self._request("POST", "/posts", json=payload)

    # -------------------------------------------------------------------------
    # High-level methods: response + parsed body
    # -------------------------------------------------------------------------

    def get_users_json(self) -> JsonResult[list[User]]:
        response = self.get_users()
        return JsonResult(response=response, data=response.json())

    def get_user_json(self, user_id: int) -> JsonResult[User]:
        response = self.get_user(user_id)
        return JsonResult(response=response, data=response.json())

    def create_post_json(self, payload: PostPayload) -> JsonResult[Post]:
        response = self.create_post(payload)
        return JsonResult(response=response, data=response.json())
