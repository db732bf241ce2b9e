"""
Admin API Client

Thin wrapper over the blog API for scripts and the admin tooling. It keeps
the bearer token obtained at login, sends it on every request and forgets it
as soon as the server answers 401.
"""

import logging
from typing import Any, Callable, Dict, Optional
import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000"


class ApiRequestError(Exception):
    def __init__(self, status: int, message: str, payload: Optional[Dict[str, Any]] = None):
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message
        self.payload = payload or {}


class AuthenticationRequired(ApiRequestError):
    """Raised on 401; the client has already dropped its token."""


class BlogApiClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: Optional[str] = None,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
        on_unauthorized: Optional[Callable[[], None]] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()
        self.on_unauthorized = on_unauthorized

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        response = self.session.request(
            method,
            f"{self.base_url}{path}",
            headers=headers,
            timeout=self.timeout,
            **kwargs,
        )

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code == 401:
            logger.info("API answered 401 on %s %s, logging out", method, path)
            self.token = None
            if self.on_unauthorized:
                self.on_unauthorized()
            message = payload.get("message") if isinstance(payload, dict) else "Unauthorized"
            raise AuthenticationRequired(401, message or "Unauthorized", payload)

        if response.status_code >= 400:
            message = payload.get("message") if isinstance(payload, dict) else None
            logger.warning("API error %s on %s %s: %s", response.status_code, method, path, message)
            raise ApiRequestError(response.status_code, message or response.reason or "Request failed", payload)

        return payload

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("GET", path, params=params)

    def _post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("POST", path, json=data or {})

    def _patch(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("PATCH", path, json=data or {})

    def _delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    # Auth

    def login(self, username: str, password: str) -> Dict[str, Any]:
        result = self._post("/auth/login", {"username": username, "password": password})
        self.token = result["token"]
        return result

    def register(self, username: str, email: str, password: str, confirm_password: str) -> Dict[str, Any]:
        return self._post("/auth/register", {
            "username": username,
            "email": email,
            "password": password,
            "confirmPassword": confirm_password,
        })

    def logout(self) -> Dict[str, Any]:
        try:
            return self._post("/auth/logout")
        finally:
            self.token = None

    # Articles

    def get_articles(self, **params) -> Dict[str, Any]:
        return self._get("/articles", params)

    def get_published_articles(self, **params) -> Dict[str, Any]:
        return self._get("/articles/published", params)

    def get_article(self, article_id: int) -> Dict[str, Any]:
        return self._get(f"/articles/{article_id}")

    def get_article_by_slug(self, slug: str) -> Dict[str, Any]:
        return self._get(f"/articles/slug/{slug}")

    def create_article(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._post("/articles", data)

    def update_article(self, article_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._patch(f"/articles/{article_id}", data)

    def delete_article(self, article_id: int) -> Dict[str, Any]:
        return self._delete(f"/articles/{article_id}")

    # Tags

    def get_tags(self):
        return self._get("/tags")

    def get_popular_tags(self, limit: int = 10):
        return self._get("/tags/popular", {"limit": limit})

    def get_tag(self, tag_id: int):
        return self._get(f"/tags/{tag_id}")

    def create_tag(self, data: Dict[str, Any]):
        return self._post("/tags", data)

    def update_tag(self, tag_id: int, data: Dict[str, Any]):
        return self._patch(f"/tags/{tag_id}", data)

    def delete_tag(self, tag_id: int):
        return self._delete(f"/tags/{tag_id}")

    # Comments

    def get_comments(self, **params):
        return self._get("/comments", params)

    def get_pending_comments(self, **params):
        return self._get("/comments/pending", params)

    def get_approved_comments(self, **params):
        return self._get("/comments/approved", params)

    def get_comment_stats(self, article_id: Optional[int] = None):
        params = {"articleId": article_id} if article_id is not None else None
        return self._get("/comments/stats", params)

    def get_comment(self, comment_id: int):
        return self._get(f"/comments/{comment_id}")

    def create_comment(self, data: Dict[str, Any]):
        return self._post("/comments", data)

    def update_comment(self, comment_id: int, data: Dict[str, Any]):
        return self._patch(f"/comments/{comment_id}", data)

    def approve_comment(self, comment_id: int):
        return self._patch(f"/comments/{comment_id}/approve")

    def reject_comment(self, comment_id: int):
        return self._patch(f"/comments/{comment_id}/reject")

    def delete_comment(self, comment_id: int):
        return self._delete(f"/comments/{comment_id}")

    # Projects

    def get_projects(self, featured: Optional[bool] = None):
        params = {"featured": "true" if featured else "false"} if featured is not None else None
        return self._get("/projects", params)

    def get_featured_projects(self):
        return self._get("/projects/featured")

    def get_project_stats(self):
        return self._get("/projects/stats")

    def get_project(self, project_id: int):
        return self._get(f"/projects/{project_id}")

    def create_project(self, data: Dict[str, Any]):
        return self._post("/projects", data)

    def update_project(self, project_id: int, data: Dict[str, Any]):
        return self._patch(f"/projects/{project_id}", data)

    def delete_project(self, project_id: int):
        return self._delete(f"/projects/{project_id}")

    # Profile

    def get_profile(self):
        return self._get("/profile")

    def update_profile(self, data: Dict[str, Any]):
        return self._patch("/profile", data)

    # Stats

    def get_overview_stats(self):
        return self._get("/stats/overview")

    def get_article_stats(self):
        return self._get("/stats/articles")

    def get_monthly_stats(self, year: Optional[int] = None):
        return self._get("/stats/monthly", {"year": year} if year else None)

    def get_tag_stats(self):
        return self._get("/stats/tags")

    def get_recent_activity(self):
        return self._get("/stats/recent-activity")
