import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A failed API call, carrying the message the server sent back."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ApiClient:
    """
    Thin httpx wrapper around the teacher helper HTTP API.

    `http_client` lets callers supply their own httpx.Client
    (e.g. FastAPI's TestClient); otherwise one is created and owned here.
    """

    def __init__(self, base_url: str, http_client: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self.http = http_client or httpx.Client()

    def close(self):
        if self._owns_client:
            self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            res = self.http.request(method, f"{self.base_url}{path}", **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiError(str(e) or e.__class__.__name__) from e

        if res.is_error:
            raise ApiError(_error_message(res), res.status_code)
        return res.json()

    # ==================== API ROUTES ====================

    def health(self) -> Dict[str, str]:
        return self._request("GET", "/health")

    def chat(self, message: str) -> str:
        return self._request("POST", "/chat/general", json={"message": message})["response"]

    def grade_paper(self, student_id: int, paper_text: str) -> Dict[str, str]:
        return self._request(
            "POST", "/grade/paper",
            json={"studentId": student_id, "paperText": paper_text},
        )

    def list_students(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/students")

    def get_student(self, student_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/students/{student_id}")

    def create_student(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/students", json=data)

    def update_student(self, student_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/students/{student_id}", json=data)

    def delete_student(self, student_id: int) -> Dict[str, str]:
        return self._request("DELETE", f"/students/{student_id}")


def _error_message(res: httpx.Response) -> str:
    try:
        body = res.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Request failed with status code {res.status_code}"
