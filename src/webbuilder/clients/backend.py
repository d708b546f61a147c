"""Backend Service Client"""

from dataclasses import dataclass
from typing import Any, Callable

import httpx
import pybreaker

from ..core import get_logger

logger = get_logger(__name__)


class BackendError(Exception):
    """Backend call failed (transport, open breaker, or error envelope)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass
class CreditBalance:
    """Account balance as reported by the credits service"""

    credits: int
    export_cost: int


class BackendClient:
    """
    Client for the project, export and credits services with circuit
    breaker protection.

    Every endpoint answers with a ``{"success", "data", "message"}``
    envelope; failures of any kind surface as ``BackendError``.
    """

    def __init__(
        self,
        backend_url: str = "http://localhost:5000/api",
        timeout: float = 10.0,
        export_timeout: float = 60.0,
        token: str = "",
        fail_max: int = 5,
        reset_timeout: int = 30,
    ) -> None:
        """
        Initialize backend client with circuit breaker.

        Args:
            backend_url: Base URL of the builder API
            timeout: Request timeout in seconds
            export_timeout: Timeout for export generation
            token: Bearer token, omitted when empty
            fail_max: Consecutive failures before the breaker opens
            reset_timeout: Seconds before the breaker half-opens
        """
        self.backend_url = backend_url.rstrip("/")
        self.timeout = timeout
        self.export_timeout = export_timeout

        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(timeout=timeout, headers=headers)

        class BreakerListener(pybreaker.CircuitBreakerListener):
            """Listener for circuit breaker state changes."""

            def state_change(self, cb, old_state, new_state):
                """Called when circuit breaker state changes."""
                logger.warning(
                    "breaker_state_change",
                    breaker=cb.name,
                    from_state=str(old_state),
                    to_state=str(new_state),
                )

        self._breaker = pybreaker.CircuitBreaker(
            fail_max=fail_max,
            reset_timeout=reset_timeout,
            name="builder-http",
            listeners=[BreakerListener()],
        )

        logger.info("client_init", url=self.backend_url)

    # ========================================================================
    # Transport
    # ========================================================================

    def _send(self, operation: str, make_request: Callable[[], httpx.Response]) -> httpx.Response:
        """Run a request through the breaker and translate failures."""

        def _checked() -> httpx.Response:
            response = make_request()
            # 5xx trips the breaker, 4xx is the caller's problem
            if response.status_code >= 500:
                response.raise_for_status()
            return response

        try:
            response = self._breaker.call(_checked)
        except pybreaker.CircuitBreakerError as e:
            logger.error(f"{operation}_failed", error="Circuit breaker open - backend unavailable")
            raise BackendError("Backend unavailable") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"{operation}_http_error", status=e.response.status_code)
            raise BackendError(_error_message(e.response), e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.warning(f"{operation}_http_error", error=str(e))
            raise BackendError(str(e)) from e

        if response.is_error:
            logger.warning(f"{operation}_rejected", status=response.status_code)
            raise BackendError(_error_message(response), response.status_code)
        return response

    def _envelope(self, operation: str, response: httpx.Response) -> Any:
        """Unwrap ``data`` from a success envelope."""
        try:
            payload = response.json()
        except ValueError as e:
            logger.error("invalid_response", operation=operation, error=str(e))
            raise BackendError("Invalid JSON response", response.status_code) from e

        if not isinstance(payload, dict):
            logger.error("invalid_response", operation=operation, type=type(payload).__name__)
            raise BackendError("Invalid response envelope", response.status_code)

        if not payload.get("success", False):
            message = payload.get("message") or "Request failed"
            logger.error(f"{operation}_failed", error=message)
            raise BackendError(message, response.status_code)

        return payload.get("data")

    # ========================================================================
    # Projects
    # ========================================================================

    def fetch_project(self, project_id: str) -> dict[str, Any]:
        """
        Load a project.

        Returns:
            Project record; ``content`` may still be JSON-encoded

        Raises:
            BackendError: If the request fails
        """
        url = f"{self.backend_url}/projects/{project_id}"
        response = self._send("fetch_project", lambda: self._client.get(url))
        data = self._envelope("fetch_project", response)
        if not isinstance(data, dict):
            raise BackendError("Project payload missing")

        logger.info("fetch_project_success", project_id=project_id)
        return data

    def update_project(self, project_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Update a project (content, name, settings...).

        Raises:
            BackendError: If the request fails
        """
        url = f"{self.backend_url}/projects/{project_id}"
        response = self._send("update_project", lambda: self._client.put(url, json=payload))
        data = self._envelope("update_project", response)

        logger.info("update_project_success", project_id=project_id)
        return data if isinstance(data, dict) else {}

    def save_version(self, project_id: str) -> int:
        """
        Store the persisted content as a numbered version.

        Returns:
            New version number

        Raises:
            BackendError: If the request fails
        """
        url = f"{self.backend_url}/projects/{project_id}/save-version"
        response = self._send("save_version", lambda: self._client.post(url))
        data = self._envelope("save_version", response) or {}

        version = data.get("version")
        if not isinstance(version, int):
            raise BackendError("Version number missing from response")

        logger.info("save_version_success", project_id=project_id, version=version)
        return version

    # ========================================================================
    # Export
    # ========================================================================

    def generate_export(self, project_id: str, framework: str) -> bytes:
        """
        Generate the downloadable archive for a project.

        Returns:
            Zip archive bytes

        Raises:
            BackendError: If the request fails
        """
        url = f"{self.backend_url}/export/{project_id}"
        response = self._send(
            "generate_export",
            lambda: self._client.post(url, json={"framework": framework}, timeout=self.export_timeout),
        )

        logger.info("generate_export_success", project_id=project_id, framework=framework, size=len(response.content))
        return response.content

    # ========================================================================
    # Credits
    # ========================================================================

    def get_balance(self) -> CreditBalance:
        """
        Authoritative credit balance.

        Raises:
            BackendError: If the request fails
        """
        url = f"{self.backend_url}/credits/balance"
        response = self._send("get_balance", lambda: self._client.get(url))
        data = self._envelope("get_balance", response) or {}

        try:
            balance = CreditBalance(credits=int(data["credits"]), export_cost=int(data.get("exportCost", 0)))
        except (KeyError, TypeError, ValueError) as e:
            raise BackendError(f"Malformed balance payload: {e}") from e

        logger.info("get_balance_success", credits=balance.credits)
        return balance

    def health_check(self) -> bool:
        """
        Check if backend is reachable (bypasses circuit breaker).

        Returns:
            True if backend is healthy
        """
        try:
            response = self._client.get(f"{self.backend_url}/health", timeout=2.0)
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    def close(self) -> None:
        """Close HTTP client"""
        self._client.close()

    def __enter__(self) -> "BackendClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return f"HTTP {response.status_code}"
