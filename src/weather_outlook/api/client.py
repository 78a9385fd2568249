"""
Base API client for the OpenWeather provider.

Handles HTTP requests, session management, and error handling.
"""

import logging
from typing import Dict, Any, Optional
from urllib.parse import urlencode, quote

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core.exceptions import UpstreamError


class APIClient:
    """Base client for interacting with the OpenWeather HTTP API."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: int = 30,
        max_retries: int = 0,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            base_url: Base URL for the API
            api_key: Provider access key sent as 'appid'
            timeout: Request timeout in seconds
            max_retries: Transport-level retry attempts (0 disables retries)
            logger: Logger instance
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

        # Non-success statuses are returned to the caller once retries are
        # exhausted so they surface as UpstreamError, not urllib3 RetryError.
        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self.session.headers.update({
            "Accept": "application/json"
        })

    @property
    def has_api_key(self) -> bool:
        """True when a non-blank access key is configured."""
        return bool(self.api_key and self.api_key.strip())

    def build_url(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> str:
        """
        Build a request URL with percent-encoded query parameters.

        The access key is appended as 'appid' when configured.
        """
        query: Dict[str, Any] = dict(params or {})
        if self.api_key:
            query["appid"] = self.api_key
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        if query:
            url = f"{url}?{urlencode(query, quote_via=quote)}"
        return url

    def _redact(self, url: str) -> str:
        if self.api_key:
            return url.replace(quote(self.api_key, safe=""), "***")
        return url

    def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        **kwargs
    ) -> requests.Response:
        """
        Make HTTP request to API.

        Args:
            method: HTTP method
            endpoint: API endpoint (without base URL)
            params: Query parameters (percent-encoded into the URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            UpstreamError: On connection failure or non-success status
        """
        url = self.build_url(endpoint, params)
        safe_url = self._redact(url)

        self.logger.debug(f"{method} {safe_url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                **kwargs
            )
        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: {method} {safe_url} - {e}")
            raise UpstreamError(f"Request to {endpoint} failed: {e}") from e

        if not response.ok:
            self.logger.error(
                f"API request failed: {method} {safe_url} - HTTP {response.status_code}"
            )
            raise UpstreamError(
                f"{endpoint} request failed with status {response.status_code}",
                status_code=response.status_code
            )

        return response

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make GET request.

        Args:
            endpoint: API endpoint
            params: Query parameters

        Returns:
            Decoded JSON body

        Raises:
            UpstreamError: On request failure or a body that is not JSON
        """
        response = self._make_request("GET", endpoint, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                f"{endpoint} returned a body that is not JSON",
                status_code=response.status_code
            ) from e

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
