"""HTTP client for the User API."""

import logging

import requests
from requests.models import Response

from common.models.user import User
from web.config import WebSettings

logger = logging.getLogger(__name__)


class UserApiError(Exception):
    """Raised when a User API call fails at the transport or HTTP level."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UserApiClient:
    """REST client for ``/api/user``."""

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
        config: WebSettings | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_url: Base URL of the API. If None, taken from configuration.
            timeout: Request timeout in seconds. If None, taken from configuration.
            session: Optional requests session to reuse
            config: Client configuration. If None, will load from environment.
        """
        if config is None:
            from web.config import get_web_settings

            config = get_web_settings()

        self._api_url = (api_url or config.api_url).rstrip("/")
        self._timeout = timeout if timeout is not None else config.request_timeout
        self._session = session or requests.Session()

    def get_api_url(self) -> str:
        return self._api_url

    def _url(self, path: str) -> str:
        return f"{self._api_url}/api/user{path}"

    def _request(self, method: str, path: str = "", **kwargs) -> Response:
        url = self._url(path)
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as e:
            raise UserApiError(f"Http failure response for {url}: {e}") from e

        if not response.ok:
            raise UserApiError(
                f"Http failure response for {url}: {response.status_code} {response.reason}",
                status_code=response.status_code,
            )
        return response

    def get_users(self) -> list[User]:
        """Fetch every user."""
        response = self._request("GET")
        return [User.model_validate(item) for item in response.json()]

    def get_user(self, user_id: int) -> User | None:
        """Fetch one user.

        Returns:
            The user, or None if the API answered 404
        """
        try:
            response = self._request("GET", f"/{user_id}")
        except UserApiError as e:
            if e.status_code == 404:
                return None
            raise
        return User.model_validate(response.json())

    def create_user(self, name: str, email: str) -> User:
        """Create a user and return the stored record with its assigned id."""
        response = self._request("POST", json={"name": name, "email": email})
        user = User.model_validate(response.json())
        logger.info("Created user %s at %s", user.id, response.headers.get("Location"))
        return user
