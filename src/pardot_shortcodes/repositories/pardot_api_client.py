"""Pardot API catalog fetcher.

Uses the Pardot v3/v4 REST API to list forms and dynamic content. Each
fetch logs in with the configured email, password and user key, then
pages through the query endpoint until the whole catalog is read.

Requirements:
    - A Pardot user with API access
    - PARDOT_EMAIL, PARDOT_PASSWORD and PARDOT_USER_KEY set

Endpoints used:
- POST /api/login/version/{v}
- POST /api/form/version/{v}/do/query
- POST /api/dynamicContent/version/{v}/do/query
"""

import logging
from typing import Any

import httpx

from pardot_shortcodes.config import settings
from pardot_shortcodes.entities import CatalogEntity, EntityKind
from pardot_shortcodes.exceptions import AuthenticationError, RemoteUnavailableError

log = logging.getLogger(__name__)


class PardotApiClient:
    """Pardot-backed implementation of the CatalogFetcher protocol.

    This class satisfies the CatalogFetcher protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = PardotApiClient.create()
        forms = await client.fetch(EntityKind.FORM)
        print([form.name for form in forms])
        await client.close()
        ```
    """

    # API object name and result key per kind
    OBJECTS = {
        EntityKind.FORM: "form",
        EntityKind.DYNAMIC_CONTENT: "dynamicContent",
    }

    # Pardot error codes meaning "your credentials are no good"
    # 1: Invalid API key or user key, 15: Login failed
    AUTH_ERROR_CODES = {"1", "15"}

    PAGE_SIZE = 200

    def __init__(
        self,
        email: str | None = None,
        password: str | None = None,
        user_key: str | None = None,
        base_url: str | None = None,
        api_version: int | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Pardot API client.

        Args:
            email: Pardot login email. Defaults to settings.pardot_email.
            password: Pardot password. Defaults to settings.pardot_password.
            user_key: Pardot user key. Defaults to settings.pardot_user_key.
            base_url: API base URL. Defaults to settings.pardot_base_url.
            api_version: 3 or 4. Defaults to settings.pardot_api_version.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self._email = email or settings.pardot_email
        self._password = password or settings.pardot_password
        self._user_key = user_key or settings.pardot_user_key
        self._base_url = (base_url or settings.pardot_base_url).rstrip("/")
        self._api_version = api_version or settings.pardot_api_version
        self._timeout = timeout or settings.pardot_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        api_version: int | None = None,
    ) -> "PardotApiClient":
        """Factory method to create PardotApiClient with credentials from settings.

        Args:
            base_url: API base URL. If None, uses settings.
            api_version: API version. If None, uses settings.

        Returns:
            Configured PardotApiClient
        """
        return cls(base_url=base_url, api_version=api_version)

    async def login(self) -> str:
        """Exchange the configured credentials for an API key.

        Returns:
            A fresh Pardot API key

        Raises:
            AuthenticationError: If credentials are missing or rejected
            RemoteUnavailableError: If the API cannot be reached
        """
        if not (self._email and self._password and self._user_key):
            raise AuthenticationError("Pardot credentials are not configured")

        data = await self._post(
            f"/api/login/version/{self._api_version}",
            data={
                "email": self._email,
                "password": self._password,
                "user_key": self._user_key,
                "format": "json",
            },
        )
        api_key = data.get("api_key")
        if not api_key:
            raise AuthenticationError("Pardot login response did not include an api_key")
        return api_key

    async def fetch(self, kind: EntityKind) -> list[CatalogEntity]:
        """Fetch the complete catalog for a kind.

        Args:
            kind: Which catalog to fetch

        Returns:
            All entities of that kind in API order

        Raises:
            AuthenticationError: If credentials are missing or rejected
            RemoteUnavailableError: If the API cannot be reached or errors
        """
        api_key = await self.login()
        object_name = self.OBJECTS[kind]
        headers = {"Authorization": f"Pardot api_key={api_key}, user_key={self._user_key}"}

        entities: list[CatalogEntity] = []
        offset = 0
        while True:
            data = await self._post(
                f"/api/{object_name}/version/{self._api_version}/do/query",
                data={"format": "json", "limit": self.PAGE_SIZE, "offset": offset},
                headers=headers,
            )
            result = data.get("result") or {}
            if not isinstance(result, dict):
                raise RemoteUnavailableError(f"Pardot {object_name} query returned a malformed result")
            records = self._records(result, object_name)

            for record in records:
                try:
                    entities.append(CatalogEntity.from_dict(record))
                except (KeyError, TypeError) as e:
                    log.warning("Skipping malformed Pardot %s record: %s", object_name, e)

            offset += len(records)
            try:
                total = int(result.get("total_results") or 0)
            except (TypeError, ValueError) as e:
                raise RemoteUnavailableError(f"Pardot {object_name} query returned a bad total_results: {e}") from e
            if not records or offset >= total:
                break

        log.info("Fetched %d %s entries from Pardot", len(entities), object_name)
        return entities

    @staticmethod
    def _records(result: dict[str, Any], object_name: str) -> list[dict[str, Any]]:
        """Normalize a query result page to a list of records.

        Pardot returns a bare object instead of a list when a page holds
        exactly one record, and omits the key entirely when it holds none.
        """
        records = result.get(object_name)
        if records is None:
            return []
        if isinstance(records, dict):
            return [records]
        if not isinstance(records, list):
            raise RemoteUnavailableError(f"Pardot {object_name} records are not a list")
        return [record for record in records if isinstance(record, dict)]

    async def _post(
        self,
        path: str,
        data: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """POST to the API and return the decoded JSON body.

        Raises:
            AuthenticationError: On a credential error code or HTTP 401
            RemoteUnavailableError: On transport, HTTP or API errors
        """
        try:
            response = await self.client.post(path, data=data, headers=headers)
        except httpx.HTTPError as e:
            raise RemoteUnavailableError(f"Pardot API request to {path} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict):
            attributes = payload.get("@attributes") or {}
            if attributes.get("stat") == "fail":
                code = str(attributes.get("err_code", ""))
                message = payload.get("err") or "unknown error"
                if code in self.AUTH_ERROR_CODES:
                    raise AuthenticationError(f"Pardot rejected credentials: {message}")
                raise RemoteUnavailableError(f"Pardot API error {code}: {message}")

        if response.status_code == httpx.codes.UNAUTHORIZED:
            raise AuthenticationError("Pardot API returned HTTP 401")
        if response.is_error:
            raise RemoteUnavailableError(f"Pardot API returned HTTP {response.status_code} for {path}")
        if not isinstance(payload, dict):
            raise RemoteUnavailableError(f"Pardot API returned a non-JSON response for {path}")

        return payload

    async def is_available(self) -> bool:
        """Check if Pardot accepts the configured credentials.

        Returns:
            True if a login succeeds, False otherwise
        """
        try:
            await self.login()
            return True
        except (AuthenticationError, RemoteUnavailableError) as e:
            log.warning("Pardot API is not available: %s", e)
            return False

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
