"""Stream Chat client implementation.

Talks to the Stream Chat REST API directly. Server-side calls are
authenticated with a JWT signed by the API secret; user tokens are
JWTs carrying ``user_id`` signed by the same secret.
"""

import httpx
import jwt
import logfire

from guard.domain.error import UpstreamError
from guard.domain.service.chat_service import ChatClient

SERVICE_NAME = "stream_chat"


class StreamChatClient(ChatClient):
    """Base class for Stream Chat clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealStreamChatClient(StreamChatClient):
    """Stream Chat client over HTTPS."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        base_url: str = "https://chat.stream-io-api.com",
        timeout: float = 10.0,
    ) -> None:
        """Initialize Stream Chat client.

        Args:
            api_key: Stream application key
            api_secret: Stream application secret
            base_url: REST API base URL
            timeout: Per-request timeout in seconds
        """
        self.api_key = api_key
        self.api_secret = api_secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _server_headers(self) -> dict[str, str]:
        server_token = jwt.encode({"server": True}, self.api_secret, algorithm="HS256")
        return {
            "Authorization": server_token,
            "stream-auth-type": "jwt",
        }

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Send a server-authenticated request.

        Raises:
            UpstreamError: On transport errors, timeouts and non-2xx responses
        """
        params = {"api_key": self.api_key, **kwargs.pop("params", {})}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method,
                    f"{self.base_url}{path}",
                    params=params,
                    headers=self._server_headers(),
                    **kwargs,
                )
        except httpx.HTTPError as e:
            logfire.error("Stream Chat HTTP error", path=path, error=str(e))
            raise UpstreamError(SERVICE_NAME, f"HTTP error: {e}") from e

        if response.is_error:
            logfire.error(
                "Stream Chat request failed",
                path=path,
                status_code=response.status_code,
                error=response.text,
            )
            raise UpstreamError(
                SERVICE_NAME, f"Request failed: {response.status_code}"
            )

        return response

    async def upsert_identity(self, user_id: str, name: str) -> None:
        """Create or update the user on Stream."""
        await self._request(
            "POST",
            "/users",
            json={"users": {user_id: {"id": user_id, "name": name}}},
        )
        logfire.info("Stream user upserted", user_id=user_id)

    def create_session_token(self, user_id: str) -> str:
        """Sign a Stream user token."""
        return jwt.encode({"user_id": user_id}, self.api_secret, algorithm="HS256")

    async def delete_identity(self, user_id: str) -> None:
        """Hard-delete the user on Stream."""
        await self._request(
            "DELETE",
            f"/users/{user_id}",
            params={"hard_delete": "true"},
        )
        logfire.info("Stream user deleted", user_id=user_id)


class MockStreamChatClient(StreamChatClient):
    """Mock Stream Chat client for testing.

    Keeps identities in memory. Set ``fail_upsert`` or ``fail_delete`` to
    simulate a provider outage.
    """

    def __init__(self) -> None:
        self.identities: dict[str, str] = {}
        self.fail_upsert = False
        self.fail_delete = False

    async def upsert_identity(self, user_id: str, name: str) -> None:
        if self.fail_upsert:
            raise UpstreamError(SERVICE_NAME, "mock upsert failure")
        self.identities[user_id] = name

    def create_session_token(self, user_id: str) -> str:
        return f"mock-chat-token-{user_id}"

    async def delete_identity(self, user_id: str) -> None:
        if self.fail_delete:
            raise UpstreamError(SERVICE_NAME, "mock delete failure")
        self.identities.pop(user_id, None)
