"""
HTTP layer over the LUMA Server API

Every call degrades instead of raising: transport errors, non-2xx replies and
undecodable bodies are logged and turned into an empty list, None or False.
"""
import logging
from typing import Any, Dict, List, Optional

# HTTP client to make requests to the server
import httpx

from frontend.config import settings

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def _decode(response: httpx.Response, default: Any, action: str) -> Any:
    if not response.is_success:
        logger.error(f"Failed to {action}: status {response.status_code}")
        return default
    try:
        return response.json()
    except ValueError as e:
        logger.error(f"Failed to {action}: undecodable body ({e})")
        return default


class UsersAPI:
    """User operations"""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def get_all(self) -> List[Record]:
        try:
            response = await self._client.get("/users")
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch users: {e}")
            return []
        return _decode(response, [], "fetch users")

    async def add(self, user: Record) -> Optional[Record]:
        try:
            response = await self._client.post("/users", json=user)
        except httpx.HTTPError as e:
            logger.error(f"Failed to add user: {e}")
            return None
        return _decode(response, None, "add user")

    async def update(self, updated_user: Record) -> Optional[Record]:
        """
        Send the full user to PUT /users/{id}

        Args:
            updated_user: User record, its "id" selects the stored record

        Returns:
            Record as stored by the server, or None on any failure (including 404)
        """
        try:
            response = await self._client.put(
                f"/users/{updated_user.get('id')}", json=updated_user
            )
        except httpx.HTTPError as e:
            logger.error(f"Failed to update user: {e}")
            return None
        return _decode(response, None, "update user")


class ArtAPI:
    """Artwork operations"""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def get_all(self) -> List[Record]:
        try:
            response = await self._client.get("/art")
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch art: {e}")
            return []
        return _decode(response, [], "fetch art")

    async def add(self, new_art: Record) -> Optional[Record]:
        try:
            response = await self._client.post("/art", json=new_art)
        except httpx.HTTPError as e:
            logger.error(f"Failed to add art: {e}")
            return None
        return _decode(response, None, "add art")

    async def delete(self, art_id: Any) -> bool:
        try:
            response = await self._client.delete(f"/art/{art_id}")
        except httpx.HTTPError as e:
            logger.error(f"Failed to delete art: {e}")
            return False
        return response.is_success


class LumaAPI:
    """
    Client for the LUMA Server API

    Usage:
        async with LumaAPI() as api:
            artworks = await api.art.get_all()

    A preconfigured httpx.AsyncClient can be passed in, e.g. one bound to an
    in-process ASGI app; it is then left open on exit.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.API_BASE,
            timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT,
        )
        self.users = UsersAPI(self._client)
        self.art = ArtAPI(self._client)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "LumaAPI":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
