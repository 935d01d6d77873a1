"""Supabase RPC HTTP 클라이언트.

Supabase(PostgREST)에 노출된 nearby_locations 함수를 호출합니다.
- RPC: POST /rest/v1/rpc/nearby_locations
- 인증: apikey + Authorization: Bearer {key}
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping, Sequence

import httpx

from safebed.application.common.exceptions import LocationStoreError
from safebed.application.nearby.dto import FilterCriteria
from safebed.application.nearby.ports import LocationStore

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class SupabaseRpcClient(LocationStore):
    """Supabase RPC 클라이언트."""

    RPC_PATH = "/rest/v1/rpc/"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self._base_url,
                        headers={
                            "apikey": self._api_key,
                            "Authorization": f"Bearer {self._api_key}",
                        },
                        timeout=self._timeout,
                        transport=self._transport,
                    )
        return self._client

    async def nearby_locations(
        self, criteria: FilterCriteria
    ) -> Sequence[Mapping[str, Any]] | None:
        """nearby_locations RPC를 호출합니다."""
        client = await self._get_client()

        try:
            response = await client.post(
                f"{self.RPC_PATH}{self.RPC_NAME}", json=self.rpc_params(criteria)
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise LocationStoreError(
                f"Supabase RPC {self.RPC_NAME} returned HTTP {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            raise LocationStoreError(f"Supabase RPC {self.RPC_NAME} timed out") from e
        except httpx.HTTPError as e:
            raise LocationStoreError(f"Supabase RPC {self.RPC_NAME} failed: {e}") from e
        except ValueError as e:
            raise LocationStoreError(f"Supabase RPC {self.RPC_NAME} returned invalid JSON") from e

        return self._parse_payload(payload)

    def _parse_payload(self, payload: Any) -> list[Mapping[str, Any]] | None:
        if payload is None:
            return None
        if isinstance(payload, Mapping):
            # PostgREST 오류 객체 {"code", "message", ...}
            message = payload.get("message") or payload.get("error") or "unexpected object payload"
            raise LocationStoreError(f"Supabase RPC {self.RPC_NAME} error: {message}")
        if not isinstance(payload, list):
            raise LocationStoreError(
                f"Supabase RPC {self.RPC_NAME} returned {type(payload).__name__}, expected list"
            )
        rows = [row for row in payload if isinstance(row, Mapping)]
        if len(rows) != len(payload):
            logger.warning(
                "Dropped non-object rows from RPC payload",
                extra={"dropped": len(payload) - len(rows)},
            )
        return rows

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
