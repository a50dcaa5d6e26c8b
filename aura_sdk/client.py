"""Aura JSON-RPC client: typed endpoints, response caching and pagination."""
from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

from .cache import MemoryCache, RedisCache
from .config import DEFAULT_BASE_URL, AuraConfig
from .errors import AuraError, TransportError, is_aura_error_response
from .interfaces.cache_provider import CacheProvider
from .interfaces.transport import Transport
from .models import (
    GetAssetsByAuthorityParams,
    GetAssetsByCreatorParams,
    GetAssetsByGroupParams,
    GetAssetsByOwnerParams,
    GetSignaturesForAssetParams,
    GetTokenAccountsParams,
    SearchAssetsParams,
)
from .pagination import paginate, short_page, total_exhausted
from .result import Err, Ok, Result
from .transport import AiohttpTransport

logger = logging.getLogger(__name__)

# Every envelope carries the same id: one request per connection, no
# multiplexing. Must become unique if requests are ever pipelined.
REQUEST_ID = 1

RpcResult = Result[Any, AuraError | TransportError]


class AuraClient:
    """Async client for the Aura digital asset API.

    Single-entity lookups (``get_asset``, ``get_asset_proof``) go through the
    optional cache; list endpoints never do, since enumerable result sets
    would grow the cache without bound.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        cache_ttl: int = 60,
        cache_provider: CacheProvider | None = None,
        transport: Transport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.cache_ttl = cache_ttl
        self.cache_provider = cache_provider
        self.transport: Transport = transport or AiohttpTransport()
        self._full_url = f"{base_url}/{api_key}"

    @classmethod
    def from_config(cls, config: AuraConfig) -> AuraClient:
        """Build a client with the transport and cache backend from ``config``."""
        cache_provider: CacheProvider | None = None
        if config.cache.backend == "memory":
            cache_provider = MemoryCache()
        elif config.cache.backend == "redis":
            cache_provider = RedisCache.from_config(config.cache.redis)

        return cls(
            config.api_key,
            config.base_url,
            cache_ttl=config.cache.ttl_seconds,
            cache_provider=cache_provider,
            transport=AiohttpTransport(timeout=config.request_timeout),
        )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def make_request(self, method: str, params: Any) -> RpcResult:
        """Send one JSON-RPC request and classify the outcome."""
        payload = {"jsonrpc": "2.0", "id": REQUEST_ID, "method": method, "params": params}
        logger.debug("Dispatching %s", method)

        try:
            response = await self.transport.post_json(self._full_url, payload)
        except Exception as e:
            logger.warning("Request %s failed: %s", method, e)
            return Err(TransportError(f"Request failed: {e}", cause=e))

        if not response.ok:
            logger.warning("Request %s returned HTTP %s", method, response.status)
            return Err(
                TransportError(
                    f"HTTP error! status: {response.status}", status=response.status
                )
            )

        try:
            body = json.loads(response.text)
        except ValueError as e:
            logger.warning("Request %s returned an undecodable body: %s", method, e)
            return Err(
                TransportError(
                    "Response body is not valid JSON", status=response.status, cause=e
                )
            )

        if is_aura_error_response(body):
            error = AuraError.from_response(body)
            logger.warning("Request %s failed with code %s: %s", method, error.code, error.message)
            return Err(error)

        return Ok(body)

    async def cached_fetch(
        self,
        prefix: str,
        entity_id: str,
        ttl: int,
        dispatch: Callable[[], Awaitable[RpcResult]],
    ) -> RpcResult:
        """Serve ``prefix:entity_id`` from cache, else dispatch and store."""
        key = f"{prefix}:{entity_id}"

        if self.cache_provider is not None:
            try:
                cached = await self.cache_provider.get(key)
                if cached is not None:
                    logger.debug("Cache hit for %s", key)
                    return Ok(json.loads(cached))
            except Exception as e:
                logger.warning("Cache read for %s failed: %s", key, e)

        result = await dispatch()

        if isinstance(result, Ok) and self.cache_provider is not None:
            try:
                await self.cache_provider.set(key, json.dumps(result.value), ttl)
            except Exception as e:
                logger.warning("Cache write for %s failed: %s", key, e)

        return result

    # ------------------------------------------------------------------
    # Single-entity lookups (cached)
    # ------------------------------------------------------------------

    async def get_asset(self, asset_id: str) -> RpcResult:
        """Fetch a single asset (for example by mint address)."""
        return await self.cached_fetch(
            "asset",
            asset_id,
            self.cache_ttl,
            lambda: self.make_request("getAsset", {"id": asset_id}),
        )

    async def get_asset_proof(self, asset_id: str) -> RpcResult:
        """Fetch the merkle proof of a compressed NFT."""
        return await self.cached_fetch(
            "proof",
            asset_id,
            self.cache_ttl,
            lambda: self.make_request("getAssetProof", {"id": asset_id}),
        )

    # ------------------------------------------------------------------
    # Batch lookups
    # ------------------------------------------------------------------

    async def get_asset_batch(self, asset_ids: list[str]) -> RpcResult:
        return await self.make_request("getAssetBatch", {"ids": asset_ids})

    async def get_asset_proof_batch(self, asset_ids: list[str]) -> RpcResult:
        return await self.make_request("getAssetProofBatch", {"ids": asset_ids})

    # ------------------------------------------------------------------
    # List endpoints
    # ------------------------------------------------------------------

    async def get_assets_by_owner(self, params: GetAssetsByOwnerParams) -> RpcResult:
        """Fetch one page of assets held by ``ownerAddress``.

        Optional keys: ``limit``, ``page``, ``sortBy`` (``created``,
        ``updated``, ``recentAction``, ``none``) and ``sortDirection``.
        """
        return await self.make_request("getAssetsByOwner", params)

    async def search_assets(self, params: SearchAssetsParams) -> RpcResult:
        return await self.make_request("searchAssets", params)

    async def get_assets_by_authority(self, params: GetAssetsByAuthorityParams) -> RpcResult:
        return await self.make_request("getAssetsByAuthority", params)

    async def get_assets_by_creator(self, params: GetAssetsByCreatorParams) -> RpcResult:
        return await self.make_request("getAssetsByCreator", params)

    async def get_assets_by_group(self, params: GetAssetsByGroupParams) -> RpcResult:
        """Fetch one page of assets in a group, e.g. ``groupKey="collection"``."""
        return await self.make_request("getAssetsByGroup", params)

    async def get_signatures_for_asset(self, params: GetSignaturesForAssetParams) -> RpcResult:
        return await self.make_request("getSignaturesForAsset", params)

    async def get_token_accounts(self, params: GetTokenAccountsParams) -> RpcResult:
        return await self.make_request("getTokenAccounts", params)

    # ------------------------------------------------------------------
    # Paginators
    # ------------------------------------------------------------------

    def paginate_assets_by_owner(
        self, params: GetAssetsByOwnerParams
    ) -> AsyncIterator[RpcResult]:
        """Iterate every page of assets by owner.

        Example::

            async for page in client.paginate_assets_by_owner(
                {"ownerAddress": owner, "limit": 100}
            ):
                if is_error(page):
                    break
                handle(page.value["result"]["items"])
        """
        return paginate(self.get_assets_by_owner, dict(params), total_exhausted)

    def paginate_search_assets(self, params: SearchAssetsParams) -> AsyncIterator[RpcResult]:
        return paginate(self.search_assets, dict(params), total_exhausted)

    def paginate_assets_by_authority(
        self, params: GetAssetsByAuthorityParams
    ) -> AsyncIterator[RpcResult]:
        return paginate(self.get_assets_by_authority, dict(params), total_exhausted)

    def paginate_assets_by_creator(
        self, params: GetAssetsByCreatorParams
    ) -> AsyncIterator[RpcResult]:
        return paginate(self.get_assets_by_creator, dict(params), total_exhausted)

    def paginate_assets_by_group(
        self, params: GetAssetsByGroupParams
    ) -> AsyncIterator[RpcResult]:
        return paginate(self.get_assets_by_group, dict(params), total_exhausted)

    def paginate_signatures_for_asset(
        self, params: GetSignaturesForAssetParams
    ) -> AsyncIterator[RpcResult]:
        # signature pages carry no usable total
        return paginate(self.get_signatures_for_asset, dict(params), short_page("items"))

    def paginate_token_accounts(
        self, params: GetTokenAccountsParams
    ) -> AsyncIterator[RpcResult]:
        return paginate(self.get_token_accounts, dict(params), short_page("token_accounts"))

    async def close(self) -> None:
        """Release backend connections held by the cache provider."""
        close = getattr(self.cache_provider, "close", None)
        if close is not None:
            await close()
