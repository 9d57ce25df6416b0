"""Token provider — owns one session and exposes it to the display layer.

Lifecycle::

    async with TokenProvider(configure_logging=True) as provider:
        await provider.activate()          # profiles, then the first page of pairs
        await provider.fetch_more_tokens() # one more page per call
"""

from __future__ import annotations

from loguru import logger

from config.settings import Settings, settings as default_settings
from token_feed.discovery import ProfileDiscovery
from token_feed.parsers.dexscreener.client import DexScreenerClient
from token_feed.parsers.dexscreener.models import TokenPair, TokenProfile
from token_feed.resolver import BatchedPairResolver
from token_feed.saved_tokens import SavedTokenRegistry
from token_feed.session import TokenSession
from token_feed.utils.logger import setup_logger


class TokenProvider:
    def __init__(
        self,
        client: DexScreenerClient | None = None,
        *,
        config: Settings | None = None,
        configure_logging: bool = False,
    ) -> None:
        config = config or default_settings
        if configure_logging:
            setup_logger(config)
        self._owns_client = client is None
        self._client = client or DexScreenerClient(config)
        self._session = TokenSession(batch_size=config.pair_batch_size)
        self._discovery = ProfileDiscovery(self._client, self._session, config=config)
        self._resolver = BatchedPairResolver(self._client, self._session, config=config)
        self._saved = SavedTokenRegistry(default_amount=config.default_trade_amount)
        self._activated = False

    async def __aenter__(self) -> TokenProvider:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def activate(self) -> None:
        """Run discovery once, then resolve the first page if anything was queued."""
        if self._activated:
            logger.debug("[PROVIDER] Already activated, ignoring")
            return
        self._activated = True

        # Keeps fetch_more_tokens() out until the first page is requested
        self._session.loading = True
        try:
            await self._discovery.discover()
        finally:
            self._session.loading = False

        if self._session.candidates:
            await self._resolver.fetch_next_batch()
        else:
            logger.warning("[PROVIDER] No candidate addresses after discovery")

    async def fetch_more_tokens(self) -> list[TokenPair]:
        """Load the next page; a no-op while loading or when nothing is left."""
        if self._session.loading or not self._session.has_more_tokens:
            return []
        return await self._resolver.fetch_next_batch()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.close()

    # -- saved tokens -------------------------------------------------------

    def add_token(self, pair: TokenPair, amount: str | None = None) -> TokenPair:
        return self._saved.add_token(pair, amount)

    def remove_token(self, base_address: str) -> int:
        return self._saved.remove_token(base_address)

    def set_default_amount(self, amount: str) -> None:
        self._saved.set_default_amount(amount)

    @property
    def saved_tokens(self) -> list[TokenPair]:
        return self._saved.saved_tokens

    @property
    def default_amount(self) -> str:
        return self._saved.default_amount

    # -- pipeline state -----------------------------------------------------

    @property
    def token_profiles(self) -> list[TokenProfile]:
        return self._session.profiles

    @property
    def pairs(self) -> list[TokenPair]:
        return self._session.pairs

    uniswap_pairs = pairs

    @property
    def loading(self) -> bool:
        return self._session.loading

    @property
    def error(self) -> str | None:
        return self._session.error

    @property
    def has_more_tokens(self) -> bool:
        return self._session.has_more_tokens

    @property
    def session(self) -> TokenSession:
        return self._session
