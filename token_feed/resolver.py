"""Batched pair resolver — turns queued addresses into market pairs, one page per call."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from config.settings import Settings, settings as default_settings
from token_feed.parsers.dexscreener.exceptions import DexScreenerError
from token_feed.parsers.dexscreener.models import TokenPair
from token_feed.session import TokenSession

if TYPE_CHECKING:
    from token_feed.parsers.dexscreener.client import DexScreenerClient

PAIRS_ERROR = "Failed to fetch token pairs"


class BatchedPairResolver:
    def __init__(
        self,
        client: DexScreenerClient,
        session: TokenSession,
        *,
        config: Settings | None = None,
    ) -> None:
        self._client = client
        self._session = session
        self._dex_id = (config or default_settings).target_dex_id

    async def fetch_next_batch(self) -> list[TokenPair]:
        """Advance pagination by one batch and return the pairs it added.

        Ignored while another batch is loading or once the session is
        exhausted. A failed request leaves page, resolved set and pairs
        untouched, so the next call asks for the same window again.
        """
        session = self._session
        if session.loading or session.exhausted:
            return []

        # Must be set before the first await
        session.loading = True
        session.error = None
        try:
            window = session.next_window()
            if not window:
                logger.info(f"[RESOLVER] No unresolved addresses left (page {session.page})")
                session.mark_exhausted()
                return []

            try:
                pairs = await self._client.get_tokens(window)
            except DexScreenerError as e:
                logger.error(f"[RESOLVER] Error fetching token pairs: {e}")
                session.error = str(e) or PAIRS_ERROR
                return []

            matched = [p for p in pairs if p.dexId == self._dex_id]
            session.record_batch(window, matched)
            logger.info(
                f"[RESOLVER] Page {session.page - 1}: {len(matched)} {self._dex_id} pairs "
                f"from {len(window)} addresses"
                + ("" if session.has_more_tokens else " (last page)")
            )
            return matched
        finally:
            session.loading = False
