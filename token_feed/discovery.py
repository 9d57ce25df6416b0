"""Profile discovery — seeds the candidate queue from promoted token profiles."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from config.settings import Settings, settings as default_settings
from token_feed.parsers.dexscreener.exceptions import DexScreenerError
from token_feed.parsers.dexscreener.models import TokenProfile
from token_feed.session import TokenSession

if TYPE_CHECKING:
    from token_feed.parsers.dexscreener.client import DexScreenerClient

PROFILES_ERROR = "Failed to fetch token profiles"


class ProfileDiscovery:
    def __init__(
        self,
        client: DexScreenerClient,
        session: TokenSession,
        *,
        config: Settings | None = None,
    ) -> None:
        self._client = client
        self._session = session
        self._chain_id = (config or default_settings).target_chain_id

    async def discover(self) -> list[TokenProfile]:
        """Fetch the profile feed once and queue addresses on the target chain.

        On failure the error is recorded on the session and the profile list
        is left as it was.
        """
        self._session.error = None
        try:
            profiles = await self._client.get_token_profiles()
        except DexScreenerError as e:
            logger.error(f"[DISCOVERY] Error fetching token profiles: {e}")
            self._session.error = str(e) or PROFILES_ERROR
            return []

        accepted = [p for p in profiles if p.chainId == self._chain_id]
        self._session.set_profiles(accepted)
        self._session.add_candidates([p.tokenAddress for p in accepted])
        logger.info(
            f"[DISCOVERY] {len(accepted)}/{len(profiles)} profiles on {self._chain_id}"
        )
        return accepted
