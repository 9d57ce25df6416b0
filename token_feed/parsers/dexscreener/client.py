import httpx
from loguru import logger
from pydantic import ValidationError

from config.settings import Settings, settings as default_settings
from token_feed.parsers.dexscreener.exceptions import (
    DexScreenerDecodeError,
    DexScreenerHttpError,
)
from token_feed.parsers.dexscreener.models import TokenPair, TokenProfile, TokensResponse

PROFILES_PATH = "/token-profiles/latest/v1"
TOKENS_PATH = "/latest/dex/tokens/{addresses}"


class DexScreenerClient:
    """Async REST client for DexScreener public API (no auth required).

    Single attempt per call: every failure is raised as a DexScreenerError
    and it is up to the caller to decide whether to ask again.
    """

    def __init__(self, config: Settings | None = None) -> None:
        config = config or default_settings
        self._client = httpx.AsyncClient(
            base_url=config.dexscreener_base_url,
            timeout=config.dexscreener_timeout_sec,
            headers={"Accept": "application/json"},
        )

    async def _get_json(self, path: str) -> object:
        """GET path and decode the JSON body."""
        try:
            response = await self._client.get(path)
        except httpx.HTTPError as e:
            logger.debug(f"[DEXSCREENER] {type(e).__name__} on {path}")
            raise DexScreenerHttpError(f"Request to {path} failed: {e}") from e

        if response.status_code != 200:
            raise DexScreenerHttpError(f"HTTP {response.status_code}: {path}")

        try:
            return response.json()
        except ValueError as e:
            raise DexScreenerDecodeError(f"Invalid JSON from {path}") from e

    async def get_token_profiles(self) -> list[TokenProfile]:
        """Get the latest promoted token profiles across all chains."""
        data = await self._get_json(PROFILES_PATH)
        if not isinstance(data, list):
            raise DexScreenerDecodeError(
                f"Expected a list of profiles, got {type(data).__name__}"
            )
        try:
            return [TokenProfile.model_validate(p) for p in data]
        except ValidationError as e:
            raise DexScreenerDecodeError(f"Malformed token profile: {e}") from e

    async def get_tokens(self, addresses: list[str]) -> list[TokenPair]:
        """Get all pairs for a batch of token addresses (one request)."""
        if not addresses:
            return []
        addr_str = ",".join(addresses)
        data = await self._get_json(TOKENS_PATH.format(addresses=addr_str))
        try:
            parsed = TokensResponse.model_validate(data)
        except ValidationError as e:
            raise DexScreenerDecodeError(f"Malformed pairs response: {e}") from e
        pairs = parsed.pairs or []
        logger.debug(f"[DEXSCREENER] {len(pairs)} pairs for {len(addresses)} addresses")
        return pairs

    async def close(self) -> None:
        await self._client.aclose()
