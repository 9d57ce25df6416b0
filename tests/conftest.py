"""Shared test fixtures."""

from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from config.settings import Settings
from token_feed.parsers.dexscreener.models import TokenPair, TokenProfile


@pytest.fixture
def config() -> Settings:
    return Settings(
        target_chain_id="base",
        target_dex_id="uniswap",
        pair_batch_size=10,
        default_trade_amount="0.1",
    )


@pytest.fixture
def make_profile() -> Callable[..., TokenProfile]:
    def _make(address: str, chain_id: str = "base") -> TokenProfile:
        return TokenProfile.model_validate(
            {
                "url": f"https://dexscreener.com/{chain_id}/{address}",
                "chainId": chain_id,
                "tokenAddress": address,
                "icon": "https://cdn.example/icon.png",
                "description": f"Token {address}",
                "links": [{"type": "twitter", "label": "X", "url": "https://x.com/t"}],
            }
        )

    return _make


@pytest.fixture
def make_pair() -> Callable[..., TokenPair]:
    def _make(base_address: str, dex_id: str = "uniswap", amount: str | None = None) -> TokenPair:
        return TokenPair.model_validate(
            {
                "chainId": "base",
                "dexId": dex_id,
                "url": f"https://dexscreener.com/base/pair-{base_address}-{dex_id}",
                "pairAddress": f"pair-{base_address}-{dex_id}",
                "baseToken": {"address": base_address, "name": "Token", "symbol": "TKN"},
                "quoteToken": {"address": "0x4200", "name": "Wrapped Ether", "symbol": "WETH"},
                "priceNative": "0.0000012",
                "priceUsd": "0.0042",
                "priceChange": {"h24": 12.5},
                "liquidity": {"usd": 15000, "base": 1000000, "quote": 2.5},
                "fdv": 420000,
                "marketCap": 420000,
                "pairCreatedAt": 1717000000000,
                "amount": amount,
            }
        )

    return _make


@pytest.fixture
def pairs_client(make_pair) -> MagicMock:
    """Fake DexScreener client: every address resolves to one uniswap pair."""
    client = MagicMock()
    client.get_token_profiles = AsyncMock(return_value=[])
    client.get_tokens = AsyncMock(
        side_effect=lambda addresses: [make_pair(a) for a in addresses]
    )
    client.close = AsyncMock()
    return client
