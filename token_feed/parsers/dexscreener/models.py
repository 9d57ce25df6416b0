from decimal import Decimal

from pydantic import BaseModel, Field


class ProfileLink(BaseModel):
    type: str | None = None
    label: str | None = None
    url: str = ""

    model_config = {"extra": "ignore", "frozen": True}


class TokenProfile(BaseModel):
    """Promoted token from /token-profiles/latest/v1."""

    url: str = ""
    chainId: str
    tokenAddress: str
    icon: str | None = None
    header: str | None = None
    description: str | None = None
    links: list[ProfileLink] = Field(default_factory=list)

    model_config = {"extra": "ignore", "frozen": True}

    @property
    def key(self) -> tuple[str, str]:
        return (self.chainId, self.tokenAddress)


class PairToken(BaseModel):
    address: str
    name: str | None = None
    symbol: str | None = None

    model_config = {"extra": "ignore", "frozen": True}


class PairPriceChange(BaseModel):
    h24: Decimal | None = None

    model_config = {"extra": "ignore", "frozen": True}


class PairLiquidity(BaseModel):
    usd: Decimal | None = None
    base: Decimal | None = None
    quote: Decimal | None = None

    model_config = {"extra": "ignore", "frozen": True}


class PairWebsite(BaseModel):
    url: str = ""

    model_config = {"extra": "ignore", "frozen": True}


class PairSocial(BaseModel):
    platform: str | None = None
    handle: str | None = None

    model_config = {"extra": "ignore", "frozen": True}


class PairInfo(BaseModel):
    imageUrl: str | None = None
    websites: list[PairWebsite] = Field(default_factory=list)
    socials: list[PairSocial] = Field(default_factory=list)

    model_config = {"extra": "ignore", "frozen": True}


class PairBoosts(BaseModel):
    active: int = 0

    model_config = {"extra": "ignore", "frozen": True}


class TokenPair(BaseModel):
    """Market pair from /latest/dex/tokens.

    ``amount`` is never sent by DexScreener; it is the trade size assigned
    when the pair is saved by the user.
    """

    chainId: str = ""
    dexId: str = ""
    url: str = ""
    pairAddress: str = ""
    baseToken: PairToken
    quoteToken: PairToken | None = None
    priceNative: str | None = None
    priceUsd: str | None = None
    priceChange: PairPriceChange | None = None
    liquidity: PairLiquidity | None = None
    fdv: Decimal | None = None
    marketCap: Decimal | None = None
    pairCreatedAt: int | None = None  # ms since epoch
    info: PairInfo | None = None
    boosts: PairBoosts | None = None
    amount: str | None = None

    model_config = {"extra": "ignore", "frozen": True}


class TokensResponse(BaseModel):
    # DexScreener answers {"pairs": null} when none of the addresses trade
    pairs: list[TokenPair] | None = None

    model_config = {"extra": "ignore"}
