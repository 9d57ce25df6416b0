from token_feed.parsers.dexscreener.models import TokenPair


class SavedTokenRegistry:
    """Pairs the user picked for a trade, each with its trade amount.

    Adding does not check for duplicates; removing drops every entry with the
    given base token address.
    """

    def __init__(self, default_amount: str = "0.1") -> None:
        self._tokens: list[TokenPair] = []
        self._default_amount = default_amount

    @property
    def saved_tokens(self) -> list[TokenPair]:
        return list(self._tokens)

    @property
    def default_amount(self) -> str:
        return self._default_amount

    def set_default_amount(self, amount: str) -> None:
        self._default_amount = amount

    def add_token(self, pair: TokenPair, amount: str | None = None) -> TokenPair:
        if amount is None:
            amount = pair.amount if pair.amount is not None else self._default_amount
        saved = pair.model_copy(update={"amount": amount})
        self._tokens.append(saved)
        return saved

    def remove_token(self, base_address: str) -> int:
        """Remove all entries for base_address, return how many were dropped."""
        before = len(self._tokens)
        self._tokens = [t for t in self._tokens if t.baseToken.address != base_address]
        return before - len(self._tokens)
