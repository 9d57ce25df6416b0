"""Per-activation pagination state shared by discovery and the pair resolver.

Only the two pipeline stages mutate a session; consumers get copies through
the read accessors.
"""

from token_feed.parsers.dexscreener.models import TokenPair, TokenProfile


class TokenSession:
    def __init__(self, batch_size: int = 10) -> None:
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.batch_size = batch_size
        self._profiles: list[TokenProfile] = []
        self._candidates: list[str] = []
        self._resolved: set[str] = set()
        self._pairs: list[TokenPair] = []
        self._page = 1
        self._exhausted = False
        self.loading = False
        self.error: str | None = None

    # -- read accessors ---------------------------------------------------

    @property
    def profiles(self) -> list[TokenProfile]:
        return list(self._profiles)

    @property
    def candidates(self) -> list[str]:
        return list(self._candidates)

    @property
    def resolved(self) -> frozenset[str]:
        return frozenset(self._resolved)

    @property
    def pairs(self) -> list[TokenPair]:
        return list(self._pairs)

    @property
    def page(self) -> int:
        return self._page

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def has_more_tokens(self) -> bool:
        return not self._exhausted

    # -- mutation (pipeline stages only) ------------------------------------

    def set_profiles(self, profiles: list[TokenProfile]) -> None:
        self._profiles = list(profiles)

    def add_candidates(self, addresses: list[str]) -> None:
        self._candidates.extend(addresses)

    def unresolved(self) -> list[str]:
        """Candidates not yet part of a fetched batch, in queue order."""
        return [a for a in self._candidates if a not in self._resolved]

    def next_window(self) -> list[str]:
        """Addresses for the current page.

        The slice is taken over the *current* unresolved list while the page
        keeps advancing, so after resolved addresses drop out of that list the
        offset skips past still-unresolved ones. With a queue that is filled
        once before paging starts this yields the first, third, fifth... block
        of B of the original queue.
        TODO: decide whether to page from offset 0 of the unresolved list
        instead; changing it alters which addresses a session ever resolves.
        """
        start = (self._page - 1) * self.batch_size
        return self.unresolved()[start:start + self.batch_size]

    def record_batch(self, window: list[str], pairs: list[TokenPair]) -> None:
        """Commit a successful batch: every window address counts as resolved."""
        self._resolved.update(window)
        self._pairs.extend(pairs)
        self._page += 1
        if len(window) < self.batch_size:
            self._exhausted = True

    def mark_exhausted(self) -> None:
        self._exhausted = True
