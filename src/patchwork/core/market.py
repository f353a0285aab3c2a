"""CircleOfPatches - the shared circular patch market and its neutral token."""

from __future__ import annotations

import random
from collections.abc import Iterable

from patchwork.core.patch import Patch


class CircleOfPatches:
    """Ordered ring of patches with a neutral token marking the draw position.

    The token is a plain index kept in ``[0, len)`` by modular arithmetic and
    re-checked after every removal.  Patches are offered starting just after
    the token.
    """

    __slots__ = ("_patches", "_token")

    def __init__(self, patches: Iterable[Patch], token_index: int = 0) -> None:
        if patches is None:
            raise ValueError("Patches must not be None")
        self._patches: list[Patch] = list(patches)
        if not self._patches:
            raise ValueError("A circle of patches needs at least one patch")
        if not (0 <= token_index < len(self._patches)):
            raise ValueError(f"Token index {token_index} out of range")
        self._token = token_index

    @classmethod
    def shuffled(
        cls, patches: Iterable[Patch], rng: random.Random | None = None
    ) -> CircleOfPatches:
        """Build a market from *patches* in an order drawn from *rng*."""
        ordered = list(patches)
        (rng or random.Random()).shuffle(ordered)
        return cls(ordered)

    # ── Query helpers ────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._patches)

    def __getitem__(self, index: int) -> Patch:
        return self._patches[index]

    @property
    def is_empty(self) -> bool:
        return not self._patches

    @property
    def token_index(self) -> int:
        return self._token

    @property
    def patches(self) -> list[Patch]:
        """Copy of the ring in storage order."""
        return list(self._patches)

    def current_patch(self) -> Patch:
        """Patch under the neutral token."""
        if self.is_empty:
            raise ValueError("The market is empty")
        return self._patches[self._token]

    def offered_indices(self, count: int) -> list[int]:
        """Absolute indices of the *count* patches after the token."""
        if count < 0:
            raise ValueError(f"Preview size must be non-negative, got {count}")
        size = len(self._patches)
        return [(self._token + 1 + i) % size for i in range(min(count, size))]

    def patches_ahead_of_token(self, count: int) -> list[Patch]:
        """Preview the next *count* patches in circular order (no wrap-around
        duplicates when the ring is shorter than *count*)."""
        return [self._patches[i] for i in self.offered_indices(count)]

    # ── Mutation ─────────────────────────────────────────────────────────

    def advance_token(self) -> None:
        if self.is_empty:
            raise ValueError("The market is empty")
        self._token = (self._token + 1) % len(self._patches)

    def take(self, index: int) -> Patch:
        """Remove the patch at *index* and park the token in its former slot.

        After removal the slot is held by the patch that used to follow the
        purchased one, so the next player sees a fresh window.
        """
        if not (0 <= index < len(self._patches)):
            raise ValueError(
                f"Market index {index} out of range (size {len(self._patches)})"
            )
        patch = self._patches.pop(index)
        self._token = index % len(self._patches) if self._patches else 0
        self._check_token()
        return patch

    def copy(self) -> CircleOfPatches:
        clone = CircleOfPatches.__new__(CircleOfPatches)
        clone._patches = self._patches.copy()
        clone._token = self._token
        return clone

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_token(self) -> None:
        if self._patches:
            assert 0 <= self._token < len(self._patches), "token out of bounds"
        else:
            assert self._token == 0, "token must reset on an empty market"

    def __repr__(self) -> str:
        return f"CircleOfPatches({len(self._patches)} patches, token={self._token})"
