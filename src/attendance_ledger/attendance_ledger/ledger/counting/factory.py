from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...core.enums import CountingPolicy, MarkerMode
from .base import CountingStrategy
from .non_empty_strategy import NonEmptyCounting
from .present_only_strategy import PresentOnlyCounting


@dataclass
class CountingStrategyFactory:
    """Factory Pattern: pick the counting rule for a marker mode.

    Time-stamped markers count by presence; status words count only when they
    say ``present``. An explicit policy wins over the mode default.
    """

    policy: Optional[CountingPolicy] = None

    def for_mode(self, mode: MarkerMode) -> CountingStrategy:
        policy = self.policy
        if policy is None:
            policy = CountingPolicy.PRESENT_ONLY if mode == MarkerMode.STATUS else CountingPolicy.NON_EMPTY

        if policy == CountingPolicy.PRESENT_ONLY:
            return PresentOnlyCounting()
        return NonEmptyCounting()
