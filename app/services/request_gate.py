"""Last-request-wins sequencing for lookups that can be superseded mid-flight."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass


@dataclass(frozen=True)
class RequestToken:
    slot: Hashable
    generation: int


class RequestGate:
    """
    Generation counter per slot (e.g. one per form row). Each begin() supersedes
    every earlier token for the same slot; a response is only applied when its
    token is still current.
    """

    def __init__(self) -> None:
        self._generations: dict[Hashable, int] = {}

    def begin(self, slot: Hashable = "default") -> RequestToken:
        generation = self._generations.get(slot, 0) + 1
        self._generations[slot] = generation
        return RequestToken(slot=slot, generation=generation)

    def is_current(self, token: RequestToken) -> bool:
        return self._generations.get(token.slot) == token.generation
