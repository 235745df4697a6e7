"""Weighted prize table used by the server-side draw."""

from __future__ import annotations

import json
import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from marshmallow import ValidationError as MarshmallowValidationError

from luckydraw.errors import ConfigurationError
from luckydraw.schemas.prize import PrizeSchema


@dataclass(frozen=True)
class Prize:
    id: str
    label: str
    weight: int


DEFAULT_PRIZES: tuple[Prize, ...] = (
    Prize(id="prize-1", label="Prize 1", weight=1),
    Prize(id="prize-2", label="Prize 2", weight=4),
    Prize(id="prize-3", label="Prize 3", weight=15),
    Prize(id="thank-you", label="Thank you for participating", weight=80),
)

_prize_schema = PrizeSchema(many=True)


class PrizeTable:
    """An ordered list of prizes drawn by weight."""

    def __init__(self, prizes: Sequence[Prize]) -> None:
        if not prizes:
            raise ConfigurationError("Prize table is empty")
        if sum(p.weight for p in prizes) <= 0:
            raise ConfigurationError("Prize weights must sum to more than zero")
        self.prizes: tuple[Prize, ...] = tuple(prizes)

    @classmethod
    def default(cls) -> "PrizeTable":
        return cls(DEFAULT_PRIZES)

    @classmethod
    def from_config(cls, raw: str | list[dict[str, Any]] | None) -> "PrizeTable":
        """Build from PRIZE_TABLE (JSON text or already-parsed list)."""

        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return cls.default()

        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"PRIZE_TABLE is not valid JSON: {e}") from e

        if not isinstance(raw, list):
            raise ConfigurationError("PRIZE_TABLE must be a JSON list")

        try:
            items = _prize_schema.load(raw)
        except MarshmallowValidationError as e:
            raise ConfigurationError(f"Invalid PRIZE_TABLE: {e.messages}") from e

        return cls([Prize(id=i["id"], label=i["label"], weight=int(i["weight"])) for i in items])

    def draw(self, rng: random.Random | None = None) -> Prize:
        """Pick one prize with probability weight / total."""

        rnd = rng or random.SystemRandom()
        total = sum(p.weight for p in self.prizes)
        pick = rnd.randint(1, total)
        acc = 0
        for prize in self.prizes:
            acc += prize.weight
            if pick <= acc:
                return prize
        return self.prizes[-1]
