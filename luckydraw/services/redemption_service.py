"""Order number redemption use-cases.

State machine per order number::

    [unregistered] --register--> [registered, unused] --redeem--> [used]

``used`` is terminal. The unused -> used transition happens only through
``OrderRepository.mark_played``, a conditional update on ``hasPlayed``, so
two concurrent redemptions of one order number cannot both succeed.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass

from luckydraw.errors import AlreadyExistsError, AlreadyUsedError, NotFoundError
from luckydraw.models.order_record import OrderRecord
from luckydraw.repositories.order_repository import OrderRepository
from luckydraw.services.prize_service import Prize, PrizeTable

logger = logging.getLogger(__name__)

NOT_REGISTERED_MESSAGE = "Order number does not exist. Please contact your sales representative."


@dataclass(frozen=True)
class CheckResult:
    order_number: str
    valid: bool = True


@dataclass(frozen=True)
class PlayResult:
    record: OrderRecord
    prize: Prize


class RedemptionService:
    """Order number use-cases."""

    def __init__(
        self,
        repository: OrderRepository | None = None,
        prize_table: PrizeTable | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._repo = repository or OrderRepository()
        self._prizes = prize_table or PrizeTable.default()
        self._rng = rng

    def check(self, order_number: str) -> CheckResult:
        """Read-only eligibility check."""

        record = self._repo.get(order_number)
        if record is None:
            raise NotFoundError(message=NOT_REGISTERED_MESSAGE)
        if record.has_played:
            raise AlreadyUsedError()
        return CheckResult(order_number=order_number)

    def register(self, order_number: str, registered_by: str | None = None) -> OrderRecord:
        record = self._repo.insert_if_absent(order_number, registered_by=registered_by)
        if record is None:
            raise AlreadyExistsError()
        logger.info("Registered order number %s", order_number)
        return record

    def redeem(self, order_number: str, draw_result: str) -> OrderRecord:
        """Consume the order number's draw chance and store its result."""

        record = self._repo.mark_played(order_number, draw_result)
        if record is not None:
            logger.info("Recorded draw result for order number %s", order_number)
            return record

        # The guarded update matched nothing; find out why.
        if self._repo.get(order_number) is None:
            logger.warning("Redemption rejected, unknown order number %s", order_number)
            raise NotFoundError(message="Order number does not exist.")

        logger.warning("Redemption rejected, order number %s already used", order_number)
        raise AlreadyUsedError(message="You have already used your chance.")

    def play(self, order_number: str) -> PlayResult:
        """Check, draw a prize server-side, then redeem with its label."""

        self.check(order_number)
        prize = self._prizes.draw(self._rng)
        record = self.redeem(order_number, prize.label)
        logger.info("Order number %s played, prize=%s", order_number, prize.id)
        return PlayResult(record=record, prize=prize)

    def list_orders(self) -> Sequence[OrderRecord]:
        records = self._repo.list_all()
        if not records:
            raise NotFoundError(message="No order numbers found.")
        return records

    def list_draw_results(self) -> Sequence[OrderRecord]:
        records = self._repo.list_played()
        if not records:
            raise NotFoundError(message="No draw results found.")
        return records
