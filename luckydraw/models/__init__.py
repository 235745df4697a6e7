"""Document models."""

from luckydraw.models.order_record import OrderRecord

__all__ = ["OrderRecord"]
