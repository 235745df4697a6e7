"""Draw routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from luckydraw.schemas.order import OrderNumberSchema, OrderRecordSchema, RecordDrawResultSchema
from luckydraw.services.redemption_service import RedemptionService
from luckydraw.utils.responses import ok


draw_bp = Blueprint("draw", __name__)

_record_request_schema = RecordDrawResultSchema()
_play_request_schema = OrderNumberSchema()
_record_schema = OrderRecordSchema()
_records_schema = OrderRecordSchema(many=True)


def _service() -> RedemptionService:
    return RedemptionService(
        prize_table=current_app.extensions["prize_table"],
        rng=current_app.extensions.get("draw_rng"),
    )


@draw_bp.post("/record-draw-result")
def record_draw_result():
    """Redeem an order number with a client-supplied draw result."""

    payload = request.get_json(silent=True) or {}
    data = _record_request_schema.load(payload)

    record = _service().redeem(data["order_number"], data["draw_result"])
    return ok(_record_schema.dump(record), message="Draw result recorded successfully.")


@draw_bp.post("/play-lucky-draw")
def play_lucky_draw():
    """Check, draw and redeem in one call; the prize is chosen server-side."""

    payload = request.get_json(silent=True) or {}
    data = _play_request_schema.load(payload)

    result = _service().play(data["order_number"])
    return ok(
        {
            "orderNumber": result.record.order_number,
            "drawResult": result.record.draw_result,
            "prize": {"id": result.prize.id, "label": result.prize.label},
        }
    )


@draw_bp.get("/get-draw-results")
def list_draw_results():
    records = _service().list_draw_results()
    return ok(_records_schema.dump(records))
