"""Order number routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request

from luckydraw.schemas.order import OrderNumberSchema, OrderRecordSchema
from luckydraw.services.authorization import SalesAuthorizer
from luckydraw.services.export_service import EXPORT_FILENAME, export_csv
from luckydraw.services.redemption_service import RedemptionService
from luckydraw.utils.responses import ok

orders_bp = Blueprint("orders", __name__)

_request_schema = OrderNumberSchema()
_record_schema = OrderRecordSchema()
_records_schema = OrderRecordSchema(many=True)


def _service() -> RedemptionService:
    return RedemptionService(prize_table=current_app.extensions["prize_table"])


@orders_bp.post("/add-order-number")
@orders_bp.post("/submit-order-number")
def add_order_number():
    """Register an order number (sales reps only)."""

    authorizer: SalesAuthorizer = current_app.extensions["sales_authorizer"]
    registered_by = authorizer.authorize(request.headers)

    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)

    record = _service().register(data["order_number"], registered_by=registered_by)
    return ok(_record_schema.dump(record), status_code=201, message="Order number added successfully.")


@orders_bp.post("/check-order-number")
def check_order_number():
    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)

    result = _service().check(data["order_number"])
    return ok(
        {"orderNumber": result.order_number, "valid": result.valid},
        message="Order number is valid. Proceed with the draw.",
    )


@orders_bp.get("/get-order-numbers")
def list_order_numbers():
    records = _service().list_orders()
    return ok(_records_schema.dump(records))


@orders_bp.get("/export-order-numbers")
def export_order_numbers() -> Response:
    records = _service().list_orders()
    return Response(
        export_csv(records),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
    )
