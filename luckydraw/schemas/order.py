"""Marshmallow schemas for order number requests and records."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, pre_load, validate

ORDER_NUMBER_MAX_LENGTH = 100
DRAW_RESULT_MAX_LENGTH = 200


class _TrimmedSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    @pre_load
    def _strip_strings(self, data, **kwargs):  # type: ignore[no-untyped-def]
        if not isinstance(data, dict):
            return data
        return {k: v.strip() if isinstance(v, str) else v for k, v in data.items()}


class OrderNumberSchema(_TrimmedSchema):
    """Validate ``{orderNumber}`` payloads."""

    order_number = fields.Str(
        required=True,
        data_key="orderNumber",
        validate=validate.Length(min=1, max=ORDER_NUMBER_MAX_LENGTH),
    )


class RecordDrawResultSchema(OrderNumberSchema):
    """Validate ``{orderNumber, drawResult}`` payloads."""

    draw_result = fields.Str(
        required=True,
        data_key="drawResult",
        validate=validate.Length(min=1, max=DRAW_RESULT_MAX_LENGTH),
    )


class OrderRecordSchema(Schema):
    """Serialize OrderRecord."""

    order_number = fields.Str(data_key="orderNumber")
    has_played = fields.Bool(data_key="hasPlayed")
    draw_result = fields.Str(data_key="drawResult", allow_none=True)
    created_at = fields.DateTime(data_key="createdAt", allow_none=True)
    timestamp = fields.DateTime(allow_none=True)
    registered_by = fields.Str(data_key="registeredBy", allow_none=True)
