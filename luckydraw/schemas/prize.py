from marshmallow import Schema, fields, validate


class PrizeSchema(Schema):
    id = fields.Str(required=True, validate=validate.Length(min=1))
    label = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    weight = fields.Int(required=True, validate=validate.Range(min=0))
