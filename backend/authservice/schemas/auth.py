"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, validate

_not_blank = validate.Regexp(r"\S", error="Must not be blank.")


class RegisterSchema(Schema):
    """Input payload for account registration.

    Keys use the public camelCase names; loaded data uses snake_case
    attribute names matching :class:`RegistrationIn`.
    """

    class Meta:
        unknown = EXCLUDE
        ordered = True

    first_name = fields.String(
        data_key="firstName",
        required=True,
        validate=[validate.Length(min=1, max=100), _not_blank],
    )
    last_name = fields.String(
        data_key="lastName",
        required=True,
        validate=[validate.Length(min=1, max=100), _not_blank],
    )
    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))


def flatten_errors(schema: Schema, messages: dict[str, Any]) -> list[dict[str, str]]:
    """Turn marshmallow's ``{field: [msg, ...]}`` into an ordered entry list.

    Entries follow the schema's field declaration order, then message order.
    Keys not declared on the schema (e.g. ``_schema`` for a non-object body)
    come last.

    :param schema: The schema that produced ``messages``.
    :param messages: ``ValidationError.messages``.
    :returns: ``[{"type", "path", "msg", "location"}, ...]``.
    """
    declared = [f.data_key or name for name, f in schema.fields.items()]
    keys = [k for k in declared if k in messages]
    keys += [k for k in messages if k not in declared]

    entries: list[dict[str, str]] = []
    for key in keys:
        raw = messages[key]
        msgs = raw if isinstance(raw, list) else [raw]
        for msg in msgs:
            entries.append({"type": "field", "path": key, "msg": str(msg), "location": "body"})
    return entries
