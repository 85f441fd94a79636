from datetime import timezone

from marshmallow import Schema, fields, pre_load, EXCLUDE

PROFANE_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
PROFANITY_MASK = "****"


def clean_body(body: str) -> str:
    """
    Mask profane words. Only whole, single-space-delimited tokens match, so
    "Sharbert!" or "Sharbert's" pass through untouched.
    """
    words = body.split(" ")
    return " ".join(PROFANITY_MASK if w.lower() in PROFANE_WORDS else w for w in words)


class UTCDateTime(fields.DateTime):
    """ISO-8601 DateTime that treats naive values (as SQLite returns them) as UTC."""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return super()._serialize(value, attr, obj, **kwargs)


class RequestBodySchema(Schema):
    """
    Base for request bodies: unknown keys are dropped and JSON null reads as "",
    the same as a missing string field.
    """

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def null_to_empty(self, data, **kwargs):
        if isinstance(data, dict):
            return {k: ("" if v is None else v) for k, v in data.items()}
        return data
