"""
Base schema classes shared by every form record.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Common configuration for form records.

    Field names are snake_case; the camelCase keys sent by the UI layer
    (``fullName``, ``maxNights``) are accepted as aliases. Validated records
    are frozen so an accepted payload cannot change after submission.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        use_enum_values=False,
        frozen=True,
    )


class ResultSchema(BaseModel):
    """Base for values returned to callers (results, metrics, confirmations)."""

    model_config = ConfigDict(frozen=True)
