"""Base pydantic model shared by every value and settings type in blockflattening."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator

# Pass as the validation context to drop unknown keys instead of rejecting them:
#   Declaration.model_validate(data, context=LENIENT_CONTEXT)
LENIENT_CONTEXT = {"lenient": True}


def _is_lenient(info: ValidationInfo) -> bool:
    context = info.context
    return isinstance(context, dict) and bool(context.get("lenient"))


class Config(BaseModel):
    """Strict by default: unknown fields raise a ValidationError."""

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _drop_unknown_fields_when_lenient(cls, data: Any, info: ValidationInfo) -> Any:
        if not _is_lenient(info) or not isinstance(data, dict):
            return data
        known = set(cls.model_fields)
        known.update(field.alias for field in cls.model_fields.values() if field.alias)
        return {key: value for key, value in data.items() if key in known}
