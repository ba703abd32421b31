"""
Shared Pydantic building blocks
"""
from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def epoch_ms_to_datetime(value: Any) -> Any:
    """Stored instants are epoch milliseconds"""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    return value


EpochDatetime = Annotated[datetime, BeforeValidator(epoch_ms_to_datetime)]


class CamelModel(BaseModel):
    """snake_case fields, camelCase on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        coerce_numbers_to_str=True,
    )


class SuccessResponse(CamelModel):
    success: bool = True
    message: Optional[str] = None
