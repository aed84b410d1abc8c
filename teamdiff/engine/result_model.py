"""Base class for engine result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ResultModel(BaseModel):
    """Immutable result value; dumps with camelCase keys when ``by_alias=True``."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
