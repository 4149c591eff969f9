"""JSON adapters used by json_post to convert payloads to and from text."""

import json
from typing import Any, Generic, Protocol, Type, TypeVar

from pydantic import BaseModel

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class JsonAdapter(Protocol[T]):
    """Converts a payload type to and from JSON text."""

    def dumps(self, obj: T) -> str:
        ...

    def loads(self, text: str) -> T:
        ...


class JsonModuleAdapter:
    """Adapter for plain Python values backed by the json module."""

    def __init__(self, compact: bool = True, ensure_ascii: bool = False):
        self.separators = (",", ":") if compact else None
        self.ensure_ascii = ensure_ascii

    def dumps(self, obj: Any) -> str:
        return json.dumps(obj, separators=self.separators, ensure_ascii=self.ensure_ascii)

    def loads(self, text: str) -> Any:
        return json.loads(text)


class PydanticJsonAdapter(Generic[M]):
    """Adapter for pydantic models.

    Args:
        model_cls: Model class used to validate decoded JSON
        exclude_none: Drop None fields when serializing
    """

    def __init__(self, model_cls: Type[M], exclude_none: bool = False):
        self.model_cls = model_cls
        self.exclude_none = exclude_none

    def dumps(self, obj: M) -> str:
        return obj.model_dump_json(exclude_none=self.exclude_none)

    def loads(self, text: str) -> M:
        return self.model_cls.model_validate_json(text)
