from typing import Any, Generic, Optional, Protocol, TypeVar, runtime_checkable

from pydantic import TypeAdapter

T = TypeVar("T")


@runtime_checkable
class Decodable(Protocol):
    """Anything that can populate itself from a JSON response body."""

    def populate(self, raw: bytes) -> Any: ...


class ResponseTarget(Generic[T]):
    """Caller-owned destination for a decoded JSON response.

    The target is parameterized by the shape the response is expected to have,
    which can be a pydantic model, a dataclass, a TypedDict or any type pydantic
    knows how to validate. ``value`` stays ``None`` until a call decodes a body
    into it.

    Examples:
        ```python
        from pydantic import BaseModel

        from hostclient import ResponseTarget, new, with_param, with_response

        class User(BaseModel):
            id: int
            name: str

        out = ResponseTarget(User)
        new("api.example.com").get(
            "/users", with_param("id", "42"), with_response(out)
        )
        print(out.value.name)
        ```
    """

    def __init__(self, shape: Any = Any, *, strict: bool = True) -> None:
        self._adapter: TypeAdapter[T] = TypeAdapter(shape)
        self._strict = strict
        self.value: Optional[T] = None

    def populate(self, raw: bytes) -> T:
        value = self._adapter.validate_json(raw, strict=self._strict)
        self.value = value
        return value

    def __repr__(self) -> str:
        return f"ResponseTarget(value={self.value!r})"
