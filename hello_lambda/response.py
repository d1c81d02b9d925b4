import json
from dataclasses import dataclass
from typing import Any

HELLO_WORLD_MESSAGE = "Hello world!"


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are accepted by json.loads but are not JSON
    raise ValueError(f"{name} is not a JSON value")


@dataclass(frozen=True)
class Response:
    """Immutable API Gateway proxy response."""
    status_code: int
    body: str

    def __post_init__(self) -> None:
        if isinstance(self.status_code, bool) or not isinstance(self.status_code, int):
            raise ValueError("Status code must be an integer")
        if not 100 <= self.status_code <= 599:
            raise ValueError("Status code must be between 100 and 599")
        if not isinstance(self.body, str):
            raise ValueError("Body must be a string")
        try:
            json.loads(self.body, parse_constant=_reject_constant)
        except ValueError as e:
            raise ValueError(f"Body must be valid JSON: {e}") from e

    @classmethod
    def json(cls, payload: Any, status_code: int = 200) -> "Response":
        """Serialize payload compactly, the same bytes JSON.stringify yields."""
        return cls(
            status_code=status_code,
            body=json.dumps(
                payload,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            ),
        )

    @classmethod
    def hello_world(cls) -> "Response":
        return cls.json({"message": HELLO_WORLD_MESSAGE})

    def to_dict(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "body": self.body,
        }
