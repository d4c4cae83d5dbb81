"""
Hero document model and its JSON mapping.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
from shared.errors import SerializationError

HERO_FIELDS = ("id", "name")


@dataclass(eq=False)
class Hero:
    """
    A hero stored as one JSON blob keyed "<id>.json".

    Equality and hashing look at `name` only, so a hero re-submitted under
    a different id still counts as the same hero.
    """

    id: int = 0
    name: Optional[str] = None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Hero):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    @property
    def blob_key(self) -> str:
        return f"{self.id}.json"

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}

    def to_json(self) -> bytes:
        """Encode the hero as the UTF-8 JSON payload stored in its blob."""
        try:
            return json.dumps(self.to_dict(), ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Could not encode hero {self.id}: {str(e)}") from e

    @classmethod
    def from_dict(cls, data: Any) -> "Hero":
        """
        Build a hero from decoded JSON.

        A missing id becomes 0 and a missing name becomes None. Integral
        numeric strings are accepted for the id.

        Raises:
            SerializationError: If the document is not an object, carries
                unknown properties, or has fields of the wrong type
        """
        if not isinstance(data, dict):
            raise SerializationError(
                f"Hero document must be a JSON object, got {type(data).__name__}"
            )

        unknown = sorted(set(data) - set(HERO_FIELDS))
        if unknown:
            raise SerializationError(f"Unrecognized hero field(s): {', '.join(unknown)}")

        name = data.get("name")
        if name is not None and not isinstance(name, str):
            raise SerializationError("Hero name must be a string")

        return cls(id=_coerce_id(data.get("id")), name=name)

    @classmethod
    def from_json(cls, payload: Union[bytes, str]) -> "Hero":
        try:
            if isinstance(payload, bytes):
                payload = payload.decode("utf-8")
            data = json.loads(payload)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise SerializationError(f"Malformed hero JSON: {str(e)}") from e
        return cls.from_dict(data)


def _coerce_id(value: Any) -> int:
    if value is None:
        return 0
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        raise SerializationError("Hero id must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise SerializationError(f"Hero id must be an integer, got {value!r}")
