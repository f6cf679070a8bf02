"""Base classes and shared types for fleet contracts.

Conventions (all contracts and persisted files):
- **Field names**: snake_case in Python, camelCase in JSON (alias generator)
- **Identifiers**: integers assigned by the record store; ``0`` = not yet persisted
- **Datetimes**: naive local wall-clock time, ISO 8601 in serialized form
- **Enums**: stored as their string values
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FleetModel(BaseModel):
    """Base model with JSON-file-friendly serialization.

    - Enums serialize as string values.
    - ``to_json_dict()`` produces a JSON-safe dict (datetimes as ISO 8601).
    - ``from_json_dict()`` hydrates from a decoded JSON object.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_assignment=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Dump to a camelCase dict ready for ``json.dumps``."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_json_dict(cls, data: dict[str, Any]) -> "FleetModel":
        """Create model instance from a decoded JSON object."""
        return cls.model_validate(data)
