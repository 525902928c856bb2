from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..value_objects import AttributeValue


@dataclass(frozen=True)
class UserRecord:
    """Stored user record, read-only from this service's point of view."""

    user_id: str
    attributes: dict[str, AttributeValue] = field(default_factory=dict)

    @classmethod
    def from_item(cls, user_id: str, item: Mapping[str, Mapping[str, Any]]) -> "UserRecord":
        """Build a record from a raw DynamoDB item."""
        return cls(
            user_id=user_id,
            attributes={name: AttributeValue.from_dynamodb(raw) for name, raw in item.items()},
        )

    def project_strings(self) -> dict[str, str]:
        """
        Flatten the record to its string-typed attributes.

        Attributes of any other type are left out of the result.
        """
        projected: dict[str, str] = {}
        for name, attribute in self.attributes.items():
            value = attribute.string_value
            if value is not None:
                projected[name] = value
        return projected

    def dropped_attribute_names(self) -> list[str]:
        """Names of the attributes that project_strings leaves out."""
        return [name for name, attribute in self.attributes.items() if attribute.string_value is None]
