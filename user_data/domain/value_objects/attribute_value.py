from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class AttributeType(str, Enum):
    """DynamoDB attribute type tags."""
    STRING = "S"
    NUMBER = "N"
    BINARY = "B"
    STRING_SET = "SS"
    NUMBER_SET = "NS"
    BINARY_SET = "BS"
    MAP = "M"
    LIST = "L"
    NULL = "NULL"
    BOOLEAN = "BOOL"
    # Tag this client does not model, e.g. botocore's SDK_UNKNOWN_MEMBER
    UNKNOWN = "SDK_UNKNOWN_MEMBER"


class InvalidAttributeValueError(ValueError):
    """Raised when a stored attribute is not a single-tag mapping."""

    pass


@dataclass(frozen=True)
class AttributeValue:
    """Immutable typed value of a single stored attribute."""
    type: AttributeType
    value: Any

    @classmethod
    def from_dynamodb(cls, raw: Mapping[str, Any]) -> "AttributeValue":
        """Decode the wire form, e.g. ``{"S": "Alice"}`` or ``{"N": "30"}``."""
        if not isinstance(raw, Mapping) or len(raw) != 1:
            raise InvalidAttributeValueError("Attribute value must carry exactly one type tag")

        tag, value = next(iter(raw.items()))
        try:
            attribute_type = AttributeType(tag)
        except ValueError:
            attribute_type = AttributeType.UNKNOWN
            value = {tag: value}

        return cls(type=attribute_type, value=value)

    @property
    def string_value(self) -> str | None:
        """The plain string for ``S`` attributes, None for every other type."""
        match self.type:
            case AttributeType.STRING:
                return self.value
            case (
                AttributeType.NUMBER
                | AttributeType.BINARY
                | AttributeType.STRING_SET
                | AttributeType.NUMBER_SET
                | AttributeType.BINARY_SET
                | AttributeType.MAP
                | AttributeType.LIST
                | AttributeType.NULL
                | AttributeType.BOOLEAN
                | AttributeType.UNKNOWN
            ):
                return None
