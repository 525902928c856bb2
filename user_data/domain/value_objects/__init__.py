from .attribute_value import AttributeType, AttributeValue, InvalidAttributeValueError

__all__ = ["AttributeType", "AttributeValue", "InvalidAttributeValueError"]
