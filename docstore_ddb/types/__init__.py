"""Type exports for docstore_ddb."""

from .condition_expression import ConditionExpression, ConditionOperators, ConditionValues
from .dynamo_item import DynamoItem
from .dynamo_items import DynamoItems
from .dynamo_key import DynamoKey

__all__ = [
    "ConditionExpression",
    "ConditionOperators",
    "ConditionValues",
    "DynamoItem",
    "DynamoItems",
    "DynamoKey",
]
