from typing import Any, Dict, TypedDict

ConditionValues = Dict[str, Any]
ConditionOperators = Dict[str, str]


class ConditionExpression(TypedDict):
    expression: str
    names: Dict[str, str]
    values: Dict[str, Any]
