from typing import Any, Dict

DynamoItem = Dict[str, Any]
