from typing import Any, Dict

# hash key alone, or hash + range key for composite tables
DynamoKey = Dict[str, Any]
