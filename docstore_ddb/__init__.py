"""Public interface for the docstore_ddb package."""

import logging
from typing import Any

from .adapter import DocumentStoreAdapter
from .conditions import build_condition_expression
from .exception import (
    ConditionalCheckFailed,
    ConditionMismatchException,
    RemoteOperationError,
    UnsupportedOperatorException,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def adapter(**kwargs: Any) -> DocumentStoreAdapter:
    """Factory helper building a document adapter from keyword configuration."""

    engine = kwargs.pop("engine", "dynamodb")
    if engine and engine != "dynamodb":
        raise ValueError(f"engine {engine} not supported; only 'dynamodb' is available")
    return DocumentStoreAdapter(**kwargs)


__all__ = [
    "adapter",
    "build_condition_expression",
    "ConditionalCheckFailed",
    "ConditionMismatchException",
    "DocumentStoreAdapter",
    "RemoteOperationError",
    "UnsupportedOperatorException",
]
