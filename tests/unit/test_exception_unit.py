"""Unit tests for error translation and the exception hierarchy."""

from __future__ import annotations

import pytest
from botocore.exceptions import NoRegionError

from docstore_ddb import exception
from docstore_ddb.exception import ConditionalCheckFailed, RemoteOperationError, translate_error

from tests.unit.mocks import client_error


def test_conditional_check_code_maps_to_conditional_check_failed() -> None:
    error = translate_error(client_error("ConditionalCheckFailedException", "PutItem"))

    assert isinstance(error, ConditionalCheckFailed)
    assert error.code == "ConditionalCheckFailedException"


def test_other_errors_map_to_remote_operation_error() -> None:
    original = NoRegionError()
    error = translate_error(original)

    assert type(error) is RemoteOperationError
    assert error.error is original
    assert error.code is None
    assert str(error) == str(original)


@pytest.mark.parametrize(
    "error_class",
    [exception.ConditionMismatchException, exception.UnsupportedOperatorException],
)
def test_validation_errors_are_documented_value_errors(error_class: type) -> None:
    assert issubclass(error_class, ValueError)
    assert error_class.__doc__
