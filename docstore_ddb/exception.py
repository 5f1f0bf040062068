"""Exceptions raised by docstore_ddb."""

from typing import Optional, Union

from botocore.exceptions import BotoCoreError, ClientError

CONDITIONAL_CHECK_FAILED_CODE = "ConditionalCheckFailedException"


class RemoteOperationError(Exception):
    """A request to DynamoDB failed; the botocore error is kept untouched."""

    def __init__(self, error: Union[ClientError, BotoCoreError]) -> None:
        super().__init__(str(error))
        self.error = error
        self.code: Optional[str] = None
        if isinstance(error, ClientError):
            self.code = error.response.get("Error", {}).get("Code")


class ConditionalCheckFailed(RemoteOperationError):
    """The condition expression attached to a put or delete evaluated false."""


class ConditionMismatchException(ValueError):
    """Condition values and operators were given for different attributes."""


class UnsupportedOperatorException(ValueError):
    """A condition operator is not one of DynamoDB's comparators."""


def translate_error(error: Union[ClientError, BotoCoreError]) -> RemoteOperationError:
    if isinstance(error, ClientError):
        if error.response.get("Error", {}).get("Code") == CONDITIONAL_CHECK_FAILED_CODE:
            return ConditionalCheckFailed(error)
    return RemoteOperationError(error)
