"""Shared base adapter holding an instance-scoped boto3 session."""

import asyncio
import logging
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from docstore_ddb.exception import translate_error

logger = logging.getLogger(__name__)


class BaseAdapter:
    """Owns the connection configuration and the per-instance DynamoDB client.

    The session is only built on the first request, so configuration problems
    such as a missing region surface from that request, not from construction.
    """

    def __init__(self, **kwargs: Any) -> None:
        self.region: Optional[str] = kwargs.get("region")
        self.endpoint: Optional[str] = kwargs.get("endpoint")
        self.connect_timeout: Optional[float] = kwargs.get("connect_timeout")
        self.read_timeout: Optional[float] = kwargs.get("read_timeout")
        self.max_attempts: Optional[int] = kwargs.get("max_attempts")
        self.__client: Any = None

    def build_client_config(self) -> Config:
        options: Dict[str, Any] = {}
        if self.connect_timeout is not None:
            options["connect_timeout"] = self.connect_timeout
        if self.read_timeout is not None:
            options["read_timeout"] = self.read_timeout
        if self.max_attempts is not None:
            options["retries"] = {"max_attempts": self.max_attempts}
        return Config(**options)

    def get_client(self) -> Any:
        # the resource's client keeps the native-type serialization and is safe to share across threads
        if self.__client is None:
            session = boto3.session.Session(region_name=self.region)
            resource = session.resource("dynamodb", endpoint_url=self.endpoint, config=self.build_client_config())
            self.__client = resource.meta.client
        return self.__client

    async def call(self, table: str, action: str, **params: Any) -> Dict[str, Any]:
        """Run a blocking table request in a worker thread and await its single result."""

        logger.debug("%s on %s", action, table)
        try:
            operation = getattr(self.get_client(), action)
            return await asyncio.to_thread(operation, TableName=table, **params)
        except (ClientError, BotoCoreError) as exc:
            error = translate_error(exc)
            logger.debug("%s on %s failed: %s", action, table, error.code or exc)
            raise error from exc
