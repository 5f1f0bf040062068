"""DynamoDB document adapter exposing awaitable get, put, delete and scan."""

import logging
from typing import Any, AsyncIterator, Dict, Optional

from docstore_ddb.types import ConditionOperators, ConditionValues, DynamoItem, DynamoItems, DynamoKey

from .common.base_adapter import BaseAdapter
from .conditions import condition_params

logger = logging.getLogger(__name__)


class DocumentStoreAdapter(BaseAdapter):
    """Maps item-level calls onto a DynamoDB table, one request per call."""

    async def get_item(self, table: str, key: DynamoKey) -> DynamoItem:
        response = await self.call(table, "get_item", Key=key)
        return response.get("Item", {})

    async def put_item(
        self,
        table: str,
        item: DynamoItem,
        expression: Optional[ConditionValues] = None,
        comparison: Optional[ConditionOperators] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {"Item": item, **condition_params(expression, comparison)}
        return await self.call(table, "put_item", **params)

    async def delete_item(
        self,
        table: str,
        key: DynamoKey,
        expression: Optional[ConditionValues] = None,
        comparison: Optional[ConditionOperators] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {"Key": key, **condition_params(expression, comparison)}
        return await self.call(table, "delete_item", **params)

    async def scan_table(self, table: str, paginate: bool = False) -> DynamoItems:
        """Scan a table.

        Without ``paginate`` only the first page DynamoDB returns is given back,
        so large tables come back partially. With ``paginate`` every page is
        requested in turn and the items are returned in the order received; a
        failure on any page raises and nothing collected so far is returned.
        """
        if not paginate:
            response = await self.call(table, "scan")
            return response.get("Items", [])
        items: DynamoItems = []
        async for page in self.iter_scan_pages(table):
            items.extend(page)
        return items

    async def iter_scan_pages(self, table: str) -> AsyncIterator[DynamoItems]:
        params: Dict[str, Any] = {}
        page = 0
        while True:
            page += 1
            logger.debug("scanning %s page %d", table, page)
            response = await self.call(table, "scan", **params)
            yield response.get("Items", [])
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return
            params["ExclusiveStartKey"] = last_key
