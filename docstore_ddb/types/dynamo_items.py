from typing import List

from .dynamo_item import DynamoItem

DynamoItems = List[DynamoItem]
