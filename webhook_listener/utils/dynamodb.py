# webhook_listener/utils/dynamodb.py
import logging
from decimal import Decimal
from typing import Any, Optional

import boto3

from .. import config
from ..models import WebhookRecord

logger = logging.getLogger(__name__)

def to_dynamo(value: Any) -> Any:
    """DynamoDB rejects Python floats; store them as Decimal."""
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: to_dynamo(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_dynamo(v) for v in value]
    return value

class DynamoDBRecordStore:
    def __init__(self, table_name: Optional[str] = None, region_name: Optional[str] = None, table=None):
        self.table_name = table_name
        self.region_name = region_name or config.get_aws_region()
        self._table = table

    # Lazily create the table resource so a missing TABLE_NAME only fails on write
    @property
    def table(self):
        if self._table is None:
            if not self.table_name:
                logger.error("DynamoDB table name not set (TABLE_NAME).")
                raise RuntimeError("TABLE_NAME not set")
            resource = boto3.resource("dynamodb", region_name=self.region_name)
            self._table = resource.Table(self.table_name)
        return self._table

    def put(self, record: WebhookRecord) -> None:
        self.table.put_item(Item=to_dynamo(record.to_item()))
        logger.debug("PutItem %s into %s", record.id, self.table_name)
