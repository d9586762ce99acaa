# webhook_listener/store.py
import logging
from typing import Optional, Protocol

from .models import WebhookRecord

logger = logging.getLogger(__name__)

class RecordStore(Protocol):
    def put(self, record: WebhookRecord) -> None: ...

def build_store(table_name: Optional[str], database_url: Optional[str] = None, region_name: Optional[str] = None) -> RecordStore:
    """DynamoDB when a table name is configured, local SQL database otherwise."""
    if table_name:
        from .utils.dynamodb import DynamoDBRecordStore
        logger.info("Using DynamoDB table %s", table_name)
        return DynamoDBRecordStore(table_name, region_name=region_name)

    from .db import SQLRecordStore
    logger.info("TABLE_NAME not set, using local database %s", database_url)
    return SQLRecordStore(database_url)
