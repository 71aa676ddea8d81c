# lambda/vanity_connect/store.py
from typing import List, Optional

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr

from . import config
from .model import CALL_PARTITION, CallRecord
from .observability import logger as processor_logger, tracer


class CallRecordStore:
    """
    Append-only call history in a DynamoDB table keyed by (pk, sk).
    Logs through the owning Lambda's logger so entries carry its service name.
    """

    def __init__(self, table, logger: Optional[Logger] = None):
        self.table = table
        self.logger = logger or processor_logger

    @classmethod
    def from_env(cls, logger: Optional[Logger] = None) -> "CallRecordStore":
        name = config.table_name()
        return cls(boto3.resource("dynamodb").Table(name), logger=logger)

    @tracer.capture_method
    def put(self, record: CallRecord) -> None:
        self.table.put_item(Item=record.to_item())

    @tracer.capture_method
    def scan_calls(self) -> List[CallRecord]:
        # Single page only; see DESIGN.md
        resp = self.table.scan(FilterExpression=Attr("pk").eq(CALL_PARTITION))
        if resp.get("LastEvaluatedKey"):
            self.logger.warning("Call scan truncated at one page",
                                extra={"scanned": resp.get("ScannedCount")})
        return [CallRecord.from_item(it) for it in resp.get("Items", [])]


_DEFAULT_STORE: Optional[CallRecordStore] = None


def default_store(logger: Optional[Logger] = None) -> CallRecordStore:
    """Process-wide store, built on first use and reused by warm invocations."""
    global _DEFAULT_STORE
    if _DEFAULT_STORE is None:
        _DEFAULT_STORE = CallRecordStore.from_env(logger=logger)
    return _DEFAULT_STORE
