# lambda/recent_callers/api_handler.py
import json
from typing import Any, Dict, List, Optional

from aws_lambda_powertools import Logger

from vanity_connect import config
from vanity_connect.model import CallRecord
from vanity_connect.store import CallRecordStore, default_store

logger = Logger(service="vanity-api")

RECENT_LIMIT = 5


def _headers() -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": config.cors_allow_origin(),
    }


def most_recent(records: List[CallRecord], limit: int = RECENT_LIMIT) -> List[CallRecord]:
    # newest first; sorted() is stable so equal timestamps keep scan order
    return sorted(records, key=lambda r: r.called_at, reverse=True)[:limit]


def recent_callers(store: Optional[CallRecordStore] = None) -> Dict[str, Any]:
    try:
        records = (store or default_store(logger=logger)).scan_calls()
        out = [r.for_dashboard() for r in most_recent(records)]
        return {"statusCode": 200, "headers": _headers(), "body": json.dumps(out)}
    except Exception:
        logger.exception("Error in getRecentCallers")
        return {
            "statusCode": 500,
            "headers": _headers(),
            "body": json.dumps({"message": "Internal server error"}),
        }


@logger.inject_lambda_context
def handler(event, context):
    return recent_callers()
