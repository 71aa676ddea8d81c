# lambda/vanity_connect/handler.py
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional

from .model import CallRecord, ContactRequest, error_response, response_for_connect
from .observability import (
    add_call_dimensions,
    logger,
    metrics,
    record_error,
    record_invalid_caller,
    record_success,
    record_write_error,
    tracer,
)
from .store import CallRecordStore, default_store
from .vanity import generate_vanity_numbers, normalize_phone


class InvalidCallerNumber(ValueError):
    """The Connect event did not carry a usable caller number."""

    def __init__(self, caller_raw: str, contact_id: Optional[str] = None,
                 instance_id: Optional[str] = None):
        super().__init__("Invalid caller number")
        self.caller_raw = caller_raw
        self.contact_id = contact_id
        self.instance_id = instance_id


def _path(event: Any, *keys: str) -> Any:
    node = event
    for key in keys:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_contact_event(event: Any) -> ContactRequest:
    """
    Pull the caller out of a Connect contact-flow event.
    Raises InvalidCallerNumber when the address is missing or too short.
    """
    contact = _path(event, "Details", "ContactData")
    caller_raw = _path(contact, "CustomerEndpoint", "Address")
    if not isinstance(caller_raw, str):
        caller_raw = ""

    contact_id = _path(contact, "ContactId")
    instance_id = _path(contact, "InstanceId")

    caller_number = normalize_phone(caller_raw)
    if not caller_number:
        raise InvalidCallerNumber(caller_raw, contact_id, instance_id)

    return ContactRequest(
        caller_number=caller_number,
        contact_id=contact_id,
        instance_id=instance_id,
    )


def _tag_invocation(contact_id: Optional[str], instance_id: Optional[str]) -> None:
    # None clears an id left over from a warm invocation
    logger.set_correlation_id(contact_id)
    add_call_dimensions(instance_id)


def process_call(event: Any,
                 store: Optional[CallRecordStore] = None,
                 now: Callable[[], datetime] = _utc_now) -> Dict[str, str]:
    """Normalize -> generate -> persist -> respond. Never raises."""
    try:
        # 1) Extract caller number
        request = parse_contact_event(event)
        _tag_invocation(request.contact_id, request.instance_id)

        # 2) Generate options
        options = generate_vanity_numbers(request.caller_number)

        # 3) Persist; the response waits on the write
        record = CallRecord.new(request.caller_number, options, now())
        try:
            (store or default_store()).put(record)
        except Exception:
            record_write_error()
            raise

        # 4) Prepare outputs
        response = response_for_connect(options)
        record_success(len(options))
        logger.info("Call processed", extra={
            "caller_number": request.caller_number,
            "top3": options[:3],
        })
        return response

    except InvalidCallerNumber as err:
        _tag_invocation(err.contact_id, err.instance_id)
        logger.warning("No valid caller number", extra={"caller_raw": err.caller_raw})
        record_invalid_caller()
        return error_response()
    except Exception:
        logger.exception("Error in vanity lambda")
        record_error()
        return error_response()


@tracer.capture_lambda_handler
@logger.inject_lambda_context
@metrics.log_metrics(capture_cold_start_metric=True)
def handler(event: Dict[str, Any], context):
    return process_call(event)
