# lambda/vanity_connect/model.py
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .speech import speech_text

CALL_PARTITION = "CALL"

APOLOGY = "Sorry, an error occurred while generating your vanity numbers."


def iso_timestamp(moment: datetime) -> str:
    """Fixed-width UTC ISO-8601 (e.g. 2025-11-30T18:04:05.123Z), so string order is time order."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class CallRecord:
    """
    One inbound call as stored in DynamoDB.
    - caller_number: normalized 10-digit number
    - vanity_numbers: options in the order they were offered
    - called_at: sort key, ISO-8601 UTC timestamp
    """
    caller_number: str
    vanity_numbers: List[str]
    called_at: str
    pk: str = field(default=CALL_PARTITION)

    @classmethod
    def new(cls, caller_number: str, vanity_numbers: Sequence[str], now: datetime) -> "CallRecord":
        return cls(caller_number=caller_number,
                   vanity_numbers=list(vanity_numbers),
                   called_at=iso_timestamp(now))

    def to_item(self) -> Dict[str, Any]:
        return {
            "pk": self.pk,
            "sk": self.called_at,
            "callerNumber": self.caller_number,
            "vanityNumbers": list(self.vanity_numbers),
        }

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "CallRecord":
        return cls(
            caller_number=item.get("callerNumber", ""),
            vanity_numbers=list(item.get("vanityNumbers") or []),
            called_at=item.get("sk", ""),
            pk=item.get("pk", CALL_PARTITION),
        )

    def for_dashboard(self) -> Dict[str, Any]:
        return {
            "callerNumber": self.caller_number,
            "vanityNumbers": list(self.vanity_numbers),
            "calledAt": self.called_at,
        }


@dataclass(frozen=True)
class ContactRequest:
    """Validated view of an Amazon Connect contact-flow invocation."""
    caller_number: str
    contact_id: Optional[str] = None
    instance_id: Optional[str] = None


def response_for_connect(options: Sequence[str]) -> Dict[str, str]:
    top = (list(options) + [""] * 3)[:3]
    return {
        "vanity1": top[0],
        "vanity2": top[1],
        "vanity3": top[2],
        "speechText": speech_text(top),
    }


def error_response() -> Dict[str, str]:
    # Connect branches on the string value, keep it "true"
    return {
        "vanity1": "",
        "vanity2": "",
        "vanity3": "",
        "speechText": APOLOGY,
        "error": "true",
    }
