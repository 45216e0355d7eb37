"""Lead scoring and inquiry notifications.

Inquiries are scored for agent triage and handed to a notification
dispatcher. Dispatchers are pluggable; the bundled one only logs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from procv.core.exceptions import NotificationError
from procv.core.logging import get_logger
from procv.domain.models.property import Property

log = get_logger(__name__)

# Score increments
BASE_SCORE = 50
BUDGET_RATIO_POINTS = ((1.2, 25), (1.0, 20), (0.8, 15), (0.6, 10))
URGENCY_POINTS = {"high": 20, "medium": 10}
TIMEFRAME_POINTS = {"immediate": 20, "this_month": 15, "next_3_months": 10, "next_6_months": 5}
INQUIRY_POINTS = {"offer": 15, "viewing": 10, "financing": 8}
COMPLETE_CONTACT_POINTS = 5


class LeadInquiry(BaseModel):
    """A prospective buyer or tenant's inquiry about a listing."""

    name: str = ""
    email: str = ""
    phone: Optional[str] = None
    message: str = ""
    property_id: str
    agent_id: str = ""
    inquiry_type: Literal["viewing", "information", "offer", "financing"] = "information"
    urgency: Literal["low", "medium", "high"] = "low"
    budget: Optional[float] = Field(default=None, ge=0)
    timeframe: str = "flexible"
    source: Literal["contact_form", "chat", "phone", "direct"] = "contact_form"


class NotificationEvent(BaseModel):
    """Something an agent should be told about."""

    kind: str
    recipient: str
    subject: str
    payload: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.now)


class InquiryOutcome(BaseModel):
    """Result of processing an inquiry."""

    success: bool
    lead_score: int


class NotificationDispatcher(ABC):
    """Delivers notification events."""

    @abstractmethod
    def submit(self, event: NotificationEvent) -> bool:
        """Deliver an event.

        Returns:
            True if the event was accepted

        Raises:
            NotificationError: If delivery failed
        """


class LoggingDispatcher(NotificationDispatcher):
    """Dispatcher that records and logs events without sending them."""

    def __init__(self):
        self.sent: list[NotificationEvent] = []

    def submit(self, event: NotificationEvent) -> bool:
        self.sent.append(event)
        log.info("notification_dispatched", kind=event.kind, recipient=event.recipient, subject=event.subject)
        return True


def calculate_lead_score(lead: LeadInquiry, prop: Property) -> int:
    """Score an inquiry from 0 to 100.

    Budget relative to price, urgency, timeframe, inquiry type and contact
    completeness each add points to a base of 50.
    """
    score = BASE_SCORE

    if lead.budget and prop.price:
        ratio = lead.budget / prop.price
        for threshold, points in BUDGET_RATIO_POINTS:
            if ratio >= threshold:
                score += points
                break

    score += URGENCY_POINTS.get(lead.urgency, 0)
    score += TIMEFRAME_POINTS.get(lead.timeframe, 0)
    score += INQUIRY_POINTS.get(lead.inquiry_type, 0)

    if lead.name and lead.email and lead.phone:
        score += COMPLETE_CONTACT_POINTS

    return min(max(score, 0), 100)


def process_inquiry(
    lead: LeadInquiry,
    prop: Property,
    dispatcher: NotificationDispatcher,
    recipient: str,
) -> InquiryOutcome:
    """Score an inquiry and notify the listing agent.

    Args:
        lead: Incoming inquiry
        prop: Listing the inquiry is about
        dispatcher: Notification channel
        recipient: Agent address

    Returns:
        InquiryOutcome; success is False when the dispatcher fails
    """
    score = calculate_lead_score(lead, prop)
    event = NotificationEvent(
        kind="lead_notification",
        recipient=recipient,
        subject=f"New {lead.inquiry_type} inquiry: {prop.title}",
        payload={
            "property_id": prop.id,
            "property_title": prop.title,
            "lead_name": lead.name,
            "lead_email": lead.email,
            "lead_score": score,
            "urgency": lead.urgency,
            "source": lead.source,
        },
    )

    try:
        delivered = dispatcher.submit(event)
    except NotificationError as e:
        log.error("inquiry_notification_failed", property_id=prop.id, error=str(e))
        return InquiryOutcome(success=False, lead_score=score)

    log.info("lead_processed", property_id=prop.id, agent_id=lead.agent_id, lead_score=score, source=lead.source)
    return InquiryOutcome(success=delivered, lead_score=score)
