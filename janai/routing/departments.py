import uuid
from datetime import datetime, timezone
from typing import Optional

from janai.models.complaint import Complaint
from janai.routing.mappings import map_first_match

DEFAULT_DEPARTMENT = "Municipal Corporation"

DEPARTMENT_TABLE = (
    (("streetlight",), "Municipal Electrical Department"),
    (("water",), "Water Supply Department"),
    (("drainage",), "Public Works Department"),
    (("garbage",), "Solid Waste Management"),
    (("road",), "Public Works Department"),
    (("power",), "Electricity Board"),
)


def route_department(complaint_type: str) -> str:
    return map_first_match(complaint_type, DEPARTMENT_TABLE, DEFAULT_DEPARTMENT)


def file_complaint(
    complaint_type: str,
    description: str,
    location: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Complaint:
    """
    Build a submitted complaint routed to the responsible department.
    """
    if not complaint_type or not description:
        raise ValueError("Type and description are required")

    return Complaint(
        complaint_id=str(uuid.uuid4()),
        complaint_type=complaint_type,
        description=description,
        department=route_department(complaint_type),
        submitted_at=now or datetime.now(timezone.utc),
        location=location or None,
    )
