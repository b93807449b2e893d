from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Complaint:
    complaint_id: str
    complaint_type: str
    description: str
    department: str
    submitted_at: datetime
    location: Optional[str] = None
    status: str = "Submitted"

    def to_dict(self) -> dict:
        data = asdict(self)
        data["submitted_at"] = self.submitted_at.isoformat()
        return data
