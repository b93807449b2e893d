from dataclasses import dataclass
from datetime import datetime
from typing import Literal
from .classification_outcome import ClassificationOutcome

ScanType = Literal["sms", "call"]


@dataclass(frozen=True)
class ScanRecord:
    scan_type: ScanType
    text: str
    outcome: ClassificationOutcome
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "type": self.scan_type,
            "text": self.text,
            "result": self.outcome.to_dict(),
            "timestamp": self.timestamp.isoformat(),
        }
