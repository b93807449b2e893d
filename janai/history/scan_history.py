import logging
import threading
from datetime import datetime, timezone
from typing import List, Optional

from janai.models.classification_outcome import ClassificationOutcome
from janai.models.scan_record import ScanRecord, ScanType

logger = logging.getLogger("janai.history")


class ScanHistory:
    """
    In-process record of scans, oldest first.
    Nothing is persisted; a restart clears it.
    """

    def __init__(self, max_entries: Optional[int] = None):
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.max_entries = max_entries
        self._records: List[ScanRecord] = []
        self._lock = threading.Lock()

    def record(
        self,
        scan_type: ScanType,
        text: str,
        outcome: ClassificationOutcome,
        timestamp: Optional[datetime] = None,
    ) -> ScanRecord:
        if scan_type not in ("sms", "call"):
            raise ValueError(f"Unknown scan type: {scan_type}")

        entry = ScanRecord(
            scan_type=scan_type,
            text=text,
            outcome=outcome,
            timestamp=timestamp or datetime.now(timezone.utc),
        )
        with self._lock:
            self._records.append(entry)
            if self.max_entries is not None and len(self._records) > self.max_entries:
                dropped = len(self._records) - self.max_entries
                del self._records[:dropped]
                logger.debug("scan history trimmed by %d", dropped)
        return entry

    def entries(self) -> List[ScanRecord]:
        with self._lock:
            return list(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
