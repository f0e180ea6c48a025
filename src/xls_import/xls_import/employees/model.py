from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """An employee as seen by one import batch.

    The same person imported twice is stored twice; employee_id is only
    unique inside a single batch.
    """

    import_id: str
    employee_id: str
    name: str
    created_at: datetime
    department: Optional[str] = None
    position: Optional[str] = None
    email: Optional[str] = None
