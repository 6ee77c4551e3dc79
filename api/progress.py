"""Progress API router.

Weight logging, weight and compliance history, and the progress summary.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database import get_db_read, get_db_write
from database import models
from core.auth import get_current_user
from core.dates import parse_date
from core.logger import get_logger
from services.compliance_tracker import ComplianceTracker, get_compliance_tracker
from schemas import (
    WeightEntryRequest,
    WeightEntryResponse,
    ComplianceEntryResponse,
    ProgressSummaryResponse,
)

logger = get_logger("api.progress")
router = APIRouter(prefix="/api/progress", tags=["progress"])


@router.post("/weight", response_model=WeightEntryResponse, status_code=201)
def add_weight_entry(
    payload: WeightEntryRequest,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
    tracker: ComplianceTracker = Depends(get_compliance_tracker),
):
    """Append a weight measurement for the caller."""
    entry = tracker.record_weight(db, current_user.id, payload.entry_date, payload.weight, payload.note)
    return WeightEntryResponse.model_validate(entry)


@router.get("/weight/history", response_model=List[WeightEntryResponse])
def get_weight_history(
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
    tracker: ComplianceTracker = Depends(get_compliance_tracker),
):
    """Return the caller's weight entries, oldest first."""
    entries = tracker.weight_history(
        db, current_user.id, parse_date(start_date, "start_date"), parse_date(end_date, "end_date")
    )
    return [WeightEntryResponse.model_validate(e) for e in entries]


@router.get("/compliance/history", response_model=List[ComplianceEntryResponse])
def get_compliance_history(
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
    tracker: ComplianceTracker = Depends(get_compliance_tracker),
):
    """Return the caller's compliance entries, oldest first."""
    entries = tracker.compliance_history(
        db, current_user.id, parse_date(start_date, "start_date"), parse_date(end_date, "end_date")
    )
    return [ComplianceEntryResponse.model_validate(e) for e in entries]


@router.get("/summary", response_model=ProgressSummaryResponse)
def get_progress_summary(
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
    tracker: ComplianceTracker = Depends(get_compliance_tracker),
):
    """Summarise weight change and average compliance between two dates.

    Raises:
        ValidationError: If a bound is missing, malformed, or start is after end.
        NotFoundError: If no weight was logged in the period.
    """
    summary = tracker.progress_summary(
        db,
        current_user.id,
        parse_date(start_date, "start_date", required=True),
        parse_date(end_date, "end_date", required=True),
    )
    return ProgressSummaryResponse(**summary)
