# lawdesk/routes/dashboard_routes.py

from typing import List, Literal

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from lawdesk.deps.auth import get_current_user, get_db
from lawdesk.db.models import User
from lawdesk.models.dashboard import Activity, Alert, DashboardStats, RevenuePoint, UpcomingEvent
from lawdesk.services import dashboard_service


router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/advanced-stats", response_model=DashboardStats)
def advanced_stats(
    time_range: Literal["7d", "30d", "90d", "1y"] = Query("30d", alias="range"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return dashboard_service.advanced_stats(db, time_range)


@router.get("/alerts", response_model=List[Alert])
def alerts(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return dashboard_service.alerts(db)


@router.get("/revenue-chart", response_model=List[RevenuePoint])
def revenue_chart(
    months: int = Query(6, ge=1, le=24),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return dashboard_service.revenue_chart(db, months)


@router.get("/upcoming-events", response_model=List[UpcomingEvent])
def upcoming_events(
    days: int = Query(30, ge=1, le=365),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return dashboard_service.upcoming_events(db, days)


@router.get("/recent-activities", response_model=List[Activity])
def recent_activities(
    limit: int = Query(10, ge=1, le=50),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return dashboard_service.recent_activities(db, limit)
