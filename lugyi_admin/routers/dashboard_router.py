# /lugyi_admin/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError

# --- Service and Model Imports ---
from ..models.dashboard_model import DashboardOverview, Period
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get(
    "/overview",
    response_model=DashboardOverview,
    summary="Get Dashboard Overview",
    description="Users, devices, content, subscriptions and view statistics for one reporting period.",
)
def get_dashboard_overview(
    # FastAPI validates the enum, so an unknown period is a 422 before the
    # service is ever called.
    time_range: Period = Query(Period.MONTH, description="Reporting period: day, week, month or year."),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return dashboard_service.get_overview(db=db, period=time_range)
    except SQLAlchemyError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while computing the dashboard statistics.",
        )
