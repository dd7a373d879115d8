"""
coaches.py - Coach endpoints.

Coaches follow the same team-reference rule as players.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from .. import crud, models, schemas
from ..crud import get_app_settings
from ..database import get_db
from utils.config_loader import AppSettings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/coaches", tags=["coaches"])


def _apply(db: Session, coach: models.Coach, payload: schemas.CoachCreate, settings: AppSettings) -> models.Coach:
    crud.resolve_team(db, payload.team_id, settings.enforce_team_reference)
    for key, value in payload.model_dump().items():
        setattr(coach, key, value)
    return coach


@router.get("", response_model=List[schemas.CoachOut])
def list_coaches(db: Session = Depends(get_db)):
    return crud.list_rows(db, models.Coach)


@router.get("/{coach_id}", response_model=schemas.CoachOut)
def get_coach(coach_id: str, db: Session = Depends(get_db)):
    return crud.get_or_404(db, models.Coach, coach_id, "Coach")


@router.post("", response_model=schemas.CoachOut, status_code=201)
def create_coach(
    payload: schemas.CoachCreate,
    db: Session = Depends(get_db),
    settings: AppSettings = Depends(get_app_settings),
):
    coach = crud.save(db, _apply(db, models.Coach(), payload, settings))
    logger.info(f"Coach created: {coach.id} ({coach.name})")
    return coach


@router.put("/{coach_id}", response_model=schemas.CoachOut)
def update_coach(
    coach_id: str,
    payload: schemas.CoachCreate,
    db: Session = Depends(get_db),
    settings: AppSettings = Depends(get_app_settings),
):
    coach = crud.get_or_404(db, models.Coach, coach_id, "Coach")
    coach = crud.save(db, _apply(db, coach, payload, settings))
    logger.info(f"Coach updated: {coach.id}")
    return coach


@router.delete("/{coach_id}", status_code=204, response_class=Response)
def delete_coach(coach_id: str, db: Session = Depends(get_db)):
    coach = crud.get_or_404(db, models.Coach, coach_id, "Coach")
    crud.delete(db, coach)
    logger.info(f"Coach deleted: {coach_id}")
    return Response(status_code=204)
