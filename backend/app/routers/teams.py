"""
teams.py - Team endpoints.

- GET    /api/teams
- GET    /api/teams/{team_id}
- POST   /api/teams
- PUT    /api/teams/{team_id}   (full replace)
- DELETE /api/teams/{team_id}   (players and coaches keep their team_id)

Players carry a copy of their team's name; renaming a team rewrites it and
deleting the team clears it.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from .. import crud, models, schemas
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/teams", tags=["teams"])


def _apply(team: models.Team, payload: schemas.TeamCreate) -> models.Team:
    data = payload.model_dump()
    # Composite values are stored with their wire (camelCase) keys
    data["stats"] = payload.stats.model_dump(by_alias=True)
    for key, value in data.items():
        setattr(team, key, value)
    return team


@router.get("", response_model=List[schemas.TeamOut])
def list_teams(db: Session = Depends(get_db)):
    teams = crud.list_rows(db, models.Team)
    logger.info(f"Found {len(teams)} teams")
    return teams


@router.get("/{team_id}", response_model=schemas.TeamOut)
def get_team(team_id: str, db: Session = Depends(get_db)):
    return crud.get_or_404(db, models.Team, team_id, "Team")


@router.post("", response_model=schemas.TeamOut, status_code=201)
def create_team(payload: schemas.TeamCreate, db: Session = Depends(get_db)):
    team = crud.save(db, _apply(models.Team(), payload))
    logger.info(f"Team created: {team.id} ({team.name})")
    return team


@router.put("/{team_id}", response_model=schemas.TeamOut)
def update_team(team_id: str, payload: schemas.TeamCreate, db: Session = Depends(get_db)):
    team = crud.get_or_404(db, models.Team, team_id, "Team")
    team = _apply(team, payload)
    renamed = crud.sync_team_name(db, team.id, team.name)
    team = crud.save(db, team)
    logger.info(f"Team updated: {team.id} ({renamed} player names synced)")
    return team


@router.delete("/{team_id}", status_code=204, response_class=Response)
def delete_team(team_id: str, db: Session = Depends(get_db)):
    team = crud.get_or_404(db, models.Team, team_id, "Team")
    crud.sync_team_name(db, team.id, None)
    crud.delete(db, team)
    logger.info(f"Team deleted: {team_id}")
    return Response(status_code=204)
