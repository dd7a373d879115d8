"""
players.py - Player endpoints.

GET /api/players accepts an optional team filter, either as `team_id` or
as the legacy `teamId` query parameter.

When a payload carries a team_id, team_name is taken from the referenced
team. Unknown teams are rejected with 400 unless the team check is turned
off in config (api.enforce_team_reference), in which case the reference and
the submitted team_name are stored as-is.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from .. import crud, models, schemas
from ..crud import get_app_settings
from ..database import get_db
from utils.config_loader import AppSettings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/players", tags=["players"])


def _apply(
    db: Session,
    player: models.Player,
    payload: schemas.PlayerCreate,
    settings: AppSettings,
) -> models.Player:
    team = crud.resolve_team(db, payload.team_id, settings.enforce_team_reference)

    data = payload.model_dump()
    data["stats"] = payload.stats.model_dump(by_alias=True)
    if team is not None:
        data["team_name"] = team.name
    elif payload.team_id is None:
        data["team_name"] = None

    for key, value in data.items():
        setattr(player, key, value)
    return player


@router.get("", response_model=List[schemas.PlayerOut])
def list_players(
    team_id: Optional[str] = Query(None, description="Only players of this team"),
    team_id_legacy: Optional[str] = Query(None, alias="teamId", include_in_schema=False),
    db: Session = Depends(get_db),
):
    team_filter = team_id if team_id is not None else team_id_legacy
    if team_filter is not None:
        players = crud.list_rows(db, models.Player, models.Player.team_id == team_filter)
        logger.info(f"Found {len(players)} players for team {team_filter}")
    else:
        players = crud.list_rows(db, models.Player)
        logger.info(f"Found {len(players)} players")
    return players


@router.get("/{player_id}", response_model=schemas.PlayerOut)
def get_player(player_id: str, db: Session = Depends(get_db)):
    return crud.get_or_404(db, models.Player, player_id, "Player")


@router.post("", response_model=schemas.PlayerOut, status_code=201)
def create_player(
    payload: schemas.PlayerCreate,
    db: Session = Depends(get_db),
    settings: AppSettings = Depends(get_app_settings),
):
    player = crud.save(db, _apply(db, models.Player(), payload, settings))
    logger.info(f"Player created: {player.id} ({player.name}, team={player.team_id})")
    return player


@router.put("/{player_id}", response_model=schemas.PlayerOut)
def update_player(
    player_id: str,
    payload: schemas.PlayerCreate,
    db: Session = Depends(get_db),
    settings: AppSettings = Depends(get_app_settings),
):
    player = crud.get_or_404(db, models.Player, player_id, "Player")
    player = crud.save(db, _apply(db, player, payload, settings))
    logger.info(f"Player updated: {player.id}")
    return player


@router.delete("/{player_id}", status_code=204, response_class=Response)
def delete_player(player_id: str, db: Session = Depends(get_db)):
    player = crud.get_or_404(db, models.Player, player_id, "Player")
    crud.delete(db, player)
    logger.info(f"Player deleted: {player_id}")
    return Response(status_code=204)
