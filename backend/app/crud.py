"""
crud.py - Query helpers shared by the entity routers.

Each helper works on the request's session. The only write touching two
tables is the player team_name sync, committed with the team change.
"""

import logging
from typing import List, Optional, Type, TypeVar

from fastapi import HTTPException, Request
from sqlalchemy import literal_column
from sqlalchemy.orm import Session

from . import models
from utils.config_loader import AppSettings

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

# SQLite keeps insertion order in the implicit rowid
INSERTION_ORDER = literal_column("rowid")


def get_app_settings(request: Request) -> AppSettings:
    """Dependency returning the settings the app was created with."""
    return request.app.state.settings


def list_rows(db: Session, model: Type[ModelT], *criteria) -> List[ModelT]:
    """All rows of `model` matching `criteria`, in insertion order."""
    query = db.query(model)
    if criteria:
        query = query.filter(*criteria)
    return query.order_by(INSERTION_ORDER).all()


def get_or_404(db: Session, model: Type[ModelT], entity_id: str, label: str) -> ModelT:
    """
    Fetch one row by primary key.

    Raises:
        404: no row with that id
    """
    row = db.get(model, entity_id)
    if row is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return row


def resolve_team(db: Session, team_id: Optional[str], enforce: bool) -> Optional[models.Team]:
    """
    Look up the team a player or coach points at.

    Returns None for unassigned members and, when `enforce` is off, for
    references to teams that do not exist.

    Raises:
        400: `enforce` is on and the team does not exist
    """
    if team_id is None:
        return None
    team = db.get(models.Team, team_id)
    if team is None:
        if enforce:
            logger.info(f"Rejected reference to unknown team {team_id}")
            raise HTTPException(status_code=400, detail="Team not found")
        logger.warning(f"Storing reference to unknown team {team_id} (team check disabled)")
    return team


def sync_team_name(db: Session, team_id: str, team_name: Optional[str]) -> int:
    """
    Rewrite the denormalized team_name of every player on `team_id`.

    Called inside the team update/delete so players never show a renamed or
    removed team. Pass team_name=None when the team is deleted.
    """
    return (
        db.query(models.Player)
        .filter(models.Player.team_id == team_id)
        .update({models.Player.team_name: team_name}, synchronize_session=False)
    )


def save(db: Session, row: ModelT) -> ModelT:
    """Add (or re-attach) a row, commit and refresh it from the database."""
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def delete(db: Session, row) -> None:
    db.delete(row)
    db.commit()
