"""
matches.py - Match endpoints.

Score, statistics and highlights are stored as JSON text; the score is kept
for any status but only means something once the match is completed.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from .. import crud, models, schemas
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


def _apply(match: models.Match, payload: schemas.MatchCreate) -> models.Match:
    data = payload.model_dump()
    data["score"] = payload.score.model_dump(by_alias=True)
    data["stats"] = payload.stats.model_dump(by_alias=True)
    for key, value in data.items():
        setattr(match, key, value)
    return match


@router.get("", response_model=List[schemas.MatchOut])
def list_matches(db: Session = Depends(get_db)):
    return crud.list_rows(db, models.Match)


@router.get("/{match_id}", response_model=schemas.MatchOut)
def get_match(match_id: str, db: Session = Depends(get_db)):
    return crud.get_or_404(db, models.Match, match_id, "Match")


@router.post("", response_model=schemas.MatchOut, status_code=201)
def create_match(payload: schemas.MatchCreate, db: Session = Depends(get_db)):
    match = crud.save(db, _apply(models.Match(), payload))
    logger.info(f"Match created: {match.id} ({match.date} vs {match.opponent})")
    return match


@router.put("/{match_id}", response_model=schemas.MatchOut)
def update_match(match_id: str, payload: schemas.MatchCreate, db: Session = Depends(get_db)):
    match = crud.get_or_404(db, models.Match, match_id, "Match")
    match = crud.save(db, _apply(match, payload))
    logger.info(f"Match updated: {match.id} (status={match.status})")
    return match


@router.delete("/{match_id}", status_code=204, response_class=Response)
def delete_match(match_id: str, db: Session = Depends(get_db)):
    match = crud.get_or_404(db, models.Match, match_id, "Match")
    crud.delete(db, match)
    logger.info(f"Match deleted: {match_id}")
    return Response(status_code=204)
