"""
media.py - Media endpoints (image and video references).
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from .. import crud, models, schemas
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/media", tags=["media"])


def _apply(item: models.Media, payload: schemas.MediaCreate) -> models.Media:
    for key, value in payload.model_dump().items():
        setattr(item, key, value)
    return item


@router.get("", response_model=List[schemas.MediaOut])
def list_media(db: Session = Depends(get_db)):
    return crud.list_rows(db, models.Media)


@router.get("/{media_id}", response_model=schemas.MediaOut)
def get_media(media_id: str, db: Session = Depends(get_db)):
    return crud.get_or_404(db, models.Media, media_id, "Media")


@router.post("", response_model=schemas.MediaOut, status_code=201)
def create_media(payload: schemas.MediaCreate, db: Session = Depends(get_db)):
    item = crud.save(db, _apply(models.Media(), payload))
    logger.info(f"Media created: {item.id} ({item.type})")
    return item


@router.put("/{media_id}", response_model=schemas.MediaOut)
def update_media(media_id: str, payload: schemas.MediaCreate, db: Session = Depends(get_db)):
    item = crud.get_or_404(db, models.Media, media_id, "Media")
    item = crud.save(db, _apply(item, payload))
    logger.info(f"Media updated: {item.id}")
    return item


@router.delete("/{media_id}", status_code=204, response_class=Response)
def delete_media(media_id: str, db: Session = Depends(get_db)):
    item = crud.get_or_404(db, models.Media, media_id, "Media")
    crud.delete(db, item)
    logger.info(f"Media deleted: {media_id}")
    return Response(status_code=204)
