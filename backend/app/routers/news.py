"""
news.py - News endpoints.

The publish date defaults to the creation time; a PUT without a date keeps
the one already stored.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from .. import crud, models, schemas
from ..database import get_db
from ..models import utcnow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/news", tags=["news"])


def _apply(item: models.News, payload: schemas.NewsCreate) -> models.News:
    data = payload.model_dump()
    data["date"] = payload.date or item.date or utcnow()
    for key, value in data.items():
        setattr(item, key, value)
    return item


@router.get("", response_model=List[schemas.NewsOut])
def list_news(db: Session = Depends(get_db)):
    return crud.list_rows(db, models.News)


@router.get("/{news_id}", response_model=schemas.NewsOut)
def get_news(news_id: str, db: Session = Depends(get_db)):
    return crud.get_or_404(db, models.News, news_id, "News")


@router.post("", response_model=schemas.NewsOut, status_code=201)
def create_news(payload: schemas.NewsCreate, db: Session = Depends(get_db)):
    item = crud.save(db, _apply(models.News(), payload))
    logger.info(f"News created: {item.id} ({item.title})")
    return item


@router.put("/{news_id}", response_model=schemas.NewsOut)
def update_news(news_id: str, payload: schemas.NewsCreate, db: Session = Depends(get_db)):
    item = crud.get_or_404(db, models.News, news_id, "News")
    item = crud.save(db, _apply(item, payload))
    logger.info(f"News updated: {item.id}")
    return item


@router.delete("/{news_id}", status_code=204, response_class=Response)
def delete_news(news_id: str, db: Session = Depends(get_db)):
    item = crud.get_or_404(db, models.News, news_id, "News")
    crud.delete(db, item)
    logger.info(f"News deleted: {news_id}")
    return Response(status_code=204)
