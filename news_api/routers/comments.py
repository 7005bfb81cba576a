from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from news_api.database import get_db
from news_api.schemas import RowId
from news_api.services import comment_service

router = APIRouter(prefix="/api/comments", tags=["comments"])

@router.delete("/{comment_id}", status_code=204, response_class=Response)
async def delete_comment(comment_id: RowId, db: AsyncSession = Depends(get_db)):
    await comment_service.delete_comment(db, comment_id)
