from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sheetcollab.api import envelopes
from sheetcollab.core.db import get_db
from sheetcollab.core.errors import SheetCollabError
from sheetcollab.domains.sheets.services import RevisionService

router = APIRouter(prefix="/api/revision", tags=["revisions"])


@router.get("/get/{revision_id}", response_model=envelopes.RevisionReadResult)
async def get_revision(
    revision_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Получение ревизии по идентификатору"""
    revision_service = RevisionService(db)

    try:
        revision = await revision_service.get_revision(revision_id)
    except SheetCollabError as e:
        return envelopes.from_error(e)

    return envelopes.RevisionInfo(data=envelopes.revision_response(revision))
