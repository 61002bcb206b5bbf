from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import uuid

from sheetcollab.api import envelopes
from sheetcollab.api.deps import get_session_user_id
from sheetcollab.core.db import get_db
from sheetcollab.core.errors import SheetCollabError
from sheetcollab.domains.sheets.schemas import SheetCreate, SheetUpdate, SheetReverse, SheetHistoryResponse
from sheetcollab.domains.sheets.services import SheetService

router = APIRouter(prefix="/api/sheet", tags=["sheets"])


@router.post("/create", response_model=envelopes.SheetWriteResult)
async def create_sheet(
    sheet_data: SheetCreate,
    user_id: uuid.UUID = Depends(get_session_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Создание листа с каналом чата и начальной ревизией"""
    sheet_service = SheetService(db)

    try:
        populated = await sheet_service.create_sheet(user_id, sheet_data.name, sheet_data.data)
    except SheetCollabError as e:
        return envelopes.from_error(e)

    return envelopes.SheetSuccess(data=envelopes.populated_sheet_response(populated))


@router.get("/get/{sheet_id}", response_model=envelopes.SheetReadResult)
async def get_sheet(
    sheet_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Получение листа по идентификатору"""
    sheet_service = SheetService(db)

    try:
        populated = await sheet_service.get_sheet(sheet_id)
    except SheetCollabError as e:
        return envelopes.from_error(e)

    return envelopes.SheetInfo(data=envelopes.populated_sheet_response(populated))


async def _update_sheet(sheet_id, update_data: SheetUpdate, user_id: uuid.UUID, db: AsyncSession):
    sheet_service = SheetService(db)

    try:
        sheet = await sheet_service.update_sheet(
            sheet_id or update_data.id,
            update_data.data,
            update_data.message,
            user_id
        )
    except SheetCollabError as e:
        return envelopes.from_error(e)

    return envelopes.SheetSuccess(data=envelopes.sheet_response(sheet))


@router.post("/update/{sheet_id}/", response_model=envelopes.SheetWriteResult)
async def update_sheet(
    sheet_id: str,
    update_data: SheetUpdate,
    user_id: uuid.UUID = Depends(get_session_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Добавление ревизии в лист из пути запроса"""
    return await _update_sheet(sheet_id, update_data, user_id, db)


@router.post("/update/", response_model=envelopes.SheetWriteResult)
async def update_sheet_from_body(
    update_data: SheetUpdate,
    user_id: uuid.UUID = Depends(get_session_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Добавление ревизии в лист, идентификатор которого передан в теле"""
    return await _update_sheet(None, update_data, user_id, db)


@router.post("/reverse/{sheet_id}/", response_model=envelopes.SheetWriteResult)
async def reverse_sheet(
    sheet_id: str,
    reverse_data: SheetReverse,
    user_id: uuid.UUID = Depends(get_session_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Возврат листа к указанной ревизии"""
    sheet_service = SheetService(db)

    try:
        sheet = await sheet_service.revert_sheet(sheet_id, reverse_data.revision, user_id)
    except SheetCollabError as e:
        return envelopes.from_error(e)

    return envelopes.SheetSuccess(data=envelopes.sheet_response(sheet))


@router.post("/revision/{sheet_id}/", response_model=envelopes.SheetWriteResult)
async def duplicate_latest_revision(
    sheet_id: str,
    user_id: uuid.UUID = Depends(get_session_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Копирование последней ревизии листа"""
    sheet_service = SheetService(db)

    try:
        sheet = await sheet_service.duplicate_latest_revision(sheet_id, user_id)
    except SheetCollabError as e:
        return envelopes.from_error(e)

    return envelopes.SheetSuccess(data=envelopes.sheet_response(sheet))


@router.get("/history/{sheet_id}", response_model=envelopes.SheetHistoryResult)
async def get_sheet_history(
    sheet_id: str,
    db: AsyncSession = Depends(get_db)
):
    """История ревизий листа"""
    sheet_service = SheetService(db)

    try:
        sheet, revisions = await sheet_service.get_history(sheet_id)
    except SheetCollabError as e:
        return envelopes.from_error(e)

    return envelopes.SheetHistoryInfo(
        data=SheetHistoryResponse(
            sheet_id=sheet.uuid,
            revisions=[envelopes.revision_response(revision) for revision in revisions],
            total=len(revisions)
        )
    )
