"""Envelope-ответы API.

Каждый ответ - модель с тегом ``type`` и статусом ``success``, ``info``
или ``error``. HTTP-статус всегда 200, результат определяется по телу.
"""
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from sheetcollab.core.errors import DomainError, ParseError as ParseFailure, PersistenceError, SheetCollabError
from sheetcollab.domains.collaboration.schemas import ChatChannelSummary
from sheetcollab.domains.identity.schemas import UserSummary
from sheetcollab.domains.sheets.entities import PopulatedSheet, Revision, Sheet
from sheetcollab.domains.sheets.schemas import (
    CommentResponse, PopulatedSheetResponse, RevisionResponse, SheetHistoryResponse, SheetResponse
)


class SheetSuccess(BaseModel):
    type: Literal["SheetSuccess"] = "SheetSuccess"
    status: Literal["success"] = "success"
    data: Union[PopulatedSheetResponse, SheetResponse]


class SheetInfo(BaseModel):
    type: Literal["SheetInfo"] = "SheetInfo"
    status: Literal["info"] = "info"
    data: PopulatedSheetResponse


class SheetHistoryInfo(BaseModel):
    type: Literal["SheetHistoryInfo"] = "SheetHistoryInfo"
    status: Literal["info"] = "info"
    data: SheetHistoryResponse


class SheetError(BaseModel):
    type: Literal["SheetError"] = "SheetError"
    status: Literal["error"] = "error"
    message: str


class RevisionInfo(BaseModel):
    type: Literal["RevisionInfo"] = "RevisionInfo"
    status: Literal["info"] = "info"
    data: RevisionResponse


class RevisionError(BaseModel):
    type: Literal["RevisionError"] = "RevisionError"
    status: Literal["error"] = "error"
    message: str


class DatabaseError(BaseModel):
    type: Literal["DatabaseError"] = "DatabaseError"
    status: Literal["error"] = "error"
    message: str


class ParseError(BaseModel):
    type: Literal["ParseError"] = "ParseError"
    status: Literal["error"] = "error"
    message: str


SheetWriteResult = Annotated[
    Union[SheetSuccess, ParseError, SheetError, DatabaseError],
    Field(discriminator="type")
]
SheetReadResult = Annotated[
    Union[SheetInfo, SheetError, DatabaseError],
    Field(discriminator="type")
]
SheetHistoryResult = Annotated[
    Union[SheetHistoryInfo, SheetError, DatabaseError],
    Field(discriminator="type")
]
RevisionReadResult = Annotated[
    Union[RevisionInfo, RevisionError, DatabaseError],
    Field(discriminator="type")
]


def from_error(error: SheetCollabError) -> Union[SheetError, RevisionError, DatabaseError, ParseError]:
    """Преобразование исключения в envelope с ошибкой"""
    if isinstance(error, ParseFailure):
        return ParseError(message=error.message)
    if isinstance(error, DomainError):
        if error.domain == DomainError.REVISION:
            return RevisionError(message=error.message)
        return SheetError(message=error.message)
    if isinstance(error, PersistenceError):
        return DatabaseError(message=error.message)
    return DatabaseError(message=str(error))


def revision_response(revision: Revision) -> RevisionResponse:
    return RevisionResponse(
        uuid=revision.uuid,
        sheet_id=revision.sheet_id,
        data=revision.data,
        comment=CommentResponse(message=revision.comment.message, by=revision.comment.by),
        created_at=revision.created_at
    )


def sheet_response(sheet: Sheet) -> SheetResponse:
    return SheetResponse(
        uuid=sheet.uuid,
        name=sheet.name,
        owners=sheet.owner_ids,
        collaborators=sheet.collaborator_ids,
        chat_channels=sheet.chat_channel_ids,
        revisions=sheet.revision_ids,
        created_at=sheet.created_at,
        updated_at=sheet.updated_at
    )


def populated_sheet_response(populated: PopulatedSheet) -> PopulatedSheetResponse:
    sheet = populated.sheet
    return PopulatedSheetResponse(
        uuid=sheet.uuid,
        name=sheet.name,
        owners=[UserSummary(uuid=user.uuid, name=user.name) for user in populated.owners],
        collaborators=[UserSummary(uuid=user.uuid, name=user.name) for user in populated.collaborators],
        chat_channels=[ChatChannelSummary(uuid=channel.uuid) for channel in populated.chat_channels],
        revisions=sheet.revision_ids,
        created_at=sheet.created_at,
        updated_at=sheet.updated_at
    )
