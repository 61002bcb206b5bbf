from sheetcollab.domains.sheets.entities import (
    Comment, Revision, Sheet, PopulatedSheet, INITIAL_COMMIT_MESSAGE
)
from sheetcollab.domains.sheets.schemas import (
    SheetCreate, SheetUpdate, SheetReverse, CommentResponse, RevisionResponse,
    SheetResponse, PopulatedSheetResponse, SheetHistoryResponse
)
from sheetcollab.domains.sheets.services import SheetService, RevisionService, parse_content, parse_id

__all__ = [
    "Comment", "Revision", "Sheet", "PopulatedSheet", "INITIAL_COMMIT_MESSAGE",
    "SheetCreate", "SheetUpdate", "SheetReverse", "CommentResponse", "RevisionResponse",
    "SheetResponse", "PopulatedSheetResponse", "SheetHistoryResponse",
    "SheetService", "RevisionService", "parse_content", "parse_id"
]
