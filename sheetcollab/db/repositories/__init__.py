from sheetcollab.db.repositories.user_repository import UserRepository, UserAlreadyExists
from sheetcollab.db.repositories.sheet_repository import SheetRepository, RevisionRepository
from sheetcollab.db.repositories.collaboration_repository import ChatChannelRepository

__all__ = [
    "UserRepository",
    "UserAlreadyExists",
    "SheetRepository",
    "RevisionRepository",
    "ChatChannelRepository"
]
