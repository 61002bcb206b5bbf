from sheetcollab.db.models.user import User
from sheetcollab.db.models.sheet import Sheet, Revision
from sheetcollab.db.models.collaboration import ChatChannel

__all__ = [
    "User",
    "Sheet",
    "Revision",
    "ChatChannel"
]
