from sheetcollab.domains.identity.entities import User
from sheetcollab.domains.identity.schemas import UserSummary
from sheetcollab.domains.identity.services import IdentityService

__all__ = [
    "User",
    "UserSummary",
    "IdentityService"
]
