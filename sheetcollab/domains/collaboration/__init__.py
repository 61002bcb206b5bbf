from sheetcollab.domains.collaboration.entities import ChatChannel
from sheetcollab.domains.collaboration.schemas import ChatChannelSummary

__all__ = [
    "ChatChannel",
    "ChatChannelSummary"
]
