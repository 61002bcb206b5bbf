class SheetCollabError(Exception):
    """Базовая ошибка приложения"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PersistenceError(SheetCollabError):
    """Сбой хранилища: соединение, запрос или сохранение"""


class ParseError(SheetCollabError):
    """Некорректное содержимое запроса"""


class DomainError(SheetCollabError):
    """Нарушение логического предусловия (нет листа, нет ревизии и т.п.)"""

    SHEET = "sheet"
    REVISION = "revision"

    def __init__(self, message: str, domain: str = SHEET):
        super().__init__(message)
        self.domain = domain

    @classmethod
    def no_such_sheet(cls) -> "DomainError":
        return cls("no such sheet", cls.SHEET)

    @classmethod
    def no_such_revision(cls, domain: str = SHEET) -> "DomainError":
        return cls("no such revision", domain)
