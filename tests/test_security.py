"""Tests for session tokens and error envelopes."""
from datetime import timedelta
import uuid

from jose import jwt

from sheetcollab.api import envelopes
from sheetcollab.core.config import settings
from sheetcollab.core.errors import DomainError, ParseError, PersistenceError
from sheetcollab.core.security import create_session_token, read_session_token


class TestSessionToken:

    def test_round_trip(self):
        user_id = uuid.uuid4()
        assert read_session_token(create_session_token(user_id)) == user_id

    def test_missing_token(self):
        assert read_session_token(None) is None
        assert read_session_token("") is None

    def test_garbage_token(self):
        assert read_session_token("not.a.token") is None

    def test_expired_token(self):
        token = create_session_token(uuid.uuid4(), expires_delta=timedelta(seconds=-1))
        assert read_session_token(token) is None

    def test_foreign_signature(self):
        token = jwt.encode({"sub": str(uuid.uuid4()), "type": "session"}, "other-secret", algorithm="HS256")
        assert read_session_token(token) is None

    def test_wrong_token_type(self):
        token = jwt.encode({"sub": str(uuid.uuid4()), "type": "refresh"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)
        assert read_session_token(token) is None

    def test_bad_subject(self):
        token = jwt.encode({"sub": "alice", "type": "session"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)
        assert read_session_token(token) is None


class TestErrorEnvelopes:

    def test_parse_error(self):
        result = envelopes.from_error(ParseError("bad json"))
        assert isinstance(result, envelopes.ParseError)
        assert result.model_dump() == {"type": "ParseError", "status": "error", "message": "bad json"}

    def test_sheet_domain_error(self):
        result = envelopes.from_error(DomainError.no_such_sheet())
        assert isinstance(result, envelopes.SheetError)
        assert result.message == "no such sheet"

    def test_revision_lookup_error(self):
        result = envelopes.from_error(DomainError.no_such_revision(DomainError.REVISION))
        assert isinstance(result, envelopes.RevisionError)
        assert result.message == "no such revision"

    def test_missing_revision_during_revert_is_sheet_error(self):
        result = envelopes.from_error(DomainError.no_such_revision())
        assert isinstance(result, envelopes.SheetError)

    def test_persistence_error(self):
        result = envelopes.from_error(PersistenceError("timeout"))
        assert result.model_dump() == {"type": "DatabaseError", "status": "error", "message": "timeout"}
