import threading

import pytest
from jose import jwt

from app.adapters.configuration.config import settings
from app.adapters.outbound.security.auth_admin_manager import AdminAuthManager
from app.domain.exceptions import InvalidTokenException
from app.domain.models.token_claims import AdminClaims, ClientSessionClaims


async def test_hash_password_is_salted_and_verifiable():
    first = await AdminAuthManager.hash_password("s3cret")
    second = await AdminAuthManager.hash_password("s3cret")

    assert first != "s3cret"
    assert first != second
    assert await AdminAuthManager.verify_password("s3cret", first)
    assert await AdminAuthManager.verify_password("s3cret", second)


async def test_verify_password_rejects_wrong_password():
    hashed = await AdminAuthManager.hash_password("s3cret")
    assert not await AdminAuthManager.verify_password("S3cret", hashed)


async def test_verify_password_with_malformed_hash_is_false():
    assert not await AdminAuthManager.verify_password("s3cret", "not-a-bcrypt-hash")


async def test_hash_uses_configured_work_factor():
    hashed = await AdminAuthManager.hash_password("s3cret")
    assert hashed.startswith(f"$2b${settings.BCRYPT_ROUNDS:02d}$")


async def test_bcrypt_runs_off_the_event_loop_thread(monkeypatch):
    loop_thread = threading.get_ident()
    seen = []

    class RecordingContext:
        def hash(self, password):
            seen.append(threading.get_ident())
            return "hashed"

        def verify(self, password, hashed):
            seen.append(threading.get_ident())
            return True

    monkeypatch.setattr(AdminAuthManager, "crypt_context", RecordingContext())

    assert await AdminAuthManager.hash_password("s3cret") == "hashed"
    assert await AdminAuthManager.verify_password("s3cret", "hashed")
    assert len(seen) == 2
    assert loop_thread not in seen


async def test_admin_claims_round_trip():
    claims = AdminClaims(id=7, email="ada@example.com", full_name="Ada Lovelace")
    token = await AdminAuthManager.create_token(claims)

    decoded = await AdminAuthManager.verify_token(token)

    assert isinstance(decoded, AdminClaims)
    assert decoded == claims


async def test_session_claims_round_trip():
    claims = ClientSessionClaims(id=3, email="ada@example.com")
    token = await AdminAuthManager.create_token(claims)

    decoded = await AdminAuthManager.verify_token(token)

    assert isinstance(decoded, ClientSessionClaims)
    assert decoded.id == 3
    assert decoded.email == "ada@example.com"


async def test_token_has_no_expiry():
    token = await AdminAuthManager.create_token(ClientSessionClaims(id=1, email="a@example.com"))
    payload = jwt.get_unverified_claims(token)
    assert "exp" not in payload
    assert payload["type"] == "session"


async def test_tampered_token_is_rejected():
    token = await AdminAuthManager.create_token(ClientSessionClaims(id=1, email="a@example.com"))
    header, payload, signature = token.split(".")
    forged = jwt.encode({"type": "session", "id": 2, "email": "b@example.com"}, "other")
    _, forged_payload, _ = forged.split(".")

    with pytest.raises(InvalidTokenException):
        await AdminAuthManager.verify_token(f"{header}.{forged_payload}.{signature}")


async def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"type": "session", "id": 1, "email": "a@example.com"}, "wrong-secret", algorithm="HS256")

    with pytest.raises(InvalidTokenException):
        await AdminAuthManager.verify_token(token)


async def test_unsigned_token_is_rejected():
    # {"alg":"none","typ":"JWT"} . {"type":"session","id":1,"email":"a@example.com"} . <empty>
    unsigned = (
        "eyJhbGciOiJub25lIiwidHlwIjoiSldUIn0."
        "eyJ0eXBlIjoic2Vzc2lvbiIsImlkIjoxLCJlbWFpbCI6ImFAZXhhbXBsZS5jb20ifQ."
    )

    with pytest.raises(InvalidTokenException):
        await AdminAuthManager.verify_token(unsigned)


async def test_unknown_claim_set_is_rejected():
    token = jwt.encode({"sub": "someone"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    with pytest.raises(InvalidTokenException):
        await AdminAuthManager.verify_token(token)


async def test_garbage_token_is_rejected():
    with pytest.raises(InvalidTokenException):
        await AdminAuthManager.verify_token("not.a.token")
