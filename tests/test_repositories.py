from app.adapters.outbound.persistence.repositories import admin_repository, client_repository


async def test_admin_password_is_stored_hashed(db):
    admin = await admin_repository.create_with_password(
        db, full_name="Ada Lovelace", email="ada@example.com", password="analytical-engine"
    )

    stored = await admin_repository.get_by_email(db, "ada@example.com")

    assert stored.id == admin.id
    assert stored.password != "analytical-engine"
    assert stored.password.startswith("$2b$")


async def test_get_by_email_unknown_returns_none(db):
    assert await admin_repository.get_by_email(db, "nobody@example.com") is None


async def test_client_ids_are_assigned_by_store(db):
    first = await client_repository.create_client(db, full_name="A", email="a@example.com", age=1)
    second = await client_repository.create_client(db, full_name="B", email="b@example.com", age=2)

    assert first.id != second.id
    assert [c.id for c in await client_repository.list_all(db)] == [first.id, second.id]


async def test_delete_by_id(db):
    client = await client_repository.create_client(db, full_name="A", email="a@example.com", age=1)

    assert await client_repository.delete_by_id(db, client.id) is True
    assert await client_repository.delete_by_id(db, client.id) is False
    assert await client_repository.get_by_id(db, client.id) is None
