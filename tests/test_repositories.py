# tests/test_repositories.py

import asyncio
import pytest

from app.adapters.outbound.persistence.database import build_engine, build_session_factory
from app.adapters.outbound.persistence.repositories import access_repository, user_access_repository
from app.application.dtos.access_dto import AccessCreate
from app.application.dtos.user_access_dto import UserAccessCreate
from app.domain.exceptions import InvalidReferenceException, ResourceNotFoundException


@pytest.fixture
def run(migrated, db_path):
    """Executa uma função assíncrona com uma sessão ligada ao banco migrado."""

    def _run(operation):
        async def main():
            engine = build_engine(f"sqlite+aiosqlite:///{db_path}")
            try:
                async with build_session_factory(engine)() as session:
                    return await operation(session)
            finally:
                await engine.dispose()

        return asyncio.run(main())

    return _run


class TestAccessRepository:
    def test_get_by_name(self, run):
        async def operation(db):
            found = await access_repository.get_by_name(db, "CreateUser")
            missing = await access_repository.get_by_name(db, "ListUsers")
            return found, missing

        found, missing = run(operation)

        assert found.access_name == "CreateUser"
        assert missing is None

    def test_get_by_name_returns_lowest_id_for_duplicates(self, run):
        async def operation(db):
            original = await access_repository.get_by_name(db, "GetUser")
            await access_repository.create(db, obj_in=AccessCreate(access_name="GetUser"))
            return original, await access_repository.get_by_name(db, "GetUser")

        original, found = run(operation)

        assert found.id == original.id

    def test_exists(self, run):
        async def operation(db):
            return (
                await access_repository.exists(db, access_name="DeleteUser"),
                await access_repository.exists(db, access_name="ListUsers"),
            )

        assert run(operation) == (True, False)

    def test_count(self, run):
        async def operation(db):
            before = await access_repository.count(db)
            await access_repository.create(db, obj_in=AccessCreate(access_name="ListUsers"))
            return before, await access_repository.count(db), await access_repository.count(db, access_name="ListUsers")

        assert run(operation) == (5, 6, 1)

    def test_get_multi_is_ordered_by_id(self, run):
        async def operation(db):
            return await access_repository.get_multi(db)

        rows = run(operation)

        assert [row.id for row in rows] == sorted(row.id for row in rows)
        assert [row.access_name for row in rows] == [
            "SearchUser", "GetUser", "CreateUser", "UpdateUser", "DeleteUser",
        ]

    def test_remove_unknown_raises(self, run):
        async def operation(db):
            await access_repository.remove(db, id=999)

        with pytest.raises(ResourceNotFoundException):
            run(operation)


class TestUserAccessRepository:
    def test_has_access_and_count(self, run):
        async def operation(db):
            get_user = await access_repository.get_by_name(db, "GetUser")
            await user_access_repository.create(db, obj_in=UserAccessCreate(access_id=get_user.id, user_id=2))
            return (
                await user_access_repository.has_access(db, user_id=2, access_id=get_user.id),
                await user_access_repository.has_access(db, user_id=3, access_id=get_user.id),
                await user_access_repository.count(db, user_id=2),
            )

        assert run(operation) == (True, False, 1)

    def test_search_query_filters_on_permission_level(self, run):
        async def operation(db):
            get_user = await access_repository.get_by_name(db, "GetUser")
            for user_id, level in [(1, None), (2, "admin"), (3, "self")]:
                await user_access_repository.create(
                    db, obj_in=UserAccessCreate(access_id=get_user.id, user_id=user_id, permission_level=level)
                )

            async def user_ids(permission_level):
                query = user_access_repository.search_query(permission_level=permission_level)
                return [row.user_id for row in (await db.execute(query)).scalars()]

            return await user_ids("null"), await user_ids("!null"), await user_ids("self")

        assert run(operation) == ([1], [2, 3], [3])

    def test_create_with_unknown_user_raises_invalid_reference(self, run):
        async def operation(db):
            get_user = await access_repository.get_by_name(db, "GetUser")
            await user_access_repository.create(db, obj_in=UserAccessCreate(access_id=get_user.id, user_id=999))

        with pytest.raises(InvalidReferenceException):
            run(operation)
