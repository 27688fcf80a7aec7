"""
HeartMap Backend — SQL Heart Store Tests
=========================================

What:  Exercises SqlHeartStore against a real (in-memory) SQLite database.
Why:   The service tests use a fake store; these confirm the SQLAlchemy
       implementation honours the same contract.
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import StatementError

from heartmap.models.heart import Heart, HeartType
from heartmap.schemas.heart import HeartResponse
from heartmap.services.heart_store import SqlHeartStore


class TestSqlHeartStore:

    @pytest.mark.asyncio
    async def test_add_assigns_identifier(self, sqlite_session, make_heart):
        store = SqlHeartStore(sqlite_session)

        stored = await store.add(make_heart())

        assert stored.id is not None
        assert stored.type == HeartType.RED

    @pytest.mark.asyncio
    async def test_list_newest_first(self, sqlite_session, make_heart):
        store = SqlHeartStore(sqlite_session)
        now = datetime.now(timezone.utc)
        await store.add(make_heart(message="old", timestamp=now - timedelta(hours=2)))
        await store.add(make_heart(message="newest", timestamp=now))
        await store.add(make_heart(message="middle", timestamp=now - timedelta(hours=1)))

        hearts = await store.list_newest_first()

        assert [h.message for h in hearts] == ["newest", "middle", "old"]

    @pytest.mark.asyncio
    async def test_list_empty(self, sqlite_session):
        assert await SqlHeartStore(sqlite_session).list_newest_first() == []

    @pytest.mark.asyncio
    async def test_defaults_applied(self, sqlite_session):
        store = SqlHeartStore(sqlite_session)
        await store.add(Heart(type=HeartType.SILVER, latitude=1.5, longitude=-2.5))

        [heart] = await store.list_newest_first()

        assert heart.message == ""
        assert heart.country_name == "Unknown"
        assert heart.country_code == "XX"
        assert heart.timestamp is not None

    @pytest.mark.asyncio
    async def test_rejects_unknown_type(self, sqlite_session):
        store = SqlHeartStore(sqlite_session)

        with pytest.raises((StatementError, LookupError)):
            await store.add(Heart(type="blueHeart", latitude=1.0, longitude=1.0))

    @pytest.mark.asyncio
    async def test_round_trip_to_response(self, sqlite_session, make_heart):
        store = SqlHeartStore(sqlite_session)
        created = await store.add(make_heart(type=HeartType.YELLOW, message="hi"))
        sqlite_session.expunge_all()

        [heart] = await store.list_newest_first()
        response = HeartResponse.model_validate(heart)

        assert response.id == created.id
        assert response.type == HeartType.YELLOW
        assert response.message == "hi"
        # SQLite drops the offset; the schema restores UTC
        assert response.timestamp.tzinfo is not None
        body = response.model_dump(mode="json", by_alias=True)
        assert body["type"] == "yellowHeart"
        assert body["countryName"] == "France"
        assert body["countryCode"] == "FR"
