"""
HeartMap Backend — Heart Store (Persistence Interface)
=======================================================

What:  Store-access interface for heart markers plus its SQLAlchemy implementation.
Why:   Routes receive the store through a FastAPI dependency instead of a
       global handle, so tests can substitute an in-memory fake.
How:   HeartStore defines the two operations the service needs: insert one
       marker, and list every marker newest first. SqlHeartStore implements
       them on a per-request AsyncSession.

Query plan (list):
    SELECT * FROM hearts ORDER BY timestamp DESC
    → served by idx_hearts_timestamp
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from fastapi import Depends
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from heartmap.database import get_db_session
from heartmap.models.heart import Heart

logger = logging.getLogger(__name__)


class HeartStore(ABC):
    """
    Persistence contract for heart markers.

    Implementations raise whatever their driver raises; HeartService is
    responsible for translating failures into DatabaseError.
    """

    @abstractmethod
    async def add(self, heart: Heart) -> Heart:
        """Persist a new marker and return it with its identifier assigned."""
        ...

    @abstractmethod
    async def list_newest_first(self) -> List[Heart]:
        """Return every stored marker ordered by timestamp descending."""
        ...


class SqlHeartStore(HeartStore):
    """HeartStore on an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, heart: Heart) -> Heart:
        self.session.add(heart)
        # Commit here rather than in the session dependency so a failed
        # write surfaces before the 201 response is built
        await self.session.commit()
        logger.debug("Stored heart %s", heart.id)
        return heart

    async def list_newest_first(self) -> List[Heart]:
        result = await self.session.execute(
            select(Heart).order_by(desc(Heart.timestamp))
        )
        return list(result.scalars().all())


async def get_heart_store(
    session: AsyncSession = Depends(get_db_session),
) -> HeartStore:
    """FastAPI dependency: a HeartStore bound to the request's session."""
    return SqlHeartStore(session)
