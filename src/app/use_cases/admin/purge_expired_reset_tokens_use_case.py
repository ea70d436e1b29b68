"""
Purge Expired Reset Tokens Use Case

Sweeps password reset tokens past their expiry. Idempotent and safe to run
alongside token consumption.
"""

import logging
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now

logger = logging.getLogger(__name__)


class PurgeExpiredResetTokensResponse(BaseModel):
    deleted: int
    message: str


class PurgeExpiredResetTokensUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, now: Optional[datetime] = None
    ) -> Result[PurgeExpiredResetTokensResponse]:
        now = now or utc_now()

        async with self.uow:
            deleted = await self.uow.password_reset_tokens.delete_expired(now)
            await self.uow.commit()

        logger.info(f"Purged {deleted} expired password reset tokens")

        return Return.ok(
            PurgeExpiredResetTokensResponse(
                deleted=deleted,
                message=f"Deleted {deleted} expired tokens",
            )
        )
