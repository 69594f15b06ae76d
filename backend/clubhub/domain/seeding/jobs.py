"""Entry points for running the membership seeding batch."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

from clubhub.domain.seeding.exceptions import SeedConnectionError, SeedError
from clubhub.domain.seeding.models import SeedReport
from clubhub.domain.seeding.repository import SeedRepository
from clubhub.domain.seeding.service import SeedService
from clubhub.infra import postgres
from clubhub.obs import logging as obs_logging
from clubhub.obs import metrics

logger = logging.getLogger(__name__)


async def run_seed(service: Optional[SeedService] = None, *, dsn: Optional[str] = None) -> SeedReport:
	"""Open one connection, run the batch on it and release it on every exit path."""
	service = service or SeedService()
	connected = False
	try:
		async with postgres.connect(dsn) as conn:
			connected = True
			logger.info("Connected to the database")
			report = await service.run(SeedRepository(conn))
	except Exception as exc:
		if not connected:
			metrics.inc_seed_run("connection_failed")
			raise SeedConnectionError() from exc
		metrics.inc_seed_run("failed")
		if isinstance(exc, SeedError):
			raise
		raise SeedError("seed_run_failed") from exc
	finally:
		if connected:
			logger.info("Connection closed")
	metrics.inc_seed_run("succeeded")
	return report


def main() -> int:
	"""Console entry point; returns the process exit code."""
	obs_logging.configure_logging()
	try:
		report = asyncio.run(run_seed())
	except SeedError as exc:
		logger.error("Seeding aborted", extra={"reason": exc.detail}, exc_info=True)
		return 1
	logger.info("Database seeded with random club memberships and badges", extra=report.as_log_fields())
	return 0


if __name__ == "__main__":
	sys.exit(main())
