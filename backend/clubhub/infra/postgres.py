"""AsyncPG pool and batch connection management for the backend."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import asyncpg

from clubhub.settings import settings

_pool: Optional[asyncpg.pool.Pool] = None


def _dsn() -> str:
	# Force 127.0.0.1 instead of localhost to avoid IPv6 issues on Windows
	return settings.postgres_url.replace("localhost", "127.0.0.1")


def _ssl_mode() -> str:
	return "require" if settings.postgres_ssl else "disable"


async def init_pool() -> asyncpg.pool.Pool:
	global _pool
	if _pool is None:
		_pool = await asyncpg.create_pool(
			dsn=_dsn(),
			min_size=settings.postgres_min_pool_size,
			max_size=settings.postgres_max_pool_size,
			ssl=_ssl_mode(),
		)
	return _pool


def set_pool(pool: Optional[asyncpg.pool.Pool]) -> None:
	global _pool
	_pool = pool


async def get_pool() -> asyncpg.pool.Pool:
	if _pool is None:
		await init_pool()
	assert _pool is not None
	return _pool


async def close_pool() -> None:
	global _pool
	if _pool is not None:
		await _pool.close()
		_pool = None


@asynccontextmanager
async def connect(dsn: Optional[str] = None) -> AsyncIterator[asyncpg.Connection]:
	"""Open a dedicated connection that is closed on every exit path.

	Batch jobs hold one connection for their whole run instead of borrowing
	from the API pool.
	"""
	conn = await asyncpg.connect(dsn=dsn or _dsn(), ssl=_ssl_mode())
	try:
		yield conn
	finally:
		await conn.close()
