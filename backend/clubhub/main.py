"""FastAPI application entrypoint."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clubhub.api import badges, clubs, leaderboards, ops, users
from clubhub.api.errors import install_error_handlers
from clubhub.infra import postgres
from clubhub.obs import init as obs_init
from clubhub.settings import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
	await postgres.init_pool()
	try:
		yield
	finally:
		await postgres.close_pool()


app = FastAPI(title="ClubHub API", lifespan=lifespan)
install_error_handlers(app)

allow_origins = list(settings.cors_allow_origins)
# Starlette disallows wildcard '*' with allow_credentials=True.
allow_credentials = "*" not in allow_origins

app.add_middleware(
	CORSMiddleware,
	allow_origins=allow_origins,
	allow_credentials=allow_credentials,
	allow_methods=["GET"],
	allow_headers=["*"],
)
obs_init(app)

app.include_router(clubs.router)
app.include_router(users.router)
app.include_router(badges.router)
app.include_router(leaderboards.router)
app.include_router(ops.router)
