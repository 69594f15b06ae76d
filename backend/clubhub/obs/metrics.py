"""Central registry for Prometheus metrics used across the backend."""

from __future__ import annotations

import logging

from prometheus_client import Counter, Gauge, Histogram

log = logging.getLogger(__name__)


SEED_RUNS = Counter(
	"clubhub_seed_runs_total",
	"Membership seeding runs by outcome",
	["outcome"],
)

SEED_MEMBERSHIPS = Counter(
	"clubhub_seed_memberships_created_total",
	"Club memberships committed by the seeding batch",
)

SEED_PHASE_LATENCY = Histogram(
	"clubhub_seed_phase_duration_seconds",
	"Duration of each seeding phase in seconds",
	["phase"],
	buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

BADGE_WRITES = Counter(
	"clubhub_badge_writes_total",
	"Badge rows written by the tier assigner",
	["kind"],
)

REQUEST_COUNTER = Counter(
	"clubhub_http_requests_total",
	"Total HTTP requests processed",
	["route", "method", "status"],
)

POSTGRES_UP = Gauge("clubhub_postgres_up", "Postgres availability (1=up,0=down)")


def inc_seed_run(outcome: str) -> None:
	SEED_RUNS.labels(outcome=outcome).inc()


def inc_memberships_created(count: int) -> None:
	if count > 0:
		SEED_MEMBERSHIPS.inc(count)


def observe_seed_phase(phase: str, seconds: float) -> None:
	SEED_PHASE_LATENCY.labels(phase=phase).observe(seconds)


def inc_badge_write(kind: str) -> None:
	BADGE_WRITES.labels(kind=kind).inc()


def inc_request(route: str, method: str, status: int) -> None:
	REQUEST_COUNTER.labels(route=route, method=method, status=str(status)).inc()


def mark_postgres(ok: bool) -> None:
	POSTGRES_UP.set(1 if ok else 0)
