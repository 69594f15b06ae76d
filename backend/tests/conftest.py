import copy
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Ensure backend package is importable when tests run from repo root
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
	sys.path.insert(0, str(BACKEND_ROOT))

from clubhub.domain.badges.models import BadgeType
from clubhub.domain.seeding.models import ClubStanding, StudentStanding
from clubhub.infra import postgres
from clubhub.settings import Settings


class ScriptedRandom:
	"""Random source replaying a fixed list of draws."""

	def __init__(self, draws: Iterable[float]) -> None:
		self._draws = list(draws)
		self.consumed = 0

	def random(self) -> float:
		if self.consumed >= len(self._draws):
			raise AssertionError("scripted random source exhausted")
		value = self._draws[self.consumed]
		self.consumed += 1
		return value


class FakeTransaction:
	def __init__(self, store: "FakeSeedRepository") -> None:
		self._store = store
		self._snapshot: Optional[dict] = None
		self.state = "new"

	async def start(self) -> None:
		if self._store.fail_start:
			raise OSError("connection reset during BEGIN")
		self._snapshot = self._store.snapshot()
		self.state = "started"

	async def commit(self) -> None:
		if self._store.fail_commit:
			raise RuntimeError("commit failed")
		self._snapshot = None
		self.state = "committed"

	async def rollback(self) -> None:
		assert self._snapshot is not None
		self._store.restore(self._snapshot)
		self.state = "rolled_back"


class FakeSeedRepository:
	"""In-memory stand-in for SeedRepository with snapshot-based transactions."""

	def __init__(
		self,
		*,
		students: Dict[int, int],
		clubs: Dict[int, int],
		admins: Iterable[int] = (),
		student_badges: Iterable[str] = ("Bronze", "Silver", "Gold"),
	) -> None:
		self.users: Dict[int, dict] = {uid: {"total_points": pts, "role": "student"} for uid, pts in students.items()}
		for uid in admins:
			self.users[uid] = {"total_points": 0, "role": "admin"}
		self.clubs: Dict[int, dict] = {
			cid: {"current_members": members, "total_points": 0, "badge": "none"} for cid, members in clubs.items()
		}
		self.memberships: List[tuple] = []
		self.badges: Dict[int, tuple] = {}
		for idx, name in enumerate(student_badges, start=1):
			self.badges[idx] = (name, BadgeType.STUDENT.value)
		self.badges[100] = ("Gold", BadgeType.CLUB.value)
		self.user_badges: List[tuple] = []
		self.writes: List[tuple] = []
		self.transactions: List[FakeTransaction] = []
		self.fail_insert_after: Optional[int] = None
		self.fail_on: set = set()
		self.fail_start = False
		self.fail_commit = False

	# --- helpers ----------------------------------------------------------

	def snapshot(self) -> dict:
		return copy.deepcopy(
			{"users": self.users, "clubs": self.clubs, "memberships": self.memberships, "user_badges": self.user_badges}
		)

	def restore(self, snap: dict) -> None:
		self.users = snap["users"]
		self.clubs = snap["clubs"]
		self.memberships = snap["memberships"]
		self.user_badges = snap["user_badges"]

	def _maybe_fail(self, name: str) -> None:
		if name in self.fail_on:
			raise RuntimeError(f"{name} failed")

	def clubs_of(self, user_id: int) -> List[int]:
		return [club_id for uid, club_id, _ in self.memberships if uid == user_id]

	def members_of(self, club_id: int) -> List[int]:
		return [uid for uid, cid, _ in self.memberships if cid == club_id]

	# --- SeedRepository interface -----------------------------------------

	def transaction(self) -> FakeTransaction:
		tx = FakeTransaction(self)
		self.transactions.append(tx)
		return tx

	async def fetch_club_member_counts(self) -> Dict[int, int]:
		self._maybe_fail("fetch_club_member_counts")
		return {cid: club["current_members"] for cid, club in self.clubs.items()}

	async def insert_membership(self, user_id: int, club_id: int, points_earned: int) -> None:
		self._maybe_fail("insert_membership")
		if self.fail_insert_after is not None and len(self.memberships) >= self.fail_insert_after:
			raise RuntimeError("insert failed")
		self.memberships.append((user_id, club_id, points_earned))
		self.writes.append(("insert_membership", user_id, club_id))

	async def add_student_points(self, user_id: int, points: int) -> None:
		self.users[user_id]["total_points"] += points
		self.writes.append(("add_student_points", user_id, points))

	async def increment_club_members(self, club_id: int) -> None:
		self.clubs[club_id]["current_members"] += 1
		self.writes.append(("increment_club_members", club_id))

	async def fetch_club_ids(self) -> List[int]:
		return sorted(self.clubs)

	async def sum_member_points(self, club_id: int) -> int:
		self._maybe_fail("sum_member_points")
		return sum(self.users[uid]["total_points"] for uid in self.members_of(club_id))

	async def set_club_points(self, club_id: int, total_points: int) -> None:
		self.clubs[club_id]["total_points"] = total_points
		self.writes.append(("set_club_points", club_id, total_points))

	async def fetch_club_standings(self) -> List[ClubStanding]:
		self._maybe_fail("fetch_club_standings")
		return [
			ClubStanding(club_id=cid, total_points=club["total_points"], badge=club["badge"])
			for cid, club in sorted(self.clubs.items())
		]

	async def set_club_badge(self, club_id: int, badge: str) -> None:
		self.clubs[club_id]["badge"] = badge
		self.writes.append(("set_club_badge", club_id, badge))

	async def fetch_badge_ids_by_name(self, badge_type: BadgeType) -> Dict[str, int]:
		return {name.lower(): bid for bid, (name, kind) in self.badges.items() if kind == badge_type.value}

	async def fetch_students(self) -> List[StudentStanding]:
		return [
			StudentStanding(user_id=uid, total_points=user["total_points"])
			for uid, user in sorted(self.users.items())
			if user["role"] == "student"
		]

	async def has_user_badge(self, user_id: int, badge_id: int) -> bool:
		return (user_id, badge_id) in self.user_badges

	async def insert_user_badge(self, user_id: int, badge_id: int) -> None:
		self.user_badges.append((user_id, badge_id))
		self.writes.append(("insert_user_badge", user_id, badge_id))


def make_settings(**overrides) -> Settings:
	values = {
		"seed_min_student_id": 2,
		"seed_max_student_id": 101,
		"seed_num_clubs": 10,
		"seed_club_capacity": 30,
		"seed_points_per_club": 10,
		"seed_random_seed": None,
	}
	values.update(overrides)
	return Settings(**values)


@pytest.fixture
def scripted_random():
	return ScriptedRandom


@pytest.fixture
def fake_repo_factory():
	return FakeSeedRepository


@pytest.fixture
def seed_settings():
	return make_settings


@pytest.fixture(autouse=True)
def patch_postgres(monkeypatch):
	async def _noop():
		return None

	monkeypatch.setattr(postgres, "init_pool", _noop)
	monkeypatch.setattr(postgres, "close_pool", _noop)


@pytest_asyncio.fixture
async def api_client():
	from clubhub.main import app

	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://testserver") as client:
		yield client
