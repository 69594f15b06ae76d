#!/usr/bin/env python
"""Randomly enrol students in clubs, then recompute club points and badges.

Runs once against the configured database (POSTGRES_URL) and exits non-zero
if any phase fails. Memberships are rolled back as a whole on failure.

Usage:
    cd backend
    python scripts/seed_memberships.py
"""

import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from clubhub.domain.seeding.jobs import main


if __name__ == "__main__":
    sys.exit(main())
