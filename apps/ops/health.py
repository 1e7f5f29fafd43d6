"""Store health probe, passed explicitly into handlers that report degraded mode."""

import logging
from dataclasses import dataclass

from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections

logger = logging.getLogger("capitalcargo.ops")


@dataclass(frozen=True)
class StoreHealth:
    available: bool
    detail: str = "ok"


def check_store(using=DEFAULT_DB_ALIAS) -> StoreHealth:
    try:
        with connections[using].cursor() as cur:
            cur.execute("SELECT 1")
    except DatabaseError as exc:
        logger.warning("Database health check failed: %s", exc)
        return StoreHealth(available=False, detail=f"error: {exc}")
    return StoreHealth(available=True)
