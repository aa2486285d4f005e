"""Lazily connected Supabase client shared by the repositories."""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from ramadan_tracker.errors import StorageUnavailableError

UNIQUE_VIOLATION = "23505"


class UniqueViolationError(StorageUnavailableError):
    """A write was rejected by a unique constraint."""


@dataclass
class SupabaseConnection:
    """Owns one Supabase client, created on first use.

    Concurrent first callers block on the lock and receive the same client,
    so the process connects once.
    """

    url: str
    service_key: str
    factory: Callable[[str, str], Client] = create_client
    _client: Client | None = field(default=None, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    @property
    def client(self) -> Client:
        """Return the shared client, connecting if needed."""
        if self._client is not None:
            return self._client
        with self._lock:
            if self._client is None:
                try:
                    self._client = self.factory(self.url, self.service_key)
                except Exception as exc:
                    raise StorageUnavailableError(
                        "Failed to connect to Supabase"
                    ) from exc
        return self._client

    @property
    def is_connected(self) -> bool:
        """Return True once a client has been created."""
        return self._client is not None

    def table(self, name: str) -> Any:
        """Return a query builder for ``name``."""
        return self.client.table(name)

    def reset(self) -> None:
        """Drop the cached client so the next call reconnects."""
        with self._lock:
            self._client = None


def execute_query(query: Any, action: str) -> Any:
    """Execute a query builder, translating client failures."""
    try:
        return query.execute()
    except APIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            raise UniqueViolationError(f"Conflict while trying to {action}") from exc
        raise StorageUnavailableError(f"Failed to {action}") from exc
    except httpx.HTTPError as exc:
        raise StorageUnavailableError(f"Failed to {action}") from exc
