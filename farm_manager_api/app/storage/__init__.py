"""
Storage backends.

Both variants implement :class:`~.base.StorageBackend` so entity
services never know which one is active:

* :class:`~.remote.RemoteBackend` talks to the hosted record store.
* :class:`~.mock.MockBackend` keeps an in-memory list seeded from
  fixture data and simulates network latency.
"""

from .base import StorageBackend, parse_id
from .mock import MockBackend, load_seed
from .remote import RemoteBackend

__all__ = ["StorageBackend", "MockBackend", "RemoteBackend", "load_seed", "parse_id"]
