"""
In-memory record stores standing in for the practice-management backend.

Each screen reads and writes its records through a repository looked up by
name. Which class backs a name (and which callable seeds it) comes from
``settings.PRACTICE_REPOSITORIES``, so a real API client can replace the
in-memory store without touching views or services.
"""

import threading

import structlog
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

logger = structlog.get_logger(__name__)

DEFAULT_BACKEND = "core.store.InMemoryRepository"


class RecordNotFound(LookupError):
    def __init__(self, name, record_id):
        super().__init__(f"{name} {record_id!r} not found")
        self.name = name
        self.record_id = record_id


class InMemoryRepository:
    """Keyed collection of records; insertion order is listing order."""

    def __init__(self, seed=None, key="id", name="record"):
        self._seed = seed
        self._key = key
        self.name = name
        self._lock = threading.RLock()
        self._records = {}
        self.reset()

    def reset(self):
        with self._lock:
            rows = self._seed() if self._seed else []
            self._records = {getattr(row, self._key): row for row in rows}

    def get(self, record_id):
        try:
            return self._records[record_id]
        except KeyError:
            raise RecordNotFound(self.name, record_id) from None

    def find(self, record_id, default=None):
        return self._records.get(record_id, default)

    def all(self):
        return list(self._records.values())

    def save(self, record):
        with self._lock:
            self._records[getattr(record, self._key)] = record
        return record

    def delete(self, record_id):
        with self._lock:
            try:
                return self._records.pop(record_id)
            except KeyError:
                raise RecordNotFound(self.name, record_id) from None

    def __contains__(self, record_id):
        return record_id in self._records

    def __len__(self):
        return len(self._records)


_repositories = {}
_registry_lock = threading.Lock()


def get_repository(name):
    """Return the repository configured under ``name``, building it on first use."""
    with _registry_lock:
        if name not in _repositories:
            _repositories[name] = _build(name)
        return _repositories[name]


def reset_repositories():
    with _registry_lock:
        _repositories.clear()


def _build(name):
    conf = getattr(settings, "PRACTICE_REPOSITORIES", {}).get(name)
    if conf is None:
        raise ImproperlyConfigured(f"No repository configured for {name!r}")
    backend = import_string(conf.get("BACKEND", DEFAULT_BACKEND))
    options = dict(conf.get("OPTIONS", {}))
    if conf.get("SEED"):
        options["seed"] = import_string(conf["SEED"])
    options.setdefault("name", name)
    repo = backend(**options)
    logger.debug("repository ready", repository=name, backend=backend.__name__, records=len(repo))
    return repo
