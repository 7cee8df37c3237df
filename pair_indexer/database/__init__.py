# pair_indexer/database/__init__.py

from .connection import DatabaseManager
from .store import EntityStore, InMemoryEntityStore
from .repository import SqlEntityStore
from .types import PeriodType
