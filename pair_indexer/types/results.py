# pair_indexer/types/results.py

from typing import Optional, Dict, Any

import msgspec
from msgspec import Struct


class HandlerResult(Struct, tag_field="status", kw_only=True):
    handler: str
    log_index: Optional[int] = None

    @property
    def status(self) -> str:
        return self.__struct_config__.tag

    @property
    def is_ok(self) -> bool:
        return False


class Ok(HandlerResult, tag="ok"):
    @property
    def is_ok(self) -> bool:
        return True


class SkippedMissingDependency(HandlerResult, tag="skipped_missing_dependency"):
    entity_kind: str
    key: str


class SkippedBootstrap(HandlerResult, tag="skipped_bootstrap"):
    pass


class SkippedDuplicate(HandlerResult, tag="skipped_duplicate"):
    tx_hash: str


class ProcessingStats(Struct):
    processed: int = 0
    ok: int = 0
    skipped_missing_dependency: int = 0
    skipped_bootstrap: int = 0
    skipped_duplicate: int = 0

    def record(self, result: HandlerResult) -> None:
        self.processed += 1
        setattr(self, result.status, getattr(self, result.status) + 1)

    def to_dict(self) -> Dict[str, Any]:
        return msgspec.structs.asdict(self)
