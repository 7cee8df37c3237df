# pair_indexer/database/base.py

from datetime import datetime, timezone
from typing import Type

from sqlalchemy import Column, DateTime, text
from sqlalchemy.orm import declarative_base, declarative_mixin
import msgspec

from ..types import Entity


ModelBase = declarative_base()


@declarative_mixin
class TimestampMixin:
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text('CURRENT_TIMESTAMP')
    )

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text('CURRENT_TIMESTAMP'),
        onupdate=lambda: datetime.now(timezone.utc)
    )


class DBEntityModel(ModelBase, TimestampMixin):
    """Table row mirroring one msgspec entity; column names match struct attributes"""
    __abstract__ = True

    struct_type: Type[Entity] = None

    @classmethod
    def from_msgspec(cls, msgspec_obj: msgspec.Struct, **overrides):
        data = msgspec.structs.asdict(msgspec_obj)
        data.update(overrides)
        valid_columns = {col.name for col in cls.__table__.columns}
        filtered_data = {k: v for k, v in data.items() if k in valid_columns}

        return cls(**filtered_data)

    def to_msgspec(self) -> Entity:
        field_names = self.struct_type.__struct_fields__
        data = {name: getattr(self, name) for name in field_names}
        return self.struct_type(**data)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"
