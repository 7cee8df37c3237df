# tests/test_container.py

import pytest

from pair_indexer.core.container import IndexerContainer


class _Clock:
    pass


class _Scheduler:

    def __init__(self, clock):
        self.clock = clock


def test_factory_result_is_shared():
    container = IndexerContainer(config=None)
    container.register_factory(_Clock, lambda c: _Clock())
    container.register_factory(_Scheduler, lambda c: _Scheduler(c.get(_Clock)))

    assert not container.is_created(_Clock)
    scheduler = container.get(_Scheduler)

    assert container.is_created(_Clock)
    assert scheduler.clock is container.get(_Clock)
    assert container.get(_Scheduler) is scheduler


def test_unregistered_service():
    with pytest.raises(ValueError, match="not registered"):
        IndexerContainer(config=None).get(_Clock)


def test_circular_dependency():
    container = IndexerContainer(config=None)
    container.register_factory(_Clock, lambda c: c.get(_Scheduler))
    container.register_factory(_Scheduler, lambda c: c.get(_Clock))

    with pytest.raises(ValueError, match="Circular dependency"):
        container.get(_Clock)

    assert not container.is_created(_Clock)
