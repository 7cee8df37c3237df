# pair_indexer/core/container.py

from typing import Callable, Dict, Set, Type, TypeVar

from .logging import IndexerLogger, log_with_context, DEBUG, ERROR

T = TypeVar('T')


class IndexerContainer:
    """Holds the configuration and lazily builds the services that depend on it"""

    def __init__(self, config):
        self._config = config
        self._factories: Dict[Type, Callable[['IndexerContainer'], object]] = {}
        self._instances: Dict[Type, object] = {}
        self._resolution_stack: Set[Type] = set()

        self._logger = IndexerLogger.get_logger('core.container')
        self._logger.debug("IndexerContainer initialized")

    @property
    def config(self):
        return self._config

    def register_factory(self, interface: Type[T],
                         factory_func: Callable[['IndexerContainer'], T]) -> 'IndexerContainer':
        """Register a factory function; its result is created once and reused"""
        log_with_context(self._logger, DEBUG, "Registering factory service",
                        interface=interface.__name__,
                        factory_func=factory_func.__name__)
        self._factories[interface] = factory_func
        return self

    def is_created(self, service_type: Type) -> bool:
        return service_type in self._instances

    def get(self, service_type: Type[T]) -> T:
        service_name = service_type.__name__

        if service_type in self._instances:
            return self._instances[service_type]

        if service_type in self._resolution_stack:
            circular_path = " -> ".join(t.__name__ for t in self._resolution_stack) + f" -> {service_name}"
            log_with_context(self._logger, ERROR, "Circular dependency detected",
                            service_type=service_name,
                            circular_path=circular_path)
            raise ValueError(f"Circular dependency detected: {circular_path}")

        factory = self._factories.get(service_type)
        if factory is None:
            log_with_context(self._logger, ERROR, "Service not registered",
                            service_type=service_name)
            raise ValueError(f"Service {service_name} not registered")

        self._resolution_stack.add(service_type)
        try:
            instance = factory(self)
        except Exception as e:
            log_with_context(self._logger, ERROR, "Failed to create service instance",
                            service_type=service_name,
                            error=str(e),
                            exception_type=type(e).__name__)
            raise
        finally:
            self._resolution_stack.discard(service_type)

        self._instances[service_type] = instance
        log_with_context(self._logger, DEBUG, "Service instance created",
                        service_type=service_name,
                        instance_type=type(instance).__name__)
        return instance
