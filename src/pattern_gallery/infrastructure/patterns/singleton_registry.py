"""Registry that owns one lazily created instance per class."""
import threading
from typing import Any, ClassVar, Dict, Optional, Type, TypeVar, cast

from pattern_gallery.infrastructure.logging.logger import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


class SingletonRegistry:
    """
    Holds the process-wide instance of every class requested through it.

    The registry itself is a singleton: use ``SingletonRegistry.get_instance()``.
    Instance creation is guarded by a re-entrant lock so a constructor may
    itself ask the registry for another singleton.
    """

    _instance: ClassVar[Optional["SingletonRegistry"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._instances: Dict[Type, Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the registry, creating it on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, constructing it on first request.

        Constructor arguments are only used by the call that creates the instance.
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    self._instances[singleton_class] = instance
                    logger.debug("Singleton created", singleton=singleton_class.__name__)
        return cast(T, instance)

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Register an existing instance, replacing any previous one."""
        with self._lock:
            self._instances[singleton_class] = instance
            logger.debug("Singleton registered", singleton=singleton_class.__name__)

    def has(self, singleton_class: Type) -> bool:
        """Check if an instance of the class already exists."""
        with self._lock:
            return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type] = None) -> None:
        """Drop one instance, or all of them. Intended for test isolation."""
        with self._lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
