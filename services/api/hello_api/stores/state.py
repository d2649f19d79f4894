"""Connection state tracking for external dependencies.

Each dependency moves through:

    unconnected -> connecting -> ready | failed

Observers registered with ``Dependency.on`` run synchronously on every
transition into the state they watch.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class DependencyState(str, Enum):
    """Connection state of an external dependency."""

    UNCONNECTED = "unconnected"
    CONNECTING = "connecting"
    READY = "ready"
    FAILED = "failed"


Observer = Callable[["Dependency", BaseException | None], None]


@dataclass
class Dependency:
    """A named external dependency and its current connection state."""

    name: str
    state: DependencyState = DependencyState.UNCONNECTED
    error: str | None = None
    _observers: dict[DependencyState, list[Observer]] = field(default_factory=dict, repr=False)

    def on(self, state: DependencyState, observer: Observer) -> None:
        """Register an observer for transitions into ``state``."""
        self._observers.setdefault(state, []).append(observer)

    def transition(self, state: DependencyState, error: BaseException | None = None) -> None:
        """Move to ``state`` and notify its observers.

        Args:
            state: New state.
            error: Exception that caused a ``FAILED`` transition, if any.
        """
        self.state = state
        self.error = str(error) if error is not None else None
        for observer in self._observers.get(state, []):
            observer(self, error)

    @property
    def is_ready(self) -> bool:
        return self.state is DependencyState.READY


class DependencyRegistry:
    """Process-wide set of dependencies, at most one per name."""

    def __init__(self) -> None:
        self._dependencies: dict[str, Dependency] = {}

    def register(self, name: str) -> Dependency:
        """Create and register a dependency.

        Raises:
            ValueError: If ``name`` is already registered.
        """
        if name in self._dependencies:
            raise ValueError(f"Dependency {name!r} is already registered")
        dependency = Dependency(name=name)
        self._dependencies[name] = dependency
        return dependency

    def get(self, name: str) -> Dependency:
        return self._dependencies[name]

    def __iter__(self):
        return iter(self._dependencies.values())

    def __len__(self) -> int:
        return len(self._dependencies)

    @property
    def all_ready(self) -> bool:
        """True when at least one dependency exists and every one is ready."""
        return bool(self._dependencies) and all(d.is_ready for d in self)

    def snapshot(self) -> dict[str, str]:
        """Name -> state value for every registered dependency."""
        return {d.name: d.state.value for d in self}
