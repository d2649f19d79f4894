"""Tests for dependency state tracking."""

import pytest

from hello_api.stores.state import Dependency, DependencyRegistry, DependencyState


def test_new_dependency_is_unconnected() -> None:
    dep = Dependency(name="redis")
    assert dep.state is DependencyState.UNCONNECTED
    assert dep.error is None
    assert not dep.is_ready


def test_transition_notifies_only_matching_observers() -> None:
    dep = Dependency(name="redis")
    seen: list[tuple[str, str | None]] = []
    dep.on(DependencyState.READY, lambda d, e: seen.append(("ready", None)))
    dep.on(DependencyState.FAILED, lambda d, e: seen.append(("failed", str(e))))

    dep.transition(DependencyState.CONNECTING)
    assert seen == []

    dep.transition(DependencyState.FAILED, ConnectionError("refused"))
    assert seen == [("failed", "refused")]
    assert dep.state is DependencyState.FAILED
    assert dep.error == "refused"


def test_ready_clears_previous_error() -> None:
    dep = Dependency(name="mongo")
    dep.transition(DependencyState.FAILED, RuntimeError("boom"))
    dep.transition(DependencyState.READY)
    assert dep.is_ready
    assert dep.error is None


def test_registry_rejects_duplicate_names() -> None:
    registry = DependencyRegistry()
    registry.register("redis")
    with pytest.raises(ValueError, match="already registered"):
        registry.register("redis")
    assert len(registry) == 1


def test_registry_all_ready() -> None:
    registry = DependencyRegistry()
    assert not registry.all_ready

    cache = registry.register("redis")
    documents = registry.register("mongo")
    cache.transition(DependencyState.READY)
    assert not registry.all_ready

    documents.transition(DependencyState.READY)
    assert registry.all_ready


def test_registry_snapshot_keeps_registration_order() -> None:
    registry = DependencyRegistry()
    registry.register("redis").transition(DependencyState.CONNECTING)
    registry.register("mongo")
    assert registry.snapshot() == {"redis": "connecting", "mongo": "unconnected"}
    assert registry.get("mongo").name == "mongo"
