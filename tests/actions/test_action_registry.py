import pytest

from satchel.actions import (
    ActionKind,
    ActionRegistry,
    InventoryAction,
    OpenAction,
    ReOpenAction,
    UnknownActionError,
    create_default_registry,
)


@pytest.mark.parametrize("kind", list(ActionKind))
def test_lazy_returns_identical_descriptor(kind: ActionKind) -> None:
    registry = create_default_registry()

    first = registry.lazy(kind)
    second = registry.lazy(kind)

    assert first is second
    assert first.kind is kind


def test_get_is_the_same_lookup_as_lazy() -> None:
    registry = create_default_registry()

    assert registry.get(ActionKind.RE_OPEN) is registry.lazy(ActionKind.RE_OPEN)


def test_descriptor_is_built_on_first_lookup_only() -> None:
    built: list[InventoryAction] = []

    def factory() -> InventoryAction:
        action = ReOpenAction()
        built.append(action)
        return action

    registry = ActionRegistry()
    registry.register(ActionKind.RE_OPEN, factory)
    assert built == []

    registry.lazy(ActionKind.RE_OPEN)
    registry.lazy(ActionKind.RE_OPEN)

    assert len(built) == 1


def test_separate_registries_do_not_share_descriptors() -> None:
    first = create_default_registry().lazy(ActionKind.OPEN)
    second = create_default_registry().lazy(ActionKind.OPEN)

    assert first is not second


def test_unknown_kind_raises() -> None:
    registry = ActionRegistry()

    with pytest.raises(UnknownActionError):
        registry.lazy(ActionKind.CLOSE)


def test_unknown_kind_error_is_a_key_error() -> None:
    with pytest.raises(KeyError):
        ActionRegistry().lazy(ActionKind.OPEN)


def test_duplicate_registration_raises() -> None:
    registry = create_default_registry()

    with pytest.raises(ValueError, match="already registered"):
        registry.register(ActionKind.RE_OPEN, ReOpenAction)


def test_kinds_follow_declaration_order() -> None:
    registry = ActionRegistry()
    registry.register(ActionKind.RE_OPEN, ReOpenAction)
    registry.register(ActionKind.OPEN, OpenAction)

    assert registry.kinds() == [ActionKind.OPEN, ActionKind.RE_OPEN]
    assert ActionKind.RE_OPEN in registry
    assert ActionKind.CLOSE not in registry


def test_default_registry_covers_every_kind() -> None:
    assert create_default_registry().kinds() == list(ActionKind)
