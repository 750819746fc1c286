"""Regression tests for storable object field import and export contracts."""

from __future__ import annotations

import json

import pytest
from storable_sample_types import SampleEmpty, SampleItem, SamplePlayer

from storable.domain import (
    ExpectedFieldCountMismatchError,
    IntBox,
    MissingKeyFromImportDataError,
    NoFieldsFoundError,
    OperationNotSupportedError,
    PayloadDecodeError,
    StorableObject,
    StringBox,
    UnsupportedTypeError,
    storable_field,
)


def test_domain_objects_fields_follow_declaration_order_with_inheritance() -> None:
    """Collect inherited fields first and keep overridden fields in their original slot.

    Returns:
        None: Assertions validate field discovery order.

    Raises:
        AssertionError: Raised when field order is not deterministic.
    """

    class _Base(StorableObject):
        identifier = storable_field(IntBox)
        label = storable_field(StringBox)

    class _Derived(_Base):
        label = storable_field(StringBox, required=False)
        extra = storable_field(StringBox)

    assert [field.name for field in _Derived.storable_fields()] == ["identifier", "label", "extra"]
    assert _Derived.storable_fields()[1].required is False
    assert [field.name for field in _Base.storable_fields()] == ["identifier", "label"]


def test_domain_objects_import_from_map_sets_present_fields_and_ignores_unknown_keys() -> None:
    """Import keyed values, skip absent optional fields, and ignore extra keys.

    Returns:
        None: Assertions validate keyed import behavior.

    Raises:
        AssertionError: Raised when keyed values are misassigned.
    """

    player = SamplePlayer()

    assert player.storable_import().import_from_map({"name": "ada", "level": "4", "unknown": 1}) is True

    assert player.name == "ada"
    assert player.level == 4
    assert player.score is None
    assert player.storable_box("score").type_is_set() is False


def test_domain_objects_import_from_map_checks_required_keys_before_assigning() -> None:
    """Raise MissingKeyFromImportDataError without partially populating the object.

    Returns:
        None: Assertions validate required-key enforcement.

    Raises:
        AssertionError: Raised when partial state is written.
    """

    player = SamplePlayer()

    with pytest.raises(MissingKeyFromImportDataError, match="key=level") as error:
        player.storable_import().import_from_map({"name": "ada"})

    assert error.value.field_name == "level"
    assert player.storable_box("name").type_is_set() is False


def test_domain_objects_import_from_map_rejects_non_mapping_data() -> None:
    with pytest.raises(UnsupportedTypeError, match="requires a mapping"):
        SampleItem().storable_import().import_from_map(["x"])  # type: ignore[arg-type]


def test_domain_objects_import_from_list_requires_exact_field_count() -> None:
    """Raise ExpectedFieldCountMismatchError when positional length differs.

    Returns:
        None: Assertions validate positional length enforcement.

    Raises:
        AssertionError: Raised when mismatched rows are accepted.
    """

    with pytest.raises(ExpectedFieldCountMismatchError, match="expected=1 actual=2"):
        SampleItem().storable_import().import_from_list(["a", "b"])

    item = SampleItem()
    item.storable_import().import_from_list(["a"])
    assert item.foo == "a"


def test_domain_objects_import_from_json_dispatches_on_payload_shape() -> None:
    """Decode JSON objects as keyed data and arrays as positional data.

    Returns:
        None: Assertions validate JSON dispatch.

    Raises:
        AssertionError: Raised when JSON shape routing is incorrect.
    """

    keyed_player = SamplePlayer()
    keyed_player.storable_import().import_from_json('{"name": "ada", "level": 2, "active": true}')
    positional_player = SamplePlayer()
    positional_player.storable_import().import_from_json('["ada", 2, null, true]')

    assert keyed_player.active is True
    assert positional_player.name == "ada"
    assert positional_player.level == 2

    with pytest.raises(PayloadDecodeError):
        SamplePlayer().storable_import().import_from_json("{broken")


def test_domain_objects_type_without_fields_raises_no_fields_found() -> None:
    with pytest.raises(NoFieldsFoundError):
        SampleEmpty().storable_import().import_from_map({})
    with pytest.raises(NoFieldsFoundError):
        SampleEmpty().storable_export().export_as_map()


def test_domain_objects_empty_map_imports_when_no_field_is_required() -> None:
    """Accept an empty mapping for types whose fields are all optional."""

    class _AllOptional(StorableObject):
        note = storable_field(StringBox, required=False)

    instance = _AllOptional()

    assert instance.storable_import().import_from_map({}) is True
    assert instance.storable_export().export_as_map() == {"note": None}


def test_domain_objects_export_as_map_and_json_follow_field_order() -> None:
    """Export field values keyed by name in declaration order.

    Returns:
        None: Assertions validate exporter output.

    Raises:
        AssertionError: Raised when exported content or order differs.
    """

    player = SamplePlayer()
    player.storable_import().import_from_map({"name": "ada", "level": 9, "score": 1})

    exported_map = player.storable_export().export_as_map()

    assert list(exported_map) == ["name", "level", "score", "active"]
    assert exported_map == {"name": "ada", "level": 9, "score": 1.0, "active": None}
    assert json.loads(player.storable_export().export_as_json()) == exported_map


def test_domain_objects_binary_paths_are_unsupported() -> None:
    item = SampleItem()

    with pytest.raises(OperationNotSupportedError):
        item.storable_import().import_from_binary(b"payload")
    with pytest.raises(OperationNotSupportedError):
        item.storable_export().export_as_binary()


def test_domain_objects_attribute_assignment_uses_box_coercion() -> None:
    """Coerce values assigned through field attributes."""

    player = SamplePlayer()
    player.level = "12"

    assert player.level == 12
    with pytest.raises(UnsupportedTypeError):
        player.level = True


def test_domain_objects_equality_compares_type_and_field_values() -> None:
    first_item = SampleItem()
    second_item = SampleItem()
    first_item.foo = "same"
    second_item.foo = "same"

    assert first_item == second_item
    assert first_item != SamplePlayer()
    assert repr(first_item) == "SampleItem(foo='same')"
