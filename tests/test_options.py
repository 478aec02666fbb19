"""Tests for the options snapshot and its change notifications."""

import dataclasses

import pytest

from pwordgen.utils.options import OptionsModel, PasswordOptions, default_options


def test_default_options_values():
    opts = default_options()
    assert opts.length == 16
    assert opts.include_upper and opts.include_lower
    assert opts.include_digits and opts.include_symbols
    assert opts.custom_chars == ""
    assert opts.exclude_similar is False
    assert opts.exclude == ""
    assert opts.require_each_selected_class is True


def test_snapshots_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        default_options().length = 3


def test_update_publishes_new_snapshot_once():
    model = OptionsModel()
    seen = []
    model.subscribe(seen.append)

    model.update(length=20, include_symbols=False)

    assert len(seen) == 1
    assert seen[0].length == 20
    assert seen[0].include_symbols is False
    assert model.snapshot is seen[0]


def test_update_does_not_validate_range():
    model = OptionsModel()
    model.update(length=0)
    assert model.snapshot.length == 0


def test_unchanged_update_is_silent():
    model = OptionsModel()
    seen = []
    model.subscribe(seen.append)
    model.update(length=16)
    assert seen == []


def test_unknown_field_raises_type_error():
    model = OptionsModel()
    with pytest.raises(TypeError):
        model.update(colour="blue")


def test_batch_notifies_once_with_final_snapshot():
    model = OptionsModel()
    seen = []
    model.subscribe(seen.append)

    with model.batch():
        model.update(length=30)
        model.update(include_upper=False)
        with model.batch():
            model.update(exclude="abc")
        assert seen == []

    assert len(seen) == 1
    assert seen[0] == PasswordOptions(length=30, include_upper=False, exclude="abc")


def test_batch_that_ends_where_it_started_is_silent():
    model = OptionsModel()
    seen = []
    model.subscribe(seen.append)
    with model.batch():
        model.update(length=30)
        model.update(length=16)
    assert seen == []


def test_unsubscribe_stops_notifications():
    model = OptionsModel()
    seen = []
    unsubscribe = model.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    model.update(length=8)
    assert seen == []


def test_subscribers_called_in_order():
    model = OptionsModel()
    order = []
    model.subscribe(lambda _s: order.append("a"))
    model.subscribe(lambda _s: order.append("b"))
    model.replace(PasswordOptions(length=12))
    assert order == ["a", "b"]


def test_batch_that_raises_rolls_back_silently():
    model = OptionsModel()
    seen = []
    model.subscribe(seen.append)

    with pytest.raises(RuntimeError):
        with model.batch():
            model.update(length=30)
            raise RuntimeError("interrupted")

    assert seen == []
    assert model.snapshot == default_options()


def test_failed_inner_batch_only_undoes_its_own_changes():
    model = OptionsModel()
    seen = []
    model.subscribe(seen.append)

    with model.batch():
        model.update(length=30)
        try:
            with model.batch():
                model.update(exclude="abc")
                raise ValueError("bad input")
        except ValueError:
            pass

    assert len(seen) == 1
    assert seen[0] == PasswordOptions(length=30)
