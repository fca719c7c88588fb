"""
Unit tests for QueryCriteria and the composed match predicate.
"""

from __future__ import annotations

import itertools

import pytest

from assetregistry.config.policy import CPU, OperatingSystem
from assetregistry.core.errors import AssetValidationError
from assetregistry.core.query import QueryCriteria, build_predicate


def test_default_criteria_is_empty():
    criteria = QueryCriteria()
    assert criteria.is_empty()
    assert criteria.describe() == "<empty>"


@pytest.mark.parametrize(
    "kwargs",
    [{"os": "linux"}, {"cpu": CPU.AMD}, {"cores": 4}, {"memory": 8}],
)
def test_any_field_makes_criteria_non_empty(kwargs):
    assert not QueryCriteria.build(**kwargs).is_empty()


def test_build_coerces_enum_names():
    criteria = QueryCriteria.build(os="Windows", cpu="intel")
    assert criteria.os is OperatingSystem.WINDOWS
    assert criteria.cpu is CPU.INTEL


def test_unknown_enum_name_rejected():
    with pytest.raises(AssetValidationError):
        QueryCriteria.build(cpu="arm")


def test_criteria_are_value_objects():
    assert QueryCriteria.build(cores=4, os="linux") == QueryCriteria(os=OperatingSystem.LINUX, cores=4)
    assert len({QueryCriteria.build(cores=4), QueryCriteria.build(cores=4)}) == 1


def test_empty_criteria_match_nothing(make_asset):
    asset = make_asset()
    assert not QueryCriteria().matches(asset)
    assert not build_predicate(None)(asset)


def test_absent_fields_do_not_constrain(make_asset):
    asset = make_asset(OperatingSystem.MACOS, CPU.INTEL, 12, 32)
    assert QueryCriteria.build(os="macos").matches(asset)
    assert QueryCriteria.build(cores=12).matches(asset)
    assert QueryCriteria.build(cpu="intel", memory=32).matches(asset)
    assert not QueryCriteria.build(cpu="intel", memory=64).matches(asset)


@pytest.mark.parametrize(
    "os, cpu, cores, memory",
    list(itertools.product(OperatingSystem, CPU, [12, 24], [32])),
)
def test_fully_specified_criteria_match_iff_all_equal(make_asset, os, cpu, cores, memory):
    target = make_asset(OperatingSystem.WINDOWS, CPU.AMD, 12, 32)
    criteria = QueryCriteria(os=os, cpu=cpu, cores=cores, memory=memory)

    expected = (os, cpu, cores, memory) == (target.os, target.cpu, target.cores, target.memory)
    assert build_predicate(criteria)(target) is expected


def test_describe_lists_present_fields_only():
    text = QueryCriteria.build(os="linux", memory=64).describe()
    assert "os=" in text
    assert "memory=64" in text
    assert "cpu" not in text
    assert "cores" not in text


@pytest.mark.parametrize("field", ["cores", "memory"])
@pytest.mark.parametrize("value", [True, False, "12", 12.0, 0, -4])
def test_invalid_numeric_fields_rejected(field, value):
    with pytest.raises(AssetValidationError):
        QueryCriteria.build(**{field: value})


def test_bool_cores_cannot_match_single_core_asset(inventory, make_asset):
    inventory.add_asset(make_asset(cores=1))
    with pytest.raises(AssetValidationError):
        inventory.search(QueryCriteria.build(cores=True))
    assert len(inventory.search(QueryCriteria.build(cores=1))) == 1
