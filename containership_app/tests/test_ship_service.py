"""Tests for ship capacity management (add, remove, replace, transfer)."""

from __future__ import annotations

import pytest

from containership_app.models import Ship
from containership_app.services.results import (
    CapacityExceededError,
    ContainerNotFoundError,
    ErrorKind,
    ShipSpecError,
    WeightExceededError,
)
from containership_app.services.ship_service import (
    add_container,
    check_can_add,
    make_ship,
    remove_container,
    replace_container,
    ship_manifest,
    transfer_container,
)


class TestMakeShip:
    def test_valid(self):
        ship = make_ship("OceanKing", 5, 10000)
        assert ship.name == "OceanKing"
        assert ship.max_containers == 5
        assert ship.max_weight_kg == 10000.0
        assert ship.containers == []

    @pytest.mark.parametrize(
        "name, max_containers, max_weight",
        [
            ("", 5, 100.0),
            ("  ", 5, 100.0),
            ("A", -1, 100.0),
            ("A", 1, -0.5),
            ("A", 1, float("nan")),
            ("A", 1, float("inf")),
        ],
    )
    def test_invalid(self, name, max_containers, max_weight):
        with pytest.raises(ShipSpecError):
            make_ship(name, max_containers, max_weight)

    def test_weight_limit_enforced_on_built_ship(self, loaded_container):
        ship = make_ship("Ghost", 5, 1000.0)
        result = add_container(ship, loaded_container(9_999.0))
        assert result.kind == ErrorKind.WEIGHT_EXCEEDED
        assert ship.containers == []


class TestAddContainer:
    def test_count_limit_scenario(self, small_ship, loaded_container):
        assert add_container(small_ship, loaded_container(2000.0)).ok
        assert add_container(small_ship, loaded_container(2000.0)).ok

        third = loaded_container(500.0)
        result = add_container(small_ship, third)
        assert result.kind == ErrorKind.CAPACITY_EXCEEDED
        assert small_ship.container_count == 2
        assert third not in small_ship.containers

    def test_capacity_checked_before_weight(self, loaded_container):
        ship = Ship(name="Full", max_containers=1, max_weight_kg=100.0)
        add_container(ship, loaded_container(100.0))
        result = add_container(ship, loaded_container(5000.0))
        assert result.kind == ErrorKind.CAPACITY_EXCEEDED

    def test_weight_limit(self, small_ship, loaded_container):
        assert add_container(small_ship, loaded_container(4000.0)).ok
        result = add_container(small_ship, loaded_container(1500.0))
        assert result.kind == ErrorKind.WEIGHT_EXCEEDED
        assert result.error.limit == 5000.0
        assert result.error.value == 5500.0
        assert small_ship.container_count == 1
        with pytest.raises(WeightExceededError):
            result.raise_for_error()

    def test_exact_weight_fits(self, small_ship, loaded_container):
        assert add_container(small_ship, loaded_container(2500.0)).ok
        assert add_container(small_ship, loaded_container(2500.0)).ok
        assert small_ship.total_load_kg == 5000.0

    def test_zero_capacity_ship(self, loaded_container):
        ship = Ship(name="Dinghy", max_containers=0, max_weight_kg=1000.0)
        assert add_container(ship, loaded_container(0.0)).kind == ErrorKind.CAPACITY_EXCEEDED

    def test_invariants_hold_after_many_adds(self, sample_ship, loaded_container):
        for load in (3000, 2500, 4000, 1000, 700, 600, 200, 100):
            add_container(sample_ship, loaded_container(float(load)))
            assert sample_ship.container_count <= sample_ship.max_containers
            assert sample_ship.total_load_kg <= sample_ship.max_weight_kg

    def test_insertion_order(self, sample_ship, loaded_container):
        containers = [loaded_container(100.0) for _ in range(3)]
        for c in containers:
            add_container(sample_ship, c)
        assert sample_ship.containers == containers

    def test_check_can_add_does_not_mutate(self, small_ship, loaded_container):
        assert check_can_add(small_ship, loaded_container(100.0)).ok
        assert small_ship.containers == []


class TestRemoveContainer:
    def test_removes_all_matches(self, sample_ship, loaded_container):
        a = loaded_container(100.0)
        b = loaded_container(200.0)
        duplicate = loaded_container(300.0)
        duplicate.serial_number = a.serial_number
        sample_ship.containers.extend([a, b, duplicate])

        assert remove_container(sample_ship, a.serial_number) == 2
        assert sample_ship.containers == [b]

    def test_missing_serial_is_noop(self, sample_ship, loaded_container):
        a = loaded_container(100.0)
        add_container(sample_ship, a)
        assert remove_container(sample_ship, "KON-L-404") == 0
        assert sample_ship.containers == [a]


class TestReplaceContainer:
    def test_replace_success(self, small_ship, loaded_container):
        old = loaded_container(2000.0)
        keep = loaded_container(2000.0)
        add_container(small_ship, old)
        add_container(small_ship, keep)

        new = loaded_container(3000.0)
        assert replace_container(small_ship, old.serial_number, new).ok
        assert small_ship.containers == [keep, new]

    def test_full_ship_frees_slot_for_replacement(self, small_ship, loaded_container):
        a = loaded_container(100.0)
        add_container(small_ship, a)
        add_container(small_ship, loaded_container(100.0))
        assert replace_container(small_ship, a.serial_number, loaded_container(100.0)).ok
        assert small_ship.container_count == 2

    def test_rejected_replacement_keeps_original(self, small_ship, loaded_container):
        old = loaded_container(2000.0)
        keep = loaded_container(2000.0)
        add_container(small_ship, old)
        add_container(small_ship, keep)

        too_heavy = loaded_container(3500.0)
        result = replace_container(small_ship, old.serial_number, too_heavy)
        assert result.kind == ErrorKind.WEIGHT_EXCEEDED
        # the original is not lost when the new container is rejected
        assert small_ship.containers == [old, keep]

    def test_duplicate_serials_all_leave(self, loaded_container):
        ship = Ship(name="Twins", max_containers=3, max_weight_kg=5000.0)
        first = loaded_container(2000.0)
        second = loaded_container(2000.0)
        second.serial_number = first.serial_number
        keep = loaded_container(500.0)
        for c in (first, second, keep):
            add_container(ship, c)

        # fits only once both duplicates have left (weight 4500 + 4000 > 5000 otherwise)
        new = loaded_container(4000.0)
        assert replace_container(ship, first.serial_number, new).ok
        assert ship.containers == [keep, new]
        assert ship.find_container(first.serial_number) is None

    def test_rejected_replacement_keeps_all_duplicates(self, loaded_container):
        ship = Ship(name="Twins", max_containers=2, max_weight_kg=5000.0)
        first = loaded_container(1000.0)
        second = loaded_container(1000.0)
        second.serial_number = first.serial_number
        add_container(ship, first)
        add_container(ship, second)

        result = replace_container(ship, first.serial_number, loaded_container(6000.0))
        assert result.kind == ErrorKind.WEIGHT_EXCEEDED
        assert ship.containers == [first, second]

    def test_missing_serial_acts_as_add(self, small_ship, loaded_container):
        new = loaded_container(100.0)
        assert replace_container(small_ship, "KON-C-999", new).ok
        assert small_ship.containers == [new]

    def test_missing_serial_on_full_ship(self, small_ship, loaded_container):
        add_container(small_ship, loaded_container(100.0))
        add_container(small_ship, loaded_container(100.0))
        result = replace_container(small_ship, "KON-C-999", loaded_container(100.0))
        assert result.kind == ErrorKind.CAPACITY_EXCEEDED
        assert small_ship.container_count == 2


class TestTransferContainer:
    def test_transfer_success(self, sample_ship, small_ship, loaded_container):
        moving = loaded_container(1000.0)
        staying = loaded_container(500.0)
        add_container(sample_ship, moving)
        add_container(sample_ship, staying)

        assert transfer_container(sample_ship, small_ship, moving.serial_number).ok
        assert sample_ship.containers == [staying]
        assert small_ship.containers == [moving]

    def test_not_found(self, sample_ship, small_ship, loaded_container):
        a = loaded_container(100.0)
        b = loaded_container(100.0)
        add_container(sample_ship, a)
        add_container(small_ship, b)

        result = transfer_container(sample_ship, small_ship, "KON-G-77")
        assert result.kind == ErrorKind.NOT_FOUND
        assert result.error.serial_number == "KON-G-77"
        assert sample_ship.containers == [a]
        assert small_ship.containers == [b]
        with pytest.raises(ContainerNotFoundError):
            result.raise_for_error()

    def test_rejected_transfer_leaves_both_ships_unchanged(self, sample_ship, small_ship, loaded_container):
        add_container(small_ship, loaded_container(100.0))
        add_container(small_ship, loaded_container(100.0))
        moving = loaded_container(100.0)
        add_container(sample_ship, moving)

        result = transfer_container(sample_ship, small_ship, moving.serial_number)
        assert result.kind == ErrorKind.CAPACITY_EXCEEDED
        assert sample_ship.containers == [moving]
        assert small_ship.container_count == 2
        with pytest.raises(CapacityExceededError):
            result.raise_for_error()

    def test_rejected_by_weight(self, sample_ship, small_ship, loaded_container):
        heavy = loaded_container(6000.0)
        add_container(sample_ship, heavy)
        result = transfer_container(sample_ship, small_ship, heavy.serial_number)
        assert result.kind == ErrorKind.WEIGHT_EXCEEDED
        assert sample_ship.containers == [heavy]
        assert small_ship.containers == []

    def test_transfer_to_same_ship_is_noop(self, sample_ship, loaded_container):
        a = loaded_container(100.0)
        add_container(sample_ship, a)
        assert transfer_container(sample_ship, sample_ship, a.serial_number).ok
        assert sample_ship.containers == [a]


class TestManifest:
    def test_manifest_rows(self, sample_ship, factory):
        reefer = factory.refrigerated(5000, "Bananas", 13.3, 250, 300, 1000)
        reefer.current_load_kg = 2000.0
        gas = factory.gas(4000, 2.5, 250, 300, 900)
        add_container(sample_ship, reefer)
        add_container(sample_ship, gas)

        manifest = ship_manifest(sample_ship)
        assert manifest.name == "OceanKing"
        assert manifest.container_count == 2
        assert manifest.total_load_kg == 2000.0
        assert [row.serial_number for row in manifest.containers] == ["KON-C-1", "KON-G-1"]
        assert manifest.containers[0].product_type == "Bananas"
        assert manifest.containers[1].pressure_atm == 2.5

    def test_manifest_is_a_snapshot(self, sample_ship, loaded_container):
        c = loaded_container(100.0)
        add_container(sample_ship, c)
        manifest = ship_manifest(sample_ship)
        c.current_load_kg = 900.0
        assert manifest.containers[0].current_load_kg == 100.0
