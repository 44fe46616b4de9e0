"""Tests for the collection controller."""
import io
import re

import pandas as pd
import pytest

from collection import CollectionController
from conftest import make_records, make_schema
from errors import SeedDataError
from export import Column


def kinds(ctrl):
    return [n.kind for n in ctrl.active_notifications]


class TestConstruction:
    def test_seed_is_loaded_in_order(self, controller):
        assert controller.identities == ["AST-001", "AST-002"]
        assert controller.query.page == 1
        assert controller.active_notifications == []

    def test_duplicate_seed_identity(self, schema):
        with pytest.raises(SeedDataError):
            CollectionController(schema, seed=[{"id": "AST-001", "name": "A"}, {"id": "AST-001", "name": "B"}])

    def test_malformed_seed_record(self, schema):
        with pytest.raises(SeedDataError) as exc:
            CollectionController(schema, seed=[{"id": "bad-id", "name": "A"}])
        assert isinstance(exc.value, ValueError)

    def test_records_are_copies(self, controller):
        controller.records[0]["name"] = "Tampered"
        found = controller.find("AST-001")
        found["name"] = "Tampered"
        assert controller.find("AST-001")["name"] == "MacBook"

    def test_instances_do_not_share_state(self, schema, clock):
        first = CollectionController(schema, seed=make_records(3), clock=clock)
        second = CollectionController(schema, seed=make_records(3), clock=clock)
        first.on_delete_requested("AST-100")
        first.on_delete_confirmed("AST-100")
        assert len(first) == 2
        assert len(second) == 3
        assert second.active_notifications == []


class TestQuery:
    def test_search_mac(self, controller):
        controller.on_search("mac")
        assert [r["id"] for r in controller.filtered_view] == ["AST-001"]
        assert controller.total_filtered == 1

    def test_requested_page_beyond_end_is_clamped(self, big_controller):
        big_controller.on_page_change(4)
        assert big_controller.current_page == 3
        assert [r["id"] for r in big_controller.page_items] == ["AST-110", "AST-111"]

    def test_selection_token_changes_with_the_visible_rows(self, big_controller):
        start = big_controller.selection_token
        big_controller.next_page()
        paged = big_controller.selection_token
        assert paged != start
        big_controller.on_search("device")
        assert big_controller.selection_token not in (start, paged)
        big_controller.on_search("")
        assert big_controller.selection_token == start

    def test_filter_change_resets_page(self, clock):
        ctrl = CollectionController(make_schema(), seed=make_records(30), clock=clock)
        ctrl.on_filter("department", "All Departments")
        ctrl.on_page_change(3)
        assert ctrl.current_page == 3
        ctrl.on_filter("department", "Engineering")
        assert ctrl.query.page == 1
        assert ctrl.current_page == 1
        assert all(r["department"] == "Engineering" for r in ctrl.filtered_view)

    def test_search_change_resets_page(self, big_controller):
        big_controller.on_page_change(2)
        big_controller.on_search("device")
        assert big_controller.current_page == 1

    def test_page_change_keeps_filters(self, big_controller):
        big_controller.on_filter("department", "Marketing")
        big_controller.on_page_change(2)
        assert big_controller.query.active_filters == {"department": "Marketing"}

    def test_next_and_prev_are_noops_at_edges(self, big_controller):
        big_controller.prev_page()
        assert big_controller.current_page == 1
        big_controller.next_page()
        big_controller.next_page()
        big_controller.next_page()
        assert big_controller.current_page == 3

    def test_unknown_filter_field(self, controller):
        with pytest.raises(ValueError):
            controller.on_filter("colour", "Red")

    def test_filter_options_use_schema_sentinel(self, big_controller):
        assert big_controller.filter_options("department") == ["All Departments", "Marketing", "Engineering"]

    def test_filtered_view_never_exceeds_collection(self, big_controller):
        for text in ["", "device", "1", "zzz"]:
            big_controller.on_search(text)
            assert big_controller.total_filtered <= len(big_controller)


class TestCreate:
    def test_generates_identity_and_prepends(self, controller):
        created = controller.on_create({"id": "", "name": "Headset"})
        assert re.fullmatch(r"AST-\d{3}", created["id"])
        assert controller.identities[0] == created["id"]
        assert kinds(controller) == ["success"]

    def test_supplied_identity_kept(self, controller):
        created = controller.on_create({"id": "AST-777", "name": "Dock"})
        assert created["id"] == "AST-777"

    def test_conflict_reported_not_overwritten(self, controller):
        assert controller.on_create({"id": "AST-001", "name": "Imposter"}) is None
        assert len(controller) == 2
        assert controller.find("AST-001")["name"] == "MacBook"
        assert kinds(controller) == ["error"]
        assert controller.active_notifications[0].title == "Duplicate Identity"

    def test_validation_failure(self, controller):
        assert controller.on_create({"id": "", "name": "   "}) is None
        assert controller.on_create({"id": "AST-9", "name": "Dock"}) is None
        assert controller.on_create({"id": "", "name": "Dock", "status": "Lost"}) is None
        assert len(controller) == 2
        assert kinds(controller) == ["error", "error", "error"]

    def test_whitespace_is_stripped(self, controller):
        created = controller.on_create({"id": " AST-555 ", "name": "  Dock  "})
        assert controller.find("AST-555")["name"] == "Dock"
        assert created["name"] == "Dock"

    def test_many_creates_keep_identities_unique(self, controller):
        for n in range(40):
            controller.on_create({"id": "", "name": f"Device {n}"})
        assert len(controller) == 42
        assert len(set(controller.identities)) == 42


class TestUpdate:
    def test_position_preserved(self, big_controller):
        before = big_controller.identities
        assert big_controller.on_update("AST-105", {"name": "Renamed", "department": "HR"}) is True
        assert big_controller.identities == before
        assert big_controller.find("AST-105")["name"] == "Renamed"
        assert kinds(big_controller) == ["success"]

    def test_identity_is_not_regenerated(self, controller):
        controller.on_update("AST-002", {"id": "AST-900", "name": "Dell Monitor"})
        assert controller.identities == ["AST-001", "AST-002"]

    def test_missing_identity(self, controller):
        assert controller.on_update("AST-404", {"name": "Ghost"}) is False
        assert len(controller) == 2
        assert kinds(controller) == ["error"]

    def test_invalid_update_leaves_record(self, controller):
        assert controller.on_update("AST-001", {"name": ""}) is False
        assert controller.find("AST-001")["name"] == "MacBook"


class TestDelete:
    def test_requires_confirmation(self, controller):
        assert controller.on_delete_requested("AST-001") is True
        assert controller.pending_delete == "AST-001"
        assert len(controller) == 2
        assert controller.active_notifications == []
        assert controller.on_delete_confirmed("AST-001") is True
        assert controller.identities == ["AST-002"]
        assert controller.pending_delete is None
        assert kinds(controller) == ["success"]

    def test_confirm_without_request(self, controller):
        assert controller.on_delete_confirmed("AST-001") is False
        assert len(controller) == 2
        assert kinds(controller) == ["warning"]

    def test_cancel(self, controller):
        controller.on_delete_requested("AST-001")
        controller.cancel_delete()
        assert controller.on_delete_confirmed("AST-001") is False
        assert len(controller) == 2

    def test_unknown_identity_is_reported(self, controller):
        before = controller.records
        assert controller.on_delete_requested("AST-999") is False
        assert controller.on_delete_confirmed("AST-999") is False
        assert controller.records == before
        assert "success" not in kinds(controller)
        assert kinds(controller)[0] == "error"

    def test_second_delete_is_noop(self, controller):
        controller.on_delete_requested("AST-001")
        controller.on_delete_confirmed("AST-001")
        after_first = controller.records
        controller.on_delete_requested("AST-001")
        controller.on_delete_confirmed("AST-001")
        assert controller.records == after_first

    def test_emptied_last_page_is_clamped(self, schema, clock):
        ctrl = CollectionController(schema, seed=make_records(11), clock=clock)
        ctrl.on_page_change(3)
        last = ctrl.page_items[0]["id"]
        ctrl.on_delete_requested(last)
        ctrl.on_delete_confirmed(last)
        assert ctrl.query.page == 2
        assert ctrl.total_pages == 2
        assert len(ctrl.page_items) == 5


class TestExport:
    def test_covers_filtered_view_not_page(self, big_controller):
        big_controller.on_filter("department", "Engineering")
        big_controller.on_page_change(2)
        result = big_controller.on_export()
        parsed = pd.read_csv(io.StringIO(result.payload), keep_default_na=False)
        assert len(parsed) == big_controller.total_filtered == 6
        assert parsed["Asset ID"].tolist() == [r["id"] for r in big_controller.filtered_view]
        assert result.filename == "assets_2026-10-18.csv"
        assert kinds(big_controller) == ["success"]

    def test_export_failure_is_reported(self, clock):
        schema = make_schema()
        schema.columns = [Column("Broken", lambda r: r["nope"])]
        ctrl = CollectionController(schema, seed=make_records(2), clock=clock)
        assert ctrl.on_export() is None
        assert kinds(ctrl) == ["error"]
        assert len(ctrl) == 2


class TestNotifications:
    def test_expire_with_clock(self, controller, clock):
        controller.on_create({"id": "", "name": "Dock"})
        clock.advance(4)
        assert controller.active_notifications == []

    def test_dismiss(self, controller):
        controller.on_create({"id": "", "name": "Dock"})
        note = controller.active_notifications[0]
        assert controller.dismiss(note.id) is True
        assert controller.active_notifications == []
