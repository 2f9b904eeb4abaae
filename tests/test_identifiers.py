from __future__ import annotations

from hr_admin.common.identifiers import format_id, next_id_last_element, next_id_max_suffix, parse_suffix


def test_max_suffix_uses_highest_not_count():
    assert next_id_max_suffix("EMP", ["EMP001", "EMP003"]) == "EMP004"


def test_max_suffix_ignores_order_and_foreign_ids():
    assert next_id_max_suffix("REQ", ["REQ007", "REQ002", "TRF099", "REQabc"]) == "REQ008"


def test_empty_list_starts_sequence():
    assert next_id_max_suffix("TRF", []) == "TRF001"
    assert next_id_last_element("REQ", []) == "REQ001"


def test_last_element_increments_last_entry():
    assert next_id_last_element("REQ", ["REQ001", "REQ005"]) == "REQ006"


def test_last_element_can_collide_when_out_of_order():
    ids = ["REQ001", "REQ003", "REQ002"]
    # REQ003 already exists; the last-element rule hands it out again.
    assert next_id_last_element("REQ", ids) == "REQ003"
    assert next_id_max_suffix("REQ", ids) == "REQ004"


def test_padding_grows_past_three_digits():
    assert format_id("EMP", 1000) == "EMP1000"
    assert next_id_max_suffix("EMP", ["EMP999"]) == "EMP1000"


def test_parse_suffix():
    assert parse_suffix("EMP", "EMP042") == 42
    assert parse_suffix("EMP", "REQ042") is None
    assert parse_suffix("EMP", "EMP") is None
