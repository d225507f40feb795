"""
Unit tests for response parsing utilities.
"""

from utils.response_parser import bulk_failures


def test_bulk_failures_none_when_no_errors():
    assert bulk_failures({"errors": False, "items": [{"index": {"_id": "1", "status": 201}}]}) == []


def test_bulk_failures_empty_response():
    assert bulk_failures({}) == []


def test_bulk_failures_collects_failed_items():
    response = {
        "errors": True,
        "items": [
            {"index": {"_id": "1", "status": 201}},
            {"delete": {"_id": "2", "status": 404, "error": {"type": "not_found"}}},
            {"update": {"_id": "3", "status": 400, "error": {"type": "mapper_parsing_exception"}}},
        ],
    }

    failures = bulk_failures(response)

    assert [f["id"] for f in failures] == ["2", "3"]
    assert failures[1]["status"] == 400
    assert failures[1]["error"]["type"] == "mapper_parsing_exception"
