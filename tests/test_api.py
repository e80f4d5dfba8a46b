"""
HTTP API endpoints.
"""
import pytest
import sys
import os

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from fastapi.testclient import TestClient

from packer_tool.api.main import app

EXAMPLE_TEXT = '81 : (1,53.38,€45) (2,88.62,€98) (3,78.48,€3) (4,72.30,€76)\n8 : (1,15.3,€34)\n'


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


def test_root(client):
    assert client.get("/").json()["status"] == "online"


def test_pack(client):
    response = client.post("/pack", json={"text": EXAMPLE_TEXT})
    assert response.status_code == 200
    assert response.json() == {"result": "4\n-", "lines": 2}


def test_pack_invalid_line(client):
    response = client.post("/pack", json={"text": "wrong format"})
    assert response.status_code == 422
    assert "wrong format" in response.json()["detail"]


def test_line_returns_trace(client):
    response = client.post("/line", json={"line": "10 : (1,4,€9) (2,6,€8)"})
    assert response.status_code == 200
    body = response.json()
    assert body["token"] == "1,2"
    assert [item["index"] for item in body["selected"]] == [1, 2]
    assert body["validation"]["is_valid"] is True
    assert body["trace"][-1]["value"] == "1,2"


def test_line_constraint_failure(client):
    response = client.post("/line", json={"line": "8 : (1,5,€500)"})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["validation"]["max_price_item_is_valid"] is False


def test_validate_reports_failures_without_error(client):
    response = client.post("/validate", json={"line": "200 : (1,5,€5)"})
    assert response.status_code == 200
    body = response.json()
    assert body["is_valid"] is False
    assert body["failed"] == ["max_weight_total"]


def test_validate_malformed_line(client):
    assert client.post("/validate", json={"line": "8 : (1,5,5)"}).status_code == 422


def test_report_csv(client):
    response = client.post("/report.csv", json={"text": EXAMPLE_TEXT})
    assert response.status_code == 200
    lines = response.text.strip().splitlines()
    assert lines[0] == "Line,Max Weight,Items,Selected,Total Weight,Total Price,Token"
    assert lines[1].endswith(",4")
    assert lines[2].endswith(",-")


def test_system_status(client):
    body = client.get("/system/status").json()
    assert body["engine_active"] is True
    assert set(body["constraints"]) == {
        "max_price_item", "max_weight_item", "max_weight_total", "max_item_count"
    }
