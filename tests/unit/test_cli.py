"""CLI smoke tests with the HTTP client swapped for a MockTransport."""

import json

import httpx
from typer.testing import CliRunner

from cli import doctor
from cli import main as cli_main
from tests.fakes import BASE_URL, FakeMappingBackend

runner = CliRunner()


def _use_handler(monkeypatch, handler) -> None:
    def factory(settings=None, **kwargs):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)

    monkeypatch.setattr(cli_main, "build_async_client", factory)


def test_mappings_list_prints_groups_and_exports(settings, monkeypatch, tmp_path):
    backend = FakeMappingBackend(
        [
            {"id": 1, "field_name": "valid_time", "placeholder": "A", "display_text": "late", "label_id": 7},
            {"id": 2, "field_name": "fixed_events", "placeholder": "F", "display_text": "market", "label_id": 8},
        ]
    )
    _use_handler(monkeypatch, backend.handler)
    output = tmp_path / "groups.json"

    result = runner.invoke(cli_main.app, ["-q", "mappings", "list", "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert "valid_time" in result.output
    assert "fixed_events" in result.output
    assert [g["field"] for g in json.loads(output.read_text(encoding="utf-8"))] == ["valid_time", "fixed_events"]


def test_merchants_bulk_delete(settings, monkeypatch):
    bodies: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"count": 2})

    _use_handler(monkeypatch, handler)

    result = runner.invoke(cli_main.app, ["-q", "merchants", "bulk-delete", "4", "5"])

    assert result.exit_code == 0, result.output
    assert bodies == [{"ids": [4, 5]}]


def test_data_access_errors_exit_with_code_1(settings, monkeypatch):
    _use_handler(monkeypatch, lambda request: httpx.Response(500, json={"message": "database is locked"}))

    result = runner.invoke(cli_main.app, ["-q", "merchants", "list"])

    assert result.exit_code == 1
    assert "database is locked" in result.output


def test_merchants_import_uploads_file_and_reports_count(settings, monkeypatch, tmp_path):
    uploads: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        uploads.append(request)
        merchants = [{"id": 1, "title": "Tea House"}, {"id": 2, "title": "Noodle Bar"}]
        return httpx.Response(200, json={"message": "Import completed successfully", "count": 2, "merchants": merchants})

    _use_handler(monkeypatch, handler)
    sheet = tmp_path / "merchants.xlsx"
    sheet.write_bytes(b"PK\x03\x04fake")

    result = runner.invoke(cli_main.app, ["-q", "merchants", "import", str(sheet)])

    assert result.exit_code == 0, result.output
    assert "Imported 2 merchant(s)." in result.output
    assert uploads[0].method == "PUT"
    assert uploads[0].url.path == "/api/v1/merchants/import"
    assert "经营地址".encode() in uploads[0].content


def _use_doctor_handler(monkeypatch, handler) -> None:
    def factory(settings=None, **kwargs):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)

    monkeypatch.setattr(doctor, "build_async_client", factory)


def test_doctor_run_reports_reachable_api(settings, monkeypatch):
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json={"version": "1.0"})

    _use_doctor_handler(monkeypatch, handler)

    result = runner.invoke(cli_main.app, ["-q", "doctor", "run"])

    assert result.exit_code == 0, result.output
    assert paths == ["/api/v1/info"]
    assert "API connectivity" in result.output
    assert "FAIL" not in result.output


def test_doctor_run_fails_when_api_is_unreachable(settings, monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    _use_doctor_handler(monkeypatch, handler)

    result = runner.invoke(cli_main.app, ["-q", "doctor", "run"])

    assert result.exit_code == 1
    assert "FAIL" in result.output
    assert "MERCHANT_CLIENT_API_BASE_URL" in result.output
