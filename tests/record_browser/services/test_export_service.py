from __future__ import annotations

import json
from datetime import date
from types import MappingProxyType

from record_browser.services.export_service import ExportService
from record_browser.services.storage import LocalFileSystemStorage


def test_filename_embeds_iso_date():
    service = ExportService()

    assert service.filename_for(date(2024, 3, 5)) == "filtered_data_2024-03-05.json"
    assert ExportService(prefix="du_lieu").filename_for(date(2024, 1, 2)) == "du_lieu_2024-01-02.json"


def test_build_export_serialises_read_only_records():
    records = [MappingProxyType({"Tên": "Nguyễn Văn An", "Doanh số": "1,234"})]

    export = ExportService().build_export(records, date(2024, 3, 5))

    assert export.media_type == "application/json"
    assert json.loads(export.content.decode("utf-8")) == [{"Tên": "Nguyễn Văn An", "Doanh số": "1,234"}]
    # unicode kept as-is, document indented
    assert "Nguyễn".encode("utf-8") in export.content
    assert b"\n  {" in export.content


def test_export_of_empty_set_is_empty_array():
    export = ExportService().build_export([], date(2024, 3, 5))

    assert json.loads(export.content) == []


def test_export_to_storage_writes_file(tmp_path):
    storage = LocalFileSystemStorage(tmp_path / "exports")

    location = ExportService().export_to(storage, [{"a": 1}], date(2024, 3, 5))

    assert location.endswith("filtered_data_2024-03-05.json")
    assert json.loads(storage.read_bytes("filtered_data_2024-03-05.json")) == [{"a": 1}]
