import base64
import json
import threading
from pathlib import Path
from unittest.mock import patch

from ediscovery.output.history import History
from ediscovery.output.sinks import JsonLinesOutputSink, MemoryOutputSink
from ediscovery.output.stats import ItemCounter
from ediscovery.processor.metadata import NATIVE, ORIGINAL_PATH
from ediscovery.processor.models import OutputRecord, content_digest


def _make_record(data: bytes = b"abc", name: str = "a.txt") -> OutputRecord:
    return OutputRecord(key=content_digest(data), fields={ORIGINAL_PATH: name}, native=data)


class TestOutputRecord:
    def test_build_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "doc"
        path.write_bytes(b"payload")
        metadata = {ORIGINAL_PATH: "doc.txt"}

        record = OutputRecord.build(path, metadata)

        assert record.key == content_digest(b"payload")
        assert record.native == b"payload"
        assert dict(record.fields) == metadata

    def test_fields_are_a_snapshot(self, tmp_path: Path) -> None:
        path = tmp_path / "doc"
        path.write_bytes(b"payload")
        metadata = {ORIGINAL_PATH: "doc.txt"}

        record = OutputRecord.build(path, metadata)
        metadata["late"] = "value"

        assert "late" not in record.fields

    def test_as_map_adds_native_blob(self) -> None:
        assert _make_record(b"xyz").as_map() == {ORIGINAL_PATH: "a.txt", NATIVE: b"xyz"}


class TestMemoryOutputSink:
    def test_collects_records(self) -> None:
        sink = MemoryOutputSink()
        record = _make_record()
        sink.write(record.key, record)
        assert sink.records == [(record.key, record)]

    def test_keys_collapse_duplicates(self) -> None:
        sink = MemoryOutputSink()
        for name in ("a.txt", "b.txt"):
            record = _make_record(b"same", name)
            sink.write(record.key, record)
        assert len(sink.records) == 2
        assert sink.keys() == {content_digest(b"same")}


class TestJsonLinesOutputSink:
    def test_appends_one_line_per_record(self, tmp_path: Path) -> None:
        sink = JsonLinesOutputSink(tmp_path / "out" / "records.jsonl")
        first = _make_record(b"one", "1.txt")
        second = _make_record(b"two", "2.txt")

        sink.write(first.key, first)
        sink.write(second.key, second)

        lines = sink.path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        payload = json.loads(lines[0])
        assert payload["key"] == first.key
        assert payload["fields"][ORIGINAL_PATH] == "1.txt"
        assert base64.b64decode(payload["fields"][NATIVE]) == b"one"


class TestItemCounter:
    def test_increments(self) -> None:
        counter = ItemCounter()
        counter.increment_item_count()
        counter.increment_item_count()
        assert counter.item_count == 2

    def test_concurrent_increments_are_not_lost(self) -> None:
        counter = ItemCounter()

        def bump() -> None:
            for _ in range(1000):
                counter.increment_item_count()

        threads = [threading.Thread(target=bump) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert counter.item_count == 8000


class TestHistory:
    def test_appends_timestamped_lines(self, tmp_path: Path) -> None:
        history = History(tmp_path / "logs" / "history.log")

        with patch("ediscovery.output.history.Log") as mock_log:
            history.append("Processing: a.txt")
            history.append("Responsive: True")

        lines = history.path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert lines[0].endswith(" Processing: a.txt")
        assert lines[1].endswith(" Responsive: True")
        mock_log.info.assert_any_call("Processing: a.txt")
