"""
Tests for HistoryBuffer module
"""

import threading

import pytest

from core.enums import CodecOperation
from core.history_buffer import HistoryBuffer


class TestHistoryBuffer:
    """Test HistoryBuffer functionality"""

    @pytest.fixture
    def buffer(self):
        """Create a fresh history buffer for each test"""
        return HistoryBuffer(max_size=10)

    def test_initialization(self, buffer):
        """Test buffer initialization"""
        assert buffer.max_size == 10
        assert len(buffer.buffer) == 0
        assert buffer.total_operations == 0

    def test_add_record(self, buffer):
        """Test adding a record"""
        record_id = buffer.add_record(CodecOperation.URL_ENCODE, "a b", "a%20b")

        # Check ID format
        assert record_id.startswith("hist_")
        assert len(record_id) > 5

        assert len(buffer.buffer) == 1
        assert buffer.total_operations == 1

        record = buffer.get_record(record_id)
        assert record is not None
        assert record.operation == CodecOperation.URL_ENCODE
        assert record.input == "a b"
        assert record.output == "a%20b"

    def test_get_missing_record(self, buffer):
        assert buffer.get_record("hist_missing") is None

    def test_recent_is_newest_first(self, buffer):
        """Most recent record comes first"""
        first = buffer.add_record(CodecOperation.BASE64_ENCODE, "a", "YQ==")
        second = buffer.add_record(CodecOperation.BASE64_ENCODE, "b", "Yg==")
        third = buffer.add_record(CodecOperation.BASE64_DECODE, "Yw==", "c")

        recent = buffer.get_recent(limit=10)

        assert [r.id for r in recent] == [third, second, first]

    def test_recent_limit(self, buffer):
        for i in range(5):
            buffer.add_record(CodecOperation.HTML_ENCODE, str(i), str(i))

        recent = buffer.get_recent(limit=3)

        assert len(recent) == 3
        assert recent[0].input == "4"

    def test_recent_filter(self, buffer):
        """Filter by operation"""
        buffer.add_record(CodecOperation.URL_ENCODE, "x", "x")
        buffer.add_record(CodecOperation.UNICODE_ENCODE, "A", "\\u0041")
        buffer.add_record(CodecOperation.URL_ENCODE, "y", "y")

        recent = buffer.get_recent(operation_filter=CodecOperation.URL_ENCODE)

        assert len(recent) == 2
        assert all(r.operation == CodecOperation.URL_ENCODE for r in recent)

    def test_circular_buffer_overflow(self, buffer):
        """Oldest records are dropped once the buffer is full"""
        ids = [buffer.add_record(CodecOperation.URL_DECODE, str(i), str(i)) for i in range(15)]

        assert len(buffer.buffer) == 10
        assert buffer.total_operations == 15
        assert buffer.get_record(ids[0]) is None
        assert buffer.get_record(ids[-1]) is not None
        assert buffer.get_recent(limit=100)[-1].input == "5"

    def test_delete_record(self, buffer):
        keep = buffer.add_record(CodecOperation.URL_ENCODE, "keep", "keep")
        drop = buffer.add_record(CodecOperation.URL_ENCODE, "drop", "drop")

        assert buffer.delete_record(drop) is True
        assert buffer.get_record(drop) is None
        assert buffer.get_record(keep) is not None

    def test_delete_missing_record(self, buffer):
        assert buffer.delete_record("hist_missing") is False

    def test_statistics_empty(self, buffer):
        stats = buffer.get_statistics()

        assert stats["total"] == 0
        assert stats["buffer_usage"] == 0
        assert stats["buffer_max"] == 10
        assert stats["by_operation"] == {}
        assert stats["last_operation_at"] is None

    def test_statistics(self, buffer):
        buffer.add_record(CodecOperation.URL_ENCODE, "a", "a")
        buffer.add_record(CodecOperation.URL_ENCODE, "b", "b")
        buffer.add_record(CodecOperation.JSON_MINIFY, "{ }", "{}")

        stats = buffer.get_statistics()

        assert stats["total"] == 3
        assert stats["buffer_usage"] == 3
        assert stats["by_operation"] == {"url_encode": 2, "json_minify": 1}
        assert stats["last_operation_at"] is not None

    def test_clear(self, buffer):
        """Test clearing history"""
        buffer.add_record(CodecOperation.URL_ENCODE, "a", "a")

        buffer.clear()

        assert len(buffer.buffer) == 0
        assert buffer.total_operations == 0

    def test_export_to_dict(self, buffer):
        buffer.add_record(CodecOperation.HTML_DECODE, "&amp;", "&")
        buffer.add_record(CodecOperation.HTML_ENCODE, "<", "&lt;")

        exported = buffer.export_to_dict()

        assert [r["operation"] for r in exported["records"]] == ["html_encode", "html_decode"]
        assert exported["records"][0]["timestamp"]
        assert exported["statistics"]["total"] == 2

    def test_concurrent_adds(self):
        """Records added from several threads are all counted"""
        buffer = HistoryBuffer(max_size=1000)

        def add_many():
            for i in range(100):
                buffer.add_record(CodecOperation.BASE64_ENCODE, str(i), str(i))

        threads = [threading.Thread(target=add_many) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert buffer.total_operations == 400
        assert len(buffer.buffer) == 400
