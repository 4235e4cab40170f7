import math
from unittest.mock import MagicMock

import pytest

from schema_forge.chunking.chunking import Chunk, split_text


class TestSplitText:
    def test_single_chunk_when_text_fits(self) -> None:
        """Text smaller than chunk_size produces one chunk."""
        result = split_text("hello", chunk_size=10, metadata={"source_id": "doc1"})

        assert len(result) == 1
        assert result[0].text == "hello"
        assert result[0].offset_start == 0
        assert result[0].offset_end == 5

    def test_multiple_chunks_last_one_truncated(self) -> None:
        result = split_text("abcdefghij", chunk_size=4)

        assert [c.text for c in result] == ["abcd", "efgh", "ij"]
        assert [(c.offset_start, c.offset_end) for c in result] == [
            (0, 4),
            (4, 8),
            (8, 10),
        ]

    @pytest.mark.parametrize(
        ("text", "chunk_size"),
        [
            ("a", 1),
            ("abcdefgh", 4),
            ("abcdefghi", 4),
            ("Page 1: 캠핑장 예약 플랫폼\n\n" * 37, 50),
            ("x" * 10_001, 4000),
        ],
    )
    def test_count_and_concatenation(self, text: str, chunk_size: int) -> None:
        """ceil(len/size) chunks whose concatenation is the input."""
        result = split_text(text, chunk_size=chunk_size)

        assert len(result) == math.ceil(len(text) / chunk_size)
        assert "".join(c.text for c in result) == text
        assert all(c.text for c in result)

    def test_empty_text_yields_no_chunks(self) -> None:
        assert split_text("", chunk_size=10) == []

    def test_chunk_id_format(self) -> None:
        result = split_text("hello", chunk_size=10, metadata={"source_id": "doc1"})

        assert result[0].chunk_id == "doc1:0:5"

    def test_chunk_id_uses_unknown_when_no_source_id(self) -> None:
        result = split_text("hello", chunk_size=10)

        assert result[0].chunk_id == "unknown:0:5"

    def test_metadata_is_copied_to_each_chunk(self) -> None:
        metadata = {"source_id": "doc1", "author": "test"}
        result = split_text("abcdefgh", chunk_size=4, metadata=metadata)

        assert all(c.metadata == metadata for c in result)
        assert result[0].metadata is not result[1].metadata

    def test_metrics_recorded(self) -> None:
        metrics_hook = MagicMock()

        split_text("abcdefgh", chunk_size=4, metrics_hook=metrics_hook)

        metrics_hook.record_latency.assert_called_once()
        metrics_hook.increment.assert_called_once_with("chunking_chunks_created", 2)

    @pytest.mark.parametrize("chunk_size", [0, -1])
    def test_raises_on_non_positive_chunk_size(self, chunk_size: int) -> None:
        with pytest.raises(ValueError, match="chunk_size must be > 0"):
            split_text("text", chunk_size=chunk_size)


class TestChunkDataclass:
    def test_chunk_is_frozen(self) -> None:
        chunk = Chunk(chunk_id="id", text="text", offset_start=0, offset_end=4)

        with pytest.raises(AttributeError):
            chunk.text = "modified"  # type: ignore
