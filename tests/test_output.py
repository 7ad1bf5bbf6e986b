from __future__ import annotations

import json
from pathlib import Path

from lancet.models import Chunk
from lancet.output import JsonFormatter, JsonLinesFormatter, TextFormatter

CHUNKS = [
    Chunk(content="First chunk.", index=0, paragraph_index=0, token_count=2),
    Chunk(content="Zweiter Absatz – ß.", index=1, paragraph_index=1, token_count=4),
]


def test_text_formatter_separates_chunks() -> None:
    assert TextFormatter().format_to_string(CHUNKS) == (
        "First chunk.\n\n---\n\nZweiter Absatz – ß."
    )
    assert TextFormatter(include_separator=False).format_to_string(CHUNKS) == (
        "First chunk.\nZweiter Absatz – ß."
    )


def test_jsonl_formatter_one_object_per_line() -> None:
    lines = JsonLinesFormatter().format_to_string(CHUNKS).splitlines()
    assert [json.loads(line) for line in lines] == [c.to_dict() for c in CHUNKS]
    assert "ß" in lines[1]


def test_json_formatter_writes_file(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "chunks.json"
    written = JsonFormatter().format(CHUNKS, str(target))
    assert written == str(target)
    data = json.loads(target.read_text(encoding="utf-8"))
    assert [item["content"] for item in data] == ["First chunk.", "Zweiter Absatz – ß."]


def test_formatter_extensions() -> None:
    assert TextFormatter().extension == ".txt"
    assert JsonLinesFormatter().extension == ".jsonl"
    assert JsonFormatter().extension == ".json"


def test_empty_chunk_list() -> None:
    assert TextFormatter().format_to_string([]) == ""
    assert JsonFormatter().format_to_string([]) == "[]"
