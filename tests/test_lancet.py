from __future__ import annotations

from pathlib import Path

import pytest

from lancet import (
    Lancet,
    LancetConfig,
    LancetParseError,
    ParagraphBoundary,
    TiktokenTokenizer,
    TokenBounded,
)


def test_chunk_text_reports_metrics(word_tokenizer) -> None:
    lancet = Lancet(policy=TokenBounded(max_tokens=10, context_sentences=1), tokenizer=word_tokenizer)
    result = lancet.chunk_text("First one. Second one.\n\nThird one.")

    assert result.texts == ["First one.", "First one. Second one.", "Third one."]
    assert result.chunk_count == 3
    assert result.total_tokens == 2 + 4 + 2
    assert result.metrics["policy"] == "token"
    assert result.metrics["paragraph_count"] == 2
    assert result.metrics["chunk_count"] == 3
    assert result.metrics["split_time"] >= 0
    assert not result.has_warnings


def test_oversized_word_produces_warning(dense_tokenizer) -> None:
    lancet = Lancet(policy=TokenBounded(max_tokens=5, context_sentences=0), tokenizer=dense_tokenizer)
    result = lancet.chunk_text("Supercalifragilisticexpialidocious is a word.")
    assert result.texts[0] == "Supercalifragilisticexpialidocious"
    assert len(result.warnings) == 1
    assert "Chunk 0 has 9 tokens" in result.warnings[0]


def test_boundary_policy_from_config_builds_no_tokenizer() -> None:
    lancet = Lancet(config=LancetConfig(policy="sentence"))
    assert lancet._tokenizer is None
    assert lancet.chunk_text("One. Two.").texts == ["One.", "Two."]


def test_token_policy_from_config_builds_configured_tokenizer() -> None:
    lancet = Lancet(config=LancetConfig(tokenizer_model="cl100k_base"))
    assert isinstance(lancet._tokenizer, TiktokenTokenizer)
    assert lancet.policy == TokenBounded(512, 1)


def test_explicit_policy_overrides_config() -> None:
    lancet = Lancet(config=LancetConfig(policy="sentence"), policy=ParagraphBoundary())
    assert lancet.chunk_text("A. B.\n\nC.").texts == ["A. B.", "C."]


def test_builder(word_tokenizer) -> None:
    config = LancetConfig(verbose=True)
    lancet = (
        Lancet.builder()
        .with_config(config)
        .with_policy(TokenBounded(max_tokens=3, context_sentences=0))
        .with_tokenizer(word_tokenizer)
        .build()
    )
    assert lancet.config is config
    assert lancet.chunk_text("One two three four.").texts == ["One two three", "four."]


def test_chunk_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("Para one.\n\nPara two.", encoding="utf-8")
    result = Lancet(policy=ParagraphBoundary()).chunk(str(path))
    assert result.texts == ["Para one.", "Para two."]
    assert result.metrics["input_file"] == str(path)


def test_chunk_reads_latin1_file(tmp_path: Path) -> None:
    path = tmp_path / "legacy.txt"
    path.write_bytes("Café au lait.".encode("latin-1"))
    result = Lancet(policy=ParagraphBoundary()).chunk(str(path))
    assert result.texts == ["Café au lait."]


def test_chunk_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LancetParseError) as exc_info:
        Lancet(policy=ParagraphBoundary()).chunk(str(tmp_path / "missing.txt"))
    assert exc_info.value.file_path.endswith("missing.txt")


def test_result_to_dict(word_tokenizer) -> None:
    result = Lancet(policy=TokenBounded(10, 0), tokenizer=word_tokenizer).chunk_text("Hi there.")
    data = result.to_dict()
    assert data["chunk_count"] == 1
    assert data["chunks"] == [
        {"index": 0, "paragraph_index": 0, "token_count": 2, "content": "Hi there."}
    ]
