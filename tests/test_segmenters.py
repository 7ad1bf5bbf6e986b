from __future__ import annotations

from lancet.segmenters import paragraphs, sentences, words


def test_sentences_split_on_terminal_punctuation() -> None:
    text = "This is a sentence. Here is another one! And a question?"
    assert sentences(text) == [
        "This is a sentence.",
        "Here is another one!",
        "And a question?",
    ]


def test_sentences_empty_and_whitespace_only() -> None:
    assert sentences("") == []
    assert sentences("   \n\t  ") == []


def test_sentences_are_not_abbreviation_aware() -> None:
    text = "Dr. Smith went to Washington. He arrived at 3 p.m."
    assert sentences(text) == [
        "Dr.",
        "Smith went to Washington.",
        "He arrived at 3 p.m.",
    ]


def test_sentences_without_terminal_punctuation() -> None:
    assert sentences("No sentences here but some words") == [
        "No sentences here but some words"
    ]


def test_sentences_unicode_full_stop() -> None:
    assert sentences("こんにちは。世界。") == ["こんにちは。", "世界。"]


def test_sentences_drop_blank_lines_between_paragraphs() -> None:
    assert sentences("P1.\n\nP2.") == ["P1.", "P2."]


def test_words_attach_punctuation() -> None:
    assert words("Hello, world!") == ["Hello,", "world!"]
    assert words("(see e-mail) now.") == ["(see", "e-mail)", "now."]
    assert words("We can't stop at 3.14 today.") == [
        "We",
        "can't",
        "stop",
        "at",
        "3.14",
        "today.",
    ]


def test_words_empty_and_whitespace_only() -> None:
    assert words("") == []
    assert words("  \n ") == []


def test_words_rejoin_up_to_whitespace() -> None:
    sentence = "Special characters: @#$%^&*() are   included, mostly."
    assert " ".join(words(sentence)).split() == sentence.split()


def test_paragraphs_split_on_blank_line() -> None:
    text = "This is paragraph one.\nStill paragraph one.\n\nThis is paragraph two."
    assert paragraphs(text) == [
        "This is paragraph one.\nStill paragraph one.",
        "This is paragraph two.",
    ]


def test_paragraphs_keep_empty_segments() -> None:
    assert paragraphs("\n\n\n") == ["", ""]
    assert paragraphs("     ") == [""]


def test_paragraphs_of_empty_document() -> None:
    assert paragraphs("") == []
