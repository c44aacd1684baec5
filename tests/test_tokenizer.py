from revolver.domain.note import Block, Note
from revolver.heuristics.tokenizer import get_note_text, tokenize


def test_tokenize_drops_punctuation_and_short_words() -> None:
    assert tokenize("Hello, World! ab") == ["hello", "world"]


def test_tokenize_handles_missing_text() -> None:
    assert tokenize(None) == []
    assert tokenize("") == []
    assert tokenize("   \n\t ") == []


def test_tokenize_keeps_order_and_duplicates() -> None:
    assert tokenize("Note note NOTE other") == ["note", "note", "note", "other"]


def test_tokenize_splits_on_non_alphanumerics() -> None:
    """Symbols become separators, digits are kept."""
    assert tokenize("C++ and e-mail") == ["and", "mail"]
    assert tokenize("abc123 42 v2.0.1") == ["abc123"]
    assert tokenize("café crème") == ["caf"]


def test_get_note_text_joins_title_blocks_and_tags() -> None:
    note = Note(
        id="n1",
        title="Title",
        blocks=[Block(text="first"), Block(text="second", type="quote")],
        tags=["one", "two"],
    )

    assert get_note_text(note) == "Title first second one two"


def test_get_note_text_treats_missing_block_text_as_empty() -> None:
    note = Note.model_validate(
        {"id": "n1", "title": "Title", "blocks": [{"type": "divider"}, {"text": None}]}
    )

    assert get_note_text(note).split() == ["Title"]
    assert get_note_text(Note(id="n2")) == ""
