"""
Shared fixtures for the WordsIK validator tests.

Documents are written to a temporary ``data/<type>/<language>/<grade>`` tree
so every test works against real files.
"""

import json

import pytest
from hypothesis import settings, Verbosity


settings.register_profile("wordsik",
    max_examples=100,
    verbosity=Verbosity.normal,
    deadline=None  # File-system backed examples can be slow
)
settings.load_profile("wordsik")


@pytest.fixture
def data_root(tmp_path):
    """Empty data directory inside the test's temporary directory."""
    root = tmp_path / "data"
    root.mkdir()
    return root


@pytest.fixture
def make_word():
    """Factory for a complete, clean word item."""
    def _make_word(word, translation=None, definition=None, example=None, **extra):
        entry = {
            "word": word,
            "translation": f"{word} translated" if translation is None else translation,
            "definition": f"A common word meaning {word}." if definition is None else definition,
            "example": f"We talked about the {word} today." if example is None else example,
        }
        entry.update(extra)
        return entry
    return _make_word


@pytest.fixture
def write_unit(data_root):
    """
    Factory that writes a flat-shape unit under the data root.

    Keyword fields override the document's top-level fields; a field passed
    as None is left out of the document.
    """
    def _write_unit(content_type, language, grade, name, /, words=None, **fields):
        document = {"week": 1, "theme": "Animals", "language": language, "grade": grade}
        if words is not None:
            document["words"] = words
        for key, value in fields.items():
            if value is None:
                document.pop(key, None)
            else:
                document[key] = value

        path = data_root / content_type / language / grade / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8")
        return str(path)
    return _write_unit


@pytest.fixture
def write_raw(data_root):
    """Factory that writes raw text or bytes to a path relative to the data root."""
    def _write_raw(relative, content):
        path = data_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return str(path)
    return _write_raw
