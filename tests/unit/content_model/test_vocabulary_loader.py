"""Unit tests for content_model.vocabulary_loader module."""

import pytest

from telegraph_content.content_model.errors import ConfigError, FilesystemError
from telegraph_content.content_model.vocabulary import DEFAULT_VOCABULARY
from telegraph_content.content_model.vocabulary_loader import VocabularyLoader


class TestVocabularyLoader:
    """Test cases for VocabularyLoader.load."""

    @pytest.fixture
    def write_vocabulary(self, tmp_path):
        """Write YAML text to a file and return its path."""
        def _write(text: str) -> str:
            path = tmp_path / "vocabulary.yaml"
            path.write_text(text, encoding="utf-8")
            return str(path)
        return _write

    def test_replaces_tags_and_attrs(self, write_vocabulary):
        """tags and attrs replace the defaults."""
        path = write_vocabulary("tags: [p, b]\nattrs: [href]\n")
        vocabulary = VocabularyLoader.load(path)
        assert vocabulary.tags == frozenset({"p", "b"})
        assert vocabulary.attrs == frozenset({"href"})

    def test_omitted_field_keeps_default(self, write_vocabulary):
        """A missing attrs list keeps the default attrs."""
        vocabulary = VocabularyLoader.load(write_vocabulary("tags: [p]\n"))
        assert vocabulary.attrs == DEFAULT_VOCABULARY.attrs

    def test_extend_merges_with_default(self, write_vocabulary):
        """extend: true adds to the default vocabulary."""
        path = write_vocabulary("extend: true\ntags: [details]\n")
        vocabulary = VocabularyLoader.load(path)
        assert vocabulary.allows_tag("details")
        assert vocabulary.allows_tag("p")

    def test_empty_file_is_default(self, write_vocabulary):
        """An empty file yields the default vocabulary."""
        assert VocabularyLoader.load(write_vocabulary("")) == DEFAULT_VOCABULARY

    def test_missing_file(self, tmp_path):
        """A missing file raises FilesystemError."""
        with pytest.raises(FilesystemError) as exc_info:
            VocabularyLoader.load(str(tmp_path / "nope.yaml"))
        assert exc_info.value.operation == "read"

    def test_invalid_yaml(self, write_vocabulary):
        """Broken YAML raises ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            VocabularyLoader.load(write_vocabulary("tags: [p\n"))
        assert "Invalid YAML syntax" in str(exc_info.value)

    def test_not_a_dictionary(self, write_vocabulary):
        """A top-level list is rejected."""
        with pytest.raises(ConfigError):
            VocabularyLoader.load(write_vocabulary("- p\n- b\n"))

    def test_unknown_field(self, write_vocabulary):
        """Unknown keys are rejected."""
        with pytest.raises(ConfigError) as exc_info:
            VocabularyLoader.load(write_vocabulary("tagz: [p]\n"))
        assert "tagz" in str(exc_info.value)

    def test_tags_must_be_list(self, write_vocabulary):
        """tags must be a list."""
        with pytest.raises(ConfigError) as exc_info:
            VocabularyLoader.load(write_vocabulary("tags: p\n"))
        assert exc_info.value.config_field == "tags"

    def test_entries_must_be_strings(self, write_vocabulary):
        """List entries must be non-empty strings."""
        with pytest.raises(ConfigError) as exc_info:
            VocabularyLoader.load(write_vocabulary("attrs: [href, 5]\n"))
        assert exc_info.value.config_field == "attrs"

    def test_extend_must_be_boolean(self, write_vocabulary):
        """extend must be a boolean."""
        with pytest.raises(ConfigError) as exc_info:
            VocabularyLoader.load(write_vocabulary("extend: sometimes\n"))
        assert exc_info.value.config_field == "extend"
