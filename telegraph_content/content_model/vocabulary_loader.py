"""YAML vocabulary loading.

Lets a deployment widen (or narrow) the allowed tags and attributes
without a code change, e.g. when the API starts accepting a new tag.

Vocabulary file structure:
    tags: [p, a, img, details]
    attrs: [href, src]
    extend: true   # merge with the default vocabulary instead of replacing
"""

from typing import Any, Dict, FrozenSet, Optional

import yaml

from .errors import ConfigError, FilesystemError
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary


class VocabularyLoader:
    """Handles vocabulary file loading and validation."""

    KNOWN_FIELDS = {'tags', 'attrs', 'extend'}

    @classmethod
    def load(cls, vocabulary_path: str) -> Vocabulary:
        """Load a vocabulary from a YAML file.

        Args:
            vocabulary_path: Path to the YAML file

        Returns:
            Vocabulary built from the file

        Raises:
            FilesystemError: If file cannot be read
            ConfigError: If the file is not a valid vocabulary
        """
        try:
            with open(vocabulary_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise FilesystemError(
                vocabulary_path,
                'read',
                'Vocabulary file not found'
            )
        except PermissionError:
            raise FilesystemError(
                vocabulary_path,
                'read',
                'Permission denied'
            )

        try:
            vocabulary_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML syntax: {str(e)}"
            )

        if vocabulary_dict is None:
            return DEFAULT_VOCABULARY

        if not isinstance(vocabulary_dict, dict):
            raise ConfigError(
                f"Vocabulary must be a YAML dictionary, got {type(vocabulary_dict).__name__}"
            )

        return cls._parse_vocabulary(vocabulary_dict)

    @classmethod
    def _parse_vocabulary(cls, vocabulary_dict: Dict[str, Any]) -> Vocabulary:
        unknown = set(vocabulary_dict.keys()) - cls.KNOWN_FIELDS
        if unknown:
            raise ConfigError(
                f"Unknown fields: {', '.join(sorted(str(k) for k in unknown))}"
            )

        extend = vocabulary_dict.get('extend', False)
        if not isinstance(extend, bool):
            raise ConfigError("must be a boolean", config_field='extend')

        tags = cls._parse_names(vocabulary_dict, 'tags')
        attrs = cls._parse_names(vocabulary_dict, 'attrs')

        if extend:
            return DEFAULT_VOCABULARY.extend(tags=tags, attrs=attrs)

        return Vocabulary(
            tags=tags if tags is not None else DEFAULT_VOCABULARY.tags,
            attrs=attrs if attrs is not None else DEFAULT_VOCABULARY.attrs,
        )

    @staticmethod
    def _parse_names(vocabulary_dict: Dict[str, Any], field_name: str) -> Optional[FrozenSet[str]]:
        if field_name not in vocabulary_dict:
            return None

        names = vocabulary_dict[field_name]
        if not isinstance(names, list):
            raise ConfigError(
                f"must be a list, got {type(names).__name__}",
                config_field=field_name
            )

        for name in names:
            if not isinstance(name, str) or not name.strip():
                raise ConfigError(
                    f"entries must be non-empty strings, got {name!r}",
                    config_field=field_name
                )

        return frozenset(name.strip() for name in names)
