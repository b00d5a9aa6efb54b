"""Translation loading interface and implementations.

Loaders turn JSON or YAML documents into lists of TranslateEntry. A document
is a list of entries:

    - Key: hello_emails
      Default: You have emails
      One: You have one email
      Many: "You have {{.EmailQty}} emails"

Sources can be raw bytes, strings, files or glob patterns, or a filesystem
root (a directory Path or an importlib.resources traversable).
"""

import fnmatch
import glob
import json
from abc import ABC, abstractmethod
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, List, Tuple, Union

import yaml
from pydantic import TypeAdapter, ValidationError

from i18nkit.logging import get_module_logger
from i18nkit.models import TranslateEntries, TranslateEntry

logger = get_module_logger()

FileSystemRoot = Union[Path, Traversable]

_ENTRIES_ADAPTER = TypeAdapter(List[TranslateEntry])


class TranslationLoadError(ValueError):
    """Raised when a translation document cannot be parsed or validated."""


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define how raw bytes are decoded into plain data; the
    base class validates that data into entries and handles files and
    filesystem roots.
    """

    format_name: str = ""

    @abstractmethod
    def parse(self, raw: bytes) -> Any:
        """Decode a document into plain Python data.

        Args:
            raw: Document bytes.

        Returns:
            Decoded data (expected to be a list of mappings, or None).

        Raises:
            TranslationLoadError: If the document is malformed.
        """
        pass

    def load_bytes(self, raw: bytes, source: str = "<bytes>") -> TranslateEntries:
        """Load entries from document bytes.

        Args:
            raw: Document bytes.
            source: Name of the source, used in error messages.

        Returns:
            Loaded entries (empty for an empty or null document).

        Raises:
            TranslationLoadError: If parsing or validation fails.
        """
        data = self.parse(raw)
        if data is None:
            return []

        if not isinstance(data, list):
            raise TranslationLoadError(
                f"Invalid {self.format_name} translations in {source}: "
                f"expected a list of entries, got {type(data).__name__}"
            )

        try:
            return _ENTRIES_ADAPTER.validate_python(data)
        except ValidationError as e:
            logger.error(
                "invalid_translation_entries",
                source=source,
                format=self.format_name,
                error_count=e.error_count(),
            )
            raise TranslationLoadError(
                f"Invalid {self.format_name} translations in {source}: {e}"
            ) from e

    def load_string(self, text: str) -> TranslateEntries:
        """Load entries from a document string."""
        return self.load_bytes(text.encode("utf-8"), source="<string>")

    def load_files(self, *files_or_globs: str) -> TranslateEntries:
        """Load entries from one or more files or glob patterns.

        Patterns are expanded in the given order, each one's matches sorted
        by name. A pattern without matches contributes nothing.

        Args:
            *files_or_globs: Paths or patterns like "translations/*.json".

        Returns:
            Entries of all matched files, concatenated.

        Raises:
            TranslationLoadError: If a pattern is malformed or a file is not a
                valid document.
            OSError: If a matched file cannot be read.
        """
        entries: TranslateEntries = []

        for pattern in files_or_globs:
            check_glob_pattern(pattern)
            matches = sorted(match for match in glob.glob(pattern) if Path(match).is_file())
            for file in matches:
                entries.extend(self.load_bytes(Path(file).read_bytes(), source=file))

            logger.debug(
                "loaded_translation_files",
                pattern=pattern,
                format=self.format_name,
                file_count=len(matches),
            )

        return entries

    def load_fs(self, root: FileSystemRoot, *files_or_globs: str) -> TranslateEntries:
        """Load entries from files inside a filesystem root.

        Patterns are relative to root and use "/" as separator; each pattern
        segment matches one directory level.

        Args:
            root: Directory Path or importlib.resources traversable (e.g.,
                ``importlib.resources.files("myapp") / "translations"``).
            *files_or_globs: Relative paths or patterns like "translations/*.yaml".

        Returns:
            Entries of all matched files, concatenated.

        Raises:
            TranslationLoadError: If a pattern is malformed or a file is not a
                valid document.
            OSError: If a matched file cannot be read.
        """
        entries: TranslateEntries = []

        for pattern in files_or_globs:
            check_glob_pattern(pattern)
            matches = glob_fs(root, pattern)
            for name, node in matches:
                entries.extend(self.load_bytes(node.read_bytes(), source=name))

            logger.debug(
                "loaded_translation_fs_files",
                pattern=pattern,
                format=self.format_name,
                file_count=len(matches),
            )

        return entries


class JSONTranslationLoader(TranslationLoader):
    """Loader for JSON translation documents."""

    format_name = "JSON"

    def parse(self, raw: bytes) -> Any:
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TranslationLoadError(f"Failed to parse JSON translations: {e}") from e


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation documents.

    YAML is decoded to plain data and validated exactly like JSON, so both
    formats accept the same entries.
    """

    format_name = "YAML"

    def parse(self, raw: bytes) -> Any:
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise TranslationLoadError(f"Failed to parse YAML translations: {e}") from e


def check_glob_pattern(pattern: str) -> None:
    """Reject patterns with an unterminated character class.

    glob and fnmatch treat a lone "[" as a literal, so such a pattern would
    silently match nothing.

    Raises:
        TranslationLoadError: If a "[" has no closing "]".
    """
    index = 0
    while index < len(pattern):
        if pattern[index] != "[":
            index += 1
            continue
        # "]" right after "[" or "[!" belongs to the class
        end = index + 1
        if end < len(pattern) and pattern[end] == "!":
            end += 1
        if end < len(pattern) and pattern[end] == "]":
            end += 1
        close = pattern.find("]", end)
        if close == -1:
            raise TranslationLoadError(f"Malformed glob pattern: {pattern!r}")
        index = close + 1


def glob_fs(root: FileSystemRoot, pattern: str) -> List[Tuple[str, Traversable]]:
    """Expand a "/"-separated glob pattern inside a filesystem root.

    Returns:
        Sorted (relative_path, node) pairs for matching files.
    """
    parts = [part for part in pattern.split("/") if part not in ("", ".")]
    if not parts:
        return []

    level: List[Tuple[str, Traversable]] = [("", root)]
    for index, part in enumerate(parts):
        is_last = index == len(parts) - 1
        next_level: List[Tuple[str, Traversable]] = []

        for prefix, node in level:
            if not node.is_dir():
                continue
            for child in sorted(node.iterdir(), key=lambda item: item.name):
                if not fnmatch.fnmatchcase(child.name, part):
                    continue
                name = f"{prefix}/{child.name}" if prefix else child.name
                if is_last and child.is_file():
                    next_level.append((name, child))
                elif not is_last and child.is_dir():
                    next_level.append((name, child))

        level = next_level

    return level


_json_loader = JSONTranslationLoader()
_yaml_loader = YAMLTranslationLoader()


def load_from_json_bytes(json_bytes: bytes) -> TranslateEntries:
    """Load entries from JSON bytes."""
    return _json_loader.load_bytes(json_bytes)


def load_from_json_string(json_string: str) -> TranslateEntries:
    """Load entries from a JSON string."""
    return _json_loader.load_string(json_string)


def load_from_json_files(*files_or_globs: str) -> TranslateEntries:
    """Load entries from JSON files, allowing patterns like "path/*.json"."""
    return _json_loader.load_files(*files_or_globs)


def load_from_json_fs(root: FileSystemRoot, *files_or_globs: str) -> TranslateEntries:
    """Load entries from JSON files inside a filesystem root."""
    return _json_loader.load_fs(root, *files_or_globs)


def load_from_yaml_bytes(yaml_bytes: bytes) -> TranslateEntries:
    """Load entries from YAML bytes."""
    return _yaml_loader.load_bytes(yaml_bytes)


def load_from_yaml_string(yaml_string: str) -> TranslateEntries:
    """Load entries from a YAML string."""
    return _yaml_loader.load_string(yaml_string)


def load_from_yaml_files(*files_or_globs: str) -> TranslateEntries:
    """Load entries from YAML files, allowing patterns like "path/*.yaml"."""
    return _yaml_loader.load_files(*files_or_globs)


def load_from_yaml_fs(root: FileSystemRoot, *files_or_globs: str) -> TranslateEntries:
    """Load entries from YAML files inside a filesystem root."""
    return _yaml_loader.load_fs(root, *files_or_globs)
