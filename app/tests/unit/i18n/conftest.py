"""Feature-level fixtures for i18n tests."""

import json

import pytest
import yaml

from tests.factories.i18n import make_english_entries, make_i18n, make_spanish_entries


@pytest.fixture
def english_entries():
    return make_english_entries()


@pytest.fixture
def spanish_entries():
    return make_spanish_entries()


@pytest.fixture
def i18n():
    """Registry with consistent en and es tables, fallback en."""
    return make_i18n()


@pytest.fixture
def temp_translation_files(tmp_path):
    """Create temporary JSON and YAML translation files.

    Returns a directory structure like:
    - test1.json / test2.json
    - test1.yaml / test2.yaml
    - incorrect.json / incorrect.yaml
    - nested/extra.yaml
    """
    with open(tmp_path / "test1.json", "w", encoding="utf-8") as f:
        json.dump([{"Key": "hello", "Default": "Hello"}], f)
    with open(tmp_path / "test2.json", "w", encoding="utf-8") as f:
        json.dump([{"Key": "world", "Default": "World"}], f)
    (tmp_path / "incorrect.json").write_text('[{"Key": "hello",', encoding="utf-8")

    with open(tmp_path / "test1.yaml", "w", encoding="utf-8") as f:
        yaml.dump([{"Key": "hello", "Default": "Hello"}], f)
    with open(tmp_path / "test2.yaml", "w", encoding="utf-8") as f:
        yaml.dump([{"Key": "world", "Default": "World"}], f)
    (tmp_path / "incorrect.yaml").write_text("- Key: hello\n  Default: [", encoding="utf-8")

    (tmp_path / "nested").mkdir()
    with open(tmp_path / "nested" / "extra.yaml", "w", encoding="utf-8") as f:
        yaml.dump([{"Key": "extra", "Default": "Extra"}], f)

    return tmp_path


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create a translations directory with one language per file.

    - en.yaml, es.yaml: common keys
    - emails.en.json, emails.es.json: merged into en and es
    - README.md: ignored
    """
    directory = tmp_path / "translations"
    directory.mkdir()

    with open(directory / "en.yaml", "w", encoding="utf-8") as f:
        yaml.dump(
            [
                {"Key": "welcome", "Default": "Welcome", "Female": "Welcome, ma'am"},
                {"Key": "bye", "Default": "Bye {{.Name}}"},
            ],
            f,
        )
    with open(directory / "es.yaml", "w", encoding="utf-8") as f:
        yaml.dump(
            [
                {"Key": "welcome", "Default": "Bienvenido", "Female": "Bienvenida"},
                {"Key": "bye", "Default": "Adiós {{.Name}}"},
            ],
            f,
            allow_unicode=True,
        )
    with open(directory / "emails.en.json", "w", encoding="utf-8") as f:
        json.dump(
            [{"Key": "emails", "One": "One email", "Many": "{{.N}} emails"}], f
        )
    with open(directory / "emails.es.json", "w", encoding="utf-8") as f:
        json.dump(
            [{"Key": "emails", "One": "Un correo", "Many": "{{.N}} correos"}], f
        )
    (directory / "README.md").write_text("not a translation file", encoding="utf-8")

    return directory
