"""Tests for i18nkit.pluralization module."""

import pytest

from i18nkit.models import PluralCategory
from i18nkit.pluralization import PluralizationRegistry, default_pluralization_func


class TestDefaultPluralizationFunc:
    """Tests for default_pluralization_func()."""

    def test_one(self):
        assert default_pluralization_func(1) == "One"

    @pytest.mark.parametrize("count", [0, 2, 5, 100, -1, -5])
    def test_everything_else_is_many(self, count):
        """Zero and negative counts are "Many" too."""
        assert default_pluralization_func(count) == "Many"


class TestPluralizationRegistry:
    """Tests for PluralizationRegistry."""

    def test_empty_registry_uses_default(self):
        registry = PluralizationRegistry()
        assert not registry.has("en")
        assert registry.get("en") is default_pluralization_func
        assert registry.category_for("en", 1) == PluralCategory.ONE

    def test_with_func_returns_new_registry(self):
        """with_func() leaves the original registry untouched."""
        registry = PluralizationRegistry()
        updated = registry.with_func("en", lambda count: "Zero")

        assert "en" in updated
        assert "en" not in registry
        assert len(updated) == 1
        assert updated.category_for("en", 7) == PluralCategory.ZERO

    def test_category_for_unknown_label(self):
        """Labels outside the plural categories yield None."""
        registry = PluralizationRegistry({"en": lambda count: "Other"})
        assert registry.category_for("en", 3) is None

    def test_functions_are_per_language(self):
        registry = PluralizationRegistry(
            {"en": default_pluralization_func, "ar": lambda count: "Two"}
        )
        assert registry.category_for("en", 2) == PluralCategory.MANY
        assert registry.category_for("ar", 2) == PluralCategory.TWO
