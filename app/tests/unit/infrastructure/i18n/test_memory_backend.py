"""Tests for infrastructure.i18n.backends.memory module."""

import threading
from datetime import date, datetime

import pytest

from infrastructure.i18n.backends import InMemoryBackend
from infrastructure.i18n.errors import (
    InvalidLocaleError,
    InvalidPluralizationDataError,
    MissingInterpolationArgumentError,
    MissingTranslationDataError,
)
from infrastructure.i18n.keys import TranslationKey
from infrastructure.i18n.pluralization import PluralizerRegistry


class TestInMemoryLookup:
    """Tests for key lookup."""

    def test_plain_lookup(self, memory_backend):
        """Leaves are returned as stored."""
        assert memory_backend.translate("en", "plain") == "Hello"

    def test_scoped_lookup(self, memory_backend):
        """Scope segments are prepended to the key."""
        assert memory_backend.translate("en", "home", {"scope": "scoped"}) == "Home"
        assert memory_backend.translate("en", "home", {"scope": ["scoped"]}) == "Home"
        assert memory_backend.translate("en", TranslationKey("scoped.home")) == "Home"

    def test_branch_lookup(self, memory_backend):
        """A branch key returns the sub-tree."""
        assert memory_backend.translate("en", "scoped") == {"home": "Home"}

    def test_path_through_leaf_is_missing(self, memory_backend):
        """A path that hits a leaf early is not found."""
        result = memory_backend.resolve("en", "plain.deeper")

        assert result.is_not_found
        assert result.data == ["en", "plain", "deeper"]

    def test_unknown_locale_is_missing(self, memory_backend):
        """Locales without data are not found."""
        with pytest.raises(MissingTranslationDataError):
            memory_backend.translate("de", "plain")

    def test_missing_locale_raises(self, memory_backend):
        """None is not a locale."""
        with pytest.raises(InvalidLocaleError):
            memory_backend.translate(None, "plain")

    def test_returned_branch_is_a_copy(self, memory_backend):
        """Mutating a result does not change the stored tree."""
        branch = memory_backend.translate("en", "scoped")
        branch["home"] = "Changed"

        assert memory_backend.translate("en", "scoped.home") == "Home"

    def test_list_of_keys(self, memory_backend):
        """Each key of a list is resolved."""
        assert memory_backend.translate("en", ["plain", "scoped.home"]) == [
            "Hello",
            "Home",
        ]

    def test_standalone_defaults(self, memory_backend):
        """Defaults follow the same protocol as in a chain."""
        assert memory_backend.translate("en", "missing", {"default": "Literal"}) == "Literal"
        assert (
            memory_backend.translate(
                "en", "missing", {"default": [TranslationKey("nope"), TranslationKey("plain")]}
            )
            == "Hello"
        )


class TestInMemoryPluralization:
    """Tests for count handling."""

    def test_no_count_returns_entry_unchanged(self, memory_backend):
        """Without a count the plural map itself is returned."""
        assert memory_backend.translate("en", "cart") == {
            "one": "One item",
            "other": "{{count}} items",
        }

    @pytest.mark.parametrize(
        "count,expected",
        [(1, "One item"), (2, "2 items"), (0, "0 items")],
    )
    def test_count_selects_form(self, memory_backend, count, expected):
        """The plural rule picks the form; zero falls back to other."""
        assert memory_backend.translate("en", "cart", {"count": count}) == expected

    def test_zero_form_used_when_present(self, memory_backend):
        """An explicit zero form wins over other."""
        assert memory_backend.translate("en", "inbox", {"count": 0}) == "No messages"
        assert memory_backend.translate("en", "inbox", {"count": 4}) == "4 messages"

    def test_missing_form_raises(self):
        """A count without a matching form is invalid data."""
        backend = InMemoryBackend()
        backend.store_translations("en", {"lonely": {"one": "just one"}})

        with pytest.raises(InvalidPluralizationDataError) as exc_info:
            backend.translate("en", "lonely", {"count": 3})

        assert exc_info.value.count == 3

    def test_registered_rule_is_used(self):
        """Per-locale rules come from the registry."""
        pluralizers = PluralizerRegistry.with_builtin_rules()
        backend = InMemoryBackend(pluralizers=pluralizers)
        backend.store_translations(
            "cs", {"apple": {"one": "jablko", "few": "jablka", "other": "jablek"}}
        )

        assert backend.translate("cs", "apple", {"count": 3}) == "jablka"
        assert backend.translate("cs", "apple", {"count": 7}) == "jablek"

    def test_store_translation_with_count_accumulates_forms(self):
        """Forms stored one count at a time end up in one plural map."""
        backend = InMemoryBackend()
        backend.store_translation("en", "girl", "One girl", 1)
        backend.store_translation("en", "girl", "Many girls", 5)

        assert backend.translate("en", "girl") == {
            "one": "One girl",
            "other": "Many girls",
        }
        assert backend.translate("en", "girl", {"count": 5}) == "Many girls"


class TestInMemoryInterpolation:
    """Tests for placeholder substitution."""

    def test_double_brace_placeholder(self, memory_backend):
        """{{name}} placeholders are replaced."""
        assert memory_backend.translate("en", "greeting", {"name": "Ada"}) == "Hello Ada"

    def test_single_brace_placeholder(self, memory_backend):
        """{name} placeholders are replaced."""
        assert memory_backend.translate("en", "inbox", {"count": 2}) == "2 messages"

    def test_no_variables_leaves_placeholders(self, memory_backend):
        """Without interpolation variables the text is untouched."""
        assert memory_backend.translate("en", "greeting") == "Hello {{name}}"

    def test_missing_variable_raises(self, memory_backend):
        """A placeholder without a value is an error."""
        with pytest.raises(MissingInterpolationArgumentError) as exc_info:
            memory_backend.translate("en", "greeting", {"other": "x"})

        assert exc_info.value.name == "name"

    def test_literal_default_is_interpolated(self, memory_backend):
        """Literal defaults go through interpolation like stored text."""
        result = memory_backend.translate(
            "en", "missing", {"default": "Hi {{name}}", "name": "Ada"}
        )

        assert result == "Hi Ada"


class TestInMemoryLoading:
    """Tests for loading and storing."""

    def test_lazy_load_from_loader(self, yaml_loader):
        """The loader is read on first lookup."""
        backend = InMemoryBackend(loader=yaml_loader)
        assert backend.initialized is False

        assert backend.translate("en", "errors.not_found", {"item": "Page"}) == (
            "Page not found"
        )
        assert backend.initialized is True
        assert sorted(backend.available_locales()) == ["en", "fr"]

    def test_load_locale_rooted_file(self, tmp_path):
        """Files passed to load_translations() are keyed by locale."""
        path = tmp_path / "extra.yml"
        path.write_text("en:\n  foo: Foo\ncs:\n  foo: Fu\n", encoding="utf-8")
        backend = InMemoryBackend()

        backend.load_translations(path)

        assert backend.translate("en", "foo") == "Foo"
        assert backend.translate("cs", "foo") == "Fu"

    def test_store_translations_merges(self, memory_backend):
        """New keys are merged into existing branches."""
        memory_backend.store_translations("en", {"scoped": {"away": "Away"}})

        assert memory_backend.translate("en", "scoped") == {
            "home": "Home",
            "away": "Away",
        }

    def test_store_translation_expands_dotted_key(self):
        """Dotted keys become nested branches."""
        backend = InMemoryBackend()
        assert backend.store_translation("en", "a.b.c", "ABC") is True

        assert backend.translations == {"en": {"a": {"b": {"c": "ABC"}}}}

    def test_reload_forgets_stored_translations(self, yaml_loader):
        """reload() drops the tree; the loader fills it again on next read."""
        backend = InMemoryBackend(loader=yaml_loader)
        backend.store_translation("en", "runtime", "Runtime")

        backend.reload()

        assert backend.initialized is False
        assert backend.resolve("en", "runtime").is_not_found
        assert backend.translate("en", "common.welcome", {"name": "Ada"}) == (
            "Welcome, Ada!"
        )


class TestInMemoryLocalize:
    """Tests for date and time formatting."""

    @pytest.fixture
    def backend(self, yaml_loader):
        return InMemoryBackend(loader=yaml_loader)

    def test_default_date_format(self, backend):
        """Dates use date.formats.default."""
        assert backend.localize("en", date(2024, 3, 5)) == "2024-03-05"
        assert backend.localize("fr", date(2024, 3, 5)) == "05/03/2024"

    def test_named_format_with_localized_names(self, backend):
        """Day and month names come from the locale."""
        assert backend.localize("en", date(2024, 3, 5), "long") == "Tuesday 05 March 2024"
        assert backend.localize("fr", date(2024, 3, 5), "long") == "mardi 05 mars 2024"

    def test_datetime_uses_time_formats(self, backend):
        """Datetimes use time.formats."""
        moment = datetime(2024, 3, 5, 14, 30)

        assert backend.localize("en", moment) == "2024-03-05 14:30"
        assert backend.localize("en", moment, "short") == "14:30"

    def test_literal_pattern(self, backend):
        """A format containing % is used directly."""
        assert backend.localize("en", date(2024, 3, 5), "%B %Y") == "March 2024"

    def test_unknown_format_raises(self, backend):
        """Unknown format names are missing translations."""
        with pytest.raises(MissingTranslationDataError):
            backend.localize("en", date(2024, 3, 5), "unknown")

    def test_non_date_raises(self, backend):
        """Objects without strftime are rejected."""
        with pytest.raises(TypeError):
            backend.localize("en", "2024-03-05")


SIX_FORM_TAGS = ["zero", "one", "two", "few", "many", "other"]


def six_form_rule(count):
    return SIX_FORM_TAGS[count % len(SIX_FORM_TAGS)]


class TestInMemoryThreadSafety:
    """Concurrent writes to one backend instance."""

    def test_concurrent_plural_writes_keep_every_form(self):
        """Forms written for the same keys from many threads all survive."""
        pluralizers = PluralizerRegistry()
        pluralizers.register("xx", six_form_rule)
        backend = InMemoryBackend(pluralizers=pluralizers)
        keys = [f"counter.key_{i}" for i in range(25)]

        def write_form(count):
            for key in keys:
                backend.store_translation("xx", key, f"form {count}", count)

        threads = []
        for count in range(len(SIX_FORM_TAGS)):
            t = threading.Thread(target=write_form, args=(count,))
            threads.append(t)
            t.start()

        for t in threads:
            t.join()

        for key in keys:
            assert backend.translate("xx", key) == {
                tag: f"form {count}" for count, tag in enumerate(SIX_FORM_TAGS)
            }
