"""Tests for transkit.i18n.loader module."""

import pytest

from transkit.i18n.exceptions import LoadError
from transkit.i18n.loader import LocaleFileLoader, load_locales, locale_from_path
from transkit.i18n.models import Leaf, Node


@pytest.mark.unit
class TestLocaleFromPath:
    """Tests for locale_from_path."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("en.yml", "en"),
            ("en.extra.yml", "en"),
            ("zh-CN.json", "zh-CN"),
            ("nested/dir/pt.toml", "pt"),
        ],
    )
    def test_locale_is_text_before_first_dot(self, path, expected):
        assert locale_from_path(path) == expected


@pytest.mark.unit
class TestLocaleFileLoader:
    """Tests for LocaleFileLoader."""

    def test_missing_directory_raises(self, tmp_path):
        """A missing root directory fails with LoadError."""
        with pytest.raises(LoadError):
            LocaleFileLoader(tmp_path / "nonexistent")

    def test_discover_sorted_and_recursive(self, tmp_path, write_locale_file):
        """discover() walks subdirectories; a directory's own files come first."""
        write_locale_file("zh-CN.yml", {"a": "1"})
        write_locale_file("en.yml", {"a": "1"})
        write_locale_file("feature/en.json", '{"b": "2"}')
        write_locale_file("notes.txt", "not a locale file")

        loader = LocaleFileLoader(tmp_path)
        discovered = [p.relative_to(tmp_path).as_posix() for p in loader.discover()]

        assert discovered == ["en.yml", "zh-CN.yml", "feature/en.json"]

    def test_discover_base_file_before_overlays(self, tmp_path, write_locale_file):
        write_locale_file("en.extra.yml", {"a": "1"})
        write_locale_file("en.extra.json", '{"b": "2"}')
        write_locale_file("en.yml", {"a": "0"})
        write_locale_file("de.yml", {"a": "1"})

        loader = LocaleFileLoader(tmp_path)
        discovered = [p.name for p in loader.discover()]

        assert discovered == ["de.yml", "en.yml", "en.extra.json", "en.extra.yml"]

    def test_ignore_predicate(self, tmp_path, write_locale_file):
        """Files matched by ignore_if are not discovered."""
        write_locale_file("en.yml", {"a": "1"})
        write_locale_file("drafts/de.yml", {"a": "1"})

        loader = LocaleFileLoader(tmp_path, ignore_if=lambda p: p.startswith("drafts/"))
        discovered = [p.name for p in loader.discover()]

        assert discovered == ["en.yml"]

    def test_custom_parser_table(self, tmp_path, write_locale_file):
        """Only extensions in the parser table are locale files."""
        write_locale_file("en.yml", {"a": "1"})
        write_locale_file("en.props", "a=2")

        def parse_props(text):
            return dict(line.split("=", 1) for line in text.splitlines() if line)

        store = load_locales(tmp_path, parsers={"props": parse_props})

        assert store == {"en": {"a": "2"}}

    def test_parse_file_yaml(self, write_locale_file):
        path = write_locale_file("en.yml", {"messages": {"hello": "Hello"}})
        loader = LocaleFileLoader(path.parent)

        assert loader.parse_file(path) == [
            ("en", Node({"messages": Node({"hello": Leaf("Hello")})}))
        ]

    def test_empty_file_is_empty_tree(self, write_locale_file):
        path = write_locale_file("en.yml", "")
        assert LocaleFileLoader(path.parent).parse_file(path) == [("en", Node())]

    def test_invalid_yaml_raises(self, write_locale_file):
        """Malformed YAML fails with LoadError naming the file."""
        path = write_locale_file("en.yml", "invalid: yaml: content: [")
        with pytest.raises(LoadError) as exc_info:
            LocaleFileLoader(path.parent).parse_file(path)
        assert exc_info.value.path == str(path)

    def test_invalid_json_raises(self, write_locale_file):
        path = write_locale_file("en.json", '{"a": ')
        with pytest.raises(LoadError):
            LocaleFileLoader(path.parent).parse_file(path)

    def test_invalid_toml_raises(self, write_locale_file):
        path = write_locale_file("en.toml", "a = ")
        with pytest.raises(LoadError):
            LocaleFileLoader(path.parent).parse_file(path)

    def test_non_mapping_top_level_raises(self, write_locale_file):
        """A YAML list cannot be a locale tree."""
        path = write_locale_file("en.yml", ["item1", "item2"])
        with pytest.raises(LoadError):
            LocaleFileLoader(path.parent).parse_file(path)

    def test_unsupported_version_raises(self, write_locale_file):
        path = write_locale_file("app.yml", {"_version": 3, "hello": {"en": "Hi"}})
        with pytest.raises(LoadError):
            LocaleFileLoader(path.parent).parse_file(path)

    def test_boolean_version_raises(self, write_locale_file):
        """`_version: true` is not version 1."""
        path = write_locale_file("en.yml", "_version: true\nhello: Hi\n")
        with pytest.raises(LoadError):
            LocaleFileLoader(path.parent).parse_file(path)

    def test_version_one_key_dropped(self, write_locale_file):
        path = write_locale_file("en.yml", {"_version": 1, "hello": "Hi"})
        assert LocaleFileLoader(path.parent).parse_file(path) == [
            ("en", Node({"hello": Leaf("Hi")}))
        ]


@pytest.mark.unit
class TestMultiLocaleFiles:
    """Tests for _version: 2 files carrying several locales."""

    def test_split_per_locale(self, write_locale_file):
        path = write_locale_file(
            "app.yml",
            {
                "_version": 2,
                "hello": {"en": "Hello", "zh-CN": "你好"},
                "greeting": {"formal": {"en": "Good day"}},
            },
        )
        trees = dict(LocaleFileLoader(path.parent).parse_file(path))

        assert trees["en"] == Node({"hello": Leaf("Hello"), "greeting.formal": Leaf("Good day")})
        assert trees["zh-CN"] == Node({"hello": Leaf("你好")})

    def test_key_with_text_and_children(self, write_locale_file):
        """A key can hold texts and nested keys at the same time."""
        write_locale_file(
            "app.yml",
            {
                "_version": 2,
                "nested": {"en": "Hello test", "hello": {"en": "Hello test2"}},
            },
        )
        store = load_locales(write_locale_file("en.yml", {"other": "x"}).parent)

        assert store["en"] == {
            "nested": "Hello test",
            "nested.hello": "Hello test2",
            "other": "x",
        }


@pytest.mark.unit
class TestLoadLocales:
    """Tests for load_locales()."""

    def test_files_for_same_locale_merged(self, tmp_path, write_locale_file):
        """Example: en.yml {a: {b}} and en.extra.yml {a: {c}} merge."""
        write_locale_file("en.yml", {"a": {"b": "1"}})
        write_locale_file("en.extra.yml", {"a": {"c": "2"}})

        assert load_locales(tmp_path) == {"en": {"a.b": "1", "a.c": "2"}}

    def test_later_file_wins(self, tmp_path, write_locale_file):
        """Conflicts resolve in favour of the file later in discovery order."""
        write_locale_file("a/en.yml", {"title": "base"})
        write_locale_file("b/en.yml", {"title": "overlay"})

        assert load_locales(tmp_path)["en"]["title"] == "overlay"

    def test_overlay_file_wins_over_base(self, tmp_path, write_locale_file):
        """en.extra.yml overrides en.yml in the same directory."""
        write_locale_file("en.yml", {"title": "base", "kept": "base"})
        write_locale_file("en.extra.yml", {"title": "overlay"})

        assert load_locales(tmp_path)["en"] == {"title": "overlay", "kept": "base"}

    def test_formats_mixed(self, tmp_path, write_locale_file):
        write_locale_file("en.yml", {"yaml-key": "from yaml"})
        write_locale_file("en.extra.json", '{"custom": {"json-key": "from json"}}')
        write_locale_file("en.extra.toml", '[custom]\ntoml-key = "from toml"\n')

        assert load_locales(tmp_path)["en"] == {
            "yaml-key": "from yaml",
            "custom.json-key": "from json",
            "custom.toml-key": "from toml",
        }

    def test_failure_is_atomic(self, tmp_path, write_locale_file):
        """One broken file fails the whole load."""
        write_locale_file("en.yml", {"a": "1"})
        write_locale_file("fr.yml", "invalid: yaml: content: [")

        with pytest.raises(LoadError):
            load_locales(tmp_path)

    def test_empty_directory(self, tmp_path):
        assert load_locales(tmp_path) == {}

    def test_load_trees_in_discovery_order(self, tmp_path, write_locale_file):
        write_locale_file("fr.yml", {"a": "fr"})
        write_locale_file("en.yml", {"a": "en"})

        locales = [locale for locale, _ in LocaleFileLoader(tmp_path).load_trees()]

        assert locales == ["en", "fr"]
