"""Locale file discovery and loading.

Scans a directory tree for locale files, parses them with the parser
registered for their extension and turns them into per-locale flat tables.

File naming:
    en.yml          -> locale "en"
    en.extra.yml    -> locale "en" (merged on top of en.yml)
    user/zh-CN.json -> locale "zh-CN"

A file whose top level holds ``_version: 2`` carries several locales at once:

    _version: 2
    hello:
      en: Hello
      zh-CN: 你好
"""

from collections import defaultdict
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

import structlog

from transkit.i18n.exceptions import LoadError
from transkit.i18n.flattener import flatten, join_key
from transkit.i18n.merger import merge_trees
from transkit.i18n.models import (
    Leaf,
    Node,
    TranslationStore,
    format_scalar,
    to_value,
)
from transkit.i18n.parsers import PARSE_ERRORS, PARSERS, Parser

logger = structlog.get_logger()

VERSION_KEY = "_version"

IgnorePredicate = Callable[[str], bool]


def locale_from_path(path: Union[str, Path]) -> str:
    """Derive the locale code from a file name (text before the first dot)."""
    return Path(path).name.split(".", 1)[0]


def _extension(path: Path) -> str:
    return path.suffix[1:].lower()


class LocaleFileLoader:
    """Loader for locale files under a root directory.

    Attributes:
        root: Directory scanned recursively.
        parsers: Extension -> parser table.
        ignore_if: Predicate on the root-relative POSIX path; files for which
            it returns True are skipped.
    """

    def __init__(
        self,
        root: Union[str, Path],
        parsers: Optional[Mapping[str, Parser]] = None,
        ignore_if: Optional[IgnorePredicate] = None,
    ):
        """Initialize the loader.

        Args:
            root: Directory with locale files.
            parsers: Extension -> parser table (default: YAML, JSON, TOML).
            ignore_if: Optional predicate excluding files from discovery.

        Raises:
            LoadError: If the root directory does not exist.
        """
        self.root = Path(root)
        self.parsers: Dict[str, Parser] = dict(PARSERS if parsers is None else parsers)
        self.ignore_if = ignore_if

        if not self.root.is_dir():
            raise LoadError(self.root, "locales directory not found")

    def discover(self) -> List[Path]:
        """Return locale files in merge order.

        Files are grouped by directory and locale; within a group the base
        file (`en.yml`) comes before its overlays (`en.extra.yml`).

        Returns:
            Files with a registered extension that are not ignored.
        """
        files = []
        for path in self.root.rglob("*"):
            if not path.is_file() or _extension(path) not in self.parsers:
                continue
            relative = path.relative_to(self.root).as_posix()
            if self.ignore_if is not None and self.ignore_if(relative):
                logger.debug("locale_file_ignored", file=relative)
                continue
            files.append(path)
        return sorted(files, key=self._merge_order)

    def _merge_order(self, path: Path) -> Tuple[Tuple[str, ...], str, int, str]:
        relative = path.relative_to(self.root)
        return (
            relative.parent.parts,
            locale_from_path(path),
            path.name.count("."),
            path.name,
        )

    def parse_file(self, path: Path) -> List[Tuple[str, Node]]:
        """Parse one file into ``(locale, tree)`` pairs.

        Args:
            path: Locale file.

        Returns:
            One pair for a regular file, one pair per locale for a
            ``_version: 2`` file.

        Raises:
            LoadError: If the file cannot be read or parsed, or its top level
                is not a mapping.
        """
        parser = self.parsers[_extension(path)]
        try:
            data = parser(path.read_text(encoding="utf-8"))
        except (OSError, *PARSE_ERRORS) as e:
            logger.error("locale_file_parse_error", file=str(path), error=str(e))
            raise LoadError(path, str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            logger.error(
                "invalid_locale_file_format",
                file=str(path),
                expected="mapping",
                got=type(data).__name__,
            )
            raise LoadError(path, f"expected a mapping, got {type(data).__name__}")

        version = data.get(VERSION_KEY, 1)
        # bool is an int subclass; `_version: true` must not pass as 1
        if type(version) is not int or version not in (1, 2):
            raise LoadError(path, f"unsupported {VERSION_KEY}: {version!r}")
        if version == 2:
            return _parse_multi_locale(data)
        content = {k: v for k, v in data.items() if k != VERSION_KEY}
        return [(locale_from_path(path), to_value(content))]

    def load_trees(self) -> List[Tuple[str, Node]]:
        """Parse every discovered file, in discovery order."""
        trees: List[Tuple[str, Node]] = []
        for path in self.discover():
            trees.extend(self.parse_file(path))
        return trees

    def load(self) -> TranslationStore:
        """Load, merge and flatten all locale files.

        Returns:
            Mapping locale -> flat table.

        Raises:
            LoadError: If any file fails to load. Nothing is returned
                partially.
        """
        grouped: Dict[str, List[Node]] = defaultdict(list)
        file_count = 0
        for path in self.discover():
            file_count += 1
            for locale, tree in self.parse_file(path):
                grouped[locale].append(tree)

        store = {
            locale: flatten(merge_trees(trees)) for locale, trees in grouped.items()
        }

        logger.info(
            "locales_loaded",
            root=str(self.root),
            file_count=file_count,
            locales=sorted(store),
        )
        return store


def _parse_multi_locale(data: Mapping[str, Any]) -> List[Tuple[str, Node]]:
    """Split a ``_version: 2`` mapping into one tree per locale.

    String values are texts keyed by locale; mappings descend one key level.
    """
    tables: Dict[str, Dict[str, str]] = defaultdict(dict)

    def walk(prefix: str, mapping: Mapping[str, Any]) -> None:
        for key, value in mapping.items():
            key = format_scalar(key)
            if isinstance(value, Mapping):
                walk(join_key(prefix, key), value)
            elif prefix:
                leaf = to_value(value)
                tables[key][prefix] = leaf.text if isinstance(leaf, Leaf) else ""

    walk("", {k: v for k, v in data.items() if k != VERSION_KEY})

    # Keys already contain dots, so each locale gets a one-level tree
    return [
        (locale, Node({key: Leaf(text) for key, text in table.items()}))
        for locale, table in tables.items()
    ]


def load_locales(
    root: Union[str, Path],
    ignore_if: Optional[IgnorePredicate] = None,
    parsers: Optional[Mapping[str, Parser]] = None,
) -> TranslationStore:
    """Load every locale file under ``root`` into a translation store.

    Args:
        root: Directory with locale files.
        ignore_if: Predicate on root-relative paths excluding files.
        parsers: Extension -> parser table (default: YAML, JSON, TOML).

    Returns:
        Mapping locale -> flat table.

    Example:
        store = load_locales("locales", ignore_if=lambda p: p.startswith("drafts/"))
        store["en"]["messages.hello"]
    """
    return LocaleFileLoader(root, parsers=parsers, ignore_if=ignore_if).load()
