# language_filter/core/loader.py

"""List source resolution and built-in category loading.

A list source is resolved once, when it is assigned to a filter, into an
ordered tuple of pattern fragments. Three kinds of source are accepted:

* a sequence of strings (``LiteralSource``)
* a path to a newline-delimited file (``FileSource``)
* a built-in ``Category`` (``CategorySource``)
"""

import yaml
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from language_filter.core.definitions import Category
from language_filter.core.exceptions import (
    ConfigurationError,
    EmptyContentError,
    UnknownContentError,
    UnknownContentFileError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiteralSource:
    items: Tuple[str, ...]


@dataclass(frozen=True)
class FileSource:
    path: Path


@dataclass(frozen=True)
class CategorySource:
    category: Category


ListSource = Union[LiteralSource, FileSource, CategorySource]


def to_source(content: Any) -> ListSource:
    """Validates raw list content and tags it with its source kind.

    Args:
        content: A sequence of strings, a ``str``/``PathLike`` file path,
            or a ``Category``

    Returns:
        The tagged list source

    Raises:
        EmptyContentError: If a sequence has no elements.
        UnknownContentError: If content is of an unsupported type or a
            sequence holds non-string items.
        UnknownContentFileError: If a file path does not exist.
    """
    if isinstance(content, Category):
        return CategorySource(content)

    if isinstance(content, (str, os.PathLike)):
        path = Path(content)
        if not path.is_file():
            error_msg = f'List content file "{content}" can\'t be found.'
            logger.error(error_msg)
            raise UnknownContentFileError(error_msg)
        return FileSource(path)

    if isinstance(content, (list, tuple)):
        if not content:
            logger.error("List content array is empty")
            raise EmptyContentError("List content array is empty.")
        if not all(isinstance(item, str) for item in content):
            logger.error("List content array holds non-string items")
            raise UnknownContentError("List content array items must all be strings.")
        return LiteralSource(tuple(content))

    error_msg = (
        "The list content can be either a list of strings, a path to a file, "
        f"or a Category; got {type(content).__name__}."
    )
    logger.error(error_msg)
    raise UnknownContentError(error_msg)


def read_list_file(path: Path) -> Tuple[str, ...]:
    """Reads one pattern per line, stripping line terminators.

    Blank lines are skipped; no other normalization is applied.
    """
    with open(path, "r", encoding="utf-8") as f:
        lines = [line.rstrip("\r\n") for line in f]
    return tuple(line for line in lines if line)


class ListLoader:
    """Singleton loader for the built-in category manifest.

    Loads ``categories.yaml`` once and caches the category lists it points to
    for the application lifecycle.
    """

    _instance: Optional["ListLoader"] = None
    _config: Dict[str, Any] = {}
    _loaded: bool = False
    _cached_lists: Dict[Category, Tuple[str, ...]] = {}

    def __new__(cls) -> "ListLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not ListLoader._loaded:
            self._load_config()

    def _load_config(self) -> None:
        """Loads categories.yaml from the module directory.

        Raises:
            ConfigurationError: If file is missing, invalid, or empty.
        """
        try:
            config_path = Path(__file__).parent / "categories.yaml"

            if not config_path.exists():
                error_msg = f"Category manifest not found: {config_path}"
                logger.error(error_msg)
                raise ConfigurationError(error_msg)

            with open(config_path, "r", encoding="utf-8") as f:
                ListLoader._config = yaml.safe_load(f)

            if not ListLoader._config:
                raise ConfigurationError("Category manifest is empty or invalid")

            self._validate_config()

            ListLoader._loaded = True
            logger.info(
                "Category manifest loaded successfully",
                extra={
                    "config_path": str(config_path),
                    "category_count": len(ListLoader._config["categories"]),
                },
            )

        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to parse categories.yaml: {e}") from e

    def _validate_config(self) -> None:
        """Validates that every category has a manifest entry.

        Raises:
            ConfigurationError: If sections or categories are missing.
        """
        categories = ListLoader._config.get("categories") or {}
        missing = [
            c.value
            for c in Category
            if c is not Category.DEFAULT and c.value not in categories
        ]
        if missing or "default_category" not in ListLoader._config:
            error_msg = f"Missing categories in manifest: {missing}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

    @classmethod
    def get_instance(cls) -> "ListLoader":
        """Returns the singleton instance of ListLoader."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def default_category(self) -> Category:
        """Returns the category a ``Category.DEFAULT`` matchlist stands for."""
        return Category(self._config["default_category"])

    def get_category_path(self, category: Category) -> Path:
        """Returns the path of the list file backing a category."""
        if category is Category.DEFAULT:
            category = self.default_category()
        entry = self._config["categories"][category.value]
        return Path(__file__).parent / entry["file"]

    def get_description(self, category: Category) -> str:
        """Returns the manifest's human-readable description of a category.

        Args:
            category: Category to describe; ``DEFAULT`` resolves through the manifest

        Returns:
            Description text, empty if the manifest gives none
        """
        if category is Category.DEFAULT:
            category = self.default_category()
        return self._config["categories"][category.value].get("description", "")

    def get_category(self, category: Category) -> Tuple[str, ...]:
        """Returns the pattern fragments of a built-in category.

        Args:
            category: Category to load; ``DEFAULT`` resolves through the manifest

        Returns:
            Ordered tuple of pattern fragments
        """
        if category is Category.DEFAULT:
            category = self.default_category()

        if category in ListLoader._cached_lists:
            return ListLoader._cached_lists[category]

        path = self.get_category_path(category)
        if not path.exists():
            error_msg = f"Category list file not found: {path}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        items = read_list_file(path)
        ListLoader._cached_lists[category] = items
        logger.debug(f"Loaded category '{category.value}' with {len(items)} entries")
        return items

    def load(self, source: ListSource) -> Tuple[str, ...]:
        """Materializes a tagged list source into pattern fragments.

        Raises:
            EmptyContentError: If a file source holds no patterns.
        """
        if isinstance(source, CategorySource):
            return self.get_category(source.category)

        if isinstance(source, FileSource):
            items = read_list_file(source.path)
            if not items:
                error_msg = f'List content file "{source.path}" has no entries.'
                logger.error(error_msg)
                raise EmptyContentError(error_msg)
            return items

        return source.items


def resolve_list(content: Any, allow_empty_default: bool = False) -> Tuple[str, ...]:
    """Validates and loads list content in one step.

    Args:
        content: Raw list content (see ``to_source``). ``None`` and
            ``Category.DEFAULT`` select the default list.
        allow_empty_default: If True the default list is empty (exception
            lists); otherwise it is the manifest's default category.

    Returns:
        Ordered tuple of pattern fragments
    """
    if content is None or content is Category.DEFAULT:
        if allow_empty_default:
            return ()
        return ListLoader.get_instance().get_category(Category.DEFAULT)

    source = to_source(content)
    return ListLoader.get_instance().load(source)
