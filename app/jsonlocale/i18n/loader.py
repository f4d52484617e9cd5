"""Translation document providers.

Defines the contract for reading translation documents and provides
file-system and package-resource implementations. Each provider parses one
document format (JSON by default, YAML optionally).
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import yaml
from requests.structures import CaseInsensitiveDict

from jsonlocale.configuration import LocalizationSettings
from jsonlocale.exceptions import LocalizationConfigError, TranslationLoadError
from jsonlocale.i18n.key_path import MISSING, resolve_key
from jsonlocale.i18n.models import (
    LANGUAGE_NAME_KEY,
    META_KEY,
    TranslationTree,
    as_tree,
)
from jsonlocale.logging import get_module_logger

logger = get_module_logger()

Location = Union[str, Path]


def _parse_json(text: str) -> Any:
    return json.loads(text)


def _parse_yaml(text: str) -> Any:
    return yaml.safe_load(text)


DOCUMENT_FORMATS: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "json": (".json", _parse_json),
    "yaml": (".yml", _parse_yaml),
}


class LocalizationProvider(ABC):
    """Abstract base for translation document providers.

    A provider knows how to locate a document by (location, name), whether it
    exists, how to list the documents in a location, and how to read it.
    Parsing, error reporting and metadata extraction are shared.

    Attributes:
        document_format: Format name ("json" or "yaml").
        file_extension: Extension of documents in that format.
    """

    def __init__(self, document_format: str = "json"):
        if document_format not in DOCUMENT_FORMATS:
            raise LocalizationConfigError(
                f"Unsupported document format: {document_format}"
            )
        self.document_format = document_format
        self.file_extension, self._parse = DOCUMENT_FORMATS[document_format]

    @abstractmethod
    def source_identifier(self, location: Location, name: str) -> str:
        """Build the identifier of document ``name`` inside ``location``.

        Args:
            location: Directory (file mode) or resource directory.
            name: Document name without extension, usually a language code.

        Returns:
            Identifier accepted by exists(), load_all() and get_language_name().
        """
        pass

    @abstractmethod
    def exists(self, identifier: str) -> bool:
        """Check whether a document exists."""
        pass

    @abstractmethod
    def list_names(self, location: Location) -> List[str]:
        """List document names (without extension) available in ``location``."""
        pass

    @abstractmethod
    def _read_text(self, identifier: str) -> str:
        """Read a document's raw text.

        Raises:
            OSError: If the document cannot be read.
        """
        pass

    def load_all(self, identifier: str) -> TranslationTree:
        """Load and parse a whole document.

        Args:
            identifier: Document identifier from source_identifier().

        Returns:
            The parsed tree, or an empty tree when the document is absent.

        Raises:
            TranslationLoadError: If the document cannot be read or parsed, or
                its root is not an object.
        """
        if not self.exists(identifier):
            return CaseInsensitiveDict()

        try:
            text = self._read_text(identifier)
        except FileNotFoundError:
            logger.warning("translation_document_disappeared", source=identifier)
            return CaseInsensitiveDict()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("translation_read_error", source=identifier, error=str(e))
            raise TranslationLoadError(identifier, str(e)) from e

        try:
            data = self._parse(text)
        except (ValueError, yaml.YAMLError) as e:
            logger.error(
                "translation_parse_error",
                source=identifier,
                document_format=self.document_format,
                error=str(e),
            )
            raise TranslationLoadError(identifier, str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            logger.error(
                "invalid_translation_document",
                source=identifier,
                expected="object",
            )
            raise TranslationLoadError(identifier, "document root must be an object")

        tree = as_tree(data)
        logger.info(
            "translation_document_loaded",
            source=identifier,
            key_count=len(tree),
        )
        return tree

    def get_language_name(self, identifier: str) -> Optional[str]:
        """Read ``_meta_.language_name`` from a document.

        Read and parse errors are logged and reported as "no name".

        Returns:
            The non-empty display name, or None.
        """
        try:
            tree = self.load_all(identifier)
        except TranslationLoadError as e:
            logger.warning(
                "language_name_unavailable", source=identifier, error=str(e)
            )
            return None

        name = resolve_key(tree, f"{META_KEY}.{LANGUAGE_NAME_KEY}")
        if name is MISSING or name is None:
            return None
        name = str(name).strip()
        return name or None


class FileLocalizationProvider(LocalizationProvider):
    """Provider for documents stored as files, e.g. ``lang/en.json``."""

    def source_identifier(self, location: Location, name: str) -> str:
        return str(Path(location) / f"{name}{self.file_extension}")

    def exists(self, identifier: str) -> bool:
        return Path(identifier).is_file()

    def list_names(self, location: Location) -> List[str]:
        directory = Path(location)
        if not directory.is_dir():
            logger.warning("translation_directory_missing", location=str(directory))
            return []
        return sorted(
            path.name[: -len(self.file_extension)]
            for path in directory.iterdir()
            if path.is_file() and path.name.endswith(self.file_extension)
        )

    def _read_text(self, identifier: str) -> str:
        return Path(identifier).read_text(encoding="utf-8-sig")


class ResourceLocalizationProvider(LocalizationProvider):
    """Provider for documents shipped inside a Python package.

    Identifiers are slash-separated paths relative to the package root, e.g.
    ``"lang/en.json"`` for ``mypackage/lang/en.json``.

    Attributes:
        package: Package name or module holding the documents.
    """

    def __init__(
        self,
        package: Union[str, ModuleType],
        document_format: str = "json",
    ):
        super().__init__(document_format)
        self.package = package
        try:
            self._root = resources.files(package)
        except (ModuleNotFoundError, TypeError) as e:
            raise LocalizationConfigError(
                f"Resource package cannot be loaded: {package}"
            ) from e

    def _resource(self, identifier: str):
        node = self._root
        for part in str(identifier).split("/"):
            if part:
                node = node.joinpath(part)
        return node

    def source_identifier(self, location: Location, name: str) -> str:
        prefix = str(location or "").strip("/")
        filename = f"{name}{self.file_extension}"
        return f"{prefix}/{filename}" if prefix else filename

    def exists(self, identifier: str) -> bool:
        return self._resource(identifier).is_file()

    def list_names(self, location: Location) -> List[str]:
        directory = self._resource(str(location or ""))
        if not directory.is_dir():
            logger.warning(
                "translation_resource_directory_missing",
                package=str(self.package),
                location=str(location),
            )
            return []
        return sorted(
            entry.name[: -len(self.file_extension)]
            for entry in directory.iterdir()
            if entry.is_file() and entry.name.endswith(self.file_extension)
        )

    def _read_text(self, identifier: str) -> str:
        return self._resource(identifier).read_text(encoding="utf-8-sig")


def create_provider(config: LocalizationSettings) -> LocalizationProvider:
    """Create the provider matching the configured source mode.

    Args:
        config: Validated localization settings.

    Returns:
        A resource provider in resource mode, otherwise a file provider.
    """
    if config.use_resources:
        return ResourceLocalizationProvider(
            config.resource_package,
            document_format=config.document_format,
        )
    return FileLocalizationProvider(document_format=config.document_format)
