"""Document loading with reference resolution."""

import copy
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from jsonapi_openapi_lint.exceptions import DocumentLoadError
from jsonapi_openapi_lint.resolver import ReferenceResolver
from jsonapi_openapi_lint.settings import ResolverSettings

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def load_document(path: Path) -> Any:
    """Load a JSON or YAML document without resolving references.

    YAML is chosen by file suffix; anything else is parsed as JSON.

    Raises:
        DocumentLoadError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                document = yaml.safe_load(f)
            else:
                document = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentLoadError(f"Failed to load document from {path}: {e}") from e

    logger.debug(f"Loaded document {path}")
    return document


def dereference_document(document: Any, *, settings: ResolverSettings | None = None) -> Any:
    """Resolve a document against a private copy of itself.

    The caller's document is left untouched, so the same fixture can be
    dereferenced any number of times.
    """
    root = copy.deepcopy(document)
    return ReferenceResolver(root, settings=settings).resolve(root)


def dereference_file(path: Path, *, settings: ResolverSettings | None = None) -> Any:
    """Load a document and resolve all $ref statements against it.

    Args:
        path: Path to the JSON or YAML file
        settings: Resolution options, read from the environment when omitted

    Returns:
        The resolved document

    Raises:
        ReferenceResolverError: If the file cannot be loaded or references cannot be resolved
    """
    document = load_document(path)
    return ReferenceResolver(document, settings=settings).resolve(document)
