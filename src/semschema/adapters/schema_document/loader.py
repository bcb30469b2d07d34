"""Read schema documents from JSON or YAML files."""

from __future__ import annotations

import json
import logging
from enum import StrEnum
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import SchemaDocument

log = logging.getLogger(__name__)


class SchemaDocumentError(ValueError):
    """Raised when a schema document cannot be read, parsed or validated."""


class DocumentFormat(StrEnum):
    JSON = "json"
    YAML = "yaml"


_SUFFIX_FORMATS = {
    ".json": DocumentFormat.JSON,
    ".yaml": DocumentFormat.YAML,
    ".yml": DocumentFormat.YAML,
}


def detect_format(content: str) -> DocumentFormat:
    stripped = content.lstrip()
    if stripped.startswith(("{", "[")):
        return DocumentFormat.JSON
    return DocumentFormat.YAML


def parse_schema_document(
    content: str,
    *,
    document_format: DocumentFormat | None = None,
) -> SchemaDocument:
    fmt = document_format or detect_format(content)
    try:
        raw: Any = json.loads(content) if fmt is DocumentFormat.JSON else yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SchemaDocumentError(f"Invalid {fmt.value.upper()} schema document: {exc}") from exc

    if not isinstance(raw, dict):
        raise SchemaDocumentError("Schema document root must be a mapping")
    try:
        return SchemaDocument.model_validate(raw)
    except ValidationError as exc:
        raise SchemaDocumentError(f"Schema document failed validation: {exc}") from exc


def load_schema_file(path: Path | str) -> SchemaDocument:
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaDocumentError(f"Cannot read schema file {file_path}: {exc}") from exc

    fmt = _SUFFIX_FORMATS.get(file_path.suffix.lower())
    log.debug("Loading schema document %s (format=%s)", file_path, fmt or "auto")
    return parse_schema_document(content, document_format=fmt)


def dump_schema_document(
    document: dict[str, Any],
    *,
    document_format: DocumentFormat = DocumentFormat.YAML,
) -> str:
    if document_format is DocumentFormat.JSON:
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)


__all__ = [
    "DocumentFormat",
    "SchemaDocumentError",
    "detect_format",
    "dump_schema_document",
    "load_schema_file",
    "parse_schema_document",
]
