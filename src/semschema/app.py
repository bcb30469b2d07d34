"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from semschema.adapters.schema_document import (
    SchemaDocumentError,
    load_schema_file,
    translate_schema_document,
)
from semschema.config import get_check_config, get_resolution_config, get_schema_config
from semschema.domain.consistency import CheckOptions
from semschema.domain.consistency import check_schema as run_consistency_checks
from semschema.domain.resolution import (
    CategoryComposer,
    Linearizer,
    hierarchy_for,
    virtual_hierarchy_for,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from semschema.adapters.memory import InMemorySchemaSource
    from semschema.config import CheckConfig, ResolutionConfig
    from semschema.domain.consistency import ConsistencyReport, ConsistencyRule
    from semschema.domain.ports import SchemaSource
    from semschema.domain.resolution import CategoryHierarchy, ResolutionResult


log = getLogger(__name__)


def load_schema_source(path: Path | str | None = None) -> InMemorySchemaSource:
    """Load a schema document from ``path`` or from ``SEMSCHEMA_SCHEMA_PATH``."""

    effective_path = path if path is not None else get_schema_config().resolve_schema_path()
    log.info("Loading schema document from %s", effective_path)
    document = load_schema_file(effective_path)
    try:
        source = translate_schema_document(document)
    except ValueError as exc:
        raise SchemaDocumentError(f"Schema document contains invalid records: {exc}") from exc

    log.info(
        f"Loaded schema: categories={len(source.categories())}, "
        f"properties={len(source.properties())}, subobjects={len(source.subobjects())}"
    )
    return source


def _build_linearizer(source: SchemaSource, config: ResolutionConfig | None) -> Linearizer:
    effective_config = config or get_resolution_config()
    return Linearizer(
        source.categories(),
        properties=source.properties(),
        subobjects=source.subobjects(),
        allow_missing_parents=effective_config.allow_missing_parents,
    )


def resolve_categories(
    names: Sequence[str],
    *,
    source: SchemaSource,
    config: ResolutionConfig | None = None,
) -> ResolutionResult:
    """Resolve the combined attributes of ``names`` against ``source``."""

    linearizer = _build_linearizer(source, config)
    log.info("Starting resolution for categories: %s", ", ".join(names) or "<none>")
    result = CategoryComposer(linearizer).resolve(names)
    log.info(
        f"Finished resolution: required_properties={len(result.required_properties)}, "
        f"optional_properties={len(result.optional_properties)}, "
        f"subobjects={len(result.all_subobjects)}"
    )
    return result


def check_schema(
    *,
    source: SchemaSource,
    config: CheckConfig | None = None,
    rules: Sequence[ConsistencyRule] = (),
) -> ConsistencyReport:
    """Run the consistency checker over every record in ``source``."""

    effective_config = config or get_check_config()
    options = CheckOptions(
        warn_missing_display=effective_config.warn_missing_display,
        warn_missing_forms=effective_config.warn_missing_forms,
        warn_naming=effective_config.warn_naming,
    )
    log.info("Starting consistency check: rules=%s", len(rules))
    report = run_consistency_checks(
        source.categories(),
        properties=source.properties(),
        subobjects=source.subobjects(),
        rules=rules,
        options=options,
    )
    log.info(
        f"Finished consistency check: errors={len(report.errors)}, "
        f"warnings={len(report.warnings)}"
    )
    return report


def describe_hierarchy(
    name: str,
    *,
    source: SchemaSource,
    config: ResolutionConfig | None = None,
    parents: Sequence[str] | None = None,
) -> CategoryHierarchy:
    """Describe ``name``'s ancestry; with ``parents`` preview a category not defined yet."""

    linearizer = _build_linearizer(source, config)
    if parents is not None:
        return virtual_hierarchy_for(linearizer, name, parents)
    return hierarchy_for(linearizer, name)


__all__ = ["check_schema", "describe_hierarchy", "load_schema_source", "resolve_categories"]
