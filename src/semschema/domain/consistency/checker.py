"""Consistency checks over a whole schema, reported instead of raised.

The checker re-walks the same structural conditions the resolution core
enforces (missing references, cycles, inconsistent hierarchies) and reports
them as errors. Bucket overlap is reported as a warning that states the
promotion outcome; it never blocks anything.

Custom rules are plain callables passed per call; there is no registry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias, cast

from semschema.domain.resolution import (
    CycleError,
    InconsistentLinearizationError,
    Linearizer,
)

from .report import ConsistencyReport, format_error, format_warning

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from semschema.domain.model import CategoryRecord, PropertyRecord, SubobjectRecord

log = logging.getLogger(__name__)

ConsistencyRule: TypeAlias = """Callable[
    [
        Mapping[str, CategoryRecord],
        Mapping[str, PropertyRecord],
        Mapping[str, SubobjectRecord],
    ],
    ConsistencyReport,
]"""


@dataclass(frozen=True, slots=True, kw_only=True)
class CheckOptions:
    """Toggles for advisory warnings; errors cannot be switched off."""

    warn_missing_display: bool = True
    warn_missing_forms: bool = True
    warn_naming: bool = True


def check_schema(
    categories: Mapping[str, CategoryRecord],
    *,
    properties: Mapping[str, PropertyRecord] | None = None,
    subobjects: Mapping[str, SubobjectRecord] | None = None,
    rules: Sequence[ConsistencyRule] = (),
    options: CheckOptions | None = None,
) -> ConsistencyReport:
    """Return every error and warning found in the supplied maps.

    Property and subobject references are only checked when the corresponding
    map is supplied.
    """

    effective_options = options or CheckOptions()
    report = ConsistencyReport()

    for name, record in categories.items():
        report += _check_category(
            name,
            record,
            categories=categories,
            properties=properties,
            subobjects=subobjects,
            options=effective_options,
        )
    for name, record in (subobjects or {}).items():
        report += _check_subobject(name, record, properties=properties)
    for name, record in (properties or {}).items():
        report += _check_property(
            name,
            record,
            categories=categories,
            properties=properties or {},
            options=effective_options,
        )

    report += _check_hierarchy(categories)
    if properties is not None:
        report += _check_unused_properties(categories, subobjects or {}, properties)
    report += _run_rules(rules, categories, properties or {}, subobjects or {})

    log.debug(
        "Checked %s categories: %s errors, %s warnings",
        len(categories),
        len(report.errors),
        len(report.warnings),
    )
    return report


def _check_category(
    name: str,
    record: CategoryRecord,
    *,
    categories: Mapping[str, CategoryRecord],
    properties: Mapping[str, PropertyRecord] | None,
    subobjects: Mapping[str, SubobjectRecord] | None,
    options: CheckOptions,
) -> ConsistencyReport:
    errors: list[str] = []
    warnings: list[str] = []

    if options.warn_naming and any(char in name for char in "_-"):
        warnings.append(
            format_warning(
                "Category",
                name,
                "name contains underscores or hyphens; spaces are recommended",
            )
        )

    errors.extend(
        format_error(
            "Category",
            name,
            f"parent category '{parent}' does not exist in schema",
            f"Add '{parent}' to the categories section or remove it from parents",
        )
        for parent in record.parents
        if parent not in categories
    )

    if properties is not None:
        errors.extend(
            _undefined_references(
                "Category", name, "property", record.required_properties, properties, "required"
            )
        )
        errors.extend(
            _undefined_references(
                "Category", name, "property", record.optional_properties, properties, "optional"
            )
        )
        errors.extend(_check_sections(name, record, properties))
    if subobjects is not None:
        errors.extend(
            _undefined_references(
                "Category", name, "subobject", record.required_subobjects, subobjects, "required"
            )
        )
        errors.extend(
            _undefined_references(
                "Category", name, "subobject", record.optional_subobjects, subobjects, "optional"
            )
        )

    if record.promoted_properties:
        warnings.append(
            _promotion_warning("Category", name, "properties", record.promoted_properties)
        )
    if record.promoted_subobjects:
        warnings.append(
            _promotion_warning("Category", name, "subobjects", record.promoted_subobjects)
        )

    if not record.all_properties:
        warnings.append(format_warning("Category", name, "no properties defined"))
    if options.warn_missing_display and not record.display:
        warnings.append(format_warning("Category", name, "missing display configuration"))
    if options.warn_missing_forms and not record.forms:
        warnings.append(format_warning("Category", name, "missing form configuration"))

    return ConsistencyReport(errors=tuple(errors), warnings=tuple(warnings))


def _check_sections(
    name: str,
    record: CategoryRecord,
    properties: Mapping[str, PropertyRecord],
) -> list[str]:
    """Check display/forms layout; the mappings are opaque, so shapes are checked too."""

    errors: list[str] = []
    header = record.display.get("header")
    if header is not None and not _is_list(header):
        errors.append(
            format_error(
                "Category",
                name,
                "display.header must be an array",
                'Use a list of property names like ["Has name", "Has email"]',
            )
        )
    elif header is not None:
        errors.extend(
            format_error(
                "Category",
                name,
                f"display header property '{prop}' is not defined in schema",
                f"Add '{prop}' to properties or remove it from display header",
            )
            for prop in _names(header)
            if prop not in properties
        )

    for area, config in (("display", record.display), ("forms", record.forms)):
        sections = config.get("sections")
        if sections is None:
            continue
        if not _is_list(sections):
            errors.append(
                format_error(
                    "Category",
                    name,
                    f"{area}.sections must be an array",
                    "Use a list of section objects",
                )
            )
            continue
        for index, section in enumerate(sections):
            errors.extend(_check_section(name, area, index, section, properties))
    return errors


def _check_section(
    name: str,
    area: str,
    index: int,
    section: object,
    properties: Mapping[str, PropertyRecord],
) -> list[str]:
    if not isinstance(section, Mapping):
        return [
            format_error(
                "Category",
                name,
                f"{area}.sections[{index}] must be an object",
                f"Use an object with 'name' and 'properties' for {area} section {index}",
            )
        ]

    layout = cast(Mapping[str, Any], section)
    errors: list[str] = []
    if "name" not in layout:
        errors.append(
            format_error(
                "Category",
                name,
                f"{area}.sections[{index}] missing 'name' field",
                f"Add a 'name' field to {area} section {index}",
            )
        )
    section_properties = layout.get("properties")
    if section_properties is None:
        return errors
    if not _is_list(section_properties):
        errors.append(
            format_error(
                "Category",
                name,
                f"{area}.sections[{index}].properties must be an array",
                "Use a list of property names",
            )
        )
        return errors
    errors.extend(
        format_error(
            "Category",
            name,
            f"{area} section property '{prop}' is not defined in schema",
            f"Add '{prop}' to properties or remove it from this {area} section",
        )
        for prop in _names(section_properties)
        if prop not in properties
    )
    return errors


def _is_list(value: object) -> bool:
    return isinstance(value, list | tuple)


def _names(values: Iterable[Any]) -> list[str]:
    # entries that are not strings cannot name a property
    return [value for value in values if isinstance(value, str)]



def _check_subobject(
    name: str,
    record: SubobjectRecord,
    *,
    properties: Mapping[str, PropertyRecord] | None,
) -> ConsistencyReport:
    errors: list[str] = []
    warnings: list[str] = []
    if properties is not None:
        errors.extend(
            _undefined_references(
                "Subobject", name, "property", record.required_properties, properties, "required"
            )
        )
        errors.extend(
            _undefined_references(
                "Subobject", name, "property", record.optional_properties, properties, "optional"
            )
        )
    if record.promoted_properties:
        warnings.append(
            _promotion_warning("Subobject", name, "properties", record.promoted_properties)
        )
    return ConsistencyReport(errors=tuple(errors), warnings=tuple(warnings))


def _check_property(
    name: str,
    record: PropertyRecord,
    *,
    categories: Mapping[str, CategoryRecord],
    properties: Mapping[str, PropertyRecord],
    options: CheckOptions,
) -> ConsistencyReport:
    errors: list[str] = []
    warnings: list[str] = []
    if options.warn_naming and not name.startswith("Has "):
        warnings.append(
            format_warning("Property", name, 'name should start with "Has " by convention')
        )
    if record.range_category is not None and record.range_category not in categories:
        errors.append(
            format_error(
                "Property",
                name,
                f"rangeCategory '{record.range_category}' is not defined in schema",
                f"Add '{record.range_category}' to the categories section or remove rangeCategory",
            )
        )
    if record.subproperty_of is not None and record.subproperty_of not in properties:
        errors.append(
            format_error(
                "Property",
                name,
                f"subpropertyOf '{record.subproperty_of}' is not defined in schema",
                f"Add '{record.subproperty_of}' to the properties section or remove subpropertyOf",
            )
        )
    return ConsistencyReport(errors=tuple(errors), warnings=tuple(warnings))


def _check_hierarchy(categories: Mapping[str, CategoryRecord]) -> ConsistencyReport:
    # missing parents are reported per category above; tolerate them here so
    # they do not hide cycles further down
    linearizer = Linearizer(categories, allow_missing_parents=True)
    errors = tuple(
        str(failure)
        for failure in linearizer.validate()
        if isinstance(failure, CycleError | InconsistentLinearizationError)
    )
    return ConsistencyReport(errors=errors)


def _check_unused_properties(
    categories: Mapping[str, CategoryRecord],
    subobjects: Mapping[str, SubobjectRecord],
    properties: Mapping[str, PropertyRecord],
) -> ConsistencyReport:
    used: set[str] = set()
    for category in categories.values():
        used.update(category.all_properties)
    for subobject in subobjects.values():
        used.update(subobject.all_properties)
    warnings = tuple(
        format_warning("Property", name, "not used by any category or subobject")
        for name in properties
        if name not in used
    )
    return ConsistencyReport(warnings=warnings)


def _run_rules(
    rules: Sequence[ConsistencyRule],
    categories: Mapping[str, CategoryRecord],
    properties: Mapping[str, PropertyRecord],
    subobjects: Mapping[str, SubobjectRecord],
) -> ConsistencyReport:
    report = ConsistencyReport()
    for rule in rules:
        rule_name = getattr(rule, "__name__", repr(rule))
        try:
            report += rule(categories, properties, subobjects)
        except Exception as exc:  # noqa: BLE001
            log.warning("Consistency rule %s failed", rule_name, exc_info=True)
            report += ConsistencyReport(errors=(f"Rule '{rule_name}' failed: {exc}",))
    return report


def _undefined_references(
    kind: str,
    name: str,
    reference_kind: str,
    references: Iterable[str],
    defined: Mapping[str, object],
    bucket: str,
) -> list[str]:
    section = "properties" if reference_kind == "property" else "subobjects"
    return [
        format_error(
            kind,
            name,
            f"{bucket} {reference_kind} '{reference}' is not defined in schema",
            f"Add '{reference}' to the {section} section or remove it from this {kind.lower()}",
        )
        for reference in references
        if reference not in defined
    ]


def _promotion_warning(kind: str, name: str, bucket: str, promoted: Sequence[str]) -> str:
    return format_warning(
        kind,
        name,
        f"{bucket} listed as both required and optional; promoted to required: "
        + ", ".join(promoted),
    )


__all__ = ["CheckOptions", "ConsistencyRule", "check_schema"]
