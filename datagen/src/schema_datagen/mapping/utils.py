"""
Mapping utilities.

A mapping is kept as plain JSON-shaped data, ``{"properties": {name: spec}}``
where a spec is ``{"type"?, "format"?, "properties"?}``. These helpers
normalize raw mapping sources, flatten nested objects into dotted paths,
merge several sources and diff two mappings.
"""

import logging
from typing import Any

from ..shared.exceptions import MappingError
from ..shared.models import FieldType, MappingDiff, TypeChange

logger = logging.getLogger(__name__)


def properties_of(mapping: Any) -> dict[str, Any]:
    """The ``properties`` dict of a mapping; empty when missing or malformed."""
    if not isinstance(mapping, dict):
        return {}
    props = mapping.get("properties")
    if not isinstance(props, dict):
        return {}
    return props


def effective_type(spec: Any) -> str | None:
    """
    Type tag of a field spec.

    A missing ``type`` means ``object`` when ``properties`` is present and
    ``keyword`` otherwise. Non-dict specs have no type (None).
    """
    if not isinstance(spec, dict):
        return None
    declared = spec.get("type")
    if declared:
        return str(declared)
    if "properties" in spec:
        return FieldType.OBJECT.value
    return FieldType.KEYWORD.value


def _type_tag(spec: dict[str, Any]) -> str | None:
    field_type = effective_type(spec)
    if field_type == FieldType.DATE.value and spec.get("format"):
        return f"{field_type} [{spec['format']}]"
    return field_type


def flatten(mapping: dict[str, Any], prefix: str = "") -> dict[str, str]:
    """
    Flatten a mapping into ``{dotted.path: type tag}`` in traversal order.

    Object fields appear before their children. Date fields that declare a
    format are tagged ``"date [format]"``.

    Example:
        >>> flatten({"properties": {"user": {"properties": {"born": {"type": "date", "format": "epoch_millis"}}}}})
        {'user': 'object', 'user.born': 'date [epoch_millis]'}
    """
    out: dict[str, str] = {}
    for name, spec in properties_of(mapping).items():
        path = f"{prefix}.{name}" if prefix else name
        tag = _type_tag(spec) if isinstance(spec, dict) else None
        if tag is not None:
            out[path] = tag
        if isinstance(spec, dict) and isinstance(spec.get("properties"), dict):
            out.update(flatten(spec, path))
    return out


def diff(old: dict[str, Any], new: dict[str, Any]) -> MappingDiff:
    """
    Structural difference between two mappings.

    ``added`` follows the traversal order of ``new``; ``removed`` and
    ``changed`` follow the traversal order of ``old``. A change in a date
    field's declared format counts as a type change.
    """
    old_flat = flatten(old)
    new_flat = flatten(new)

    result = MappingDiff()
    result.added = [path for path in new_flat if path not in old_flat]

    for path, old_tag in old_flat.items():
        if path not in new_flat:
            result.removed.append(path)
        elif new_flat[path] != old_tag:
            result.changed.append(
                TypeChange(field=path, from_type=old_tag, to_type=new_flat[path])
            )

    return result


def merge_properties(base: dict[str, Any], other: dict[str, Any]) -> dict[str, Any]:
    """
    Best-effort union of two properties dicts.

    Object fields present on both sides are merged recursively; for any
    other conflict the field from ``other`` wins.
    """
    out = dict(base)
    for name, spec in other.items():
        existing = out.get(name)
        if (
            isinstance(existing, dict)
            and isinstance(spec, dict)
            and isinstance(existing.get("properties"), dict)
            and isinstance(spec.get("properties"), dict)
        ):
            out[name] = {
                **existing,
                "properties": merge_properties(existing["properties"], spec["properties"]),
            }
        else:
            out[name] = spec
    return out


def _mappings_properties(entry: Any) -> dict[str, Any] | None:
    if not isinstance(entry, dict):
        return None
    mappings = entry.get("mappings")
    if not isinstance(mappings, dict):
        return None
    props = mappings.get("properties")
    if not isinstance(props, dict):
        return None
    return props


def extract_mapping_from_response(response: Any, index: str) -> dict[str, Any] | None:
    """
    Mapping of one index from a get-mapping response.

    Expects ``{index: {"mappings": {"properties": {...}}}}``; returns None
    when the response has no usable entry for ``index``.
    """
    if not isinstance(response, dict):
        return None
    props = _mappings_properties(response.get(index))
    if props is None:
        return None
    return {"properties": props}


def extract_any_mapping(response: Any) -> dict[str, Any] | None:
    """
    Union of every index mapping in a get-mapping response.

    Useful when a pattern or alias resolves to several indices. Later
    indices win on conflicting non-object fields.
    """
    if not isinstance(response, dict):
        return None

    combined: dict[str, Any] | None = None
    for entry in response.values():
        props = _mappings_properties(entry)
        if props is None:
            continue
        combined = props if combined is None else merge_properties(combined, props)

    if combined is None:
        return None
    return {"properties": combined}


def normalize_mapping(raw: Any, strict: bool = False) -> dict[str, Any]:
    """
    Coerce a mapping source into ``{"properties": {...}}``.

    Accepted shapes, in order: a mapping (``{"properties": ...}``), a
    ``{"mappings": {"properties": ...}}`` wrapper, a get-mapping response
    keyed by index name, or a bare properties dict.

    Args:
        raw: Mapping source (parsed JSON), may be None
        strict: Raise MappingError instead of returning an empty mapping

    Raises:
        MappingError: If strict and nothing usable was found
    """
    if isinstance(raw, dict):
        if isinstance(raw.get("properties"), dict):
            return {"properties": raw["properties"]}

        props = _mappings_properties(raw)
        if props is not None:
            return {"properties": props}

        merged = extract_any_mapping(raw)
        if merged is not None:
            return merged

        if raw and all(isinstance(spec, dict) for spec in raw.values()):
            return {"properties": raw}

    if strict:
        raise MappingError("No properties found in mapping source")

    logger.warning("Mapping source has no usable properties, using an empty mapping")
    return {"properties": {}}


def list_fields_by_type(mapping: dict[str, Any], field_type: FieldType | str) -> list[str]:
    """Top-level field names whose effective type is ``field_type``."""
    wanted = FieldType(field_type).value
    return [
        name
        for name, spec in properties_of(mapping).items()
        if effective_type(spec) == wanted
    ]
