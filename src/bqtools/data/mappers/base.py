"""Shared field access for schema mappers."""
from __future__ import annotations

from types import MappingProxyType
from typing import Generic, Mapping, Sequence, TypeVar

from bqtools.data.errors import MissingFieldError, TypeMismatchError
from bqtools.data.nbt.tags import ARRAY_TAGS, INTEGER_TAGS, NbtValue, TagType, describe_shape
from bqtools.domain.defs import ItemStackDef
from bqtools.domain.quest_id import quest_id_from_parts

T = TypeVar("T")

Fields = Mapping[str, NbtValue]


class SchemaMapper(Generic[T]):
    """Common typed access for turning a normalized tree into one record.

    A mapper is created per document. It records the entity id once read so
    later errors can name it, and never returns a partially built record:
    either ``map`` returns or it raises.
    """

    schema = "record"

    def __init__(self, source: str, prefix: str = "") -> None:
        self._source = source
        self._prefix = prefix
        self._entity_id: int | None = None

    def map(self, root: NbtValue) -> T:
        fields = self._require_compound(root, self._prefix)
        return self._build(fields)

    def _build(self, fields: Fields) -> T:
        """Convert a normalized compound into a typed record."""
        raise NotImplementedError

    def _path(self, base: str, name: str) -> str:
        return f"{base}.{name}" if base else name

    def _missing(self, field_name: str) -> MissingFieldError:
        return MissingFieldError(self._source, self.schema, field_name, self._entity_id)

    def _mismatch(self, path: str, expected: str, value: NbtValue) -> TypeMismatchError:
        actual = value.tag.label
        if value.tag in (TagType.LIST, TagType.COMPOUND):
            actual = f"{actual} ({describe_shape(value)})"
        return TypeMismatchError(self._source, path, expected, actual)

    def _require_compound(self, value: NbtValue, path: str) -> Fields:
        if not value.is_compound:
            raise self._mismatch(path, "Compound", value)
        return value.value

    def _require_sequence(self, value: NbtValue, path: str) -> Sequence[NbtValue]:
        if value.is_compound and not value.value:
            return ()
        if value.tag in ARRAY_TAGS or not value.is_sequence:
            raise self._mismatch(path, "List", value)
        return value.value

    def _get_typed(self, fields: Fields, name: str, base: str, tags: frozenset | tuple) -> NbtValue | None:
        value = fields.get(name)
        if value is None:
            return None
        if value.tag not in tags:
            expected = "/".join(tag.label for tag in sorted(tags))
            raise self._mismatch(self._path(base, name), expected, value)
        return value

    def _require_int(self, fields: Fields, name: str, base: str) -> int:
        value = self._get_typed(fields, name, base, INTEGER_TAGS)
        if value is None:
            raise self._missing(self._path(base, name))
        return value.value

    def _optional_int(self, fields: Fields, name: str, base: str, default: int) -> int:
        value = self._get_typed(fields, name, base, INTEGER_TAGS)
        return default if value is None else value.value

    def _optional_str(self, fields: Fields, name: str, base: str, default: str) -> str:
        value = self._get_typed(fields, name, base, (TagType.STRING,))
        return default if value is None else value.value

    def _optional_flag(self, fields: Fields, name: str, base: str, default: bool) -> bool:
        value = self._get_typed(fields, name, base, (TagType.BYTE,))
        return default if value is None else value.value != 0

    def _read_id(self, fields: Fields, prefix: str, legacy_names: tuple[str, ...], base: str) -> int:
        """Read an identifier from ``<prefix>High``/``<prefix>Low`` or a legacy single-int field."""
        high_name = f"{prefix}High"
        low_name = f"{prefix}Low"
        if high_name in fields or low_name in fields:
            high = self._optional_int(fields, high_name, base, 0)
            low = self._optional_int(fields, low_name, base, 0)
            return quest_id_from_parts(high, low)
        for name in legacy_names:
            if name in fields:
                return self._require_int(fields, name, base)
        raise self._missing(self._path(base, low_name))

    def _properties(self, fields: Fields, base: str) -> tuple[Fields, str]:
        """Locate the display-properties block, falling back to the record itself."""
        props = fields.get("properties")
        if props is None:
            return fields, base
        props_path = self._path(base, "properties")
        container = self._require_compound(props, props_path)
        inner = container.get("betterquesting")
        if inner is not None:
            inner_path = self._path(props_path, "betterquesting")
            return self._require_compound(inner, inner_path), inner_path
        for name, child in container.items():
            if child.is_compound:
                return child.value, self._path(props_path, name)
        return container, props_path

    def _read_icon(self, fields: Fields, base: str) -> ItemStackDef | None:
        value = self._get_typed(fields, "icon", base, (TagType.COMPOUND,))
        if value is None:
            return None
        icon_path = self._path(base, "icon")
        icon = self._require_compound(value, icon_path)
        item_id = self._get_typed(icon, "id", icon_path, (TagType.STRING,))
        if item_id is None:
            raise self._missing(self._path(icon_path, "id"))
        return ItemStackDef(
            item_id=item_id.value,
            damage=self._optional_int(icon, "Damage", icon_path, 0),
            count=self._optional_int(icon, "Count", icon_path, 1),
            oredict=self._optional_str(icon, "OreDict", icon_path, ""),
        )

    @staticmethod
    def _freeze(fields: Mapping[str, NbtValue]) -> Mapping[str, NbtValue]:
        return MappingProxyType(dict(fields))
