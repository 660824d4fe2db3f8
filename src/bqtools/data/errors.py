"""Custom exceptions for quest export loading and validation."""
from __future__ import annotations


class QuestDataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(QuestDataError):
    """Raised when export files or directories are missing or unreadable."""


class ParseError(QuestDataError):
    """Raised when a file's text is not a well-formed document."""

    def __init__(self, source: str, offset: int, reason: str) -> None:
        self.source = source
        self.offset = offset
        self.reason = reason
        super().__init__(f"{source}: parse error at byte {offset}: {reason}")


class DataValidationError(QuestDataError):
    """Raised when decoded content fails structural validation."""


class MalformedKeyError(DataValidationError):
    """Raised when a key does not carry a usable ``name:typeCode`` suffix."""

    def __init__(self, source: str, path: str, key: str, reason: str) -> None:
        self.source = source
        self.path = path
        self.key = key
        self.reason = reason
        super().__init__(f"{source}: malformed key '{key}' at {path or '<root>'}: {reason}")


class UnknownTypeCodeError(DataValidationError):
    """Raised when a key suffix names a type code outside the NBT tag range."""

    def __init__(self, source: str, path: str, key: str, type_code: int) -> None:
        self.source = source
        self.path = path
        self.key = key
        self.type_code = type_code
        super().__init__(
            f"{source}: key '{key}' at {path or '<root>'} has unknown type code {type_code}"
        )


class TypeMismatchError(DataValidationError):
    """Raised when a value does not have the type its key declares or its schema expects."""

    def __init__(self, source: str, path: str, expected: str, actual: str) -> None:
        self.source = source
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(f"{source}: {path or '<root>'} expected {expected}, found {actual}")


class MissingFieldError(DataValidationError):
    """Raised when a schema's required field is absent."""

    def __init__(
        self, source: str, schema: str, field_name: str, entity_id: int | None = None
    ) -> None:
        self.source = source
        self.schema = schema
        self.field_name = field_name
        self.entity_id = entity_id
        entity = f" {entity_id}" if entity_id is not None else ""
        super().__init__(f"{source}: {schema}{entity} is missing required field '{field_name}'")


class DataReferenceError(QuestDataError):
    """Raised when identifiers collide or reference missing entities."""


class DuplicateQuestIdError(DataReferenceError):
    """Raised when two quests share an identifier."""

    def __init__(self, quest_id: int, first_source: str, second_source: str) -> None:
        self.quest_id = quest_id
        self.first_source = first_source
        self.second_source = second_source
        super().__init__(
            f"duplicate quest id {quest_id}: defined in {first_source} and {second_source}"
        )


class DuplicateQuestLineIdError(DataReferenceError):
    """Raised when two quest lines share an identifier."""

    def __init__(self, line_id: int, first_source: str, second_source: str) -> None:
        self.line_id = line_id
        self.first_source = first_source
        self.second_source = second_source
        super().__init__(
            f"duplicate quest line id {line_id}: defined in {first_source} and {second_source}"
        )


class DanglingReferenceError(DataReferenceError):
    """Raised when a quest or quest line references a quest id that does not exist."""

    def __init__(self, kind: str, owner_id: int, missing_id: int, source: str) -> None:
        self.kind = kind
        self.owner_id = owner_id
        self.missing_id = missing_id
        self.source = source
        super().__init__(
            f"{source}: {kind} {owner_id} references missing quest id {missing_id}"
        )
