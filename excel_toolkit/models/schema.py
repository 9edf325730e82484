"""Record schema: the declared fields a grid row is bound to."""
import dataclasses
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from excel_toolkit.errors.exceptions import ImportConfigError

ALIAS_METADATA_KEY = "alias"


@dataclass(frozen=True)
class FieldSpec:
    """One declared record field and its optional column alias."""
    name: str
    alias: Optional[str] = None

    @property
    def binding_key(self) -> str:
        """Column label this field binds to: the alias if declared, else the name."""
        return self.alias if self.alias is not None else self.name


@dataclass(frozen=True)
class RecordSchema:
    """A record type together with its explicitly declared fields.

    The record type must be constructible without arguments; every bound
    field is then assigned with setattr.
    """
    record_type: type
    fields: Tuple[FieldSpec, ...]

    def __post_init__(self):
        seen = set()
        for spec in self.fields:
            if spec.name in seen:
                raise ImportConfigError(
                    f"Field '{spec.name}' is declared more than once on {self.record_type.__name__}",
                    details={"record_type": self.record_type.__name__, "field": spec.name}
                )
            seen.add(spec.name)

    @classmethod
    def declare(cls, record_type: type, *fields: Union[str, FieldSpec]) -> "RecordSchema":
        """Declare a schema from field names and FieldSpec entries.

        Example:
            >>> RecordSchema.declare(Contact, "ID", FieldSpec("first_name", "First Name"))
        """
        specs = tuple(f if isinstance(f, FieldSpec) else FieldSpec(f) for f in fields)
        return cls(record_type=record_type, fields=specs)

    @classmethod
    def for_type(cls, record_type: Union[type, "RecordSchema"]) -> "RecordSchema":
        """Derive the schema from a pydantic model or a dataclass.

        Pydantic aliases come from ``Field(alias=...)``; dataclass aliases from
        ``field(metadata={"alias": ...})``. An existing RecordSchema is
        returned unchanged.

        Raises:
            ImportConfigError: If the type declares its fields in neither way
        """
        if isinstance(record_type, RecordSchema):
            return record_type

        if isinstance(record_type, type) and issubclass(record_type, BaseModel):
            specs = []
            for name, info in record_type.model_fields.items():
                alias = info.alias
                if alias is None and isinstance(info.validation_alias, str):
                    alias = info.validation_alias
                specs.append(FieldSpec(name=name, alias=alias))
            return cls(record_type=record_type, fields=tuple(specs))

        if isinstance(record_type, type) and dataclasses.is_dataclass(record_type):
            specs = [
                FieldSpec(name=f.name, alias=f.metadata.get(ALIAS_METADATA_KEY))
                for f in dataclasses.fields(record_type)
                if f.init
            ]
            return cls(record_type=record_type, fields=tuple(specs))

        raise ImportConfigError(
            f"Cannot derive a record schema from {record_type!r}; "
            "use a pydantic model, a dataclass or an explicit RecordSchema",
            details={"record_type": repr(record_type)}
        )

    def new_record(self) -> Any:
        """Create an empty record with every field at its default."""
        try:
            return self.record_type()
        except (TypeError, PydanticValidationError) as e:
            raise ImportConfigError(
                f"Record type {self.record_type.__name__} cannot be created without arguments: {e}",
                details={"record_type": self.record_type.__name__}
            ) from e
