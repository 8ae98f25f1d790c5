# Pydantic data models for analysis results: FunctionKind, Parameter, FunctionAnalysis.

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class KindTag(str, Enum):
    """Which locator rule produced a function unit."""

    CONSTRUCTOR = "constructor"
    INITIALIZER = "initializer"
    NAMED = "named"


class ValidationTag(str, Enum):
    """How a zero address validation was written in the function body."""

    EQUALITY_CHECK = "equality_check"
    REQUIRE_CHECK = "require_check"


class FunctionKind(BaseModel):
    """
    Constructor, initializer, or any other function identified by its name.

    Only the named variant carries a name; it serializes as
    {"tag": "named", "name": "..."} so it stays distinct from the two fixed kinds.
    """

    model_config = ConfigDict(frozen=True)

    tag: KindTag
    name: Optional[str] = None

    @model_validator(mode="after")
    def _check_name(self) -> "FunctionKind":
        if self.tag is KindTag.NAMED and not self.name:
            raise ValueError("named function kind requires a name")
        if self.tag is not KindTag.NAMED and self.name is not None:
            raise ValueError(f"{self.tag.value} kind does not take a name")
        return self

    @classmethod
    def constructor(cls) -> "FunctionKind":
        return cls(tag=KindTag.CONSTRUCTOR)

    @classmethod
    def initializer(cls) -> "FunctionKind":
        return cls(tag=KindTag.INITIALIZER)

    @classmethod
    def named(cls, name: str) -> "FunctionKind":
        return cls(tag=KindTag.NAMED, name=name)

    @property
    def display_name(self) -> str:
        if self.tag is KindTag.CONSTRUCTOR:
            return "Constructor"
        if self.tag is KindTag.INITIALIZER:
            return "Initialize function"
        return f"Function '{self.name}'"


class Parameter(BaseModel):
    """An address-typed parameter: full type text as written plus its name."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    declared_type: str = Field(..., alias="type", description="e.g. 'address[] calldata'")
    name: str

    def __str__(self) -> str:
        return f"{self.declared_type} {self.name}"


class FunctionAnalysis(BaseModel):
    """Classification of one located function (constructor, initialize, or other)."""

    model_config = ConfigDict(frozen=True)

    kind: FunctionKind
    source_file: str = Field(..., description="Base name of the file the function came from")
    raw_parameters: str
    reconstructed_code: str
    address_parameters: Tuple[Parameter, ...] = ()
    validated_names: Tuple[str, ...] = ()
    missing_names: Tuple[str, ...] = ()
    tags: Tuple[ValidationTag, ...] = ()

    @property
    def has_address_parameters(self) -> bool:
        return bool(self.address_parameters)

    @property
    def is_fully_validated(self) -> bool:
        return self.has_address_parameters and not self.missing_names

    @property
    def is_partially_validated(self) -> bool:
        return bool(self.missing_names) and bool(self.validated_names)

    @property
    def is_unvalidated(self) -> bool:
        return self.has_address_parameters and not self.validated_names
