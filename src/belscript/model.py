"""Objects produced by parsing BEL script."""

from collections.abc import Iterator
from enum import Enum
from typing import Annotated
from typing import Literal as TypingLiteral

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .language import IDENTIFIER, Relationship


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class ReferenceKind(str, Enum):
    URL = "URL"
    PATTERN = "PATTERN"
    LIST = "LIST"


class StatementShape(str, Enum):
    SUBJECT_ONLY = "subject_only"
    SIMPLE = "simple"
    NESTED = "nested"


# Directives
class DocumentProperty(_Node):
    """``SET DOCUMENT Name = "value"``"""

    type: TypingLiteral["document_property"] = "document_property"
    name: str
    value: str


class NamespaceDefinition(_Node):
    """``DEFINE NAMESPACE HGNC AS URL "..."``"""

    type: TypingLiteral["namespace_definition"] = "namespace_definition"
    prefix: str
    kind: ReferenceKind
    reference: str | tuple[str, ...]  # tuple only for LIST


class AnnotationDefinition(_Node):
    """``DEFINE ANNOTATION Dosage AS PATTERN "..."``

    PATTERN references are kept verbatim; they are not compiled.
    """

    type: TypingLiteral["annotation_definition"] = "annotation_definition"
    name: str
    kind: ReferenceKind
    reference: str | tuple[str, ...]


class Annotation(_Node):
    """``SET Disease = "Atherosclerosis"`` - applies to the statements that follow."""

    type: TypingLiteral["annotation"] = "annotation"
    name: str
    value: str | tuple[str, ...]


class Unset(_Node):
    """``UNSET Disease`` or ``UNSET {Disease, Species}``"""

    type: TypingLiteral["unset"] = "unset"
    names: tuple[str, ...]


class StatementGroup(_Node):
    type: TypingLiteral["statement_group"] = "statement_group"
    name: str


# Terms and statements
class Parameter(_Node):
    """A term argument that is not itself a term: ``HGNC:MYC``, ``"lipid oxidation"``, ``473``."""

    type: TypingLiteral["parameter"] = "parameter"
    prefix: str | None = None
    value: str

    def to_bel(self) -> str:
        value = self.value
        if not IDENTIFIER.fullmatch(value):
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            value = f'"{escaped}"'
        if self.prefix:
            return f"{self.prefix}:{value}"
        return value


class Term(_Node):
    """Function application, e.g. ``p(MGI:Akt1, pmod(P, S, 473))``."""

    type: TypingLiteral["term"] = "term"
    function: str
    arguments: tuple["Argument", ...] = ()

    def walk(self) -> Iterator["Parameter | Term"]:
        """Yield parameters and nested terms in post-order, this term last."""
        for arg in self.arguments:
            if isinstance(arg, Term):
                yield from arg.walk()
            else:
                yield arg
        yield self

    def to_bel(self) -> str:
        args = ",".join(arg.to_bel() for arg in self.arguments)
        return f"{self.function}({args})"


class Statement(_Node):
    """Subject term with an optional relationship to a term or a nested statement."""

    type: TypingLiteral["statement"] = "statement"
    subject: Term
    relationship: Relationship | None = None
    object: "StatementObject | None" = None
    comment: str | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> "Statement":
        if (self.relationship is None) != (self.object is None):
            raise ValueError("relationship and object must be given together")
        return self

    @property
    def subject_only(self) -> bool:
        return self.object is None

    @property
    def simple(self) -> bool:
        return isinstance(self.object, Term)

    @property
    def nested(self) -> bool:
        return isinstance(self.object, Statement)

    @property
    def shape(self) -> StatementShape:
        if self.nested:
            return StatementShape.NESTED
        if self.simple:
            return StatementShape.SIMPLE
        return StatementShape.SUBJECT_ONLY

    def walk(self) -> Iterator[Parameter | Term]:
        """Parameters and terms of subject then object; statements are not yielded."""
        yield from self.subject.walk()
        if self.object is not None:
            yield from self.object.walk()

    def _render(self) -> str:
        if self.object is None:
            return self.subject.to_bel()
        if isinstance(self.object, Statement):
            obj = f"({self.object._render()})"
        else:
            obj = self.object.to_bel()
        return f"{self.subject.to_bel()} {self.relationship.to_bel()} {obj}"

    def to_bel(self) -> str:
        if self.comment:
            return f"{self._render()} //{self.comment}"
        return self._render()


Argument = Annotated[Parameter | Term, Field(discriminator="type")]
StatementObject = Annotated[Term | Statement, Field(discriminator="type")]

BELObject = Annotated[
    DocumentProperty
    | NamespaceDefinition
    | AnnotationDefinition
    | Annotation
    | Unset
    | StatementGroup
    | Parameter
    | Term
    | Statement,
    Field(discriminator="type"),
]


# Rebuild models for forward references
Term.model_rebuild()
Statement.model_rebuild()
