"""BEL 1.0 vocabulary: relationships and term functions.

Both vocabularies are closed. Relationships are accepted in long form
(``increases``) or by symbol (``->``); functions in long form
(``proteinAbundance``) or abbreviated (``p``).
"""

import re
from dataclasses import dataclass
from enum import Enum

# Bare values: Unicode word chars and dots, plus hyphens that don't begin an
# operator (HLA-A is one identifier, A->B is not).
IDENTIFIER = re.compile(r"\w(?:[\w.]|-(?![>|\-]))*")


class Relationship(str, Enum):
    INCREASES = "increases"
    DECREASES = "decreases"
    DIRECTLY_INCREASES = "directlyIncreases"
    DIRECTLY_DECREASES = "directlyDecreases"
    CAUSES_NO_CHANGE = "causesNoChange"
    POSITIVE_CORRELATION = "positiveCorrelation"
    NEGATIVE_CORRELATION = "negativeCorrelation"
    ASSOCIATION = "association"
    TRANSLATED_TO = "translatedTo"
    TRANSCRIBED_TO = "transcribedTo"
    IS_A = "isA"
    SUB_PROCESS_OF = "subProcessOf"
    RATE_LIMITING_STEP_OF = "rateLimitingStepOf"
    BIOMARKER_FOR = "biomarkerFor"
    PROGNOSTIC_BIOMARKER_FOR = "prognosticBiomarkerFor"
    ORTHOLOGOUS = "orthologous"
    ANALOGOUS = "analogous"
    HAS_MEMBER = "hasMember"
    HAS_MEMBERS = "hasMembers"
    HAS_COMPONENT = "hasComponent"
    HAS_COMPONENTS = "hasComponents"
    ACTS_IN = "actsIn"
    INCLUDES = "includes"
    TRANSLOCATES = "translocates"
    HAS_PRODUCT = "hasProduct"
    HAS_VARIANT = "hasVariant"
    HAS_MODIFICATION = "hasModification"
    REACTANT_IN = "reactantIn"

    @property
    def symbol(self) -> str | None:
        return _RELATIONSHIP_SYMBOLS.get(self)

    def to_bel(self) -> str:
        return self.symbol or self.value

    @classmethod
    def lookup(cls, text: str) -> "Relationship | None":
        """Resolve a long name or symbol; None if ``text`` is not a relationship."""
        if text in _SYMBOL_RELATIONSHIPS:
            return _SYMBOL_RELATIONSHIPS[text]
        try:
            return cls(text)
        except ValueError:
            return None


_RELATIONSHIP_SYMBOLS = {
    Relationship.INCREASES: "->",
    Relationship.DECREASES: "-|",
    Relationship.DIRECTLY_INCREASES: "=>",
    Relationship.DIRECTLY_DECREASES: "=|",
    Relationship.ASSOCIATION: "--",
    Relationship.TRANSLATED_TO: ">>",
    Relationship.TRANSCRIBED_TO: ":>",
}
_SYMBOL_RELATIONSHIPS = {symbol: rel for rel, symbol in _RELATIONSHIP_SYMBOLS.items()}

# Longest first: "=>" must never lex as "=" then ">"
RELATIONSHIP_SYMBOLS = sorted(_SYMBOL_RELATIONSHIPS, key=len, reverse=True)


@dataclass(frozen=True)
class Function:
    long_name: str
    short_name: str | None = None

    @property
    def names(self) -> tuple[str, ...]:
        if self.short_name:
            return (self.long_name, self.short_name)
        return (self.long_name,)


FUNCTIONS = (
    Function("abundance", "a"),
    Function("biologicalProcess", "bp"),
    Function("catalyticActivity", "cat"),
    Function("cellSecretion", "sec"),
    Function("cellSurfaceExpression", "surf"),
    Function("chaperoneActivity", "chap"),
    Function("complexAbundance", "complex"),
    Function("compositeAbundance", "composite"),
    Function("degradation", "deg"),
    Function("fusion", "fus"),
    Function("geneAbundance", "g"),
    Function("gtpBoundActivity", "gtp"),
    Function("kinaseActivity", "kin"),
    Function("list"),
    Function("microRNAAbundance", "m"),
    Function("molecularActivity", "act"),
    Function("pathology", "path"),
    Function("peptidaseActivity", "pep"),
    Function("phosphataseActivity", "phos"),
    Function("products"),
    Function("proteinAbundance", "p"),
    Function("proteinModification", "pmod"),
    Function("reactants"),
    Function("reaction", "rxn"),
    Function("ribosylationActivity", "ribo"),
    Function("rnaAbundance", "r"),
    Function("substitution", "sub"),
    Function("transcriptionalActivity", "tscript"),
    Function("translocation", "tloc"),
    Function("transportActivity", "tport"),
    Function("truncation", "trunc"),
)

_FUNCTIONS_BY_NAME = {name: fx for fx in FUNCTIONS for name in fx.names}


def function_for(name: str) -> Function | None:
    """Look up a term function by long or short name."""
    return _FUNCTIONS_BY_NAME.get(name)
