from rdfsyntax.exceptions import UnsupportedSyntaxException
from rdfsyntax.registry import SyntaxRegistry
from rdfsyntax.syntax import RDFSyntax, W3CRDFSyntax, syntax_equals, syntax_hash
from rdfsyntax.w3c import (
    JSONLD,
    NQUADS,
    NTRIPLES,
    RDFA_HTML,
    RDFA_XHTML,
    RDFXML,
    TRIG,
    TURTLE,
    W3C_SYNTAXES,
    w3c_syntaxes,
)

__all__ = [
    "RDFSyntax",
    "W3CRDFSyntax",
    "syntax_equals",
    "syntax_hash",
    "SyntaxRegistry",
    "UnsupportedSyntaxException",
    "W3C_SYNTAXES",
    "w3c_syntaxes",
    "JSONLD",
    "TURTLE",
    "NQUADS",
    "NTRIPLES",
    "RDFA_HTML",
    "RDFA_XHTML",
    "RDFXML",
    "TRIG",
]
