from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator
from rdflib import URIRef

from rdfsyntax.namespaces import FORMATS


@runtime_checkable
class RDFSyntax(Protocol):
    """An RDF serialization syntax.

    Anything exposing these attributes can be compared with the built-in
    syntaxes; only the media type identifies the syntax.
    """

    name: str
    title: str
    media_type: str
    file_extension: str
    supports_dataset: bool


def syntax_equals(a: RDFSyntax, b: RDFSyntax) -> bool:
    return a.media_type.lower() == b.media_type.lower()


def syntax_hash(syntax: RDFSyntax) -> int:
    return hash(syntax.media_type.lower())


# local names in the W3C formats namespace, keyed by media type
_FORMAT_NAMES = {
    "application/ld+json": "JSON-LD",
    "text/turtle": "Turtle",
    "application/n-quads": "N-Quads",
    "application/n-triples": "N-Triples",
    "text/html": "RDFa",
    "application/xhtml+xml": "RDFa",
    "application/rdf+xml": "RDF_XML",
    "application/trig": "TriG",
}


class W3CRDFSyntax(BaseModel):
    """
    name: symbolic identifier, e.g. TURTLE
    title: human readable title, e.g. RDF 1.1 Turtle
    media_type: IANA media type, stored in lower case
    file_extension: canonical file extension including the leading '.', stored in lower case
    supports_dataset: True if the syntax can serialize named graphs (quads)
    """

    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    media_type: str
    file_extension: str
    supports_dataset: bool

    @field_validator("media_type", "file_extension")
    @classmethod
    def lowercase(cls, v: str) -> str:
        return v.lower()

    @property
    def iri(self) -> URIRef | None:
        local_name = _FORMAT_NAMES.get(self.media_type)
        if local_name is None:
            return None
        return FORMATS[local_name]

    def __eq__(self, other) -> bool:
        if other is self:
            return True
        if not isinstance(other, RDFSyntax):
            return NotImplemented
        return syntax_equals(self, other)

    def __hash__(self) -> int:
        return syntax_hash(self)

    def __str__(self) -> str:
        return self.title
