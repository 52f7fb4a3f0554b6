"""
The W3C standardised RDF 1.1 syntaxes.

Other RDF syntaxes exist, e.g. N3 (https://www.w3.org/TeamSubmission/n3/) and TriX, but are not W3C
Recommendations and so are not included here.

See: https://www.w3.org/TR/rdf11-primer/#section-graph-syntax
"""
from rdfsyntax.registry import SyntaxRegistry
from rdfsyntax.syntax import W3CRDFSyntax

JSONLD = W3CRDFSyntax(
    name="JSONLD",
    title="JSON-LD 1.0",
    media_type="application/ld+json",
    file_extension=".jsonld",
    supports_dataset=True,
)
TURTLE = W3CRDFSyntax(
    name="TURTLE",
    title="RDF 1.1 Turtle",
    media_type="text/turtle",
    file_extension=".ttl",
    supports_dataset=False,
)
NQUADS = W3CRDFSyntax(
    name="NQUADS",
    title="RDF 1.1 N-Quads",
    media_type="application/n-quads",
    file_extension=".nq",
    supports_dataset=True,
)
NTRIPLES = W3CRDFSyntax(
    name="NTRIPLES",
    title="RDF 1.1 N-Triples",
    media_type="application/n-triples",
    file_extension=".nt",
    supports_dataset=False,
)
RDFA_HTML = W3CRDFSyntax(
    name="RDFA_HTML",
    title="HTML+RDFa 1.1",
    media_type="text/html",
    file_extension=".html",
    supports_dataset=False,
)
RDFA_XHTML = W3CRDFSyntax(
    name="RDFA_XHTML",
    title="XHTML+RDFa 1.1",
    media_type="application/xhtml+xml",
    file_extension=".xhtml",
    supports_dataset=False,
)
RDFXML = W3CRDFSyntax(
    name="RDFXML",
    title="RDF 1.1 XML Syntax",
    media_type="application/rdf+xml",
    file_extension=".rdf",
    supports_dataset=False,
)
TRIG = W3CRDFSyntax(
    name="TRIG",
    title="RDF 1.1 TriG",
    media_type="application/trig",
    file_extension=".trig",
    supports_dataset=True,
)

# consumers rely on this order, e.g. when taking the first entry as a default. Turtle stays last.
W3C_SYNTAXES = SyntaxRegistry(
    [JSONLD, NQUADS, NTRIPLES, RDFA_HTML, RDFA_XHTML, RDFXML, TRIG, TURTLE]
)


def w3c_syntaxes() -> SyntaxRegistry:
    return W3C_SYNTAXES
