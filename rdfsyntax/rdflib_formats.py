from typing import Optional

from rdfsyntax.syntax import RDFSyntax
from rdfsyntax.w3c import W3C_SYNTAXES

# rdflib parser / serializer plugin names, keyed by media type.
# rdflib dropped its RDFa parser in 6.0, so text/html and application/xhtml+xml have no entry.
RDFLIB_FORMATS = {
    "application/ld+json": "json-ld",
    "text/turtle": "turtle",
    "application/n-quads": "nquads",
    "application/n-triples": "nt",
    "application/rdf+xml": "xml",
    "application/trig": "trig",
}

# other names rdflib accepts for the same plugins
RDFLIB_FORMAT_ALIASES = {
    "ttl": "turtle",
    "nt11": "nt",
    "ntriples": "nt",
    "pretty-xml": "xml",
    "jsonld": "json-ld",
}


def rdflib_format(syntax: RDFSyntax) -> Optional[str]:
    """Returns the rdflib plugin name for a syntax, or None if rdflib cannot handle it."""
    return RDFLIB_FORMATS.get(syntax.media_type.lower())


def syntax_for_rdflib_format(format: str) -> Optional[RDFSyntax]:
    format = format.lower()
    format = RDFLIB_FORMAT_ALIASES.get(format, format)
    for media_type, plugin_name in RDFLIB_FORMATS.items():
        if plugin_name == format:
            return W3C_SYNTAXES.by_media_type(media_type)
    return None
