import pytest
from pydantic import ValidationError

from rdfsyntax import (
    JSONLD,
    NTRIPLES,
    TURTLE,
    RDFSyntax,
    W3CRDFSyntax,
    syntax_equals,
    syntax_hash,
)


def test_media_type_and_extension_are_lowercased():
    syntax = W3CRDFSyntax(
        name="Turtle",
        title="Shouty Turtle",
        media_type="TEXT/Turtle",
        file_extension=".TTL",
        supports_dataset=False,
    )
    assert syntax.media_type == "text/turtle"
    assert syntax.file_extension == ".ttl"
    # name and title are kept as given
    assert syntax.name == "Turtle"
    assert syntax.title == "Shouty Turtle"


def test_equal_on_media_type_only():
    syntax = W3CRDFSyntax(
        name="SOMETHING_ELSE",
        title="Not Turtle at all",
        media_type="TEXT/TURTLE",
        file_extension=".txt",
        supports_dataset=True,
    )
    assert syntax == TURTLE
    assert TURTLE == syntax
    assert hash(syntax) == hash(TURTLE)
    assert syntax.name != TURTLE.name
    assert str(syntax) != str(TURTLE)


def test_same_fields_other_media_type_not_equal():
    syntax = W3CRDFSyntax(
        name="TURTLE",
        title="RDF 1.1 Turtle",
        media_type="text/n3",
        file_extension=".ttl",
        supports_dataset=False,
    )
    assert syntax != TURTLE
    assert TURTLE != NTRIPLES


def test_custom_syntax_equality(custom_syntax):
    """A syntax class defined elsewhere is recognised from either side of =="""
    custom = custom_syntax("TEXT/TURTLE")
    assert isinstance(custom, RDFSyntax)
    assert custom == TURTLE
    assert TURTLE == custom
    assert custom != JSONLD
    assert syntax_equals(custom, TURTLE)
    assert syntax_equals(TURTLE, custom)
    assert syntax_hash(custom) == hash(TURTLE)


@pytest.mark.parametrize(
    "media_type_a, media_type_b, expected",
    [
        ("text/turtle", "text/turtle", True),
        ("Text/Turtle", "tExt/tuRtle", True),
        ("application/ld+json", "APPLICATION/LD+JSON", True),
        ("application/ld+json", "application/json", False),
    ],
)
def test_syntax_equals(custom_syntax, media_type_a, media_type_b, expected):
    a = custom_syntax(media_type_a, name="A", file_extension=".a")
    b = custom_syntax(
        media_type_b, name="B", file_extension=".b", supports_dataset=True
    )
    assert syntax_equals(a, b) is expected
    if expected:
        assert syntax_hash(a) == syntax_hash(b)


@pytest.mark.parametrize("other", ["text/turtle", None, 1, object()])
def test_not_equal_to_non_syntaxes(other):
    assert TURTLE != other
    assert not isinstance(other, RDFSyntax)


def test_usable_as_dict_key():
    parsers = {TURTLE: "turtle parser", JSONLD: "json-ld parser"}
    lookup = W3CRDFSyntax(
        name="X",
        title="X",
        media_type="Text/Turtle",
        file_extension=".x",
        supports_dataset=False,
    )
    assert parsers[lookup] == "turtle parser"
    assert len({TURTLE, lookup}) == 1


def test_missing_field_is_rejected():
    with pytest.raises(ValidationError):
        W3CRDFSyntax(name="TURTLE", title="RDF 1.1 Turtle", media_type="text/turtle")


def test_iri_is_none_outside_the_w3c_names():
    syntax = W3CRDFSyntax(
        name="N3",
        title="Notation3",
        media_type="text/n3",
        file_extension=".n3",
        supports_dataset=False,
    )
    assert syntax.iri is None


def test_iri_follows_media_type():
    same = W3CRDFSyntax(
        name="X",
        title="X",
        media_type="TEXT/TURTLE",
        file_extension=".x",
        supports_dataset=False,
    )
    assert same == TURTLE
    assert same.iri == TURTLE.iri

    impostor = W3CRDFSyntax(
        name="TURTLE",
        title="RDF 1.1 Turtle",
        media_type="text/n3",
        file_extension=".ttl",
        supports_dataset=False,
    )
    assert impostor != TURTLE
    assert impostor.iri is None
