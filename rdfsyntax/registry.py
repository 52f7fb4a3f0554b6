import logging
from collections.abc import Iterable, Iterator, Set
from typing import Optional

from rdfsyntax.exceptions import UnsupportedSyntaxException
from rdfsyntax.syntax import RDFSyntax

log = logging.getLogger(__name__)


def _normalise_media_type(media_type: str) -> str:
    # drop parameters such as "; charset=utf-8" or ";q=0.9"
    return media_type.split(";", 1)[0].strip().lower()


def _normalise_file_extension(file_extension: str) -> str:
    file_extension = file_extension.strip().lower()
    if not file_extension.startswith("."):
        file_extension = "." + file_extension
    return file_extension


class SyntaxRegistry(Set):
    """An ordered, read-only set of RDF syntaxes.

    Membership and duplicate detection follow syntax equality, i.e. the
    lower case media type. When two given syntaxes share a media type the
    first one is kept. Iteration yields the syntaxes in the order given.
    """

    def __init__(self, syntaxes: Iterable[RDFSyntax] = ()) -> None:
        by_media_type: dict[str, RDFSyntax] = {}
        for syntax in syntaxes:
            key = syntax.media_type.lower()
            if key in by_media_type:
                log.debug(
                    f"Ignoring {syntax.name}, media type {key} is already registered as "
                    f"{by_media_type[key].name}"
                )
                continue
            by_media_type[key] = syntax
        self._by_media_type = by_media_type
        self._syntaxes = tuple(by_media_type.values())

    def __iter__(self) -> Iterator[RDFSyntax]:
        return iter(self._syntaxes)

    def __len__(self) -> int:
        return len(self._syntaxes)

    def __contains__(self, value) -> bool:
        if not isinstance(value, RDFSyntax):
            return False
        return value.media_type.lower() in self._by_media_type

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self.names)})"

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(syntax.name for syntax in self._syntaxes)

    @property
    def media_types(self) -> tuple[str, ...]:
        return tuple(syntax.media_type for syntax in self._syntaxes)

    @property
    def file_extensions(self) -> tuple[str, ...]:
        return tuple(syntax.file_extension for syntax in self._syntaxes)

    def datasets(self) -> "SyntaxRegistry":
        """The syntaxes that can serialize more than one graph."""
        return SyntaxRegistry(s for s in self._syntaxes if s.supports_dataset)

    def by_media_type(self, media_type: str) -> Optional[RDFSyntax]:
        """
        Finds the syntax for a media type, e.g. from a Content-Type header.
        Case and media type parameters are ignored, so "Text/Turtle; charset=UTF-8" finds Turtle.
        :return: the matching syntax, or None
        """
        syntax = self._by_media_type.get(_normalise_media_type(media_type))
        if syntax is None:
            log.debug(f"No syntax registered for media type {media_type}")
        return syntax

    def by_file_extension(self, file_extension: str) -> Optional[RDFSyntax]:
        """
        Finds the syntax for a file extension, ignoring case. The leading '.' is optional.
        :return: the matching syntax, or None
        """
        file_extension = _normalise_file_extension(file_extension)
        for syntax in self._syntaxes:
            if syntax.file_extension.lower() == file_extension:
                return syntax
        log.debug(f"No syntax registered for file extension {file_extension}")
        return None

    def by_name(self, name: str) -> Optional[RDFSyntax]:
        for syntax in self._syntaxes:
            if syntax.name == name:
                return syntax
        log.debug(f"No syntax registered with name {name}")
        return None

    def require(self, media_type: str) -> RDFSyntax:
        """As by_media_type, but raises UnsupportedSyntaxException when nothing matches."""
        syntax = self.by_media_type(media_type)
        if syntax is None:
            raise UnsupportedSyntaxException(media_type, self.media_types)
        return syntax
