from dataclasses import dataclass

import pytest


@dataclass(frozen=True)
class CustomSyntax:
    """A syntax defined outside rdfsyntax, with no case normalisation of its own."""

    name: str
    title: str
    media_type: str
    file_extension: str
    supports_dataset: bool


@pytest.fixture
def custom_syntax():
    def _custom_syntax(
        media_type: str,
        name: str = "CUSTOM",
        title: str = "Custom syntax",
        file_extension: str = ".custom",
        supports_dataset: bool = False,
    ) -> CustomSyntax:
        return CustomSyntax(name, title, media_type, file_extension, supports_dataset)

    return _custom_syntax
