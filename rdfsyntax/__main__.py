import logging

from rdfsyntax.config import settings
from rdfsyntax.rdflib_formats import rdflib_format
from rdfsyntax.syntax_logging import setup_logger
from rdfsyntax.w3c import W3C_SYNTAXES

log = logging.getLogger("rdfsyntax")


def main():
    setup_logger(settings)
    log.info(f"rdfsyntax {settings.rdfsyntax_version}: {len(W3C_SYNTAXES)} syntaxes")
    print(f"{'NAME':<11} {'TITLE':<19} {'MEDIA TYPE':<22} {'EXT':<8} {'DATASET':<8} RDFLIB")
    for syntax in W3C_SYNTAXES:
        print(
            f"{syntax.name:<11} {syntax.title:<19} {syntax.media_type:<22} "
            f"{syntax.file_extension:<8} {str(syntax.supports_dataset):<8} {rdflib_format(syntax) or '-'}"
        )


if __name__ == "__main__":
    main()
