import logging
from importlib.metadata import PackageNotFoundError, version as distribution_version
from os import environ
from pathlib import Path
from typing import Optional

import toml
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    log_level: One of the standard logging level names, e.g. DEBUG, INFO, WARNING
    log_output: Where log records go. One of 'stdout', 'file' or 'both'
    log_dir: The directory log files are written to when log_output is 'file' or 'both'
    rdfsyntax_version: Defaults to the version in pyproject.toml, or the installed package version
    """

    log_level: str = "INFO"
    log_output: str = "stdout"
    log_dir: str = "logs"
    rdfsyntax_version: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return v

    @field_validator("log_output")
    @classmethod
    def validate_log_output(cls, v: str) -> str:
        if v not in ("stdout", "file", "both"):
            raise ValueError(
                f"log_output must be one of 'stdout', 'file' or 'both', not '{v}'"
            )
        return v

    @field_validator("rdfsyntax_version")
    @classmethod
    def get_version(cls, v):
        if v:
            return v
        version = environ.get("RDFSYNTAX_VERSION")
        if version:
            return version

        possible_locations = (
            # dir above /rdfsyntax, present in dev environments and editable installs
            Path(__file__).parent.parent,
            # inside /rdfsyntax
            Path(__file__).parent,
        )
        for p in possible_locations:
            if (p / "pyproject.toml").exists():
                return toml.load(p / "pyproject.toml")["tool"]["poetry"]["version"]
        try:
            return distribution_version("rdfsyntax")
        except PackageNotFoundError:
            raise RuntimeError(
                "RDFSYNTAX_VERSION not set, and cannot find a pyproject.toml or installed package to extract the version."
            )


settings = Settings()
