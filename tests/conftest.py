"""Pytest configuration and shared fixtures.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
on the path. Fixtures load the packaged rule registry once per session.
"""

import logging
from collections.abc import Callable, Iterator, Sequence

import pytest

from check_typo.domain.constants import MISSING_HEADER
from check_typo.domain.entities import FileContext, FileReport
from check_typo.domain.exemptions import ExceptionResolver
from check_typo.domain.rules import RuleCatalog
from check_typo.infrastructure.services.rule_registry import RuleRegistryService
from check_typo.interface.telemetry import LOGGER_NAME
from check_typo.use_cases.check_file import CheckFileUseCase

CheckFn = Callable[..., FileReport]


def header_lines(
    banner_line: int = 3, copyright_line: int = 7, total: int = 8
) -> list[bytes]:
    """Lines of a file with the banner and copyright line at the given positions."""
    lines = [b"(* filler *)"] * total
    lines[banner_line - 1] = b"(*                  OCaml                  *)"
    if copyright_line:
        lines[copyright_line - 1] = b"(*   Copyright 2024 Institut National   *)"
    return lines


def with_header(body: bytes = b"let x = 1\n") -> bytes:
    """A well-formed header followed by body."""
    return b"\n".join(header_lines()) + b"\n" + body


@pytest.fixture(scope="session")
def rule_registry() -> RuleRegistryService:
    return RuleRegistryService()


@pytest.fixture(scope="session")
def registry(rule_registry: RuleRegistryService) -> dict:
    return rule_registry.get_registry()


@pytest.fixture(scope="session")
def catalog(registry: dict) -> RuleCatalog:
    return RuleCatalog.from_registry(registry)


@pytest.fixture
def check(catalog: RuleCatalog) -> CheckFn:
    """Check in-memory content. missing-header is disabled unless include_header=True."""

    def run(
        content: bytes,
        path: str = "src/file.ml",
        disable: Sequence[str] = (),
        attributes: str = "",
        include_header: bool = False,
        **kwargs: object,
    ) -> FileReport:
        global_disable = set(disable)
        if not include_header:
            global_disable.add(MISSING_HEADER)
        use_case = CheckFileUseCase(catalog, ExceptionResolver(global_disable))
        return use_case.execute(
            FileContext.from_bytes(path, content, attributes=attributes, **kwargs)
        )

    return run


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop handlers installed by configure_logging so streams never outlive a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
