"""CLI entry point for check-typo - Thin Controller using Typer."""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import typer

from check_typo.domain.config import ConfigurationLoader
from check_typo.domain.errors import UnknownRuleError
from check_typo.domain.exemptions import ExceptionResolver
from check_typo.domain.protocols import (
    FileSystemProtocol,
    ReporterPort,
    TelemetryPort,
    VersionControlProtocol,
)
from check_typo.domain.rules import RuleCatalog
from check_typo.domain.rules.file_rules import HeaderRecognizer
from check_typo.interface.telemetry import ProjectTelemetry
from check_typo.use_cases.check_file import CheckFileUseCase
from check_typo.use_cases.check_tree import CheckTreeUseCase


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    catalog: RuleCatalog
    telemetry: TelemetryPort
    filesystem: FileSystemProtocol
    vcs: VersionControlProtocol
    reporters: Mapping[str, ReporterPort]


class InvocationTranslator:
    """
    Maps the classic `check-typo -tab -long-line -- path...` shape onto Typer options.

    Leading `-rule` tokens become `--disable rule`. Flag parsing stops at `--`
    or at the first token not starting with `-`; everything from there on is
    passed as paths, behind an explicit `--`.
    """

    VALUE_OPTIONS = frozenset({"--disable", "--format"})

    @staticmethod
    def translate(argv: Sequence[str]) -> list[str]:
        tokens = list(argv)
        out: list[str] = []
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token == "--":
                return out + tokens[i:]
            if token.startswith("--"):
                out.append(token)
                if token in InvocationTranslator.VALUE_OPTIONS and i + 1 < len(tokens):
                    i += 1
                    out.append(tokens[i])
            elif token.startswith("-") and token != "-":
                out.extend(["--disable", token[1:]])
            else:
                return out + ["--", *tokens[i:]]
            i += 1
        return out


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="check-typo",
            help="Check typographic conventions: tabs, trailing blanks, long lines, headers...",
            add_completion=False,
        )

        @app.command()
        def check(
            paths: Optional[List[str]] = typer.Argument(
                None, help="Files or directories to check (default: current directory)."),
            disable: Optional[List[str]] = typer.Option(
                None, "--disable", help="Disable RULE for every file (same as -RULE)."),
            output_format: OutputFormat = typer.Option(
                OutputFormat.TEXT, "--format", case_sensitive=False, help="text or json"),
            verbose: bool = typer.Option(
                False, "--verbose", help="Log progress and skipped files to stderr."),
            list_rules: bool = typer.Option(
                False, "--list-rules", help="List the known rules and exit."),
        ) -> None:
            """Report typographic violations; exit status is 0 whatever is found."""
            ProjectTelemetry.configure_logging(verbose)
            deps.telemetry.handshake()
            if list_rules:
                for rule in deps.catalog:
                    typer.echo(f"{rule.name:<16} {rule.description}")
                return

            config = deps.config_loader
            try:
                global_disable = deps.catalog.validate([*(disable or []), *config.disable])
            except UnknownRuleError as exc:
                raise typer.BadParameter(str(exc), param_hint="'-RULE'") from exc
            try:
                header = HeaderRecognizer(config.banner_patterns, config.copyright_pattern)
            except re.error as exc:
                raise typer.BadParameter(
                    f"invalid header pattern: {exc}", param_hint="[tool.check-typo]") from exc

            check_file = CheckFileUseCase(
                catalog=deps.catalog,
                resolver=ExceptionResolver(global_disable, config.exemptions),
                header=header,
                max_reports=config.max_reports_per_rule,
            )
            use_case = CheckTreeUseCase(
                check_file=check_file,
                filesystem=deps.filesystem,
                vcs=deps.vcs,
                reporter=deps.reporters[output_format.value],
                telemetry=deps.telemetry,
            )
            use_case.execute(paths or ["."])

        return app
