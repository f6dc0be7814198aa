"""Typography checks (C9101-C9111) as a pylint raw checker."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

from astroid import nodes
from pylint.checkers import BaseRawFileChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from check_typo.domain.config import ConfigurationLoader
from check_typo.domain.constants import ALL_RULES
from check_typo.domain.entities import FileContext
from check_typo.domain.exemptions import ExceptionResolver
from check_typo.domain.registry_types import RuleRegistryEntry
from check_typo.domain.rule_msgs import RuleMsgBuilder
from check_typo.domain.rules import RuleCatalog
from check_typo.domain.rules.file_rules import HeaderRecognizer
from check_typo.domain.scanner import iter_records
from check_typo.use_cases.check_file import CheckFileUseCase


class TypographyChecker(BaseRawFileChecker):
    """Runs the typography engine on each module's raw bytes. Thin: delegates to CheckFileUseCase."""

    name: str = "typography"

    def __init__(
        self,
        linter: "PyLinter",
        registry: Mapping[str, RuleRegistryEntry],
        config_loader: ConfigurationLoader,
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            registry, ALL_RULES)  # type: ignore[assignment]
        super().__init__(linter)
        catalog = RuleCatalog.from_registry(registry)
        self._symbols = {name: RuleMsgBuilder.symbol_for(registry, name) for name in ALL_RULES}
        self._check_file = CheckFileUseCase(
            catalog=catalog,
            resolver=ExceptionResolver(
                catalog.validate(config_loader.disable), config_loader.exemptions
            ),
            header=HeaderRecognizer(
                config_loader.banner_patterns, config_loader.copyright_pattern
            ),
            max_reports=config_loader.max_reports_per_rule,
        )

    def process_module(self, node: nodes.Module) -> None:
        """Stream the module source through the engine; report each diagnostic via add_message."""
        path = node.file or node.name
        with node.stream() as stream:
            report = self._check_file.execute(
                FileContext(path=path, records=iter_records(stream), is_explicit=True)
            )
        for diagnostic in report.diagnostics:
            if diagnostic.notice:
                continue
            self.add_message(
                self._symbols[diagnostic.rule],
                line=diagnostic.line,
                col_offset=diagnostic.column - 1,
                args=(diagnostic.message,),
            )
