"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.

Enable with `load-plugins=check_typo.infrastructure.checker`.
"""

from pylint.lint import PyLinter

from check_typo.infrastructure.di.container import CheckTypoContainer
from check_typo.use_cases.checks.typography import TypographyChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = CheckTypoContainer.get_instance()
    linter.register_checker(
        TypographyChecker(
            linter,
            registry=container.get_rule_registry().get_registry(),
            config_loader=container.get_config_loader(),
        )
    )
