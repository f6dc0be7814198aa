"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import sys
from typing import Optional

from check_typo.infrastructure.di.container import CheckTypoContainer
from check_typo.interface.cli import CLIAppFactory, CLIDependencies, InvocationTranslator


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = CheckTypoContainer()
    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        catalog=container.get_rule_catalog(),
        telemetry=container.get_telemetry_port(),
        filesystem=container.get_filesystem_gateway(),
        vcs=container.get_vcs_gateway(),
        reporters=container.get_reporters(),
    )
    app = CLIAppFactory.create_app(deps)
    args = InvocationTranslator.translate(sys.argv[1:] if argv is None else argv)
    app(args=args, prog_name="check-typo")


if __name__ == "__main__":
    main()
