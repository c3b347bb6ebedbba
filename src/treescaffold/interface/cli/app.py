from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging,
resolution of missing parameters, build execution and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import List, Optional

from treescaffold.core.pipeline.engine import run_build
from treescaffold.domain.build_models import BuildResult
from treescaffold.domain.config import get_default_config, merge_config
from treescaffold.domain.constants import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK
from treescaffold.infra.logging import LoggingConfig, configure_logging, get_logger
from treescaffold.interface.cli import args as cli_args
from treescaffold.interface.cli.prompt import (
    InteractivePrompt,
    ParameterResolver,
    decline_prompt,
)
from treescaffold.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        resolver: Optional[ParameterResolver] = None,
) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        resolver: Collaborator asked for the structure path when it is
                  missing from the command line. Defaults to an interactive
                  terminal prompt (or a declining resolver with --no-prompt).

    Returns:
        int: Process exit code (0 for success, 1 for failure, 130 on interrupt).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Merge command-line overrides over defaults
    cfg = merge_config(get_default_config(), cli_args.args_to_overrides(args))

    try:
        # 4. Resolve the structure path if it was not given
        if not cfg.get("structure_path"):
            if resolver is None:
                resolver = decline_prompt if args.no_prompt else InteractivePrompt()
            cfg["structure_path"] = resolver(
                "structure_path", i18n.t("cli.prompt.structure_path")
            ) or ""

        if not cfg["structure_path"]:
            print(f"ERROR: {i18n.t('cli.errors.missing_structure')}", file=sys.stderr)
            return EXIT_FAILURE

        # 5. Build execution phase
        result = run_build(cfg)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = i18n.t("cli.errors.unexpected", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: BuildResult) -> None:
    """
    Format and print the build result.

    Args:
        result: The build result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.dry_run:
        print(i18n.t("cli.status.dry_run"))
        for path in result.directories:
            print(f"  mkdir {path}")
        for path in result.files:
            print(f"  write {path}")
        return

    print(i18n.t("cli.status.success"))
    print(i18n.t(
        "cli.status.summary",
        directories=len(result.directories),
        files=len(result.files),
        path=result.output_dir,
    ))

    if result.tree_lines:
        print("\n".join(result.tree_lines))


if __name__ == "__main__":
    sys.exit(main())
