"""Command-line host that embeds a project's text files as C# sources."""

import argparse
import logging
from pathlib import Path
from typing import Any

from embedded_texts import option_keys as keys
from embedded_texts.collect_resources import collect_resources
from embedded_texts.generate_unit import generate_units
from embedded_texts.generation_report import GenerationReport
from embedded_texts.generation_result import GenerationResult
from embedded_texts.load_config import as_raw_options, load_config
from embedded_texts.reject_duplicates import reject_duplicate_units
from embedded_texts.write_units import write_units

CONFIG_FILE_NAME = "embedded-texts.yml"


def run_generation(args: argparse.Namespace) -> int:
    """Execute one generation pass and return the process exit status."""
    project_dir = args.project_dir.resolve()
    if not project_dir.is_dir():
        msg = f"Project directory not found: {project_dir}"
        raise SystemExit(msg)

    config = load_config(args.config or str(project_dir / CONFIG_FILE_NAME))
    global_options = build_global_options(config, project_dir, args.root_namespace)

    report = GenerationReport()
    items, unreadable = collect_resources(project_dir, config)
    for d in unreadable:
        report.add_result(GenerationResult(path=d.path, diagnostic=d))
    for result in reject_duplicate_units(generate_units(items, global_options)):
        report.add_result(result)

    for d in report.diagnostics:
        print(f"{d.path}: {d}")

    if args.report:
        report.generate_report(args.report)

    if args.dry_run:
        print(
            f"Dry run complete: {len(report.units)} units, "
            f"{len(report.diagnostics)} diagnostics."
        )
    else:
        out_root = args.out_dir.resolve()
        written = write_units(report.units, out_root)
        print(
            f"Generated {len(report.units)} units ({written} changed) into: {out_root}"
        )

    return 1 if report.diagnostics else 0


def build_global_options(
    config: dict[str, Any], project_dir: Path, root_namespace: str | None = None
) -> dict[str, str | None]:
    """Build the global options, filling project defaults the config leaves out."""
    options = as_raw_options(config.get("properties"))
    if root_namespace:
        options[keys.ROOT_NAMESPACE] = root_namespace
    if not options.get(keys.ROOT_NAMESPACE):
        options[keys.ROOT_NAMESPACE] = project_dir.name
    if not options.get(keys.PROJECT_DIR):
        options[keys.PROJECT_DIR] = str(project_dir)
    return options


def main(argv: list[str] | None = None) -> int:
    """Run the embedding generator."""
    ap = argparse.ArgumentParser(
        description="Embed text files as constants in generated C# sources.",
    )
    ap.add_argument(
        "project_dir",
        type=Path,
        help="Project directory; text files are discovered and named relative to it",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for generated *.g.cs files",
    )
    ap.add_argument(
        "--config",
        help=f"Path to configuration file (default: <project_dir>/{CONFIG_FILE_NAME})",
    )
    ap.add_argument(
        "--root-namespace",
        help=(
            "Root namespace (default: from config, else the project directory "
            "name). Files at the project root with directory-as-container get a "
            "class of that same name"
        ),
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Generate and report without writing files",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON report of units and diagnostics to this path",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every embedded and skipped file",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
