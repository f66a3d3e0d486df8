"""ngscaffold pipeline orchestrator.

Drives a full generation run around the pure generation engine:

Stage 1: LOAD     -- Read and validate the specification file.
Stage 2: VALIDATE -- Report specification issues (fatal in strict mode).
Stage 3: GENERATE -- Produce all artifacts and external commands in memory.
Stage 4: EXECUTE  -- Run the external commands (skeleton, install, styling).
Stage 5: WRITE    -- Write the artifacts into the project directory.

Any failure aborts the run before stage 5, so a project directory never
receives a partial artifact set.

Usage::

    ngscaffold spec.json --output ./out --bootstrap --columns 3
    python -m ngscaffold.pipeline spec.yaml --skeleton direct --dry-run
"""

from __future__ import annotations

import asyncio
import sys
import time
from pathlib import Path
from typing import Any, Optional

from rich.markup import escape
from rich.panel import Panel

from ngscaffold.config import Config
from ngscaffold.parser.checks import check_specification
from ngscaffold.parser.errors import IssueSeverity, SpecificationError
from ngscaffold.parser.loader import load_specification
from ngscaffold.parser.models import Specification
from ngscaffold.scaffolder.artifacts import GenerationResult, ToolInvocation
from ngscaffold.scaffolder.generator import ProjectGenerator
from ngscaffold.scaffolder.skeleton import (
    CliSkeletonStrategy,
    DirectSkeletonStrategy,
    SkeletonStrategy,
)
from ngscaffold.scaffolder.templates import TemplateRenderer
from ngscaffold.scaffolder.writer import ArtifactWriter
from ngscaffold.utils import (
    STAGE_NAMES,
    console,
    ensure_dir,
    format_duration,
    print_error,
    print_stage_header,
    print_success,
    print_summary_table,
    print_warning,
    run_command,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PipelineError(Exception):
    """Raised when a pipeline stage fails irrecoverably."""

    def __init__(self, stage: int, message: str) -> None:
        self.stage = stage
        super().__init__(f"Stage {stage} ({STAGE_NAMES.get(stage, '?')}): {message}")


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """Runs the five pipeline stages for one specification file.

    Attributes:
        config: Run configuration.
        state: Dictionary accumulating results from each stage.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self.renderer = TemplateRenderer()
        self.state: dict[str, Any] = {
            "stages_completed": [],
            "warnings": [],
            "success": False,
        }

    def build_strategy(self) -> SkeletonStrategy:
        """Skeleton strategy selected by ``config.skeleton``."""
        if self.config.skeleton == "direct":
            return DirectSkeletonStrategy(self.renderer)
        return CliSkeletonStrategy(
            cli_package=self.config.angular_cli_package,
            install_dependencies=self.config.install_dependencies,
        )

    # ------------------------------------------------------------------
    # Main entry
    # ------------------------------------------------------------------

    async def run(self, spec_path: str | Path, *, dry_run: bool = False) -> dict[str, Any]:
        """Execute every stage for *spec_path*.

        Args:
            spec_path: JSON or YAML specification file.
            dry_run: Generate and report, but neither run commands nor write.

        Returns:
            The accumulated state dictionary; ``state["success"]`` tells
            whether the run completed.
        """
        started = time.monotonic()
        console.print(
            Panel(
                f"[bold]ngscaffold[/bold]\nSpecification: {spec_path}\n"
                f"Output: {self.config.output_dir}",
                style="cyan",
            )
        )

        try:
            spec = self.stage_load(spec_path)
            self.stage_validate(spec)
            result = self.stage_generate(spec)
            if dry_run:
                print_warning("Dry run: skipping command execution and file writes.")
                self._report_plan(result)
            else:
                await self.stage_execute(result.invocations)
                await self.stage_write(result)
            self.state["success"] = True
        except (PipelineError, SpecificationError) as exc:
            self.state["error"] = str(exc)
            print_error(f"Run aborted: {escape(str(exc))}")

        self.state["elapsed"] = format_duration(time.monotonic() - started)
        return self.state

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def stage_load(self, spec_path: str | Path) -> Specification:
        print_stage_header(1, STAGE_NAMES[1])
        try:
            spec = load_specification(spec_path)
        except FileNotFoundError as exc:
            raise PipelineError(1, str(exc)) from exc
        console.print(
            f"  Loaded [bold]{spec.project_name}[/bold] "
            f"with {len(spec.components)} component(s)"
        )
        self.state["project_name"] = spec.project_name
        self.state["stages_completed"].append(1)
        return spec

    def stage_validate(self, spec: Specification) -> None:
        print_stage_header(2, STAGE_NAMES[2])
        issues = check_specification(spec, self.config.layout, strict=self.config.strict)
        for issue in issues:
            if issue.severity is IssueSeverity.WARNING or not self.config.strict:
                print_warning(f"  {escape(str(issue))}")
        if not issues:
            console.print("  [green]+[/green] No issues found")
        self.state["warnings"] = [str(issue) for issue in issues]
        self.state["stages_completed"].append(2)

    def stage_generate(self, spec: Specification) -> GenerationResult:
        print_stage_header(3, STAGE_NAMES[3])
        generator = ProjectGenerator(
            spec,
            layout=self.config.layout,
            strategy=self.build_strategy(),
            renderer=self.renderer,
        )
        result = generator.generate()
        console.print(
            f"  Generated {len(result.artifacts)} artifact(s), "
            f"{len(result.invocations)} command(s) to run"
        )
        self.state["artifacts"] = [artifact.path for artifact in result.artifacts]
        self.state["invocations"] = [inv.command_line for inv in result.invocations]
        self.state["stages_completed"].append(3)
        return result

    async def stage_execute(self, invocations: list[ToolInvocation]) -> None:
        """Run each command in order; the first failure aborts the run."""
        print_stage_header(4, STAGE_NAMES[4])
        output_dir = ensure_dir(self.config.output_dir)
        for invocation in invocations:
            console.print(f"  [cyan]{invocation.description}[/cyan]: {invocation.command_line}")
            returncode, _stdout, stderr = await run_command(
                invocation.argv,
                cwd=output_dir / invocation.cwd,
                timeout=self.config.command_timeout,
            )
            if returncode != 0:
                detail = stderr.splitlines()[-1] if stderr else f"exit code {returncode}"
                raise PipelineError(
                    4, f"{invocation.purpose.value} command failed: {detail}"
                )
        if not invocations:
            console.print("  No external commands required")
        self.state["stages_completed"].append(4)

    async def stage_write(self, result: GenerationResult) -> list[Path]:
        print_stage_header(5, STAGE_NAMES[5])
        project_root = self.config.project_path(result.project_name)
        writer = ArtifactWriter(project_root)
        written = await writer.write_all(result.artifacts)
        print_success(f"  Wrote {len(written)} file(s) to {project_root}")
        self.state["project_root"] = str(project_root)
        self.state["stages_completed"].append(5)
        return written

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def _report_plan(self, result: GenerationResult) -> None:
        rows = {f"command {i}": inv.command_line for i, inv in enumerate(result.invocations, 1)}
        rows.update({artifact.path: f"{len(artifact.content)} chars" for artifact in result.artifacts})
        print_summary_table(rows, title=f"Plan for {result.project_name}")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _prompt_layout(config: Config) -> Config:
    """Ask for the style options interactively."""
    from rich.prompt import Confirm, IntPrompt

    use_bootstrap = Confirm.ask(
        "Do you want to use Bootstrap for styling?", default=config.use_bootstrap
    )
    column_layout = IntPrompt.ask(
        "Choose a column layout", choices=["2", "3", "4"], default=config.column_layout
    )
    return config.model_copy(
        update={"use_bootstrap": use_bootstrap, "column_layout": column_layout}
    )


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``ngscaffold`` / ``python -m ngscaffold.pipeline``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="ngscaffold -- generate an Angular form application from a UI specification",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  ngscaffold spec.json\n"
            "  ngscaffold spec.json -o ./out --bootstrap --columns 3\n"
            "  ngscaffold spec.yaml --skeleton direct --dry-run\n"
        ),
    )

    parser.add_argument("spec", help="Path to the JSON or YAML specification file")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: ./output or NGS_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--bootstrap",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use the Bootstrap grid and install Bootstrap",
    )
    parser.add_argument(
        "--columns",
        type=int,
        choices=[2, 3, 4],
        default=None,
        help="Number of form columns",
    )
    parser.add_argument(
        "--skeleton",
        choices=["cli", "direct"],
        default=None,
        help="Create the workspace with the Angular CLI or write it directly",
    )
    parser.add_argument("--strict", action="store_true", help="Treat specification issues as errors")
    parser.add_argument("--skip-install", action="store_true", help="Do not run npm install")
    parser.add_argument("--dry-run", action="store_true", help="Show the plan without running or writing")
    parser.add_argument("--interactive", "-i", action="store_true", help="Prompt for style options")

    args = parser.parse_args(argv)

    spec_path = Path(args.spec)
    if not spec_path.exists():
        console.print(f"[bold red]Error:[/bold red] Specification file not found: {spec_path}")
        sys.exit(1)

    config = Config.from_env()
    updates: dict[str, Any] = {}
    if args.output is not None:
        updates["output_dir"] = Path(args.output)
    if args.bootstrap is not None:
        updates["use_bootstrap"] = args.bootstrap
    if args.columns is not None:
        updates["column_layout"] = args.columns
    if args.skeleton is not None:
        updates["skeleton"] = args.skeleton
    if args.strict:
        updates["strict"] = True
    if args.skip_install:
        updates["install_dependencies"] = False
    config = config.model_copy(update=updates)

    if args.interactive:
        config = _prompt_layout(config)

    pipeline = Pipeline(config)
    result = asyncio.run(pipeline.run(spec_path, dry_run=args.dry_run))

    if result.get("success"):
        console.print("[bold green]Generation completed successfully![/bold green]")
    else:
        console.print("[bold red]Generation failed.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
