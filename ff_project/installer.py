"""ff-project install orchestrator and CLI.

Runs the fixed ``init`` manifest against a target project directory:

1. Skills   -- ``templates/agents/skills`` -> ``.agents/skills``
2. Specs    -- ``templates/ff/spec``       -> ``.ff/spec`` plus ``.ff/.gitignore``
3. Identity -- ``.ff/.developer`` (written once, never overwritten)
4. Document -- managed block merged into ``AGENTS.md``

Every step is attempted unconditionally and in order; filesystem errors
propagate out of :meth:`Installer.run` and abort the run without rollback.

Usage::

    ff-project init --yes
    python -m ff_project init --dry-run --verbose
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import NoReturn

from rich.markup import escape
from rich.prompt import Confirm

from ff_project.config import Config
from ff_project.errors import UsageError
from ff_project.models import RunFlags, RunStats
from ff_project.scaffolder import (
    TemplateRenderer,
    apply_managed_block,
    copy_file,
    ensure_dir,
    setup_developer,
    sync_directory,
)
from ff_project.utils import (
    console,
    display_path,
    print_error,
    print_rule,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
)

NEXT_STEPS: tuple[str, ...] = (
    "Review .ff/spec/ and customize it for your project",
    "Check that .ff/.developer has your name",
    "In your agent, run: load ff-start",
)


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class Installer:
    """Sequences the ``init`` manifest over one target directory.

    Attributes:
        config: Paths and tuning for this run.
        flags: Immutable user switches.
        stats: Counters accumulated by every step; read once for the summary.
    """

    def __init__(
        self,
        config: Config,
        flags: RunFlags,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.flags = flags
        self.stats = RunStats()
        self.renderer = renderer or TemplateRenderer(config.template_dir)

    # ------------------------------------------------------------------
    # Confirmation
    # ------------------------------------------------------------------

    @property
    def needs_confirmation(self) -> bool:
        return not (self.flags.yes or self.flags.dry_run)

    def confirm(self) -> bool:
        """Ask the user whether to initialise the target directory.

        A closed stdin counts as declining.
        """
        try:
            return Confirm.ask(
                f"Initialize FF in [bold]{escape(str(self.config.root))}[/bold]?",
                default=False,
                console=console,
            )
        except EOFError:
            return False

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    async def run(self) -> RunStats:
        """Execute every install step in order and return the final counters."""
        await self.install_skills()
        await self.install_specs()
        await self.install_developer()
        await self.install_agents_md()
        return self.stats

    async def install_skills(self) -> None:
        print_step_header("Installing skills...")
        cfg = self.config
        await ensure_dir(cfg.agents_path, self.flags, self.stats, root=cfg.root)
        await ensure_dir(cfg.skills_path, self.flags, self.stats, root=cfg.root)
        await sync_directory(
            cfg.template_skills_path, cfg.skills_path, self.flags, self.stats, root=cfg.root
        )

    async def install_specs(self) -> None:
        print_step_header("Installing specs...")
        cfg = self.config
        await ensure_dir(cfg.ff_path, self.flags, self.stats, root=cfg.root)
        await ensure_dir(cfg.spec_path, self.flags, self.stats, root=cfg.root)
        await sync_directory(
            cfg.template_spec_path, cfg.spec_path, self.flags, self.stats, root=cfg.root
        )
        await copy_file(
            cfg.template_gitignore_path,
            cfg.gitignore_path,
            self.flags,
            self.stats,
            root=cfg.root,
        )

    async def install_developer(self) -> None:
        print_step_header("Setting up developer identity...")
        await setup_developer(
            self.config.developer_path,
            self.flags,
            self.stats,
            root=self.config.root,
            timeout=self.config.git_timeout,
        )

    async def install_agents_md(self) -> None:
        print_step_header(f"Configuring {self.config.agents_md}...")
        cfg = self.config
        context = self.renderer.agents_md_context(
            skills_dir=display_path(cfg.skills_path, cfg.root),
            spec_dir=display_path(cfg.spec_path, cfg.root),
        )
        content = await asyncio.to_thread(
            self.renderer.render, cfg.agents_md_template, context
        )
        await apply_managed_block(
            content, cfg.agents_md_path, self.flags, self.stats, root=cfg.root
        )

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def print_summary(self) -> None:
        """Render one summary row per non-zero counter, then the next steps."""
        console.print()
        print_success("Done!")
        console.print()

        rows = self.stats.summary_rows()
        if rows:
            print_summary_table({label: str(count) for label, count in rows.items()})
        else:
            console.print("[dim]Nothing to do.[/dim]")
            console.print()

        console.print("[bold]Next steps:[/bold]")
        for index, step in enumerate(NEXT_STEPS, start=1):
            console.print(f"  {index}. {escape(step)}")
        console.print()


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

COMMANDS = ("init",)


class CliArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises ``UsageError`` instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_arg_parser() -> CliArgumentParser:
    parser = CliArgumentParser(
        prog="ff-project",
        description="FF Project -- spec-driven development scaffolding for coding agents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        epilog=(
            "Commands:\n"
            "  init             Initialize FF in the current project\n"
            "\n"
            "Examples:\n"
            "  ff-project init          # Initialize with prompts\n"
            "  ff-project init --yes    # Initialize without prompts\n"
            "  ff-project init --force  # Overwrite existing files\n"
        ),
    )
    parser.add_argument("command", nargs="?", help="Command to run (init)")
    parser.add_argument(
        "-f", "--force", action="store_true", help="Overwrite existing files"
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Show what would be done without making changes",
    )
    parser.add_argument(
        "-y", "--yes", action="store_true", help="Skip confirmation prompts"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show detailed output"
    )
    parser.add_argument(
        "-C",
        "--directory",
        default=None,
        help="Target project directory (default: current directory)",
    )
    parser.add_argument(
        "-h", "--help", action="store_true", help="Show this help message"
    )
    return parser


def run_init(config: Config, flags: RunFlags) -> int:
    """Run the ``init`` command and return the process exit code."""
    print_rule("FF Project Initialization")

    if flags.dry_run:
        print_warning("Dry run mode - no changes will be made")
        console.print()

    installer = Installer(config, flags)
    if installer.needs_confirmation:
        if not installer.confirm():
            console.print()
            console.print("[bold red]Cancelled[/bold red]")
            return 0
        console.print()

    asyncio.run(installer.run())
    installer.print_summary()
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``ff-project`` and ``python -m ff_project``."""
    parser = build_arg_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except UsageError as exc:
        print_error(str(exc))
        parser.print_help()
        return 1

    if args.help:
        parser.print_help()
        return 0
    if not args.command:
        parser.print_help()
        return 1
    if args.command not in COMMANDS:
        print_error(f"Unknown command: {args.command}")
        parser.print_help()
        return 1
    if unknown:
        print_warning(f"Ignoring unrecognized options: {' '.join(unknown)}")

    flags = RunFlags(
        force=args.force,
        dry_run=args.dry_run,
        yes=args.yes,
        verbose=args.verbose,
    )

    try:
        config = Config.from_env()
        if args.directory:
            config = config.model_copy(update={"target_dir": Path(args.directory)})
        return run_init(config, flags)
    except KeyboardInterrupt:
        return 130
    except Exception as exc:  # noqa: BLE001
        print_error(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
