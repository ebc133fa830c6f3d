"""
Command-line interface for bindings generation.

Parses arguments, builds the generator configuration and reports results
through a rich console.
"""

import argparse
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from . import __version__
from .codegen import (
    ConfigManager,
    GenerationContext,
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    create_registry,
    generate_bindings,
)
from .codegen.registry import TargetRegistry
from .introspect import PythonTypeSource
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="schema-bindgen",
        description="Generate TypeScript or Python bindings from schema classes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  schema-bindgen -p acme.api.schema -o build/ts
  schema-bindgen -l python -p acme.api.schema -o build/py -x full
  schema-bindgen -p acme.api.schema -t interface --strip-prefix acme.
  schema-bindgen --list-targets
  schema-bindgen --target-info python
        """.strip(),
    )

    parser.add_argument(
        "--packages",
        "-p",
        nargs="+",
        metavar="PACKAGE",
        help="Schema packages to generate bindings for",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        metavar="DIR",
        help="Output directory (default: print to stdout)",
    )
    parser.add_argument(
        "--overwrite",
        "-x",
        choices=["none", "full", "merge"],
        help="What to do with a non-empty output directory (default: none)",
    )
    parser.add_argument(
        "--output-type",
        "-t",
        choices=["class", "interface"],
        help="Emit classes or interfaces where the target has both",
    )
    parser.add_argument(
        "--target",
        "-l",
        metavar="TARGET",
        help="Target language (default: typescript)",
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--strip-prefix",
        metavar="PREFIX",
        help="Package prefix removed from output paths (e.g. 'acme.')",
    )
    parser.add_argument(
        "--field-case",
        choices=["original", "snake", "camel", "pascal"],
        help="Case style for field names",
    )
    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add header comments to generated files",
    )
    parser.add_argument(
        "--save-config",
        metavar="FILE",
        help="Write the effective configuration to FILE and exit",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Debug logging and metadata"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-targets", action="store_true", help="List supported targets and exit"
    )
    info_group.add_argument(
        "--target-info",
        metavar="TARGET",
        help="Show detailed info about a target and exit",
    )

    return parser


def run(args: argparse.Namespace) -> int:
    """
    Handle parsed command line arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    registry = create_registry()

    try:
        if args.list_targets:
            return _list_targets(registry)

        if args.target_info:
            return _show_target_info(registry, args.target_info)

        if args.target and not registry.is_supported(args.target):
            console.print(f"[red]✗ Unsupported target '{args.target}'[/red]")
            names = registry.list_all_names()
            supported = ", ".join(
                f"{target} ({', '.join(names[target][1:])})" if names[target][1:] else target
                for target in sorted(names)
            )
            console.print(f"[dim]Supported targets: {supported}[/dim]")
            return 1

        target = registry.resolve_name(args.target) if args.target else None
        manager = ConfigManager()
        config = _build_config(manager, args, target)

        if args.save_config:
            manager.save_config(config, args.save_config)
            console.print(
                f"[green]✓[/green] Configuration saved to [cyan]{args.save_config}[/cyan]"
            )
            return 0

        if not config.packages:
            console.print(
                "[red]✗[/red] At least one package is required (--packages or config file)"
            )
            return 1

        for warning in manager.validate_config(config):
            logger.warning(warning)

        return _generate(registry, config, verbose=args.verbose)

    except GeneratorError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("Generation aborted", exc_info=True)
        return 1


def _build_config(
    manager: ConfigManager, args: argparse.Namespace, target: Optional[str]
) -> GeneratorConfig:
    """Merge defaults, config file and CLI arguments."""
    overrides = {}

    if args.packages:
        overrides["packages"] = args.packages
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.overwrite:
        overrides["overwrite"] = args.overwrite
    if args.output_type:
        overrides["output_type"] = args.output_type
    if args.strip_prefix is not None:
        overrides["strip_prefix"] = args.strip_prefix
    if args.field_case:
        overrides["field_case"] = args.field_case
    if args.no_comments:
        overrides["add_comments"] = False

    return manager.get_config(target, overrides, args.config)


def _generate(registry: TargetRegistry, config: GeneratorConfig, verbose: bool) -> int:
    """Run generation and report the result."""
    context = GenerationContext()
    generator = registry.create_generator(config.target, config, context)
    type_source = PythonTypeSource()

    if config.output_path is None:
        # Generated code owns stdout
        result = generate_bindings(generator, type_source)
        for warning in result.warnings:
            logger.warning(warning)
        return 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(
            f"[green]Generating {generator.language_name} bindings...", total=None
        )
        result = generate_bindings(generator, type_source)

    console.print(
        f"[green]✓[/green] Wrote {result.file_count} {generator.language_name} files "
        f"and {len(result.barrels)} index files to [cyan]{config.output_path}[/cyan]"
    )

    if verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    _print_warnings(result)
    return 0


def _print_warnings(result: GenerationResult) -> None:
    if not result.warnings:
        return
    console.print("\n[yellow]⚠️  Warnings:[/yellow]")
    for warning in result.warnings:
        console.print(f"  [yellow]•[/yellow] {warning}")
    console.print()


def _list_targets(registry: TargetRegistry) -> int:
    """List supported targets with details."""
    table = Table(title="📋 Supported Targets", box=box.ROUNDED, title_style="bold cyan")

    table.add_column("Target", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Index File", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for target in registry.list_targets():
        info = registry.get_target_info(target)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(
            f"🔧 {target}",
            info["file_extension"],
            info["index_file"],
            info["class"],
            aliases,
        )

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] schema-bindgen -p [dim]PACKAGE[/dim] -o [dim]DIR[/dim] "
            "--target [cyan]TARGET[/cyan]\n"
            "[bold]Info:[/bold] schema-bindgen --target-info [cyan]TARGET[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _show_target_info(registry: TargetRegistry, target: str) -> int:
    """Show detailed information about a specific target."""
    if not registry.is_supported(target):
        console.print(f"[red]✗ Target '{target}' is not supported[/red]")
        console.print("[dim]Use --list-targets to see available options[/dim]")
        return 1

    info = registry.get_target_info(target)
    info_text = f"""[bold]Target:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Index File:[/bold] {info['index_file']}
[bold]Import Style:[/bold] {info['import_style']}
[bold]Interfaces:[/bold] {'yes' if info['supports_interfaces'] else 'no'}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name'].title()} Generator", border_style="green")
    )

    config = ConfigManager().get_config(info["name"])
    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")
    config_table.add_row("Field Case", config.field_case)
    config_table.add_row("Output Type", config.output_type.value)
    config_table.add_row("Overwrite", config.overwrite.value)
    config_table.add_row("Add Comments", str(config.add_comments))

    console.print()
    console.print(config_table)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``schema-bindgen`` command."""
    args = create_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
