"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the catalog service
"""
import os
import sys
import argparse
from typing import Any, Dict, List, Optional

from patterncatalog import __version__
from patterncatalog.application.dto.responses import PatternCategory
from patterncatalog.application.service import CatalogService
from patterncatalog.cli.formatters import format_output
from patterncatalog.config.manager import ConfigurationManager
from patterncatalog.domain.base.exceptions import DomainException
from patterncatalog.domain.base.ports import OutputPort
from patterncatalog.infrastructure.logging.logger import get_logger, setup_logging
from patterncatalog.infrastructure.output import ConsoleOutput

FORMATS = ['json', 'yaml', 'table', 'list']


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else 'patterns',
        description="Pattern Catalog - runnable Gang-of-Four design pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demos list                          # List all demonstrations
  %(prog)s demos list --category structural    # List one category
  %(prog)s demos run observer                  # Run one demonstration
  %(prog)s --format json demos run --all       # Run everything, as JSON
  %(prog)s demos run --all --stream          # Print lines as they are produced
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMATS, help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')
    subparsers.required = True

    # Demos resource
    demos_parser = subparsers.add_parser('demos', help='Pattern demonstrations')
    demos_subparsers = demos_parser.add_subparsers(dest='action', help='Demonstration actions')
    demos_subparsers.required = True

    demos_list = demos_subparsers.add_parser('list', help='List demonstrations')
    demos_list.add_argument('--category', choices=[c.value for c in PatternCategory],
                            help='Only list one category')

    demos_run = demos_subparsers.add_parser('run', help='Run demonstrations')
    target = demos_run.add_mutually_exclusive_group(required=True)
    target.add_argument('name', nargs='?', help='Demonstration name')
    target.add_argument('--all', action='store_true', help='Run every demonstration')
    demos_run.add_argument('--category', choices=[c.value for c in PatternCategory],
                           help='Only run demonstrations in this category')
    demos_run.add_argument('--stream', action='store_true',
                           help='Print lines as they are produced instead of formatting results')

    return parser.parse_args(argv)


def execute_command(args: argparse.Namespace, service: CatalogService) -> Optional[Dict[str, Any]]:
    """
    Route a parsed command to the catalog service.

    Returns the data to format, or None when the command already wrote its output.
    """
    if args.resource == 'demos' and args.action == 'list':
        infos = service.list_demonstrations(args.category)
        return {"demonstrations": [info.to_dict() for info in infos]}

    if args.resource == 'demos' and args.action == 'run':
        if args.stream:
            stream_demonstrations(args, service, ConsoleOutput())
            return None
        if args.all:
            results = service.run_all(args.category)
        else:
            results = [service.run(args.name, args.category)]
        return {"results": [result.to_dict() for result in results]}

    raise ValueError(f"Unknown command: {args.resource} {args.action}")


def stream_demonstrations(args: argparse.Namespace, service: CatalogService, output: OutputPort) -> None:
    """Run the selected demonstrations straight into output, one headed block each."""
    if args.all:
        names = [info.name for info in service.list_demonstrations(args.category)]
    else:
        names = [args.name]

    for index, name in enumerate(names):
        if index:
            output.write("")
        output.write(f"== {name}")
        service.stream(name, output, args.category)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = parse_args(argv)

    try:
        config_manager = ConfigurationManager(args.config)
        app_config = config_manager.app_config
        if args.log_level:
            app_config = app_config.model_copy(
                update={"logging": app_config.logging.model_copy(update={"level": args.log_level})}
            )
        setup_logging(app_config.logging)
        logger = get_logger(__name__)
        logger.debug("CLI started", resource=args.resource, action=args.action)

        service = CatalogService(app_config)
        result = execute_command(args, service)
        if result is not None:
            output_format = args.format or app_config.cli.default_format
            print(format_output(result, output_format))
        return 0
    except DomainException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
