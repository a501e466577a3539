"""
Command-line interface for the creational pattern examples.
"""

import argparse
import json
from typing import List, Optional

from .abstractfactory.registry import get_registry
from .builder.builder import SedanCarBuilder
from .builder.director import CarDirector
from .config.settings import get_settings
from .core.logging_config import setup_logging, get_logger
from .factorymethod.factory import XMLParserFactory
from .singleton.singleton import SingletonProtected

logger = get_logger(__name__)


def run_parser(tag: str, region: Optional[str], use_factory_method: bool) -> int:
    """
    Select a parser and print its identity.
    
    Args:
        tag: Raw parser type tag
        region: Raw region tag (default region from settings if None)
        use_factory_method: Use the fixed factory instead of a regional one
        
    Returns:
        Process exit code
    """
    if use_factory_method:
        parser = XMLParserFactory().get_parser(tag)
    else:
        region = region or get_settings().default_region
        parser = get_registry().get_parser(region, tag)
    
    if parser is None:
        logger.error(f"No parser available for type {tag!r}")
        return 1
    
    print(type(parser).__name__)
    return 0


def run_car() -> int:
    """Build the sedan specification and print it as JSON."""
    car = CarDirector().construct(SedanCarBuilder())
    print(json.dumps(car.to_dict(), indent=2))
    return 0


def run_singleton() -> int:
    """Print the identity of the singleton instance."""
    instance = SingletonProtected.get_instance()
    print(f"{type(instance).__name__} {id(instance):#x}")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Object-creation design pattern examples'
    )
    
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (default: LOG_LEVEL setting)'
    )
    
    subparsers = parser.add_subparsers(dest='command', required=True)
    
    parser_cmd = subparsers.add_parser('parser', help='Select an XML parser')
    parser_cmd.add_argument(
        '--type',
        dest='parser_type',
        type=str,
        required=True,
        help='Parser type tag (ORDER, FEEDBACK, ERROR)'
    )
    parser_cmd.add_argument(
        '--region',
        type=str,
        default=None,
        help='Parser family (CL, NY; default: DEFAULT_REGION setting)'
    )
    parser_cmd.add_argument(
        '--method',
        action='store_true',
        help='Use the factory method instead of the abstract factory'
    )
    
    subparsers.add_parser('car', help='Build the sedan specification')
    subparsers.add_parser('singleton', help='Show the singleton instance')
    
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = build_arg_parser().parse_args(argv)
    
    settings = get_settings()
    setup_logging(
        level=args.log_level or settings.log_level,
        format_string=settings.log_format,
        log_file=settings.log_file
    )
    
    if not settings.validate():
        logger.warning(f"Invalid settings: {settings.to_dict()}")
    
    if args.command == 'parser':
        return run_parser(args.parser_type, args.region, args.method)
    if args.command == 'car':
        return run_car()
    return run_singleton()
