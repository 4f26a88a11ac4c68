"""Main CLI entry point for the config-xml-reader command-line tool.

Provides commands to print the tree of a markup file, list the settings it
defines and check a batch of files for well-formedness.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from config_xml_reader import __version__
from config_xml_reader.api import load_with_statistics
from config_xml_reader.shared import ConfigError, ReaderConfig, XmlReadError
from config_xml_reader.shared.logging import get_logger
from config_xml_reader.settings import load_settings
from config_xml_reader.tree import XmlFileNode


class FileProcessor:
    """Loads files for the CLI and turns outcomes into plain dictionaries."""

    def __init__(self, config: Optional[ReaderConfig] = None):
        self.config = config or ReaderConfig()
        self.logger = get_logger(__name__, self.config.correlation_id, "cli_processor")

    def process_single_file(self, file_path: Path) -> Dict[str, Any]:
        """Load one file and describe the result."""
        try:
            root, statistics = load_with_statistics(file_path, self.config)
        except XmlReadError as e:
            return {
                "file": str(file_path),
                "success": False,
                "error": e.message,
                "error_type": type(e).__name__,
                "position": e.position,
            }
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning("Failed to read file", extra={"file": str(file_path)})
            return {
                "file": str(file_path),
                "success": False,
                "error": str(e),
                "error_type": type(e).__name__,
                "position": None,
            }

        return {
            "file": str(file_path),
            "success": True,
            "root": root,
            "node_count": statistics.node_count,
            "attribute_count": statistics.attribute_count,
            "max_depth": statistics.max_depth,
            "processing_time_ms": statistics.processing_time_ms,
        }


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="config-xml-reader",
        description="Read simplified configuration markup files"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=ReaderConfig().max_depth,
        help="Maximum element nesting depth"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser("parse", help="Print the tree of markup files")
    parse_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Files to parse"
    )
    parse_parser.add_argument(
        "--format", "-f",
        choices=["json", "text", "markup"],
        default="json",
        help="Output format (default: json)"
    )
    parse_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )

    settings_parser = subparsers.add_parser(
        "settings", help="List the settings defined by a configuration file"
    )
    settings_parser.add_argument("path", type=Path, help="Configuration file")
    settings_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)"
    )

    validate_parser = subparsers.add_parser("validate", help="Check markup files")
    validate_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Files to validate"
    )
    validate_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="text",
        help="Output format"
    )

    return parser


def format_tree(node: XmlFileNode, indent: int = 0) -> List[str]:
    """Render a tree as indented lines, one node per line."""
    attributes = " ".join(f'{a.name}="{a.value}"' for a in node.attributes)
    line = "  " * indent + node.name + (f" [{attributes}]" if attributes else "")
    lines = [line]
    for child in node.children:
        lines.extend(format_tree(child, indent + 1))
    return lines


def format_results(results: List[Dict[str, Any]], format_type: str) -> str:
    """Format parse results for output."""
    if format_type == "json":
        serializable = []
        for result in results:
            entry = {key: value for key, value in result.items() if key != "root"}
            if result.get("root") is not None:
                entry["tree"] = result["root"].to_dict()
            serializable.append(entry)
        return json.dumps(serializable, indent=2)

    lines = []
    for result in results:
        if not result["success"]:
            lines.append(f"✗ {result['file']}: {result['error']}")
            continue
        if format_type == "markup":
            lines.append(result["root"].to_markup())
        else:
            lines.append(f"✓ {result['file']}")
            lines.extend("   " + line for line in format_tree(result["root"]))
    return "\n".join(lines)


def cmd_parse(args: argparse.Namespace, config: ReaderConfig) -> int:
    """Handle parse command."""
    processor = FileProcessor(config)
    results = [processor.process_single_file(path) for path in args.paths]

    formatted_output = format_results(results, args.format)
    if args.output:
        try:
            args.output.write_text(formatted_output)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
        print(f"Results written to {args.output}", file=sys.stderr)
    else:
        print(formatted_output)

    return 0 if all(r["success"] for r in results) else 1


def cmd_settings(args: argparse.Namespace, config: ReaderConfig) -> int:
    """Handle settings command."""
    try:
        entries = load_settings(args.path, reader_config=config)
    except (XmlReadError, ConfigError, OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps(entries, indent=2))
    else:
        for key, value in entries.items():
            print(f"{key} = {value}")
    return 0


def cmd_validate(args: argparse.Namespace, config: ReaderConfig) -> int:
    """Handle validate command."""
    processor = FileProcessor(config)
    results = []
    for path in args.paths:
        result = processor.process_single_file(path)
        validation_result = {"file": str(path), "valid": result["success"]}
        if not result["success"]:
            validation_result["error"] = result["error"]
            validation_result["error_type"] = result["error_type"]
            validation_result["position"] = result["position"]
        results.append(validation_result)

    if args.format == "json":
        print(json.dumps(results, indent=2))
    else:
        valid_count = sum(1 for r in results if r["valid"])
        print(f"Validated {len(results)} files, {valid_count} valid")
        print("-" * 50)
        for result in results:
            status = "✓" if result["valid"] else "✗"
            print(f"{status} {result['file']}")
            if not result["valid"]:
                print(f"   Error: {result['error']}")

    return 0 if all(r["valid"] for r in results) else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)

    try:
        config = ReaderConfig(max_depth=args.max_depth)
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    if args.command == "parse":
        return cmd_parse(args, config)
    if args.command == "settings":
        return cmd_settings(args, config)
    if args.command == "validate":
        return cmd_validate(args, config)

    print(f"Unknown command: {args.command}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
