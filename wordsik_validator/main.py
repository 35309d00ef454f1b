"""
Main entry point for the WordsIK content validator.

Commands:
  validate   run the selected validators and print a report
  status     print per-language status for the data tree
  template   generate a translation template from a source-language unit
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import Config
from .errors import WordsIKError
from .validation import ReportGenerator, ValidationCoordinator, ValidationOptions
from .validation.report import OUTPUT_FORMATS


def setup_logging(verbose: bool = False, quiet: bool = False, log_file: Optional[Path] = None):
    """Set up logging configuration."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordsik-validate",
        description="Validate multilingual educational word-list content",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s validate                       # run all validations
  %(prog)s validate --json --content      # syntax and content checks only
  %(prog)s validate -t -f data/vocabulary/es/grade-1/week-1.json
  %(prog)s status -o markdown
  %(prog)s template data/vocabulary/en/grade-1/week-1.json fr -o week-1.fr.json

Data layout:
  data/<vocabulary|grammar|spelling>/<language>/<grade-N>/<unit>.json
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    validate = subparsers.add_parser("validate", help="Validate content files")
    validate.add_argument("-a", "--all", action="store_true", help="Run all validations")
    validate.add_argument("-j", "--json", action="store_true", help="Validate JSON syntax only")
    validate.add_argument("-c", "--content", action="store_true",
                          help="Validate content appropriateness")
    validate.add_argument("-t", "--translations", action="store_true",
                          help="Validate translations against the base language")
    validate.add_argument("-l", "--languages", action="store_true",
                          help="Validate language structure and character sets")
    validate.add_argument("-f", "--files", nargs="+", default=[],
                          help="Specific files to validate (overrides discovery)")
    validate.add_argument("-o", "--output", choices=OUTPUT_FORMATS, default="text",
                          help="Output format (default: text)")
    validate.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    validate.add_argument("-q", "--quiet", action="store_true", help="Quiet mode (errors only)")
    validate.add_argument("--fail-on-warnings", action="store_true",
                          help="Exit with error code on warnings")
    validate.add_argument("--data-root", type=Path, default=Config.DATA_DIR,
                          help="Root of the content tree (default: data)")
    validate.add_argument("--log-file", type=Path, default=None, help="Also write logs to a file")

    status = subparsers.add_parser("status", help="Show validation status for all languages")
    status.add_argument("-o", "--output", choices=OUTPUT_FORMATS, default="text",
                        help="Output format (default: text)")
    status.add_argument("--data-root", type=Path, default=Config.DATA_DIR,
                        help="Root of the content tree (default: data)")

    template = subparsers.add_parser("template", help="Generate translation template")
    template.add_argument("file", help="Source-language unit file")
    template.add_argument("language", help="Target language code")
    template.add_argument("-o", "--output", type=Path, default=None, help="Output file path")

    return parser


def run_validate(args: argparse.Namespace) -> int:
    options = ValidationOptions(
        all=args.all,
        json=args.json,
        content=args.content,
        translations=args.translations,
        languages=args.languages,
        files=list(args.files),
        output=args.output,
        verbose=args.verbose,
        quiet=args.quiet,
        fail_on_warnings=args.fail_on_warnings,
        data_root=args.data_root,
    )
    coordinator = ValidationCoordinator(options)
    result = coordinator.run_validation()

    print(ReportGenerator(options.output).generate_report(result))
    return 1 if coordinator.should_fail(result) else 0


def run_status(args: argparse.Namespace) -> int:
    coordinator = ValidationCoordinator(
        ValidationOptions(languages=True, output=args.output, data_root=args.data_root)
    )
    result = coordinator.run_validation()
    print(ReportGenerator(args.output).generate_status_report(result))
    return 0


def run_template(args: argparse.Namespace) -> int:
    coordinator = ValidationCoordinator()
    template = coordinator.generate_translation_template(args.file, args.language)
    rendered = json.dumps(template, indent=2, ensure_ascii=False)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(rendered + "\n", encoding="utf-8")
        print(f"✅ Template saved to {args.output}")
    else:
        print(rendered)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
        log_file=getattr(args, "log_file", None),
    )
    logger = logging.getLogger(__name__)

    commands = {
        "validate": run_validate,
        "status": run_status,
        "template": run_template,
    }
    try:
        return commands[args.command](args)
    except (WordsIKError, ValueError, OSError) as e:
        logger.error(f"❌ {args.command} failed: {e}")
        print(f"❌ {args.command.capitalize()} failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
