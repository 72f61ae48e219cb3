# src/html_inspector/cli.py
import argparse
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from .core.inspector import HTMLInspector
from .core.reporter import Diagnostic
from .dom.document import Document
from .exceptions import DocumentLoadError, SettingsError
from .utils.configure_logging import configure_from_settings
from .utils.settings import SettingsManager

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_LOAD_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html-inspector",
        description="Inspect HTML documents for structural mistakes."
    )
    parser.add_argument("locations", nargs="+", help="HTML files or http(s) URLs to inspect.")
    parser.add_argument("--rules", type=str, default=None,
                        help="Comma-separated rule names to run (default: all).")
    parser.add_argument("--root", type=str, default=None,
                        help="CSS selector of the subtree to inspect (default: html).")
    parser.add_argument("--config", type=str, default=None,
                        help="JSON settings file merged over the bundled settings.")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ...).")
    parser.add_argument("--list-rules", action="store_true",
                        help="Print the available rules and exit.")
    return parser


def inspect_location(inspector: HTMLInspector, location: str, overrides: dict) -> List[Diagnostic]:
    """
    Loads one document and inspects it.

    Raises:
        DocumentLoadError: If the document cannot be loaded.
    """
    document = Document.load(location)
    results: List[Diagnostic] = []

    def on_complete(errors: List[Diagnostic]) -> None:
        results.extend(errors)

    inspector.inspect({**overrides, "document": document, "on_complete": on_complete})
    return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = SettingsManager.load()
        if args.config:
            settings = settings.merge(SettingsManager.load(args.config))
    except SettingsError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    configure_from_settings(settings, level_override=args.log_level)

    inspector = HTMLInspector.with_defaults()
    settings.apply(inspector)

    if args.list_rules:
        for name in inspector.rules.names():
            print(f"  - {name}")
        return EXIT_OK

    overrides = {}
    if args.rules:
        overrides["use_rules"] = [name.strip() for name in args.rules.split(",") if name.strip()]
    if args.root:
        overrides["dom_root"] = args.root

    exit_code = EXIT_OK
    show_headers = len(args.locations) > 1

    for location in tqdm(args.locations, desc="Inspecting", unit="doc", disable=not show_headers):
        try:
            diagnostics = inspect_location(inspector, location, overrides)
        except DocumentLoadError as e:
            tqdm.write(f"❌ {e}", file=sys.stderr)
            exit_code = EXIT_LOAD_ERROR
            continue

        if show_headers:
            tqdm.write(f"{location}:")
        for diagnostic in diagnostics:
            tqdm.write(diagnostic.format())

        if diagnostics and exit_code == EXIT_OK:
            exit_code = EXIT_DIAGNOSTICS

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
