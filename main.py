#!/usr/bin/env python3
"""
tvcalc - YouTube TV Calculator site build tools

CLI entry point for generating sitemap.xml/robots.txt and pricing plans.
"""

import argparse
import logging
import sys
from datetime import datetime

from tvcalc.config import SITE_NAME, resolve_site_config
from tvcalc.calculator import calculate_quote, get_addon_packages
from tvcalc.generators import generate_site_files, generate_sitemap, generate_robots

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for command-line runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def _site_config(args):
    return resolve_site_config(
        config_path=args.config,
        site_url=args.site_url,
        content_dir=args.content_dir,
        output_dir=args.output_dir,
    )


def _exit_code(result, strict: bool) -> int:
    """Builds never fail CI unless --strict is given."""
    if strict and not result.clean:
        logger.error("❌ Strict mode: build had errors or warnings")
        return 1
    return 0


def cmd_generate(args):
    """Generate sitemap.xml and robots.txt."""
    logger.info("=" * 60)
    logger.info(f"{SITE_NAME} - Site files")
    logger.info(f"Started at {datetime.now().isoformat()}")
    logger.info("=" * 60)

    result = generate_site_files(_site_config(args))

    logger.info(f"Finished at {datetime.now().isoformat()}")
    return _exit_code(result, args.strict)


def cmd_sitemap(args):
    """Generate sitemap.xml only."""
    result = generate_sitemap(_site_config(args))
    return _exit_code(result, args.strict)


def cmd_robots(args):
    """Generate robots.txt only."""
    result = generate_robots(_site_config(args))
    return _exit_code(result, args.strict)


def cmd_quote(args):
    """Print the monthly (or yearly) cost for a set of add-ons."""
    if args.list:
        for pkg in get_addon_packages().values():
            print(f"{pkg.id:<20} ${pkg.price:>6.2f}  {pkg.name} - {pkg.description}")
        return 0

    try:
        quote = calculate_quote(args.addons, "yearly" if args.yearly else "monthly")
    except ValueError as e:
        logger.error(f"❌ {e}")
        return 2

    print(quote.format())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=f"tvcalc - {SITE_NAME} site build tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py generate                  # Write public/sitemap.xml and public/robots.txt
  python main.py generate --strict         # Exit 1 if any post was skipped
  python main.py sitemap --site-url https://example.com
  python main.py quote sports-plus 4k-plus # Price base plan + add-ons
  python main.py quote --list              # Show available add-ons
        """
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--site-url", help="Site origin (overrides site.json and SITE_URL)")
    parser.add_argument("--config", help="Path to site.json (default: project root)")
    parser.add_argument("--content-dir", help="Directory of blog markdown files")
    parser.add_argument("--output-dir", help="Public output directory")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, help_text in [
        ("generate", "Generate sitemap.xml and robots.txt"),
        ("sitemap", "Generate sitemap.xml only"),
        ("robots", "Generate robots.txt only"),
    ]:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--strict",
            action="store_true",
            help="Exit non-zero on errors or skipped posts (for CI gating)"
        )

    quote_parser = subparsers.add_parser("quote", help="Calculate subscription cost")
    quote_parser.add_argument("addons", nargs="*", help="Add-on package ids")
    quote_parser.add_argument("--yearly", action="store_true", help="Show yearly instead of monthly cost")
    quote_parser.add_argument("--list", action="store_true", help="List available add-on packages")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    commands = {
        "generate": cmd_generate,
        "sitemap": cmd_sitemap,
        "robots": cmd_robots,
        "quote": cmd_quote,
    }

    try:
        result = commands[args.command](args)
        return result if result is not None else 0
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
