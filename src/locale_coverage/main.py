"""
Main application entry point
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from .config import Settings, load_settings
from .cli import BatchSelector, LocaleSelector
from .services import (
    CoverageReporter,
    InvalidInputError,
    LocaleLoadError,
    LocaleRegistry,
    compare,
    validate_baseline,
)
from .utils import LocaleValidator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INCOMPLETE = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="locale-coverage",
        description="Translation Coverage Checker: compare locale files against the baseline locale",
        epilog="Examples:\n  locale-coverage\n  locale-coverage --locale=ru",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--locale', help="Check specific locale only (e.g., --locale=ru)")
    parser.add_argument('--dir', dest='locales_dir', help="Locales directory (default: LOCALES_DIR or ./locales)")
    parser.add_argument('--baseline', help="Baseline locale code (default: BASELINE_LOCALE or en)")
    parser.add_argument('--all', action='store_true', help="Check all locales without prompting")
    parser.add_argument('--strict', action='store_true', help="Exit with status 1 when a locale is incomplete or fails to load")
    parser.add_argument('--env-file', help="Read settings from this .env file")
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Command line options take precedence over environment settings"""
    locales = settings.locales
    if args.locales_dir or args.baseline:
        locales = replace(
            locales,
            locales_dir=args.locales_dir or locales.locales_dir,
            baseline_locale=args.baseline or locales.baseline_locale
        )
    report = settings.report
    if args.strict:
        report = replace(report, fail_on_incomplete=True)
    return replace(settings, locales=locales, report=report)


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


class CoverageChecker:
    """Loads the baseline, picks candidates and reports their coverage"""

    def __init__(self, settings: Settings, selector=None, write=print):
        self.settings = settings
        self.write = write
        self.registry = LocaleRegistry(
            settings.locales.locales_dir,
            baseline_locale=settings.locales.baseline_locale,
            excluded_locales=settings.locales.excluded_locales
        )
        self.selector = selector or LocaleSelector(output=write)
        self.reporter = CoverageReporter(write=write, preview_length=settings.report.preview_length)

    def choose_locales(self, locale_arg: Optional[str]) -> List[str]:
        if locale_arg:
            return [locale_arg]

        available = self.registry.available_locales()
        if len(available) <= 1:
            return available
        return self.selector.select(available)

    async def run(self, locale_arg: Optional[str] = None) -> int:
        """
        Run the coverage check

        Returns:
            Process exit status
        """
        if locale_arg:
            is_valid, error = LocaleValidator.validate_locale_code(locale_arg)
            if not is_valid:
                self.write(f"Error: {error}")
                return EXIT_CONFIG_ERROR
            locale_arg = locale_arg.strip()

        baseline_id = self.settings.locales.baseline_locale
        baseline_name = self.registry.display_name(baseline_id)
        try:
            baseline = await self.registry.load(baseline_id)
            validate_baseline(baseline)
        except LocaleLoadError as e:
            logger.error(f"Failed to load baseline {baseline_name}: {e.reason}")
            self.write(f"Error: Failed to load baseline {baseline_name} ({e.reason})")
            return EXIT_CONFIG_ERROR
        except InvalidInputError as e:
            self.write(f"Error: {baseline_name}: {e}")
            return EXIT_CONFIG_ERROR

        locales = self.choose_locales(locale_arg)
        if not locales:
            self.write("No translation files found.")
            return EXIT_OK

        self.reporter.header(baseline_name, len(baseline))

        all_complete = True
        for locale in locales:
            locale_name = self.registry.display_name(locale)
            try:
                candidate = await self.registry.load(locale)
            except LocaleLoadError as e:
                logger.warning(f"Skipping {locale_name}: {e.reason}")
                self.reporter.report_load_error(locale_name, e.reason)
                all_complete = False
                continue

            result = compare(baseline, candidate, locale)
            self.reporter.report_result(result, locale_name, baseline, baseline_name)
            all_complete = all_complete and result.is_complete

        self.reporter.footer()

        if self.settings.report.fail_on_incomplete and not all_complete:
            return EXIT_INCOMPLETE
        return EXIT_OK


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    settings = apply_overrides(load_settings(args.env_file), args)
    configure_logging(settings.logging.log_level)

    selector = BatchSelector() if args.all else None
    checker = CoverageChecker(settings, selector=selector)
    return await checker.run(locale_arg=args.locale)


def run():
    """Console script entry point"""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Stopped by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Coverage check crashed: {e}")
        raise


if __name__ == '__main__':
    run()
