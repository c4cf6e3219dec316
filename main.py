import sys
import os
import argparse
import logging

from gmtool_logger import get_logger, set_console_level
logger = get_logger("main")

if getattr(sys, 'frozen', False):
    application_path = os.path.dirname(sys.executable)
    sys.path.insert(0, application_path)
    logger.debug(f"Running from bundle. Added to sys.path: {application_path}")
elif __file__:
    application_path = os.path.dirname(os.path.abspath(__file__))
    if application_path not in sys.path:
        sys.path.insert(0, application_path)
    logger.debug(f"Running from script. Added to sys.path: {application_path}")

import gmtool_config as config
import gmtool_localization as localization
from gmtool_enums import DocumentLanguage
from gmtool_exceptions import FormatConfigurationError
from gmtool_localization import tr
from gmtool_settings import load_settings
from gmtool_core import ScenarioFileService
from core.error_handler import ErrorHandler


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="gmtool",
        description="Check, normalize and create TRPG scenario documents.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {config.VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug log output on the console.")
    parser.add_argument(
        "--ui-lang",
        choices=sorted(localization.SUPPORTED_UI_LANGUAGES),
        default=None,
        help="Language of messages (defaults to the saved setting)."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Parse a scenario and report problems.")
    check.add_argument("file", help="Scenario file to check.")

    fmt = sub.add_parser("format", help="Rewrite a scenario in canonical form.")
    fmt.add_argument("file", help="Scenario file to rewrite.")
    fmt.add_argument("-o", "--output", default=None, help="Output path (defaults to overwriting the input).")
    fmt.add_argument(
        "--lang",
        choices=[lang.value for lang in DocumentLanguage],
        default=None,
        help="Heading language of the output (defaults to the saved setting)."
    )

    new = sub.add_parser("new", help="Create an empty scenario.")
    new.add_argument("title", help="Scenario title.")
    new.add_argument("-o", "--output", required=True, help="Output path.")
    new.add_argument(
        "--lang",
        choices=[lang.value for lang in DocumentLanguage],
        default=None,
        help="Heading language of the output (defaults to the saved setting)."
    )
    return parser


def _print_warnings(warnings):
    for warning in warnings:
        print(tr("cli_warning", message=warning))


def cmd_check(service, args):
    result = service.load_from_file(args.file)
    if not result.is_success:
        print(tr("cli_error", message=result.error_message), file=sys.stderr)
        return 1
    _print_warnings(result.warnings)

    validation = service.validate(result.data)
    _print_warnings(validation.warnings)
    for error in validation.errors:
        print(tr("cli_error", message=error), file=sys.stderr)
    if not validation.is_valid:
        return 1

    print(tr("cli_check_ok", path=args.file, scenes=len(result.data.scenes)))
    return 0


def cmd_format(service, args):
    result = service.load_from_file(args.file)
    if not result.is_success:
        print(tr("cli_error", message=result.error_message), file=sys.stderr)
        return 1
    _print_warnings(result.warnings)

    saved = service.save_to_file(result.data, args.output or args.file)
    if not saved.is_success:
        print(tr("cli_error", message=saved.error_message), file=sys.stderr)
        return 1
    print(tr("cli_written", path=saved.data))
    return 0


def cmd_new(service, args):
    scenario = service.create_new_scenario(args.title)
    saved = service.save_to_file(scenario, args.output)
    if not saved.is_success:
        print(tr("cli_error", message=saved.error_message), file=sys.stderr)
        return 1
    print(tr("cli_written", path=saved.data))
    return 0


COMMANDS = {
    "check": cmd_check,
    "format": cmd_format,
    "new": cmd_new,
}


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    if args.verbose:
        set_console_level(logging.DEBUG)

    settings = load_settings()
    ui_lang = args.ui_lang or settings.get("ui_language", config.DEFAULT_UI_LANGUAGE)
    localization.set_language(ui_lang)
    logger.debug(f"UI language initialized: {ui_lang}")

    if getattr(args, "lang", None):
        settings["document_language"] = args.lang

    try:
        service = ScenarioFileService.from_settings(settings)
    except FormatConfigurationError as e:
        info = ErrorHandler.create_from_exception(e)
        print(tr("cli_error", message=info.user_message), file=sys.stderr)
        return 1

    return COMMANDS[args.command](service, args)


if __name__ == "__main__":
    sys.exit(main())
