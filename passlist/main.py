import argparse
import logging
from pathlib import Path

from passlist.config import APP_VERSION, Settings, get_settings, parse_start_column
from passlist.errors import PasslistError
from passlist.locator import locate_input, resolve_output_path
from passlist.lookup import list_entries, lookup
from passlist.pipeline import ConverterRunner


logger = logging.getLogger(__name__)


def start_column(value: str) -> int:
    try:
        return parse_start_column(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="passlist",
        description="Convert a browser password export into a sorted, aligned password list",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser("convert", help="convert a Chromium/Vivaldi or Firefox CSV export")
    convert_parser.add_argument("input", nargs="?", help="CSV export; scanned for in the search directory if omitted")
    convert_parser.add_argument("-o", "--output", help="password list to write")
    convert_parser.add_argument(
        "--start-column",
        type=start_column,
        default=None,
        help="1-based column where passwords start (default: 35)",
    )

    lookup_parser = subparsers.add_parser("lookup", help="show password list entries for a domain")
    lookup_parser.add_argument("term", nargs="?", help="domain label (discord) or domain pattern (discord.com)")
    lookup_parser.add_argument("-p", "--password-file", help="password list to search")

    return parser.parse_args(argv)


def run_convert(args: argparse.Namespace, settings: Settings) -> int:
    located = locate_input(args.input or settings.input_file, Path(settings.search_dir))
    output_path = resolve_output_path(located, args.output or settings.output_file, settings.default_output_file)

    runner = ConverterRunner(settings)
    result = runner.run(
        input_path=located.path,
        output_path=output_path,
        password_start_column=args.start_column,
    )

    print(
        "input={input} output={output} schema={schema} records={records} skipped={skipped}".format(
            input=result.input_path,
            output=result.output_path,
            schema=result.schema,
            records=result.written_records,
            skipped=len(result.skipped_rows),
        )
    )
    return 0


def run_lookup(args: argparse.Namespace, settings: Settings) -> int:
    password_file = Path(args.password_file or settings.password_file)

    if args.term:
        lines = lookup(password_file, args.term)
    else:
        lines = list_entries(password_file)

    for line in lines:
        print(line)
    return 0 if lines else 1


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        settings = get_settings()
    except PasslistError as exc:
        logger.error("invalid configuration: %s", exc)
        raise SystemExit(1) from exc

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    handler = run_convert if args.command == "convert" else run_lookup
    try:
        exit_code = handler(args, settings)
    except PasslistError as exc:
        logger.error("%s failed: %s", args.command, exc)
        raise SystemExit(1) from exc

    if exit_code:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
