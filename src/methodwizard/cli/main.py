# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""methodwizard CLI."""

from __future__ import annotations

import argparse
from dataclasses import replace

from ..config import HttpSettings, load_http_settings
from ..errors import FileReadError
from ..log import setup_logging
from ..runtime import MethodWizard
from ..scan.report import DEFAULT_OUTPUT_FILE, write_results
from ..targets import load_targets


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="methodwizard",
        description="Enumerate the HTTP methods accepted by one or more targets",
        allow_abbrev=False,
    )
    parser.add_argument("-u", dest="url", default="", help="Test all HTTP methods against a single URL")
    parser.add_argument("-w", dest="url_list", default="", help="File with newline-separated URLs to test")
    parser.add_argument("-method", default="GET", help="HTTP method to test against the URL list (default: GET)")
    parser.add_argument(
        "-o",
        dest="output",
        default=DEFAULT_OUTPUT_FILE,
        help=f"JSON output file (default: {DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument(
        "-combine",
        action="store_true",
        help="Test every HTTP method against every URL in the list",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=None,
        help=(
            "Maximum concurrent probes (default: one thread per URL/method pair; "
            "set this for large -combine lists)"
        ),
    )
    parser.add_argument(
        "-timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: none)",
    )
    parser.add_argument(
        "-insecure",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("-log-level", dest="log_level", default=None, help="Logging level (default: WARNING)")
    return parser


def _settings_from_args(args: argparse.Namespace) -> HttpSettings:
    settings = load_http_settings()
    if args.workers is not None:
        settings = replace(settings, max_workers=args.workers if args.workers > 0 else None)
    if args.timeout is not None:
        settings = replace(settings, timeout=args.timeout if args.timeout > 0 else None)
    if args.insecure:
        settings = replace(settings, verify_ssl=False)
    return settings


def _report_thread_exhaustion(exc: RuntimeError) -> None:
    # raised by ThreadPoolExecutor when the OS refuses another probe thread
    print(f"[-] Could not start probe threads: {exc}. Retry with -workers <n> to cap concurrency.")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.url:
        try:
            with MethodWizard(settings=_settings_from_args(args)) as wizard:
                wizard.single_target(args.url)
        except RuntimeError as exc:
            _report_thread_exhaustion(exc)
        return 0

    if args.url_list:
        try:
            urls = load_targets(args.url_list)
        except FileReadError as exc:
            print(f"[-] Error reading file: {exc}")
            return 0

        try:
            with MethodWizard(settings=_settings_from_args(args)) as wizard:
                if args.combine:
                    batch = wizard.multi_target_all_methods(urls)
                else:
                    batch = wizard.multi_target(urls, args.method)
        except RuntimeError as exc:
            _report_thread_exhaustion(exc)
            return 0
        write_results(batch.results, args.output)
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
