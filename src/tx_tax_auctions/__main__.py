import argparse
import json
import logging
import sys

from .county_registry import load_registry
from .errors import ConfigurationError
from .pipeline import SearchPipeline
from .report import RENDERERS, write_report
from .settings import SALE_TYPES, get_settings


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser():
    parser = argparse.ArgumentParser(
        description="Find Texas property tax auction listings",
    )
    parser.add_argument(
        "--registry",
        default=None,
        help="County registry file (name,id,url_prefix rows)",
    )
    parser.add_argument(
        "--sale-type",
        choices=SALE_TYPES,
        default=None,
        help="SA for upcoming sales, SO for struck-off properties",
    )
    parser.add_argument(
        "--min-value",
        type=int,
        default=None,
        help="Minimum adjudged value to search for",
    )
    parser.add_argument(
        "--pause",
        type=float,
        default=None,
        help="Seconds to wait between county requests",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds",
    )
    parser.add_argument(
        "--counties",
        default=None,
        help="Comma-separated county ids or names to search",
    )
    parser.add_argument(
        "--format",
        choices=sorted(RENDERERS),
        default="csv",
        help="Report format",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Write the report to a file instead of stdout",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the planned requests without contacting the service",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit one JSON log line per county and a run summary on stderr",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (DEBUG, INFO, etc.)",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    counties = None
    if args.counties:
        counties = [c.strip() for c in args.counties.split(",") if c.strip()]

    try:
        settings = get_settings().with_overrides(
            registry_path=args.registry,
            sale_type=args.sale_type,
            min_adjudged_value=args.min_value,
            pause_seconds=args.pause,
            timeout=args.timeout,
        )
        registry = load_registry(settings.registry_path)
    except ConfigurationError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1

    def log_fn(payload):
        sys.stderr.write(json.dumps(payload) + "\n")

    pipeline = SearchPipeline(settings, log_fn=log_fn if args.log_json else None)

    if args.dry_run:
        for planned in pipeline.plan(registry, counties):
            print(json.dumps(planned))
        return 0

    stream = sys.stdout
    if args.output:
        try:
            stream = open(args.output, "w", encoding="utf-8")
        except OSError as exc:
            sys.stderr.write(f"error: cannot write report to {args.output!r}: {exc}\n")
            return 1

    try:
        result = pipeline.run(registry, counties)
        write_report(RENDERERS[args.format](result.records), stream)
    finally:
        if stream is not sys.stdout:
            stream.close()
    if args.log_json:
        log_fn(result.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
