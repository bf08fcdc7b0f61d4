"""
Command line entry point: serve the site, or export its data offline.

    orbit1-site serve --port 8000
    orbit1-site snapshot -o globe.json
    orbit1-site preview -o og-image.png
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from config import SiteConfig
from logging_config import configure_logging, get_logger, resolve_level
from orbit_site.app import build_globe_data, create_app
from orbit_site.catalog import CatalogClient
from orbit_site.preview import render_preview

logger = get_logger(__name__)


def _client(config: SiteConfig) -> CatalogClient:
    return CatalogClient(config.TLE_URLS, timeout=config.HTTP_TIMEOUT)


def cmd_serve(args: argparse.Namespace, config: SiteConfig) -> int:
    host = args.host or config.HOST
    port = args.port or config.PORT
    logger.info("Starting ORBIT1 site on %s:%d", host, port)
    create_app(config).run(host=host, port=port, debug=args.debug)
    return 0


def cmd_snapshot(args: argparse.Namespace, config: SiteConfig) -> int:
    data = build_globe_data(_client(config))
    payload = json.dumps(data.model_dump(mode="json"), indent=2, ensure_ascii=False)

    if args.output == "-":
        sys.stdout.write(payload + "\n")
    else:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(payload + "\n")
        logger.info("Saved %d satellites to %s", data.count, args.output)
    return 0


def cmd_preview(args: argparse.Namespace, config: SiteConfig) -> int:
    png = render_preview(build_globe_data(_client(config)))
    with open(args.output, "wb") as f:
        f.write(png)
    logger.info("Saved preview image to %s", args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orbit1-site",
        description="ORBIT1 mission landing page and live satellite globe",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--json-logs", action="store_true", help="Emit structured log events as JSON")
    parser.add_argument("--log-file", help="Also write logs to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the web server")
    serve.add_argument("--host", help="Bind address (default: ORBIT1_HOST)")
    serve.add_argument("--port", type=int, help="Bind port (default: ORBIT1_PORT)")
    serve.add_argument("--debug", action="store_true", help="Flask debug mode")
    serve.set_defaults(handler=cmd_serve)

    snapshot = subparsers.add_parser("snapshot", help="Write current globe data as JSON")
    snapshot.add_argument("-o", "--output", default="-", help="Output file (default: stdout)")
    snapshot.set_defaults(handler=cmd_snapshot)

    preview = subparsers.add_parser("preview", help="Write the social card PNG")
    preview.add_argument("-o", "--output", required=True, help="Output PNG file")
    preview.set_defaults(handler=cmd_preview)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = SiteConfig()

    level = logging.DEBUG if args.verbose else resolve_level(config.LOG_LEVEL)
    # Keep stdout clean for `snapshot -o -`
    configure_logging(
        level=level,
        log_file=args.log_file,
        json_logs=args.json_logs,
        stream=sys.stderr,
    )

    return args.handler(args, config)


if __name__ == "__main__":
    sys.exit(main())
