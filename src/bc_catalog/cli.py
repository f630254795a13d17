import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import get_settings
from .core.coordinator import Coordinator
from .errors import CatalogExportError

SENSITIVE_KEYS = {"access_token"}


def mask_sensitive(ns: argparse.Namespace) -> dict:
    """Return the parsed args as a dict with the access token masked."""
    return {k: ("****" if k in SENSITIVE_KEYS and v else v) for k, v in vars(ns).items()}


def positive_timeout(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout: {value!r}") from None
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"timeout must be greater than 0, got {value}")
    return seconds


def configure_logging(debug: bool, log_file: Path | None) -> None:
    level = logging.DEBUG if debug else logging.INFO
    handlers = []
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    else:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        handlers=handlers,
    )

    # urllib3 logs request lines, never headers.
    if debug:
        for noisy in ("urllib3", "requests"):
            logging.getLogger(noisy).setLevel(logging.DEBUG)
            logging.getLogger(noisy).propagate = True


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    p = argparse.ArgumentParser(prog="bc-catalog",
                                description="Export BigCommerce store data to local JSON files")
    p.add_argument("--debug", action="store_true",
                   help="Enable verbose debug logging (incl. urllib3 request logs).")
    p.add_argument("--log-file", type=Path, default=None,
                   help="Write logs to this file instead of stderr.")

    sub = p.add_subparsers(dest="command", required=True)
    catalog = sub.add_parser("catalog", help="Export every catalog product to a JSON file")
    catalog.add_argument("--store-hash", default=settings.store_hash,
                         required=settings.store_hash is None,
                         help="BigCommerce store hash (env: BIGCOMMERCE_STORE_HASH)")
    catalog.add_argument("--access-token", default=settings.access_token,
                         required=settings.access_token is None,
                         help="BigCommerce access token (env: BIGCOMMERCE_ACCESS_TOKEN)")
    catalog.add_argument("--url", default=settings.api_base_url,
                         help="BigCommerce API base URL")
    catalog.add_argument("-o", "--output", type=Path, default=settings.output_path,
                         help="Where to write the products JSON. Example: -o products.json")
    catalog.add_argument("--timeout", type=positive_timeout, default=settings.request_timeout_seconds,
                         help="Per-request timeout in seconds.")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    try:
        parser = build_parser()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    args = parser.parse_args(argv)
    configure_logging(args.debug, args.log_file)

    log = logging.getLogger("cli")
    log.debug("Parsed args (masked): %s", mask_sensitive(args))

    try:
        coord = Coordinator(
            store_hash=args.store_hash,
            access_token=args.access_token,
            url=args.url,
            output_path=args.output,
            timeout=args.timeout,
        )
        log.debug("Coordinator initialized")
        path = coord.run()
    except CatalogExportError as e:
        print(str(e), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        log.warning("Interrupted by user.")
        return 130
    except Exception:
        log.exception("Unhandled error during execution")
        return 1

    print(f"Products written to {path}")
    return 0


if __name__ == "__main__":

    sys.exit(main())
