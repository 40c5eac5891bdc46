from __future__ import annotations

import argparse
import logging
import logging.config
from pathlib import Path

from .bootstrap import build_locator, run_demo

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None):
    p = argparse.ArgumentParser(
        description="Run the service locator demonstration.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument(
        "--recipient", default="Karen", help="Recipient of the demo notification"
    )
    p.add_argument(
        "--message",
        default="Tu reporte está listo.",
        help="Text of the demo notification",
    )
    p.add_argument(
        "--missing",
        default="email",
        help="Service name to look up that is expected to be unregistered",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if the missing service lookup does not fail",
    )
    p.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase logging verbosity (-v: console INFO, -vv: console DEBUG)",
    )
    p.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to log file (will be created/overwritten). Omit or set to '-' to disable file logging.",
    )
    return p.parse_args(argv)


def get_logging_configuration(verbose: int, log_file: Path | None = None) -> dict:
    """Return logging DictConfig.

    Console (stderr): WARNING, INFO with -v, DEBUG with -vv.
    File: ALL
    """
    handler_names: list[str] = ["console"]
    if log_file is not None:
        handler_names.append("file")

    if verbose >= 2:
        console_level = "DEBUG"
    elif verbose == 1:
        console_level = "INFO"
    else:
        console_level = "WARNING"

    log_formatters = {
        "default": {
            "format": "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%H:%M:%S",
        }
    }

    # stdout is reserved for service output
    log_handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": console_level,
            "formatter": "default",
            "stream": "ext://sys.stderr",
        }
    }
    if log_file is not None:
        log_handlers["file"] = {
            "class": "logging.FileHandler",
            "level": "NOTSET",
            "formatter": "default",
            "filename": str(log_file),
            "mode": "w",
            "encoding": "utf-8",
        }

    # The file handler wants everything from our package regardless of console level.
    app_level = "DEBUG" if log_file is not None else console_level

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": log_formatters,
        "handlers": log_handlers,
        "root": {
            "level": "DEBUG" if verbose >= 2 else "WARNING",
            "handlers": handler_names,
        },
        "loggers": {
            "service_locator": {
                "level": app_level,
                "handlers": handler_names,
                "propagate": False,
            }
        },
    }


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    log_file = args.log_file if args.log_file and str(args.log_file) != "-" else None
    logging.config.dictConfig(get_logging_configuration(args.verbose, log_file))
    logger.info("Parsed args: %s", args)

    locator = build_locator()
    missing_failed = run_demo(
        locator,
        recipient=args.recipient,
        message=args.message,
        missing=args.missing,
    )

    if args.strict and not missing_failed:
        logger.critical("Service '%s' was unexpectedly registered", args.missing)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
