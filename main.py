"""
inetaddr - Network endpoint address inspector
Main entry point for the command line tool.
"""

import json
import logging
import sys
from typing import Optional

import structlog
from dotenv import load_dotenv

from inetaddr import InternetAddress
from inetaddr.config import reload_settings

logger = structlog.get_logger(__name__)


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structured logging on top of stdlib logging."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def inspect_address(address: InternetAddress) -> dict:
    """Collect the verdicts shown for an address."""
    report = address.to_dict()
    report.update(
        {
            "rendered": address.to_string(),
            "backend": address.backend,
            "has_valid_ip": address.has_valid_ip(),
            "has_valid_port": address.has_valid_port(),
        }
    )
    return report


def format_report(report: dict) -> str:
    lines = [report["rendered"]]
    for key in ("family", "backend", "has_valid_ip", "has_valid_port", "is_valid"):
        lines.append(f"  {key}: {report[key]}")
    return "\n".join(lines)


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        description="inetaddr - classify, validate and render endpoint addresses",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py 192.0.2.1 8080            # IPv4 endpoint
  python main.py 2001:db8::1 443 --json    # IPv6 endpoint as JSON
  python main.py --parse "[::1]:5000"      # Parse a rendered address
  python main.py bad -1 --backend socket   # Use the socket storage backend
        """,
    )
    parser.add_argument("ip", nargs="?", help="IP text to inspect")
    parser.add_argument("port", nargs="?", type=int, help="Port number")
    parser.add_argument(
        "--parse",
        metavar="TEXT",
        help='Parse a rendered address ("ip:port" or "[ip]:port")',
    )
    parser.add_argument(
        "--backend",
        choices=["text", "socket"],
        default=None,
        help="Storage backend (default: ADDRESS_BACKEND setting)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        0 if the address is valid, 1 if it is not, 2 on usage/parse errors
    """
    load_dotenv(".env.local")
    settings = reload_settings()
    configure_logging(settings.app.log_level)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.parse is not None:
        try:
            address = InternetAddress.from_string(args.parse, backend=args.backend)
        except ValueError as e:
            logger.error("address_parse_failed", text=args.parse, error=str(e))
            print(str(e), file=sys.stderr)
            return 2
    elif args.ip is not None and args.port is not None:
        address = InternetAddress(args.ip, args.port, backend=args.backend)
    else:
        parser.print_usage(sys.stderr)
        return 2

    logger.debug(
        "address_inspected",
        ip=address.get_ip(),
        port=address.get_port(),
        backend=address.backend,
    )

    report = inspect_address(address)
    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print(format_report(report))
    return 0 if report["is_valid"] else 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
