#!/usr/bin/env python3
"""
manage.py - Task tracker management entry point

Usage:
    python manage.py                      # start the web server (default)
    python manage.py web                  # start the web server
    python manage.py web --port 9000      # start on a specific port
    python manage.py web --log-level DEBUG
"""

import sys
import logging
import argparse

from backend.src.web.config import config


LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str) -> None:
    """Configure root logging for the server process"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def run_web_server(
    host: str = config.host,
    port: int = config.port,
    debug: bool = config.debug,
    log_level: str = config.log_level,
):
    """Start the web server"""
    if not 0 < port < 65536:
        print(f"[ERROR] invalid port: {port}")
        sys.exit(1)

    setup_logging(log_level)

    print("\n" + "=" * 50)
    print(f"  {config.app_name}")
    print("=" * 50)

    try:
        import uvicorn
        from backend.src.web.main import create_app

        app = create_app(
            config.model_copy(
                update={"host": host, "port": port, "debug": debug, "log_level": log_level.upper()}
            )
        )

        print(f"\n[Starting] Launching server...")
        print(f"  URL: http://{host}:{port}")
        print(f"  Debug: {'ON' if debug else 'OFF'}")
        print(f"\nPress Ctrl+C to stop.\n")

        uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
    except ImportError as e:
        print(f"[ERROR] Cannot load Web module: {e}")
        print("Likely missing a dependency for the web server.")
        print("Try: pip install -e .")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n\n[INFO] Web server stopped")


def main():
    parser = argparse.ArgumentParser(
        description="Task tracker service - management entry point",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python manage.py                       # start the web server
  python manage.py web --port 9000       # start on port 9000
  python manage.py web --debug           # enable debug mode
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="available commands")

    parser_web = subparsers.add_parser("web", help="start the web server")
    parser_web.add_argument("--host", default=config.host, help="bind address")
    parser_web.add_argument("--port", type=int, default=config.port, help="bind port")
    parser_web.add_argument("--debug", action="store_true", help="enable debug mode")
    parser_web.add_argument("--log-level", default=config.log_level, help="logging level (default: %(default)s)")

    args = parser.parse_args()

    # No sub-command: start the web server with configured defaults
    if not args.command:
        run_web_server()
        return

    if args.command == "web":
        run_web_server(
            host=args.host,
            port=args.port,
            debug=args.debug or config.debug,
            log_level=args.log_level,
        )
    else:
        parser.print_help()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nExited")
        sys.exit(0)
