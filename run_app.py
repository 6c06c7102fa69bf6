#!/usr/bin/env python3
"""
Zelvix Backend Runner
=====================

Run the Zelvix API in different modes.

Usage:
    python run_app.py                    # Development server with auto-reload
    python run_app.py --mode prod        # Production mode
    python run_app.py --port 8001        # Custom port
    python run_app.py --host 127.0.0.1   # Custom host
    python run_app.py --check-db         # Verify the database before starting
"""

import argparse
import asyncio
import os
import sys

def check_environment():
    """Report whether the environment looks usable"""
    print("Checking environment...")

    if os.path.exists(".env"):
        print(".env file found")
    else:
        print(".env file not found, using process environment")

    if not os.environ.get("DATABASE_URL") and not os.path.exists(".env"):
        print("DATABASE_URL is not set")
        return False

    return True

def check_database():
    from zelvix.core.database import check_connection, close_db

    async def _check():
        try:
            await check_connection()
        finally:
            await close_db()

    try:
        asyncio.run(_check())
    except Exception as e:
        print(f"Database connection failed: {e}")
        return False

    print("Database connection OK")
    return True

def run_main_app(host="0.0.0.0", port=8000, reload=True, workers=1):
    """Run the FastAPI application"""
    print(f"Starting Zelvix API on {host}:{port}")
    print(f"API Docs: http://{host}:{port}/api/docs")

    import uvicorn
    uvicorn.run(
        "zelvix.main:app",
        host=host,
        port=port,
        reload=reload,
        workers=None if reload else workers,
        log_level="info",
    )

def main():
    parser = argparse.ArgumentParser(
        description="Zelvix Backend Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_app.py                      # Development server on port 8000
  python run_app.py --mode prod          # Production mode
  python run_app.py --port 8001          # Custom port
        """
    )

    parser.add_argument(
        "--mode",
        choices=["dev", "prod"],
        default="dev",
        help="Server mode (default: dev)"
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind to (default: 8000)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=4,
        help="Worker processes in prod mode (default: 4)"
    )
    parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Disable auto-reload"
    )
    parser.add_argument(
        "--check-db",
        action="store_true",
        help="Verify the database connection before starting"
    )

    args = parser.parse_args()

    if not check_environment():
        return 1

    if args.check_db and not check_database():
        return 1

    reload = not args.no_reload and args.mode != "prod"
    run_main_app(args.host, args.port, reload, args.workers)

    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nServer stopped by user")
        sys.exit(0)
