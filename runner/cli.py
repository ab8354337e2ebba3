from __future__ import annotations

import argparse
import os


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the smoke runner."""
    parser = argparse.ArgumentParser(description="Expert chat client smoke runner")
    parser.add_argument("--base-url", default=os.getenv("BASE_URL", "http://localhost:3000"))
    parser.add_argument("--username", default=os.getenv("SMOKE_USERNAME"))
    parser.add_argument("--password", default=os.getenv("SMOKE_PASSWORD"))
    parser.add_argument("--timeout", type=float, default=10.0)
    parser.add_argument("--retries", type=int, default=0, dest="retry_attempts")
    args = parser.parse_args(argv)
    if not args.username or not args.password:
        parser.error("--username and --password (or SMOKE_USERNAME/SMOKE_PASSWORD) are required")
    return args
