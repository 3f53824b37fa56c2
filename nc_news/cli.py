#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os
import subprocess
import sys


def run(cmd: list[str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.call(cmd)


def cmd_test(args: argparse.Namespace) -> int:
    os.environ.setdefault("PYTHONUNBUFFERED", "1")
    pytest_args = [sys.executable, "-m", "pytest"]
    if args.quiet:
        pytest_args.append("-q")
    if args.k:
        pytest_args += ["-k", args.k]
    return run(pytest_args)


def cmd_seed(args: argparse.Namespace) -> int:
    from nc_news.config import DB_DSN
    from nc_news.db.data.test_data import TEST_DATA
    from nc_news.db.seed import seed

    dsn = args.dsn or DB_DSN
    if not dsn:
        print("DATABASE_URL is not configured (or pass --dsn)", file=sys.stderr)
        return 2
    asyncio.run(seed(dsn, TEST_DATA))
    print("seeded", ", ".join(f"{k}={len(v)}" for k, v in TEST_DATA.items()))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("nc_news.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="nc-news", description="NC News API helper")
    sub = parser.add_subparsers(dest="command", required=True)

    p_serve = sub.add_parser("serve", help="Run the API with uvicorn")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=9090)
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    p_seed = sub.add_parser("seed", help="Drop, recreate and seed the tables with the test dataset")
    p_seed.add_argument("--dsn", help="Override DATABASE_URL")
    p_seed.set_defaults(func=cmd_seed)

    p_test = sub.add_parser("test", help="Run pytest")
    p_test.add_argument("-q", "--quiet", action="store_true", help="Quiet mode (-q)")
    p_test.add_argument("-k", help="Only run tests matching expression")
    p_test.set_defaults(func=cmd_test)

    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
