#!/usr/bin/env python3
import argparse
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
BACKEND_DIR = ROOT / 'backend'


def main() -> int:
    parser = argparse.ArgumentParser(description='Run the tenant API locally with auto-reload.')
    parser.add_argument('--port', type=int, default=8001)
    parser.add_argument(
        '--dev-root',
        default='localhost',
        help='Extra root domain so hosts like nail-salons.dallas.localhost resolve locally.',
    )
    args = parser.parse_args()

    env = os.environ.copy()
    env.setdefault('APP_ENV', 'development')
    env.setdefault('LOG_LEVEL', 'DEBUG')
    if args.dev_root:
        env.setdefault('EXTRA_ROOT_DOMAINS', args.dev_root)

    cmd = [
        sys.executable,
        '-m',
        'uvicorn',
        'nearme.main:app',
        '--host',
        '0.0.0.0',
        '--port',
        str(args.port),
        '--reload',
    ]
    try:
        return subprocess.call(cmd, cwd=str(BACKEND_DIR), env=env)
    except KeyboardInterrupt:
        return 0


if __name__ == '__main__':
    raise SystemExit(main())
