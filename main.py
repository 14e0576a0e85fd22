"""FolkloreRun — dev launcher. Starts the API backend in watch mode."""

import argparse
import asyncio
import os
import signal
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
BACKEND_PORT = os.getenv("BACKEND_PORT", "13013")


def check_content(content_url: str) -> int:
    """Load content once and report where each dataset came from."""
    from folklorerun.loader import load_content
    from folklorerun.settings import get_settings

    settings = get_settings()
    repository = asyncio.run(load_content(
        content_url,
        timeout=settings.fetch_timeout,
        creature_resource=settings.creature_resource,
        ui_resource=settings.ui_resource,
    ))
    print(f"creatures: {repository.creatures_origin} ({', '.join(repository.creature_ids())})")
    print(f"ui config: {repository.ui_origin}")
    return 0


def main():
    parser = argparse.ArgumentParser(description="FolkloreRun dev launcher")
    parser.add_argument("--content-url", default=None,
                        help="Base URL serving the content JSON files")
    parser.add_argument("--check", action="store_true",
                        help="Load content once, report its origin and exit")
    args = parser.parse_args()

    content_url = args.content_url or os.getenv(
        "FOLKLORERUN_CONTENT_URL", "http://localhost:13015/content"
    )
    if args.check:
        sys.exit(check_content(content_url))

    # Build env for the subprocess so the backend fetches from the same place
    env = os.environ.copy()
    env["FOLKLORERUN_CONTENT_URL"] = content_url

    procs: list[subprocess.Popen] = []

    def shutdown(*_):
        print("\nShutting down...")
        for p in procs:
            p.terminate()
        for p in procs:
            p.wait()
        sys.exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    print(f"Starting backend on http://localhost:{BACKEND_PORT} (content from {content_url}) ...")
    procs.append(subprocess.Popen(
        ["uv", "run", "uvicorn", "backend.app:app", "--reload", "--host", HOST, "--port", BACKEND_PORT],
        cwd=ROOT, env=env,
    ))

    for p in procs:
        p.wait()


if __name__ == "__main__":
    main()
