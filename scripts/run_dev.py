"""
Development server launcher.

Loads the .env file and runs the Routinize API with uvicorn.

Usage:
    python scripts/run_dev.py
    python scripts/run_dev.py --port 9000 --no-reload
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Routinize API in development mode.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    args = parser.parse_args()

    print("=" * 60)
    print("Routinize Development Server")
    print("=" * 60)
    print()
    print(f"API:  http://localhost:{args.port}/api/v1")
    print(f"Docs: http://localhost:{args.port}/docs")
    print()
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=not args.no_reload, log_level="info")


if __name__ == "__main__":
    main()
