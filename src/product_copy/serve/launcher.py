"""Helper to launch the HTTP app under uvicorn from Python."""
from __future__ import annotations
import os
import subprocess
import sys

def build_command() -> list[str]:
    host = os.getenv("PRODUCT_COPY_HOST", "0.0.0.0")
    port = os.getenv("PRODUCT_COPY_PORT", "8080")
    workers = os.getenv("PRODUCT_COPY_WORKERS", "1")

    return [
        sys.executable,
        "-m",
        "uvicorn",
        "product_copy.serve.fastapi_app:app",
        "--host", host,
        "--port", str(port),
        "--workers", str(workers),
    ]

def main() -> None:
    subprocess.run(build_command(), check=True)

if __name__ == "__main__":
    main()
