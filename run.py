"""
Film Dashboard runner.

Usage:
    python run.py          → API + web
    python run.py both     → API + web
    python run.py api      → FastAPI data engine only
    python run.py web      → Flask dashboard only
"""

import signal
import subprocess
import sys
import time

import httpx
import uvicorn

from film_app.core.config import settings

API_READY_TIMEOUT = 30.0


def run_fastapi() -> None:
    print(f"🚀 Chart API  → http://localhost:{settings.API_PORT}/api/v1")
    uvicorn.run(
        "film_app.main:app",
        host="0.0.0.0",
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


def run_flask() -> None:
    from film_app.flask_app import create_flask_app

    print(f"🌐 Dashboard  → http://localhost:{settings.FLASK_PORT}/dashboard/")
    create_flask_app().run(
        host="0.0.0.0", port=settings.FLASK_PORT, debug=settings.DEBUG,
    )


def wait_for_api(proc: subprocess.Popen, timeout: float = API_READY_TIMEOUT) -> bool:
    """
    Poll the health endpoint until the API answers.

    The API answers once its lifespan has finished loading the CSV
    (successfully or not).  Returns False when the subprocess exits or
    the timeout passes first.
    """
    url = f"{settings.API_BASE_URL}/api/v1/system/health"
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if proc.poll() is not None:
            return False
        try:
            resp = httpx.get(url, timeout=2.0)
        except httpx.HTTPError:
            time.sleep(0.25)
            continue
        if resp.status_code == 200:
            body = resp.json()
            if not body.get("dataset_loaded"):
                print(f"⚠️  Dataset not loaded: {body.get('error')}")
            return True
        time.sleep(0.25)
    return False


def run_both() -> None:
    """FastAPI in a subprocess, Flask in this process once the API is up."""
    print(f"{settings.APP_NAME}: starting API ({settings.API_PORT}) and web ({settings.FLASK_PORT})")
    api_proc = subprocess.Popen([sys.executable, sys.argv[0], "api"])

    def stop_api(signum=None, frame=None):
        print("\n🛑 Stopping chart API …")
        api_proc.terminate()
        try:
            api_proc.wait(timeout=5)
        except subprocess.TimeoutExpired:
            api_proc.kill()
        sys.exit(0)

    signal.signal(signal.SIGINT, stop_api)
    signal.signal(signal.SIGTERM, stop_api)

    if not wait_for_api(api_proc):
        print(f"❌ Chart API did not become ready within {API_READY_TIMEOUT:.0f}s")
        stop_api()

    try:
        run_flask()
    finally:
        stop_api()


if __name__ == "__main__":
    mode = sys.argv[1].lower() if len(sys.argv) > 1 else "both"
    runners = {"api": run_fastapi, "web": run_flask, "both": run_both}
    if mode not in runners:
        print(f"Unknown mode '{mode}'. Use: api | web | both")
        sys.exit(1)
    runners[mode]()
