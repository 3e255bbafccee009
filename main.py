# main.py

import sys
import subprocess
from datetime import datetime
from pathlib import Path

from app import settings


class Tee:
    def __init__(self, logfile_path):
        self.terminal = sys.stdout
        self.log = open(logfile_path, "a", encoding="utf-8")

    def write(self, message):
        self.terminal.write(message)
        self.log.write(message)

    def flush(self):
        self.terminal.flush()
        self.log.flush()

    def close(self):
        self.flush()
        self.log.close()
        sys.stdout = self.terminal


def uvicorn_command(reload: bool = False) -> list[str]:
    cmd = [
        "uvicorn", "app.routes.api_server:app",
        "--host", settings.HOST,
        "--port", str(settings.PORT),
    ]
    # TLS only when both files are configured
    if settings.SSL_CERTFILE and settings.SSL_KEYFILE:
        cmd += ["--ssl-keyfile", settings.SSL_KEYFILE, "--ssl-certfile", settings.SSL_CERTFILE]
    if reload:
        cmd.append("--reload")
    return cmd


def run_api_server(reload: bool = False):
    return subprocess.Popen(uvicorn_command(reload))


USAGE = "usage: python main.py [api | dev]"

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(USAGE)
        sys.exit(1)

    cmd = sys.argv[1]

    if cmd in ("api", "dev"):
        # log file name carries the start timestamp
        now = datetime.now().strftime("%Y%m%d_%H%M%S")
        Path(settings.LOG_DIR).mkdir(exist_ok=True)
        tee = Tee(f"{settings.LOG_DIR}/{cmd}_{now}.log")
        sys.stdout = tee
        print(f"🚀 starting API on {settings.HOST}:{settings.PORT} (store={settings.DECK_STORE})")
        proc = run_api_server(reload=(cmd == "dev"))
        try:
            proc.wait()
        except KeyboardInterrupt:
            print("🛑 shutting down")
            proc.terminate()
        finally:
            tee.close()
    else:
        print(f"❌ unknown command: {cmd}")
        print(USAGE)
        sys.exit(1)
