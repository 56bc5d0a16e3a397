"""Development runner with hot reload.

Watches all .py files in the project directory and automatically restarts
the server when any change is detected.

Usage:
    python dev.py
"""
from watchfiles import run_process


def _run_server():
    from main import main
    main()


if __name__ == "__main__":
    print("Dev mode: watching for .py changes, server will restart automatically.")
    run_process(
        ".",
        target=_run_server,
        watch_filter=lambda change, path: path.endswith(".py"),
    )
