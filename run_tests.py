#!/usr/bin/env python3
"""
run_tests.py
------------
Auto-test runner for the dodge game.
Watches src/ and tests/ and re-runs pytest when a Python file changes.

Usage:
    python run_tests.py                    # Start watching for changes
    python run_tests.py --run-once         # Run tests once and exit
    python run_tests.py --collision-only   # Run only collision tests
    python run_tests.py --coverage         # Add a coverage report
"""

import sys
import time
import subprocess
import argparse
from pathlib import Path

from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler


class TestRunner(FileSystemEventHandler):
    """File system event handler that runs tests on file changes."""

    def __init__(self, args):
        self.args = args
        self.last_run = 0
        self.debounce_time = 1.0
        self.project_root = Path(__file__).parent

    def on_modified(self, event):
        if event.is_directory:
            return

        file_path = Path(event.src_path)
        parts = file_path.parts
        if file_path.suffix != ".py" or not ("src" in parts or "tests" in parts):
            return

        current_time = time.time()
        if current_time - self.last_run < self.debounce_time:
            return

        self.last_run = current_time
        self.run_tests()

    def run_tests(self):
        """Run the test suite; returns True when pytest exits cleanly."""
        print("\n" + "=" * 60)
        print("Running tests...")
        print("=" * 60)

        cmd = [sys.executable, "-m", "pytest", "-v"]
        if self.args.collision_only:
            cmd.append("tests/systems/collision")

        if self.args.coverage:
            cmd.extend([
                "--cov=dodge_game",
                "--cov-report=term-missing",
                "--cov-fail-under=70",
            ])

        try:
            result = subprocess.run(cmd, cwd=self.project_root)
        except KeyboardInterrupt:
            print("\nTest execution interrupted")
            return False

        print("All tests passed!" if result.returncode == 0 else "Some tests failed!")
        return result.returncode == 0


def main():
    parser = argparse.ArgumentParser(description="Auto-test runner for the dodge game")
    parser.add_argument("--run-once", action="store_true", help="Run tests once and exit")
    parser.add_argument("--collision-only", action="store_true", help="Run only collision tests")
    parser.add_argument("--coverage", action="store_true", help="Generate coverage report")
    args = parser.parse_args()

    test_runner = TestRunner(args)

    if args.run_once:
        return 0 if test_runner.run_tests() else 1

    print("Starting file watcher...")
    print("Monitoring: src/ and tests/ directories")
    print("Press Ctrl+C to stop")

    test_runner.run_tests()

    observer = Observer()
    for directory in ("src", "tests"):
        path = test_runner.project_root / directory
        if path.exists():
            observer.schedule(test_runner, str(path), recursive=True)

    observer.start()
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        observer.stop()
        print("\nFile watcher stopped")

    observer.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())
