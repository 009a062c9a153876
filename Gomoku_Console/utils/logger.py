"""Lightweight logging utilities for games and persistence errors."""

import datetime
import sys


def log_event(message, stream=None):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}", file=stream or sys.stdout)


def log_error(message):
    log_event(message, stream=sys.stderr)
