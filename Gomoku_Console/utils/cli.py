"""CLI options for board size, database location and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Console Gomoku (five in a row vs. a random computer)")
    parser.add_argument("--board-size", type=int, help="Board side length (default from settings)")
    parser.add_argument("--db", dest="database_path", help="Path to the SQLite results database")
    parser.add_argument("--settings", default=None, help="Path to settings YAML")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer's random moves (optional)")
    parser.add_argument("--log-moves", action="store_true", help="Log every move with a timestamp")
    return parser.parse_args(argv)
