"""Entry point for console Gomoku. Load config, open the results database, run the menu."""

import random

try:
    from utils.cli import parse_args
    from utils.logger import log_event
    from utils.settings import load_settings, merge_args, resolve_project_path
    from storage import results_db
    from GameSession import GameSession
    from Gomokugame import Gomokugame
    from Mark import Mark
    from Player import HumanPlayer, RandomPlayer
    from ui.console_view import ConsoleView
except ImportError:
    from Gomoku_Console.utils.cli import parse_args
    from Gomoku_Console.utils.logger import log_event
    from Gomoku_Console.utils.settings import load_settings, merge_args, resolve_project_path
    from Gomoku_Console.storage import results_db
    from Gomoku_Console.GameSession import GameSession
    from Gomoku_Console.Gomokugame import Gomokugame
    from Gomoku_Console.Mark import Mark
    from Gomoku_Console.Player import HumanPlayer, RandomPlayer
    from Gomoku_Console.ui.console_view import ConsoleView


def build_game(settings, database, input_fn=input, output_fn=print):
    seed = settings.get("seed")
    rng = random.Random(seed) if seed is not None else None
    session = GameSession(
        board_size=settings["board_size"],
        result_sink=database,
        computer=RandomPlayer(Mark.SECOND, rng=rng),
        logger=log_event if settings.get("log_moves") else None,
    )
    human = HumanPlayer(Mark.FIRST, input_fn=input_fn, output_fn=output_fn)
    return Gomokugame(session, human, ConsoleView(output_fn=output_fn))


def run_menu(game, database, input_fn=input):
    view = game.view
    while True:
        view.show_menu()
        choice = input_fn("Select an option: ").strip().lower()
        if choice == "1":
            game.play()
        elif choice == "2":
            view.show_history(database.fetch_history())
        elif choice == "3":
            view.show_message("Thanks for playing!")
            return
        else:
            view.show_message("Invalid option. Please try again.")


def main(argv=None):
    args = parse_args(argv)
    settings = merge_args(load_settings(args.settings), args)

    database = results_db.initialize(resolve_project_path(settings["database_path"]))
    game = build_game(settings, database)
    try:
        run_menu(game, database)
    except (EOFError, KeyboardInterrupt):
        print("\nThanks for playing!")


if __name__ == "__main__":
    main()
