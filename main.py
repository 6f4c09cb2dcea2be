"""
Wordle - Main Entry Point

Plays one game in the terminal. Type a word and press return to submit it,
or type ENTER / BACKSPACE to send those keys on their own.
"""

import argparse
import sys

from wordle import create_game
from wordle.config import config, validate_target_word
from wordle.controllers import ControlCharacter, KEYBOARD_LAYOUT
from wordle.utils import format_board, format_keyboard, game_logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Wordle in the terminal.")
    parser.add_argument('--word', help="Target word (defaults to TARGET_WORD from the environment)")
    parser.add_argument('--env', default='default', choices=sorted(config),
                        help="Configuration profile to use")
    return parser.parse_args(argv)


def keys_for_line(line):
    """Keys to send for one line of input."""
    name = line.strip().upper()
    if name in ControlCharacter.__members__:
        return [name]
    return list(name) + [ControlCharacter.ENTER.value]


def render(game, message):
    layout = [[key.value for key in row] for row in KEYBOARD_LAYOUT]
    print(format_board(game.guesses))
    print()
    print(format_keyboard(layout, game.letter_status))
    if message:
        print(f"\n{message}")
    print()


def main(argv=None, stdin=None):
    args = parse_args(argv)
    config_class = config[args.env]
    target_word = (args.word or config_class.TARGET_WORD).strip().upper()

    try:
        validate_target_word(target_word)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    game_logger.configure(config_class.LOG_DIR, config_class.effective_log_level())
    game, controller = create_game(config_class, target_word)
    render(game, "")

    for line in (stdin or sys.stdin):
        if not line.strip():
            continue
        message = controller.handle_keys(keys_for_line(line))
        render(game, message)
        if game.is_over:
            break

    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nBye!")
