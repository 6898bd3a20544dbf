import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.theme import Theme

from uniquest import messages
from uniquest.config import DEFAULT_CONFIG, ConfigError, load_config
from uniquest.director import Director
from uniquest.listener import Listener
from uniquest.world import new_session

custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",            # Adaptive
    "dim": "dim",                 # Grey
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})

log = logging.getLogger(__name__)


def setup_logging(debug_mode, console):
    level = logging.DEBUG if debug_mode else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def say(console, text):
    # Game text goes out verbatim: no markup, no highlighting, no wrapping.
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def debug_panel(err_console, result):
    border = "success" if result['status'] == "SUCCESS" else "warning"
    err_console.print(Panel(
        f"[dim]Result:[/]\n{escape(json.dumps(result, indent=2, ensure_ascii=False))}",
        title="[DEBUG: Director Output]",
        border_style=border,
    ))


# ============================================
# GAME LOOP
# ============================================
def run(lines, console, config=None, err_console=None):
    """
    Reads commands from `lines` until a quit word or end of input.
    Each line is echoed and answered on `console`. Returns the exit status.
    """
    config = config or DEFAULT_CONFIG
    err_console = err_console or Console(stderr=True, theme=custom_theme)
    is_debug = config.get('debug_mode', False)
    quit_words = config.get('quit_words', DEFAULT_CONFIG['quit_words'])

    session = new_session()
    director = Director(session, listener=Listener(config.get('collapse_whitespace', False)))
    log.debug("world %r loaded, start room %s", session.world.title, session.world.start)

    say(console, messages.GAME_STARTED)
    for raw in lines:
        line = raw.rstrip("\r\n")
        if config.get('echo_input', True):
            say(console, messages.ECHO.format(line=json.dumps(line, ensure_ascii=False)))

        if line in quit_words:
            break

        result = director.execute(line)
        if is_debug:
            debug_panel(err_console, result)
        say(console, result['message'])

    say(console, messages.GAME_FINISHED)
    return 0


# ============================================
# MAIN
# ============================================
def main():
    console = Console(theme=custom_theme)
    err_console = Console(stderr=True, theme=custom_theme)

    try:
        config = load_config()
    except ConfigError as e:
        err_console.print(Panel(
            f"[warning]CONFIG ERROR:[/]\nFalling back to defaults.\nDetails: {escape(str(e))}",
            border_style="warning",
        ))
        config = dict(DEFAULT_CONFIG)

    setup_logging(config['debug_mode'], err_console)
    return run(sys.stdin, console, config, err_console)


if __name__ == "__main__":
    sys.exit(main())
