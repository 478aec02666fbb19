"""
pwordgen - password generator with shareable option links
"""
# ==============================================================
# Standard imports
# ==============================================================
import os
import sys
import asyncio
import argparse
import logging

# ==============================================================
# Other imports
# ==============================================================
from pwordgen.config.config_pwordgen import *
from pwordgen.config.logging_config import setup_logging
from pwordgen.utils.location import MemoryLocation
from pwordgen.utils.session import PasswordSession
from pwordgen.utils.user_input import ask, get_int, get_text

logger = logging.getLogger(__name__)

# Menu key -> (label, option field) for the on/off options
TOGGLES = {
    "2": ("Uppercase (A-Z)", "include_upper"),
    "3": ("Lowercase (a-z)", "include_lower"),
    "4": ("Digits (0-9)", "include_digits"),
    "5": ("Symbols", "include_symbols"),
    "7": ("Exclude similar characters", "exclude_similar"),
    "9": ("Require each selected type", "require_each_selected_class"),
}

# ==============================================================
# Functions
# ==============================================================

def display_session(session: PasswordSession) -> None:
    """
    Print the current password, its strength, the options and the link.

    Args:
        session: Initialized session to display.

    Side Effects:
        Prints to the terminal.
    """
    state = session.state
    opts = session.options

    print(SEP_LG)
    if state.password:
        print(f" Password: {state.password}")
    else:
        print(f" Error: {state.error}")
    print(f" Entropy:  {state.entropy_bits:.1f} bits  ({state.entropy_descriptor})")
    if state.copy_success:
        print(" Copied!")
    print(SEP_SM)
    print(f"  1. Length: {opts.length}")
    for key, (label, field_name) in TOGGLES.items():
        mark = "x" if getattr(opts, field_name) else " "
        print(f"  {key}. [{mark}] {label}")
    print(f"  6. Custom characters: {opts.custom_chars}")
    print(f"  8. Exclude characters: {opts.exclude}")
    print(SEP_SM)
    print(f" Link: {session.location.url}")
    print(SEP_LG)


def wipe_terminal(force=False):
    """
    Clears the terminal screen if CLEAR_SCREEN set to True.

    Args:
        force: Clear even when CLEAR_SCREEN is False.
    """
    if CLEAR_SCREEN or force:
        os.system('cls' if os.name == 'nt' else 'clear')


async def run(session: PasswordSession) -> int:
    """
    Interactive loop. Returns the process exit code.
    """
    session.initialize()
    notice = ""

    while True:
        wipe_terminal()
        display_session(session)
        # shown after the wipe so it stays on screen
        if notice:
            print(f" {notice}")
            notice = ""

        menu = "\n (G) Generate   "
        if session.clipboard.can_copy:
            menu += "(C) Copy   "
        menu += "(Q) Quit   1-9 Change option"
        print(menu)
        choice = (await ask(" > ")).lower()

        # == REGENERATE ===================================
        if choice == "g":
            session.regenerate()

        # == COPY PASSWORD ================================
        elif choice == "c":
            if session.clipboard.can_copy:
                await session.copy()

        # == LENGTH =======================================
        elif choice == "1":
            length = await get_int(
                f"  Enter length ({LENGTH_MIN}-{LENGTH_MAX}, Enter to keep "
                f"{session.options.length}): ",
                default=session.options.length,
            )
            if length is not None:
                session.update(length=length)

        # == ON/OFF OPTIONS ===============================
        elif choice in TOGGLES:
            _label, field_name = TOGGLES[choice]
            session.update(**{field_name: not getattr(session.options, field_name)})

        # == CHARACTER LISTS ==============================
        elif choice == "6":
            text = await get_text("  Custom characters", session.options.custom_chars)
            if text is not None:
                session.update(custom_chars=text)

        elif choice == "8":
            text = await get_text("  Exclude characters", session.options.exclude)
            if text is not None:
                session.update(exclude=text)

        # == QUIT =========================================
        elif choice in {"q", "quit"}:
            session.close()
            print("Goodbye!")
            return 0

        else:
            notice = "Invalid Choice"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="pwordgen",
        description="Generate passwords from shareable option links.",
    )
    parser.add_argument(
        "url", nargs="?", default=BASE_URL,
        help="shared link to load options from",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser.parse_args(argv)


# ==============================================================
# MAIN
# ==============================================================
def main(argv=None) -> int:
    setup_logging()
    args = parse_args(argv)
    session = PasswordSession(MemoryLocation(args.url))
    try:
        return asyncio.run(run(session))
    except (KeyboardInterrupt, EOFError):
        session.close()
        print("\nGoodbye!")
        return 0


if __name__ == "__main__":
    sys.exit(main())
