import asyncio
import re


async def ask(prompt: str) -> str:
    """
    Read one line from the terminal without blocking the event loop.

    Timers scheduled on the loop (such as the copy confirmation reset)
    keep running while the user types.
    """
    return (await asyncio.to_thread(input, prompt)).strip()


async def get_int(prompt: str, default=None):
    """
    Prompt the user until a valid positive integer is entered.

    Allows the user to press Enter to accept a default value if provided.
    Rejects any input containing non-digit characters.

    Args:
        prompt: Text displayed to the user.
        default: Value returned if the user submits empty input. If None,
            the prompt repeats until a valid integer is entered.

    Returns:
        An integer parsed from user input, the default value if accepted,
        or None if the user enters 'q' to quit.
    """
    while True:
        val = await ask(prompt)

        # User hit enter for default value
        # return default if provided, else keep asking
        if not val and default is not None:
            return default
        # User typed something, check it, return if integer
        if re.fullmatch(r"[0-9]+", val):
            return int(val)
        # Allow quitting with "q"
        if val == 'q':
            return None

        print("   Invalid - numbers only  (q) to quit")


async def get_text(prompt: str, current: str) -> str | None:
    """
    Prompt for a character list.

    Enter keeps `current`, a single '-' clears it and 'q' cancels.

    Returns:
        The new text, or None if cancelled.
    """
    val = await ask(f"{prompt} [{current}] ('-' to clear): ")
    if val == "q":
        return None
    if val == "-":
        return ""
    return val or current
