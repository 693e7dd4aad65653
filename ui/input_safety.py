"""
Safe input helpers.
Wraps input() so EOFError and KeyboardInterrupt end the game cleanly.
"""


def safe_input(prompt: str = "", default: str = "") -> str:
    """input() wrapper that never crashes on EOF or Ctrl+C.

    Args:
        prompt: prompt text
        default: value returned on EOFError

    Returns:
        the line typed by the user, or ``default`` on EOFError

    Raises:
        SystemExit: when the user presses Ctrl+C
    """
    try:
        return input(prompt)
    except EOFError:
        # closed pipe or headless run
        return default
    except KeyboardInterrupt:
        print()
        raise SystemExit(0)
