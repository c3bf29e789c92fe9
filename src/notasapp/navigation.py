"""Screen flow of the application

login -> welcome -> grades, and logout from grades goes back to login.
"""

from enum import Enum

class Screen(Enum):
    LOGIN = "login"
    WELCOME = "welcome"
    GRADES = "grades"

class NavEvent(Enum):
    LOGIN_SUCCEEDED = "login_succeeded"
    CONTINUE = "continue"
    LOGOUT = "logout"

START_SCREEN = Screen.LOGIN

TRANSITIONS = {
    (Screen.LOGIN, NavEvent.LOGIN_SUCCEEDED): Screen.WELCOME,
    (Screen.WELCOME, NavEvent.CONTINUE): Screen.GRADES,
    (Screen.GRADES, NavEvent.LOGOUT): Screen.LOGIN,
}

def can_transition(screen: Screen, event: NavEvent) -> bool:
    """Check if a navigation event is allowed on a screen"""
    return (screen, event) in TRANSITIONS

def next_screen(screen: Screen, event: NavEvent) -> Screen:
    """Look up the screen reached from `screen` on `event`

    Args:
        screen (Screen): Current screen
        event (NavEvent): Navigation event

    Returns:
        Screen: Destination screen

    Raises:
        ValueError: If the transition is not in the table
    """
    try:
        return TRANSITIONS[(screen, event)]
    except KeyError:
        raise ValueError(
            f"No transition from '{screen.value}' on '{event.value}'"
        ) from None
