"""
Immutable view state and the reducer that moves it forward.

The presentation layer never mutates state. It builds an event from user
input, hands it to `AppReducer.reduce` and renders whatever state comes back.
"""

from dataclasses import dataclass, field, replace
import logging
from typing import Optional

from notasapp.average_calculator import AverageCalculator
from notasapp.credential_validator import CredentialValidator
from notasapp.grade_validator import GradeValidator, is_grade_input, parse_grades
from notasapp.navigation import NavEvent, Screen, START_SCREEN, next_screen
from notasapp.validation_result import AverageResult

GRADE_FIELDS = ("grade1", "grade2", "grade3", "grade4")

################################################################################
# State

@dataclass(frozen=True)
class LoginState:
    email: str = ""
    password: str = ""
    password_visible: bool = False
    error_message: str = ""

@dataclass(frozen=True)
class GradesState:
    """Grade entry form and, once computed, its result

    A non-None `result` means the result view is showing instead of the form.
    """
    grade1: str = ""
    grade2: str = ""
    grade3: str = ""
    grade4: str = ""
    error_message: str = ""
    result: Optional[AverageResult] = None

    @property
    def fields(self) -> tuple:
        return tuple(getattr(self, name) for name in GRADE_FIELDS)

@dataclass(frozen=True)
class AppState:
    screen: Screen = START_SCREEN
    login: LoginState = field(default_factory=LoginState)
    grades: GradesState = field(default_factory=GradesState)
    user_email: str = ""

    @property
    def display_name(self) -> str:
        return display_name(self.user_email)

def display_name(email: str) -> str:
    """Derive a display name from an email address

    Takes the text before the first "@" (the whole string if there is none)
    and upper-cases its first character.
    """
    name = email.split("@", 1)[0]
    return name[:1].upper() + name[1:]

################################################################################
# Events

@dataclass(frozen=True)
class EmailChanged:
    value: str

@dataclass(frozen=True)
class PasswordChanged:
    value: str

@dataclass(frozen=True)
class TogglePasswordVisibility:
    pass

@dataclass(frozen=True)
class SubmitLogin:
    pass

@dataclass(frozen=True)
class ContinueToGrades:
    pass

@dataclass(frozen=True)
class GradeChanged:
    """Edit of one grade field

    Args:
        index (int): Field number, 1 to 4
        value (str): New text of the field
    """
    index: int
    value: str

    def __post_init__(self):
        if not 1 <= self.index <= len(GRADE_FIELDS):
            raise ValueError(f"Grade index must be between 1 and {len(GRADE_FIELDS)}, got {self.index}")

@dataclass(frozen=True)
class GradesEntered:
    """All grade fields set at once from complete values

    Unlike `GradeChanged`, the values are stored as given so that the grade
    checks report on them.
    """
    grade1: str
    grade2: str
    grade3: str
    grade4: str = ""

@dataclass(frozen=True)
class SubmitGrades:
    pass

@dataclass(frozen=True)
class ResetGrades:
    pass

@dataclass(frozen=True)
class Logout:
    pass

LOGIN_EVENTS = (EmailChanged, PasswordChanged, TogglePasswordVisibility, SubmitLogin)
WELCOME_EVENTS = (ContinueToGrades,)
GRADES_EVENTS = (GradeChanged, GradesEntered, SubmitGrades, ResetGrades, Logout)

################################################################################
# Reducer

class AppReducer:
    """Computes the next application state from the current state and an event

    Events that do not belong to the current screen are ignored and the state
    is returned unchanged.
    """

    def __init__(
        self,
        config: dict = None,
        logger: logging.Logger = None,
    ):
        """Initialize the reducer

        Args:
            config (dict, optional): Configuration dictionary shared by the
                validators and the average calculator.
            logger (logging.Logger, optional): Logger instance for logging messages.
        """
        self.config = config if config is not None else {}
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self._credentials = CredentialValidator(self.config)
        self._grades = GradeValidator(self.config)
        self._calculator = AverageCalculator(self.config)

    def reduce(self, state: AppState, event) -> AppState:
        """Apply an event to a state

        Args:
            state (AppState): Current state
            event: One of the event classes of this module

        Returns:
            AppState: The next state
        """
        if state.screen is Screen.LOGIN and isinstance(event, LOGIN_EVENTS):
            return self._reduce_login(state, event)
        if state.screen is Screen.WELCOME and isinstance(event, WELCOME_EVENTS):
            return self._navigate(state, NavEvent.CONTINUE)
        if state.screen is Screen.GRADES and isinstance(event, GRADES_EVENTS):
            return self._reduce_grades(state, event)

        self.logger.debug(
            f"Ignoring {type(event).__name__} on screen '{state.screen.value}'"
        )
        return state

    def _navigate(self, state: AppState, nav_event: NavEvent, **changes) -> AppState:
        screen = next_screen(state.screen, nav_event)
        self.logger.debug(f"Screen '{state.screen.value}' -> '{screen.value}'")
        return replace(state, screen=screen, **changes)

    def _reduce_login(self, state: AppState, event) -> AppState:
        login = state.login

        if isinstance(event, EmailChanged):
            return replace(state, login=replace(login, email=event.value, error_message=""))

        if isinstance(event, PasswordChanged):
            return replace(state, login=replace(login, password=event.value, error_message=""))

        if isinstance(event, TogglePasswordVisibility):
            return replace(
                state,
                login=replace(login, password_visible=not login.password_visible),
            )

        # Submit
        result = self._credentials.validate(login.email, login.password)
        if not result.is_valid:
            self.logger.info(f"Login rejected: {result.message}")
            return replace(state, login=replace(login, error_message=result.message))

        self.logger.info("Login accepted")
        self.logger.debug(f"Logged in as {login.email}")
        return self._navigate(state, NavEvent.LOGIN_SUCCEEDED, user_email=login.email)

    def _reduce_grades(self, state: AppState, event) -> AppState:
        grades = state.grades

        if isinstance(event, Logout):
            self.logger.info("Logout")
            self.logger.debug(f"Logged out {state.user_email}")
            fresh = AppState()
            return self._navigate(
                state,
                NavEvent.LOGOUT,
                login=fresh.login,
                grades=fresh.grades,
                user_email=fresh.user_email,
            )

        if isinstance(event, ResetGrades):
            return replace(state, grades=GradesState())

        # The form is hidden while a result is showing
        if grades.result is not None:
            self.logger.debug(f"Ignoring {type(event).__name__} while the result is showing")
            return state

        if isinstance(event, GradeChanged):
            if not is_grade_input(event.value):
                self.logger.debug(f"Rejected input for grade {event.index}: {event.value!r}")
                return state
            name = GRADE_FIELDS[event.index - 1]
            changes = {name: event.value, "error_message": ""}
            return replace(state, grades=replace(grades, **changes))

        if isinstance(event, GradesEntered):
            return replace(
                state,
                grades=replace(
                    grades,
                    grade1=event.grade1,
                    grade2=event.grade2,
                    grade3=event.grade3,
                    grade4=event.grade4,
                    error_message="",
                ),
            )

        # Submit
        result = self._grades.validate(*grades.fields)
        if not result.is_valid:
            self.logger.info(f"Grades rejected: {result.message}")
            return replace(state, grades=replace(grades, error_message=result.message))

        average = self._calculator.compute(parse_grades(*grades.fields))
        self.logger.info(
            f"Average {average.average:.2f} "
            f"({'passed' if average.is_passed else 'failed'})"
        )
        return replace(state, grades=replace(grades, error_message="", result=average))

_default_reducer = AppReducer()

def reduce(state: AppState, event) -> AppState:
    """Apply an event to a state with the default settings"""
    return _default_reducer.reduce(state, event)
