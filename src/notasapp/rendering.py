"""
Text rendering of the application state.

`render` is a pure function: the same state always gives the same lines.
"""

from typing import List

from notasapp.navigation import Screen
from notasapp.settings import (
    DEFAULT_MAX_GRADE,
    DEFAULT_MIN_GRADE,
    DEFAULT_MIN_PASSWORD_LENGTH,
    DEFAULT_PASS_THRESHOLD,
)
from notasapp.view_state import AppState, GradesState, LoginState

# Labels
GRADE_LABELS = ("Grade 1", "Grade 2", "Grade 3", "Grade 4 (optional)")
PASSED_LABEL = "PASSED!"
FAILED_LABEL = "FAILED"
PASSED_DETAIL = "Congratulations! You have reached the minimum passing average."
FAILED_DETAIL = "You need a minimum average of {threshold:.1f} to pass."

def render(state: AppState, config: dict = None) -> List[str]:
    """Render the current screen as a list of text lines

    Args:
        state (AppState): State to render
        config (dict, optional): Configuration dictionary. The password
            length, grade bounds and pass threshold quoted on screen are read
            from it.

    Returns:
        List[str]: Lines to display
    """
    config = config if config is not None else {}
    if state.screen is Screen.LOGIN:
        return render_login(
            state.login,
            config.get("min_password_length", DEFAULT_MIN_PASSWORD_LENGTH),
        )
    if state.screen is Screen.WELCOME:
        return render_welcome(state.display_name)
    if state.grades.result is not None:
        return render_result(
            state.grades,
            config.get("pass_threshold", DEFAULT_PASS_THRESHOLD),
        )
    return render_grades(
        state.grades,
        config.get("min_grade", DEFAULT_MIN_GRADE),
        config.get("max_grade", DEFAULT_MAX_GRADE),
    )

def render_login(login: LoginState, min_password_length: int) -> List[str]:
    if login.password_visible:
        password = login.password
    else:
        password = "*" * len(login.password)
    lines = [
        "=== Grades System ===",
        "Enter your credentials",
        f"Email: {login.email}",
        f"Password: {password}",
    ]
    if login.error_message:
        lines.append(f"Error: {login.error_message}")
    lines.append(
        f"Demo: use any valid email and a password of at least "
        f"{min_password_length} characters"
    )
    return lines

def render_welcome(name: str) -> List[str]:
    return [
        "=== Welcome! ===",
        name,
        "Grade Management System",
        "Enter your grades and get your average automatically",
    ]

def render_grades(grades: GradesState, min_grade: float, max_grade: float) -> List[str]:
    lines = [
        "=== Grade Entry ===",
        f"Scale from {min_grade:g} to {max_grade:g}",
    ]
    for label, value in zip(GRADE_LABELS, grades.fields):
        lines.append(f"{label}: {value}")
    if grades.error_message:
        lines.append(f"Error: {grades.error_message}")
    return lines

def render_result(grades: GradesState, pass_threshold: float) -> List[str]:
    result = grades.result
    if result.is_passed:
        verdict, detail = PASSED_LABEL, PASSED_DETAIL
    else:
        verdict, detail = FAILED_LABEL, FAILED_DETAIL.format(threshold=pass_threshold)
    return [
        "=== Final Average ===",
        f"{result.average:.2f}",
        verdict,
        detail,
    ]
