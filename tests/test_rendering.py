"""Tests for text rendering of each screen."""

from notasapp.rendering import (
    FAILED_LABEL,
    PASSED_DETAIL,
    PASSED_LABEL,
    render,
)
from notasapp.view_state import (
    AppState,
    ContinueToGrades,
    EmailChanged,
    GradeChanged,
    PasswordChanged,
    SubmitGrades,
    SubmitLogin,
    TogglePasswordVisibility,
    reduce,
)


def run(state, *events):
    for event in events:
        state = reduce(state, event)
    return state


def welcome():
    return run(AppState(), EmailChanged("luis@example.com"), PasswordChanged("secret1"), SubmitLogin())


def result_for(*grades):
    state = reduce(welcome(), ContinueToGrades())
    state = run(state, *[GradeChanged(i, g) for i, g in enumerate(grades, start=1)])
    return reduce(state, SubmitGrades())


class TestLoginScreen:

    def test_password_is_masked(self):
        lines = render(run(AppState(), PasswordChanged("abc")))
        assert "Password: ***" in lines

    def test_password_can_be_shown(self):
        lines = render(run(AppState(), PasswordChanged("abc"), TogglePasswordVisibility()))
        assert "Password: abc" in lines

    def test_error_line(self):
        lines = render(reduce(AppState(), SubmitLogin()))
        assert "Error: email must not be empty" in lines

    def test_no_error_line_initially(self):
        assert not any(line.startswith("Error:") for line in render(AppState()))

    def test_hint_quotes_password_length(self):
        lines = render(AppState(), {"min_password_length": 8})
        assert lines[-1].endswith("at least 8 characters")


class TestWelcomeScreen:

    def test_greets_by_name(self):
        lines = render(welcome())
        assert lines[0] == "=== Welcome! ==="
        assert "Luis" in lines


class TestGradesScreen:

    def test_form(self):
        state = run(reduce(welcome(), ContinueToGrades()), GradeChanged(1, "7"))
        lines = render(state)
        assert "Scale from 0 to 10" in lines
        assert "Grade 1: 7" in lines
        assert "Grade 4 (optional): " in lines

    def test_passed_result(self):
        lines = render(result_for("5", "6", "7"))
        assert lines == ["=== Final Average ===", "6.00", PASSED_LABEL, PASSED_DETAIL]

    def test_failed_result(self):
        lines = render(result_for("4", "5", "5"))
        assert lines[1] == "4.67"
        assert lines[2] == FAILED_LABEL
        assert lines[3] == "You need a minimum average of 6.0 to pass."

    def test_render_is_pure(self):
        state = result_for("5", "6", "7")
        assert render(state) == render(state)
