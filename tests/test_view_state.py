"""Tests for the view state reducer."""

import logging

import pytest

from notasapp.navigation import Screen
from notasapp.validation_result import AverageResult
from notasapp.view_state import (
    AppReducer,
    AppState,
    ContinueToGrades,
    EmailChanged,
    GradeChanged,
    GradesEntered,
    GradesState,
    Logout,
    PasswordChanged,
    ResetGrades,
    SubmitGrades,
    SubmitLogin,
    TogglePasswordVisibility,
    display_name,
    reduce,
)


def run(state, *events):
    for event in events:
        state = reduce(state, event)
    return state


def logged_in(email="ana.maria@example.com"):
    return run(
        AppState(),
        EmailChanged(email),
        PasswordChanged("secret1"),
        SubmitLogin(),
        ContinueToGrades(),
    )


def with_grades(state, *values):
    events = [GradeChanged(i, v) for i, v in enumerate(values, start=1)]
    return run(state, *events)


class TestDisplayName:

    @pytest.mark.parametrize("email, expected", [
        ("juan.perez@example.com", "Juan.perez"),
        ("mARIA@example.com", "MARIA"),
        ("maria", "Maria"),
        ("éva@example.com", "Éva"),
        ("@example.com", ""),
        ("", ""),
    ])
    def test_display_name(self, email, expected):
        assert display_name(email) == expected

    def test_state_property(self):
        assert logged_in().display_name == "Ana.maria"


class TestLogin:

    def test_initial_state(self):
        state = AppState()
        assert state.screen is Screen.LOGIN
        assert state.login.email == ""
        assert state.grades == GradesState()

    def test_failed_login_keeps_screen_and_stores_message(self):
        state = run(AppState(), EmailChanged("a@b.com"), PasswordChanged("123"), SubmitLogin())
        assert state.screen is Screen.LOGIN
        assert state.login.error_message == "password must be at least 6 characters"
        assert state.user_email == ""

    def test_editing_clears_error(self):
        state = run(AppState(), SubmitLogin())
        assert state.login.error_message == "email must not be empty"
        state = reduce(state, EmailChanged("a"))
        assert state.login.error_message == ""
        state = run(state, SubmitLogin(), PasswordChanged("x"))
        assert state.login.error_message == ""

    def test_successful_login(self):
        state = run(AppState(), EmailChanged("a@b.com"), PasswordChanged("abcdef"), SubmitLogin())
        assert state.screen is Screen.WELCOME
        assert state.user_email == "a@b.com"

    def test_toggle_password_visibility(self):
        state = reduce(AppState(), TogglePasswordVisibility())
        assert state.login.password_visible is True
        state = reduce(state, TogglePasswordVisibility())
        assert state.login.password_visible is False

    def test_states_are_not_mutated(self):
        before = AppState()
        after = reduce(before, EmailChanged("a@b.com"))
        assert before.login.email == ""
        assert after.login.email == "a@b.com"


class TestWrongScreenEvents:

    def test_continue_ignored_on_login(self):
        state = AppState()
        assert reduce(state, ContinueToGrades()) is state

    def test_logout_ignored_on_welcome(self):
        state = run(AppState(), EmailChanged("a@b.com"), PasswordChanged("abcdef"), SubmitLogin())
        assert reduce(state, Logout()) is state

    def test_login_events_ignored_on_grades(self):
        state = logged_in()
        assert reduce(state, EmailChanged("x@y.com")) is state


class TestGrades:

    def test_continue_reaches_grades(self):
        assert logged_in().screen is Screen.GRADES

    def test_grade_index_bounds(self):
        with pytest.raises(ValueError):
            GradeChanged(0, "5")
        with pytest.raises(ValueError):
            GradeChanged(5, "5")

    def test_edits_fill_fields(self):
        state = with_grades(logged_in(), "5", "6.5", "7", "")
        assert state.grades.fields == ("5", "6.5", "7", "")

    def test_non_numeric_edit_is_rejected(self):
        state = with_grades(logged_in(), "5")
        assert reduce(state, GradeChanged(1, "5a")) is state
        assert state.grades.grade1 == "5"

    def test_empty_edit_clears_field(self):
        state = with_grades(logged_in(), "5")
        state = reduce(state, GradeChanged(1, ""))
        assert state.grades.grade1 == ""

    def test_failed_submit_stores_message(self):
        state = with_grades(logged_in(), "5", "6", "", "8")
        state = reduce(state, SubmitGrades())
        assert state.grades.error_message == "the first three grades are required"
        assert state.grades.result is None

    def test_edit_clears_error(self):
        state = reduce(logged_in(), SubmitGrades())
        assert state.grades.error_message
        state = reduce(state, GradeChanged(2, "4"))
        assert state.grades.error_message == ""

    def test_successful_submit(self):
        state = with_grades(logged_in(), "5", "6", "7", "")
        state = reduce(state, SubmitGrades())
        assert state.grades.result == AverageResult(average=6.0, is_passed=True)
        assert state.grades.error_message == ""

    def test_fourth_grade_counts(self):
        state = with_grades(logged_in(), "2", "4", "6", "8")
        state = reduce(state, SubmitGrades())
        assert state.grades.result.average == 5.0
        assert state.grades.result.is_passed is False

    def test_form_locked_while_result_showing(self):
        state = reduce(with_grades(logged_in(), "5", "6", "7"), SubmitGrades())
        assert reduce(state, GradeChanged(1, "9")) is state
        assert reduce(state, SubmitGrades()) is state

    def test_reset(self):
        state = reduce(with_grades(logged_in(), "5", "6", "7"), SubmitGrades())
        state = reduce(state, ResetGrades())
        assert state.screen is Screen.GRADES
        assert state.grades == GradesState()

    def test_logout_returns_fresh_state(self):
        state = reduce(with_grades(logged_in(), "5", "6", "7"), SubmitGrades())
        state = reduce(state, Logout())
        assert state == AppState()

    def test_configured_reducer(self):
        reducer = AppReducer({"pass_threshold": 7.0})
        state = with_grades(logged_in(), "6", "6", "6")
        state = reducer.reduce(state, SubmitGrades())
        assert state.grades.result.is_passed is False


class TestGradesEntered:

    def test_values_stored_unfiltered(self):
        state = reduce(logged_in(), GradesEntered("5", "x", "7"))
        assert state.grades.fields == ("5", "x", "7", "")

    def test_checks_report_on_complete_values(self):
        state = run(logged_in(), GradesEntered("5", "6", "7", "abc"), SubmitGrades())
        assert state.grades.result is None
        assert state.grades.error_message == "grade 4 must be a valid number"

    def test_clears_error(self):
        state = reduce(logged_in(), SubmitGrades())
        state = reduce(state, GradesEntered("5", "6", "7"))
        assert state.grades.error_message == ""


class TestLogging:

    def test_email_not_logged_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="notasapp"):
            state = with_grades(logged_in("ana.maria@example.com"), "5", "6", "7")
            run(state, SubmitGrades(), Logout())
        assert "Login accepted" in caplog.text
        assert "ana.maria@example.com" not in caplog.text
