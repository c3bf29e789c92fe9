"""Entry point for the notasapp console application

Console front end for the grades workflow: log in, continue past the welcome
screen, enter three or four grades and get the average with its verdict.

It runs either as an interactive session or as a one-shot run driven by
command line arguments. In both cases user input is turned into events, the
reducer computes the next state and the rendered lines are printed.
"""

import argparse
import getpass
import logging
import pathlib
from typing import Callable, List

import yaml

from notasapp import __version__
from notasapp.navigation import Screen
from notasapp.rendering import GRADE_LABELS, render
from notasapp.settings import check_config
from notasapp.view_state import (
    AppReducer,
    AppState,
    ContinueToGrades,
    EmailChanged,
    GradeChanged,
    GradesEntered,
    Logout,
    PasswordChanged,
    ResetGrades,
    SubmitGrades,
    SubmitLogin,
)

# Settings
QUIT_COMMANDS = ("q", "quit", "exit")
MIN_GRADE_ARGS = 3
MAX_GRADE_ARGS = len(GRADE_LABELS)

# Configure logging
logger = logging.getLogger(__package__)

################################################################################
# Module-level functions

def configure_logging(logger_level: int) -> None:
    """Configure logging for the application

    Args:
        logger_level (int): Logging level to set
    """
    logging.basicConfig(
        level=logger_level,
        format="%(asctime)s %(name)s [%(levelname)s]: %(message)s",
        force=True,
        handlers=[logging.StreamHandler()],
    )
    logger.setLevel(logger_level)
    logger.debug(f"Logging configured at level: {logger_level}")

def load_config(config_path: str = None) -> dict:
    """Load the application configuration from a YAML file

    Args:
        config_path (str, optional): Path to the configuration file. If not
            given, the defaults are used.

    Returns:
        dict: Checked configuration with every setting filled in

    Raises:
        ValueError: If the file holds an invalid configuration
    """
    if not config_path:
        logger.debug("No configuration file given, using defaults")
        return check_config({})

    path = pathlib.Path(config_path).resolve()
    try:
        with open(path, 'r') as config_file:
            config = yaml.safe_load(config_file)
            logger.info(f"Loaded configuration from {path}")
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}")
        raise

    return check_config(config)

def _is_quit(answer: str) -> bool:
    return answer.strip().lower() in QUIT_COMMANDS

################################################################################
# Classes

class ConsoleSession:
    """Drives the application state from console input

    Holds the current `AppState`, feeds events to the reducer and prints the
    rendered screen.
    """

    def __init__(
        self,
        config_path: str = None,
        input_fn: Callable[[str], str] = input,
        password_fn: Callable[[str], str] = getpass.getpass,
        output_fn: Callable[[str], None] = print,
    ):
        """Initialize the session

        Args:
            config_path (str, optional): Path to the configuration file (YAML format)
            input_fn (Callable, optional): Reads a line of input given a prompt.
                Defaults to `input`.
            password_fn (Callable, optional): Reads a password given a prompt.
                Defaults to `getpass.getpass`.
            output_fn (Callable, optional): Prints one line. Defaults to `print`.
        """
        self._config = load_config(config_path)
        logger.debug(f"Configuration: {self._config}")

        self._input = input_fn
        self._password = password_fn
        self._output = output_fn
        self._reducer = AppReducer(self._config, logger)
        self._state = AppState()

    @property
    def state(self) -> AppState:
        """Get the current application state"""
        return self._state

    @property
    def config(self) -> dict:
        """Get the checked configuration"""
        return self._config

    def dispatch(self, event) -> AppState:
        """Apply an event to the current state

        Args:
            event: Event from `notasapp.view_state`

        Returns:
            AppState: The new current state
        """
        self._state = self._reducer.reduce(self._state, event)
        return self._state

    def lines(self) -> List[str]:
        """Render the current state"""
        return render(self._state, self._config)

    def show(self):
        """Print the current screen"""
        self._output("")
        for line in self.lines():
            self._output(line)

    def run(self):
        """Run an interactive session until the user quits or input ends"""
        logger.info("Starting interactive session")
        try:
            while self._step():
                pass
        except (EOFError, KeyboardInterrupt):
            self._output("")
            logger.info("Input closed, ending session")
            return
        logger.info("Session ended by user")

    def run_once(self, email: str, password: str, grades: List[str] = None) -> AppState:
        """Run the whole workflow from arguments, without prompting

        Stops at the first screen that rejects its input.

        Args:
            email (str): Email to log in with
            password (str): Password to log in with
            grades (List[str], optional): Three or four grades. If not given,
                the run stops on the welcome screen.

        Returns:
            AppState: Final state
        """
        if grades is not None and not MIN_GRADE_ARGS <= len(grades) <= MAX_GRADE_ARGS:
            raise ValueError(
                f"Expected {MIN_GRADE_ARGS} to {MAX_GRADE_ARGS} grades, got {len(grades)}"
            )

        self.dispatch(EmailChanged(email))
        self.dispatch(PasswordChanged(password))
        self.dispatch(SubmitLogin())
        if self._state.screen is not Screen.WELCOME:
            logger.error(f"Login failed: {self._state.login.error_message}")
            return self._state
        if grades is None:
            return self._state

        # Complete values skip the keystroke filter so every grade gets checked
        self.dispatch(ContinueToGrades())
        self.dispatch(GradesEntered(*grades))
        self.dispatch(SubmitGrades())
        if self._state.grades.result is None:
            logger.error(f"Grades rejected: {self._state.grades.error_message}")
        return self._state

    def write_output(self, output_path: str):
        """Write the rendered current screen to a file

        Args:
            output_path (str): Path to the output file. Any existing file is
                overwritten.
        """
        path = pathlib.Path(output_path).resolve()

        # Create output directory if it does not exist
        if not path.parent.exists():
            logger.debug(f"Creating output directory: {path.parent}")
            path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as output_file:
            for line in self.lines():
                output_file.write(f"{line}\n")
        logger.info(f"Result written to {path}")

    def _step(self) -> bool:
        """Show the current screen and handle one round of input

        Returns:
            bool: False once the user asked to quit
        """
        self.show()
        screen = self._state.screen

        if screen is Screen.LOGIN:
            email = self._input("Email (q to quit): ")
            if _is_quit(email):
                return False
            password = self._password("Password: ")
            self.dispatch(EmailChanged(email.strip()))
            self.dispatch(PasswordChanged(password))
            self.dispatch(SubmitLogin())
            return True

        if screen is Screen.WELCOME:
            answer = self._input("Press Enter to continue (q to quit): ")
            if _is_quit(answer):
                return False
            self.dispatch(ContinueToGrades())
            return True

        # Result view
        if self._state.grades.result is not None:
            choice = self._input("[n]ew grades, [l]ogout, [q]uit: ").strip().lower()
            if choice in ("n", "new"):
                self.dispatch(ResetGrades())
            elif choice in ("l", "logout"):
                self.dispatch(Logout())
            elif _is_quit(choice):
                return False
            else:
                self._output(f"Unknown choice: '{choice}'")
            return True

        # Grade entry form
        rejected = False
        for index, label in enumerate(GRADE_LABELS, start=1):
            value = self._input(f"{label}: ").strip()
            if _is_quit(value):
                return False
            before = self._state
            self.dispatch(GradeChanged(index, value))
            if self._state is before and value:
                self._output(f"Ignored '{value}': not a number")
                rejected = True
        if rejected:
            self._output("Grades not submitted, please correct them")
            return True
        self.dispatch(SubmitGrades())
        return True

################################################################################
# Main entry point

def main():
    """Main entry point"""

    # Command line arguments
    parser = argparse.ArgumentParser(description="Grade average calculator")
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to configuration file (YAML format). Defaults are used if not given.",
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--email",
        "-e",
        type=str,
        help="Email to log in with. Runs once without prompting.",
    )
    parser.add_argument(
        "--password",
        "-p",
        type=str,
        help="Password to log in with. Required with --email.",
    )
    parser.add_argument(
        "--grades",
        "-g",
        type=str,
        nargs="+",
        help=f"{MIN_GRADE_ARGS} or {MAX_GRADE_ARGS} grades to average. Requires --email.",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Path to output file for the final screen. Note that any existing "
            "file will be overwritten.",
    )

    # Parse arguments
    args = parser.parse_args()
    one_shot = args.email is not None or args.password is not None or args.grades is not None
    if one_shot and (args.email is None or args.password is None):
        parser.error("--email and --password must be given together")
    if args.grades is not None and not MIN_GRADE_ARGS <= len(args.grades) <= MAX_GRADE_ARGS:
        parser.error(f"--grades takes {MIN_GRADE_ARGS} or {MAX_GRADE_ARGS} values")

    # If debug mode is enabled, set logging to DEBUG level
    if args.debug:
        configure_logging(logging.DEBUG)
    else:
        configure_logging(logging.INFO)

    # Print welcome message
    logger.info(f"notasapp v{__version__}")

    # Initialize the session
    try:
        session = ConsoleSession(config_path=args.config)
    except Exception as e:
        logger.error(f"Could not start: {e}")
        return

    # Run once from arguments, or interactively
    if one_shot:
        session.run_once(args.email, args.password, args.grades)
        session.show()
    else:
        session.run()

    if args.output:
        session.write_output(args.output)

if __name__ == "__main__":
    main()
