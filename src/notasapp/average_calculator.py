from typing import List

from notasapp.settings import DEFAULT_PASS_THRESHOLD
from notasapp.validation_result import AverageResult

PASS_THRESHOLD = DEFAULT_PASS_THRESHOLD

class AverageCalculator:
    """Averages validated grades and applies the pass threshold"""

    def __init__(self, config: dict = None):
        """Initialize the calculator

        Args:
            config (dict, optional): Configuration dictionary. Reads
                `pass_threshold`.
        """
        self.config = config if config is not None else {}
        self.pass_threshold = self.config.get("pass_threshold", PASS_THRESHOLD)

    def compute(self, grades: List[float]) -> AverageResult:
        """Compute the average and verdict

        Args:
            grades (List[float]): Grades that already passed validation

        Returns:
            AverageResult: Mean of the grades and whether it reaches the threshold

        Raises:
            ValueError: If no grades are given
        """
        if not grades:
            raise ValueError("At least one grade is required to compute an average")
        average = sum(grades) / len(grades)
        return AverageResult(average=average, is_passed=average >= self.pass_threshold)

_default_calculator = AverageCalculator()

def compute_average(grades: List[float]) -> AverageResult:
    """Compute the average of grades against the default pass threshold"""
    return _default_calculator.compute(grades)
