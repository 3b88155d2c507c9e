"""
Exceptions raised by the sheet cutting planner.
"""
from typing import List


class CutPlanError(Exception):
    """Base class for all planner errors."""


class ConfigurationError(CutPlanError, ValueError):
    """The caller supplied settings or parts that cannot be packed."""


class InvalidSettingsError(ConfigurationError):
    pass


class InvalidPartError(ConfigurationError):
    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("Invalid part specification: " + "; ".join(self.problems))


class PartsFileError(CutPlanError):
    pass
