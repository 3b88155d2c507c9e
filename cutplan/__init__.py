"""
Guillotine cutting plans for cabinet parts on sheet goods.
"""
from cutplan.exceptions import (
    ConfigurationError,
    CutPlanError,
    InvalidPartError,
    InvalidSettingsError,
    PartsFileError,
)
from cutplan.models import (
    GrainConstraint,
    OptimizationResult,
    OptimizationSettings,
    PartInstance,
    PartSpec,
    Placement,
    SheetLayout,
)
from cutplan.packing import PackingEngine, optimize_project, pack, validate_result

__version__ = "0.1.0"

__all__ = [
    'ConfigurationError',
    'CutPlanError',
    'GrainConstraint',
    'InvalidPartError',
    'InvalidSettingsError',
    'OptimizationResult',
    'OptimizationSettings',
    'PackingEngine',
    'PartInstance',
    'PartSpec',
    'PartsFileError',
    'Placement',
    'SheetLayout',
    'optimize_project',
    'pack',
    'validate_result',
]
