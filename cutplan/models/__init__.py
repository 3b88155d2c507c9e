from cutplan.models.part import GrainConstraint, PartInstance, PartSpec, Placement
from cutplan.models.sheet import OptimizationResult, OptimizationSettings, SheetLayout

__all__ = [
    'GrainConstraint',
    'PartInstance',
    'PartSpec',
    'Placement',
    'OptimizationResult',
    'OptimizationSettings',
    'SheetLayout',
]
