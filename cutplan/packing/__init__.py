from cutplan.packing.engine import PackingEngine, optimize_project, pack
from cutplan.packing.validation import validate_result

__all__ = ['PackingEngine', 'optimize_project', 'pack', 'validate_result']
