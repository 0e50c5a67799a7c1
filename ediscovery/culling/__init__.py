from ediscovery.culling.evaluator import ResponsivenessEvaluator
from ediscovery.culling.exceptions import CullingError
from ediscovery.culling.query import CullingQuery

__all__ = ["CullingError", "CullingQuery", "ResponsivenessEvaluator"]
