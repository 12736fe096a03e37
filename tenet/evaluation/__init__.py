from tenet.evaluation.evaluator import Evaluator, evaluate

__all__ = ["Evaluator", "evaluate"]
