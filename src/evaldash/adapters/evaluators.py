"""Adapters for the optional proactivity evaluator.

The evaluator is an external module exposing ``ProactivityEvaluator``,
constructed with a workspace path, whose ``generate_report()`` returns a
mapping shaped like::

    {"score": {"proactivity_score": 72.5, "total_issues": 4,
               "actionable_issues": 3, "critical_issues": 1}}

camelCase keys (``proactivityScore``, ``totalIssues``, ...) are accepted too.
The adapter is chosen by ``load_proactivity_evaluator`` before use.
"""

import importlib
import logging
from collections.abc import Mapping
from pathlib import Path
from types import ModuleType
from typing import Any

from evaldash.core.models import ProactivityReport

logger = logging.getLogger(__name__)

DEFAULT_EVALUATOR_MODULE = "proactivity_evaluator"

# Report field -> accepted keys in the evaluator's score mapping
_SCORE_KEYS = {
    "proactivity_score": ("proactivity_score", "proactivityScore"),
    "total_issues": ("total_issues", "totalIssues"),
    "actionable_issues": ("actionable_issues", "actionableIssues"),
    "critical_issues": ("critical_issues", "criticalIssues"),
}


def _pick(score: Mapping[str, Any], keys: tuple[str, ...], default: Any) -> Any:
    for key in keys:
        if key in score:
            return score[key]
    return default


def report_from_mapping(data: Mapping[str, Any]) -> ProactivityReport:
    """Convert an evaluator result mapping into a ProactivityReport.

    Raises:
        ValueError: If the mapping has no score.
    """
    score = data.get("score")
    if not isinstance(score, Mapping):
        raise ValueError("evaluator report has no 'score' mapping")

    value = _pick(score, _SCORE_KEYS["proactivity_score"], None)
    if value is None:
        raise ValueError("evaluator report has no proactivity score")

    return ProactivityReport(
        proactivity_score=float(value),
        total_issues=int(_pick(score, _SCORE_KEYS["total_issues"], 0)),
        actionable_issues=int(_pick(score, _SCORE_KEYS["actionable_issues"], 0)),
        critical_issues=int(_pick(score, _SCORE_KEYS["critical_issues"], 0)),
    )


class NullProactivityEvaluator:
    """ProactivityEvaluatorPort used when no evaluator is installed."""

    def generate_report(self, workspace: Path) -> ProactivityReport | None:
        return None


class ModuleProactivityEvaluator:
    """ProactivityEvaluatorPort backed by an imported evaluator module.

    Args:
        module: Module exposing a ``ProactivityEvaluator`` class.
    """

    def __init__(self, module: ModuleType) -> None:
        self._module = module

    def generate_report(self, workspace: Path) -> ProactivityReport | None:
        """Run the evaluator over ``workspace``.

        Returns:
            The report, or None if the evaluator fails or returns no score.
            Failures are logged as warnings.
        """
        try:
            evaluator = self._module.ProactivityEvaluator(str(workspace))
            return report_from_mapping(evaluator.generate_report())
        except Exception:
            logger.warning(
                "Proactivity evaluation failed for %s", workspace, exc_info=True
            )
            return None


def _is_missing(module_name: str, error: ModuleNotFoundError) -> bool:
    # The evaluator itself (or a parent package) is absent, not a dependency.
    return bool(error.name) and (
        module_name == error.name or module_name.startswith(f"{error.name}.")
    )


def load_proactivity_evaluator(
    module_name: str = DEFAULT_EVALUATOR_MODULE,
) -> ModuleProactivityEvaluator | NullProactivityEvaluator:
    """Select the evaluator implementation for ``module_name``.

    Returns:
        ModuleProactivityEvaluator if ``module_name`` imports, otherwise a
        NullProactivityEvaluator. A missing module is logged as a warning.
    """
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        if _is_missing(module_name, e):
            logger.warning(
                "%s not installed. Skipping proactivity evaluation.", module_name
            )
        else:
            logger.warning(
                "%s could not be imported. Skipping proactivity evaluation.",
                module_name,
                exc_info=True,
            )
        return NullProactivityEvaluator()
    if not hasattr(module, "ProactivityEvaluator"):
        logger.warning(
            "%s has no ProactivityEvaluator. Skipping proactivity evaluation.",
            module_name,
        )
        return NullProactivityEvaluator()
    return ModuleProactivityEvaluator(module)
