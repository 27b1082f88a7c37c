"""Dynamic capital solver.

Finds the smallest CAPITAL, expressed as a percent of the account cost
("Cobertura"), whose projected total (broker P&L + recovered capital)
covers the account cost.

The search is a bounded bisection. It assumes projected total is
non-decreasing in CAPITAL, which holds when max drawdown is positive and
the CAPITAL-scaled costs stay below the recovered capital slope.
"""

import logging
import math
from typing import Callable

from src.engine.models.calculator import SolverOutcome, SolverSettings
from src.engine.models.enums import CapitalMode

logger = logging.getLogger(__name__)

DEFAULT_SOLVER_SETTINGS = SolverSettings()

# CAPITAL = account cost
FAST_PATH_PERCENT = 100.0


def capital_from_percent(account_cost: float, capital_percent: float) -> float:
    """CAPITAL = account_cost * capital_percent / 100."""
    return account_cost * capital_percent / 100


def solve_capital_percent(
    projected_total_at: Callable[[float], float],
    account_cost: float,
    settings: SolverSettings | None = None,
) -> SolverOutcome:
    """Search the minimal capital percent covering the account cost.

    Algorithm:
        1. account_cost <= 0: return the fallback percent (100 by default).
        2. Fast path: projected total at 100% already covers the cost.
        3. Bisection over [min_percent, max_percent]: a satisfying midpoint
           becomes the new ceiling, otherwise the new floor. Stops when the
           interval is within tolerance or after max_iterations.

    Never raises on non-convergence: the best ceiling found is returned.

    Args:
        projected_total_at: Projected total as a function of CAPITAL.
        account_cost: Account cost to cover.
        settings: Search bounds (defaults to SolverSettings()).

    Returns:
        SolverOutcome with the ceiling rounded to settings.decimals.

    Example:
        >>> outcome = solve_capital_percent(lambda c: 0.94 * c, 10000)
        >>> 106.38 <= outcome.capital_percent <= 106.40
        True
    """
    settings = settings or DEFAULT_SOLVER_SETTINGS

    if account_cost <= 0:
        logger.debug("Account cost %.2f <= 0, using %.2f%%", account_cost, settings.fallback_percent)
        return SolverOutcome(capital_percent=settings.fallback_percent)

    def covers(percent: float) -> bool:
        return projected_total_at(capital_from_percent(account_cost, percent)) >= account_cost

    if covers(FAST_PATH_PERCENT):
        logger.debug("Fast path: %.2f%% already covers %.2f", FAST_PATH_PERCENT, account_cost)
        return SolverOutcome(capital_percent=FAST_PATH_PERCENT, fast_path=True)

    low, high = settings.min_percent, settings.max_percent
    iterations = 0
    while iterations < settings.max_iterations and high - low > settings.tolerance:
        mid = (low + high) / 2
        if covers(mid):
            high = mid
        else:
            low = mid
        iterations += 1

    converged = high - low <= settings.tolerance
    threshold_met = covers(high)
    if not converged:
        logger.warning(
            "Capital solver stopped after %d iterations (interval %.4f > %.4f), using %.4f%%",
            iterations,
            high - low,
            settings.tolerance,
            high,
        )
    if not threshold_met:
        logger.warning(
            "Projected total never covers account cost %.2f within %.2f%%",
            account_cost,
            settings.max_percent,
        )

    capital_percent = round(high, settings.decimals)
    logger.debug("Capital solver: %.2f%% after %d iterations", capital_percent, iterations)
    return SolverOutcome(
        capital_percent=capital_percent,
        iterations=iterations,
        converged=converged,
        threshold_met=threshold_met,
    )


def resolve_capital_percent(
    capital_mode: CapitalMode,
    manual_capital_percent: float | None,
    projected_total_at: Callable[[float], float],
    account_cost: float,
    settings: SolverSettings | None = None,
) -> tuple[float, SolverOutcome | None]:
    """Pick the capital percent for the selected mode.

    MANUAL uses manual_capital_percent as-is (fallback percent when unset,
    non-finite or not positive) and never runs the search.

    Returns:
        (capital_percent, solver outcome or None in MANUAL mode).
    """
    settings = settings or DEFAULT_SOLVER_SETTINGS
    if capital_mode == CapitalMode.MANUAL:
        if (
            manual_capital_percent is None
            or not math.isfinite(manual_capital_percent)
            or manual_capital_percent <= 0
        ):
            return settings.fallback_percent, None
        return manual_capital_percent, None

    outcome = solve_capital_percent(projected_total_at, account_cost, settings)
    return outcome.capital_percent, outcome
