"""Pure-function rules engine pattern.

Rules are stateless predicates over an entity: (entity) -> RuleResult.
No database, no side effects. This makes them:
- Trivially testable (pure input/output)
- Composable (ordered chains, first failure wins)
- Auditable (deterministic, explainable)

Example domain: subscription billing eligibility.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Sequence


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class RuleResult:
    """Outcome of a single rule evaluation."""

    passed: bool
    rule_name: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, rule_name: str = "all") -> "RuleResult":
        return cls(passed=True, rule_name=rule_name, message="")


@dataclass
class RuleSetResult:
    """Aggregate outcome of multiple rules."""

    all_passed: bool
    results: list[RuleResult]
    failed: list[RuleResult] = field(default_factory=list)

    def __post_init__(self):
        self.failed = [r for r in self.results if not r.passed]
        self.all_passed = len(self.failed) == 0


# ---------------------------------------------------------------------------
# Rule definition
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Rule:
    """A named predicate that fails when ``violated(entity)`` is true.

    ``message`` builds the user-facing reason from the offending entity.
    ``applies_to`` optionally gates the rule, e.g. on a status tier; a rule
    that does not apply always passes.
    """

    name: str
    violated: Callable[[Any], bool]
    message: Callable[[Any], str]
    applies_to: Optional[Callable[[Any], bool]] = None
    details: Optional[Callable[[Any], dict[str, Any]]] = None

    def applies(self, entity: Any) -> bool:
        return self.applies_to is None or self.applies_to(entity)

    def check(self, entity: Any) -> RuleResult:
        if not self.applies(entity) or not self.violated(entity):
            return RuleResult(passed=True, rule_name=self.name, message="")
        return RuleResult(
            passed=False,
            rule_name=self.name,
            message=self.message(entity),
            details=self.details(entity) if self.details else {},
        )


# ---------------------------------------------------------------------------
# Rule composition
# ---------------------------------------------------------------------------

def first_failure(rules: Sequence[Rule], entity: Any) -> RuleResult:
    """Run rules in order and stop at the first one that fails.

    Example::

        result = first_failure(VALIDATION_CHAIN, subscriber)
        if not result.passed:
            return False, result.message
    """
    for rule in rules:
        result = rule.check(entity)
        if not result.passed:
            return result
    return RuleResult.ok()


def evaluate_rules(*rules: RuleResult) -> RuleSetResult:
    """Compose multiple rule results into a single aggregate."""
    return RuleSetResult(
        all_passed=all(r.passed for r in rules),
        results=list(rules),
    )


def evaluate_all(rules: Iterable[Rule], entity: Any) -> RuleSetResult:
    """Run every applicable rule without short-circuiting."""
    return evaluate_rules(*(rule.check(entity) for rule in rules if rule.applies(entity)))
