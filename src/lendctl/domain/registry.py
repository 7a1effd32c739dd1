"""Membership category -> (checkout policy, late-fee strategy) registry.

The mapping is fixed and built once. A registry value is handed to the
lending service at construction, so tests can pass their own without
touching module state.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from lendctl.domain.errors import UnknownCategory
from lendctl.domain.policies import (
    PREMIUM_LATE_FEE,
    PREMIUM_POLICY,
    REGULAR_LATE_FEE,
    REGULAR_POLICY,
    STUDENT_LATE_FEE,
    STUDENT_POLICY,
    CheckoutPolicy,
    LateFeeStrategy,
)
from lendctl.domain.types import MembershipType


@dataclass(frozen=True)
class MembershipRules:
    """The pair of strategies that apply to one membership category."""

    policy: CheckoutPolicy
    late_fee: LateFeeStrategy


@dataclass(frozen=True)
class PolicyRegistry:
    """Read-only lookup from membership category to its rules."""

    rules: Mapping[MembershipType, MembershipRules] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    def rules_for(self, category: object) -> MembershipRules:
        """Return the rules for *category*.

        Raises:
            UnknownCategory: If *category* is not registered. Never falls
                back to a default category.
        """
        try:
            found = self.rules.get(category)  # type: ignore[call-overload]
        except TypeError:
            found = None
        if found is None:
            raise UnknownCategory(category)
        return found

    def policy_for(self, category: object) -> CheckoutPolicy:
        """Checkout policy for *category*."""
        return self.rules_for(category).policy

    def fee_strategy_for(self, category: object) -> LateFeeStrategy:
        """Late-fee strategy for *category*."""
        return self.rules_for(category).late_fee

    @property
    def categories(self) -> list[MembershipType]:
        return list(self.rules)


def build_default_registry() -> PolicyRegistry:
    """Registry with the built-in REGULAR, PREMIUM and STUDENT rules."""
    return PolicyRegistry(
        rules={
            MembershipType.REGULAR: MembershipRules(REGULAR_POLICY, REGULAR_LATE_FEE),
            MembershipType.PREMIUM: MembershipRules(PREMIUM_POLICY, PREMIUM_LATE_FEE),
            MembershipType.STUDENT: MembershipRules(STUDENT_POLICY, STUDENT_LATE_FEE),
        }
    )


DEFAULT_REGISTRY = build_default_registry()
