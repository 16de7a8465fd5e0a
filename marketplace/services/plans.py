from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Plan:
    plan_id: str
    days: int
    cost: Decimal


PLANS: dict[str, Plan] = {
    "7days": Plan("7days", 7, Decimal("500")),
    "30days": Plan("30days", 30, Decimal("1500")),
    "90days": Plan("90days", 90, Decimal("4000")),
}
DEFAULT_PLAN_ID = "7days"


def resolve_plan(plan_id: str | None) -> Plan:
    # Unknown ids get the shortest, cheapest plan.
    return PLANS.get(str(plan_id or "").strip().lower(), PLANS[DEFAULT_PLAN_ID])


def list_plans() -> list[Plan]:
    return sorted(PLANS.values(), key=lambda plan: plan.days)
