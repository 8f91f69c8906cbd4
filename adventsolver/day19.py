"""Aplenty: sort machine parts through chains of workflows."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Sequence

Range = tuple[int, int]
Ranges = tuple[Range, Range, Range, Range]

_FULL_RANGES: Ranges = ((1, 4000), (1, 4000), (1, 4000), (1, 4000))


class Component(Enum):
    """One of the four ratings of a part."""

    X = "x"
    M = "m"
    A = "a"
    S = "s"

    @classmethod
    def parse(cls, text: str) -> Component:
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"invalid component {text!r}") from None

    @property
    def index(self) -> int:
        return list(Component).index(self)


class CmpOp(Enum):
    GREATER_THAN = ">"
    LESS_THAN = "<"


@dataclass(frozen=True)
class Rule:
    """Send a part to a workflow, either always or when a comparison holds."""

    workflow: str
    component: Component | None = None
    cmp_op: CmpOp | None = None
    value: int = 0

    @property
    def is_direct(self) -> bool:
        return self.component is None

    @classmethod
    def parse(cls, text: str) -> Rule:
        if ":" not in text:
            return cls(text)
        comparison, workflow = text.split(":", 1)
        for op in (CmpOp.LESS_THAN, CmpOp.GREATER_THAN):
            if op.value in comparison:
                name, value = comparison.split(op.value, 1)
                return cls(workflow, Component.parse(name), op, int(value))
        raise ValueError(f"invalid comparison operator in rule {text!r}")

    def matches(self, part: Part) -> bool:
        if self.component is None:
            return True
        rating = part.get_component(self.component)
        if self.cmp_op is CmpOp.GREATER_THAN:
            return rating > self.value
        return rating < self.value

    def modify_ranges(self, ranges: Sequence[Range], result: bool) -> Ranges:
        """Narrow the rating ranges so that this rule's test gives `result`."""
        narrowed = list(ranges)
        if self.component is None:
            return tuple(narrowed)  # type: ignore[return-value]
        index = self.component.index
        low, high = narrowed[index]
        if self.cmp_op is CmpOp.GREATER_THAN:
            if result:
                low = max(low, self.value + 1)
            else:
                high = min(high, self.value)
        else:
            if result:
                high = min(high, self.value - 1)
            else:
                low = max(low, self.value)
        narrowed[index] = (low, high)
        return tuple(narrowed)  # type: ignore[return-value]


@dataclass(frozen=True)
class Workflow:
    """A named list of rules, tried in order."""

    name: str
    rules: tuple[Rule, ...]

    @classmethod
    def parse(cls, text: str) -> Workflow:
        name, sep, rest = text.partition("{")
        if not sep:
            raise ValueError(f"invalid workflow {text!r}")
        rules = tuple(Rule.parse(rule) for rule in rest.rstrip("}").split(","))
        return cls(name, rules)

    def process(self, part: Part) -> str:
        """Name of the workflow the part is sent to next."""
        for rule in self.rules:
            if rule.matches(part):
                return rule.workflow
        raise ValueError(f"ran out of rules in workflow {self.name!r}")


@dataclass(frozen=True)
class Part:
    """A machine part with its four ratings."""

    x: int
    m: int
    a: int
    s: int

    @classmethod
    def parse(cls, text: str) -> Part:
        fields = text.lstrip("{").rstrip("}").split(",")
        if len(fields) < 4:
            raise ValueError(f"invalid part {text!r}")
        values = []
        for field_text in fields[:4]:
            _, sep, value = field_text.partition("=")
            if not sep:
                raise ValueError(f"invalid part rating {field_text!r}")
            values.append(int(value))
        return cls(*values)

    def components_sum(self) -> int:
        return self.x + self.m + self.a + self.s

    def get_component(self, component: Component) -> int:
        return getattr(self, component.value)

    def is_accepted(self, workflows: Mapping[str, Workflow]) -> bool:
        name = "in"
        while name not in ("A", "R"):
            try:
                workflow = workflows[name]
            except KeyError:
                raise ValueError(f"workflow {name!r} not found") from None
            name = workflow.process(self)
        return name == "A"


def parse(text: str) -> tuple[dict[str, Workflow], list[Part]]:
    """Split the input into workflows (keyed by name) and parts."""
    lines = iter(text.splitlines())
    workflows: dict[str, Workflow] = {}
    for line in lines:
        if not line:
            break
        workflow = Workflow.parse(line)
        workflows[workflow.name] = workflow
    else:
        raise ValueError("missing blank line between workflows and parts")
    parts = [Part.parse(line) for line in lines]
    return workflows, parts


def _through_rule(workflow: Workflow, index: int, ranges: Ranges) -> Ranges:
    """Ranges for which the workflow reaches its rule at `index` and takes it."""
    ranges = workflow.rules[index].modify_ranges(ranges, True)
    for earlier in workflow.rules[:index]:
        ranges = earlier.modify_ranges(ranges, False)
    return ranges


def _predecessor(workflows: Mapping[str, Workflow], name: str) -> tuple[Workflow, int]:
    for workflow in workflows.values():
        for index, rule in enumerate(workflow.rules):
            if rule.workflow == name:
                return workflow, index
    raise ValueError(f"no workflow leads to {name!r}")


def acceptance_ranges(workflows: Mapping[str, Workflow]) -> list[Ranges]:
    """One set of rating ranges for every rule that accepts a part."""
    all_ranges: list[Ranges] = []
    for workflow in workflows.values():
        for index, rule in enumerate(workflow.rules):
            if rule.workflow != "A":
                continue
            ranges = _through_rule(workflow, index, _FULL_RANGES)
            current = workflow.name
            while current != "in":
                previous, rule_index = _predecessor(workflows, current)
                ranges = _through_rule(previous, rule_index, ranges)
                current = previous.name
            all_ranges.append(ranges)
    return all_ranges


def acceptance_combinations(workflows: Mapping[str, Workflow]) -> int:
    """How many distinct rating combinations in 1..4000 are accepted."""
    return sum(
        math.prod(max(high - low + 1, 0) for low, high in ranges)
        for ranges in acceptance_ranges(workflows)
    )


def part1(text: str) -> int:
    workflows, parts = parse(text)
    return sum(part.components_sum() for part in parts if part.is_accepted(workflows))


def part2(text: str) -> int:
    workflows, _ = parse(text)
    return acceptance_combinations(workflows)