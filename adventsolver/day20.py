"""Pulse propagation: flip-flops, conjunctions and a broadcaster on a button."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from enum import Enum

SECOND_LAST_MODULES = ("pq", "fg", "dk", "fm")


class Pulse(Enum):
    LOW = "low"
    HIGH = "high"


class ModuleKind(Enum):
    BROADCAST = "broadcaster"
    FLIP_FLOP = "%"
    CONJUNCTION = "&"


@dataclass
class Module:
    """A communication module and its internal state."""

    kind: ModuleKind
    name: str
    outputs: list[str]
    on: bool = False
    last_inputs: dict[str, Pulse] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> Module:
        head, sep, tail = text.partition(" -> ")
        if not sep:
            raise ValueError(f"invalid module {text!r}")
        outputs = [name.strip() for name in tail.split(",")]
        if head.startswith("%"):
            return cls(ModuleKind.FLIP_FLOP, head.lstrip("%"), outputs)
        if head.startswith("&"):
            return cls(ModuleKind.CONJUNCTION, head.lstrip("&"), outputs)
        if head != "broadcaster":
            raise ValueError(f"invalid module name {head!r}")
        return cls(ModuleKind.BROADCAST, head, outputs)

    def receive(self, source: str, pulse: Pulse) -> Pulse | None:
        """Update state for an incoming pulse; return the pulse to send, if any."""
        if self.kind is ModuleKind.BROADCAST:
            return pulse
        if self.kind is ModuleKind.FLIP_FLOP:
            if pulse is Pulse.HIGH:
                return None
            self.on = not self.on
            return Pulse.HIGH if self.on else Pulse.LOW
        self.last_inputs[source] = pulse
        if all(p is Pulse.HIGH for p in self.last_inputs.values()):
            return Pulse.LOW
        return Pulse.HIGH


@dataclass
class Modules:
    """A network of modules with per-module input queues."""

    modules: dict[str, Module]
    output: str | None = None
    button_presses: int = 0
    pulse_counts: dict[Pulse, int] = field(
        default_factory=lambda: {Pulse.LOW: 0, Pulse.HIGH: 0}
    )
    input_buffers: dict[str, deque[tuple[str, Pulse]]] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> Modules:
        modules: dict[str, Module] = {}
        for line in text.splitlines():
            module = Module.parse(line)
            modules[module.name] = module

        sources: dict[str, list[str]] = {}
        for module in modules.values():
            for destination in module.outputs:
                sources.setdefault(destination, []).append(module.name)

        output = None
        for destination, senders in sources.items():
            target = modules.get(destination)
            if target is None:
                output = destination
                continue
            if target.kind is ModuleKind.CONJUNCTION:
                for sender in senders:
                    target.last_inputs[sender] = Pulse.LOW

        buffers = {name: deque() for name in modules}
        return cls(modules, output, input_buffers=buffers)

    def pulse_counts_product(self) -> int:
        return self.pulse_counts[Pulse.LOW] * self.pulse_counts[Pulse.HIGH]

    def _press(self, watch: tuple[str, str] | None = None) -> bool:
        """Press the button once; True if the watched condition stopped it early."""
        self.button_presses += 1
        try:
            self.input_buffers["broadcaster"].append(("button", Pulse.LOW))
        except KeyError:
            raise ValueError("no broadcaster module") from None
        self.pulse_counts[Pulse.LOW] += 1

        while any(self.input_buffers.values()):
            for module in self.modules.values():
                buffer = self.input_buffers[module.name]
                if not buffer:
                    continue
                source, pulse = buffer.popleft()
                if (
                    watch is not None
                    and module.kind is ModuleKind.CONJUNCTION
                    and module.name == watch[0]
                ):
                    try:
                        watched = module.last_inputs[watch[1]]
                    except KeyError:
                        raise ValueError(
                            f"{watch[1]!r} is not an input of {watch[0]!r}"
                        ) from None
                    if watched is Pulse.HIGH:
                        return True
                to_send = module.receive(source, pulse)
                if to_send is None:
                    continue
                self.pulse_counts[to_send] += len(module.outputs)
                for destination in module.outputs:
                    if destination == self.output:
                        continue
                    target = self.input_buffers.get(destination)
                    if target is None:
                        raise ValueError(f"unknown module {destination!r}")
                    target.append((module.name, to_send))
        return False

    def push_button(self) -> None:
        self._press()

    def push_button_until_module_has_high_input(
        self, conj_module: str, input_module: str
    ) -> None:
        """Press until `conj_module` is seen to remember a high pulse from `input_module`."""
        while not self._press((conj_module, input_module)):
            pass


def button_presses_until_low_pulse_to_module(text: str, module: str) -> int:
    presses = []
    for second_last in SECOND_LAST_MODULES:
        modules = Modules.parse(text)
        modules.push_button_until_module_has_high_input(module, second_last)
        presses.append(modules.button_presses)
    return math.prod(presses)


def part1(text: str) -> int:
    modules = Modules.parse(text)
    for _ in range(1000):
        modules.push_button()
    return modules.pulse_counts_product()


def part2(text: str) -> int:
    return button_presses_until_low_pulse_to_module(text, "vr")