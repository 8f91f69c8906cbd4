"""Lens library: the HASH algorithm and the HASHMAP initialisation sequence."""

from __future__ import annotations

from dataclasses import dataclass, field


def hash_label(text: str) -> int:
    """Run the HASH algorithm over a string, giving a value in 0..255."""
    value = 0
    for ch in text:
        value = ((value + (ord(ch) & 0xFF)) * 17) % 256
    return value


def sum_hash_seq(text: str) -> int:
    return sum(hash_label(step) for step in text.rstrip().split(","))


@dataclass(frozen=True)
class InitStep:
    """Insert a lens (lens is set) or remove one (lens is None) in a box."""

    label: str
    box: int
    lens: int | None = None

    @property
    def is_removal(self) -> bool:
        return self.lens is None

    @classmethod
    def parse(cls, text: str) -> InitStep:
        if "=" in text:
            label, lens_text = text.split("=", 1)
            lens = int(lens_text)
            if not 0 <= lens <= 255:
                raise ValueError(f"lens value out of range: {lens}")
            return cls(label, hash_label(label), lens)
        label = text.rstrip("-")
        return cls(label, hash_label(label))


def parse_init_seq(text: str) -> list[InitStep]:
    return [InitStep.parse(step) for step in text.rstrip().split(",")]


@dataclass
class LensHashMap:
    """Boxes of labelled lenses, each box kept in insertion order."""

    boxes: dict[int, dict[str, int]] = field(default_factory=dict)

    def run_init_step(self, step: InitStep) -> None:
        box = self.boxes.setdefault(step.box, {})
        if step.lens is None:
            box.pop(step.label, None)
        else:
            box[step.label] = step.lens

    def focusing_power(self) -> int:
        return sum(
            (box_index + 1) * slot * lens
            for box_index, lenses in self.boxes.items()
            for slot, lens in enumerate(lenses.values(), start=1)
        )


def part1(text: str) -> int:
    return sum_hash_seq(text)


def part2(text: str) -> int:
    lens_map = LensHashMap()
    for step in parse_init_seq(text):
        lens_map.run_init_step(step)
    return lens_map.focusing_power()