"""Print queue: page ordering rules and updates."""

from __future__ import annotations

from collections.abc import Sequence

Rule = tuple[int, int]


def parse_manual(text: str) -> tuple[list[Rule], list[list[int]]]:
    """Split the text into ``before|after`` rules and comma-separated updates."""
    rules: list[Rule] = []
    updates: list[list[int]] = []
    in_rules = True
    for line in text.splitlines():
        if not line.strip():
            in_rules = False
            continue
        if in_rules:
            before, sep, after = line.partition("|")
            if sep:
                rules.append((int(before), int(after)))
        else:
            updates.append([int(page) for page in line.split(",")])
    return rules, updates


def _violates(update: Sequence[int], rule: Rule) -> bool:
    first, after = rule
    return first in update and after in update and update.index(first) > update.index(after)


def is_ordered(update: Sequence[int], rules: Sequence[Rule]) -> bool:
    """True when no rule applying to this update is broken."""
    return not any(_violates(update, rule) for rule in rules)


def fix_update(update: Sequence[int], rules: Sequence[Rule]) -> list[int]:
    """Return the update reordered by swapping pages until every rule holds."""
    fixed = list(update)
    changed = True
    while changed:
        changed = False
        for rule in rules:
            if _violates(fixed, rule):
                i, j = fixed.index(rule[0]), fixed.index(rule[1])
                fixed[i], fixed[j] = fixed[j], fixed[i]
                changed = True
    return fixed


def part1(text: str) -> int:
    """Sum of the middle pages of correctly ordered updates."""
    rules, updates = parse_manual(text)
    return sum(u[len(u) // 2] for u in updates if is_ordered(u, rules))


def part2(text: str) -> int:
    """Sum of the middle pages of misordered updates once fixed."""
    rules, updates = parse_manual(text)
    total = 0
    for update in updates:
        if not is_ordered(update, rules):
            fixed = fix_update(update, rules)
            total += fixed[len(fixed) // 2]
    return total