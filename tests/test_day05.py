import pytest

from yulepuzzles import day05

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


def test_parse_manual():
    rules, updates = day05.parse_manual(EXAMPLE)
    assert rules[0] == (47, 53)
    assert rules[-1] == (53, 13)
    assert updates[0] == [75, 47, 61, 53, 29]
    assert updates[-1] == [97, 13, 75, 29, 47]


def test_is_ordered():
    rules, updates = day05.parse_manual(EXAMPLE)
    assert day05.is_ordered(updates[0], rules) is True
    assert day05.is_ordered(updates[3], rules) is False


def test_fix_update_orders_and_keeps_pages():
    rules, updates = day05.parse_manual(EXAMPLE)
    for update in updates:
        fixed = day05.fix_update(update, rules)
        assert day05.is_ordered(fixed, rules)
        assert sorted(fixed) == sorted(update)


def test_fix_update_leaves_input_alone():
    rules, updates = day05.parse_manual(EXAMPLE)
    original = list(updates[3])
    day05.fix_update(updates[3], rules)
    assert updates[3] == original


def test_fix_update_keeps_ordered_update():
    rules, updates = day05.parse_manual(EXAMPLE)
    assert day05.fix_update(updates[0], rules) == updates[0]


def test_part1_example():
    assert day05.part1(EXAMPLE) == 143


def test_part2_example():
    assert day05.part2(EXAMPLE) == 123


def test_invalid_update_raises():
    with pytest.raises(ValueError):
        day05.part1("1|2\n\n1,x\n")