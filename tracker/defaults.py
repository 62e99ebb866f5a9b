"""Default documents created when nothing usable is on disk."""

import datetime as dt

from models.plan import MonthPlan, StudyPlan
from models.progress import ProgressDocument

# (focus, daily targets, resources) per month
_DEFAULT_MONTHS: list[tuple[str, dict[str, str], dict[str, str]]] = [
    (
        "Foundations: arrays, strings and hashing",
        {
            "Problems": "3 easy problems (arrays / hash maps)",
            "Scripting": "1 hour of core language drills",
            "Systems": "30 minutes of pointers and memory basics",
        },
        {
            "Problem set": "NeetCode 150 - Arrays & Hashing",
            "Reading": "Python docs: data model chapter",
        },
    ),
    (
        "Two pointers, sliding window and stacks",
        {
            "Problems": "2 easy + 1 medium problem",
            "Scripting": "Build a small CLI utility",
            "Systems": "RAII and smart pointers exercises",
        },
        {
            "Problem set": "NeetCode 150 - Two Pointers, Sliding Window, Stack",
            "Reading": "A Tour of C++ - chapters 1-5",
        },
    ),
    (
        "Binary search and linked lists",
        {
            "Problems": "2 medium problems",
            "Project": "1 hour on a scripting project",
            "Review": "Re-solve one problem from last week",
        },
        {
            "Problem set": "NeetCode 150 - Binary Search, Linked List",
            "Reading": "Fluent Python - sequences and iterators",
        },
    ),
    (
        "Trees and tries",
        {
            "Problems": "2 medium problems (tree traversal)",
            "Project": "1 hour on a systems project",
            "Review": "Write out recursion templates",
        },
        {
            "Problem set": "NeetCode 150 - Trees, Tries",
            "Reading": "Effective Modern C++ - items 1-10",
        },
    ),
    (
        "Heaps, intervals and greedy",
        {
            "Problems": "2 medium problems",
            "Project": "Ship the first scripting project",
            "Design": "Read one system design case study",
        },
        {
            "Problem set": "NeetCode 150 - Heap, Intervals, Greedy",
            "Reading": "Designing Data-Intensive Applications - part 1",
        },
    ),
    (
        "Graphs and backtracking",
        {
            "Problems": "1 medium + 1 hard problem",
            "Project": "1 hour on the systems project",
            "Design": "Sketch one design (URL shortener, rate limiter)",
        },
        {
            "Problem set": "NeetCode 150 - Graphs, Backtracking",
            "Reading": "System Design Interview Vol. 1 - chapters 1-4",
        },
    ),
    (
        "Dynamic programming I",
        {
            "Problems": "2 DP problems (1-D)",
            "Project": "Ship the first systems project",
            "Design": "One design session per week",
        },
        {
            "Problem set": "NeetCode 150 - 1-D Dynamic Programming",
            "Reading": "Designing Data-Intensive Applications - part 2",
        },
    ),
    (
        "Dynamic programming II and bit manipulation",
        {
            "Problems": "2 DP problems (2-D)",
            "Project": "Start a concurrency-focused systems project",
            "Design": "One design session per week",
        },
        {
            "Problem set": "NeetCode 150 - 2-D Dynamic Programming, Bit Manipulation",
            "Reading": "C++ Concurrency in Action - chapters 1-4",
        },
    ),
    (
        "System design depth",
        {
            "Problems": "1 medium + 1 hard problem",
            "Design": "Two design sessions per week",
            "Mock": "One mock interview per week",
        },
        {
            "Reading": "System Design Interview Vol. 2",
            "Practice": "Peer mock interview platforms",
        },
    ),
    (
        "Mixed practice under time pressure",
        {
            "Problems": "3 timed problems (45 minutes each)",
            "Design": "One design session",
            "Mock": "Two mock interviews per week",
        },
        {
            "Problem set": "Company-tagged problem lists",
            "Reading": "Behavioral story bank (STAR format)",
        },
    ),
    (
        "Behavioral and portfolio polish",
        {
            "Problems": "2 timed problems",
            "Projects": "Write READMEs and demos for finished projects",
            "Mock": "Two mock interviews per week",
        },
        {
            "Reading": "Cracking the Coding Interview - behavioral chapter",
            "Portfolio": "Project write-ups and resume review",
        },
    ),
    (
        "Interview season",
        {
            "Problems": "2 review problems from weak topics",
            "Design": "Review past designs",
            "Mock": "Mock interview before every real interview",
        },
        {
            "Review": "Personal notes and past mistakes log",
            "Practice": "Company-specific question banks",
        },
    ),
]


def default_plan() -> StudyPlan:
    """Build the fixed 12-month study plan."""
    return StudyPlan(
        months=[MonthPlan(focus=focus, daily=daily, resources=resources) for focus, daily, resources in _DEFAULT_MONTHS]
    )


def default_progress(now: dt.datetime | None = None) -> ProgressDocument:
    """Build an empty progress document starting at ``now``."""
    return ProgressDocument(start_date=now or dt.datetime.now(dt.UTC))
