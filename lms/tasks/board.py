"""
Board ordering and grouping.

Within a column tasks are ordered by due date (tasks without one last),
then by priority from high to low, then by creation order.
"""

from collections import OrderedDict
from datetime import date
from typing import Dict, Iterable, List

from .models import Task

PRIORITY_RANK = {
    Task.Priority.HIGH: 0,
    Task.Priority.MEDIUM: 1,
    Task.Priority.LOW: 2,
}


def board_sort_key(task: Task):
    return (
        task.due_date is None,
        task.due_date or date.max,
        PRIORITY_RANK.get(task.priority, len(PRIORITY_RANK)),
        task.created_at,
        task.id,
    )


def sort_tasks(tasks: Iterable[Task]) -> List[Task]:
    return sorted(tasks, key=board_sort_key)


def group_by_status(tasks: Iterable[Task]) -> Dict[str, List[Task]]:
    """All three columns, in board order, each sorted."""
    columns: Dict[str, List[Task]] = OrderedDict((value, []) for value in Task.Status.values)
    for task in sort_tasks(tasks):
        columns.setdefault(task.status, []).append(task)
    return columns
