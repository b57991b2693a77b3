"""
Roadmap Progress Derivation

Pure functions that derive the dashboard's roadmap views from a user's
modules and completed tasks:

- module progress:   round(completed / total * 100), 0 for a module without tasks
- module complete:   progress == 100
- overall progress:  mean of the module progress values
- upcoming tasks:    incomplete tasks ordered by due date
- current module:    first module below 100 %, else the last module
- module filtering:  search text, progress tab and course type

The functions work on plain snapshots (ModuleView/TaskView) so they can be
tested without a database. ``load_roadmap`` builds the snapshots for a user.

Author: DevMastery Development Team
Version: 1.0.0
"""

from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

TAB_ALL = "all"
TAB_IN_PROGRESS = "in-progress"
TAB_COMPLETED = "completed"
TABS = (TAB_ALL, TAB_IN_PROGRESS, TAB_COMPLETED)


@dataclass(frozen=True)
class TaskView:
    id: int
    title: str
    due_date: Optional[date]
    complete: bool = False
    module_id: Optional[int] = None
    module_title: str = ""


@dataclass(frozen=True)
class ModuleView:
    id: int
    title: str
    description: str = ""
    course_type: str = ""
    duration_weeks: int = 1
    tasks: List[TaskView] = field(default_factory=list)

    @property
    def progress(self) -> int:
        return compute_progress(self.tasks)

    @property
    def complete(self) -> bool:
        return self.progress == 100


def round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_progress(tasks: Iterable[TaskView]) -> int:
    """
    Percentage of completed tasks.

    Args:
        tasks: Tasks of one module

    Returns:
        Integer percentage 0..100, 0 for an empty task list
    """
    tasks = list(tasks)
    if not tasks:
        return 0
    completed = count_completed(tasks)
    return round_half_up(completed / len(tasks) * 100)


def count_completed(tasks: Iterable[TaskView]) -> int:
    return sum(1 for task in tasks if task.complete)


def overall_progress(modules: List[ModuleView]) -> int:
    """Mean module progress, rounded; 0 without modules."""
    if not modules:
        return 0
    return round_half_up(sum(module.progress for module in modules) / len(modules))


def flatten_tasks(modules: Iterable[ModuleView]) -> List[TaskView]:
    """All tasks of all modules, each tagged with its module."""
    return [
        replace(task, module_id=module.id, module_title=module.title)
        for module in modules
        for task in module.tasks
    ]


def current_module(modules: List[ModuleView]) -> Optional[ModuleView]:
    """First module not yet at 100 %, else the last module, None without modules."""
    for module in modules:
        if module.progress < 100:
            return module
    return modules[-1] if modules else None


def _due_sort_key(task: TaskView):
    # Tasks without a due date go last
    return (task.due_date is None, task.due_date or date.max, task.id)


def upcoming_tasks(modules: Iterable[ModuleView], limit: int = 5) -> List[TaskView]:
    """Incomplete tasks ordered by due date, at most ``limit``."""
    pending = [task for task in flatten_tasks(modules) if not task.complete]
    return sorted(pending, key=_due_sort_key)[:limit]


def is_due_soon(due_date: Optional[date], today: date, days: int = 2) -> bool:
    """True if the due date is between today and ``days`` days from today."""
    if due_date is None:
        return False
    delta = (due_date - today).days
    return 0 <= delta <= days


def due_label(due_date: Optional[date], today: date) -> str:
    if due_date is None:
        return ""
    if due_date == today:
        return "Today"
    if due_date == today + timedelta(days=1):
        return "Tomorrow"
    return due_date.isoformat()


def filter_modules(
    modules: Iterable[ModuleView],
    search: str = "",
    tab: str = TAB_ALL,
    course_type: str = "",
) -> List[ModuleView]:
    """
    Filter modules the way the roadmap page does.

    Args:
        modules: Modules with per-user progress
        search: Case-insensitive text matched against title, description
            and the titles of the module's tasks
        tab: "all", "in-progress" (not complete) or "completed"
        course_type: Only modules of this course type; empty means all

    Returns:
        Matching modules in their original order
    """
    needle = (search or "").strip().lower()

    def matches(module: ModuleView) -> bool:
        if needle and not (
            needle in module.title.lower()
            or needle in module.description.lower()
            or any(needle in task.title.lower() for task in module.tasks)
        ):
            return False
        if tab == TAB_IN_PROGRESS and module.complete:
            return False
        if tab == TAB_COMPLETED and not module.complete:
            return False
        if course_type and module.course_type != course_type:
            return False
        return True

    return [module for module in modules if matches(module)]


def load_roadmap(user, modules=None) -> List[ModuleView]:
    """
    Build module snapshots with the completion state of ``user``.

    Args:
        user: Django user whose completions are applied
        modules: Optional Module queryset, defaults to all modules

    Returns:
        ModuleView list in roadmap order
    """
    from .models import Module, TaskCompletion

    if modules is None:
        modules = Module.objects.all()
    modules = modules.prefetch_related("tasks")

    completed_ids = set(
        TaskCompletion.objects.filter(user=user).values_list("task_id", flat=True)
    )
    return [module_view(module, completed_ids) for module in modules]


def module_view(module, completed_ids) -> ModuleView:
    return ModuleView(
        id=module.id,
        title=module.title,
        description=module.description,
        course_type=module.course_type,
        duration_weeks=module.duration_weeks,
        tasks=[
            TaskView(
                id=task.id,
                title=task.title,
                due_date=task.due_date,
                complete=task.id in completed_ids,
                module_id=module.id,
                module_title=module.title,
            )
            for task in module.tasks.all()
        ],
    )
