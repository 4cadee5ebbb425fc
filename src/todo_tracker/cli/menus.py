# src/todo_tracker/cli/menus.py

"""
Interactive menus.

The menus only collect answers and render results; every rule about
tasks lives in TaskManager / Task. Screens:
main -> view (filter) -> list (sort, pick) -> details -> edit
main -> search -> list ...
main -> add
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..core.state import AppState
from ..tasks.task_manager import SortCriterion, TaskManager
from ..tasks.task_models import Task, TaskDifficulty, TaskStatus, TaskValidationError, clean_title
from .inputs import build_edit_patch, parse_cost, parse_due_date
from .prompts import Console
from .render import NO_DATA, format_task_details, format_task_line

logger = logging.getLogger(__name__)

VIEW_FILTERS: dict[str, TaskStatus | None] = {
    "1": None,
    "2": TaskStatus.PENDING,
    "3": TaskStatus.IN_PROGRESS,
    "4": TaskStatus.DONE,
    "5": TaskStatus.CANCELLED,
}

SORT_LABELS: dict[SortCriterion, str] = {
    SortCriterion.TITLE: "Title",
    SortCriterion.DUE_DATE: "Due date",
    SortCriterion.CREATED_AT: "Creation",
}

FIELD_LABELS = {"due_date": "due date", "cost": "cost"}


def _status_choices() -> str:
    return " / ".join(f"[{s.value}] {s.label}" for s in TaskStatus)


def _difficulty_choices() -> str:
    return " / ".join(f"[{d.key}] {d.label}" for d in TaskDifficulty)


def _form_answer(raw: str) -> str:
    # Keep "" and whitespace-only answers as typed; they mean keep/clear.
    return raw if not raw.strip() else raw.strip()


class TodoApp:
    def __init__(self, state: AppState, console: Console) -> None:
        self.state = state
        self.console = console

    @property
    def manager(self) -> TaskManager:
        return self.state.tasks

    # ---- main ----

    def run(self) -> None:
        user_name = getattr(self.state.settings, "user_name", "there")
        while True:
            self.console.clear()
            self.console.say(f"Hello {user_name}!")

            choice = self.console.menu(
                "Main Menu",
                {"1": "View my tasks", "2": "Search a task", "3": "Add a task"},
                back_label="Exit",
            )
            if choice is None:
                self.console.say("\nThanks for using the task tracker. See you soon!")
                return

            if choice == "1":
                self.view_tasks_menu()
            elif choice == "2":
                self.search_menu()
            elif choice == "3":
                self.add_task_form()

    # ---- view / search ----

    def view_tasks_menu(self) -> None:
        choice = self.console.menu(
            "View My Tasks",
            {"1": "All", "2": "Pending", "3": "In progress", "4": "Done", "5": "Cancelled"},
        )
        if choice is None:
            return
        self.show_task_list(self.manager.filter_by_status(VIEW_FILTERS[choice]))

    def search_menu(self) -> None:
        self.console.clear()
        self.console.say("--- Task Search ---")
        query = self.console.ask("Type part of a task title to search for it")

        results = self.manager.search_by_title(query)
        if not results:
            self.console.say("\nNo tasks match your search.")
            self.console.pause()
            return
        self.show_task_list(results)

    def show_task_list(self, tasks: Sequence[Task]) -> None:
        if not tasks:
            self.console.clear()
            self.console.say("\nThere are no tasks to show for this filter.")
            self.console.pause()
            return

        shown = list(tasks)
        criterion = SortCriterion.TITLE
        while True:
            self.console.clear()
            self.console.say("--- Task List ---")
            self.console.say(
                f"\nOrder: [T] Title | [V] Due date | [C] Creation. (Current: {SORT_LABELS[criterion]})"
            )
            sort_choice = self.console.ask("Pick a sort order (or ENTER to keep it)")
            if sort_choice:
                criterion = SortCriterion.parse(sort_choice) or criterion

            shown = self.manager.sort_by(shown, criterion)

            self.console.say("\nThese are your tasks:")
            for pos, task in enumerate(shown, start=1):
                self.console.say(format_task_line(pos, task))

            pick = self.console.ask("\nEnter a number to see its details, or 0 to go back")
            if pick == "0":
                return

            try:
                index = int(pick)
            except ValueError:
                index = 0
            task = self.manager.locate_by_position(index, shown)
            if task is None:
                self.console.say("\n[ERROR] That task number is not valid.")
                self.console.pause()
                continue
            self.task_details(task)

    # ---- details / edit ----

    def task_details(self, task: Task) -> None:
        while True:
            self.console.clear()
            self.console.say("--- Task Details ---")
            self.console.say(format_task_details(task))

            choice = self.console.ask("\nPress E to edit it, or 0 to go back")
            if choice == "0":
                return
            if choice.upper() == "E":
                self.edit_task_form(task)
                return
            self.console.say("\n[ERROR] Invalid option.")
            self.console.pause()

    def edit_task_form(self, task: Task) -> None:
        c = self.console
        c.clear()
        c.say(f"--- Editing task: {task.title} ---")
        c.say(" - To keep a value, just leave it blank.")
        c.say(' - To clear a value, type a single space (" ").')

        due_now = task.due_date.strftime("%d/%m/%Y") if task.due_date else NO_DATA
        cost_now = NO_DATA if task.cost is None else task.cost
        answers = {
            "title": c.ask_raw(f"1. Title (Current: {task.title})"),
            "description": c.ask_raw(f"2. Description (Current: {task.description or NO_DATA})"),
            "status": c.ask_raw(f"3. Status (Current: {task.status.label}) ({_status_choices()})"),
            "difficulty": c.ask_raw(
                f"4. Difficulty (Current: {task.difficulty.label}) ({_difficulty_choices()})"
            ),
            "due_date": c.ask_raw(f"5. Due date (Current: {due_now}) (dd/mm/yyyy to change)"),
            "cost": c.ask_raw(f"6. Cost (Current: {cost_now})"),
        }
        patch, skipped = build_edit_patch({k: _form_answer(v) for k, v in answers.items()})
        for name in skipped:
            c.say(f"\n[WARNING] Invalid {FIELD_LABELS.get(name, name)}. That field was left unchanged.")

        self._report_saved(self.manager.edit(task, patch))

    # ---- add ----

    def add_task_form(self) -> None:
        c = self.console
        c.clear()
        c.say("--- Creating a new task ---")

        title = c.ask("1. Enter the title")
        while True:
            try:
                clean_title(title)
                break
            except TaskValidationError:
                c.say("[ERROR] Invalid title. It must be a short text (max 100 characters).")
                title = c.ask("1. Enter the title")

        description = c.ask("2. Enter the description (optional)")
        status = c.ask(f"3. Status ({_status_choices()}) [p]") or "p"
        difficulty = c.ask(f"4. Difficulty ({_difficulty_choices()}) [1]") or "1"

        due_raw = c.ask("5. Due date (dd/mm/yyyy) (optional)")
        due_date = parse_due_date(due_raw)
        if due_raw and due_date is None:
            c.say("[WARNING] Invalid due date format. It was skipped.")

        cost_raw = c.ask("6. Enter the cost (optional)")
        cost = parse_cost(cost_raw)
        if cost_raw and cost is None:
            c.say("[WARNING] Invalid cost. It was skipped.")

        try:
            task = Task.create(title, description, status, difficulty, due_date, cost)
        except TaskValidationError as e:
            logger.info("Task creation rejected: %s", e)
            c.say(f"\n[ERROR] {e}")
            c.pause()
            return

        self._report_saved(self.manager.add(task))

    def _report_saved(self, ok: bool) -> None:
        if ok:
            self.console.say("\nSaved!")
        else:
            self.console.say("\n[WARNING] Changes could not be written to disk. See the log for details.")
        self.console.pause()
