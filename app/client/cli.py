#!/usr/bin/env python3
"""
Interactive console client for the AI Teacher Helper API.

Usage:
    python -m app.client [--api-url http://localhost:3001/api]

Commands:
    home | grading | students      switch tab
    ask <message>                  (home) ask the assistant
    select <id>                    (grading) choose a student
    paper                          (grading) type the paper, end with a line "."
    grade                          (grading) submit the paper
    add | edit <id> | delete <id>  (students) manage the roster
    cancel                         (students) discard an unsaved form
    refresh | help | quit
"""
import argparse
import sys
from typing import Callable, List, Optional

from app.client.api import ApiClient
from app.client.views import ClientApp, TABS
from app.core.config import settings

PROMPTS = {"home": "You", "grading": "Paper Review", "students": "Students"}


def confirm_prompt(question: str) -> bool:
    return input(f"{question} [y/N] ").strip().lower() in ("y", "yes")


def alert_print(message: str) -> None:
    print(f"!! {message}")


def read_multiline(read: Callable[[str], str] = input) -> str:
    lines: List[str] = []
    while True:
        line = read("")
        if line.strip() == ".":
            break
        lines.append(line)
    return "\n".join(lines)


# ==================== RENDERING ====================

def render_home(app: ClientApp) -> str:
    out = ["General Questions & Assistance"]
    labels = {"user": "You", "assistant": "AI Assistant", "error": "Error"}
    for entry in app.home.transcript:
        out.append(f"{labels[entry.role]}: {entry.content}")
    return "\n".join(out)


def render_grading(app: ClientApp) -> str:
    view = app.grading
    out = ["Paper Review & Grading"]
    selected = app.roster.find(view.selected_student_id) if view.selected_student_id else None
    if selected:
        out.append(f"Student: {selected['name']} ({selected['class']})")
    else:
        out.append("Student: -- Choose a student --")
    out.append(f"Paper: {len(view.paper_text)} characters")
    if view.result is not None:
        if view.result.ok:
            out.append(f"Grading Result for {view.result.student_name}")
            out.append(f"Grade: {view.result.grade}")
            out.append(view.result.response)
        else:
            out.append(f"Error: {view.result.error}")
    return "\n".join(out)


def render_students(app: ClientApp) -> str:
    students = app.roster.students
    if not students:
        return "No students yet. Add your first student with 'add'!"
    out = [f"{'ID':>4}  {'Name':<24} {'Age':>4}  {'Class':<14} Overall Grade"]
    for s in students:
        out.append(f"{s['id']:>4}  {s['name']:<24} {s['age']:>4}  {s['class']:<14} {s['overallGrade']}")
    return "\n".join(out)


RENDERERS = {"home": render_home, "grading": render_grading, "students": render_students}


# ==================== COMMANDS ====================

def fill_form(app: ClientApp, read: Callable[[str], str]) -> None:
    form = app.students.form
    for key, label in (("name", "Name"), ("age", "Age"), ("class", "Class (e.g., CS101, Math 201)"),
                       ("overallGrade", "Overall Grade (optional)")):
        value = read(f"{label} [{form[key]}]: ").strip()
        if value:
            form[key] = value


def handle_command(app: ClientApp, line: str, read: Callable[[str], str] = input) -> Optional[str]:
    """Run one command line; returns text to print, or None to quit."""
    command, _, arg = line.strip().partition(" ")
    arg = arg.strip()

    if command in ("quit", "exit"):
        return None
    if command in TABS:
        app.switch_tab(command)
        return RENDERERS[command](app)
    if command == "refresh":
        app.roster.refresh()
        return RENDERERS[app.active_tab](app)
    if command == "help" or not command:
        return __doc__.strip()

    if command == "ask":
        if not app.home.submit(arg):
            return "Type a message after 'ask'."
        return render_home(app)

    if command == "select":
        if not arg.isdigit() or app.roster.find(int(arg)) is None:
            return f"No student with id {arg!r}."
        app.grading.selected_student_id = int(arg)
        return render_grading(app)
    if command == "paper":
        app.grading.paper_text = read_multiline(read)
        return render_grading(app)
    if command == "grade":
        if not app.grading.submit():
            return "Select a student and enter the paper text first."
        return render_grading(app)

    if command == "cancel":
        app.students.cancel()
        return render_students(app)
    if command == "add":
        # Drop a form left open by a failed add or edit
        app.students.cancel()
        app.students.open_add_form()
        fill_form(app, read)
        app.students.submit()
        return render_students(app)
    if command in ("edit", "delete"):
        student = app.roster.find(int(arg)) if arg.isdigit() else None
        if student is None:
            return f"No student with id {arg!r}."
        if command == "edit":
            app.students.start_edit(student)
            fill_form(app, read)
            app.students.submit()
        else:
            app.students.delete(student["id"])
        return render_students(app)

    return f"Unknown command: {command}. Type 'help'."


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="AI Teacher Helper console client")
    parser.add_argument("--api-url", default=settings.CLIENT_API_BASE_URL, help="API base URL")
    args = parser.parse_args(argv)

    with ApiClient(args.api_url) as api:
        app = ClientApp(api=api, confirm=confirm_prompt, alert=alert_print)
        app.start()
        print("🎓 AI Teacher Helper - your AI-powered teaching assistant")
        print(render_home(app))

        while True:
            try:
                line = input(f"[{PROMPTS[app.active_tab]}] > ")
            except (EOFError, KeyboardInterrupt):
                print()
                break
            output = handle_command(app, line)
            if output is None:
                break
            print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
