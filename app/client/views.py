"""
View state for the three client tabs.

The views hold no rendering code; `app.client.cli` draws them. Every view
talks to the server through `ApiClient` and reports failures as the
server's message.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from app.client.api import ApiClient, ApiError

logger = logging.getLogger(__name__)

TABS = ("home", "grading", "students")

DELETE_CONFIRMATION = "Are you sure you want to delete this student?"


@dataclass
class ChatEntry:
    role: str  # user | assistant | error
    content: str


@dataclass
class RequestGate:
    """In-flight flag shared by the chat and grading views."""
    busy: bool = False


class Roster:
    """Shared student list, always refetched from the server."""

    def __init__(self, api: ApiClient):
        self.api = api
        self.students: List[Dict[str, Any]] = []

    def refresh(self) -> None:
        try:
            self.students = self.api.list_students()
        except ApiError as e:
            logger.error(f"Error loading students: {e.message}")

    def find(self, student_id: int) -> Optional[Dict[str, Any]]:
        for student in self.students:
            if student["id"] == student_id:
                return student
        return None


# ==================== HOME VIEW ====================

class HomeView:
    def __init__(self, api: ApiClient, gate: RequestGate):
        self.api = api
        self.gate = gate
        self.transcript: List[ChatEntry] = []

    def can_submit(self, message: str) -> bool:
        return bool(message and message.strip()) and not self.gate.busy

    def submit(self, message: str) -> bool:
        if not self.can_submit(message):
            return False

        self.transcript.append(ChatEntry("user", message))
        self.gate.busy = True
        try:
            reply = self.api.chat(message)
            self.transcript.append(ChatEntry("assistant", reply))
        except ApiError as e:
            self.transcript.append(ChatEntry("error", f"Error: {e.message}"))
        finally:
            self.gate.busy = False
        return True


# ==================== GRADING VIEW ====================

@dataclass
class GradingResult:
    student_name: str = ""
    grade: str = ""
    response: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GradingView:
    def __init__(self, api: ApiClient, roster: Roster, gate: RequestGate):
        self.api = api
        self.roster = roster
        self.gate = gate
        self.selected_student_id: Optional[int] = None
        self.paper_text = ""
        self.result: Optional[GradingResult] = None

    def can_submit(self) -> bool:
        return (
            self.selected_student_id is not None
            and bool(self.paper_text.strip())
            and not self.gate.busy
        )

    def submit(self) -> bool:
        if not self.can_submit():
            return False

        self.gate.busy = True
        self.result = None
        try:
            data = self.api.grade_paper(self.selected_student_id, self.paper_text)
            self.result = GradingResult(
                student_name=data["studentName"],
                grade=data["grade"],
                response=data["response"],
            )
            self.roster.refresh()
            self.paper_text = ""
        except ApiError as e:
            self.result = GradingResult(error=e.message)
        finally:
            self.gate.busy = False
        return True


# ==================== ROSTER VIEW ====================

def empty_form() -> Dict[str, Any]:
    return {"name": "", "age": "", "class": "", "overallGrade": "N/A"}


class RosterView:
    """
    Add/edit form plus delete. `confirm` is asked before a delete and
    `alert` receives error messages.
    """

    def __init__(
        self,
        api: ApiClient,
        roster: Roster,
        confirm: Callable[[str], bool],
        alert: Callable[[str], None],
    ):
        self.api = api
        self.roster = roster
        self.confirm = confirm
        self.alert = alert
        self.show_form = False
        self.editing: Optional[Dict[str, Any]] = None
        self.form: Dict[str, Any] = empty_form()

    def open_add_form(self) -> None:
        if self.show_form:
            return
        self.editing = None
        self.form = empty_form()
        self.show_form = True

    def start_edit(self, student: Dict[str, Any]) -> None:
        self.editing = student
        self.form = {
            "name": student["name"],
            "age": student["age"],
            "class": student["class"],
            "overallGrade": student["overallGrade"],
        }
        self.show_form = True

    def cancel(self) -> None:
        self.show_form = False
        self.editing = None
        self.form = empty_form()

    def submit(self) -> bool:
        try:
            if self.editing:
                self.api.update_student(self.editing["id"], self.form)
            else:
                self.api.create_student(self.form)
        except ApiError as e:
            self.alert(f"Error: {e.message}")
            return False

        self.cancel()
        self.roster.refresh()
        return True

    def delete(self, student_id: int) -> bool:
        if not self.confirm(DELETE_CONFIRMATION):
            return False
        try:
            self.api.delete_student(student_id)
        except ApiError as e:
            self.alert(f"Error: {e.message}")
            return False

        self.roster.refresh()
        return True


# ==================== APP ====================

@dataclass
class ClientApp:
    api: ApiClient
    confirm: Callable[[str], bool]
    alert: Callable[[str], None]
    active_tab: str = "home"
    gate: RequestGate = field(default_factory=RequestGate)

    def __post_init__(self):
        self.roster = Roster(self.api)
        self.home = HomeView(self.api, self.gate)
        self.grading = GradingView(self.api, self.roster, self.gate)
        self.students = RosterView(self.api, self.roster, self.confirm, self.alert)

    def start(self) -> None:
        # Load students on startup
        self.roster.refresh()

    def switch_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab!r}")
        self.active_tab = tab
