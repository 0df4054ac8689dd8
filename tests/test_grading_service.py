"""GradingService outside HTTP: blocking store calls run off the event loop."""
import asyncio
import threading
from types import SimpleNamespace

from app.services.ai.gateway import AIGateway
from app.services.grading.grading_service import GradingService


class ThreadRecordingStore:
    def __init__(self):
        self.threads = {}
        self.saved = None

    def get(self, student_id):
        self.threads["get"] = threading.get_ident()
        return SimpleNamespace(id=student_id, name="Ada")

    def set_grade(self, student_id, grade):
        self.threads["set_grade"] = threading.get_ident()
        self.saved = (student_id, grade)


def test_store_calls_leave_the_event_loop_thread(fake_llm):
    fake_llm.responses.append("GRADE: B-\n\nFEEDBACK: ok")
    store = ThreadRecordingStore()
    service = GradingService(store, AIGateway(fake_llm))
    loop_thread = threading.get_ident()

    result = asyncio.run(service.grade_paper(7, "essay"))

    assert result.grade == "B-"
    assert result.student_name == "Ada"
    assert store.saved == (7, "B-")
    assert store.threads["get"] != loop_thread
    assert store.threads["set_grade"] != loop_thread
