import threading

import pytest

QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import QEventLoop, Qt, QTimer
from PySide6.QtTest import QTest

from quiz_form.core.errors import ScoringError
from quiz_form.core.events import SubmitEvent
from quiz_form.core.models import SubmissionState
from quiz_form.ui.async_bridge import QtAsyncDispatcher
from quiz_form.ui.components.answer_row import AnswerRow, MultipleAnswerRow, SingleAnswerRow
from quiz_form.ui.question_form import QuestionForm

from conftest import RecordingScoringService


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


def _shown(widget):
    return not widget.isHidden()


def test_single_question_rows_are_radio_buttons(qapp, single_question, local_scoring, immediate_dispatcher):
    form = QuestionForm(local_scoring, immediate_dispatcher)
    form.load_question(single_question)
    assert len(form.answer_rows) == 4
    assert all(isinstance(row, SingleAnswerRow) for row in form.answer_rows)
    assert all(isinstance(row.input, QtWidgets.QRadioButton) for row in form.answer_rows)


def test_multiple_question_rows_are_checkboxes(qapp, multiple_question, local_scoring, immediate_dispatcher):
    form = QuestionForm(local_scoring, immediate_dispatcher)
    form.load_question(multiple_question)
    assert all(isinstance(row, MultipleAnswerRow) for row in form.answer_rows)
    assert all(isinstance(row.input, QtWidgets.QCheckBox) for row in form.answer_rows)


def test_single_submit_shows_only_picked_explanation(qapp, single_question, local_scoring, immediate_dispatcher):
    form = QuestionForm(local_scoring, immediate_dispatcher)
    form.load_question(single_question)
    form.answer_rows[2].input.click()
    form.submit_button.click()

    assert form.controller.explanation_idx == 2
    shown = [_shown(row.explanation_label) for row in form.answer_rows]
    assert shown == [False, False, True, False]
    assert _shown(form.feedback_label)
    assert "Correct" in form.feedback_label.text()
    assert _shown(form.question_explanation_label)


def test_multiple_submit_shows_flagged_explanations(qapp, multiple_question, local_scoring, immediate_dispatcher):
    form = QuestionForm(local_scoring, immediate_dispatcher)
    form.load_question(multiple_question)
    form.answer_rows[0].input.click()
    form.answer_rows[1].input.click()
    form.handle_submit(SubmitEvent())

    shown = [_shown(row.explanation_label) for row in form.answer_rows]
    assert shown == [False, True, True, False]
    assert "Incorrect" in form.feedback_label.text()


def test_empty_submit_does_nothing(qapp, single_question, recording_scoring, immediate_dispatcher):
    form = QuestionForm(recording_scoring, immediate_dispatcher)
    form.load_question(single_question)
    form.submit_button.click()
    assert recording_scoring.calls == []
    assert not _shown(form.feedback_label)
    assert not _shown(form.error_label)


def test_failure_shows_error_and_retry(qapp, single_question, immediate_dispatcher):
    scoring = RecordingScoringService(error=ScoringError("offline"))
    form = QuestionForm(scoring, immediate_dispatcher)
    form.load_question(single_question)
    form.answer_rows[1].input.click()
    form.submit_button.click()

    assert form.controller.state is SubmissionState.FAILED
    assert _shown(form.error_label)
    assert "offline" in form.error_label.text()
    assert _shown(form.retry_button)

    scoring.error = None
    form.retry_button.click()
    assert form.controller.state is SubmissionState.SUBMITTED
    assert not _shown(form.retry_button)


def test_reloading_same_question_keeps_state(qapp, single_question, local_scoring, immediate_dispatcher):
    form = QuestionForm(local_scoring, immediate_dispatcher)
    form.load_question(single_question)
    form.answer_rows[2].input.click()
    form.submit_button.click()
    controller = form.controller

    form.load_question(single_question)
    assert form.controller is controller
    assert controller.submitted


def test_loading_new_question_drops_pending_response(
    qapp, single_question, multiple_question, local_scoring, manual_dispatcher
):
    form = QuestionForm(local_scoring, manual_dispatcher)
    form.load_question(single_question)
    old_controller = form.controller
    form.answer_rows[2].input.click()
    form.submit_button.click()
    assert _shown(form.status_label)

    form.load_question(multiple_question)
    manual_dispatcher.complete()

    assert old_controller.is_disposed
    assert not old_controller.submitted
    assert not form.controller.submitted
    assert not _shown(form.feedback_label)


def test_return_key_submits_form(qapp, single_question, local_scoring, immediate_dispatcher):
    form = QuestionForm(local_scoring, immediate_dispatcher)
    form.load_question(single_question)
    form.answer_rows[2].input.click()
    QTest.keyClick(form, Qt.Key_Return)

    assert form.controller.submitted
    assert form.controller.explanation_idx == 2
    assert _shown(form.feedback_label)


def test_base_answer_row_needs_input_hook(qapp, single_question, local_scoring, immediate_dispatcher):
    form = QuestionForm(local_scoring, immediate_dispatcher)
    form.load_question(single_question)
    with pytest.raises(NotImplementedError):
        AnswerRow(form.controller, 0)


def test_qt_dispatcher_delivers_on_main_thread(qapp):
    async def score():
        return 42

    received = []
    loop = QEventLoop()

    def on_result(value):
        received.append((value, threading.current_thread() is threading.main_thread()))
        loop.quit()

    def on_error(error):
        received.append((error, False))
        loop.quit()

    dispatcher = QtAsyncDispatcher()
    dispatcher.dispatch(score, on_result, on_error)
    QTimer.singleShot(5000, loop.quit)
    loop.exec()

    assert received == [(42, True)]
    dispatcher.shutdown()
    assert not dispatcher._thread.is_alive()


def test_qt_dispatcher_reports_errors(qapp):
    async def fail():
        raise ScoringError("offline")

    errors = []
    loop = QEventLoop()

    def on_error(error):
        errors.append(error)
        loop.quit()

    dispatcher = QtAsyncDispatcher()
    dispatcher.dispatch(fail, lambda value: loop.quit(), on_error)
    QTimer.singleShot(5000, loop.quit)
    loop.exec()
    dispatcher.shutdown()

    assert len(errors) == 1
    assert isinstance(errors[0], ScoringError)
