import io
import logging
from typing import List

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response

from .globals import get_trainer, templates
from .models import AnswerResult, PublicQuestion, QuizStats, WordEntry
from .trainer import VocabTrainer

logger = logging.getLogger(__name__)

router = APIRouter()


def _is_confirmed(value: str) -> bool:
    return value.strip().lower() in ("1", "on", "true", "yes")


def _back_home(request: Request) -> RedirectResponse:
    return RedirectResponse(url=str(request.url_for("index")), status_code=303)


def _question_payload(trainer: VocabTrainer):
    question = trainer.current_question
    if question is None:
        return {"message": trainer.message}
    return PublicQuestion(prompt=question.prompt, choices=question.choices)


# --- Pages ---
@router.get("/", response_class=HTMLResponse, name="index")
def index(request: Request, trainer: VocabTrainer = Depends(get_trainer)):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "words": trainer.store.list_words(),
            "draft": trainer.draft,
            "question": trainer.current_question,
            "answer": trainer.last_answer,
            "message": trainer.message,
            "stats": trainer.stats(),
        },
    )


@router.post("/words", response_class=RedirectResponse)
def add_word_form(
    request: Request,
    word: str = Form(""),
    translation: str = Form(""),
    example: str = Form(""),
    trainer: VocabTrainer = Depends(get_trainer),
):
    trainer.add_word(word, translation, example)
    return _back_home(request)


@router.post("/words/clear", response_class=RedirectResponse)
def clear_words_form(
    request: Request,
    confirm: str = Form(""),
    trainer: VocabTrainer = Depends(get_trainer),
):
    trainer.clear_all(_is_confirmed(confirm))
    return _back_home(request)


@router.post("/words/{entry_id}/edit", response_class=RedirectResponse)
def edit_word_form(
    request: Request, entry_id: str, trainer: VocabTrainer = Depends(get_trainer)
):
    trainer.edit_word(entry_id)
    return _back_home(request)


@router.post("/words/{entry_id}/delete", response_class=RedirectResponse)
def delete_word_form(
    request: Request, entry_id: str, trainer: VocabTrainer = Depends(get_trainer)
):
    trainer.delete_word(entry_id)
    return _back_home(request)


@router.post("/quiz/start", response_class=RedirectResponse)
def start_quiz_form(request: Request, trainer: VocabTrainer = Depends(get_trainer)):
    trainer.start_quiz()
    return _back_home(request)


@router.post("/quiz/next", response_class=RedirectResponse)
def next_question_form(request: Request, trainer: VocabTrainer = Depends(get_trainer)):
    trainer.next_question()
    return _back_home(request)


@router.post("/quiz/answer", response_class=RedirectResponse)
def answer_form(
    request: Request,
    choice: str = Form(...),
    trainer: VocabTrainer = Depends(get_trainer),
):
    trainer.answer(choice)
    return _back_home(request)


@router.post("/quiz/reset", response_class=RedirectResponse)
def reset_quiz_form(request: Request, trainer: VocabTrainer = Depends(get_trainer)):
    trainer.reset_quiz()
    return _back_home(request)


# --- API: words ---
@router.get("/api/words", response_model=List[WordEntry])
def list_words(trainer: VocabTrainer = Depends(get_trainer)):
    return trainer.store.list_words()


@router.post("/api/words", response_model=WordEntry)
def add_word(
    word: str = Form(""),
    translation: str = Form(""),
    example: str = Form(""),
    trainer: VocabTrainer = Depends(get_trainer),
):
    entry = trainer.add_word(word, translation, example)
    if entry is None:
        return JSONResponse({"error": "Word and translation are required"}, status_code=400)
    return entry


@router.post("/api/words/clear")
def clear_words(confirm: str = Form(""), trainer: VocabTrainer = Depends(get_trainer)):
    if not trainer.clear_all(_is_confirmed(confirm)):
        return JSONResponse({"error": "Confirmation required"}, status_code=400)
    return {"status": "success"}


@router.post("/api/words/import")
def import_words(
    file: UploadFile = File(...), trainer: VocabTrainer = Depends(get_trainer)
):
    content = file.file.read()
    try:
        added = trainer.import_csv(io.BytesIO(content))
    except ValueError as e:
        logger.error(f"Failed to import {file.filename}: {e}")
        return JSONResponse({"error": f"Invalid CSV: {e}"}, status_code=400)
    return {"added": added, "total": trainer.store.count()}


@router.get("/api/words/export")
def export_words(trainer: VocabTrainer = Depends(get_trainer)):
    return Response(
        content=trainer.store.export_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="words.csv"'},
    )


@router.post("/api/words/{entry_id}/edit", response_model=WordEntry)
def edit_word(entry_id: str, trainer: VocabTrainer = Depends(get_trainer)):
    entry = trainer.edit_word(entry_id)
    if entry is None:
        return JSONResponse({"error": "Word not found"}, status_code=404)
    return entry


@router.delete("/api/words/{entry_id}")
def delete_word(entry_id: str, trainer: VocabTrainer = Depends(get_trainer)):
    if not trainer.delete_word(entry_id):
        return JSONResponse({"error": "Word not found"}, status_code=404)
    return {"status": "success"}


# --- API: quiz ---
@router.post("/api/quiz/start")
def start_quiz(trainer: VocabTrainer = Depends(get_trainer)):
    trainer.start_quiz()
    return _question_payload(trainer)


@router.post("/api/quiz/next")
def next_question(trainer: VocabTrainer = Depends(get_trainer)):
    trainer.next_question()
    return _question_payload(trainer)


@router.post("/api/quiz/answer", response_model=AnswerResult)
def submit_answer(choice: str = Form(...), trainer: VocabTrainer = Depends(get_trainer)):
    if trainer.current_question is None:
        return JSONResponse({"error": "No active question"}, status_code=400)
    result = trainer.answer(choice)
    if result is None:
        return JSONResponse({"error": "Already answered"}, status_code=400)
    return result


@router.get("/api/stats", response_model=QuizStats)
def get_stats(trainer: VocabTrainer = Depends(get_trainer)):
    return trainer.stats()


@router.post("/api/reset")
def reset_quiz(trainer: VocabTrainer = Depends(get_trainer)):
    trainer.reset_quiz()
    return {"status": "success"}
