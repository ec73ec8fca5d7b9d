import logging
from typing import Optional

from .models import AnswerResult, QuizQuestion, QuizStats, WordEntry
from .quiz import QuizEngine
from .store import WordStore

logger = logging.getLogger(__name__)

NOT_ENOUGH_WORDS = "Add at least 2 words to start practicing."
NO_DISTRACTORS = "Add words with different translations to keep practicing."


class VocabTrainer:
    """Command interface over one word store and one quiz engine.

    Any change to which entries exist resets the quiz, so used ids and
    scores always refer to the current word set.
    """

    def __init__(self, store: WordStore, engine: Optional[QuizEngine] = None):
        self.store = store
        self.engine = engine or QuizEngine()
        self.draft: Optional[WordEntry] = None
        self.message: Optional[str] = None
        self.last_answer: Optional[AnswerResult] = None

    def load(self):
        self.store.load()
        self.draft = None
        self.reset_quiz()

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        return self.engine.state.current_question

    # --- words ---
    def add_word(self, word: str, translation: str, example: Optional[str] = None) -> Optional[WordEntry]:
        entry = self.store.add(word, translation, example)
        if entry is not None:
            self.draft = None
            self.reset_quiz()
        return entry

    def delete_word(self, entry_id: str) -> bool:
        removed = self.store.remove(entry_id)
        if removed:
            self.reset_quiz()
        return removed

    def edit_word(self, entry_id: str) -> Optional[WordEntry]:
        entry = self.store.take_for_edit(entry_id)
        if entry is not None:
            self.draft = entry
            self.reset_quiz()
        return entry

    def clear_all(self, confirm: bool) -> bool:
        if not confirm:
            logger.info("Clear all requested without confirmation, ignoring")
            return False
        self.store.clear()
        self.draft = None
        self.reset_quiz()
        return True

    def import_csv(self, source) -> int:
        added = self.store.import_csv(source)
        if added:
            self.reset_quiz()
        return added

    # --- quiz ---
    def start_quiz(self) -> Optional[QuizQuestion]:
        return self.next_question()

    def next_question(self) -> Optional[QuizQuestion]:
        self.last_answer = None
        question = self.engine.next_question(self.store)
        if question is None:
            self.message = (
                NOT_ENOUGH_WORDS
                if self.store.count() < self.engine.min_words
                else NO_DISTRACTORS
            )
        else:
            self.message = None
        return question

    def answer(self, choice: str) -> Optional[AnswerResult]:
        """Scores ``choice`` against the open question; only the first answer per round counts."""
        question = self.current_question
        if question is None or self.last_answer is not None:
            return None
        self.last_answer = self.engine.submit_answer(choice, question)
        logger.info(
            f"Answered '{question.prompt}': {'correct' if self.last_answer.is_correct else 'wrong'}"
        )
        return self.last_answer

    def reset_quiz(self):
        self.engine.reset()
        self.last_answer = None
        self.message = None

    def stats(self) -> QuizStats:
        state = self.engine.state
        return QuizStats(
            words=self.store.count(),
            correct=state.correct_count,
            attempts=state.attempt_count,
            score_percent=self.engine.score_percent(),
        )
