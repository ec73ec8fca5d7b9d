import logging
import random
from abc import ABC, abstractmethod
from typing import List, Optional

from .config import settings
from .models import AnswerResult, QuizQuestion, QuizState, WordEntry

logger = logging.getLogger(__name__)


# --- Strategy Pattern: Quiz Generators ---
class QuizGenerator(ABC):
    """Abstract Base Class for question selection strategies.

    Subclasses decide which entry is asked next; building the answer
    choices is shared.
    """

    def __init__(self, rng=None, choices_per_question: int = settings.CHOICES_PER_QUESTION):
        # Anything with choice() and shuffle(): the random module or a random.Random.
        self.rng = rng or random
        self.choices_per_question = choices_per_question

    @abstractmethod
    def pick(self, words: List[WordEntry], state: QuizState) -> WordEntry:
        pass

    def generate(self, words: List[WordEntry], state: QuizState) -> Optional[QuizQuestion]:
        chosen = self.pick(words, state)
        choices = self._generate_options(chosen, words)
        if len(choices) < 2:
            logger.info(f"No distractor available for '{chosen.word}'")
            return None
        state.used_ids.add(chosen.id)
        return QuizQuestion(
            prompt=chosen.word, correct_answer=chosen.translation, choices=choices
        )

    def _generate_options(self, chosen: WordEntry, words: List[WordEntry]) -> List[str]:
        """Correct translation plus up to N-1 translations of other entries, shuffled."""
        wrong_pool = [
            w for w in words if w.id != chosen.id and w.translation != chosen.translation
        ]
        self.rng.shuffle(wrong_pool)
        wrong = [w.translation for w in wrong_pool[: self.choices_per_question - 1]]

        options = [chosen.translation] + wrong
        self.rng.shuffle(options)
        return options


class CyclingQuizGenerator(QuizGenerator):
    """Asks every entry once, in random order, before any entry repeats."""

    def pick(self, words: List[WordEntry], state: QuizState) -> WordEntry:
        if len(state.used_ids) >= len(words):
            state.used_ids.clear()
        remaining = [w for w in words if w.id not in state.used_ids]
        if not remaining:
            # only when the store repeats an id, so used_ids never reaches len(words)
            state.used_ids.clear()
            remaining = list(words)
        return self.rng.choice(remaining)


class QuizFactory:
    """Factory to select the appropriate generator."""

    @staticmethod
    def create(mode: str, rng=None) -> QuizGenerator:
        if mode != "cycle":
            logger.warning(f"Unknown quiz mode '{mode}', using 'cycle'")
        return CyclingQuizGenerator(rng=rng)


# --- Quiz Engine ---
class QuizEngine:
    """Holds quiz progress across rounds and scores answers."""

    def __init__(self, generator: Optional[QuizGenerator] = None, min_words: int = settings.MIN_QUIZ_WORDS):
        self.generator = generator or QuizFactory.create(settings.QUIZ_MODE)
        self.min_words = min_words
        self.state = QuizState()

    def next_question(self, store) -> Optional[QuizQuestion]:
        """Draws the next question from ``store`` (anything with list_words/count).

        Returns None when the store holds fewer than ``min_words`` entries.
        """
        if store.count() < self.min_words:
            return None
        question = self.generator.generate(store.list_words(), self.state)
        self.state.current_question = question
        return question

    def submit_answer(self, choice: str, question: QuizQuestion) -> AnswerResult:
        self.state.attempt_count += 1
        is_correct = choice == question.correct_answer
        if is_correct:
            self.state.correct_count += 1
        return AnswerResult(
            choice=choice, correct_answer=question.correct_answer, is_correct=is_correct
        )

    def reset(self):
        self.state = QuizState()

    def score_percent(self) -> Optional[int]:
        """Percentage of correct answers, rounded half up; None before any attempt."""
        attempts = self.state.attempt_count
        if attempts == 0:
            return None
        return (200 * self.state.correct_count + attempts) // (2 * attempts)
