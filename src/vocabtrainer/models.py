from pydantic import BaseModel, Field
from typing import List, Optional, Set


class WordEntry(BaseModel):
    id: str
    word: str
    translation: str
    example: Optional[str] = None


class QuizQuestion(BaseModel):
    prompt: str
    correct_answer: str
    choices: List[str]


class PublicQuestion(BaseModel):
    """A question as sent to the client, without its answer."""

    prompt: str
    choices: List[str]


class QuizState(BaseModel):
    used_ids: Set[str] = Field(default_factory=set)
    correct_count: int = 0
    attempt_count: int = 0
    current_question: Optional[QuizQuestion] = None


class AnswerResult(BaseModel):
    choice: str
    correct_answer: str
    is_correct: bool


class QuizStats(BaseModel):
    words: int
    correct: int
    attempts: int
    score_percent: Optional[int] = None

    @property
    def summary(self) -> str:
        return f"Words: {self.words} • Correct: {self.correct} • Attempts: {self.attempts}"
