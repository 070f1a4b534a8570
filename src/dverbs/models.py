from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

VERB_FIELDS = ("infinitive", "present", "past", "past_participle", "english")


# --- Models ---
class Verb(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    infinitive: str
    present: str
    past: str
    past_participle: str
    english: str


class PracticeMode(str, Enum):
    TRANSLATION = "translation"
    CONJUGATION = "conjugation"


class ConjugationForm(str, Enum):
    PRESENT = "present"
    PAST = "past"
    PAST_PARTICIPLE = "past_participle"

    @property
    def label(self) -> str:
        return _FORM_LABELS[self]


_FORM_LABELS = {
    ConjugationForm.PRESENT: "present tense",
    ConjugationForm.PAST: "past tense",
    ConjugationForm.PAST_PARTICIPLE: "past participle",
}


class QuizState(str, Enum):
    AWAITING_ANSWER = "awaiting_answer"
    ANSWERED = "answered"


class Question(BaseModel):
    mode: PracticeMode
    form: Optional[ConjugationForm] = None
    infinitive: str
    prompt: str
    expected_answer: str


class GradeResult(BaseModel):
    user_answer: str
    correct_answer: str
    is_correct: bool

    @property
    def message(self) -> str:
        if self.is_correct:
            return "Correct! 🎉"
        return f"Incorrect. The correct answer is: {self.correct_answer}"


class QuizSnapshot(BaseModel):
    question: Question
    verb: Verb
    current_index: int
    total_verbs: int
    user_answer: str
    state: QuizState
    last_result: Optional[GradeResult] = None
    message: Optional[str] = None
