import logging
import random
from typing import List, Optional, Sequence

from .errors import EmptyVerbList
from .models import (
    ConjugationForm,
    GradeResult,
    PracticeMode,
    Question,
    QuizSnapshot,
    QuizState,
    Verb,
)

logger = logging.getLogger(__name__)


def normalize_answer(text: str) -> str:
    return text.strip().casefold()


class QuizEngine:
    """
    Holds the state of a single quiz session: the shuffled verbs, which verb
    is current, what is being asked about it and the outcome of the last check.

    The presentation layer renders `snapshot()` and calls `grade()` on submit
    and `advance()` on "next".
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = random.Random(seed)

        self.verbs: List[Verb] = []
        self.current_index = 0
        self.practice_mode = PracticeMode.TRANSLATION
        self.conjugation_form = ConjugationForm.PRESENT
        self.user_answer = ""
        self.last_result: Optional[GradeResult] = None

    @property
    def is_empty(self) -> bool:
        return not self.verbs

    @property
    def state(self) -> QuizState:
        if self.last_result is None:
            return QuizState.AWAITING_ANSWER
        return QuizState.ANSWERED

    @property
    def current_verb(self) -> Verb:
        self._require_verbs()
        return self.verbs[self.current_index]

    def initialize(self, verbs: Sequence[Verb]) -> None:
        shuffled = list(verbs)
        self.rng.shuffle(shuffled)

        self.verbs = shuffled
        self.current_index = 0
        self.practice_mode = PracticeMode.TRANSLATION
        self.user_answer = ""
        self.last_result = None
        if self.seed is None:
            logger.info(f"Quiz initialized with {len(self.verbs)} verbs")
        else:
            logger.info(f"Quiz initialized with {len(self.verbs)} verbs (seed {self.seed})")

    def advance(self) -> None:
        self._require_verbs()
        self.current_index = (self.current_index + 1) % len(self.verbs)
        self.user_answer = ""
        self.last_result = None

        if self.rng.random() < 0.5:
            self.practice_mode = PracticeMode.TRANSLATION
        else:
            self.practice_mode = PracticeMode.CONJUGATION
            self.conjugation_form = self.rng.choice(list(ConjugationForm))

    def current_question(self) -> Question:
        verb = self.current_verb

        if self.practice_mode == PracticeMode.TRANSLATION:
            return Question(
                mode=self.practice_mode,
                infinitive=verb.infinitive,
                prompt=f"Translate to English: {verb.infinitive}",
                expected_answer=verb.english,
            )

        form = self.conjugation_form
        return Question(
            mode=self.practice_mode,
            form=form,
            infinitive=verb.infinitive,
            prompt=f"Conjugate '{verb.infinitive}' in {form.label}",
            expected_answer=getattr(verb, form.value),
        )

    def grade(self, submitted_answer: str) -> GradeResult:
        question = self.current_question()
        is_correct = normalize_answer(submitted_answer) == normalize_answer(
            question.expected_answer
        )

        self.user_answer = submitted_answer
        self.last_result = GradeResult(
            user_answer=submitted_answer,
            correct_answer=question.expected_answer,
            is_correct=is_correct,
        )
        logger.debug(
            f"Graded '{question.infinitive}' ({question.mode.value}): "
            f"{'correct' if is_correct else 'incorrect'}"
        )
        return self.last_result

    def snapshot(self) -> QuizSnapshot:
        question = self.current_question()
        return QuizSnapshot(
            question=question,
            verb=self.current_verb,
            current_index=self.current_index,
            total_verbs=len(self.verbs),
            user_answer=self.user_answer,
            state=self.state,
            last_result=self.last_result,
            message=self.last_result.message if self.last_result else None,
        )

    def _require_verbs(self) -> None:
        if not self.verbs:
            raise EmptyVerbList()
