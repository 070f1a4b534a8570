from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from .engine import QuizEngine
from .globals import templates
from .models import GradeResult, QuizSnapshot

router = APIRouter()

NO_VERBS_ERROR = {"error": "No verbs available"}


# --- Dependencies ---
def get_quiz_engine(request: Request) -> QuizEngine:
    return request.app.state.quiz_engine


def _redirect_home(request: Request) -> RedirectResponse:
    return RedirectResponse(url=str(request.url_for("home")), status_code=303)


# --- Pages ---
@router.get("/", response_class=HTMLResponse, name="home")
async def home(request: Request, engine: QuizEngine = Depends(get_quiz_engine)):
    if engine.is_empty:
        return templates.TemplateResponse(
            request, "index.html", {"snapshot": None}, status_code=503
        )
    return templates.TemplateResponse(
        request, "index.html", {"snapshot": engine.snapshot()}
    )


@router.post("/check", response_class=RedirectResponse)
async def check_answer(
    request: Request,
    answer: str = Form(""),
    engine: QuizEngine = Depends(get_quiz_engine),
):
    if not engine.is_empty:
        engine.grade(answer)
    return _redirect_home(request)


@router.post("/next", response_class=RedirectResponse)
async def next_verb(request: Request, engine: QuizEngine = Depends(get_quiz_engine)):
    if not engine.is_empty:
        engine.advance()
    return _redirect_home(request)


# --- JSON API ---
@router.get("/api/question", response_model=QuizSnapshot)
async def get_question(engine: QuizEngine = Depends(get_quiz_engine)):
    if engine.is_empty:
        return JSONResponse(NO_VERBS_ERROR, status_code=503)
    return engine.snapshot()


@router.post("/api/check", response_model=GradeResult)
async def api_check_answer(
    answer: str = Form(""), engine: QuizEngine = Depends(get_quiz_engine)
):
    if engine.is_empty:
        return JSONResponse(NO_VERBS_ERROR, status_code=503)
    return engine.grade(answer)


@router.post("/api/next", response_model=QuizSnapshot)
async def api_next_verb(engine: QuizEngine = Depends(get_quiz_engine)):
    if engine.is_empty:
        return JSONResponse(NO_VERBS_ERROR, status_code=503)
    engine.advance()
    return engine.snapshot()
