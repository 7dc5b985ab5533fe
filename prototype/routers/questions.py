"""Question routes — shared by every version app.

Each handler answers a form POST by sending the browser on to the next
question. Targets are written path-absolute (``/question-2``); the
redirect rewriter turns them into ``/<version>/question-2``.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from prototype.middleware.redirects import Redirector, get_redirector

router = APIRouter(tags=["Questions"])


@router.post("/question-1", response_class=RedirectResponse)
async def answer_question_1(redirect: Redirector = Depends(get_redirector)):
    return redirect("/question-2")


@router.post("/question-2", response_class=RedirectResponse)
async def answer_question_2(redirect: Redirector = Depends(get_redirector)):
    return redirect("/question-1")
