from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from .models import Fact
from .service import FactService

GREETING = "Hello World"

# No dependencies; can be mounted on its own.
greeting_router = APIRouter()

# Needs ``app.state.fact_service``.
facts_router = APIRouter()


def get_fact_service(request: Request) -> FactService:
    return request.app.state.fact_service


@greeting_router.get("/health")
def health():
    return {"status": "ok"}


@greeting_router.get("/hello", response_class=PlainTextResponse)
def hello():
    return GREETING


@facts_router.get("/cat-fact", response_model=Fact)
def cat_fact(service: FactService = Depends(get_fact_service)):
    # upstream failures propagate; Starlette renders them as a plain 500
    return service.get_fact()
