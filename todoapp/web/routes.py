"""Task routes: list page plus the three form posts that change it."""

from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from todoapp.domain.models import StorageError
from todoapp.services.task_service import TaskService

TEMPLATE_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

router = APIRouter(tags=["tasks"])


def get_task_service(request: Request) -> TaskService:
    return request.app.state.task_service


def _back_to_index() -> RedirectResponse:
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


def _server_error(message: str, exc: Exception) -> PlainTextResponse:
    return PlainTextResponse(
        f"{message}: {exc}",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, service: TaskService = Depends(get_task_service)):
    listing = await service.list_tasks()
    return templates.TemplateResponse(
        request,
        "index.html",
        {"tasks": listing.tasks, "error": listing.error},
    )


@router.post("/add")
async def add_task(text: str = Form(""), service: TaskService = Depends(get_task_service)):
    try:
        await service.add(text)
    except StorageError as e:
        return _server_error("Error adding task", e)
    return _back_to_index()


# Ids stay strings here: a malformed id is a no-op, not a 422
@router.post("/done/{task_id}")
async def mark_done(task_id: str, service: TaskService = Depends(get_task_service)):
    try:
        await service.mark_done(task_id)
    except StorageError as e:
        return _server_error("Error marking task as done", e)
    return _back_to_index()


@router.post("/delete/{task_id}")
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    try:
        await service.delete(task_id)
    except StorageError as e:
        return _server_error("Error deleting task", e)
    return _back_to_index()
