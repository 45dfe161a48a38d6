"""FastAPI dependencies resolving objects wired onto ``app.state``."""

from fastapi import Request

from ..repositories.tasks import TaskRepository
from ..services.statistics import StatisticsController
from ..services.tally import DailyTally


def get_tally(request: Request) -> DailyTally:
    return request.app.state.tally


def get_statistics_controller(request: Request) -> StatisticsController:
    return request.app.state.tally.controller


def get_task_repository(request: Request) -> TaskRepository:
    return request.app.state.task_repository
