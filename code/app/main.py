from fastapi import FastAPI

from app.core.config import load_settings
from app.core.log_config import configure_logging, get_logger
from app.core.models import (
    ProjectionRequest,
    ProjectionResponse,
    ScenarioRequest,
    ScenarioResponse,
    TimelineRequest,
    TimelineResponse,
)
from app.core.pipeline import run_projection_request, run_scenario_request, run_timeline_request

settings = load_settings()
configure_logging(settings.log_level, settings.log_json)
logger = get_logger(__name__)

app = FastAPI(title="FIRE Planner API")
logger.info("app.started", period=settings.expense_period, growth_rate=settings.savings_growth_rate)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/project", response_model=ProjectionResponse)
def project(payload: ProjectionRequest):
    return run_projection_request(payload, settings)


@app.post("/scenarios", response_model=ScenarioResponse)
def scenarios(payload: ScenarioRequest):
    return run_scenario_request(payload, settings)


@app.post("/timeline", response_model=TimelineResponse)
def timeline(payload: TimelineRequest):
    return run_timeline_request(payload, settings)
