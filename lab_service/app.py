from fastapi import FastAPI, HTTPException
from fastapi.concurrency import asynccontextmanager

from lab_service.environment import environment
from lab_service.modules.result_generator.schema import GeneratedResultSet
from lab_service.modules.result_generator.service import get_default_generator
from lab_service.modules.test_catalog.schema import TestDefinition, TestSummary
from lab_service.modules.test_catalog.service import get_default_catalog


@asynccontextmanager
async def lifespan(app: FastAPI):
    get_default_generator()
    yield


app = FastAPI(title=environment.app_title, lifespan=lifespan)


@app.get("/")
async def root():
    return {"message": "Welcome to the Lab Report Service!"}


@app.get("/tests")
async def list_tests_handler() -> list[TestSummary]:
    return get_default_catalog().summaries()


@app.get("/tests/{test_id}")
async def get_test_handler(
    test_id: str,
) -> TestDefinition:
    definition = get_default_catalog().lookup(test_id)
    if definition is None:
        raise HTTPException(status_code=404, detail=f"Unknown test: {test_id}")
    return definition


@app.get("/tests/{test_id}/results")
async def generate_results_handler(
    test_id: str,
) -> GeneratedResultSet:
    result_set = get_default_generator().generate(test_id)
    if result_set is None:
        raise HTTPException(status_code=404, detail=f"Unknown test: {test_id}")
    return result_set
