import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notebook_content.api.schemas import ErrorResponse, GenerateNotebookResponse
from notebook_content.service.generator import NotebookContentService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="notebook-content", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)
service = NotebookContentService()


@app.get("/healthz")
async def healthz() -> dict:
    return {"status": "ok"}


@app.post(
    "/generate-notebook-content",
    response_model=GenerateNotebookResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_notebook_content(request: Request) -> JSONResponse:
    result = await service.generate(await request.body())
    return JSONResponse(status_code=result.status_code, content=result.body)
