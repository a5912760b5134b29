from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from meeting_memory.api.routes.analysis import router as analysis_router

app = FastAPI(
    title="Meeting Memory API",
    description="Rule-based meeting transcript analysis",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
    ],
    allow_origin_regex=r"http://localhost:\d+",
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analysis_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
