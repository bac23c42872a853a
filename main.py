import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers.admin import router as admin_router
from routers.health import router as health_router

# Routers
from routers.methods import router as methods_router
from routers.problems import router as problems_router
from routers.progress import router as progress_router
from routers.submissions import router as submissions_router
from routers.worksheets import router as worksheets_router

logger = logging.getLogger("mathcat")
logging.basicConfig(level=logging.INFO)

_DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"
CORS_ORIGINS = [
    o.strip() for o in os.getenv("MATHCAT_CORS_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()
]

app = FastAPI(title="MathCat – Multiplication Practice API")

# Allow calls from the Next.js dev server and the configured sites
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-api-key", "x-admin-token"],
)
logger.info("CORS origins: %s", ", ".join(CORS_ORIGINS))


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(problems_router)  # /problems/...
app.include_router(methods_router)  # /methods/{method}/expected, /methods/{method}/validate
app.include_router(worksheets_router)  # /worksheets/...
app.include_router(progress_router)  # /progress/...
app.include_router(submissions_router)  # /submissions/...
app.include_router(admin_router)  # /admin/...
app.include_router(health_router)  # /health/...
