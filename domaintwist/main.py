from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from domaintwist.api.twist_routes import router as twist_router

app = FastAPI(
    title="domaintwist",
    description="Look-alike domain generation for phishing and brand-abuse monitoring",
    version="0.7.0",
)

# Browser dashboards call the API from other origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

api_router = APIRouter()
api_router.include_router(twist_router, prefix="/twist", tags=["twist"])

# Everything is served below /api, e.g. POST /api/twist/fuzz
app.include_router(api_router, prefix="/api")
