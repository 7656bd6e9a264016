# /app/main.py

# --- Core FastAPI Imports ---
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from dotenv import load_dotenv

# --- Application-specific Router Imports ---
from .routers import notes_router, history_router

# --- Service Imports for Startup Logic ---
from .logging_config import setup_logging
from .services import database_service
from .services.history_service import HistoryStore
from .services.session_service import SessionController

load_dotenv()


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    logger = setup_logging()
    history = HistoryStore(database_service.get_storage_backend())
    history.load()
    logger.info("Loaded %d history entries.", len(history))
    app.state.session_controller = SessionController(history)
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="IntelliNote Backend API",
    description="Turns text, images, audio, PDFs and slides into notes, quiz questions and flashcards.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(notes_router.router, prefix="/api/notes", tags=["Notes"])
app.include_router(history_router.router, prefix="/api/history", tags=["History"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "IntelliNote Backend is running!", "version": app.version}
