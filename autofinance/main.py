"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

from autofinance.adapters.inbound.http.routes import router

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title="AutoFinance Analyzer",
    description="Compare LOA, LLD and loan financing for a vehicle",
    version="0.1.0",
)

app.include_router(router)
