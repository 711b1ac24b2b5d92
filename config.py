"""
Configuration settings for the CV assistant (API + dashboard).
"""
import os
from dotenv import load_dotenv

load_dotenv()

# API Configuration
PROJECT_NAME = "Recruitly AI CV Assistant"
API_VERSION = "1.0.0"

# LLM Configuration
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
LLM_API_URL = os.getenv("LLM_API_URL", "https://api.openai.com/v1/chat/completions")
MODEL_NAME = os.getenv("MODEL_NAME", "gpt-4o-mini")
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "60"))

# Dashboard backend
API_URL = os.getenv("API_URL", "http://localhost:8000")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Report texts shared by the server and its consumers
FALLBACK_RESPONSE = "No response."
EXTRACTION_FAILED_MESSAGE = "⚠️ Could not extract text from this PDF."
