# app/settings.py

import os
from dotenv import load_dotenv

# ✅ load .env
load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 9000))

# optional TLS, passed straight to uvicorn
SSL_CERTFILE = os.getenv("SSL_CERTFILE")
SSL_KEYFILE = os.getenv("SSL_KEYFILE")

# deck store
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
DECK_STORE = os.getenv("DECK_STORE", "redis").lower()  # redis | memory
DECK_KEY_PREFIX = os.getenv("DECK_KEY_PREFIX", "deck:")
DECK_TTL_SECONDS = int(os.getenv("DECK_TTL_SECONDS", "0"))  # 0 = never expire

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

API_PREFIX = "/v1"
LOG_DIR = os.getenv("LOG_DIR", "logs")
