# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de configuración leídos del entorno o de un .env.
# --------------------------------------------------------------
import os
from dotenv import load_dotenv
load_dotenv()

# Longitudes fijas en bytes: nonce de 96 bits, tag de 128 bits, clave AES-128.
NONCE_LENGTH = 12
TAG_LENGTH = 16
KEY_LENGTH = 16

KEY_ENCODINGS = ("raw", "base64")

KEY_ENCODING = os.getenv("GCM_KEY_ENCODING", "raw").strip().lower()
LOG_LEVEL = os.getenv("GCM_LOG_LEVEL", "").strip().upper()
LOG_DIR = os.getenv("GCM_LOG_DIR", "")
